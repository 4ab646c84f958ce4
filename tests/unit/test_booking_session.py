from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import pytest

from src.app.services.booking_session import BookingRequest, BookingSession
from src.app.services.location_service import LocationService
from src.app.services.tracking_session import DESTINATION_MARKER, PICKUP_MARKER
from src.domain.exceptions import BookingValidationError, LocationUnavailable
from src.domain.models import GeoPoint, TripStatus

if TYPE_CHECKING:
    from tests.unit.conftest import FakeGeocoder

ESPLANADE = GeoPoint(lat=22.5726, lng=88.3639)
SALT_LAKE = GeoPoint(lat=22.58, lng=88.41)
PHONE = "9876543210"


@pytest.mark.unit
def test_set_pickup_recenters_and_marks_map(session: BookingSession) -> None:
    generation = session.set_pickup(SALT_LAKE)

    assert generation == 1
    assert session.pickup == SALT_LAKE
    assert session.pickup_label == SALT_LAKE.format()
    assert session.booking_map.center == SALT_LAKE
    assert session.booking_map.markers[PICKUP_MARKER].position == SALT_LAKE
    assert session.set_pickup(ESPLANADE) == 2


@pytest.mark.unit
@pytest.mark.anyio
async def test_new_pickup_discards_old_quotes(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)
    await session.search(BookingRequest("BLS", "SSKM Hospital (IPGMER)", PHONE))
    assert session.quotes

    session.set_pickup(SALT_LAKE)

    assert session.quotes == ()


@pytest.mark.unit
def test_set_pickup_from_screen_center(session: BookingSession) -> None:
    session.set_pickup_from_screen(384, 256)

    assert session.pickup is not None
    assert session.pickup.lat == pytest.approx(ESPLANADE.lat, abs=1e-6)
    assert session.pickup.lng == pytest.approx(ESPLANADE.lng, abs=1e-6)


@pytest.mark.unit
@pytest.mark.anyio
async def test_label_pickup_uses_reverse_geocoder(
    session: BookingSession, geocoder: FakeGeocoder
) -> None:
    geocoder.labels[ESPLANADE] = "Esplanade, Kolkata"
    session.set_pickup(ESPLANADE)

    assert await session.label_pickup() == "Esplanade, Kolkata"
    assert session.pickup_label == "Esplanade, Kolkata"


@pytest.mark.unit
@pytest.mark.anyio
async def test_label_falls_back_to_coordinates(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)
    assert await session.label_pickup() == "22.572600, 88.363900"


@pytest.mark.unit
@pytest.mark.anyio
async def test_stale_label_is_dropped(
    session: BookingSession, geocoder: FakeGeocoder
) -> None:
    geocoder.labels[ESPLANADE] = "Esplanade, Kolkata"
    session.set_pickup(ESPLANADE)

    # The user moves the pickup while the first lookup is in flight.
    geocoder.on_reverse = lambda _point: session.set_pickup(SALT_LAKE)
    await session.label_pickup()

    assert session.pickup == SALT_LAKE
    assert session.pickup_label == SALT_LAKE.format()


@dataclass(slots=True)
class FakeLocationProvider:
    point: GeoPoint
    on_locate: Callable[[], None] | None = None
    name: str = "ipapi"

    async def locate(self) -> GeoPoint:
        if self.on_locate is not None:
            self.on_locate()
        return self.point


@pytest.mark.unit
@pytest.mark.anyio
async def test_locate_pickup_sets_approximate_point(
    session: BookingSession, geocoder: FakeGeocoder
) -> None:
    session.location = LocationService(
        geocoder=geocoder, providers=(FakeLocationProvider(point=SALT_LAKE),)
    )

    assert await session.locate_pickup() == SALT_LAKE
    assert session.pickup == SALT_LAKE


@pytest.mark.unit
@pytest.mark.anyio
async def test_late_approximate_location_keeps_map_pickup(
    session: BookingSession, geocoder: FakeGeocoder
) -> None:
    # The user taps the map while the IP lookup is still in flight.
    provider = FakeLocationProvider(
        point=SALT_LAKE, on_locate=lambda: session.set_pickup(ESPLANADE)
    )
    session.location = LocationService(geocoder=geocoder, providers=(provider,))

    assert await session.locate_pickup() == ESPLANADE

    assert session.pickup == ESPLANADE
    assert session.pickup_generation == 1
    assert session.booking_map.markers[PICKUP_MARKER].position == ESPLANADE


@pytest.mark.unit
@pytest.mark.anyio
async def test_search_is_rejected_when_pickup_moves_mid_search(
    session: BookingSession, geocoder: FakeGeocoder
) -> None:
    geocoder.places["Howrah Station"] = GeoPoint(lat=22.5839, lng=88.3424)
    session.set_pickup(ESPLANADE)
    geocoder.on_forward = lambda _query: session.set_pickup(SALT_LAKE)

    with pytest.raises(BookingValidationError) as exc:
        await session.search(BookingRequest("Any", "Howrah Station", PHONE))

    assert "changed" in str(exc.value)
    assert session.quotes == ()
    with pytest.raises(BookingValidationError):
        session.book(0)


@pytest.mark.unit
@pytest.mark.anyio
async def test_locate_pickup_without_providers_raises(session: BookingSession) -> None:
    with pytest.raises(LocationUnavailable):
        await session.locate_pickup()
    assert session.pickup is None


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize(
    ("request_", "message"),
    [
        (BookingRequest("BLS", "SSKM", PHONE), None),
        (BookingRequest("Helicopter", "SSKM", PHONE), "Unknown service type"),
        (BookingRequest("BLS", "  ", PHONE), "destination"),
        (BookingRequest("ALS", "SSKM", "12345"), "10-digit"),
        (BookingRequest("ALS", "SSKM", "98765432101"), "10-digit"),
        (BookingRequest("ALS", "SSKM", "98765abcde"), "10-digit"),
    ],
)
async def test_search_validation(
    session: BookingSession, request_: BookingRequest, message: str | None
) -> None:
    if message is not None:
        session.set_pickup(ESPLANADE)

    with pytest.raises(BookingValidationError) as exc:
        await session.search(request_)

    assert (message or "pickup") in str(exc.value)


@pytest.mark.unit
@pytest.mark.anyio
async def test_search_with_selected_destination(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)
    sskm = session.select_destination("SSKM Hospital (IPGMER)")

    quotes = await session.search(BookingRequest("BLS", "", PHONE))

    assert [q.vehicle.id for q in quotes] == ["AMB-101", "AMB-312"]
    assert all(q.destination == sskm.position for q in quotes)
    assert session.booking_map.markers[DESTINATION_MARKER].position == sskm.position


@pytest.mark.unit
def test_select_unknown_destination_raises(session: BookingSession) -> None:
    with pytest.raises(BookingValidationError):
        session.select_destination("Nowhere Clinic")


@pytest.mark.unit
@pytest.mark.anyio
async def test_mortuary_uses_pickup_as_destination(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)

    quotes = await session.search(BookingRequest("Mortuary", "", PHONE))

    assert [q.vehicle.id for q in quotes] == ["MORT-21"]
    assert quotes[0].destination == ESPLANADE


@pytest.mark.unit
@pytest.mark.anyio
async def test_destination_from_facility_named_in_text(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)
    sskm = session.catalog.get("SSKM Hospital (IPGMER)")

    quotes = await session.search(
        BookingRequest("ALS", "take me to sskm hospital (ipgmer) please", PHONE)
    )

    assert sskm is not None
    assert quotes[0].destination == sskm.position


@pytest.mark.unit
@pytest.mark.anyio
async def test_destination_from_forward_geocoding(
    session: BookingSession, geocoder: FakeGeocoder
) -> None:
    geocoder.places["Howrah Station"] = GeoPoint(lat=22.5839, lng=88.3424)
    session.set_pickup(ESPLANADE)

    quotes = await session.search(BookingRequest("Any", "Howrah Station", PHONE))

    assert quotes[0].destination == GeoPoint(lat=22.5839, lng=88.3424)


@pytest.mark.unit
@pytest.mark.anyio
async def test_destination_falls_back_near_map_center(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)

    quotes = await session.search(BookingRequest("Any", "somewhere unknown", PHONE))

    dest = quotes[0].destination
    assert abs(dest.lat - ESPLANADE.lat) <= 0.005
    assert abs(dest.lng - ESPLANADE.lng) <= 0.005


@pytest.mark.unit
@pytest.mark.anyio
async def test_clear_destination(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)
    session.select_destination("SSKM Hospital (IPGMER)")
    session.clear_destination()

    with pytest.raises(BookingValidationError):
        await session.search(BookingRequest("BLS", "", PHONE))


@pytest.mark.unit
@pytest.mark.anyio
async def test_book_hands_quote_to_tracking(session: BookingSession) -> None:
    session.set_pickup(ESPLANADE)
    await session.search(BookingRequest("BLS", "SSKM Hospital (IPGMER)", PHONE))

    progress = session.book(1)

    assert progress.status is TripStatus.RUNNING
    assert session.tracking.active
    assert session.tracking.quote == session.quotes[1]
    with pytest.raises(BookingValidationError):
        session.book(5)
