from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, field

from src.app.services.facility_catalog import FacilityCatalog
from src.app.services.fleet_quote_service import FleetQuoteService
from src.app.services.location_service import LocationService
from src.app.services.tile_map_renderer import TileMapRenderer
from src.app.services.tracking_session import (
    DESTINATION_MARKER,
    PICKUP_MARKER,
    TrackingSession,
)
from src.domain.exceptions import BookingValidationError
from src.domain.models import Facility, GeoPoint, Quote, ServiceClass, TripProgress

logger = logging.getLogger(__name__)

# Radius (degrees) of the random fallback destination around the map center.
FALLBACK_JITTER_DEG = 0.01

_PHONE_RE = re.compile(r"[0-9]{10}")


@dataclass(frozen=True, slots=True)
class BookingRequest:
    service_class: str
    destination_text: str = ""
    phone: str = ""


@dataclass(slots=True)
class BookingSession:
    """Coordinator for one user's booking flow.

    Holds the booking map, the chosen pickup and destination, the latest
    quotes, and the tracking session a booked quote is handed to.
    """

    catalog: FacilityCatalog
    quote_service: FleetQuoteService
    location: LocationService
    booking_map: TileMapRenderer
    tracking: TrackingSession
    rng: random.Random = field(default_factory=random.Random)

    pickup: GeoPoint | None = None
    pickup_label: str | None = None
    selected_destination: Facility | None = None
    quotes: tuple[Quote, ...] = ()

    _pickup_generation: int = field(default=0, init=False, repr=False)

    @property
    def pickup_generation(self) -> int:
        return self._pickup_generation

    def set_pickup(self, point: GeoPoint) -> int:
        """Place the pickup and return the generation tag for this placement."""

        self.pickup = point
        self.pickup_label = point.format()
        self.quotes = ()
        self.booking_map.set_center(point)
        self.booking_map.add_marker(PICKUP_MARKER, point, "Pickup")
        self._pickup_generation += 1
        return self._pickup_generation

    def set_pickup_from_screen(self, client_x: float, client_y: float) -> int:
        return self.set_pickup(self.booking_map.screen_to_geo(client_x, client_y))

    async def label_pickup(self) -> str | None:
        """Reverse-geocode the current pickup.

        The lookup can be slow; if the pickup moved while it was in flight the
        result belongs to an old placement and is dropped.
        """

        if self.pickup is None:
            return None

        generation = self._pickup_generation
        label = await self.location.describe(self.pickup)
        if generation != self._pickup_generation:
            logger.debug("Dropping stale pickup label for generation %s", generation)
            return self.pickup_label

        self.pickup_label = label
        return label

    async def locate_pickup(self) -> GeoPoint | None:
        """Place the pickup at the approximate device location.

        A pickup placed while the lookup was in flight wins; the lookup result
        is then discarded and the current pickup returned.
        """

        generation = self._pickup_generation
        point, provider = await self.location.approximate()
        if generation != self._pickup_generation:
            logger.debug("Dropping stale approximate location from %s", provider)
            return self.pickup

        logger.info("Approximate pickup from %s", provider)
        self.set_pickup(point)
        await self.label_pickup()
        return point

    def select_destination(self, name: str) -> Facility:
        facility = self.catalog.get(name)
        if facility is None:
            raise BookingValidationError(f"Unknown destination: {name}")

        self.selected_destination = facility
        self.booking_map.set_center(facility.position)
        self.booking_map.add_marker(DESTINATION_MARKER, facility.position, facility.name)
        return facility

    def clear_destination(self) -> None:
        self.selected_destination = None

    async def search(self, request: BookingRequest) -> tuple[Quote, ...]:
        service_class, pickup = self._validate(request)
        generation = self._pickup_generation
        destination = await self._resolve_destination(
            service_class, pickup, request.destination_text.strip()
        )
        if generation != self._pickup_generation:
            raise BookingValidationError(
                "Pickup location changed during the search. Please search again."
            )
        self.quotes = self.quote_service.quote(
            service_class=service_class, pickup=pickup, destination=destination
        )
        return self.quotes

    def book(self, index: int) -> TripProgress:
        if self.pickup is None:
            raise BookingValidationError("Please set pickup location first.")
        if not 0 <= index < len(self.quotes):
            raise BookingValidationError(f"No quote at position {index}")
        return self.tracking.start_trip(self.quotes[index], self.pickup)

    def _validate(self, request: BookingRequest) -> tuple[ServiceClass, GeoPoint]:
        if self.pickup is None:
            raise BookingValidationError(
                "Please set pickup location (tap 'Use my location' or click on the map)."
            )

        try:
            service_class = ServiceClass(request.service_class)
        except ValueError:
            raise BookingValidationError(
                f"Unknown service type: {request.service_class}"
            ) from None

        has_destination = bool(request.destination_text.strip()) or (
            self.selected_destination is not None
        )
        if service_class is not ServiceClass.MORTUARY and not has_destination:
            raise BookingValidationError("Please enter destination address or hospital.")

        if not _PHONE_RE.fullmatch(request.phone.strip()):
            raise BookingValidationError("Please enter a valid 10-digit contact number.")

        return service_class, self.pickup

    async def _resolve_destination(
        self, service_class: ServiceClass, pickup: GeoPoint, text: str
    ) -> GeoPoint:
        if self.selected_destination is not None:
            return self.selected_destination.position

        if service_class is ServiceClass.MORTUARY:
            return pickup

        match = self.catalog.mentioned_in(text)
        if match is not None:
            return match.position

        geocoded = await self.location.geocode(text)
        if geocoded is not None:
            return geocoded

        return self._jitter(self.booking_map.center, FALLBACK_JITTER_DEG)

    def _jitter(self, center: GeoPoint, magnitude: float) -> GeoPoint:
        return GeoPoint(
            lat=center.lat + (self.rng.random() - 0.5) * magnitude,
            lng=center.lng + (self.rng.random() - 0.5) * magnitude,
        )
