from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

import pytest

from src.adapters.persistence import (
    DEFAULT_FACILITIES,
    DEMO_DRIVERS,
    StaticFleetRepository,
)
from src.app.services.booking_session import BookingSession
from src.app.services.facility_catalog import FacilityCatalog
from src.app.services.fleet_quote_service import FleetQuoteService
from src.app.services.location_service import LocationService
from src.app.services.tile_map_renderer import TileMapRenderer
from src.app.services.tracking_session import TrackingSession
from src.app.services.trip_simulator import TripSimulator
from src.domain.models import GeoPoint


@dataclass(slots=True)
class FakeGeocoder:
    labels: dict[GeoPoint, str] = field(default_factory=dict)
    places: dict[str, GeoPoint] = field(default_factory=dict)
    on_reverse: Callable[[GeoPoint], None] | None = None
    on_forward: Callable[[str], None] | None = None
    reverse_calls: int = 0

    async def forward(self, query: str) -> GeoPoint | None:
        if self.on_forward is not None:
            self.on_forward(query)
        return self.places.get(query)

    async def reverse(self, point: GeoPoint) -> str:
        self.reverse_calls += 1
        if self.on_reverse is not None:
            self.on_reverse(point)
        return self.labels.get(point, "")


def tile_map(center: GeoPoint) -> TileMapRenderer:
    return TileMapRenderer(center=center, zoom=14, width_px=768, height_px=512)


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def session(geocoder: FakeGeocoder) -> BookingSession:
    rng = random.Random(42)
    return BookingSession(
        catalog=FacilityCatalog(fallback=DEFAULT_FACILITIES),
        quote_service=FleetQuoteService(fleet_repository=StaticFleetRepository()),
        location=LocationService(geocoder=geocoder),
        booking_map=tile_map(GeoPoint(lat=22.5726, lng=88.3639)),
        tracking=TrackingSession(
            simulator=TripSimulator(tick_period_s=1.5),
            map_factory=tile_map,
            drivers=DEMO_DRIVERS,
            rng=rng,
        ),
        rng=rng,
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
