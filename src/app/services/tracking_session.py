from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Sequence
from uuid import uuid4

from src.app.services.tile_map_renderer import TileMapRenderer
from src.app.services.trip_simulator import TripSimulator
from src.domain.algorithms.pricing import estimate_fare
from src.domain.algorithms.registration import vehicle_registration
from src.domain.exceptions import NoActiveTrip
from src.domain.models import (
    DriverProfile,
    GeoPoint,
    Quote,
    TripProgress,
    TripStatus,
)

PICKUP_MARKER = "pickup"
DESTINATION_MARKER = "dest"
VEHICLE_MARKER = "ambulance"

ARRIVED_MESSAGE = "Ambulance arrived at destination. Trip complete."


@dataclass(slots=True)
class TrackingSession:
    """Owns the live trip and everything the tracking view displays about it.

    The session is the only writer of the simulator; booking a new quote
    cancels whatever trip was running before the new one starts.
    """

    simulator: TripSimulator
    map_factory: Callable[[GeoPoint], TileMapRenderer]
    drivers: Sequence[tuple[str, str]] = ()
    rng: random.Random = field(default_factory=random.Random)

    trip_id: str | None = None
    quote: Quote | None = None
    pickup: GeoPoint | None = None
    track_map: TileMapRenderer | None = None
    driver: DriverProfile | None = None
    info_text: str = ""
    live_fare: int | None = None
    live_eta_minutes: int | None = None

    def __post_init__(self) -> None:
        self.simulator.on_tick = self._on_tick

    @property
    def active(self) -> bool:
        return self.quote is not None

    def start_trip(self, quote: Quote, pickup: GeoPoint) -> TripProgress:
        self.simulator.cancel()

        vehicle = quote.vehicle
        track_map = self.map_factory(pickup)
        track_map.add_marker(PICKUP_MARKER, pickup, "Pickup")
        track_map.add_marker(DESTINATION_MARKER, quote.destination, "Destination")
        track_map.add_marker(VEHICLE_MARKER, vehicle.position, "Ambulance")

        self.trip_id = str(uuid4())
        self.quote = quote
        self.pickup = pickup
        self.track_map = track_map
        self.driver = self._pick_driver(vehicle.id)
        self.info_text = (
            f"Vehicle {vehicle.id} ({vehicle.vehicle_class.value}) en route. "
            f"Trip distance ~ {quote.trip_distance_km:.1f} km."
        )
        self.live_fare = estimate_fare(quote.trip_distance_km, vehicle)

        path = (vehicle.position, pickup, quote.destination)
        progress = self.simulator.start(path, vehicle.speed_kmph)
        self.live_eta_minutes = progress.eta_minutes
        return progress

    def advance(self, elapsed_s: float) -> list[TripProgress]:
        self._require_trip()
        return self.simulator.advance(elapsed_s)

    def end_trip(self) -> None:
        self.simulator.cancel()
        self.trip_id = None
        self.quote = None
        self.pickup = None
        self.track_map = None
        self.driver = None
        self.info_text = ""
        self.live_fare = None
        self.live_eta_minutes = None

    def current(self) -> TripProgress:
        self._require_trip()
        progress = self.simulator.last_progress
        if progress is None:
            raise NoActiveTrip("Trip has not started")
        return progress

    def _require_trip(self) -> None:
        if self.quote is None:
            raise NoActiveTrip("No trip is being tracked")

    def _pick_driver(self, vehicle_id: str) -> DriverProfile | None:
        if not self.drivers:
            return None
        name, phone = self.rng.choice(list(self.drivers))
        return DriverProfile(
            name=name,
            phone=phone,
            vehicle_registration=vehicle_registration(vehicle_id, rng=self.rng),
        )

    def _on_tick(self, progress: TripProgress) -> None:
        if self.track_map is not None:
            self.track_map.update_marker(VEHICLE_MARKER, progress.position)
            self.track_map.set_center(progress.position)
        self.live_eta_minutes = progress.eta_minutes
        if progress.status is TripStatus.COMPLETED:
            self.info_text = ARRIVED_MESSAGE
