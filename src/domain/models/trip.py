from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geo import GeoPoint


class TripStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class TripSegment:
    origin: GeoPoint
    destination: GeoPoint
    distance_km: float

    @property
    def distance_m(self) -> float:
        return self.distance_km * 1000.0


@dataclass(frozen=True, slots=True)
class TripProgress:
    """Snapshot of a simulated trip after one tick."""

    status: TripStatus
    position: GeoPoint
    segment_index: int
    progress_m: float
    fraction: float
    remaining_km: float
    eta_minutes: int
