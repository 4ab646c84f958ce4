from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geo import GeoPoint


class VehicleClass(str, Enum):
    BLS = "BLS"
    ALS = "ALS"
    MORTUARY = "Mortuary"


class ServiceClass(str, Enum):
    """Service requested by the user; ANY accepts either ambulance class."""

    ANY = "Any"
    BLS = "BLS"
    ALS = "ALS"
    MORTUARY = "Mortuary"

    def accepts(self, vehicle_class: VehicleClass) -> bool:
        if self is ServiceClass.ANY:
            return vehicle_class in (VehicleClass.BLS, VehicleClass.ALS)
        return vehicle_class.value == self.value


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    vehicle_class: VehicleClass
    position: GeoPoint
    base_fare: float
    per_km_rate: float
    speed_kmph: float


@dataclass(frozen=True, slots=True)
class Quote:
    vehicle: Vehicle
    distance_to_pickup_km: float
    trip_distance_km: float
    eta_to_pickup_minutes: int
    fare_estimate: int
    destination: GeoPoint


@dataclass(frozen=True, slots=True)
class DriverProfile:
    name: str
    phone: str
    vehicle_registration: str
