from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import IFleetRepository
from src.domain.models import GeoPoint, Vehicle, VehicleClass

DEFAULT_FLEET: tuple[Vehicle, ...] = (
    # Esplanade
    Vehicle("AMB-101", VehicleClass.BLS, GeoPoint(lat=22.5726, lng=88.3639), 150, 25, 40),
    # Salt Lake
    Vehicle("AMB-245", VehicleClass.ALS, GeoPoint(lat=22.5695, lng=88.4325), 300, 40, 50),
    # Tollygunge
    Vehicle("AMB-312", VehicleClass.BLS, GeoPoint(lat=22.5015, lng=88.3687), 150, 25, 42),
    # Alipore
    Vehicle("AMB-478", VehicleClass.ALS, GeoPoint(lat=22.5200, lng=88.3870), 300, 40, 48),
    # Bhawanipur
    Vehicle("MORT-21", VehicleClass.MORTUARY, GeoPoint(lat=22.5400, lng=88.3700), 500, 35, 35),
)

# Demo driver profiles (name, phone) shown on the tracking card.
DEMO_DRIVERS: tuple[tuple[str, str], ...] = (
    ("Rahul Sen", "9876543210"),
    ("Priya Das", "9890012345"),
    ("Amit Roy", "9123456789"),
    ("Sneha Gupta", "9812345678"),
    ("Arjun Kumar", "9911223344"),
)


@dataclass(slots=True)
class StaticFleetRepository(IFleetRepository):
    vehicles: tuple[Vehicle, ...] = DEFAULT_FLEET

    def list_vehicles(self) -> tuple[Vehicle, ...]:
        return self.vehicles
