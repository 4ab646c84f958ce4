from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import IFleetRepository
from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.algorithms.pricing import estimate_eta_minutes, estimate_fare
from src.domain.models import GeoPoint, Quote, ServiceClass


@dataclass(slots=True)
class FleetQuoteService:
    """Quotes every compatible vehicle for a pickup/destination pair."""

    fleet_repository: IFleetRepository

    def quote(
        self,
        *,
        service_class: ServiceClass,
        pickup: GeoPoint,
        destination: GeoPoint,
    ) -> tuple[Quote, ...]:
        trip_km = haversine_distance_km(pickup, destination)

        quotes: list[Quote] = []
        for vehicle in self.fleet_repository.list_vehicles():
            if not service_class.accepts(vehicle.vehicle_class):
                continue
            to_pickup_km = haversine_distance_km(vehicle.position, pickup)
            quotes.append(
                Quote(
                    vehicle=vehicle,
                    distance_to_pickup_km=to_pickup_km,
                    trip_distance_km=trip_km,
                    eta_to_pickup_minutes=estimate_eta_minutes(
                        to_pickup_km, vehicle.speed_kmph
                    ),
                    fare_estimate=estimate_fare(trip_km, vehicle),
                    destination=destination,
                )
            )

        # Nearest first; list.sort is stable so roster order breaks ties.
        quotes.sort(key=lambda q: q.distance_to_pickup_km)
        return tuple(quotes)
