from __future__ import annotations

import math

from src.domain.models import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers."""

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)

    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(s))


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_distance_km(a, b) * 1000.0


def interpolate_linear(a: GeoPoint, b: GeoPoint, t: float) -> GeoPoint:
    # Straight blend of lat/lng; fine at city scale, drifts from the geodesic
    # on long segments.
    return GeoPoint(
        lat=a.lat + (b.lat - a.lat) * t,
        lng=a.lng + (b.lng - a.lng) * t,
    )
