from __future__ import annotations

import math

from src.domain.models import Vehicle


def estimate_fare(distance_km: float, vehicle: Vehicle) -> int:
    """Base fare plus distance charge, rounded to the nearest currency unit."""

    return _round_half_up(vehicle.base_fare + distance_km * vehicle.per_km_rate)


def estimate_eta_minutes(distance_km: float, speed_kmph: float) -> int:
    """Travel time in whole minutes, always rounded up."""

    return math.ceil(distance_km / speed_kmph * 60.0)


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; fares round .5 up.
    return math.floor(value + 0.5)
