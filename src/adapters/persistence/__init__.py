from .default_facilities import DEFAULT_FACILITIES
from .facility_repositories import (
    HttpFacilityRepository,
    LocalFacilityRepository,
    S3FacilityRepository,
    facility_repository_for,
)
from .fleet_roster import DEFAULT_FLEET, DEMO_DRIVERS, StaticFleetRepository

__all__ = [
    "DEFAULT_FACILITIES",
    "DEFAULT_FLEET",
    "DEMO_DRIVERS",
    "HttpFacilityRepository",
    "LocalFacilityRepository",
    "S3FacilityRepository",
    "StaticFleetRepository",
    "facility_repository_for",
]
