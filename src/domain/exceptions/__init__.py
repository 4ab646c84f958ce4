from .booking import BookingValidationError, InvalidTripPath, NoActiveTrip, TripAutoTicking
from .collaborators import CollaboratorUnavailable, LocationUnavailable

__all__ = [
    "BookingValidationError",
    "CollaboratorUnavailable",
    "InvalidTripPath",
    "LocationUnavailable",
    "NoActiveTrip",
    "TripAutoTicking",
]
