class BookingValidationError(ValueError):
    """Raised when a booking request is incomplete or malformed."""


class InvalidTripPath(ValueError):
    """Raised when a trip simulation is started with fewer than two waypoints."""


class NoActiveTrip(LookupError):
    """Raised when tracking is queried while no trip has been booked."""


class TripAutoTicking(RuntimeError):
    """Raised when a trip driven by its tick scheduler is also advanced by hand."""
