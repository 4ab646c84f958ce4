class CollaboratorUnavailable(RuntimeError):
    """Base exception for external services that failed or returned garbage."""


class LocationUnavailable(CollaboratorUnavailable):
    """Raised when every approximate-location provider failed."""
