"""Error taxonomy shared by repositories, services and views."""


class SurfaceLogError(Exception):
    """Base error carrying a human-readable status message."""

    def __init__(self, message=""):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ValidationError(SurfaceLogError):
    """Required input missing or invalid; raised before any store call."""


class ConflictError(SurfaceLogError):
    """A uniqueness constraint in the store rejected the write."""


class StoreError(SurfaceLogError):
    """Any other failure reported by the store."""


class ResolutionError(StoreError):
    """A handle id could not be obtained, even after conflict recovery."""


class NotFoundError(SurfaceLogError):
    """The referenced row does not exist."""
