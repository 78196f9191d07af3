class TrackingError(Exception):
    """Base exception for live-tracking failures."""


class InvalidCoordinate(TrackingError, ValueError):
    """Raised when a latitude/longitude pair is outside the valid range."""


class InvalidRadius(TrackingError, ValueError):
    """Raised when a search radius is not a positive, finite number."""


class InvalidReading(TrackingError, ValueError):
    """Raised when a location ping carries impossible motion values."""


class StorageUnavailable(TrackingError):
    """Raised when the backing store cannot be reached or times out.

    Location writes overwrite by vehicle id, so callers may retry freely.
    """


class NotFound(TrackingError):
    """Raised when a vehicle, route or stop required by an operation is absent."""
