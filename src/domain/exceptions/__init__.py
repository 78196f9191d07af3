from .tracking import (
    InvalidCoordinate,
    InvalidRadius,
    InvalidReading,
    NotFound,
    StorageUnavailable,
    TrackingError,
)

__all__ = [
    "TrackingError",
    "InvalidCoordinate",
    "InvalidRadius",
    "InvalidReading",
    "StorageUnavailable",
    "NotFound",
]
