from .geo import Coordinate
from .location import LocationReading, TrackedLocation
from .route import Route
from .stop import Stop
from .vehicle import Vehicle

__all__ = [
    "Coordinate",
    "LocationReading",
    "TrackedLocation",
    "Route",
    "Stop",
    "Vehicle",
]
