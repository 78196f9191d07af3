from .location_store import ILocationStore, LocationListener
from .route_repository import IRouteRepository
from .stop_repository import IStopRepository
from .vehicle_repository import IVehicleRepository

__all__ = [
    "ILocationStore",
    "LocationListener",
    "IRouteRepository",
    "IStopRepository",
    "IVehicleRepository",
]
