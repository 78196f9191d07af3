from .dynamodb_location_store import DynamoDbLocationStore
from .dynamodb_reference_repository import (
    DynamoDbRouteRepository,
    DynamoDbStopRepository,
    DynamoDbVehicleRepository,
)
from .in_memory_location_store import InMemoryLocationStore
from .in_memory_reference_repository import (
    InMemoryRouteRepository,
    InMemoryStopRepository,
    InMemoryVehicleRepository,
)
from .json_reference_repository import ReferenceData, load_reference_data

__all__ = [
    "DynamoDbLocationStore",
    "DynamoDbRouteRepository",
    "DynamoDbStopRepository",
    "DynamoDbVehicleRepository",
    "InMemoryLocationStore",
    "InMemoryRouteRepository",
    "InMemoryStopRepository",
    "InMemoryVehicleRepository",
    "ReferenceData",
    "load_reference_data",
]
