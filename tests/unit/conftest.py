from __future__ import annotations

import pytest

from src.adapters.persistence import (
    InMemoryLocationStore,
    InMemoryRouteRepository,
    InMemoryStopRepository,
    InMemoryVehicleRepository,
)
from src.app.services.live_location_service import LiveLocationTracker
from src.domain.models import Coordinate, Route, Stop, Vehicle
from tests.unit.fakes import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryLocationStore:
    return InMemoryLocationStore()


@pytest.fixture
def raipur_routes() -> InMemoryRouteRepository:
    return InMemoryRouteRepository(
        (
            Route(
                id="R1",
                name="Railway Station to Magneto Mall",
                from_location="Raipur Railway Station",
                to_location="Magneto Mall",
                distance_km=8.5,
                estimated_minutes=45,
                assigned_vehicle_ids=("V1", "V2", "ghost"),
                route_number="R004",
            ),
            Route(
                id="R2",
                name="Pandri to Telibandha",
                from_location="Pandri Bus Stand",
                to_location="Telibandha Lake",
                assigned_vehicle_ids=("V3",),
            ),
            Route(
                id="R3",
                name="Railway Station to Telibandha",
                from_location="Raipur Railway Station",
                to_location="Telibandha Lake",
                is_active=False,
            ),
        )
    )


@pytest.fixture
def raipur_vehicles() -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository(
        (
            Vehicle(
                id="V1",
                bus_number="CG04-1001",
                license_plate="CG04AB1001",
                assigned_route_id="R1",
            ),
            Vehicle(id="V2", bus_number="CG04-1002", assigned_route_id="R1"),
            Vehicle(id="V3", bus_number="CG04-2001", assigned_route_id="R2"),
            Vehicle(id="V9", bus_number="CG04-9009"),
        )
    )


@pytest.fixture
def raipur_stops() -> InMemoryStopRepository:
    return InMemoryStopRepository(
        (
            # ~5 km north of the search center used in tests.
            Stop(id="far", name="Far Stop", coordinate=Coordinate(21.2964, 81.6296)),
            Stop(
                id="mid",
                name="Medical College Junction",
                coordinate=Coordinate(21.2586, 81.6296),
            ),
            Stop(
                id="near",
                name="Gandhi Chowk",
                coordinate=Coordinate(21.2541, 81.6296),
                amenities=("Market", "ATM"),
            ),
        )
    )


@pytest.fixture
def tracker(
    store: InMemoryLocationStore,
    raipur_vehicles: InMemoryVehicleRepository,
    clock: FakeClock,
) -> LiveLocationTracker:
    return LiveLocationTracker(
        location_store=store, vehicle_repository=raipur_vehicles, clock=clock
    )
