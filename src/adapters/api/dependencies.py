from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from src.adapters.persistence import (
    DynamoDbLocationStore,
    DynamoDbRouteRepository,
    DynamoDbStopRepository,
    DynamoDbVehicleRepository,
    InMemoryLocationStore,
    load_reference_data,
)
from src.app.ports.output import (
    ILocationStore,
    IRouteRepository,
    IStopRepository,
    IVehicleRepository,
)
from src.app.services.fleet_overview_service import FleetOverviewService
from src.app.services.ingest_guard import (
    IngestGuard,
    NoopIngestGuard,
    PerVehicleLockGuard,
)
from src.app.services.live_location_service import LiveLocationTracker
from src.app.services.route_matcher_service import RouteMatcher
from src.app.services.stop_proximity_service import StopProximityFinder
from src.domain.algorithms.freshness import (
    ACTIVE_WINDOW_S,
    RECENT_WINDOW_S,
    FreshnessPolicy,
)

ReferenceRepositories = tuple[IRouteRepository, IStopRepository, IVehicleRepository]


@dataclass(frozen=True, slots=True)
class TrackerSettings:
    location_store: str = "memory"  # memory | dynamodb
    reference_store: str = "json"  # json | dynamodb
    ingest_locking: str = "none"  # none | per_vehicle
    recent_window_s: float = RECENT_WINDOW_S
    active_window_s: float = ACTIVE_WINDOW_S

    @staticmethod
    def from_env() -> "TrackerSettings":
        def _choice(name: str, default: str, allowed: set[str]) -> str:
            value = (os.getenv(name) or default).strip().lower()
            if value not in allowed:
                raise RuntimeError(f"{name} must be one of {sorted(allowed)}")
            return value

        return TrackerSettings(
            location_store=_choice("LOCATION_STORE", "memory", {"memory", "dynamodb"}),
            reference_store=_choice("REFERENCE_STORE", "json", {"json", "dynamodb"}),
            ingest_locking=_choice("INGEST_LOCKING", "none", {"none", "per_vehicle"}),
            recent_window_s=float(os.getenv("FRESHNESS_RECENT_S") or RECENT_WINDOW_S),
            active_window_s=float(os.getenv("FRESHNESS_ACTIVE_S") or ACTIVE_WINDOW_S),
        )


@lru_cache(maxsize=1)
def get_settings() -> TrackerSettings:
    return TrackerSettings.from_env()


# One instance per process; every request must share the store and the locks.
@lru_cache(maxsize=1)
def get_location_store() -> ILocationStore:
    if get_settings().location_store == "dynamodb":
        return DynamoDbLocationStore()
    return InMemoryLocationStore()


@lru_cache(maxsize=1)
def get_ingest_guard() -> IngestGuard:
    if get_settings().ingest_locking == "per_vehicle":
        return PerVehicleLockGuard()
    return NoopIngestGuard()


@lru_cache(maxsize=1)
def _reference_repositories() -> ReferenceRepositories:
    if get_settings().reference_store == "dynamodb":
        return (
            DynamoDbRouteRepository(),
            DynamoDbStopRepository(),
            DynamoDbVehicleRepository(),
        )
    data = load_reference_data()
    return data.routes, data.stops, data.vehicles


def get_tracker() -> LiveLocationTracker:
    settings = get_settings()
    _, _, vehicles = _reference_repositories()
    return LiveLocationTracker(
        location_store=get_location_store(),
        vehicle_repository=vehicles,
        freshness_policy=FreshnessPolicy(
            recent_window_s=settings.recent_window_s,
            active_window_s=settings.active_window_s,
        ),
        ingest_guard=get_ingest_guard(),
    )


def get_route_matcher() -> RouteMatcher:
    routes, _, vehicles = _reference_repositories()
    return RouteMatcher(
        route_repository=routes, vehicle_repository=vehicles, tracker=get_tracker()
    )


def get_stop_finder() -> StopProximityFinder:
    _, stops, _ = _reference_repositories()
    return StopProximityFinder(stop_repository=stops)


def get_fleet_overview() -> FleetOverviewService:
    _, _, vehicles = _reference_repositories()
    return FleetOverviewService(tracker=get_tracker(), vehicle_repository=vehicles)
