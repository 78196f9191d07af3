from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IRouteRepository, IVehicleRepository
from src.app.services.live_location_service import LiveLocationTracker
from src.domain.algorithms.freshness import Freshness
from src.domain.algorithms.route_matching import route_matches
from src.domain.exceptions import NotFound
from src.domain.models import Route, TrackedLocation, Vehicle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchedRoute:
    route: Route
    vehicles: tuple[Vehicle, ...] = ()


@dataclass(frozen=True, slots=True)
class RouteVehicleStatus:
    """One bus on a route.

    `location` is None when the bus is assigned but has no live reading
    (or its id no longer resolves to a vehicle record).
    """

    vehicle_id: str
    vehicle: Vehicle | None
    location: TrackedLocation | None
    assigned: bool = True

    @property
    def freshness(self) -> Freshness | None:
        return self.location.freshness if self.location is not None else None

    @property
    def is_live(self) -> bool:
        return self.location is not None and not self.location.is_stale


@dataclass(slots=True)
class RouteMatcher:
    """Text-based route search plus the live status of buses on a route.

    Matching is a plain substring test (see `route_matches`); it can be
    swapped for a geocoded strategy without touching ingestion.
    """

    route_repository: IRouteRepository
    vehicle_repository: IVehicleRepository
    tracker: LiveLocationTracker

    def find_routes_between(
        self, from_fragment: str, to_fragment: str
    ) -> tuple[MatchedRoute, ...]:
        matches: list[MatchedRoute] = []
        for route in self.route_repository.list_active():
            if not route_matches(route, from_fragment, to_fragment):
                continue
            found = self.vehicle_repository.get_many(route.assigned_vehicle_ids)
            vehicles = tuple(
                found[vid] for vid in route.assigned_vehicle_ids if vid in found
            )
            matches.append(MatchedRoute(route=route, vehicles=vehicles))

        logger.debug(
            "Route search",
            extra={"from": from_fragment, "to": to_fragment, "count": len(matches)},
        )
        return tuple(matches)

    def buses_for_route(
        self, route_id: str, *, include_unassigned: bool = True
    ) -> tuple[RouteVehicleStatus, ...]:
        """Join the route's assigned buses with their current readings.

        With `include_unassigned`, live (non-stale) readings that report this
        route but belong to buses not on its assignment list are appended
        with `assigned=False`.
        """

        route = self.route_repository.get(route_id)
        if route is None:
            raise NotFound(f"Route not found: {route_id}")

        vehicles = self.vehicle_repository.get_many(route.assigned_vehicle_ids)

        out: list[RouteVehicleStatus] = []
        seen: set[str] = set()
        for vid in route.assigned_vehicle_ids:
            if vid in seen:
                continue
            seen.add(vid)
            vehicle = vehicles.get(vid)
            location = self.tracker.get_current(vid) if vehicle is not None else None
            out.append(
                RouteVehicleStatus(vehicle_id=vid, vehicle=vehicle, location=location)
            )

        if include_unassigned:
            for tracked in self.tracker.list_current():
                reading = tracked.reading
                if reading.route_id != route_id or reading.vehicle_id in seen:
                    continue
                if tracked.is_stale:
                    continue
                seen.add(reading.vehicle_id)
                out.append(
                    RouteVehicleStatus(
                        vehicle_id=reading.vehicle_id,
                        vehicle=self.vehicle_repository.get(reading.vehicle_id),
                        location=tracked,
                        assigned=False,
                    )
                )

        return tuple(out)
