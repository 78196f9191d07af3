from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from src.app.ports.output import IVehicleRepository
from src.app.services.live_location_service import LiveLocationTracker
from src.app.services.stop_proximity_service import check_radius_km
from src.domain.algorithms.freshness import Freshness
from src.domain.algorithms.geo_utils import haversine_distance_m
from src.domain.models import Coordinate, TrackedLocation, Vehicle


@dataclass(frozen=True, slots=True)
class AreaVehicle:
    location: TrackedLocation
    vehicle: Vehicle | None = None
    distance_km: float | None = None


@dataclass(frozen=True, slots=True)
class TrackingStats:
    total_tracked: int
    active: int
    inactive: int
    by_freshness: Mapping[Freshness, int]
    generated_at: datetime


@dataclass(slots=True)
class FleetOverviewService:
    """City-wide views over every tracked bus (area search, counters)."""

    tracker: LiveLocationTracker
    vehicle_repository: IVehicleRepository | None = None

    def active_in_area(
        self, *, center: Coordinate | None = None, radius_km: float = 10.0
    ) -> tuple[AreaVehicle, ...]:
        """Non-stale buses, optionally limited to a radius around `center`."""

        if center is not None:
            radius_km = check_radius_km(radius_km)

        out: list[AreaVehicle] = []
        for tracked in self.tracker.list_current():
            if tracked.is_stale:
                continue

            distance_km = None
            if center is not None:
                d = haversine_distance_m(center, tracked.reading.coordinate) / 1000.0
                if d > radius_km:
                    continue
                distance_km = round(d, 2)

            vehicle = (
                self.vehicle_repository.get(tracked.reading.vehicle_id)
                if self.vehicle_repository is not None
                else None
            )
            out.append(
                AreaVehicle(location=tracked, vehicle=vehicle, distance_km=distance_km)
            )

        if center is not None:
            out.sort(key=lambda a: a.distance_km or 0.0)
        return tuple(out)

    def stats(self) -> TrackingStats:
        tracked = self.tracker.list_current()
        counts = {f: 0 for f in Freshness}
        for t in tracked:
            counts[t.freshness] += 1

        active = counts[Freshness.RECENT] + counts[Freshness.ACTIVE]
        return TrackingStats(
            total_tracked=len(tracked),
            active=active,
            inactive=len(tracked) - active,
            by_freshness=counts,
            generated_at=self.tracker.clock(),
        )
