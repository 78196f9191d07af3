from __future__ import annotations

import math
from dataclasses import dataclass

from src.app.ports.output import IStopRepository
from src.domain.algorithms.geo_utils import haversine_distance_m
from src.domain.exceptions import InvalidRadius
from src.domain.models import Coordinate, Stop


@dataclass(frozen=True, slots=True)
class NearbyStop:
    stop: Stop
    distance_km: float


def check_radius_km(radius_km: float) -> float:
    radius_km = float(radius_km)
    if not math.isfinite(radius_km) or radius_km <= 0.0:
        raise InvalidRadius(f"Radius must be a positive number of km: {radius_km}")
    return radius_km


@dataclass(slots=True)
class StopProximityFinder:
    stop_repository: IStopRepository

    def nearby(self, *, center: Coordinate, radius_km: float) -> tuple[NearbyStop, ...]:
        """Stops within `radius_km` (inclusive), nearest first."""

        radius_km = check_radius_km(radius_km)

        found: list[NearbyStop] = []
        for stop in self.stop_repository.list_all():
            d_km = haversine_distance_m(center, stop.coordinate) / 1000.0
            if d_km <= radius_km:
                found.append(NearbyStop(stop=stop, distance_km=d_km))

        found.sort(key=lambda n: n.distance_km)
        return tuple(found)

    def search(self, query: str) -> tuple[Stop, ...]:
        """Case-insensitive name search, in store order."""

        q = query.strip().lower()
        if not q:
            return ()
        return tuple(s for s in self.stop_repository.list_all() if q in s.name.lower())
