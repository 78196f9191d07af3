from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.domain.algorithms.freshness import Freshness

from .geo import Coordinate


@dataclass(frozen=True, slots=True)
class LocationReading:
    """Latest GPS sample for one vehicle.

    `captured_at` is when the device took the fix; `recorded_at` is when the
    store accepted it. Both are timezone-aware UTC.
    """

    vehicle_id: str
    coordinate: Coordinate
    captured_at: datetime
    recorded_at: datetime
    route_id: str | None = None
    speed_kmh: float = 0.0
    heading_deg: float = 0.0
    accuracy_m: float | None = None


@dataclass(frozen=True, slots=True)
class TrackedLocation:
    """A reading plus its freshness relative to the time it was read."""

    reading: LocationReading
    age_s: float
    freshness: Freshness

    @property
    def is_recent(self) -> bool:
        return self.freshness is Freshness.RECENT

    @property
    def is_stale(self) -> bool:
        return self.freshness is Freshness.STALE
