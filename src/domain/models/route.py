from __future__ import annotations

from dataclasses import dataclass

from .geo import Coordinate


@dataclass(frozen=True, slots=True)
class Route:
    """Administrative bus route, read-only from the tracking side.

    `assigned_vehicle_ids` may reference vehicles that no longer exist; such
    ids resolve to "no data" at read time. `start_location`/`end_location` are
    the boarding and alighting place names when they differ from the
    from/to labels.
    """

    id: str
    name: str
    from_location: str
    to_location: str
    start_location: str | None = None
    end_location: str | None = None
    start_coordinate: Coordinate | None = None
    end_coordinate: Coordinate | None = None
    distance_km: float = 0.0
    estimated_minutes: int = 0
    assigned_vehicle_ids: tuple[str, ...] = ()
    is_active: bool = True
    route_number: str | None = None
