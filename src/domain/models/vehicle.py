from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    bus_number: str
    license_plate: str | None = None
    name: str | None = None
    capacity: int = 0
    status: str = "inactive"  # active | inactive | maintenance | en_route | breakdown
    assigned_route_id: str | None = None
    driver_ids: tuple[str, ...] = ()
