from __future__ import annotations

from dataclasses import dataclass

from .geo import Coordinate


@dataclass(frozen=True, slots=True)
class Stop:
    id: str
    name: str
    coordinate: Coordinate
    address: str = ""
    city: str | None = None
    amenities: tuple[str, ...] = ()
