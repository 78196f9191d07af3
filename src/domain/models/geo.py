from __future__ import annotations

import math
from dataclasses import dataclass

from src.domain.exceptions import InvalidCoordinate


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not (-90.0 <= self.latitude <= 90.0):
            raise InvalidCoordinate(f"Invalid latitude: {self.latitude}")
        if not math.isfinite(self.longitude) or not (
            -180.0 <= self.longitude <= 180.0
        ):
            raise InvalidCoordinate(f"Invalid longitude: {self.longitude}")
