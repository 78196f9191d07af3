from __future__ import annotations

import math

from src.domain.models import Coordinate

EARTH_RADIUS_M = 6371000.0


def haversine_distance_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in meters."""

    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(s)))


def initial_bearing_deg(start: Coordinate, end: Coordinate) -> float:
    """Initial great-circle bearing in degrees, normalized to [0, 360).

    Identical points have no direction; 0.0 is returned by convention.
    """

    if start == end:
        return 0.0

    lat1 = math.radians(start.latitude)
    lat2 = math.radians(end.latitude)
    dlon = math.radians(end.longitude - start.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        dlon
    )
    return normalize_heading(math.degrees(math.atan2(y, x)))


def normalize_heading(deg: float) -> float:
    out = deg % 360.0
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if out >= 360.0 else out
