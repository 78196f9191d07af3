from __future__ import annotations

import pytest

from src.domain.algorithms.geo_utils import (
    haversine_distance_m,
    initial_bearing_deg,
    normalize_heading,
)
from src.domain.models import Coordinate


def test_haversine_zero_for_identical_points() -> None:
    p = Coordinate(latitude=21.2514, longitude=81.6296)
    assert haversine_distance_m(p, p) == 0.0


def test_haversine_is_symmetric_and_reasonable_scale() -> None:
    # Rough sanity check: 1 degree of latitude is about 111km.
    a = Coordinate(latitude=0.0, longitude=0.0)
    b = Coordinate(latitude=1.0, longitude=0.0)

    d1 = haversine_distance_m(a, b)
    d2 = haversine_distance_m(b, a)

    assert abs(d1 - d2) < 1e-6
    assert 100_000.0 < d1 < 120_000.0


def test_haversine_is_additive_along_a_meridian() -> None:
    a = Coordinate(latitude=21.20, longitude=81.63)
    b = Coordinate(latitude=21.25, longitude=81.63)
    c = Coordinate(latitude=21.30, longitude=81.63)

    assert haversine_distance_m(a, c) == pytest.approx(
        haversine_distance_m(a, b) + haversine_distance_m(b, c), rel=1e-9
    )


@pytest.mark.parametrize(
    ("end", "expected"),
    [
        (Coordinate(latitude=1.0, longitude=0.0), 0.0),
        (Coordinate(latitude=0.0, longitude=1.0), 90.0),
        (Coordinate(latitude=-1.0, longitude=0.0), 180.0),
        (Coordinate(latitude=0.0, longitude=-1.0), 270.0),
    ],
)
def test_initial_bearing_cardinal_directions(end: Coordinate, expected: float) -> None:
    start = Coordinate(latitude=0.0, longitude=0.0)
    assert initial_bearing_deg(start, end) == pytest.approx(expected, abs=1e-9)


def test_initial_bearing_is_zero_for_identical_points() -> None:
    p = Coordinate(latitude=21.25, longitude=81.69)
    assert initial_bearing_deg(p, p) == 0.0


def test_initial_bearing_stays_in_range() -> None:
    a = Coordinate(latitude=21.25, longitude=81.70)
    b = Coordinate(latitude=21.26, longitude=81.69)
    bearing = initial_bearing_deg(a, b)
    assert 270.0 < bearing < 360.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(0.0, 0.0), (360.0, 0.0), (-90.0, 270.0), (450.0, 90.0), (-1e-15, 0.0)],
)
def test_normalize_heading(raw: float, expected: float) -> None:
    assert normalize_heading(raw) == pytest.approx(expected)
    assert 0.0 <= normalize_heading(raw) < 360.0
