import math

import pytest

from src.domain.exceptions import InvalidCoordinate
from src.domain.models import Coordinate


def test_coordinate_accepts_valid_values() -> None:
    p = Coordinate(latitude=21.2514, longitude=81.6296)
    assert p.latitude == 21.2514
    assert p.longitude == 81.6296


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
        (math.nan, 0.0),
        (0.0, math.inf),
    ],
)
def test_coordinate_rejects_out_of_range_values(lat: float, lon: float) -> None:
    with pytest.raises(InvalidCoordinate):
        Coordinate(latitude=lat, longitude=lon)


def test_invalid_coordinate_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Coordinate(latitude=91.0, longitude=0.0)
