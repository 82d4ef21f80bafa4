import pytest

from fuzzy_dbscan import Point
from fuzzy_dbscan.synthetic import gaussian_circle

BASE_N = 100
BASE_R = 10.0


@pytest.fixture
def scenario_points():
    """One far-away point and a chain of three close ones."""
    return [Point.of(0, 0), Point.of(100, 100), Point.of(105, 105), Point.of(115, 115)]


@pytest.fixture
def bridge_points():
    """Two tight 1D groups and a lone point halfway between them (index 3)."""
    return [Point.of(x) for x in (0, 1, 2, 6, 10, 11, 12)]


@pytest.fixture
def gaussian_points():
    return gaussian_circle(BASE_N, 0.0, 0.0, BASE_R, seed=7)
