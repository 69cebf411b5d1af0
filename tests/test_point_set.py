import math

import numpy as np
import pytest

from routefinder.exceptions import EmptyInputError, InvalidPointError
from routefinder.models.domain import Point
from routefinder.services.routing.models import AlgorithmConfig
from routefinder.services.routing.nearest_neighbour import NearestNeighbourSolver
from routefinder.services.routing.point_set import PointSet
from routefinder.services.routing.progress import ProgressSink


class _Located:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_point_set_rejects_empty_input():
    with pytest.raises(EmptyInputError):
        PointSet([])


def test_point_set_accepts_point_like_values():
    point_set = PointSet([Point(0, 0), (3, 4), {"x": 6, "y": 8}, _Located(1, 1), np.array([2.0, 2.0])])

    assert len(point_set) == 5
    assert point_set[1] == Point(3.0, 4.0)
    assert point_set[2] == Point(6.0, 8.0)
    assert point_set[4] == Point(2.0, 2.0)
    assert point_set.distance(0, 1) == pytest.approx(5.0)
    assert point_set.distance(1, 2) == pytest.approx(5.0)
    assert point_set.distance(2, 2) == 0.0


@pytest.mark.parametrize("value", ["ab", (1, 2, 3), {"x": 1}, (1, float("nan")), ("a", 1), None])
def test_point_set_rejects_invalid_points(value):
    with pytest.raises(InvalidPointError):
        PointSet([(0, 0), value])


def test_point_set_is_read_only():
    point_set = PointSet([(0, 0), (1, 1)])

    with pytest.raises(ValueError):
        point_set.coordinates[0, 0] = 5.0
    with pytest.raises(ValueError):
        point_set.distance_matrix[0, 1] = 5.0
    assert point_set.distance(0, 1) == pytest.approx(math.sqrt(2))


def test_path_length_open_and_closed(square_points):
    point_set = PointSet(square_points)

    assert point_set.path_length([0, 1, 2, 3]) == pytest.approx(30.0)
    assert point_set.path_length([0, 1, 2, 3], closed=True) == pytest.approx(40.0)
    assert point_set.path_length([0]) == 0.0
    assert point_set.path_length([0], closed=True) == 0.0


def test_distance_rows_built_only_on_demand(scattered_points):
    point_set = PointSet(scattered_points)
    NearestNeighbourSolver().solve(point_set, config=AlgorithmConfig(kind="nearest_neighbour"), progress=ProgressSink())

    assert point_set._distance_rows is None
    rows = point_set.distance_rows
    assert rows is point_set.distance_rows
    assert rows[3][7] == pytest.approx(point_set.distance_matrix[3, 7])
