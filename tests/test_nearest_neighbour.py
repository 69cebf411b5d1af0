import pytest

from routefinder.models.domain import AlgorithmKind, Direction
from routefinder.services.routing.models import AlgorithmConfig
from routefinder.services.routing.nearest_neighbour import NearestNeighbourSolver, nearest_neighbour_order
from routefinder.services.routing.point_set import PointSet
from routefinder.services.routing.progress import ProgressSink


def _solve(points, **options):
    config = AlgorithmConfig(kind=AlgorithmKind.NEAREST_NEIGHBOUR, **options)
    return NearestNeighbourSolver().solve(PointSet(points), config=config, progress=ProgressSink())


def test_nearest_neighbour_square_open_route(square_points):
    result = _solve(square_points)

    assert result.done
    assert result.order == (0, 1, 2, 3)
    assert result.path_length == pytest.approx(30.0)
    assert result.algorithm is AlgorithmKind.NEAREST_NEIGHBOUR


def test_nearest_neighbour_square_closed_route(square_points):
    result = _solve(square_points, closed=True)

    assert result.closed
    assert result.path_length == pytest.approx(40.0)
    assert result.path_length == pytest.approx(PointSet(square_points).path_length(result.order, closed=True))


def test_nearest_neighbour_ties_go_to_lowest_index():
    order, _ = nearest_neighbour_order(PointSet([(0, 0), (1, 0), (-1, 0)]))

    assert order == [0, 1, 2]


def test_direction_preference_overrides_distance():
    points = [(0, 0), (-1, 0), (5, 0)]

    assert nearest_neighbour_order(PointSet(points))[0] == [0, 1, 2]
    order, fallbacks = nearest_neighbour_order(PointSet(points), Direction.EAST)
    assert order == [0, 2, 1]
    assert fallbacks == 1


def test_north_and_south_half_planes():
    points = PointSet([(0, 0), (0, -1), (0, 3)])

    assert nearest_neighbour_order(points, Direction.NORTH)[0] == [0, 2, 1]
    assert nearest_neighbour_order(points, Direction.SOUTH)[0] == [0, 1, 2]


def test_direction_without_candidates_falls_back_and_visits_everything():
    result = _solve([(10, 0), (0, 0), (5, 0), (2, 3)], direction=Direction.EAST)

    assert sorted(result.order) == [0, 1, 2, 3]
    assert result.order[0] == 0
    assert result.order[1] == 2
    assert result.metadata["direction_fallbacks"] >= 1


def test_nearest_neighbour_reports_no_progress(square_points):
    seen = []
    config = AlgorithmConfig(kind=AlgorithmKind.NEAREST_NEIGHBOUR)
    NearestNeighbourSolver().solve(PointSet(square_points), config=config, progress=ProgressSink(seen.append))

    assert seen == []


@pytest.mark.parametrize("points, expected_length", [([(3, 4)], 0.0), ([(0, 0), (3, 4)], 5.0)])
def test_nearest_neighbour_small_inputs(points, expected_length):
    result = _solve(points)

    assert result.order == tuple(range(len(points)))
    assert result.path_length == pytest.approx(expected_length)
