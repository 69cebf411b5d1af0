"""Greedy nearest neighbour route construction."""

from __future__ import annotations

import logging

import numpy as np

from ...models.domain import AlgorithmKind, Direction
from .base import RouteSolver, trivial_result
from .models import AlgorithmConfig, RouteResult
from .point_set import PointSet
from .progress import ProgressSink

logger = logging.getLogger(__name__)


def _direction_mask(offsets: np.ndarray, direction: Direction) -> np.ndarray:
    dx = offsets[:, 0]
    dy = offsets[:, 1]
    match direction:
        case Direction.EAST:
            return dx >= 0
        case Direction.WEST:
            return dx <= 0
        case Direction.SOUTH:
            return dy <= 0
        case Direction.NORTH:
            return dy >= 0
        case _:
            return np.ones(len(offsets), dtype=bool)


def nearest_neighbour_order(point_set: PointSet, direction: Direction = Direction.ANY) -> tuple[list[int], int]:
    """Visit order starting at point 0, always moving to the closest unvisited point.

    With a direction other than ``ANY`` only points in that half plane are
    considered; when none is left there the nearest unvisited point is taken
    regardless. Returns the order and the number of such fallbacks.
    """

    count = len(point_set)
    coordinates = point_set.coordinates
    distances = point_set.distance_matrix
    visited = np.zeros(count, dtype=bool)
    visited[0] = True
    order = [0]
    current = 0
    fallbacks = 0

    while len(order) < count:
        candidates = np.where(visited, np.inf, distances[current])
        if direction is not Direction.ANY:
            allowed = _direction_mask(coordinates - coordinates[current], direction) & ~visited
            if allowed.any():
                candidates = np.where(allowed, candidates, np.inf)
            else:
                fallbacks += 1
                logger.debug(f"No unvisited point {direction.value} of {current}; taking nearest in any direction")
        # argmin returns the first minimum, so ties go to the lowest index.
        current = int(np.argmin(candidates))
        visited[current] = True
        order.append(current)

    return order, fallbacks


class NearestNeighbourSolver(RouteSolver):
    """Single deterministic pass; reports no progress."""

    kind = AlgorithmKind.NEAREST_NEIGHBOUR

    def solve(
        self,
        point_set: PointSet,
        *,
        config: AlgorithmConfig,
        progress: ProgressSink,
    ) -> RouteResult:
        if len(point_set) <= 2:
            return trivial_result(point_set, self.kind, config)

        order, fallbacks = nearest_neighbour_order(point_set, config.direction)
        return RouteResult(
            order=order,
            path_length=point_set.path_length(order, closed=config.closed),
            done=True,
            algorithm=self.kind,
            closed=config.closed,
            metadata={
                "strategy": self.kind.value,
                "direction": config.direction.value,
                "direction_fallbacks": fallbacks,
            },
        )
