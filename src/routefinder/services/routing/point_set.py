"""Immutable coordinate snapshot with pairwise distances."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from ...exceptions import EmptyInputError
from ...models.domain import Point
from ..geometry import as_point


class PointSet:
    """Ordered, read-only collection of points.

    Coordinates are stored as an ``(N, 2)`` float array and the full Euclidean
    distance matrix is computed once at construction. Index ``i`` refers to the
    same point for the lifetime of the instance.
    """

    __slots__ = ("_points", "_coordinates", "_distances", "_distance_rows")

    def __init__(self, points: Iterable[Any]) -> None:
        parsed = tuple(as_point(point) for point in points)
        if not parsed:
            raise EmptyInputError()
        self._points = parsed

        coordinates = np.array([point.as_tuple() for point in parsed], dtype=np.float64)
        deltas = coordinates[:, np.newaxis, :] - coordinates[np.newaxis, :, :]
        distances = np.hypot(deltas[..., 0], deltas[..., 1])
        coordinates.setflags(write=False)
        distances.setflags(write=False)
        self._coordinates = coordinates
        self._distances = distances
        self._distance_rows: list[list[float]] | None = None

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self):
        return iter(self._points)

    def __repr__(self) -> str:
        return f"PointSet(count={len(self)})"

    @property
    def count(self) -> int:
        return len(self._points)

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def coordinates(self) -> np.ndarray:
        return self._coordinates

    @property
    def distance_matrix(self) -> np.ndarray:
        return self._distances

    @property
    def distance_rows(self) -> list[list[float]]:
        """The distance matrix as nested lists, built on first access.

        Plain lists are much faster than numpy scalar indexing in the annealing
        loop. Nearest neighbour works on the array and never builds this copy.
        """
        if self._distance_rows is None:
            self._distance_rows = self._distances.tolist()
        return self._distance_rows

    def distance(self, i: int, j: int) -> float:
        return float(self._distances[i, j])

    def path_length(self, order: Sequence[int], *, closed: bool = False) -> float:
        """Sum of edge lengths along ``order``; adds the return edge when ``closed``."""

        if len(order) < 2:
            return 0.0
        indices = np.asarray(order, dtype=np.intp)
        total = float(self._distances[indices[:-1], indices[1:]].sum())
        if closed:
            total += float(self._distances[indices[-1], indices[0]])
        return total
