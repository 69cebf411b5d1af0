"""Route finder facade.

A :class:`RouteFinder` owns one immutable :class:`PointSet` and computes its
route lazily: the first request for an order, a reordering or the result runs
the configured solver once and caches the outcome. Later requests read the
cache. Instances are single-use; build a new finder for new points.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from ...exceptions import InvalidPointError, LengthMismatchError, MissingPropertyError
from ...models.domain import AlgorithmKind, Direction, Point
from ..geometry import as_point
from .dispatcher import execute_solver
from .models import UNSET, AlgorithmConfig, RouteResult
from .point_set import PointSet
from .progress import ProgressCallback, ProgressSink

logger = logging.getLogger(__name__)

PointKey = Union[str, Callable[[Any], Any]]


def _key_name(key: PointKey) -> str:
    if isinstance(key, str):
        return key
    return getattr(key, "__name__", repr(key))


def extract_point(obj: Any, key: PointKey, index: int = 0) -> Point:
    """Read the point-valued property ``key`` of ``obj``.

    ``key`` is an attribute name, a mapping key for dict-like records, or a
    callable accessor returning a point-like value.
    """

    try:
        if callable(key):
            value = key(obj)
        elif isinstance(obj, Mapping):
            value = obj[key]
        else:
            value = getattr(obj, key)
    except (AttributeError, KeyError, TypeError) as exc:
        raise MissingPropertyError(_key_name(key), index, obj) from exc

    try:
        return as_point(value)
    except InvalidPointError as exc:
        raise MissingPropertyError(_key_name(key), index, obj) from exc


class RouteFinder:
    """Heuristic shortest route through a fixed set of points.

    Point 0 of the input is always the start of the route. Options not given
    explicitly fall back to ``config`` and then to application settings. An
    explicit ``seed=None`` requests an unseeded run even when ``config`` has a
    seed.
    """

    def __init__(
        self,
        points: Iterable[Any],
        *,
        algorithm: AlgorithmKind | str = UNSET,
        config: Optional[AlgorithmConfig] = None,
        annealing_steps: int = UNSET,
        direction: Direction | str = UNSET,
        closed: bool = UNSET,
        seed: Optional[int] = UNSET,
        progress: Optional[ProgressCallback] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._point_set = PointSet(points)
        self._config = (config or AlgorithmConfig()).with_overrides(
            kind=algorithm,
            annealing_steps=annealing_steps,
            direction=direction,
            closed=closed,
            seed=seed,
        )
        self.progress_callback = progress
        self._rng = rng
        self._objects: Optional[tuple[Any, ...]] = None
        self._result = RouteResult(closed=self._config.closed)
        self._solving = False

    @classmethod
    def from_points(cls, points: Iterable[Any], **options: Any) -> "RouteFinder":
        return cls(points, **options)

    @classmethod
    def from_objects(cls, objects: Iterable[Any], key: PointKey, **options: Any) -> "RouteFinder":
        """Build a finder over the point-valued property ``key`` of each object."""
        items = tuple(objects)
        points = [extract_point(obj, key, index) for index, obj in enumerate(items)]
        finder = cls(points, **options)
        finder._objects = items
        return finder

    def __repr__(self) -> str:
        return (
            f"RouteFinder(count={len(self._point_set)}, algorithm={self.algorithm.value}, "
            f"done={self._result.done})"
        )

    @property
    def point_set(self) -> PointSet:
        return self._point_set

    @property
    def config(self) -> AlgorithmConfig:
        return self._config

    @property
    def algorithm(self) -> AlgorithmKind:
        return self._config.kind

    @property
    def objects(self) -> Optional[tuple[Any, ...]]:
        return self._objects

    @property
    def is_done(self) -> bool:
        return self._result.done

    @property
    def path_length(self) -> float:
        """Length of the computed route; 0.0 until a solve has completed."""
        return self._result.path_length if self._result.done else 0.0

    @property
    def result(self) -> RouteResult:
        return self.solve()

    def solve(self, progress: Optional[ProgressCallback] = None) -> RouteResult:
        """Run the solver once and cache the result.

        ``progress`` overrides the callback given at construction for this
        solve. It is called synchronously with values in ``[0, 1]`` and must not
        call back into this finder.
        """
        if self._result.done:
            return self._result
        if self._solving:
            raise RuntimeError("Route calculation already in progress on this finder.")

        callback = progress if progress is not None else self.progress_callback
        count = len(self._point_set)
        logger.info(f"Computing route for {count} points using {self.algorithm.value}")
        started = time.perf_counter()
        self._solving = True
        try:
            result = execute_solver(self._point_set, self._config, ProgressSink(callback), rng=self._rng)
        finally:
            self._solving = False

        elapsed = time.perf_counter() - started
        result = result.with_metadata(point_count=count, elapsed_seconds=elapsed)
        self._result = result
        logger.info(f"Route for {count} points computed in {elapsed:.3f}s, path length {result.path_length:.6g}")
        return result

    def shortest_route(self) -> list[Point]:
        """The input points reordered along the route."""
        return [self._point_set[index] for index in self.solve().order]

    def shortest_route_order(self) -> list[int]:
        """0-based indices of the input points in route order."""
        return list(self.solve().order)

    def sorted_array_from_array(self, items: Sequence[Any]) -> list[Any]:
        """Reorder ``items`` (one per input point) along the route."""
        expected = len(self._point_set)
        if len(items) != expected:
            raise LengthMismatchError(expected, len(items))
        return [items[index] for index in self.solve().order]

    def sorted_objects(self) -> list[Any]:
        if self._objects is None:
            raise RuntimeError("This finder was built from points, not objects.")
        return self.sorted_array_from_array(self._objects)


def sorted_objects_by_shortest_route(objects: Iterable[Any], key: PointKey, **options: Any) -> list[Any]:
    """Return ``objects`` ordered along the shortest route through their ``key`` points."""

    return RouteFinder.from_objects(objects, key, **options).sorted_objects()
