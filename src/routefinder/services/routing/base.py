"""Base classes for route solver implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...models.domain import AlgorithmKind
from .models import AlgorithmConfig, RouteResult
from .point_set import PointSet
from .progress import ProgressSink


class RouteSolver(ABC):
    """Contract for route heuristics.

    A solver receives an immutable point set and returns a finished
    :class:`RouteResult` whose order starts with index 0.
    """

    kind: AlgorithmKind

    @abstractmethod
    def solve(
        self,
        point_set: PointSet,
        *,
        config: AlgorithmConfig,
        progress: ProgressSink,
    ) -> RouteResult:
        raise NotImplementedError


def trivial_result(point_set: PointSet, kind: AlgorithmKind, config: AlgorithmConfig) -> RouteResult:
    """Identity route for inputs too small to reorder."""

    order = list(range(len(point_set)))
    return RouteResult(
        order=order,
        path_length=point_set.path_length(order, closed=config.closed),
        done=True,
        algorithm=kind,
        closed=config.closed,
        metadata={"strategy": kind.value, "short_circuit": True},
    )
