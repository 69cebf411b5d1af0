"""Factory for route solvers based on the configured algorithm."""

from __future__ import annotations

import random
from typing import Optional

from ...exceptions import InvalidConfigError
from ...models.domain import AlgorithmKind
from .annealing import AnnealingSolver
from .base import RouteSolver
from .models import AlgorithmConfig, RouteResult
from .nearest_neighbour import NearestNeighbourSolver
from .point_set import PointSet
from .progress import ProgressSink


def get_solver(kind: AlgorithmKind, *, rng: Optional[random.Random] = None) -> RouteSolver:
    match kind:
        case AlgorithmKind.SIMULATED_ANNEALING:
            return AnnealingSolver(rng=rng)
        case AlgorithmKind.NEAREST_NEIGHBOUR:
            return NearestNeighbourSolver()
        case _:
            raise InvalidConfigError(f"Unknown routing algorithm '{kind}'.")


def execute_solver(
    point_set: PointSet,
    config: AlgorithmConfig,
    progress: ProgressSink | None = None,
    *,
    rng: Optional[random.Random] = None,
) -> RouteResult:
    solver = get_solver(config.kind, rng=rng)
    return solver.solve(point_set, config=config, progress=progress or ProgressSink())
