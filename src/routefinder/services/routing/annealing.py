"""Simulated annealing route refinement.

Follows the scheme of "Numerical Recipes in C", chapter 10: the working order
is perturbed by segment reversals and segment transpositions, each move is
costed from the handful of edges it touches and accepted by the Metropolis
rule. The temperature falls geometrically over a fixed number of steps.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional

from ...models.domain import AlgorithmKind
from .base import RouteSolver, trivial_result
from .models import AlgorithmConfig, RouteResult
from .point_set import PointSet
from .progress import ProgressSink

logger = logging.getLogger(__name__)


def initial_temperature(path_length: float, count: int, scale: float) -> float:
    """Starting temperature proportional to the mean edge length of the initial route."""

    if path_length <= 0 or count <= 0:
        return scale
    return scale * path_length / count


class _Tour:
    """Mutable visit order with incremental move costing.

    Position 0 is never moved. For a closed tour the successor of the last
    position is position 0.
    """

    __slots__ = ("order", "rows", "closed", "count")

    def __init__(self, order: list[int], rows: list[list[float]], closed: bool) -> None:
        self.order = order
        self.rows = rows
        self.closed = closed
        self.count = len(order)

    def successor(self, position: int) -> Optional[int]:
        if position < self.count - 1:
            return self.order[position + 1]
        if self.closed:
            return self.order[0]
        return None

    def reversal_delta(self, a: int, b: int) -> float:
        rows = self.rows
        before = self.order[a - 1]
        first = self.order[a]
        last = self.order[b]
        after = self.successor(b)

        delta = rows[before][last] - rows[before][first]
        if after is not None:
            delta += rows[first][after] - rows[last][after]
        return delta

    def reverse(self, a: int, b: int) -> None:
        self.order[a : b + 1] = self.order[a : b + 1][::-1]

    def transposition_delta(self, a: int, b: int, c: int) -> float:
        """Cost of moving ``order[a..b]`` to sit right after position ``c``."""
        rows = self.rows
        before = self.order[a - 1]
        first = self.order[a]
        last = self.order[b]
        after = self.successor(b)
        anchor = self.order[c]
        anchor_next = self.successor(c)

        delta = rows[anchor][first] - rows[before][first]
        if after is not None:
            delta += rows[before][after] - rows[last][after]
        if anchor_next is not None:
            delta += rows[last][anchor_next] - rows[anchor][anchor_next]
        return delta

    def transpose(self, a: int, b: int, c: int) -> None:
        segment = self.order[a : b + 1]
        rest = self.order[:a] + self.order[b + 1 :]
        anchor = c if c < a else c - len(segment)
        self.order[:] = rest[: anchor + 1] + segment + rest[anchor + 1 :]


def _pick_segment(rng: random.Random, count: int) -> tuple[int, int]:
    # Two distinct positions in [1, count - 1]; position 0 stays fixed.
    a = rng.randrange(1, count)
    b = rng.randrange(1, count - 1)
    if b >= a:
        b += 1
    return (a, b) if a < b else (b, a)


def _pick_insertion(rng: random.Random, a: int, b: int, count: int) -> Optional[int]:
    # Valid anchors lie outside [a - 1, b].
    below = a - 1
    above = count - 1 - b
    if below + above == 0:
        return None
    pick = rng.randrange(below + above)
    return pick if pick < below else b + 1 + (pick - below)


class AnnealingSolver(RouteSolver):
    """Metropolis annealing over a fixed number of cooling steps.

    Starts from the identity order. Each step runs up to
    ``trials_per_point * N`` trials, ending early once
    ``successes_per_point * N`` moves were accepted, then cools the temperature
    and reports ``step / annealing_steps`` to the progress sink.
    """

    kind = AlgorithmKind.SIMULATED_ANNEALING

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng

    def solve(
        self,
        point_set: PointSet,
        *,
        config: AlgorithmConfig,
        progress: ProgressSink,
    ) -> RouteResult:
        count = len(point_set)
        if count <= 2:
            progress.finish()
            return trivial_result(point_set, self.kind, config)

        rng = self._rng if self._rng is not None else random.Random(config.seed)
        tour = _Tour(list(range(count)), point_set.distance_rows, config.closed)
        length = point_set.path_length(tour.order, closed=config.closed)
        start_length = length
        temperature = initial_temperature(length, count, config.initial_temperature_scale)
        start_temperature = temperature
        trial_budget = config.trials_per_point * count
        success_limit = config.successes_per_point * count
        accepted_total = 0

        for step in range(1, config.annealing_steps + 1):
            successes = 0
            for _ in range(trial_budget):
                a, b = _pick_segment(rng, count)
                anchor = _pick_insertion(rng, a, b, count) if rng.random() < 0.5 else None
                if anchor is None:
                    delta = tour.reversal_delta(a, b)
                else:
                    delta = tour.transposition_delta(a, b, anchor)

                if delta < 0 or (temperature > 0 and rng.random() < math.exp(-delta / temperature)):
                    if anchor is None:
                        tour.reverse(a, b)
                    else:
                        tour.transpose(a, b, anchor)
                    length += delta
                    successes += 1
                    if successes >= success_limit:
                        break

            accepted_total += successes
            logger.debug(
                f"Annealing step {step}/{config.annealing_steps}: T={temperature:.6g}, "
                f"accepted={successes}, length={length:.6g}"
            )
            temperature *= config.cooling_factor
            progress.report(step / config.annealing_steps)

        progress.finish()
        order = tour.order
        return RouteResult(
            order=order,
            path_length=point_set.path_length(order, closed=config.closed),
            done=True,
            algorithm=self.kind,
            closed=config.closed,
            metadata={
                "strategy": self.kind.value,
                "annealing_steps": config.annealing_steps,
                "initial_path_length": start_length,
                "initial_temperature": start_temperature,
                "final_temperature": temperature,
                "accepted_moves": accepted_total,
            },
        )
