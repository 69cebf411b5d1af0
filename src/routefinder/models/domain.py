"""Domain models for route points and algorithm choices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True, frozen=True)
class Point:
    """A location in the plane."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class AlgorithmKind(str, Enum):
    SIMULATED_ANNEALING = "simulated_annealing"
    NEAREST_NEIGHBOUR = "nearest_neighbour"


class Direction(str, Enum):
    """Preferred heading for the nearest neighbour search.

    Candidates are compared against the current point: east means ``dx >= 0``,
    west ``dx <= 0``, south ``dy <= 0`` and north ``dy >= 0``.
    """

    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH = "north"
    ANY = "any"
