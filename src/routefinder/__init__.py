"""Heuristic shortest-route ordering of 2-D points."""

from .exceptions import (
    EmptyInputError,
    InvalidConfigError,
    InvalidPointError,
    LengthMismatchError,
    MissingPropertyError,
    RouteFinderError,
)
from .models.domain import AlgorithmKind, Direction, Point
from .services.routing.finder import RouteFinder, sorted_objects_by_shortest_route
from .services.routing.models import AlgorithmConfig, RouteResult
from .services.routing.point_set import PointSet
from .services.routing.progress import ProgressSink

__all__ = [
    "AlgorithmConfig",
    "AlgorithmKind",
    "Direction",
    "EmptyInputError",
    "InvalidConfigError",
    "InvalidPointError",
    "LengthMismatchError",
    "MissingPropertyError",
    "Point",
    "PointSet",
    "ProgressSink",
    "RouteFinder",
    "RouteFinderError",
    "RouteResult",
    "sorted_objects_by_shortest_route",
]
