"""Planar geometry helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Sequence

from shapely.geometry import LineString

from ..exceptions import InvalidPointError
from ..models.domain import Point


def euclidean(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between two coordinates."""

    return math.hypot(x1 - x2, y1 - y2)


def as_point(value: Any) -> Point:
    """Coerce a point-like value into a :class:`Point`.

    Accepts ``Point`` instances, ``(x, y)`` pairs, mappings with ``x``/``y``
    keys and objects exposing ``x`` and ``y`` attributes.
    """

    if isinstance(value, Point):
        x, y = value.x, value.y
    elif isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise InvalidPointError(f"Mapping {value!r} lacks 'x'/'y' keys.")
        x, y = value["x"], value["y"]
    elif isinstance(value, (str, bytes)):
        raise InvalidPointError(f"Cannot read a point from {value!r}.")
    elif hasattr(value, "x") and hasattr(value, "y"):
        x, y = value.x, value.y
    else:
        try:
            coords = tuple(value)
        except TypeError as exc:
            raise InvalidPointError(f"Cannot read a point from {type(value).__name__}.") from exc
        if len(coords) != 2:
            raise InvalidPointError(f"Expected an (x, y) pair, got {len(coords)} values.")
        x, y = coords

    try:
        x, y = float(x), float(y)
    except (TypeError, ValueError) as exc:
        raise InvalidPointError(f"Point coordinates must be numeric, got ({x!r}, {y!r}).") from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidPointError(f"Point coordinates must be finite, got ({x}, {y}).")
    return Point(x, y)


def route_linestring(points: Sequence[Point], *, closed: bool = False) -> LineString:
    """Polyline through ``points`` in order, returning to the start when closed."""

    coords = [point.as_tuple() for point in points]
    if closed and len(coords) > 1:
        coords.append(coords[0])
    if len(coords) == 1:
        # A single stop is a degenerate zero-length line.
        coords.append(coords[0])
    return LineString(coords)
