"""Serializers for route outputs."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...models.domain import Point
from ..geometry import euclidean
from ..routing.models import RouteResult


def route_result_to_json(result: RouteResult, points: Sequence[Point]) -> dict:
    return {
        "algorithm": result.algorithm.value if result.algorithm else None,
        "closed": result.closed,
        "path_length": result.path_length,
        "order": list(result.order),
        "points": [{"x": points[index].x, "y": points[index].y} for index in result.order],
        "metadata": dict(result.metadata),
    }


def route_result_to_csv(result: RouteResult, points: Sequence[Point]) -> str:
    buffer = io.StringIO()
    fieldnames = ["sequence", "index", "x", "y", "distance_from_prev"]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    previous: Point | None = None
    for sequence, index in enumerate(result.order, start=1):
        point = points[index]
        step = euclidean(previous.x, previous.y, point.x, point.y) if previous else 0.0
        writer.writerow(
            {
                "sequence": sequence,
                "index": index,
                "x": point.x,
                "y": point.y,
                "distance_from_prev": step,
            }
        )
        previous = point
    return buffer.getvalue()
