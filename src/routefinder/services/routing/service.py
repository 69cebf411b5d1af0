"""Routing orchestration service."""

from __future__ import annotations

import logging

from ...config import settings
from ...exceptions import RouteFinderError
from ...persistence.filesystem import FileStorage
from ...schemas.routing import PointModel, RouteRequest, RouteResponse
from .finder import RouteFinder

logger = logging.getLogger(__name__)

_SOLVER_OPTIONS = ("algorithm", "annealing_steps", "direction", "closed", "seed")


def optimize_route(payload: RouteRequest) -> RouteResponse:
    if len(payload.points) > settings.max_points_per_request:
        raise RouteFinderError(
            f"Too many points: {len(payload.points)} (maximum {settings.max_points_per_request})."
        )

    # Omitted request fields fall back to the configured defaults.
    options = {
        name: getattr(payload, name) for name in _SOLVER_OPTIONS if getattr(payload, name) is not None
    }
    finder = RouteFinder.from_points([(point.x, point.y) for point in payload.points], **options)
    result = finder.solve()
    ordered = finder.shortest_route()

    metadata = dict(result.metadata)
    metadata["map_overlays"] = {
        "routes": [
            {
                "coordinates": [[point.x, point.y] for point in ordered]
                + ([[ordered[0].x, ordered[0].y]] if result.closed and len(ordered) > 1 else []),
                "source": "straight_line",
            }
        ]
    }

    if payload.persist:
        try:
            run_dir = FileStorage().save_route(result, finder.point_set.points, label=payload.run_label)
            metadata["output_directory"] = str(run_dir)
        except OSError as exc:
            logger.warning(f"Failed to persist route outputs: {exc}")
            metadata["persist_error"] = str(exc)

    return RouteResponse(
        algorithm=result.algorithm.value if result.algorithm else finder.algorithm.value,
        closed=result.closed,
        path_length=result.path_length,
        order=list(result.order),
        points=[PointModel(x=point.x, y=point.y) for point in ordered],
        metadata=metadata,
    )
