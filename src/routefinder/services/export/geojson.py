"""GeoJSON/WKT export utilities for computed routes."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any, Dict, Sequence

from shapely.geometry import mapping

from ...models.domain import Point
from ..geometry import route_linestring
from ..routing.models import RouteResult


def route_to_wkt(points: Sequence[Point], *, closed: bool = False) -> str:
    """Render the ordered route as a WKT LINESTRING."""

    if not points:
        raise ValueError("Route must contain at least one point")
    return route_linestring(points, closed=closed).wkt


def route_to_feature(
    result: RouteResult,
    points: Sequence[Point],
    *,
    name: str | None = None,
) -> Dict[str, Any]:
    """Convert a finished route into a GeoJSON Feature.

    Args:
        result: Completed route result
        points: The input points, indexed as in ``result.order``

    Returns:
        Feature dict with a LineString geometry in route order
    """
    if not result.done:
        raise ValueError("Route has not been computed yet")

    ordered = [points[index] for index in result.order]
    line = route_linestring(ordered, closed=result.closed)
    return {
        "type": "Feature",
        "id": str(uuid.uuid4()),
        "geometry": mapping(line),
        "properties": {
            "name": name,
            "algorithm": result.algorithm.value if result.algorithm else None,
            "closed": result.closed,
            "path_length": result.path_length,
            "order": list(result.order),
        },
    }


def export_route_feature_collection(features: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


def save_geojson(data: Dict[str, Any], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=False)
