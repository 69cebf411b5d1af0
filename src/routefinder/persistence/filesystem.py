"""Route run archive on the local filesystem.

Each persisted route gets its own directory under ``<data_root>/outputs``
named ``route[_<label>]_<UTC timestamp>`` and holding three files:

* ``summary.json`` - algorithm, length, order, ordered points and metadata
* ``route.csv`` - one row per stop with the distance from the previous stop
* ``route.geojson`` - a FeatureCollection with the route LineString
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from ..config import settings
from ..models.domain import Point
from ..services.export.geojson import export_route_feature_collection, route_to_feature, save_geojson
from ..services.outputs.route_formatter import route_result_to_csv, route_result_to_json
from ..services.routing.models import RouteResult

logger = logging.getLogger(__name__)

SUMMARY_FILE = "summary.json"
ROUTE_CSV_FILE = "route.csv"
ROUTE_GEOJSON_FILE = "route.geojson"


def run_directory_prefix(label: str | None) -> str:
    """``route`` or ``route_<slug>`` where the slug keeps only safe filename characters."""
    if not label:
        return "route"
    slug = re.sub(r"[^A-Za-z0-9_-]+", "_", label).strip("_")
    return f"route_{slug}" if slug else "route"


class FileStorage:
    """Archive of persisted route runs below the configured data root."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, label: str | None = None) -> Path:
        # Microseconds keep back-to-back runs with the same label apart.
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self.output_root / f"{run_directory_prefix(label)}_{timestamp}"
        path.mkdir(parents=True, exist_ok=False)
        return path

    def write_json(self, path: Path, data: Any) -> None:
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)

    def write_csv(self, path: Path, content: str) -> None:
        # The csv module already wrote \r\n row endings; keep them untranslated.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def save_route(
        self,
        result: RouteResult,
        points: Sequence[Point],
        *,
        label: str | None = None,
    ) -> Path:
        """Write the summary, CSV and GeoJSON of a finished route to a new run directory.

        Raises:
            ValueError: ``result`` has not been computed.
            OSError: the directory or one of its files could not be written.
        """
        if not result.done:
            raise ValueError("Route has not been computed yet")

        run_dir = self.make_run_directory(label)
        self.write_json(run_dir / SUMMARY_FILE, route_result_to_json(result, points))
        self.write_csv(run_dir / ROUTE_CSV_FILE, route_result_to_csv(result, points))
        save_geojson(
            export_route_feature_collection([route_to_feature(result, points, name=label)]),
            run_dir / ROUTE_GEOJSON_FILE,
        )
        logger.info(f"Saved route with {len(result.order)} stops to {run_dir}")
        return run_dir

    def load_summary(self, run_dir: Path) -> dict:
        with (run_dir / SUMMARY_FILE).open("r", encoding="utf-8") as handle:
            return json.load(handle)
