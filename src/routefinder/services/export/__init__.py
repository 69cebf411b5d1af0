"""Export services."""

from .geojson import (
    export_route_feature_collection,
    route_to_feature,
    route_to_wkt,
    save_geojson,
)

__all__ = [
    "route_to_feature",
    "route_to_wkt",
    "export_route_feature_collection",
    "save_geojson",
]
