from pathlib import Path

import pytest

from routefinder.exceptions import EmptyInputError, RouteFinderError
from routefinder.schemas.routing import RouteRequest
from routefinder.services.routing import service as routing_service


def _request(points, **options) -> RouteRequest:
    return RouteRequest(points=[{"x": x, "y": y} for x, y in points], **options)


def test_optimize_route_persists_outputs(monkeypatch, tmp_path: Path, square_points):
    original_storage = routing_service.FileStorage
    monkeypatch.setattr(routing_service, "FileStorage", lambda: original_storage(root=tmp_path))

    request = _request(square_points, algorithm="nearest_neighbour", persist=True, run_label="Square run")
    response = routing_service.optimize_route(request)

    assert response.order == [0, 1, 2, 3]
    assert response.path_length == pytest.approx(30.0)
    overlays = response.metadata.get("map_overlays", {}).get("routes", [])
    assert overlays, "Expected route overlays in metadata"
    assert len(overlays[0]["coordinates"]) == 4

    run_dirs = list((tmp_path / "outputs").iterdir())
    assert len(run_dirs) == 1
    run_dir = run_dirs[0]
    assert run_dir.name.startswith("route_Square_run_")
    assert (run_dir / "summary.json").exists()
    assert (run_dir / "route.csv").exists()
    assert (run_dir / "route.geojson").exists()
    assert response.metadata["output_directory"] == str(run_dir)


def test_optimize_route_closed_overlay_returns_to_start(square_points):
    response = routing_service.optimize_route(_request(square_points, algorithm="nearest_neighbour", closed=True))

    coordinates = response.metadata["map_overlays"]["routes"][0]["coordinates"]
    assert coordinates[0] == coordinates[-1]
    assert response.path_length == pytest.approx(40.0)
    assert response.closed


def test_optimize_route_annealing_with_seed(scattered_points):
    request = _request(scattered_points, algorithm="simulated_annealing", annealing_steps=5, seed=8)

    first = routing_service.optimize_route(request)
    second = routing_service.optimize_route(request)

    assert first.order == second.order
    assert first.metadata["point_count"] == len(scattered_points)
    assert first.metadata["annealing_steps"] == 5


def test_optimize_route_rejects_empty_points():
    with pytest.raises(EmptyInputError):
        routing_service.optimize_route(_request([]))


def test_optimize_route_rejects_too_many_points(monkeypatch, square_points):
    monkeypatch.setattr(routing_service.settings, "max_points_per_request", 3)

    with pytest.raises(RouteFinderError):
        routing_service.optimize_route(_request(square_points))


def test_optimize_route_uses_configured_defaults_for_omitted_fields(square_points):
    response = routing_service.optimize_route(_request(square_points, algorithm="nearest_neighbour"))

    assert response.closed is routing_service.settings.closed_tour
    assert response.metadata["direction"] == routing_service.settings.default_direction
