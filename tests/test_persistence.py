from pathlib import Path

import pytest

from routefinder.persistence.filesystem import FileStorage, run_directory_prefix
from routefinder.services.routing.finder import RouteFinder
from routefinder.services.routing.models import RouteResult


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(label="test")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"
    assert run_dir.name.startswith("route_test_")


def test_back_to_back_runs_get_distinct_directories(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    first = storage.make_run_directory()
    second = storage.make_run_directory()

    assert first != second


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        (None, "route"),
        ("", "route"),
        ("Square run", "route_Square_run"),
        ("../etc/passwd", "route_etc_passwd"),
        ("///", "route"),
    ],
)
def test_run_directory_prefix(label, expected) -> None:
    assert run_directory_prefix(label) == expected


def test_file_storage_writes_json_and_csv(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(label="test")

    summary_path = run_dir / "summary.json"
    route_path = run_dir / "route.csv"

    storage.write_json(summary_path, {"hello": "world"})
    storage.write_csv(route_path, "a,b\r\n1,2\r\n")

    assert summary_path.read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert route_path.read_bytes() == b"a,b\r\n1,2\r\n"


def test_save_route_writes_summary_csv_and_geojson(tmp_path: Path, square_points) -> None:
    storage = FileStorage(root=tmp_path)
    finder = RouteFinder(square_points, algorithm="nearest_neighbour")

    run_dir = storage.save_route(finder.result, finder.point_set.points, label="square")

    assert run_dir.name.startswith("route_square_")
    summary = storage.load_summary(run_dir)
    assert summary["order"] == [0, 1, 2, 3]
    assert summary["path_length"] == pytest.approx(30.0)
    assert summary["metadata"]["point_count"] == 4
    rows = (run_dir / "route.csv").read_text(encoding="utf-8").splitlines()
    assert len(rows) == 5
    assert (run_dir / "route.geojson").exists()


def test_save_route_rejects_unfinished_result(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    with pytest.raises(ValueError):
        storage.save_route(RouteResult(), [])
    assert list((tmp_path / "outputs").iterdir()) == []
