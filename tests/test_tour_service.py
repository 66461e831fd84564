import json
from pathlib import Path

import pytest

from src.pathfinder.config import settings
from src.pathfinder.models.domain import InvalidPinError
from src.pathfinder.schemas.tour import DistanceRequest, PinModel, SolveRequest
from src.pathfinder.services.pins import PinLimitError
from src.pathfinder.services.tour import service as tour_service

SQUARE_CROSSED = [
    PinModel(id=1, lat=0.0, lng=0.0),
    PinModel(id=2, lat=1.0, lng=1.0),
    PinModel(id=3, lat=0.0, lng=1.0),
    PinModel(id=4, lat=1.0, lng=0.0),
]


@pytest.fixture(autouse=True)
def isolated_data_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(settings, "data_root", tmp_path)
    return tmp_path


def test_solve_tour_returns_perimeter(isolated_data_root: Path):
    response = tour_service.solve_tour(SolveRequest(pins=SQUARE_CROSSED))

    assert [pin.id for pin in response.route] == [1, 3, 2, 4]
    assert response.distance_miles == pytest.approx(4 * 69.09, rel=0.01)
    assert response.distance_display.endswith(" miles")
    assert response.steps[0].type == "initial"
    assert response.metadata["status"] == "solved"
    assert response.metadata["pin_count"] == 4
    assert response.metadata["max_iterations"] == settings.two_opt_iterations
    assert response.report.startswith("Total Distance: ")
    assert not (isolated_data_root / "outputs").exists()


def test_solve_tour_not_enough_pins():
    response = tour_service.solve_tour(SolveRequest(pins=SQUARE_CROSSED[:1]))

    assert [pin.id for pin in response.route] == [1]
    assert response.distance_miles == 0.0
    assert response.steps == []
    assert response.metadata["status"] == "not_enough_pins"
    assert response.report == "Not enough points to create a route."


def test_solve_tour_iteration_override():
    response = tour_service.solve_tour(SolveRequest(pins=SQUARE_CROSSED, max_iterations=0))

    assert [step.type for step in response.steps] == ["initial", "no-improvement"]
    assert response.metadata["max_iterations"] == 0
    assert response.metadata["improvements"] == 0


def test_solve_tour_enforces_pin_limit(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "max_pins", 3)

    with pytest.raises(PinLimitError):
        tour_service.solve_tour(SolveRequest(pins=SQUARE_CROSSED))


def test_solve_tour_rejects_duplicate_ids():
    pins = SQUARE_CROSSED + [PinModel(id=1, lat=0.5, lng=0.5)]

    with pytest.raises(InvalidPinError, match="Duplicate"):
        tour_service.solve_tour(SolveRequest(pins=pins))


def test_solve_tour_persists_outputs(isolated_data_root: Path):
    response = tour_service.solve_tour(SolveRequest(pins=SQUARE_CROSSED, persist=True, run_label="square"))

    run_id = response.metadata["run_id"]
    run_dir = isolated_data_root / "outputs" / run_id
    assert (run_dir / "summary.json").exists()
    assert (run_dir / "route.csv").exists()
    assert (run_dir / "report.txt").read_text(encoding="utf-8") == response.report

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["run_label"] == "square"
    assert summary["pin_count"] == 4
    assert [pin["id"] for pin in summary["route"]] == [1, 3, 2, 4]


def test_measure_route_closes_the_loop():
    response = tour_service.measure_route(DistanceRequest(route=SQUARE_CROSSED[:2]))

    assert response.distance_miles == pytest.approx(2 * 97.7, rel=0.01)
    assert response.distance_display.endswith(" miles")


def test_client_config_reflects_settings():
    config = tour_service.client_config()

    assert config.max_pins == settings.max_pins
    assert config.map_center == [40.7128, -74.0060]
    assert config.map_bounds == [[40.4774, -74.2591], [40.9176, -73.7004]]
