"""Tour solving orchestration service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from ...config import settings
from ...models.domain import Pin
from ...persistence.filesystem import FileStorage
from ...schemas.tour import (
    ClientConfigResponse,
    DistanceRequest,
    DistanceResponse,
    PinModel,
    SolveRequest,
    SolveResponse,
    StepModel,
)
from ..geospatial import route_distance
from ..outputs.report import build_report, format_distance, render_report
from ..outputs.tour_formatter import solution_to_csv, solution_to_json
from ..pins import check_pin_limit, ensure_unique_ids
from .models import Solution, StepKind
from .solver import solve


def _to_pins(models: Sequence[PinModel]) -> list[Pin]:
    pins = [model.to_domain() for model in models]
    ensure_unique_ids(pins)
    return pins


def _persist_solution(solution: Solution, report_text: str, payload: SolveRequest, metadata: dict) -> str:
    storage = FileStorage()
    run_dir = storage.make_run_directory(prefix="tour")
    summary = {
        "run_label": payload.run_label,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "pin_count": len(payload.pins),
        "metadata": metadata,
        **solution_to_json(solution),
    }
    storage.write_json(run_dir / "summary.json", summary)
    storage.write_text(run_dir / "route.csv", solution_to_csv(solution))
    storage.write_text(run_dir / "report.txt", report_text)
    logging.info(f"Persisted tour outputs to {run_dir}")
    return run_dir.name


def build_solve_response(solution: Solution, metadata: dict) -> SolveResponse:
    report_text = render_report(build_report(solution))
    return SolveResponse(
        route=[PinModel.from_domain(pin) for pin in solution.route],
        distance_miles=solution.distance,
        distance_display=format_distance(solution.distance),
        steps=[
            StepModel(
                type=step.kind.value,
                description=step.description,
                route=[PinModel.from_domain(pin) for pin in step.route],
            )
            for step in solution.steps
        ],
        report=report_text,
        metadata=metadata,
    )


def solve_tour(payload: SolveRequest) -> SolveResponse:
    pins = _to_pins(payload.pins)
    check_pin_limit(pins, settings.max_pins)

    max_iterations = payload.max_iterations if payload.max_iterations is not None else settings.two_opt_iterations
    logging.info(f"Solving tour for {len(pins)} pins (max 2-opt iterations: {max_iterations})")

    solution = solve(pins, max_iterations=max_iterations)

    improvements = sum(1 for step in solution.steps if step.kind is StepKind.IMPROVEMENT)
    metadata: dict = {
        "status": "solved" if len(solution.route) >= 2 else "not_enough_pins",
        "pin_count": len(pins),
        "max_iterations": max_iterations,
        "improvements": improvements,
    }
    if solution.steps:
        metadata["initial_distance_miles"] = route_distance(solution.steps[0].route)

    response = build_solve_response(solution, metadata)
    if payload.persist:
        metadata["run_id"] = _persist_solution(solution, response.report, payload, dict(metadata))
        response.metadata = metadata

    logging.info(
        f"Tour solved: {len(solution.route)} stops, {format_distance(solution.distance)}, "
        f"{improvements} improvement(s)"
    )
    return response


def measure_route(payload: DistanceRequest) -> DistanceResponse:
    route = _to_pins(payload.route)
    distance = route_distance(route)
    return DistanceResponse(distance_miles=distance, distance_display=format_distance(distance))


def client_config() -> ClientConfigResponse:
    south, west, north, east = settings.map_bounds
    return ClientConfigResponse(
        map_center=list(settings.map_center),
        initial_zoom=settings.initial_zoom,
        min_zoom=settings.min_zoom,
        max_zoom=settings.max_zoom,
        map_bounds=[[south, west], [north, east]],
        max_pins=settings.max_pins,
        two_opt_iterations=settings.two_opt_iterations,
        show_animation=settings.show_animation,
        animation_delay_ms=settings.animation_delay_ms,
    )


def tour_report(payload: SolveRequest) -> str:
    return solve_tour(payload.model_copy(update={"persist": False})).report
