"""Human-readable solution reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..tour.models import Solution

FEET_PER_MILE = 5280
NOT_ENOUGH_POINTS = "Not enough points to create a route."


def format_distance(distance: float) -> str:
    """Format a distance in miles, switching to whole feet below a tenth of a mile."""
    if distance < 0.1:
        return f"{distance * FEET_PER_MILE:.0f} feet"
    return f"{distance:.2f} miles"


@dataclass(slots=True)
class TourReport:
    total_distance: str
    stops: List[str] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.stops


def build_report(solution: Solution) -> TourReport:
    if len(solution.route) < 2:
        return TourReport(total_distance=format_distance(0.0))

    stops = [
        f"Pin #{pin.pin_id} ({pin.latitude:.4f}, {pin.longitude:.4f})"
        for pin in solution.route
    ]
    stops.append(f"Return to Pin #{solution.route[0].pin_id}")
    return TourReport(
        total_distance=format_distance(solution.distance),
        stops=stops,
        steps=[step.description for step in solution.steps],
    )


def render_report(report: TourReport) -> str:
    if report.is_empty:
        return NOT_ENOUGH_POINTS

    lines = [f"Total Distance: {report.total_distance}", "", "Route Order:"]
    lines.extend(f"{position}. {stop}" for position, stop in enumerate(report.stops, start=1))
    if report.steps:
        lines.extend(["", "Algorithm Steps:"])
        lines.extend(f"- {description}" for description in report.steps)
    return "\n".join(lines) + "\n"


def generate_report(solution: Solution) -> str:
    return render_report(build_report(solution))
