"""Closed-tour solver: nearest-neighbour construction refined by 2-opt."""

from __future__ import annotations

import logging
from typing import Iterable

from ...models.domain import Pin
from ..geospatial import route_distance
from .construction import nearest_neighbor
from .improvement import two_opt
from .models import Solution, Step, StepKind

logger = logging.getLogger(__name__)

INITIAL_DESCRIPTION = "Initial route using nearest neighbor algorithm"


def solve(pins: Iterable[Pin], *, max_iterations: int) -> Solution:
    """Return an approximate shortest closed tour through ``pins``.

    The caller's collection is copied and never modified. Fewer than two pins
    produce a degenerate solution with zero distance and no steps.
    """

    points = tuple(pins)
    for point in points:
        if not isinstance(point, Pin):
            raise TypeError(f"Expected Pin instances, got {type(point).__name__}.")

    if len(points) < 2:
        return Solution.empty(points)

    route = nearest_neighbor(points)
    initial_distance = route_distance(route)
    steps = [Step(kind=StepKind.INITIAL, route=route, description=INITIAL_DESCRIPTION)]

    improved = two_opt(route, max_iterations)
    steps.extend(improved.steps)

    distance = route_distance(improved.route)
    logger.debug(
        f"Solved tour over {len(points)} pins: {initial_distance:.4f} -> {distance:.4f} miles "
        f"({len(improved.steps)} improvement step(s))"
    )
    return Solution(route=improved.route, distance=distance, steps=tuple(steps))
