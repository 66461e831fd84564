"""2-opt local search for closed tours.

The search is first-improvement: each pass scans index pairs in order and
accepts the first swap that shortens the tour. The next pass starts again from
the top with the shortened tour as its baseline. Passes stop when one finds no
improving swap or when the iteration cap is reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from ...models.domain import Pin
from ..geospatial import route_distance
from .models import Route, Step, StepKind

logger = logging.getLogger(__name__)

NO_IMPROVEMENT_DESCRIPTION = "No further improvements found with 2-opt algorithm"


@dataclass(frozen=True, slots=True)
class SwapFound:
    i: int
    j: int
    route: Route
    distance: float


@dataclass(frozen=True, slots=True)
class NoSwap:
    pass


SwapSearchResult = Union[SwapFound, NoSwap]


@dataclass(frozen=True, slots=True)
class ImprovementResult:
    route: Route
    steps: tuple[Step, ...]


def two_opt_swap(route: Sequence[Pin], i: int, j: int) -> Route:
    """Reverse the segment ``route[i + 1 : j + 1]``.

    Edges (i, i+1) and (j, j+1) are replaced by (i, j) and (i+1, j+1).
    """

    return tuple(route[: i + 1]) + tuple(reversed(route[i + 1 : j + 1])) + tuple(route[j + 1 :])


def candidate_pairs(size: int) -> Iterator[tuple[int, int]]:
    """Yield the (i, j) index pairs examined by a single 2-opt pass."""
    for i in range(size - 2):
        for j in range(i + 2, size):
            # Both edges touch the closing edge of the tour.
            if i == 0 and j == size - 1:
                continue
            yield i, j


def find_improving_swap(route: Sequence[Pin], baseline: float) -> SwapSearchResult:
    for i, j in candidate_pairs(len(route)):
        candidate = two_opt_swap(route, i, j)
        distance = route_distance(candidate)
        if distance < baseline:
            return SwapFound(i=i, j=j, route=candidate, distance=distance)
    return NoSwap()


def describe_swap(swap: SwapFound, baseline: float) -> str:
    return (
        f"Improved route by swapping segments ({swap.i},{swap.i + 1}) and ({swap.j},{swap.j + 1}), "
        f"reducing distance by {baseline - swap.distance:.2f} miles"
    )


def two_opt(initial_route: Sequence[Pin], max_iterations: int) -> ImprovementResult:
    """Refine ``initial_route`` with first-improvement 2-opt.

    Returns the refined route together with one step per accepted swap. When
    no swap is accepted a single ``no-improvement`` step holding the unchanged
    route is returned instead. Routes of two pins or fewer are returned as-is
    with no steps.
    """

    if max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}.")

    route: Route = tuple(initial_route)
    if len(route) <= 2:
        return ImprovementResult(route=route, steps=())

    steps: list[Step] = []
    iterations = 0
    while iterations < max_iterations:
        iterations += 1
        baseline = route_distance(route)
        result = find_improving_swap(route, baseline)
        if isinstance(result, NoSwap):
            logger.debug(f"2-opt converged after {iterations} iteration(s)")
            break
        route = result.route
        steps.append(Step(kind=StepKind.IMPROVEMENT, route=route, description=describe_swap(result, baseline)))
        logger.debug(f"2-opt accepted swap ({result.i}, {result.j}): {baseline:.4f} -> {result.distance:.4f}")
    else:
        if max_iterations:
            logger.debug(f"2-opt stopped at iteration cap {max_iterations}")

    if not steps:
        steps.append(Step(kind=StepKind.NO_IMPROVEMENT, route=route, description=NO_IMPROVEMENT_DESCRIPTION))

    return ImprovementResult(route=route, steps=tuple(steps))
