import pytest

from src.pathfinder.models.domain import Pin
from src.pathfinder.services.geospatial import route_distance
from src.pathfinder.services.tour.improvement import (
    NO_IMPROVEMENT_DESCRIPTION,
    NoSwap,
    SwapFound,
    candidate_pairs,
    find_improving_swap,
    two_opt,
    two_opt_swap,
)
from src.pathfinder.services.tour.models import StepKind

ORIGIN = Pin(1, 0.0, 0.0)
FAR_CORNER = Pin(2, 1.0, 1.0)
NORTH_WEST = Pin(3, 0.0, 1.0)
SOUTH_EAST = Pin(4, 1.0, 0.0)
CROSSED = (ORIGIN, FAR_CORNER, NORTH_WEST, SOUTH_EAST)


def _ids(route):
    return [pin.pin_id for pin in route]


def test_candidate_pairs_skip_the_closing_edge():
    assert list(candidate_pairs(4)) == [(0, 2), (1, 3)]
    assert list(candidate_pairs(5)) == [(0, 2), (0, 3), (1, 3), (1, 4), (2, 4)]
    assert list(candidate_pairs(3)) == []


def test_two_opt_swap_reverses_inner_segment():
    route = tuple(Pin(index, 0.0, float(index)) for index in range(6))

    swapped = two_opt_swap(route, 1, 4)

    assert _ids(swapped) == [0, 1, 4, 3, 2, 5]
    assert _ids(route) == [0, 1, 2, 3, 4, 5]


def test_find_improving_swap_takes_first_improvement():
    baseline = route_distance(CROSSED)

    result = find_improving_swap(CROSSED, baseline)

    assert isinstance(result, SwapFound)
    assert (result.i, result.j) == (0, 2)
    assert result.distance < baseline


def test_find_improving_swap_reports_no_swap_on_perimeter():
    perimeter = (ORIGIN, NORTH_WEST, FAR_CORNER, SOUTH_EAST)
    assert isinstance(find_improving_swap(perimeter, route_distance(perimeter)), NoSwap)


def test_two_opt_uncrosses_square():
    result = two_opt(CROSSED, max_iterations=100)

    assert _ids(result.route) == [1, 3, 2, 4]
    assert route_distance(result.route) < route_distance(CROSSED)
    assert len(result.steps) == 1
    step = result.steps[0]
    assert step.kind is StepKind.IMPROVEMENT
    assert step.route == result.route
    assert step.description.startswith("Improved route by swapping segments (0,1) and (2,3), reducing distance by ")
    assert step.description.endswith(" miles")


def test_two_opt_is_idempotent_on_its_output():
    first = two_opt(CROSSED, max_iterations=100)

    second = two_opt(first.route, max_iterations=100)

    assert second.route == first.route
    assert len(second.steps) == 1
    assert second.steps[0].kind is StepKind.NO_IMPROVEMENT
    assert second.steps[0].description == NO_IMPROVEMENT_DESCRIPTION


def test_two_opt_respects_zero_iteration_cap():
    result = two_opt(CROSSED, max_iterations=0)

    assert result.route == CROSSED
    assert [step.kind for step in result.steps] == [StepKind.NO_IMPROVEMENT]
    assert result.steps[0].route == CROSSED


def test_two_opt_cap_limits_accepted_swaps():
    pins = tuple(
        Pin(pin_id, lat, lng)
        for pin_id, (lat, lng) in enumerate(
            [(0.0, 0.0), (1.0, 1.0), (0.0, 2.0), (1.0, 0.0), (0.0, 1.0), (1.0, 2.0)], start=1
        )
    )
    uncapped = two_opt(pins, max_iterations=100)
    assert len(uncapped.steps) >= 2

    capped = two_opt(pins, max_iterations=1)

    assert len(capped.steps) == 1
    assert capped.steps[0].kind is StepKind.IMPROVEMENT


@pytest.mark.parametrize("route", [(), (ORIGIN,), (ORIGIN, FAR_CORNER)])
def test_two_opt_short_routes_are_returned_unchanged(route):
    result = two_opt(route, max_iterations=100)

    assert result.route == route
    assert result.steps == ()


def test_two_opt_rejects_negative_cap():
    with pytest.raises(ValueError):
        two_opt(CROSSED, max_iterations=-1)
