import pytest

from src.pathfinder.models.domain import Pin
from src.pathfinder.services.tour.construction import nearest_neighbor


def _ids(route):
    return [pin.pin_id for pin in route]


def test_nearest_neighbor_single_pin():
    pin = Pin(1, 40.7, -74.0)
    assert nearest_neighbor([pin]) == (pin,)


def test_nearest_neighbor_rejects_empty_input():
    with pytest.raises(ValueError):
        nearest_neighbor([])


def test_nearest_neighbor_starts_with_first_pin_and_follows_closest():
    pins = [
        Pin(1, 0.0, 0.0),
        Pin(2, 0.0, 3.0),
        Pin(3, 0.0, 1.0),
        Pin(4, 0.0, 2.0),
    ]
    assert _ids(nearest_neighbor(pins)) == [1, 3, 4, 2]


def test_nearest_neighbor_ties_go_to_earliest_unvisited():
    pins = [
        Pin(1, 0.0, 0.0),
        Pin(2, 1.0, 0.0),
        Pin(3, 0.0, 1.0),
    ]
    assert _ids(nearest_neighbor(pins))[:2] == [1, 2]

    reordered = [pins[0], pins[2], pins[1]]
    assert _ids(nearest_neighbor(reordered))[:2] == [1, 3]


def test_nearest_neighbor_does_not_mutate_input():
    pins = [Pin(1, 0.0, 0.0), Pin(2, 0.0, 3.0), Pin(3, 0.0, 1.0)]
    original = list(pins)

    route = nearest_neighbor(pins)

    assert pins == original
    assert sorted(_ids(route)) == [1, 2, 3]
