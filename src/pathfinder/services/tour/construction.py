"""Nearest-neighbour tour construction."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Pin
from ..geospatial import pin_distance
from .models import Route


def nearest_neighbor(pins: Sequence[Pin]) -> Route:
    """Build a greedy tour starting from the first pin.

    Each step extends the route with the closest unvisited pin. Ties go to the
    pin that appears first in the remaining input order.
    """

    if not pins:
        raise ValueError("Nearest neighbour construction requires at least one pin.")

    route = [pins[0]]
    unvisited = list(pins[1:])

    while unvisited:
        last = route[-1]
        nearest_index = 0
        min_distance = pin_distance(last, unvisited[0])
        for index in range(1, len(unvisited)):
            distance = pin_distance(last, unvisited[index])
            if distance < min_distance:
                min_distance = distance
                nearest_index = index
        route.append(unvisited.pop(nearest_index))

    return tuple(route)
