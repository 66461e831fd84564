"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from ..models.domain import Pin

EARTH_RADIUS_MILES = 3958.8


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def pin_distance(first: Pin, second: Pin) -> float:
    return haversine_miles(first.latitude, first.longitude, second.latitude, second.longitude)


def route_distance(route: Sequence[Pin]) -> float:
    """Return the length of the closed tour through ``route`` in miles.

    The last pin connects back to the first; routes with fewer than two pins
    have no tour and measure zero.
    """

    if len(route) < 2:
        return 0.0
    total = 0.0
    for index, pin in enumerate(route):
        total += pin_distance(pin, route[(index + 1) % len(route)])
    return total
