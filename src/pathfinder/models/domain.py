"""Domain models for map pins."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real


class InvalidPinError(ValueError):
    """Raised when pin data is missing or cannot be used for distance calculations."""


def _check_coordinate(pin_id: object, field: str, value: object) -> None:
    if value is None:
        raise InvalidPinError(f"Pin #{pin_id} is missing {field}.")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPinError(f"Pin #{pin_id} has a non-numeric {field}: {value!r}.")
    if not math.isfinite(value):
        raise InvalidPinError(f"Pin #{pin_id} has a non-finite {field}: {value!r}.")


@dataclass(frozen=True, slots=True)
class Pin:
    """A caller-supplied location identified by a stable integer id.

    Pins are immutable values, so a route snapshot holding them cannot be
    altered by later reordering.
    """

    pin_id: int
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if isinstance(self.pin_id, bool) or not isinstance(self.pin_id, Integral):
            raise InvalidPinError(f"Pin id must be an integer, got {self.pin_id!r}.")
        _check_coordinate(self.pin_id, "latitude", self.latitude)
        _check_coordinate(self.pin_id, "longitude", self.longitude)
