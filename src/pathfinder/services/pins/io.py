"""Import/export of pin sets in the map client's JSON file format.

A pin file is a JSON array of ``{"id": <int>, "lat": <float>, "lng": <float>}``
objects.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from ...models.domain import InvalidPinError, Pin


class PinLimitError(ValueError):
    """Raised when a pin set exceeds the configured maximum."""


def export_pins(pins: Sequence[Pin]) -> str:
    payload = [{"id": pin.pin_id, "lat": pin.latitude, "lng": pin.longitude} for pin in pins]
    return json.dumps(payload, indent=2)


def _pin_from_entry(position: int, entry: Any) -> Pin:
    if not isinstance(entry, dict):
        raise InvalidPinError(f"Entry {position} is not an object.")
    missing = [key for key in ("id", "lat", "lng") if key not in entry]
    if missing:
        raise InvalidPinError(f"Entry {position} is missing {', '.join(missing)}.")
    return Pin(pin_id=entry["id"], latitude=entry["lat"], longitude=entry["lng"])


def import_pins(text: str) -> list[Pin]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidPinError(f"Pin file is not valid JSON: {exc.msg}.") from exc
    if not isinstance(data, list):
        raise InvalidPinError("Invalid pin data format: expected a JSON array.")

    pins = [_pin_from_entry(position, entry) for position, entry in enumerate(data)]
    ensure_unique_ids(pins)
    return pins


def ensure_unique_ids(pins: Sequence[Pin]) -> None:
    seen: set[int] = set()
    for pin in pins:
        if pin.pin_id in seen:
            raise InvalidPinError(f"Duplicate pin id {pin.pin_id}.")
        seen.add(pin.pin_id)


def next_pin_id(pins: Sequence[Pin]) -> int:
    """Return the id the client should assign to the next placed pin."""
    return max((pin.pin_id for pin in pins), default=0) + 1


def check_pin_limit(pins: Sequence[Pin], max_pins: int) -> None:
    if len(pins) > max_pins:
        raise PinLimitError(f"You can only place up to {max_pins} pins on the map (got {len(pins)}).")
