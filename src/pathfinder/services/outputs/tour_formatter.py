"""Serializers for tour solving outputs."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...models.domain import Pin
from ..geospatial import pin_distance
from ..tour.models import Solution


def pin_to_json(pin: Pin) -> dict:
    return {"id": pin.pin_id, "lat": pin.latitude, "lng": pin.longitude}


def route_to_json(route: Sequence[Pin]) -> list[dict]:
    return [pin_to_json(pin) for pin in route]


def solution_to_json(solution: Solution) -> dict:
    return {
        "distance_miles": solution.distance,
        "route": route_to_json(solution.route),
        "steps": [
            {
                "type": step.kind.value,
                "description": step.description,
                "route": [pin.pin_id for pin in step.route],
            }
            for step in solution.steps
        ],
    }


def solution_to_csv(solution: Solution) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "pin_id",
        "latitude",
        "longitude",
        "distance_from_prev_miles",
        "total_distance_miles",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    route = solution.route
    for sequence, pin in enumerate(route, start=1):
        previous = route[sequence - 2] if sequence > 1 else None
        writer.writerow(
            {
                "sequence": sequence,
                "pin_id": pin.pin_id,
                "latitude": pin.latitude,
                "longitude": pin.longitude,
                "distance_from_prev_miles": pin_distance(previous, pin) if previous is not None else 0.0,
                "total_distance_miles": solution.distance,
            }
        )
    if len(route) >= 2:
        # closing leg back to the start
        writer.writerow(
            {
                "sequence": len(route) + 1,
                "pin_id": route[0].pin_id,
                "latitude": route[0].latitude,
                "longitude": route[0].longitude,
                "distance_from_prev_miles": pin_distance(route[-1], route[0]),
                "total_distance_miles": solution.distance,
            }
        )
    return buffer.getvalue()
