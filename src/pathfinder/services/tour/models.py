"""Tour solving domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ...models.domain import Pin

Route = Tuple[Pin, ...]


class StepKind(str, Enum):
    INITIAL = "initial"
    IMPROVEMENT = "improvement"
    NO_IMPROVEMENT = "no-improvement"


@dataclass(frozen=True, slots=True)
class Step:
    kind: StepKind
    route: Route
    description: str


@dataclass(frozen=True, slots=True)
class Solution:
    route: Route
    distance: float
    steps: Tuple[Step, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls, route: Route = ()) -> "Solution":
        """Degenerate result for inputs too small to form a tour."""
        return cls(route=route, distance=0.0, steps=())
