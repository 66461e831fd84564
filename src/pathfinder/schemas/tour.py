"""Tour solving request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import Pin


class PinModel(BaseModel):
    id: int
    lat: float = Field(..., allow_inf_nan=False)
    lng: float = Field(..., allow_inf_nan=False)

    def to_domain(self) -> Pin:
        return Pin(pin_id=self.id, latitude=self.lat, longitude=self.lng)

    @classmethod
    def from_domain(cls, pin: Pin) -> "PinModel":
        return cls(id=pin.pin_id, lat=pin.latitude, lng=pin.longitude)


class SolveRequest(BaseModel):
    pins: List[PinModel] = Field(default_factory=list)
    max_iterations: Optional[int] = Field(
        default=None,
        ge=0,
        description="Override for the 2-opt outer-iteration cap. Defaults to the configured value.",
    )
    persist: bool = False
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")


class StepModel(BaseModel):
    type: Literal["initial", "improvement", "no-improvement"]
    description: str
    route: List[PinModel]


class SolveResponse(BaseModel):
    route: List[PinModel]
    distance_miles: float
    distance_display: str
    steps: List[StepModel]
    report: str
    metadata: dict


class DistanceRequest(BaseModel):
    route: List[PinModel]


class DistanceResponse(BaseModel):
    distance_miles: float
    distance_display: str


class PinImportRequest(BaseModel):
    content: str = Field(..., description="Raw contents of a pin file.")


class PinSetResponse(BaseModel):
    pins: List[PinModel]
    next_id: int


class PinExportRequest(BaseModel):
    pins: List[PinModel]


class ClientConfigResponse(BaseModel):
    map_center: List[float]
    initial_zoom: int
    min_zoom: int
    max_zoom: int
    map_bounds: List[List[float]]
    max_pins: int
    two_opt_iterations: int
    show_animation: bool
    animation_delay_ms: int


class TourRunModel(BaseModel):
    id: str
    created_at: Optional[datetime] = None
    run_label: Optional[str] = None
    pin_count: int = 0
    distance_miles: Optional[float] = None
    files: List[str] = Field(default_factory=list)
