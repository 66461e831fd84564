"""Pin file endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...config import settings
from ...schemas.tour import PinExportRequest, PinImportRequest, PinModel, PinSetResponse
from ...services.pins import check_pin_limit, ensure_unique_ids, export_pins, import_pins, next_pin_id

router = APIRouter(prefix="/pins", tags=["pins"])


@router.post("/import", response_model=PinSetResponse, status_code=status.HTTP_200_OK)
def import_pin_file(payload: PinImportRequest) -> PinSetResponse:
    """Validate an uploaded pin file and return the pins it contains."""
    try:
        pins = import_pins(payload.content)
        check_pin_limit(pins, settings.max_pins)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PinSetResponse(pins=[PinModel.from_domain(pin) for pin in pins], next_id=next_pin_id(pins))


@router.post("/export", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def export_pin_file(payload: PinExportRequest) -> PlainTextResponse:
    if not payload.pins:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="There are no pins to export.")
    try:
        pins = [model.to_domain() for model in payload.pins]
        ensure_unique_ids(pins)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PlainTextResponse(
        export_pins(pins),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="pins.json"'},
    )
