"""Persisted run endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path, Query, status
from fastapi.responses import FileResponse

from ...schemas.tour import TourRunModel
from ...services.reports import list_runs, resolve_export_file

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/runs", response_model=list[TourRunModel])
def get_report_runs(
    limit: int | None = Query(default=None, gt=0, description="Maximum number of runs to return"),
) -> list[TourRunModel]:
    return [TourRunModel.model_validate(item) for item in list_runs(limit=limit)]


@router.get("/runs/{run_id}/{file_name}", response_class=FileResponse, status_code=status.HTTP_200_OK)
def download_run_file(
    run_id: str = Path(..., description="Run directory identifier"),
    file_name: str = Path(..., description="File name within the run directory"),
) -> FileResponse:
    try:
        file_path = resolve_export_file(run_id, file_name)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return FileResponse(
        path=file_path,
        filename=file_path.name,
        media_type=_get_media_type(file_path),
        headers={"Content-Disposition": f'attachment; filename="{file_path.name}"'},
    )


def _get_media_type(file_path) -> str:
    """Determine MIME type based on file extension."""
    mime_types = {
        ".csv": "text/csv",
        ".json": "application/json",
        ".txt": "text/plain",
    }
    return mime_types.get(file_path.suffix.lower(), "application/octet-stream")
