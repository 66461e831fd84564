"""Tour solving endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...schemas.tour import (
    ClientConfigResponse,
    DistanceRequest,
    DistanceResponse,
    SolveRequest,
    SolveResponse,
)
from ...services.tour.service import client_config, measure_route, solve_tour, tour_report

router = APIRouter(tags=["tour"])


@router.get("/config", response_model=ClientConfigResponse, status_code=status.HTTP_200_OK)
def get_client_config() -> ClientConfigResponse:
    """Map and solver settings the browser client needs at startup."""
    return client_config()


@router.post("/tour/solve", response_model=SolveResponse, status_code=status.HTTP_200_OK)
def solve(payload: SolveRequest) -> SolveResponse:
    try:
        return solve_tour(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error solving tour: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to solve tour: {str(exc)}"
        ) from exc


@router.post("/tour/distance", response_model=DistanceResponse, status_code=status.HTTP_200_OK)
def distance(payload: DistanceRequest) -> DistanceResponse:
    """Recompute the closed-tour distance of a route edited by the client."""
    try:
        return measure_route(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/tour/report", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def report(payload: SolveRequest) -> PlainTextResponse:
    try:
        return PlainTextResponse(tour_report(payload))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error generating tour report: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate report: {str(exc)}"
        ) from exc
