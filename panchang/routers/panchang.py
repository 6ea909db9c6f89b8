"""Panchang API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Query
from pydantic import BaseModel, Field

from ..schemas.panchang_viewmodel import PanchangReport
from ..services.orchestrators.panchang_full import build_report
from ..services.validation import DEFAULT_LAT, DEFAULT_LON, parse_inputs


router = APIRouter(prefix="/v1/panchang", tags=["panchang"])


class PanchangRequest(BaseModel):
    # Range checks happen in parse_inputs so bad values map to a 400.
    lat: Optional[float] = Field(default=None)
    lon: Optional[float] = Field(default=None)
    date: Optional[str] = None


@router.get(
    "",
    response_model=PanchangReport,
    summary="Panchang for a date and location",
)
def panchang_get(
    lat: float = Query(DEFAULT_LAT, description="Latitude in degrees, -90..90"),
    lon: float = Query(DEFAULT_LON, description="Longitude in degrees, -180..180"),
    date: Optional[str] = Query(None, description="Civil date YYYY-MM-DD; defaults to today in IST"),
):
    latitude, longitude, target_date = parse_inputs(lat, lon, date)
    return build_report(target_date, latitude, longitude)


@router.post(
    "/compute",
    response_model=PanchangReport,
    summary="Compute Panchang for a specific date and location",
)
def panchang_compute(
    req: PanchangRequest = Body(
        ...,
        examples=[
            {"lat": 28.6139, "lon": 77.2090, "date": "2026-01-16"},
            {"lat": 51.5074, "lon": -0.1278},
        ],
    ),
):
    latitude, longitude, target_date = parse_inputs(req.lat, req.lon, req.date)
    return build_report(target_date, latitude, longitude)
