"""Request input validation for the Panchang endpoints."""

from __future__ import annotations

import math
from datetime import date as date_cls, datetime
from typing import Optional, Tuple

from zoneinfo import ZoneInfo


DEFAULT_LAT = 28.6139
DEFAULT_LON = 77.2090
DEFAULT_TZ = "Asia/Kolkata"

# Year 1 underflows datetime once a positive offset is taken off local
# midnight; the built-in Moshier ephemeris stops at 3000 AD.
MIN_YEAR = 2
MAX_YEAR = 2999


class PanchangValidationError(ValueError):
    """Client input that cannot be turned into a report."""


class CoordinateValidationError(PanchangValidationError):
    def __init__(self, message: str = "Invalid coordinates") -> None:
        super().__init__(message)


class DateValidationError(PanchangValidationError):
    def __init__(self, message: str = "Invalid date format. Use YYYY-MM-DD") -> None:
        super().__init__(message)


def _coordinate(value: Optional[float], default: float, limit: float) -> float:
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise CoordinateValidationError() from exc
    if not math.isfinite(number) or not -limit <= number <= limit:
        raise CoordinateValidationError()
    return number


def resolve_date(date_str: Optional[str]) -> date_cls:
    if not date_str:
        return datetime.now(ZoneInfo(DEFAULT_TZ)).date()
    try:
        parsed = datetime.fromisoformat(date_str.strip()).date()
    except ValueError as exc:
        raise DateValidationError() from exc
    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        raise DateValidationError(f"Date out of range. Use years {MIN_YEAR:04d} to {MAX_YEAR}")
    return parsed


def parse_inputs(
    lat: Optional[float],
    lon: Optional[float],
    date_str: Optional[str],
) -> Tuple[float, float, date_cls]:
    """Validate raw request values; missing ones fall back to New Delhi / today (IST)."""

    latitude = _coordinate(lat, DEFAULT_LAT, 90.0)
    longitude = _coordinate(lon, DEFAULT_LON, 180.0)
    return latitude, longitude, resolve_date(date_str)
