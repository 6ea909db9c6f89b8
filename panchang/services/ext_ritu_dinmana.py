"""Helpers for Ritu/Ayana and Dinamana/Ratrimana."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from ..i18n.resolve import ayana_label, ritu_row


MINUTES_PER_DAY = 1440


def ritu_index(sun_long_deg: float) -> int:
    # Each ritu spans two signs, starting with Mesha.
    sign = int((sun_long_deg % 360.0) // 30.0) % 12
    return sign // 2


def half_year(sun_long_deg: float) -> str:
    lon = sun_long_deg % 360.0
    return "ascending" if lon >= 270.0 or lon < 90.0 else "descending"


def build_ritu_ayana(sun_long_deg: float) -> Dict[str, str]:
    ritu = ritu_row(ritu_index(sun_long_deg))
    direction = half_year(sun_long_deg)
    ayana = ayana_label(direction)
    return {
        "ritu": ritu.name,
        "ritu_hindi": ritu.hindi,
        "season": ritu.season,
        "ayana": ayana.name,
        "ayana_hindi": ayana.hindi,
        "half_year": direction,
    }


def _duration(total_minutes: int) -> Dict[str, object]:
    hours, minutes = divmod(total_minutes, 60)
    return {
        "hours": hours,
        "minutes": minutes,
        "total_minutes": total_minutes,
        "formatted": f"{hours:02d}:{minutes:02d}",
    }


def dinmana_ratrimana(
    sunrise_local: Optional[datetime],
    sunset_local: Optional[datetime],
) -> Optional[Dict[str, Dict[str, object]]]:
    """Day and night lengths in whole minutes; night is the complement to 24 h."""

    if sunrise_local is None or sunset_local is None:
        return None
    day_minutes = round((sunset_local - sunrise_local).total_seconds() / 60.0)
    return {
        "dinamana": _duration(day_minutes),
        "ratrimana": _duration(MINUTES_PER_DAY - day_minutes),
    }
