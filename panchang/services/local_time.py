"""Convert ephemeris instants into the observer's civil local time.

The offset is an approximation: a fixed +05:30 inside a box around the
Indian subcontinent, otherwise one nominal hour per 15 degrees of longitude.
No timezone database and no daylight saving.
"""

from __future__ import annotations

import logging
from datetime import date as date_cls, datetime, time as time_cls, timedelta, timezone
from typing import Optional

from .ephem import Observer, SunMoonTimes


logger = logging.getLogger(__name__)

IST_OFFSET_MINUTES = 330
INDIA_LON_RANGE = (68.0, 97.0)
INDIA_LAT_RANGE = (8.0, 35.0)


class DayOrderError(RuntimeError):
    """Sunrise did not precede sunset after normalization."""


def in_indian_region(observer: Observer) -> bool:
    return (
        INDIA_LON_RANGE[0] <= observer.longitude <= INDIA_LON_RANGE[1]
        and INDIA_LAT_RANGE[0] <= observer.latitude <= INDIA_LAT_RANGE[1]
    )


def utc_offset_minutes(observer: Observer) -> int:
    if in_indian_region(observer):
        return IST_OFFSET_MINUTES
    return round(observer.longitude / 15.0 * 60.0)


def local_tz(observer: Observer) -> timezone:
    return timezone(timedelta(minutes=utc_offset_minutes(observer)))


def to_local(instant: Optional[datetime], observer: Observer) -> Optional[datetime]:
    if instant is None:
        return None
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(local_tz(observer))


def local_midnight(day: date_cls, observer: Observer) -> datetime:
    """Civil midnight opening ``day`` at the observer."""

    return datetime.combine(day, time_cls(0, 0), tzinfo=local_tz(observer))


def localize_times(times: SunMoonTimes, observer: Observer) -> SunMoonTimes:
    local = SunMoonTimes(
        sunrise=to_local(times.sunrise, observer),
        sunset=to_local(times.sunset, observer),
        moonrise=to_local(times.moonrise, observer),
        moonset=to_local(times.moonset, observer),
    )
    check_day_order(local, observer)
    return local


def check_day_order(times: SunMoonTimes, observer: Observer) -> None:
    if times.sunrise is None or times.sunset is None:
        return
    if times.sunrise < times.sunset:
        return
    logger.error(
        "panchang.day_order.violation",
        extra={
            "lat": observer.latitude,
            "lon": observer.longitude,
            "sunrise": times.sunrise.isoformat(),
            "sunset": times.sunset.isoformat(),
        },
    )
    raise DayOrderError(
        f"sunrise {times.sunrise.isoformat()} is not before sunset {times.sunset.isoformat()}"
    )
