"""Swiss Ephemeris adapter used by the Panchang orchestrator.

Only the Sun and the Moon are queried. Longitudes are apparent, topocentric
and measured on the ecliptic of date; rise/set searches never look further
than one day past the requested instant.
"""

from __future__ import annotations

import enum
import logging
import os
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import swisseph as swe


logger = logging.getLogger(__name__)

SEARCH_WINDOW = timedelta(days=1)
HALF_DAY = timedelta(hours=12)

# swe.set_topo is process-global; hold the lock for the set + calc pair.
_TOPO_LOCK = threading.Lock()


class Body(str, enum.Enum):
    SUN = "Sun"
    MOON = "Moon"


class Direction(str, enum.Enum):
    RISING = "rising"
    SETTING = "setting"


BODY_CODES = {
    Body.SUN: swe.SUN,
    Body.MOON: swe.MOON,
}

RSMI_CODES = {
    Direction.RISING: swe.CALC_RISE,
    Direction.SETTING: swe.CALC_SET,
}


@dataclass(frozen=True)
class Observer:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CelestialPositions:
    sun_longitude: float
    moon_longitude: float


@dataclass(frozen=True)
class SunMoonTimes:
    sunrise: Optional[datetime]
    sunset: Optional[datetime]
    moonrise: Optional[datetime]
    moonset: Optional[datetime]


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)


def _to_jd(moment: datetime) -> float:
    """Convert a timezone-aware datetime into Julian Day (UT)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment_utc = moment.astimezone(timezone.utc)
    return moment_utc.timestamp() / 86400.0 + 2440587.5


def _jd_to_datetime(jd: float) -> datetime:
    seconds = (jd - 2440587.5) * 86400.0
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def normalize_longitude(raw: float) -> float:
    value = (raw + 360.0) % 360.0
    return 0.0 if value >= 360.0 else value


def positions(instant: datetime, observer: Observer) -> CelestialPositions:
    """Return apparent ecliptic longitudes of the Sun and Moon for ``observer``."""

    jd = _to_jd(instant)
    flag = swe.FLG_SWIEPH | swe.FLG_TOPOCTR
    with _TOPO_LOCK:
        swe.set_topo(observer.longitude, observer.latitude, 0.0)
        sun, _ = swe.calc_ut(jd, swe.SUN, flag)
        moon, _ = swe.calc_ut(jd, swe.MOON, flag)

    return CelestialPositions(
        sun_longitude=normalize_longitude(sun[0]),
        moon_longitude=normalize_longitude(moon[0]),
    )


def _search(code: int, rsmi: int, jd_start: float, observer: Observer) -> Optional[float]:
    """Next event JD within one day of ``jd_start``, else ``None``."""

    geopos = (observer.longitude, observer.latitude, 0.0)
    result, times = swe.rise_trans(jd_start, code, rsmi, geopos, 0.0, 0.0, swe.FLG_SWIEPH)
    if result < 0 or not times or times[0] <= 0.0:
        return None
    if times[0] > jd_start + SEARCH_WINDOW.days:
        return None
    return times[0]


def rise_set(
    body: Body,
    direction: Direction,
    instant: datetime,
    observer: Observer,
) -> Optional[datetime]:
    """Return the next rise or set of ``body`` within one day, else ``None``.

    Polar day/night (no horizon crossing inside the window) is not an error;
    the caller receives ``None`` and propagates it.
    """

    try:
        jd = _search(BODY_CODES[body], RSMI_CODES[direction], _to_jd(instant), observer)
    except swe.Error:
        logger.warning(
            "panchang.ephemeris.search_failed",
            extra={"body": body.value, "direction": direction.value, "lat": observer.latitude, "lon": observer.longitude},
        )
        return None
    return _jd_to_datetime(jd) if jd is not None else None


def solar_midnight(instant: datetime, observer: Observer) -> datetime:
    """Lower transit of the Sun nearest to ``instant``.

    Falls back to ``instant`` itself when the transit cannot be found.
    """

    try:
        jd = _search(swe.SUN, swe.CALC_ITRANSIT, _to_jd(instant - HALF_DAY), observer)
    except swe.Error:
        logger.warning(
            "panchang.ephemeris.search_failed",
            extra={"body": Body.SUN.value, "direction": "lower_transit", "lat": observer.latitude, "lon": observer.longitude},
        )
        return instant
    return _jd_to_datetime(jd) if jd is not None else instant


def sun_moon_times(instant: datetime, observer: Observer) -> SunMoonTimes:
    """Run the four independent rise/set searches for the day opening at ``instant``.

    The searches start at the solar midnight next to ``instant`` rather than
    at the civil midnight itself, so a sunset shortly after civil midnight
    (high latitudes in summer) is not taken for the day's sunset.
    """

    start = solar_midnight(instant, observer)
    times = SunMoonTimes(
        sunrise=rise_set(Body.SUN, Direction.RISING, start, observer),
        sunset=rise_set(Body.SUN, Direction.SETTING, start, observer),
        moonrise=rise_set(Body.MOON, Direction.RISING, start, observer),
        moonset=rise_set(Body.MOON, Direction.SETTING, start, observer),
    )
    if times.sunrise is None or times.sunset is None:
        logger.info(
            "panchang.ephemeris.gap",
            extra={"lat": observer.latitude, "lon": observer.longitude, "start": start.isoformat()},
        )
    return times
