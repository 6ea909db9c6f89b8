"""Build a Panchang report.

The report is a pure function of (date, latitude, longitude): positions are
read at local civil midnight, the rise/set searches start from the solar
midnight next to it, and every later stage consumes only the outputs of the
stage before it. Nothing is cached between requests.
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict
from datetime import date as date_cls, datetime, timezone
from typing import Any, Dict, Optional

from ...i18n.resolve import vara_label
from ...schemas.panchang_viewmodel import PanchangReport
from .. import ephem
from ..ext_calendars import build_samvats
from ..ext_panchaka import panchaka_slots
from ..ext_ritu_dinmana import build_ritu_ayana, dinmana_ratrimana
from ..festivals import festivals_for_date
from ..local_time import local_midnight, localize_times
from ..muhurta import TimeWindow, build_time_windows
from ..panchang_algos import (
    compute_karanas,
    compute_masa,
    compute_nakshatra,
    compute_rashi,
    compute_tithi,
    compute_yoga,
    weekday_index,
)
from ..recommendations import build_recommendations, build_summary
from ..special_yogas import compute_special_yogas


logger = logging.getLogger(__name__)


def _window(value: Optional[TimeWindow]) -> Optional[Dict[str, Any]]:
    return asdict(value) if value is not None else None


def _windows(group: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in group.items():
        if isinstance(value, list):
            out[key] = [_window(item) for item in value]
        else:
            out[key] = _window(value)
    return out


def build_report(
    target_date: date_cls,
    lat: float,
    lon: float,
    calculated_at: Optional[datetime] = None,
) -> PanchangReport:
    started = time.perf_counter()
    observer = ephem.Observer(latitude=lat, longitude=lon)
    query_instant = local_midnight(target_date, observer)

    # layer 1: ephemeris
    pos = ephem.positions(query_instant, observer)
    raw_times = ephem.sun_moon_times(query_instant, observer)

    # layer 2: local civil time
    times = localize_times(raw_times, observer)
    sunrise, sunset = times.sunrise, times.sunset

    # layer 3: elements
    sun_lon, moon_lon = pos.sun_longitude, pos.moon_longitude
    tithi = compute_tithi(sun_lon, moon_lon, sunrise)
    nakshatra = compute_nakshatra(moon_lon, sunrise)
    yoga = compute_yoga(sun_lon, moon_lon, sunrise)
    karanas = compute_karanas(sun_lon, moon_lon, tithi, sunrise)
    sun_rashi = compute_rashi(sun_lon)
    moon_rashi = compute_rashi(moon_lon)
    sun_nakshatra = compute_nakshatra(sun_lon, None)
    amanta, purnimanta = compute_masa(sun_lon)
    weekday = weekday_index(target_date)
    vara = vara_label(weekday)

    # layer 4: time windows
    windows = build_time_windows(sunrise, sunset, weekday, nakshatra.number, karanas)

    # layer 5: composition
    flags = compute_special_yogas(weekday, nakshatra.name, tithi.name, yoga.name)
    recommendations = build_recommendations(tithi, nakshatra, windows)
    summary = build_summary(recommendations, flags, tithi.name)

    report = PanchangReport(
        date=target_date.isoformat(),
        weekday=vara.name,
        weekday_hindi=vara.hindi,
        location={"latitude": lat, "longitude": lon},
        sun_moon=asdict(times),
        tithi=asdict(tithi),
        nakshatra=asdict(nakshatra),
        yoga=asdict(yoga),
        karanas=[asdict(k) for k in karanas],
        rashis={
            "sun": asdict(sun_rashi),
            "moon": asdict(moon_rashi),
            "sun_nakshatra": {
                "number": sun_nakshatra.number,
                "name": sun_nakshatra.name,
                "hindi": sun_nakshatra.hindi,
            },
        },
        samvats=build_samvats(target_date),
        months={
            "amanta": amanta.name,
            "amanta_hindi": amanta.hindi,
            "purnimanta": purnimanta.name,
            "purnimanta_hindi": purnimanta.hindi,
        },
        ritu_ayana=build_ritu_ayana(sun_lon),
        day_night=dinmana_ratrimana(sunrise, sunset),
        auspicious_times=_windows(windows["auspicious"]),
        inauspicious_times=_windows(windows["inauspicious"]),
        special_yogas=flags,
        panchaka=panchaka_slots(sunrise, sunset, tithi.number),
        festivals=festivals_for_date(target_date, tithi.paksha, tithi.name),
        recommendations={key: asdict(rec) for key, rec in recommendations.items()},
        summary=asdict(summary),
        calculated_at=calculated_at or datetime.now(timezone.utc),
    )

    logger.info(
        "panchang.compute",
        extra={
            "date": target_date.isoformat(),
            "lat": lat,
            "lon": lon,
            "polar": sunrise is None or sunset is None,
            "elapsed_ms": round((time.perf_counter() - started) * 1000.0, 1),
        },
    )
    return report
