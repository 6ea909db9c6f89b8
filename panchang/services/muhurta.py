"""Auspicious and inauspicious time windows of the Panchang day.

All windows are derived from local sunrise/sunset and fixed per-weekday
tables. When either solar event is missing (polar day or night) no window is
produced at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time as time_cls, timedelta
from typing import Dict, List, Optional, Sequence

from .panchang_algos import VISHTI, Karana


# Weekday keys are 0 = Sunday .. 6 = Saturday.
# Rahu Kaal: 1-based eighth of the day, the window starts at (position - 1).
RAHU_KAAL_POSITIONS = {0: 7, 1: 1, 2: 7, 3: 5, 4: 3, 5: 4, 6: 2}
# Gulika Kaal: 0-based eighth, the window starts at position.
GULIKA_KAAL_POSITIONS = {0: 6, 1: 5, 2: 4, 3: 3, 4: 2, 5: 1, 6: 0}
# Yama Ghanta: 0-based eighth, the window starts at position.
YAMA_GHANTA_POSITIONS = {0: 4, 1: 2, 2: 1, 3: 3, 4: 0, 5: 6, 6: 5}

# Minutes since a nominal 06:00 sunrise; rebased by subtracting 360.
NOMINAL_SUNRISE_MINUTES = 360
DUR_MUHURTAM_STARTS = (
    (720, 768),
    (780, 828),
    (900, 948),
    (660, 708),
    (360, 408),
    (540, 588),
    (420, 468),
)
AMRIT_KAAL_STARTS = (360, 420, 480, 540, 300, 600, 660)

MUHURTA_SPAN = timedelta(minutes=48)
SANDHYA_SPAN = timedelta(minutes=81)
VIJAYA_SPAN = timedelta(minutes=42)
VIJAYA_AFTER_NOON = timedelta(minutes=120)
VARJYAM_SPAN = timedelta(minutes=72)

# Varjyam start = base + nakshatra_index * step (minutes after sunrise).
VARJYAM_FIRST = (480, 20)
VARJYAM_SECOND = (1320, 15)


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime
    duration_minutes: int


def _window(start: datetime, end: datetime) -> TimeWindow:
    if not start < end:
        raise ValueError(f"window start {start.isoformat()} is not before end {end.isoformat()}")
    return TimeWindow(
        start=start,
        end=end,
        duration_minutes=round((end - start).total_seconds() / 60.0),
    )


def _centred(moment: datetime, span: timedelta) -> TimeWindow:
    return _window(moment - span / 2, moment + span / 2)


def _eighth(sunrise: datetime, sunset: datetime, offset: int) -> TimeWindow:
    """Window covering the eighth of the day that starts ``offset`` eighths after sunrise."""

    seg = (sunset - sunrise) / 8
    start = sunrise + seg * offset
    return _window(start, start + seg)


def solar_noon(sunrise: datetime, sunset: datetime) -> datetime:
    return sunrise + (sunset - sunrise) / 2


def next_midnight(sunrise: datetime) -> datetime:
    """Civil midnight closing the day that ``sunrise`` opens."""

    day = sunrise.date() + timedelta(days=1)
    return datetime.combine(day, time_cls(0, 0), tzinfo=sunrise.tzinfo)


# --- inauspicious triad ---


def rahu_kaal(sunrise: datetime, sunset: datetime, weekday: int) -> TimeWindow:
    return _eighth(sunrise, sunset, RAHU_KAAL_POSITIONS[weekday] - 1)


def gulika_kaal(sunrise: datetime, sunset: datetime, weekday: int) -> TimeWindow:
    return _eighth(sunrise, sunset, GULIKA_KAAL_POSITIONS[weekday])


def yama_ghanta(sunrise: datetime, sunset: datetime, weekday: int) -> TimeWindow:
    return _eighth(sunrise, sunset, YAMA_GHANTA_POSITIONS[weekday])


# --- auspicious ---


def brahma_muhurta(sunrise: datetime) -> TimeWindow:
    end = sunrise - MUHURTA_SPAN
    return _window(end - MUHURTA_SPAN, end)


def pratah_sandhya(sunrise: datetime) -> TimeWindow:
    return _window(sunrise - SANDHYA_SPAN, sunrise)


def abhijit_muhurta(sunrise: datetime, sunset: datetime) -> TimeWindow:
    return _centred(solar_noon(sunrise, sunset), MUHURTA_SPAN)


def vijaya_muhurta(sunrise: datetime, sunset: datetime) -> TimeWindow:
    start = solar_noon(sunrise, sunset) + VIJAYA_AFTER_NOON
    return _window(start, start + VIJAYA_SPAN)


def godhuli_muhurta(sunset: datetime) -> TimeWindow:
    return _centred(sunset, MUHURTA_SPAN)


def sayahna_sandhya(sunset: datetime) -> TimeWindow:
    return _window(sunset, sunset + SANDHYA_SPAN)


def nishita_muhurta(sunrise: datetime) -> TimeWindow:
    return _centred(next_midnight(sunrise), MUHURTA_SPAN)


def amrit_kaal(sunrise: datetime, weekday: int) -> TimeWindow:
    start = sunrise + timedelta(minutes=AMRIT_KAAL_STARTS[weekday] - NOMINAL_SUNRISE_MINUTES)
    return _window(start, start + MUHURTA_SPAN)


# --- multi-window and derived ---


def dur_muhurtam(sunrise: datetime, weekday: int) -> List[TimeWindow]:
    slots: List[TimeWindow] = []
    for minutes in DUR_MUHURTAM_STARTS[weekday]:
        start = sunrise + timedelta(minutes=minutes - NOMINAL_SUNRISE_MINUTES)
        slots.append(_window(start, start + MUHURTA_SPAN))
    return slots


def varjyam(sunrise: datetime, nakshatra_index: int) -> List[TimeWindow]:
    """Two 72-minute windows; the second one rolls over into the next day."""

    slots: List[TimeWindow] = []
    for base, step in (VARJYAM_FIRST, VARJYAM_SECOND):
        start = sunrise + timedelta(minutes=base + nakshatra_index * step)
        slots.append(_window(start, start + VARJYAM_SPAN))
    return slots


def bhadra(karanas: Sequence[Karana]) -> Optional[TimeWindow]:
    """Vishti karana span, known only when Vishti is the second half.

    It runs from the end of the preceding karana to the end of Vishti.
    """

    for position, karana in enumerate(karanas):
        if karana.name != VISHTI:
            continue
        if position == 0:
            return None
        previous = karanas[position - 1]
        if previous.ends_at is None or karana.ends_at is None:
            return None
        return _window(previous.ends_at, karana.ends_at)
    return None


def build_time_windows(
    sunrise: Optional[datetime],
    sunset: Optional[datetime],
    weekday: int,
    nakshatra_number: int,
    karanas: Sequence[Karana],
) -> Dict[str, Dict[str, object]]:
    auspicious: Dict[str, object] = {
        "brahma_muhurta": None,
        "pratah_sandhya": None,
        "abhijit_muhurta": None,
        "vijaya_muhurta": None,
        "godhuli_muhurta": None,
        "sayahna_sandhya": None,
        "nishita_muhurta": None,
        "amrit_kaal": None,
    }
    inauspicious: Dict[str, object] = {
        "rahu_kaal": None,
        "gulika_kaal": None,
        "yama_ghanta": None,
        "dur_muhurtam": [],
        "varjyam": [],
        "bhadra": None,
    }

    if sunrise is None or sunset is None:
        return {"auspicious": auspicious, "inauspicious": inauspicious}

    auspicious.update(
        brahma_muhurta=brahma_muhurta(sunrise),
        pratah_sandhya=pratah_sandhya(sunrise),
        abhijit_muhurta=abhijit_muhurta(sunrise, sunset),
        vijaya_muhurta=vijaya_muhurta(sunrise, sunset),
        godhuli_muhurta=godhuli_muhurta(sunset),
        sayahna_sandhya=sayahna_sandhya(sunset),
        nishita_muhurta=nishita_muhurta(sunrise),
        amrit_kaal=amrit_kaal(sunrise, weekday),
    )
    inauspicious.update(
        rahu_kaal=rahu_kaal(sunrise, sunset, weekday),
        gulika_kaal=gulika_kaal(sunrise, sunset, weekday),
        yama_ghanta=yama_ghanta(sunrise, sunset, weekday),
        dur_muhurtam=dur_muhurtam(sunrise, weekday),
        varjyam=varjyam(sunrise, nakshatra_number - 1),
        bhadra=bhadra(karanas),
    )
    return {"auspicious": auspicious, "inauspicious": inauspicious}
