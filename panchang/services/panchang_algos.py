"""Panchang element algorithms.

Tithi, nakshatra, yoga and karana are read off the Sun and Moon longitudes.
End times are projected forward from local sunrise using fixed mean rates of
motion instead of a root search, so every element of a report shares the
same anchor and the whole calculation stays a pure function of its inputs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date as date_cls, datetime, timedelta
from typing import Optional, Tuple

from ..i18n.panchang_labels import Label
from ..i18n.resolve import (
    karana_label,
    masa_label,
    nak_row,
    paksha_label,
    rashi_row,
    tithi_label,
    yoga_label,
)


TITHI_SPAN = 12.0
NAKSHATRA_SPAN = 360.0 / 27.0
YOGA_SPAN = 360.0 / 27.0
RASHI_SPAN = 30.0

TITHI_COUNT = 30
NAKSHATRA_COUNT = 27
YOGA_COUNT = 27
KARANA_COUNT = 11

# Mean daily motion in degrees used to project end times.
TITHI_RATE = 13.0  # Moon gaining on the Sun
NAKSHATRA_RATE = 13.33  # Moon
YOGA_RATE = 14.67  # Sun + Moon combined

VISHTI = "Vishti"


@dataclass(frozen=True)
class Tithi:
    number: int
    name: str
    hindi: str
    paksha: str
    paksha_hindi: str
    progress: float
    ends_at: Optional[datetime]


@dataclass(frozen=True)
class Nakshatra:
    number: int
    name: str
    hindi: str
    lord: str
    lord_hindi: str
    deity: str
    progress: float
    ends_at: Optional[datetime]


@dataclass(frozen=True)
class Yoga:
    number: int
    name: str
    hindi: str
    progress: float
    ends_at: Optional[datetime]


@dataclass(frozen=True)
class Karana:
    number: int
    name: str
    hindi: str
    ends_at: Optional[datetime]
    is_first_half: bool


@dataclass(frozen=True)
class Rashi:
    index: int
    name: str
    english: str
    hindi: str


def _wrap(degrees: float) -> float:
    value = degrees % 360.0
    # -1e-20 % 360.0 == 360.0 in floating point
    return 0.0 if value >= 360.0 else value


def _segment(value: float, span: float, count: int) -> int:
    return min(int(value // span), count - 1)


def _progress(value: float, span: float) -> float:
    """Percent of ``span`` already covered, floored to one decimal so it stays below 100."""

    return math.floor((value % span) / span * 1000.0) / 10.0


def _project(sunrise: Optional[datetime], remaining_deg: float, rate_per_day: float) -> Optional[datetime]:
    if sunrise is None:
        return None
    return sunrise + timedelta(hours=remaining_deg / rate_per_day * 24.0)


def weekday_index(day: date_cls) -> int:
    """0 = Sunday .. 6 = Saturday."""

    return (day.weekday() + 1) % 7


def tithi_delta(sun_lon: float, moon_lon: float) -> float:
    return _wrap(moon_lon - sun_lon)


def compute_tithi(sun_lon: float, moon_lon: float, sunrise: Optional[datetime]) -> Tithi:
    diff = tithi_delta(sun_lon, moon_lon)
    index = _segment(diff, TITHI_SPAN, TITHI_COUNT)
    paksha = "Shukla" if index < 15 else "Krishna"
    label = tithi_label(index + 1)
    paksha_names = paksha_label(paksha)

    return Tithi(
        number=index + 1,
        name=label.name,
        hindi=label.hindi,
        paksha=paksha_names.name,
        paksha_hindi=paksha_names.hindi,
        progress=_progress(diff, TITHI_SPAN),
        ends_at=_project(sunrise, TITHI_SPAN - diff % TITHI_SPAN, TITHI_RATE),
    )


def compute_nakshatra(moon_lon: float, sunrise: Optional[datetime]) -> Nakshatra:
    lon = _wrap(moon_lon)
    index = _segment(lon, NAKSHATRA_SPAN, NAKSHATRA_COUNT)
    row = nak_row(index + 1)

    return Nakshatra(
        number=index + 1,
        name=row.name,
        hindi=row.hindi,
        lord=row.lord,
        lord_hindi=row.lord_hindi,
        deity=row.deity,
        progress=_progress(lon, NAKSHATRA_SPAN),
        ends_at=_project(sunrise, NAKSHATRA_SPAN - lon % NAKSHATRA_SPAN, NAKSHATRA_RATE),
    )


def compute_yoga(sun_lon: float, moon_lon: float, sunrise: Optional[datetime]) -> Yoga:
    total = _wrap(sun_lon + moon_lon)
    index = _segment(total, YOGA_SPAN, YOGA_COUNT)
    label = yoga_label(index + 1)

    return Yoga(
        number=index + 1,
        name=label.name,
        hindi=label.hindi,
        progress=_progress(total, YOGA_SPAN),
        ends_at=_project(sunrise, YOGA_SPAN - total % YOGA_SPAN, YOGA_RATE),
    )


def compute_karanas(
    sun_lon: float,
    moon_lon: float,
    tithi: Tithi,
    sunrise: Optional[datetime],
) -> Tuple[Karana, Karana]:
    """Return the two karanas (half-tithis) of the current tithi.

    The first half ends where tithi progress crosses 50 %, found by scaling
    the sunrise-to-tithi-end span by the fraction left until that point. If
    the half was already over at sunrise the instant lies before sunrise, so
    the first karana reported may already be over when the day begins.
    """

    first_index = ((tithi.number - 1) * 2) % KARANA_COUNT
    second_index = (first_index + 1) % KARANA_COUNT

    first_end: Optional[datetime] = None
    if sunrise is not None and tithi.ends_at is not None:
        done = (tithi_delta(sun_lon, moon_lon) % TITHI_SPAN) / TITHI_SPAN * 100.0
        remaining = tithi.ends_at - sunrise
        first_end = sunrise + remaining * ((50.0 - done) / (100.0 - done))

    first = karana_label(first_index + 1)
    second = karana_label(second_index + 1)
    return (
        Karana(
            number=first_index + 1,
            name=first.name,
            hindi=first.hindi,
            ends_at=first_end,
            is_first_half=True,
        ),
        Karana(
            number=second_index + 1,
            name=second.name,
            hindi=second.hindi,
            ends_at=tithi.ends_at,
            is_first_half=False,
        ),
    )


def compute_rashi(longitude: float) -> Rashi:
    index = _segment(_wrap(longitude), RASHI_SPAN, 12)
    row = rashi_row(index + 1)
    return Rashi(index=index + 1, name=row.name, english=row.english, hindi=row.hindi)


def compute_masa(sun_lon: float) -> Tuple[Label, Label]:
    """Return (amanta, purnimanta) month labels from the Sun's sign."""

    amanta_index = _segment(_wrap(sun_lon), RASHI_SPAN, 12)
    purnimanta_index = (amanta_index + 1) % 12
    return masa_label(amanta_index), masa_label(purnimanta_index)
