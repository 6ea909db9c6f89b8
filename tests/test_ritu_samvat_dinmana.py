from datetime import date, datetime, timedelta, timezone

import pytest

from panchang.services.ext_calendars import build_samvats
from panchang.services.ext_ritu_dinmana import build_ritu_ayana, dinmana_ratrimana, half_year, ritu_index


@pytest.mark.parametrize(
    "day, vikram, shaka",
    [
        (date(2026, 1, 16), 2082, 1947),
        (date(2026, 3, 1), 2082, 1948),
        (date(2026, 4, 1), 2083, 1948),
        (date(2026, 12, 31), 2083, 1948),
    ],
)
def test_samvats_keyed_off_civil_month(day, vikram, shaka):
    assert build_samvats(day) == {"vikram_samvat": vikram, "shaka_samvat": shaka}


@pytest.mark.parametrize(
    "sun, idx, ritu, season",
    [(0.0, 0, "Vasanta", "Spring"), (75.0, 1, "Grishma", "Summer"), (295.0, 4, "Hemanta", "Pre-winter"), (359.0, 5, "Shishira", "Winter")],
)
def test_ritu_spans_two_signs(sun, idx, ritu, season):
    assert ritu_index(sun) == idx
    data = build_ritu_ayana(sun)
    assert data["ritu"] == ritu
    assert data["season"] == season
    assert data["ritu_hindi"]


@pytest.mark.parametrize(
    "sun, direction, name",
    [(270.0, "ascending", "Uttarayana"), (0.0, "ascending", "Uttarayana"), (89.9, "ascending", "Uttarayana"), (90.0, "descending", "Dakshinayana"), (269.9, "descending", "Dakshinayana")],
)
def test_half_year_boundaries(sun, direction, name):
    assert half_year(sun) == direction
    assert build_ritu_ayana(sun)["ayana"] == name


def test_day_and_night_cover_the_full_day():
    tz = timezone(timedelta(minutes=330))
    sunrise = datetime(2026, 1, 16, 7, 15, tzinfo=tz)
    sunset = datetime(2026, 1, 16, 17, 49, tzinfo=tz)
    result = dinmana_ratrimana(sunrise, sunset)
    assert result["dinamana"] == {"hours": 10, "minutes": 34, "total_minutes": 634, "formatted": "10:34"}
    assert result["ratrimana"]["formatted"] == "13:26"
    assert result["dinamana"]["total_minutes"] + result["ratrimana"]["total_minutes"] == 1440


def test_day_length_unknown_near_poles():
    assert dinmana_ratrimana(None, None) is None
