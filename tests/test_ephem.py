from datetime import date, timedelta, timezone

import pytest

pytest.importorskip("swisseph")

from panchang.services import ephem
from panchang.services.local_time import local_midnight


DELHI = ephem.Observer(latitude=28.6139, longitude=77.2090)
TROMSO = ephem.Observer(latitude=69.6492, longitude=18.9553)


def test_positions_in_range_and_tropical():
    instant = local_midnight(date(2026, 1, 16), DELHI)
    pos = ephem.positions(instant, DELHI)
    assert 0.0 <= pos.sun_longitude < 360.0
    assert 0.0 <= pos.moon_longitude < 360.0
    # Sun is a few days into tropical Capricorn in mid January
    assert 290.0 < pos.sun_longitude < 300.0


def test_sun_times_fall_within_the_search_day():
    instant = local_midnight(date(2026, 1, 16), DELHI)
    times = ephem.sun_moon_times(instant, DELHI)
    assert times.sunrise is not None and times.sunset is not None
    assert times.sunrise.tzinfo == timezone.utc
    assert instant < times.sunrise < times.sunset < instant + timedelta(days=1)


def test_solar_midnight_is_near_civil_midnight():
    instant = local_midnight(date(2026, 1, 16), DELHI)
    lower = ephem.solar_midnight(instant, DELHI)
    assert abs(lower - instant) < timedelta(hours=1, minutes=30)


@pytest.mark.parametrize(
    "lat,lon,day",
    [
        (67.0, 0.0, date(2026, 7, 11)),
        (-67.4, 0.0, date(2027, 1, 12)),
        (66.6, 100.0, date(2026, 7, 8)),
        (67.2, 179.0, date(2026, 7, 13)),
    ],
)
def test_sunset_after_civil_midnight_is_not_taken_for_the_day(lat, lon, day):
    observer = ephem.Observer(latitude=lat, longitude=lon)
    times = ephem.sun_moon_times(local_midnight(day, observer), observer)
    assert times.sunrise is not None and times.sunset is not None
    assert times.sunrise < times.sunset


def test_no_sunset_during_midnight_sun():
    instant = local_midnight(date(2026, 6, 21), TROMSO)
    assert ephem.rise_set(ephem.Body.SUN, ephem.Direction.SETTING, instant, TROMSO) is None
    assert ephem.rise_set(ephem.Body.SUN, ephem.Direction.RISING, instant, TROMSO) is None


def test_search_error_is_not_raised(monkeypatch):
    def _error(*args, **kwargs):
        raise ephem.swe.Error("no ephemeris file")

    monkeypatch.setattr(ephem.swe, "rise_trans", _error)
    instant = local_midnight(date(2026, 1, 16), DELHI)
    assert ephem.rise_set(ephem.Body.MOON, ephem.Direction.RISING, instant, DELHI) is None
