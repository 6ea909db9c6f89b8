"""Element calculations from fixed longitudes (no ephemeris involved)."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from panchang.services.panchang_algos import (
    compute_karanas,
    compute_masa,
    compute_nakshatra,
    compute_rashi,
    compute_tithi,
    compute_yoga,
    weekday_index,
)


IST = timezone(timedelta(minutes=330))
SUNRISE = datetime(2026, 1, 16, 7, 15, tzinfo=IST)


def test_tithi_waxing_with_end_time() -> None:
    tithi = compute_tithi(10.0, 40.0, SUNRISE)
    assert tithi.number == 3
    assert tithi.name == "Tritiya"
    assert tithi.paksha == "Shukla"
    assert tithi.paksha_hindi == "शुक्ल"
    assert tithi.progress == 50.0
    assert tithi.ends_at == SUNRISE + timedelta(hours=6.0 / 13.0 * 24.0)


@pytest.mark.parametrize(
    "sun, moon, number, name, paksha",
    [
        (0.0, 170.0, 15, "Purnima", "Shukla"),
        (0.0, 200.0, 17, "Dwitiya", "Krishna"),
        (0.0, 355.0, 30, "Amavasya", "Krishna"),
        (350.0, 5.0, 2, "Dwitiya", "Shukla"),
    ],
)
def test_tithi_table_and_wraparound(sun, moon, number, name, paksha) -> None:
    tithi = compute_tithi(sun, moon, SUNRISE)
    assert tithi.number == number
    assert tithi.name == name
    assert tithi.paksha == paksha


def test_tithi_without_sunrise_has_no_end() -> None:
    assert compute_tithi(10.0, 40.0, None).ends_at is None


def test_progress_stays_below_hundred() -> None:
    assert compute_tithi(0.0, 11.9999999, SUNRISE).progress < 100.0
    assert compute_nakshatra(360.0 / 27.0 - 1e-9, SUNRISE).progress < 100.0
    assert compute_yoga(0.0, 359.9999999, SUNRISE).progress < 100.0


def test_nakshatra_rows() -> None:
    first = compute_nakshatra(0.0, SUNRISE)
    assert (first.number, first.name, first.progress) == (1, "Ashwini", 0.0)
    assert first.lord == "Ketu"

    pushya = compute_nakshatra(100.0, SUNRISE)
    assert pushya.number == 8
    assert pushya.name == "Pushya"
    assert pushya.lord == "Saturn"
    assert pushya.deity == "Brihaspati"

    last = compute_nakshatra(359.99, SUNRISE)
    assert last.number == 27
    assert last.name == "Revati"


def test_yoga_from_sum() -> None:
    yoga = compute_yoga(100.0, 200.0, SUNRISE)
    assert yoga.number == 23
    assert yoga.name == "Shubha"
    assert yoga.hindi == "शुभ"
    assert yoga.ends_at > SUNRISE


def test_karana_pair_indices() -> None:
    tithi = compute_tithi(0.0, 3.0, SUNRISE)
    first, second = compute_karanas(0.0, 3.0, tithi, SUNRISE)
    assert (first.number, first.name, first.is_first_half) == (1, "Bava", True)
    assert (second.number, second.name, second.is_first_half) == (2, "Balava", False)
    assert second.ends_at == tithi.ends_at


def test_karana_index_wraps_over_eleven() -> None:
    tithi = compute_tithi(0.0, 350.0, SUNRISE)
    assert tithi.number == 30
    first, second = compute_karanas(0.0, 350.0, tithi, SUNRISE)
    assert first.number == 4
    assert second.number == 5


def test_first_half_ends_where_tithi_crosses_half() -> None:
    tithi = compute_tithi(0.0, 3.0, SUNRISE)
    first, _ = compute_karanas(0.0, 3.0, tithi, SUNRISE)
    expected = SUNRISE + timedelta(hours=3.0 / 13.0 * 24.0)
    assert abs((first.ends_at - expected).total_seconds()) < 1.0


def test_first_half_already_over_lies_before_sunrise() -> None:
    tithi = compute_tithi(0.0, 9.0, SUNRISE)
    first, second = compute_karanas(0.0, 9.0, tithi, SUNRISE)
    assert first.ends_at < SUNRISE < second.ends_at


def test_karanas_without_sunrise() -> None:
    tithi = compute_tithi(0.0, 3.0, None)
    first, second = compute_karanas(0.0, 3.0, tithi, None)
    assert first.ends_at is None and second.ends_at is None


@pytest.mark.parametrize("lon, index, name", [(0.0, 1, "Mesha"), (45.0, 2, "Vrishabha"), (359.9, 12, "Meena")])
def test_rashi(lon, index, name) -> None:
    rashi = compute_rashi(lon)
    assert rashi.index == index
    assert rashi.name == name
    assert rashi.hindi


def test_masa_conventions() -> None:
    amanta, purnimanta = compute_masa(0.0)
    assert (amanta.name, purnimanta.name) == ("Chaitra", "Vaishakha")
    amanta, purnimanta = compute_masa(345.0)
    assert (amanta.name, purnimanta.name) == ("Phalguna", "Chaitra")


def test_weekday_index_starts_on_sunday() -> None:
    assert weekday_index(date(2026, 1, 18)) == 0
    assert weekday_index(date(2026, 1, 16)) == 5
    assert weekday_index(date(2026, 1, 17)) == 6
