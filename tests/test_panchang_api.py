"""Tests for Panchang API endpoints."""

from __future__ import annotations

from datetime import datetime

import pytest

pytest.importorskip("swisseph")

from fastapi.testclient import TestClient

from panchang.app import app
from panchang.i18n.panchang_labels import PANCHAKA_TYPES


client = TestClient(app)

DELHI = {"lat": 28.6139, "lon": 77.2090, "date": "2026-01-16"}

REPORT_KEYS = {
    "date",
    "weekday",
    "weekdayHindi",
    "location",
    "sunMoon",
    "tithi",
    "nakshatra",
    "yoga",
    "karanas",
    "rashis",
    "samvats",
    "months",
    "rituAyana",
    "dayNight",
    "auspiciousTimes",
    "inauspiciousTimes",
    "specialYogas",
    "panchaka",
    "festivals",
    "recommendations",
    "summary",
    "calculatedAt",
}


def _delhi() -> dict:
    resp = client.get("/v1/panchang", params=DELHI)
    assert resp.status_code == 200
    return resp.json()


def _windows(data: dict):
    for group in ("auspiciousTimes", "inauspiciousTimes"):
        for value in data[group].values():
            if value is None:
                continue
            for window in value if isinstance(value, list) else [value]:
                yield window


def test_report_shape() -> None:
    data = _delhi()
    assert set(data) == REPORT_KEYS
    assert data["date"] == "2026-01-16"
    assert data["weekday"] == "Friday"
    assert data["location"] == {"latitude": 28.6139, "longitude": 77.209}
    assert data["samvats"] == {"vikramSamvat": 2082, "shakaSamvat": 1947}
    assert set(data["auspiciousTimes"]) == {
        "brahmaMuhurta",
        "pratahSandhya",
        "abhijitMuhurta",
        "vijayaMuhurta",
        "godhuliMuhurta",
        "sayahnaSandhya",
        "nishitaMuhurta",
        "amritKaal",
    }
    assert set(data["inauspiciousTimes"]) == {
        "rahuKaal",
        "gulikaKaal",
        "yamaGhanta",
        "durMuhurtam",
        "varjyam",
        "bhadra",
    }


def test_delhi_january_sun_times_and_day_length() -> None:
    data = _delhi()
    sunrise = datetime.fromisoformat(data["sunMoon"]["sunrise"])
    sunset = datetime.fromisoformat(data["sunMoon"]["sunset"])
    assert sunrise.utcoffset().total_seconds() == 330 * 60
    assert sunrise.date().isoformat() == "2026-01-16"
    assert sunrise.hour < 8
    assert sunset.hour >= 17
    assert sunrise < sunset

    day_night = data["dayNight"]
    assert day_night["dinamana"]["totalMinutes"] + day_night["ratrimana"]["totalMinutes"] == 1440
    assert data["inauspiciousTimes"]["rahuKaal"]["durationMinutes"] > 0


def test_tithi_and_karana_ranges() -> None:
    data = _delhi()
    assert 1 <= data["tithi"]["number"] <= 30
    assert data["tithi"]["paksha"] in {"Shukla", "Krishna"}
    assert 1 <= data["nakshatra"]["number"] <= 27
    assert 1 <= data["yoga"]["number"] <= 27

    karanas = data["karanas"]
    assert len(karanas) == 2
    assert karanas[0]["isFirstHalf"] is True
    assert karanas[1]["isFirstHalf"] is False
    assert karanas[1]["endsAt"] == data["tithi"]["endsAt"]

    for element in ("tithi", "nakshatra", "yoga"):
        assert 0.0 <= data[element]["progress"] < 100.0


def test_every_window_is_ordered_with_fixed_durations() -> None:
    data = _delhi()
    for window in _windows(data):
        assert datetime.fromisoformat(window["start"]) < datetime.fromisoformat(window["end"])

    inauspicious = data["inauspiciousTimes"]
    assert [w["durationMinutes"] for w in inauspicious["durMuhurtam"]] == [48, 48]
    assert [w["durationMinutes"] for w in inauspicious["varjyam"]] == [72, 72]
    assert data["auspiciousTimes"]["abhijitMuhurta"]["durationMinutes"] == 48


def test_panchaka_partition() -> None:
    data = _delhi()
    names = {label.name for label in PANCHAKA_TYPES}
    assert len(data["panchaka"]) == 14
    assert all(seg["type"] in names for seg in data["panchaka"])
    assert data["panchaka"][0]["start"] == data["sunMoon"]["sunrise"]
    assert data["panchaka"][-1]["end"] == data["sunMoon"]["sunset"]


def test_hindi_labels_present() -> None:
    data = _delhi()
    assert data["weekdayHindi"]
    for key in ("tithi", "nakshatra", "yoga"):
        assert data[key]["hindi"]
    assert data["tithi"]["pakshaHindi"]
    assert all(k["hindi"] for k in data["karanas"])
    assert data["rashis"]["sun"]["hindi"] and data["rashis"]["moon"]["hindi"]
    assert data["rashis"]["sunNakshatra"]["hindi"]
    assert data["months"]["amantaHindi"] and data["months"]["purnimantaHindi"]
    assert data["rituAyana"]["rituHindi"] and data["rituAyana"]["ayanaHindi"]
    assert data["summary"]["dayTypeHindi"]


def test_recommendations_and_summary_agree() -> None:
    data = _delhi()
    recs = data["recommendations"]
    assert set(recs) == {"propertyAndHome", "religiousAndSpiritual", "generalActivities"}
    for rec in recs.values():
        assert 0 <= rec["score"] <= 100
        assert rec["suitable"] == (rec["score"] >= 50)
    good = sum(1 for rec in recs.values() if rec["suitable"])
    assert len(data["summary"]["goodFor"]) == good
    assert len(data["summary"]["avoidFor"]) == 3 - good
    assert data["summary"]["dayType"] in {"Auspicious", "Inauspicious", "Mixed"}


def test_same_inputs_same_report() -> None:
    first = _delhi()
    second = _delhi()
    first.pop("calculatedAt")
    second.pop("calculatedAt")
    assert first == second


def test_post_compute_matches_get() -> None:
    resp = client.post("/v1/panchang/compute", json=DELHI)
    assert resp.status_code == 200
    posted = resp.json()
    fetched = _delhi()
    posted.pop("calculatedAt")
    fetched.pop("calculatedAt")
    assert posted == fetched


def test_defaults_to_new_delhi() -> None:
    resp = client.get("/v1/panchang", params={"date": "2026-01-16"})
    assert resp.status_code == 200
    assert resp.json()["location"] == {"latitude": 28.6139, "longitude": 77.209}


def test_invalid_coordinates_rejected_before_ephemeris(monkeypatch) -> None:
    from panchang.services import ephem

    def _boom(*args, **kwargs):
        raise AssertionError("ephemeris must not be queried")

    monkeypatch.setattr(ephem, "positions", _boom)
    monkeypatch.setattr(ephem, "sun_moon_times", _boom)

    resp = client.get("/v1/panchang", params={"lat": 999, "lon": 999})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid coordinates"}

    resp = client.post("/v1/panchang/compute", json={"lat": 12.0, "lon": -181.0})
    assert resp.status_code == 400


def test_non_finite_coordinates_rejected() -> None:
    resp = client.get("/v1/panchang", params={"lat": "nan", "lon": 77.0})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid coordinates"}


def test_non_numeric_coordinates_rejected() -> None:
    resp = client.get("/v1/panchang", params={"lat": "north", "lon": 77.0})
    assert resp.status_code == 422


def test_invalid_date_rejected() -> None:
    resp = client.get("/v1/panchang", params={"date": "invalid"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid date format. Use YYYY-MM-DD"}

    resp = client.get("/v1/panchang", params={"date": "2026-02-30"})
    assert resp.status_code == 400


@pytest.mark.parametrize("value", ["0001-01-01", "9999-12-31"])
def test_out_of_range_year_rejected(value: str) -> None:
    resp = client.get("/v1/panchang", params={"lat": 28.6139, "lon": 77.2090, "date": value})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Date out of range")


def test_unexpected_failure_is_generic_500(monkeypatch) -> None:
    from panchang.routers import panchang as panchang_router

    def _fail(*args, **kwargs):
        raise RuntimeError("ephemeris exploded")

    monkeypatch.setattr(panchang_router, "build_report", _fail)
    failing = TestClient(app, raise_server_exceptions=False)
    resp = failing.get("/v1/panchang", params=DELHI)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to calculate Panchang"}


def test_midnight_sun_propagates_nulls() -> None:
    resp = client.get("/v1/panchang", params={"lat": 69.6492, "lon": 18.9553, "date": "2026-06-21"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["sunMoon"]["sunrise"] is None
    assert data["sunMoon"]["sunset"] is None
    assert data["dayNight"] is None
    assert data["panchaka"] == []
    assert data["tithi"]["endsAt"] is None
    assert all(value is None for value in data["auspiciousTimes"].values())
    assert data["inauspiciousTimes"]["durMuhurtam"] == []
    assert data["inauspiciousTimes"]["varjyam"] == []
    assert all(rec["bestTime"] is None for rec in data["recommendations"].values())


@pytest.mark.parametrize(
    "lat,lon,day",
    [(67.0, 0.0, "2026-07-11"), (-67.4, 0.0, "2027-01-12")],
)
def test_short_night_near_polar_circle(lat: float, lon: float, day: str) -> None:
    resp = client.get("/v1/panchang", params={"lat": lat, "lon": lon, "date": day})
    assert resp.status_code == 200
    sun = resp.json()["sunMoon"]
    assert sun["sunrise"] is not None and sun["sunset"] is not None
    sunrise, sunset = (datetime.fromisoformat(sun[key].replace("Z", "+00:00")) for key in ("sunrise", "sunset"))
    assert sunrise < sunset


def test_health() -> None:
    resp = client.get("/__health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
