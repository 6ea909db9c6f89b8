"""Activity recommendations and the day-quality summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..i18n.panchang_labels import Label
from ..i18n.resolve import activity_label, day_type_label
from .muhurta import TimeWindow
from .panchang_algos import Nakshatra, Tithi
from .special_yogas import GAND_MOOL_NAKSHATRAS, special_note


SUITABLE_SCORE = 50

PROPERTY_NAKSHATRAS = frozenset(
    {
        "Rohini",
        "Mrigashira",
        "Pushya",
        "Uttara Phalguni",
        "Hasta",
        "Chitra",
        "Swati",
        "Anuradha",
        "Uttara Ashadha",
        "Shravana",
        "Dhanishta",
        "Uttara Bhadrapada",
        "Revati",
    }
)
RELIGIOUS_TITHIS = frozenset({"Panchami", "Ashtami", "Ekadashi", "Chaturdashi", "Purnima", "Amavasya"})
RELIGIOUS_NAKSHATRAS = frozenset(
    {"Ashwini", "Punarvasu", "Pushya", "Hasta", "Anuradha", "Shravana", "Revati"}
)
# Rikta tithis and the full/new moon are excluded.
GENERAL_TITHIS = frozenset(
    {"Pratipada", "Dwitiya", "Tritiya", "Panchami", "Saptami", "Dashami", "Ekadashi", "Dwadashi", "Trayodashi"}
)

WAXING = Label("Waxing moon (Shukla paksha)", "शुक्ल पक्ष")
NO_GAND_MOOL = Label("No Gand Mool nakshatra", "गंड मूल नक्षत्र नहीं")
NO_SUPPORT = Label("No supporting factors today", "आज कोई अनुकूल कारक नहीं")


@dataclass(frozen=True)
class Recommendation:
    score: int
    suitable: bool
    reason: str
    reason_hindi: str
    best_time: Optional[TimeWindow]
    avoid_time: Optional[TimeWindow]


@dataclass(frozen=True)
class DaySummary:
    day_type: str
    day_type_hindi: str
    good_for: List[str]
    avoid_for: List[str]
    special_note: Optional[str]
    special_note_hindi: Optional[str]


def _score(
    conditions: Sequence[Tuple[int, bool, Label]],
    best_time: Optional[TimeWindow],
    avoid_time: Optional[TimeWindow],
) -> Recommendation:
    met = [label for _, ok, label in conditions if ok]
    score = min(100, sum(weight for weight, ok, _ in conditions if ok))
    if not met:
        met = [NO_SUPPORT]
    return Recommendation(
        score=score,
        suitable=score >= SUITABLE_SCORE,
        reason=", ".join(label.name for label in met),
        reason_hindi=", ".join(label.hindi for label in met),
        best_time=best_time,
        avoid_time=avoid_time,
    )


def build_recommendations(
    tithi: Tithi,
    nakshatra: Nakshatra,
    windows: Dict[str, Dict[str, object]],
) -> Dict[str, Recommendation]:
    auspicious = windows["auspicious"]
    rahu = windows["inauspicious"]["rahu_kaal"]
    waxing = tithi.paksha == "Shukla"

    property_nak = Label(f"{nakshatra.name} favours property", f"{nakshatra.hindi} संपत्ति के लिए शुभ")
    sacred_tithi = Label(f"{tithi.name} is sacred", f"{tithi.hindi} पवित्र तिथि")
    worship_nak = Label(f"{nakshatra.name} supports worship", f"{nakshatra.hindi} पूजा के लिए शुभ")
    good_tithi = Label(f"{tithi.name} is a favourable tithi", f"{tithi.hindi} शुभ तिथि")

    property_and_home = (
        (50, waxing, WAXING),
        (50, nakshatra.name in PROPERTY_NAKSHATRAS, property_nak),
    )
    religious = (
        (50, tithi.name in RELIGIOUS_TITHIS, sacred_tithi),
        (50, nakshatra.name in RELIGIOUS_NAKSHATRAS, worship_nak),
    )
    general = (
        (30, waxing, WAXING),
        (40, tithi.name in GENERAL_TITHIS, good_tithi),
        (30, nakshatra.name not in GAND_MOOL_NAKSHATRAS, NO_GAND_MOOL),
    )

    return {
        "property_and_home": _score(property_and_home, auspicious["abhijit_muhurta"], rahu),
        "religious_and_spiritual": _score(religious, auspicious["brahma_muhurta"], rahu),
        "general_activities": _score(
            general,
            auspicious["amrit_kaal"] or auspicious["vijaya_muhurta"],
            rahu,
        ),
    }


def classify_day(good: int, bad: int) -> str:
    if good > 2 * bad:
        return "Auspicious"
    if bad > 2 * good:
        return "Inauspicious"
    return "Mixed"


def build_summary(
    recommendations: Dict[str, Recommendation],
    flags: Dict[str, bool],
    tithi_name: str,
) -> DaySummary:
    good_for = [activity_label(key).name for key, rec in recommendations.items() if rec.suitable]
    avoid_for = [activity_label(key).name for key, rec in recommendations.items() if not rec.suitable]
    label = day_type_label(classify_day(len(good_for), len(avoid_for)))
    note = special_note(flags, tithi_name)

    return DaySummary(
        day_type=label.name,
        day_type_hindi=label.hindi,
        good_for=good_for,
        avoid_for=avoid_for,
        special_note=note[0] if note else None,
        special_note_hindi=note[1] if note else None,
    )
