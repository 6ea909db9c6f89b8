"""Special combination (vishesh yoga) flags for the day.

Each flag is an independent lookup over weekday, nakshatra, tithi and yoga
names; several can hold on the same day.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple


SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

# One nakshatra per weekday.
AMRIT_SIDDHI = {
    SUNDAY: "Hasta",
    MONDAY: "Mrigashira",
    TUESDAY: "Ashwini",
    WEDNESDAY: "Anuradha",
    THURSDAY: "Pushya",
    FRIDAY: "Revati",
    SATURDAY: "Rohini",
}

# (nakshatra, weekdays on which it forms Sarvartha Siddhi)
SARVARTHA_SIDDHI: Tuple[Tuple[str, FrozenSet[int]], ...] = (
    ("Hasta", frozenset({SUNDAY, MONDAY})),
    ("Mula", frozenset({SUNDAY})),
    ("Uttara Ashadha", frozenset({SUNDAY})),
    ("Uttara Phalguni", frozenset({SUNDAY})),
    ("Uttara Bhadrapada", frozenset({SUNDAY})),
    ("Pushya", frozenset({SUNDAY, THURSDAY})),
    ("Ashwini", frozenset({SUNDAY, TUESDAY, THURSDAY, FRIDAY})),
    ("Shravana", frozenset({MONDAY, SATURDAY})),
    ("Rohini", frozenset({MONDAY, WEDNESDAY, SATURDAY})),
    ("Mrigashira", frozenset({MONDAY, WEDNESDAY})),
    ("Anuradha", frozenset({MONDAY, WEDNESDAY, FRIDAY})),
    ("Krittika", frozenset({TUESDAY, WEDNESDAY})),
    ("Ashlesha", frozenset({TUESDAY})),
    ("Punarvasu", frozenset({THURSDAY, FRIDAY})),
    ("Revati", frozenset({THURSDAY, FRIDAY})),
    ("Swati", frozenset({SATURDAY})),
)

PUSHKAR_WEEKDAYS = frozenset({SUNDAY, TUESDAY, SATURDAY})
PUSHKAR_TITHIS = frozenset({"Dwitiya", "Saptami", "Dwadashi"})
DWIPUSHKAR_NAKSHATRAS = frozenset({"Mrigashira", "Chitra", "Dhanishta"})
TRIPUSHKAR_NAKSHATRAS = frozenset(
    {"Krittika", "Punarvasu", "Uttara Phalguni", "Vishakha", "Uttara Ashadha", "Purva Bhadrapada"}
)

GAND_MOOL_NAKSHATRAS = frozenset({"Ashwini", "Ashlesha", "Magha", "Jyeshtha", "Mula", "Revati"})
MAHAPATA_YOGAS = frozenset({"Vyatipata", "Vaidhriti"})

FLAG_NAMES = (
    "sarvartha_siddhi",
    "amrit_siddhi",
    "ravi_pushya",
    "guru_pushya",
    "dwipushkar",
    "tripushkar",
    "gand_mool",
    "vyatipata_vaidhriti",
)

# (flag, English note, Hindi note) in priority order for the day summary.
NOTE_PRIORITY: Tuple[Tuple[str, str, str], ...] = (
    ("ravi_pushya", "Ravi Pushya Yoga - highly auspicious for purchases", "रवि पुष्य योग - खरीदारी के लिए अत्यंत शुभ"),
    ("guru_pushya", "Guru Pushya Yoga - highly auspicious for new beginnings", "गुरु पुष्य योग - नए कार्यों के लिए अत्यंत शुभ"),
    ("amrit_siddhi", "Amrit Siddhi Yoga - all undertakings succeed", "अमृत सिद्धि योग - सभी कार्य सिद्ध होते हैं"),
    ("sarvartha_siddhi", "Sarvartha Siddhi Yoga - favourable for all purposes", "सर्वार्थ सिद्धि योग - सभी कार्यों के लिए अनुकूल"),
    ("dwipushkar", "Dwipushkar Yoga - results of actions double", "द्विपुष्कर योग - कार्यों का फल दोगुना"),
    ("tripushkar", "Tripushkar Yoga - results of actions triple", "त्रिपुष्कर योग - कार्यों का फल तिगुना"),
)
EKADASHI_NOTE = ("Ekadashi - observe fasting and devotion", "एकादशी - व्रत और भक्ति का दिन")
LATE_NOTES: Tuple[Tuple[str, str, str], ...] = (
    ("gand_mool", "Gand Mool Nakshatra - avoid new beginnings", "गंड मूल नक्षत्र - नए कार्य टालें"),
    ("vyatipata_vaidhriti", "Vyatipata/Vaidhriti Yoga - avoid auspicious work", "व्यतीपात/वैधृति योग - शुभ कार्य टालें"),
)


def _base_tithi(tithi_name: str) -> str:
    return tithi_name.split()[-1]


def compute_special_yogas(
    weekday: int,
    nakshatra_name: str,
    tithi_name: str,
    yoga_name: str,
) -> Dict[str, bool]:
    base_tithi = _base_tithi(tithi_name)
    pushkar_day = weekday in PUSHKAR_WEEKDAYS and base_tithi in PUSHKAR_TITHIS

    return {
        "sarvartha_siddhi": any(
            nakshatra_name == name and weekday in days for name, days in SARVARTHA_SIDDHI
        ),
        "amrit_siddhi": AMRIT_SIDDHI[weekday] == nakshatra_name,
        "ravi_pushya": weekday == SUNDAY and nakshatra_name == "Pushya",
        "guru_pushya": weekday == THURSDAY and nakshatra_name == "Pushya",
        "dwipushkar": pushkar_day and nakshatra_name in DWIPUSHKAR_NAKSHATRAS,
        "tripushkar": pushkar_day and nakshatra_name in TRIPUSHKAR_NAKSHATRAS,
        "gand_mool": nakshatra_name in GAND_MOOL_NAKSHATRAS,
        "vyatipata_vaidhriti": yoga_name in MAHAPATA_YOGAS,
    }


def special_note(flags: Dict[str, bool], tithi_name: str) -> Optional[Tuple[str, str]]:
    """Pick the single most important note for the day, or ``None``."""

    for flag, note, note_hindi in NOTE_PRIORITY:
        if flags.get(flag):
            return note, note_hindi
    if _base_tithi(tithi_name) == "Ekadashi":
        return EKADASHI_NOTE
    for flag, note, note_hindi in LATE_NOTES:
        if flags.get(flag):
            return note, note_hindi
    return None
