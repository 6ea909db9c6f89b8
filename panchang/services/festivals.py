"""Festival and observance rules."""

from __future__ import annotations

from datetime import date as date_cls
from typing import Dict, Iterable, List, Optional


# paksha ``None`` matches both halves of the month.
TITHI_FEEDS: List[Dict[str, Optional[str]]] = [
    {"paksha": None, "tithi": "Ekadashi", "name": "Ekadashi", "hindi": "एकादशी", "type": "vrat"},
    {"paksha": None, "tithi": "Trayodashi", "name": "Pradosh Vrat", "hindi": "प्रदोष व्रत", "type": "vrat"},
    {"paksha": "Shukla", "tithi": "Purnima", "name": "Purnima", "hindi": "पूर्णिमा", "type": "vrat"},
    {"paksha": "Krishna", "tithi": "Amavasya", "name": "Amavasya", "hindi": "अमावस्या", "type": "observance"},
    {"paksha": "Shukla", "tithi": "Chaturthi", "name": "Vinayaka Chaturthi", "hindi": "विनायक चतुर्थी", "type": "vrat"},
    {"paksha": "Krishna", "tithi": "Chaturthi", "name": "Sankashti Chaturthi", "hindi": "संकष्टी चतुर्थी", "type": "vrat"},
    {"paksha": "Shukla", "tithi": "Shashthi", "name": "Skanda Shashthi", "hindi": "स्कंद षष्ठी", "type": "vrat"},
    {"paksha": "Krishna", "tithi": "Ashtami", "name": "Kalashtami", "hindi": "कालाष्टमी", "type": "vrat"},
    {"paksha": "Krishna", "tithi": "Chaturdashi", "name": "Masik Shivaratri", "hindi": "मासिक शिवरात्रि", "type": "vrat"},
]

CIVIL_FEEDS: List[Dict[str, object]] = [
    {"month": 1, "day": 14, "name": "Makar Sankranti", "hindi": "मकर संक्रांति", "type": "festival"},
    {"month": 1, "day": 26, "name": "Republic Day", "hindi": "गणतंत्र दिवस", "type": "national"},
    {"month": 4, "day": 14, "name": "Baisakhi", "hindi": "बैसाखी", "type": "festival"},
    {"month": 8, "day": 15, "name": "Independence Day", "hindi": "स्वतंत्रता दिवस", "type": "national"},
    {"month": 10, "day": 2, "name": "Gandhi Jayanti", "hindi": "गांधी जयंती", "type": "national"},
    {"month": 12, "day": 25, "name": "Christmas", "hindi": "क्रिसमस", "type": "festival"},
]


def _entry(item: Dict[str, object]) -> Dict[str, object]:
    return {"name": item["name"], "hindi": item["hindi"], "type": item.get("type", "general")}


def tithi_festivals(paksha: str, tithi_name: str) -> List[Dict[str, object]]:
    results: List[Dict[str, object]] = []
    for item in TITHI_FEEDS:
        if item["tithi"] != tithi_name:
            continue
        if item["paksha"] is not None and item["paksha"] != paksha:
            continue
        results.append(_entry(item))
    return results


def civil_festivals(day: date_cls) -> List[Dict[str, object]]:
    return [
        _entry(item)
        for item in CIVIL_FEEDS
        if item["month"] == day.month and item["day"] == day.day
    ]


def merge_observances(*groups: Iterable[Dict[str, object]]) -> List[Dict[str, object]]:
    merged: List[Dict[str, object]] = []
    seen = set()
    for group in groups:
        for data in group:
            if data["name"] in seen:
                continue
            seen.add(data["name"])
            merged.append(data)
    return merged


def festivals_for_date(day: date_cls, paksha: str, tithi_name: str) -> List[Dict[str, object]]:
    return merge_observances(tithi_festivals(paksha, tithi_name), civil_festivals(day))
