"""Resolve Panchang labels from the static tables."""

from __future__ import annotations

from .panchang_labels import (
    ACTIVITIES,
    AYANA,
    DAY_TYPES,
    KARANAS,
    MASA,
    NAKSHATRAS,
    PAKSHA,
    PANCHAKA_TYPES,
    RASHIS,
    RITUS,
    TITHIS,
    VARA,
    YOGAS,
    Label,
    NakshatraRow,
    RashiRow,
    RituRow,
)


def vara_label(dow: int) -> Label:
    """Weekday label, ``dow`` 0 = Sunday."""

    return VARA[dow]


def paksha_label(paksha: str) -> Label:
    return PAKSHA[paksha]


def tithi_label(number: int) -> Label:
    return TITHIS[number - 1]


def nak_row(number: int) -> NakshatraRow:
    return NAKSHATRAS[number - 1]


def yoga_label(number: int) -> Label:
    return YOGAS[number - 1]


def karana_label(number: int) -> Label:
    return KARANAS[number - 1]


def rashi_row(index: int) -> RashiRow:
    return RASHIS[index - 1]


def masa_label(idx: int) -> Label:
    return MASA[idx]


def ritu_row(idx: int) -> RituRow:
    return RITUS[idx]


def ayana_label(half_year: str) -> Label:
    return AYANA[half_year]


def panchaka_label(idx: int) -> Label:
    return PANCHAKA_TYPES[idx]


def day_type_label(day_type: str) -> Label:
    return DAY_TYPES[day_type]


def activity_label(key: str) -> Label:
    return ACTIVITIES[key]
