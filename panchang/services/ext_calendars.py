"""Samvat (era year) helpers used by the Panchang orchestrator.

Both eras are keyed off the civil month rather than the lunar new year, so
the changeover lands on the first of the month.
"""

from __future__ import annotations

from datetime import date as date_cls
from typing import Dict


def vikram_samvat(day: date_cls) -> int:
    return day.year + 57 if day.month >= 4 else day.year + 56


def shaka_samvat(day: date_cls) -> int:
    return day.year - 78 if day.month >= 3 else day.year - 79


def build_samvats(day: date_cls) -> Dict[str, int]:
    return {
        "vikram_samvat": vikram_samvat(day),
        "shaka_samvat": shaka_samvat(day),
    }
