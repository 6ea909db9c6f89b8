"""Helpers for the Panchaka Rahita daytime partition."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from ..i18n.panchang_labels import PANCHAKA_TYPES
from ..i18n.resolve import panchaka_label


PANCHAKA_SEGMENTS = 14
GOOD = "Good"


def panchaka_slots(
    sunrise_local: Optional[datetime],
    sunset_local: Optional[datetime],
    tithi_number: int,
) -> List[Dict[str, object]]:
    """Split sunrise→sunset into 14 equal slots tagged by ``(slot + tithi) mod 6``."""

    if sunrise_local is None or sunset_local is None:
        return []

    segment = (sunset_local - sunrise_local) / PANCHAKA_SEGMENTS
    slots: List[Dict[str, object]] = []
    current = sunrise_local
    for idx in range(PANCHAKA_SEGMENTS):
        end = sunset_local if idx == PANCHAKA_SEGMENTS - 1 else current + segment
        label = panchaka_label((idx + tithi_number) % len(PANCHAKA_TYPES))
        slots.append(
            {
                "index": idx + 1,
                "start": current,
                "end": end,
                "type": label.name,
                "type_hindi": label.hindi,
                "is_good": label.name == GOOD,
            }
        )
        current = end
    return slots
