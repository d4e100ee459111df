"""Public holiday lookup used to warn about campaign dates."""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from campaign_calendar.constants import TURKISH_HOLIDAYS


def holiday_for(day: date) -> Optional[str]:
    return TURKISH_HOLIDAYS.get(day.isoformat())


def holidays_in_year(year: int) -> Dict[str, str]:
    prefix = f"{year:04d}-"
    return {key: name for key, name in TURKISH_HOLIDAYS.items() if key.startswith(prefix)}


__all__ = ["holiday_for", "holidays_in_year"]
