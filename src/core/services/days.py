from __future__ import annotations

from core.domain.days import Day, DayType


def get_day_type(day: Day) -> DayType:
    """Classify `day` as `"Weekend"` (Saturday, Sunday) or `"Weekday"`."""

    return DayType.WEEKEND if day.is_weekend() else DayType.WEEKDAY
