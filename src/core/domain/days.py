"""Day-of-week values.

Keeping the enum in the domain layer lets the CLI and the services share a
single source of truth for day names and their order.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Day(IntEnum):
    """The seven days, ordered Monday (0) to Sunday (6)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> "Day":
        """Parse a day name case-insensitively (`"saturday"`, `"Sat"`)."""

        key = name.strip().upper()
        for day in cls:
            if day.name == key or day.name[:3] == key:
                return day
        raise ValueError(f"Unknown day: {name!r}")

    def is_weekend(self) -> bool:
        return self in (Day.SATURDAY, Day.SUNDAY)

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.name.capitalize()


class DayType(str, Enum):
    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"

    def __str__(self) -> str:
        return self.value
