from __future__ import annotations

from datetime import date
from enum import IntEnum


class Weekday(IntEnum):
    """Day of week as stored in ``salon_hours.day_of_week`` (0=Sunday)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, value: date) -> Weekday:
        # isoweekday() is 1=Monday..7=Sunday
        return cls(value.isoweekday() % 7)

    @classmethod
    def parse(cls, value: int | str) -> Weekday:
        """Accept an index (0-6) or a day name such as ``"monday"``."""
        if isinstance(value, int):
            return cls(value)
        normalized = value.strip()
        if normalized.isdigit():
            return cls(int(normalized))
        try:
            return cls[normalized.upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday: {value!r}") from None

    @property
    def label(self) -> str:
        return self.name.capitalize()
