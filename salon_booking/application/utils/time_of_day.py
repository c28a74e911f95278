from __future__ import annotations

import re
from datetime import date, datetime

# HH:MM, optionally with seconds as returned by SQL time columns
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_time_of_day(value: str) -> int:
    """Parse ``HH:MM`` (or ``HH:MM:SS``) into minutes since midnight.

    ``24:00`` is end of day (1440) so a salon can close at midnight.
    Raises ValueError for anything that is not a valid 24-hour clock time.
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected a time string, got {type(value).__name__}")

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Malformed time of day: {value!r}")

    hour = int(match.group(1))
    minute = int(match.group(2))
    second = int(match.group(3) or 0)
    if hour == 24 and minute == 0 and second == 0:
        return 24 * 60
    if hour > 23 or minute > 59 or second > 59:
        raise ValueError(f"Time of day out of range: {value!r}")

    return hour * 60 + minute


def format_time_of_day(minutes: int) -> str:
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def to_calendar_day(value: date | datetime | str) -> date:
    """Normalize a date-like value to a calendar day, dropping any time of day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise ValueError(f"Malformed calendar date: {value!r}") from None
    raise ValueError(f"Expected a date, got {type(value).__name__}")
