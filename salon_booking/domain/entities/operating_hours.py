from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from salon_booking.domain.entities.weekday import Weekday


@dataclass(frozen=True)
class DayHours:
    is_open: bool = False
    open_time: str = "09:00"  # HH:MM, ignored when closed
    close_time: str = "17:00"


# Weekly table keyed by weekday; a missing key means closed
OperatingHours = Mapping[Weekday, DayHours]
