from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.operating_hours import DayHours
from salon_booking.domain.entities.weekday import Weekday


class OperatingHoursPort(ABC):
    @abstractmethod
    def get_operating_hours(self) -> dict[Weekday, DayHours]:
        """Weekly opening hours. Weekdays without a row are closed."""
        raise NotImplementedError

    @abstractmethod
    def set_day_hours(self, weekday: Weekday, hours: DayHours) -> None:
        """Create or replace the row for one weekday."""
        raise NotImplementedError
