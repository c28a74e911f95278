from __future__ import annotations

import logging
import uuid
from datetime import date

from salon_booking.application.exceptions import DayOffNotFoundError, DuplicateDayOffError
from salon_booking.application.ports.days_off import DayOffPort
from salon_booking.application.ports.operating_hours import OperatingHoursPort
from salon_booking.application.utils.time_of_day import parse_time_of_day, to_calendar_day
from salon_booking.domain.entities.day_off import DayOff
from salon_booking.domain.entities.operating_hours import DayHours
from salon_booking.domain.entities.weekday import Weekday


class SalonHoursUseCase:
    """Opening hours and days off administration."""

    def __init__(self, hours: OperatingHoursPort, days_off: DayOffPort) -> None:
        self._hours = hours
        self._days_off = days_off
        self._logger = logging.getLogger(__name__)

    def get_hours(self) -> dict[Weekday, DayHours]:
        stored = self._hours.get_operating_hours()
        return {weekday: stored.get(weekday, DayHours()) for weekday in Weekday}

    def update_day(self, weekday: Weekday, is_open: bool, open_time: str, close_time: str) -> DayHours:
        open_minutes = parse_time_of_day(open_time)
        close_minutes = parse_time_of_day(close_time)
        if is_open and open_minutes >= close_minutes:
            raise ValueError("open_time must be before close_time")

        hours = DayHours(is_open=is_open, open_time=open_time, close_time=close_time)
        self._hours.set_day_hours(weekday, hours)
        self._logger.info("Salon hours updated", extra={"reason": weekday.label})
        return hours

    def list_days_off(self) -> list[DayOff]:
        return sorted(self._days_off.list_days_off(), key=_sort_key)

    def add_day_off(self, day: date, reason: str | None = None) -> DayOff:
        for existing in self._days_off.list_days_off():
            if _sort_key(existing) == day:
                raise DuplicateDayOffError(f"{day.isoformat()} is already a day off")

        day_off = DayOff(
            id=f"dayoff_{uuid.uuid4().hex[:12]}",
            date=day,
            reason=(reason or "").strip() or "Closed",
        )
        self._days_off.add_day_off(day_off)
        self._logger.info("Day off added", extra={"date": day.isoformat(), "reason": day_off.reason})
        return day_off

    def remove_day_off(self, day_off_id: str) -> None:
        if not self._days_off.remove_day_off(day_off_id):
            raise DayOffNotFoundError(f"Unknown day off: {day_off_id}")
        self._logger.info("Day off removed", extra={"value": day_off_id})


def _sort_key(day_off: DayOff) -> date:
    try:
        return to_calendar_day(day_off.date)
    except ValueError:
        return date.max
