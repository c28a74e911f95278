"""
Slot availability for a single salon day.

Given a date, the weekly opening hours, the days off and the existing
appointments, compute the start times a service of a given duration can be
booked at. Everything here is a pure function of its arguments.

Bad records (malformed times or dates) are skipped with a warning so that one
broken row never empties a whole day.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from salon_booking.application.utils.time_of_day import parse_time_of_day, to_calendar_day
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.domain.entities.day_off import DayOff
from salon_booking.domain.entities.operating_hours import OperatingHours
from salon_booking.domain.entities.time_slot import TimeSlot
from salon_booking.domain.entities.weekday import Weekday

DEFAULT_SLOT_STEP_MINUTES = 30

logger = logging.getLogger(__name__)


def overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Half-open intervals [start, end) share at least one minute."""
    return start_a < end_b and end_a > start_b


def generate_base_slots(
    target_date: date,
    operating_hours: OperatingHours,
    days_off: Iterable[DayOff],
    step_minutes: int = DEFAULT_SLOT_STEP_MINUTES,
) -> list[TimeSlot]:
    """
    Candidate slots for a day, every ``step_minutes`` from opening time.

    A day off wins over the weekly hours. Closed, missing or inverted hours
    produce no slots.
    """
    day = _require_day(target_date)
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")

    if _is_day_off(day, days_off):
        logger.info("Salon closed for day off", extra={"date": day.isoformat()})
        return []

    window = _opening_window(day, operating_hours)
    if window is None:
        return []

    open_minutes, close_minutes = window
    slots: list[TimeSlot] = []
    slot_start = open_minutes
    while slot_start < close_minutes:
        slots.append(TimeSlot.starting_at(slot_start))
        slot_start += step_minutes
    return slots


def filter_available(
    base_slots: Sequence[TimeSlot],
    target_date: date,
    duration_minutes: int,
    appointments: Iterable[Appointment],
    operating_hours: OperatingHours,
) -> list[TimeSlot]:
    """
    Keep the slots a service of ``duration_minutes`` can actually be booked at.

    Slots overlapping a non-cancelled appointment on the same day are dropped,
    as are slots that would run past closing time. Only bookable slots are
    returned, in the order they were given.
    """
    day = _require_day(target_date)
    if duration_minutes <= 0:
        raise ValueError("duration_minutes must be positive")

    window = _opening_window(day, operating_hours)
    if window is None:
        return []
    _, close_minutes = window

    busy = _busy_intervals(day, appointments)

    available: list[TimeSlot] = []
    for slot in base_slots:
        if not slot.available:
            continue
        try:
            slot_start = parse_time_of_day(slot.time)
        except ValueError as exc:
            logger.warning("Skipping slot with malformed time", extra={"value": slot.time, "reason": str(exc)})
            continue

        slot_end = slot_start + duration_minutes
        if slot_end > close_minutes:
            continue
        if any(overlaps(slot_start, slot_end, appt_start, appt_end) for appt_start, appt_end in busy):
            continue
        available.append(slot)

    return available


def compute_available_slots(
    target_date: date,
    duration_minutes: int,
    operating_hours: OperatingHours,
    days_off: Iterable[DayOff],
    appointments: Iterable[Appointment],
    step_minutes: int = DEFAULT_SLOT_STEP_MINUTES,
) -> list[TimeSlot]:
    base_slots = generate_base_slots(target_date, operating_hours, days_off, step_minutes)
    slots = filter_available(base_slots, target_date, duration_minutes, appointments, operating_hours)
    logger.debug(
        "Computed available slots",
        extra={"date": _require_day(target_date).isoformat(), "slot_count": len(slots)},
    )
    return slots


def _require_day(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"target_date must be a date, got {type(value).__name__}")


def _is_day_off(day: date, days_off: Iterable[DayOff]) -> bool:
    for day_off in days_off:
        try:
            if to_calendar_day(day_off.date) == day:
                return True
        except ValueError as exc:
            logger.warning("Skipping day off with malformed date", extra={"value": day_off.id, "reason": str(exc)})
    return False


def _opening_window(day: date, operating_hours: OperatingHours) -> tuple[int, int] | None:
    hours = operating_hours.get(Weekday.from_date(day))
    if hours is None or not hours.is_open:
        return None

    try:
        open_minutes = parse_time_of_day(hours.open_time)
        close_minutes = parse_time_of_day(hours.close_time)
    except ValueError as exc:
        logger.warning("Ignoring malformed opening hours", extra={"date": day.isoformat(), "reason": str(exc)})
        return None

    if open_minutes >= close_minutes:
        return None
    return open_minutes, close_minutes


def _busy_intervals(day: date, appointments: Iterable[Appointment]) -> list[tuple[int, int]]:
    intervals: list[tuple[int, int]] = []
    for appointment in appointments:
        interval = _appointment_interval(day, appointment)
        if interval is not None:
            intervals.append(interval)
    return intervals


def _appointment_interval(day: date, appointment: Appointment) -> tuple[int, int] | None:
    if not appointment.occupies_calendar:
        return None

    try:
        if to_calendar_day(appointment.date) != day:
            return None
        start = parse_time_of_day(appointment.start_time)
        end = parse_time_of_day(appointment.end_time)
    except ValueError as exc:
        logger.warning(
            "Skipping appointment with malformed schedule",
            extra={"appointment_id": appointment.id, "reason": str(exc)},
        )
        return None

    if start >= end:
        logger.warning(
            "Skipping appointment that ends before it starts",
            extra={"appointment_id": appointment.id, "value": f"{appointment.start_time}-{appointment.end_time}"},
        )
        return None
    return start, end
