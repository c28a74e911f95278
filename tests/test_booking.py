"""
Tests for the booking flow and appointment management.
"""

from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from salon_booking.application.exceptions import (
    AppointmentNotFoundError,
    BookingWindowError,
    InvalidStatusTransitionError,
    ServiceNotFoundError,
    SlotUnavailableError,
)
from salon_booking.application.use_cases.book_appointment import BookAppointmentUseCase
from salon_booking.application.use_cases.get_available_slots import GetAvailableSlotsUseCase
from salon_booking.application.use_cases.manage_appointments import ManageAppointmentsUseCase
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus
from salon_booking.domain.entities.day_off import DayOff
from salon_booking.infrastructure.store.memory_store import MemorySalonStore

TODAY = date(2026, 10, 19)  # Monday
TUESDAY = date(2026, 10, 20)


def _wire(store: MemorySalonStore) -> tuple[GetAvailableSlotsUseCase, BookAppointmentUseCase, ManageAppointmentsUseCase]:
    availability = GetAvailableSlotsUseCase(hours=store, days_off=store, appointments=store, catalog=store)
    booking = BookAppointmentUseCase(
        availability=availability,
        appointments=store,
        catalog=store,
        timezone=ZoneInfo("UTC"),
        booking_window_days=90,
        today=lambda: TODAY,
    )
    return availability, booking, ManageAppointmentsUseCase(appointments=store)


def _book(booking: BookAppointmentUseCase, start_time: str, service_id: str = "haircut", day: date = TUESDAY) -> Appointment:
    return booking.execute(
        service_id=service_id,
        day=day,
        start_time=start_time,
        client_name=" Alex Rivera ",
        client_email="alex@example.com",
        client_phone="",
    )


def test_availability_by_service_uses_service_duration():
    store = MemorySalonStore()
    availability, _, _ = _wire(store)

    result = availability.execute(TUESDAY, service_id="full_colour")

    assert result.duration_minutes == 90
    assert result.slots[0].time == "09:00"
    assert result.slots[-1].time == "15:30"


def test_availability_by_explicit_duration():
    availability, _, _ = _wire(MemorySalonStore())

    result = availability.execute(TUESDAY, duration_minutes=30)

    assert result.duration_minutes == 30
    assert result.slots[-1].time == "16:30"


def test_availability_requires_service_or_duration():
    availability, _, _ = _wire(MemorySalonStore())

    with pytest.raises(ServiceNotFoundError):
        availability.execute(TUESDAY, service_id="missing")
    with pytest.raises(ValueError):
        availability.execute(TUESDAY)


def test_book_creates_confirmed_appointment_with_end_time():
    store = MemorySalonStore()
    _, booking, _ = _wire(store)

    appointment = _book(booking, "10:00", service_id="blow_dry")

    assert appointment.status == AppointmentStatus.CONFIRMED
    assert appointment.start_time == "10:00"
    assert appointment.end_time == "10:45"
    assert appointment.date == TUESDAY
    assert appointment.client_name == "Alex Rivera"
    assert appointment.client_phone is None
    assert store.get_appointment(appointment.id) == appointment


def test_booked_slot_is_no_longer_offered():
    store = MemorySalonStore()
    availability, booking, _ = _wire(store)

    _book(booking, "10:00", service_id="blow_dry")
    times = [slot.time for slot in availability.execute(TUESDAY, service_id="haircut").slots]

    assert "10:00" not in times
    assert "10:30" not in times
    assert "09:30" in times
    assert "11:00" in times

    with pytest.raises(SlotUnavailableError):
        _book(booking, "10:30")


def test_book_rejects_time_off_grid_or_after_close():
    _, booking, _ = _wire(MemorySalonStore())

    with pytest.raises(SlotUnavailableError):
        _book(booking, "10:10")
    with pytest.raises(SlotUnavailableError):
        _book(booking, "16:30", service_id="pedicure")
    with pytest.raises(ValueError):
        _book(booking, "quarter past")


def test_book_rejects_closed_day_and_day_off():
    store = MemorySalonStore()
    _, booking, _ = _wire(store)

    with pytest.raises(SlotUnavailableError):
        _book(booking, "10:00", day=date(2026, 10, 24))

    store.add_day_off(DayOff(id="off", date=TUESDAY, reason="Holiday"))
    with pytest.raises(SlotUnavailableError):
        _book(booking, "10:00")


def test_book_enforces_booking_window():
    _, booking, _ = _wire(MemorySalonStore())

    with pytest.raises(BookingWindowError):
        _book(booking, "10:00", day=date(2026, 10, 16))
    with pytest.raises(BookingWindowError):
        _book(booking, "10:00", day=date(2027, 3, 1))
    with pytest.raises(ServiceNotFoundError):
        _book(booking, "10:00", service_id="missing")


def test_cancelled_appointment_frees_the_slot():
    store = MemorySalonStore()
    availability, booking, manage = _wire(store)

    appointment = _book(booking, "11:00")
    manage.cancel(appointment.id)

    times = [slot.time for slot in availability.execute(TUESDAY, service_id="haircut").slots]
    assert "11:00" in times
    rebooked = _book(booking, "11:00")
    assert rebooked.id != appointment.id


def test_status_transitions():
    store = MemorySalonStore()
    _, booking, manage = _wire(store)

    done = _book(booking, "09:00")
    assert manage.complete(done.id).status == AppointmentStatus.COMPLETED
    with pytest.raises(InvalidStatusTransitionError):
        manage.cancel(done.id)

    cancelled = _book(booking, "13:00")
    manage.cancel(cancelled.id)
    with pytest.raises(InvalidStatusTransitionError):
        manage.confirm(cancelled.id)
    with pytest.raises(InvalidStatusTransitionError):
        manage.complete(cancelled.id)

    with pytest.raises(AppointmentNotFoundError):
        manage.cancel("appt_missing")


def test_pending_appointment_can_be_confirmed():
    store = MemorySalonStore()
    _, _, manage = _wire(store)
    store.add_appointment(
        Appointment(
            id="appt_pending",
            service_id="manicure",
            client_name="Sam Lee",
            client_email="sam@example.com",
            date=TUESDAY,
            start_time="14:00",
            end_time="14:45",
            status=AppointmentStatus.PENDING,
        )
    )

    assert manage.confirm("appt_pending").status == AppointmentStatus.CONFIRMED
    with pytest.raises(InvalidStatusTransitionError):
        manage.confirm("appt_pending")


def test_appointments_for_date_and_dates():
    store = MemorySalonStore()
    _, booking, manage = _wire(store)

    late = _book(booking, "15:00")
    early = _book(booking, "09:30")
    cancelled = _book(booking, "12:00")
    manage.cancel(cancelled.id)
    _book(booking, "10:00", day=date(2026, 10, 22))

    assert [a.id for a in manage.appointments_for_date(TUESDAY)] == [early.id, late.id]
    assert manage.appointment_dates() == [TUESDAY, date(2026, 10, 22)]


def test_appointments_for_date_orders_unpadded_times_by_clock():
    store = MemorySalonStore()
    _, _, manage = _wire(store)
    for appointment_id, start, end in [("appt_ten", "10:00", "10:30"), ("appt_nine", "9:00", "9:30")]:
        store.add_appointment(
            Appointment(
                id=appointment_id,
                service_id="haircut",
                client_name="Sam Lee",
                client_email="sam@example.com",
                date=TUESDAY,
                start_time=start,
                end_time=end,
                status=AppointmentStatus.CONFIRMED,
            )
        )

    assert [a.start_time for a in manage.appointments_for_date(TUESDAY)] == ["9:00", "10:00"]


def test_book_rejects_blank_client_name():
    _, booking, _ = _wire(MemorySalonStore())

    with pytest.raises(ValueError):
        booking.execute(
            service_id="haircut",
            day=TUESDAY,
            start_time="10:00",
            client_name="   ",
            client_email="alex@example.com",
        )
