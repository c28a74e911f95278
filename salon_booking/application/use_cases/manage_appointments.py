from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from salon_booking.application.exceptions import AppointmentNotFoundError, InvalidStatusTransitionError
from salon_booking.application.ports.appointments import AppointmentPort
from salon_booking.application.utils.time_of_day import parse_time_of_day, to_calendar_day
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus


class ManageAppointmentsUseCase:
    def __init__(self, appointments: AppointmentPort) -> None:
        self._appointments = appointments
        self._logger = logging.getLogger(__name__)

    def get(self, appointment_id: str) -> Appointment:
        appointment = self._appointments.get_appointment(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(f"Unknown appointment: {appointment_id}")
        return appointment

    def appointments_for_date(self, day: date) -> list[Appointment]:
        """Non-cancelled appointments on ``day``, earliest first."""
        appointments = [a for a in self._appointments.list_appointments(day) if a.occupies_calendar]
        return sorted(appointments, key=_start_minutes)

    def appointment_dates(self) -> list[date]:
        """Unique days that have at least one non-cancelled appointment."""
        days: set[date] = set()
        for appointment in self._appointments.list_appointments():
            if not appointment.occupies_calendar:
                continue
            try:
                days.add(to_calendar_day(appointment.date))
            except ValueError:
                continue
        return sorted(days)

    def confirm(self, appointment_id: str) -> Appointment:
        return self._transition(appointment_id, AppointmentStatus.CONFIRMED)

    def cancel(self, appointment_id: str) -> Appointment:
        return self._transition(appointment_id, AppointmentStatus.CANCELLED)

    def complete(self, appointment_id: str) -> Appointment:
        return self._transition(appointment_id, AppointmentStatus.COMPLETED)

    def _transition(self, appointment_id: str, status: AppointmentStatus) -> Appointment:
        appointment = self.get(appointment_id)
        if not appointment.can_transition_to(status):
            current = appointment.status.value if isinstance(appointment.status, AppointmentStatus) else appointment.status
            raise InvalidStatusTransitionError(f"Cannot move appointment from {current} to {status.value}")

        updated = replace(appointment, status=status)
        self._appointments.save_appointment(updated)
        self._logger.info(
            "Appointment status changed",
            extra={"appointment_id": appointment_id, "reason": status.value},
        )
        return updated


def _start_minutes(appointment: Appointment) -> int:
    # Stored times may be unpadded ("9:00"); malformed ones sort last
    try:
        return parse_time_of_day(appointment.start_time)
    except ValueError:
        return 24 * 60 + 1
