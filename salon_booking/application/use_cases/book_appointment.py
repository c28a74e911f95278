from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from salon_booking.application.exceptions import (
    BookingWindowError,
    ServiceNotFoundError,
    SlotUnavailableError,
)
from salon_booking.application.ports.appointments import AppointmentPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.use_cases.get_available_slots import GetAvailableSlotsUseCase
from salon_booking.application.utils.time_of_day import format_time_of_day, parse_time_of_day
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus


class BookAppointmentUseCase:
    def __init__(
        self,
        availability: GetAvailableSlotsUseCase,
        appointments: AppointmentPort,
        catalog: ServiceCatalogPort,
        timezone: ZoneInfo,
        booking_window_days: int = 90,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._availability = availability
        self._appointments = appointments
        self._catalog = catalog
        self._timezone = timezone
        self._booking_window_days = booking_window_days
        self._today = today or (lambda: datetime.now(self._timezone).date())
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        service_id: str,
        day: date,
        start_time: str,
        client_name: str,
        client_email: str,
        client_phone: str | None = None,
    ) -> Appointment:
        """
        Book a confirmed appointment at ``start_time`` on ``day``.

        Availability is recomputed against the stored calendar, so a slot that
        was offered earlier but has since been taken raises SlotUnavailableError.
        """
        service = self._catalog.get_service(service_id)
        if service is None:
            raise ServiceNotFoundError(f"Unknown service: {service_id}")

        self._check_booking_window(day)

        name = client_name.strip()
        if not name:
            raise ValueError("client_name must not be blank")

        start_minutes = parse_time_of_day(start_time)
        requested = format_time_of_day(start_minutes)

        offered = {slot.time for slot in self._availability.slots_for_duration(day, service.duration)}
        if requested not in offered:
            self._logger.info(
                "Requested slot not available",
                extra={"date": day.isoformat(), "service_id": service_id, "value": requested},
            )
            raise SlotUnavailableError(f"{requested} on {day.isoformat()} is not available")

        appointment = Appointment(
            id=f"appt_{uuid.uuid4().hex[:12]}",
            service_id=service.id,
            client_name=name,
            client_email=client_email.strip(),
            client_phone=(client_phone or "").strip() or None,
            date=day,
            start_time=requested,
            end_time=format_time_of_day(start_minutes + service.duration),
            status=AppointmentStatus.CONFIRMED,
            created_at=time.time(),
        )
        self._appointments.add_appointment(appointment)
        self._logger.info(
            "Appointment booked",
            extra={"appointment_id": appointment.id, "date": day.isoformat(), "service_id": service.id},
        )
        return appointment

    def _check_booking_window(self, day: date) -> None:
        today = self._today()
        if day < today:
            raise BookingWindowError("Cannot book a date in the past")
        if day > today + timedelta(days=self._booking_window_days):
            raise BookingWindowError(f"Bookings open at most {self._booking_window_days} days ahead")
