from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from salon_booking.application.exceptions import ServiceNotFoundError
from salon_booking.application.ports.appointments import AppointmentPort
from salon_booking.application.ports.days_off import DayOffPort
from salon_booking.application.ports.operating_hours import OperatingHoursPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.utils.availability import DEFAULT_SLOT_STEP_MINUTES, compute_available_slots
from salon_booking.domain.entities.time_slot import TimeSlot


@dataclass(frozen=True)
class AvailabilityResult:
    date: date
    duration_minutes: int
    slots: list[TimeSlot]


class GetAvailableSlotsUseCase:
    def __init__(
        self,
        hours: OperatingHoursPort,
        days_off: DayOffPort,
        appointments: AppointmentPort,
        catalog: ServiceCatalogPort,
        step_minutes: int = DEFAULT_SLOT_STEP_MINUTES,
    ) -> None:
        self._hours = hours
        self._days_off = days_off
        self._appointments = appointments
        self._catalog = catalog
        self._step_minutes = step_minutes
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        day: date,
        service_id: str | None = None,
        duration_minutes: int | None = None,
    ) -> AvailabilityResult:
        """Bookable slots for a service (or an explicit duration) on ``day``."""
        if service_id:
            service = self._catalog.get_service(service_id)
            if service is None:
                raise ServiceNotFoundError(f"Unknown service: {service_id}")
            duration_minutes = service.duration
        elif duration_minutes is None:
            raise ValueError("Either service_id or duration_minutes is required")

        slots = self.slots_for_duration(day, duration_minutes)
        self._logger.info(
            "Availability computed",
            extra={"date": day.isoformat(), "service_id": service_id, "slot_count": len(slots)},
        )
        return AvailabilityResult(date=day, duration_minutes=duration_minutes, slots=slots)

    def slots_for_duration(self, day: date, duration_minutes: int) -> list[TimeSlot]:
        return compute_available_slots(
            day,
            duration_minutes,
            operating_hours=self._hours.get_operating_hours(),
            days_off=self._days_off.list_days_off(),
            appointments=self._appointments.list_appointments(day),
            step_minutes=self._step_minutes,
        )
