from __future__ import annotations

from datetime import date

from salon_booking.application.ports.appointments import AppointmentPort
from salon_booking.application.ports.days_off import DayOffPort
from salon_booking.application.ports.operating_hours import OperatingHoursPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.utils.time_of_day import to_calendar_day
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.domain.entities.day_off import DayOff
from salon_booking.domain.entities.operating_hours import DayHours
from salon_booking.domain.entities.service import Service, ServiceCategory
from salon_booking.domain.entities.weekday import Weekday
from salon_booking.infrastructure.store.seed_data import (
    DEFAULT_CATEGORIES,
    DEFAULT_OPERATING_HOURS,
    DEFAULT_SERVICES,
)


class MemorySalonStore(OperatingHoursPort, DayOffPort, AppointmentPort, ServiceCatalogPort):
    def __init__(
        self,
        hours: dict[Weekday, DayHours] | None = None,
        services: list[Service] | None = None,
        categories: list[ServiceCategory] | None = None,
    ) -> None:
        self._hours: dict[Weekday, DayHours] = dict(DEFAULT_OPERATING_HOURS if hours is None else hours)
        self._days_off: dict[str, DayOff] = {}
        self._appointments: dict[str, Appointment] = {}
        self._services: dict[str, Service] = {
            service.id: service for service in (DEFAULT_SERVICES if services is None else services)
        }
        self._categories = list(DEFAULT_CATEGORIES if categories is None else categories)

    def get_operating_hours(self) -> dict[Weekday, DayHours]:
        return dict(self._hours)

    def set_day_hours(self, weekday: Weekday, hours: DayHours) -> None:
        self._hours[weekday] = hours

    def list_days_off(self) -> list[DayOff]:
        return list(self._days_off.values())

    def add_day_off(self, day_off: DayOff) -> None:
        self._days_off[day_off.id] = day_off

    def remove_day_off(self, day_off_id: str) -> bool:
        return self._days_off.pop(day_off_id, None) is not None

    def list_appointments(self, day: date | None = None) -> list[Appointment]:
        appointments = list(self._appointments.values())
        if day is None:
            return appointments
        return [appointment for appointment in appointments if _same_day(appointment.date, day)]

    def get_appointment(self, appointment_id: str) -> Appointment | None:
        return self._appointments.get(appointment_id)

    def add_appointment(self, appointment: Appointment) -> None:
        self._appointments[appointment.id] = appointment

    def save_appointment(self, appointment: Appointment) -> None:
        self._appointments[appointment.id] = appointment

    def list_services(self) -> list[Service]:
        return sorted(self._services.values(), key=lambda s: (s.category_id, s.order or 0, s.name))

    def get_service(self, service_id: str) -> Service | None:
        return self._services.get(service_id.strip())

    def list_categories(self) -> list[ServiceCategory]:
        return sorted(self._categories, key=lambda c: (c.order or 0, c.name))


def _same_day(value: date | str, day: date) -> bool:
    try:
        return to_calendar_day(value) == day
    except ValueError:
        return False
