from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from salon_booking.domain.entities.appointment import Appointment


class AppointmentPort(ABC):
    @abstractmethod
    def list_appointments(self, day: date | None = None) -> list[Appointment]:
        """All appointments, or those on ``day`` when given (any status)."""
        raise NotImplementedError

    @abstractmethod
    def get_appointment(self, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def add_appointment(self, appointment: Appointment) -> None:
        raise NotImplementedError

    @abstractmethod
    def save_appointment(self, appointment: Appointment) -> None:
        """Replace a stored appointment with the same id."""
        raise NotImplementedError
