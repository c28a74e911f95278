from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


ALLOWED_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset(
        {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED}
    ),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED}),
    AppointmentStatus.CANCELLED: frozenset(),
    AppointmentStatus.COMPLETED: frozenset(),
}


@dataclass(frozen=True)
class Appointment:
    id: str
    service_id: str
    client_name: str
    client_email: str
    date: date | str
    start_time: str  # HH:MM
    end_time: str  # HH:MM, start_time + service duration
    status: AppointmentStatus | str = AppointmentStatus.CONFIRMED
    client_phone: str | None = None
    created_at: float | None = None

    @property
    def occupies_calendar(self) -> bool:
        """Cancelled appointments stay for history but never block a slot."""
        return self.status != AppointmentStatus.CANCELLED

    def can_transition_to(self, status: AppointmentStatus) -> bool:
        try:
            current = AppointmentStatus(self.status)
        except ValueError:
            return False
        return status in ALLOWED_TRANSITIONS[current]
