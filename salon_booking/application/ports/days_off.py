from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.day_off import DayOff


class DayOffPort(ABC):
    @abstractmethod
    def list_days_off(self) -> list[DayOff]:
        raise NotImplementedError

    @abstractmethod
    def add_day_off(self, day_off: DayOff) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_day_off(self, day_off_id: str) -> bool:
        """Remove a day off. Returns True if it existed."""
        raise NotImplementedError
