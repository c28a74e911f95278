from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSlot:
    id: str
    time: str  # HH:MM
    available: bool = True

    @classmethod
    def starting_at(cls, minutes: int) -> TimeSlot:
        """Build a slot from minutes since midnight, e.g. 570 -> 09:30."""
        hour, minute = divmod(minutes, 60)
        return cls(id=f"slot-{hour}-{minute:02d}", time=f"{hour:02d}:{minute:02d}")
