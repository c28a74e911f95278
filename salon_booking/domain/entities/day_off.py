from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DayOff:
    id: str
    date: date | str  # raw ISO string when loaded from a store and not parseable
    reason: str | None = None
