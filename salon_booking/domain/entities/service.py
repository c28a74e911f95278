from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceCategory:
    id: str
    name: str
    description: str | None = None
    order: int | None = None


@dataclass(frozen=True)
class Service:
    id: str
    category_id: str
    name: str
    duration: int  # minutes
    price: float
    description: str | None = None
    image: str | None = None
    order: int | None = None
