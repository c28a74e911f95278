from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.service import Service, ServiceCategory


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self) -> list[Service]:
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id."""
        raise NotImplementedError

    @abstractmethod
    def list_categories(self) -> list[ServiceCategory]:
        raise NotImplementedError
