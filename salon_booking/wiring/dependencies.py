import logging
from zoneinfo import ZoneInfo

from fastapi import Depends

from salon_booking.core.config import settings
from salon_booking.infrastructure.store.json_store import JsonSalonStore
from salon_booking.infrastructure.store.memory_store import MemorySalonStore
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.use_cases.book_appointment import BookAppointmentUseCase
from salon_booking.application.use_cases.get_available_slots import GetAvailableSlotsUseCase
from salon_booking.application.use_cases.manage_appointments import ManageAppointmentsUseCase
from salon_booking.application.use_cases.salon_hours import SalonHoursUseCase


SalonStore = MemorySalonStore | JsonSalonStore

_store: SalonStore | None = None


def get_store() -> SalonStore:
    global _store
    if _store is None:
        provider = (settings.STORE_PROVIDER or "").strip().lower()
        if provider == "json" or (not provider and settings.ENV.lower() in {"dev", "local"}):
            _store = JsonSalonStore(data_dir=settings.DATA_DIR)
        else:
            _store = MemorySalonStore()
        logging.getLogger(__name__).info("Using %s", type(_store).__name__)
    return _store


def get_service_catalog(store: SalonStore = Depends(get_store)) -> ServiceCatalogPort:
    return store


def get_available_slots_use_case(store: SalonStore = Depends(get_store)) -> GetAvailableSlotsUseCase:
    return GetAvailableSlotsUseCase(
        hours=store,
        days_off=store,
        appointments=store,
        catalog=store,
        step_minutes=settings.SLOT_STEP_MINUTES,
    )


def get_book_appointment_use_case(
    store: SalonStore = Depends(get_store),
    availability: GetAvailableSlotsUseCase = Depends(get_available_slots_use_case),
) -> BookAppointmentUseCase:
    return BookAppointmentUseCase(
        availability=availability,
        appointments=store,
        catalog=store,
        timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
        booking_window_days=settings.BOOKING_WINDOW_DAYS,
    )


def get_manage_appointments_use_case(store: SalonStore = Depends(get_store)) -> ManageAppointmentsUseCase:
    return ManageAppointmentsUseCase(appointments=store)


def get_salon_hours_use_case(store: SalonStore = Depends(get_store)) -> SalonHoursUseCase:
    return SalonHoursUseCase(hours=store, days_off=store)
