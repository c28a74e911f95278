from __future__ import annotations

import json
import logging
import threading
from datetime import date
from pathlib import Path
from typing import Any

from salon_booking.application.ports.appointments import AppointmentPort
from salon_booking.application.ports.days_off import DayOffPort
from salon_booking.application.ports.operating_hours import OperatingHoursPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.utils.time_of_day import to_calendar_day
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus
from salon_booking.domain.entities.day_off import DayOff
from salon_booking.domain.entities.operating_hours import DayHours
from salon_booking.domain.entities.service import Service, ServiceCategory
from salon_booking.domain.entities.weekday import Weekday
from salon_booking.infrastructure.store.seed_data import (
    DEFAULT_CATEGORIES,
    DEFAULT_OPERATING_HOURS,
    DEFAULT_SERVICES,
)

logger = logging.getLogger(__name__)


class JsonSalonStore(OperatingHoursPort, DayOffPort, AppointmentPort, ServiceCatalogPort):
    """Single JSON document store. Field names follow the database columns."""

    def __init__(self, data_dir: str = "./data", filename: str = "salon.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / filename
        self._lock = threading.Lock()

    def _default_data(self) -> dict[str, Any]:
        return {
            "version": 1,
            "hours": {
                str(int(weekday)): self._serialize_hours(hours) for weekday, hours in DEFAULT_OPERATING_HOURS.items()
            },
            "days_off": [],
            "appointments": [],
            "services": [self._serialize_service(service) for service in DEFAULT_SERVICES],
            "categories": [self._serialize_category(category) for category in DEFAULT_CATEGORIES],
        }

    def _load_data(self) -> dict[str, Any]:
        """Load the document, return defaults if missing or corrupted."""
        if not self._file_path.exists():
            return self._default_data()

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Salon data file unreadable, using defaults", extra={"reason": str(e)})
            return self._default_data()

        defaults = self._default_data()
        for key, value in defaults.items():
            data.setdefault(key, value)
        return data

    def _save_data(self, data: dict[str, Any]) -> None:
        """Save the document atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    # Operating hours

    def get_operating_hours(self) -> dict[Weekday, DayHours]:
        with self._lock:
            data = self._load_data()

        hours: dict[Weekday, DayHours] = {}
        for key, row in data["hours"].items():
            try:
                weekday = Weekday.parse(key)
            except ValueError:
                logger.warning("Skipping hours row with unknown weekday", extra={"value": key})
                continue
            hours[weekday] = self._deserialize_hours(row)
        return hours

    def set_day_hours(self, weekday: Weekday, hours: DayHours) -> None:
        with self._lock:
            data = self._load_data()
            data["hours"][str(int(weekday))] = self._serialize_hours(hours)
            self._save_data(data)

    # Days off

    def list_days_off(self) -> list[DayOff]:
        with self._lock:
            data = self._load_data()
        return [self._deserialize_day_off(row) for row in _rows_with_id(data["days_off"], "day off")]

    def add_day_off(self, day_off: DayOff) -> None:
        with self._lock:
            data = self._load_data()
            data["days_off"].append(self._serialize_day_off(day_off))
            self._save_data(data)

    def remove_day_off(self, day_off_id: str) -> bool:
        with self._lock:
            data = self._load_data()
            remaining = [row for row in data["days_off"] if _row_id(row) != day_off_id]
            if len(remaining) == len(data["days_off"]):
                return False
            data["days_off"] = remaining
            self._save_data(data)
            return True

    # Appointments

    def list_appointments(self, day: date | None = None) -> list[Appointment]:
        with self._lock:
            data = self._load_data()

        appointments = [self._deserialize_appointment(row) for row in _rows_with_id(data["appointments"], "appointment")]
        if day is None:
            return appointments
        return [appointment for appointment in appointments if _same_day(appointment.date, day)]

    def get_appointment(self, appointment_id: str) -> Appointment | None:
        with self._lock:
            data = self._load_data()
        for row in _rows_with_id(data["appointments"], "appointment"):
            if row["id"] == appointment_id:
                return self._deserialize_appointment(row)
        return None

    def add_appointment(self, appointment: Appointment) -> None:
        with self._lock:
            data = self._load_data()
            data["appointments"].append(self._serialize_appointment(appointment))
            self._save_data(data)

    def save_appointment(self, appointment: Appointment) -> None:
        with self._lock:
            data = self._load_data()
            rows = [row for row in data["appointments"] if _row_id(row) != appointment.id]
            rows.append(self._serialize_appointment(appointment))
            data["appointments"] = rows
            self._save_data(data)

    # Catalog

    def list_services(self) -> list[Service]:
        with self._lock:
            data = self._load_data()
        services = [self._deserialize_service(row) for row in _rows_with_id(data["services"], "service")]
        return sorted(services, key=lambda s: (s.category_id, s.order or 0, s.name))

    def get_service(self, service_id: str) -> Service | None:
        normalized_id = service_id.strip()
        for service in self.list_services():
            if service.id == normalized_id:
                return service
        return None

    def list_categories(self) -> list[ServiceCategory]:
        with self._lock:
            data = self._load_data()
        categories = [self._deserialize_category(row) for row in _rows_with_id(data["categories"], "category")]
        return sorted(categories, key=lambda c: (c.order or 0, c.name))

    # Serialization

    def _serialize_hours(self, hours: DayHours) -> dict[str, Any]:
        return {
            "is_open": hours.is_open,
            "open_time": hours.open_time,
            "close_time": hours.close_time,
        }

    def _deserialize_hours(self, data: dict[str, Any]) -> DayHours:
        return DayHours(
            is_open=bool(data.get("is_open", False)),
            open_time=data.get("open_time", "09:00"),
            close_time=data.get("close_time", "17:00"),
        )

    def _serialize_day_off(self, day_off: DayOff) -> dict[str, Any]:
        return {
            "id": day_off.id,
            "date": _iso_day(day_off.date),
            "reason": day_off.reason,
        }

    def _deserialize_day_off(self, data: dict[str, Any]) -> DayOff:
        return DayOff(
            id=data["id"],
            date=_parse_day(data.get("date", "")),
            reason=data.get("reason"),
        )

    def _serialize_appointment(self, appointment: Appointment) -> dict[str, Any]:
        status = appointment.status
        return {
            "id": appointment.id,
            "service_id": appointment.service_id,
            "client_name": appointment.client_name,
            "client_email": appointment.client_email,
            "client_phone": appointment.client_phone,
            "date": _iso_day(appointment.date),
            "start_time": appointment.start_time,
            "end_time": appointment.end_time,
            "status": status.value if isinstance(status, AppointmentStatus) else status,
            "created_at": appointment.created_at,
        }

    def _deserialize_appointment(self, data: dict[str, Any]) -> Appointment:
        raw_status = data.get("status", AppointmentStatus.CONFIRMED.value)
        try:
            status: AppointmentStatus | str = AppointmentStatus(raw_status)
        except ValueError:
            status = raw_status

        return Appointment(
            id=data["id"],
            service_id=data.get("service_id", ""),
            client_name=data.get("client_name", ""),
            client_email=data.get("client_email", ""),
            client_phone=data.get("client_phone"),
            date=_parse_day(data.get("date", "")),
            start_time=data.get("start_time", ""),
            end_time=data.get("end_time", ""),
            status=status,
            created_at=data.get("created_at"),
        )

    def _serialize_service(self, service: Service) -> dict[str, Any]:
        return {
            "id": service.id,
            "category_id": service.category_id,
            "name": service.name,
            "description": service.description,
            "duration": service.duration,
            "price": service.price,
            "image": service.image,
            "order": service.order,
        }

    def _deserialize_service(self, data: dict[str, Any]) -> Service:
        return Service(
            id=data["id"],
            category_id=data.get("category_id", ""),
            name=data.get("name", ""),
            description=data.get("description"),
            duration=int(data.get("duration", 0)),
            price=float(data.get("price", 0)),
            image=data.get("image"),
            order=data.get("order"),
        )

    def _serialize_category(self, category: ServiceCategory) -> dict[str, Any]:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "order": category.order,
        }

    def _deserialize_category(self, data: dict[str, Any]) -> ServiceCategory:
        return ServiceCategory(
            id=data["id"],
            name=data.get("name", ""),
            description=data.get("description"),
            order=data.get("order"),
        )


def _rows_with_id(rows: list[Any], kind: str) -> list[dict[str, Any]]:
    valid = []
    for row in rows:
        if _row_id(row):
            valid.append(row)
        else:
            logger.warning("Skipping %s row without an id", kind, extra={"reason": "missing id", "value": repr(row)})
    return valid


def _row_id(row: Any) -> str | None:
    return row.get("id") if isinstance(row, dict) else None


def _iso_day(value: date | str) -> str:
    return value.isoformat() if isinstance(value, date) else value


def _parse_day(value: str) -> date | str:
    # Unparseable dates are kept raw; availability skips them with a warning
    try:
        return to_calendar_day(value)
    except ValueError:
        return value


def _same_day(value: date | str, day: date) -> bool:
    try:
        return to_calendar_day(value) == day
    except ValueError:
        return False
