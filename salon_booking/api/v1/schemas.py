from datetime import date

from pydantic import BaseModel, ConfigDict, Field

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
CLOSE_TIME_PATTERN = r"^(([01]\d|2[0-3]):[0-5]\d|24:00)$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CategorySchema(BaseModel):
    id: str
    name: str
    description: str | None = None
    order: int | None = None


class ServiceSchema(BaseModel):
    id: str
    category_id: str
    name: str
    description: str | None = None
    duration: int
    price: float
    image: str | None = None
    order: int | None = None


class TimeSlotSchema(BaseModel):
    id: str
    time: str
    available: bool


class AvailabilityResponseSchema(BaseModel):
    date: date
    duration_minutes: int
    slots: list[TimeSlotSchema]


class BookAppointmentRequestSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    service_id: str = Field(min_length=1)
    date: date
    start_time: str = Field(pattern=TIME_PATTERN)
    client_name: str = Field(min_length=1)
    client_email: str = Field(pattern=EMAIL_PATTERN)
    client_phone: str | None = None


class AppointmentSchema(BaseModel):
    id: str
    service_id: str
    client_name: str
    client_email: str
    client_phone: str | None = None
    date: str
    start_time: str
    end_time: str
    status: str


class AppointmentDatesSchema(BaseModel):
    dates: list[date]


class DayHoursRequestSchema(BaseModel):
    is_open: bool
    open_time: str = Field(pattern=TIME_PATTERN)
    close_time: str = Field(pattern=CLOSE_TIME_PATTERN)


class WeekdayHoursSchema(BaseModel):
    weekday: int
    name: str
    is_open: bool
    open_time: str
    close_time: str


class OperatingHoursResponseSchema(BaseModel):
    hours: list[WeekdayHoursSchema]


class DayOffRequestSchema(BaseModel):
    date: date
    reason: str | None = None


class DayOffSchema(BaseModel):
    id: str
    date: str
    reason: str | None = None
