from __future__ import annotations

from salon_booking.domain.entities.operating_hours import DayHours
from salon_booking.domain.entities.service import Service, ServiceCategory
from salon_booking.domain.entities.weekday import Weekday

DEFAULT_OPERATING_HOURS: dict[Weekday, DayHours] = {
    Weekday.MONDAY: DayHours(is_open=True, open_time="09:00", close_time="17:00"),
    Weekday.TUESDAY: DayHours(is_open=True, open_time="09:00", close_time="17:00"),
    Weekday.WEDNESDAY: DayHours(is_open=True, open_time="09:00", close_time="17:00"),
    Weekday.THURSDAY: DayHours(is_open=True, open_time="09:00", close_time="17:00"),
    Weekday.FRIDAY: DayHours(is_open=True, open_time="09:00", close_time="17:00"),
    Weekday.SATURDAY: DayHours(is_open=False, open_time="10:00", close_time="16:00"),
    Weekday.SUNDAY: DayHours(is_open=False, open_time="10:00", close_time="16:00"),
}

DEFAULT_CATEGORIES: list[ServiceCategory] = [
    ServiceCategory(id="hair", name="Hair", description="Cuts, colour and styling", order=1),
    ServiceCategory(id="nails", name="Nails", description="Manicures and pedicures", order=2),
    ServiceCategory(id="skin", name="Skin", description="Facials and treatments", order=3),
]

DEFAULT_SERVICES: list[Service] = [
    Service(id="haircut", category_id="hair", name="Haircut", duration=30, price=35.0, order=1),
    Service(id="blow_dry", category_id="hair", name="Blow Dry", duration=45, price=30.0, order=2),
    Service(
        id="full_colour",
        category_id="hair",
        name="Full Colour",
        duration=90,
        price=85.0,
        description="Root to tip colour including wash and blow dry",
        order=3,
    ),
    Service(id="manicure", category_id="nails", name="Manicure", duration=45, price=28.0, order=1),
    Service(id="pedicure", category_id="nails", name="Pedicure", duration=60, price=38.0, order=2),
    Service(id="classic_facial", category_id="skin", name="Classic Facial", duration=60, price=55.0, order=1),
]
