from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response

from salon_booking.api.v1.schemas import (
    DayHoursRequestSchema,
    DayOffRequestSchema,
    DayOffSchema,
    OperatingHoursResponseSchema,
    WeekdayHoursSchema,
)
from salon_booking.application.exceptions import DayOffNotFoundError, DuplicateDayOffError
from salon_booking.application.use_cases.salon_hours import SalonHoursUseCase
from salon_booking.domain.entities.day_off import DayOff
from salon_booking.domain.entities.weekday import Weekday
from salon_booking.wiring.dependencies import get_salon_hours_use_case

router = APIRouter(prefix="/salon")


def _day_off_schema(day_off: DayOff) -> DayOffSchema:
    value = day_off.date
    return DayOffSchema(
        id=day_off.id,
        date=value.isoformat() if isinstance(value, date) else str(value),
        reason=day_off.reason,
    )


@router.get("/hours", response_model=OperatingHoursResponseSchema)
def get_hours(uc: SalonHoursUseCase = Depends(get_salon_hours_use_case)):
    hours = uc.get_hours()
    return OperatingHoursResponseSchema(
        hours=[
            WeekdayHoursSchema(
                weekday=int(weekday),
                name=weekday.label,
                is_open=day.is_open,
                open_time=day.open_time,
                close_time=day.close_time,
            )
            for weekday, day in sorted(hours.items())
        ]
    )


@router.put("/hours/{weekday}", response_model=WeekdayHoursSchema)
def update_hours(
    weekday: str,
    req: DayHoursRequestSchema,
    uc: SalonHoursUseCase = Depends(get_salon_hours_use_case),
):
    try:
        day = Weekday.parse(weekday)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        hours = uc.update_day(day, req.is_open, req.open_time, req.close_time)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return WeekdayHoursSchema(
        weekday=int(day),
        name=day.label,
        is_open=hours.is_open,
        open_time=hours.open_time,
        close_time=hours.close_time,
    )


@router.get("/days-off", response_model=list[DayOffSchema])
def list_days_off(uc: SalonHoursUseCase = Depends(get_salon_hours_use_case)):
    return [_day_off_schema(d) for d in uc.list_days_off()]


@router.post("/days-off", response_model=DayOffSchema, status_code=201)
def add_day_off(req: DayOffRequestSchema, uc: SalonHoursUseCase = Depends(get_salon_hours_use_case)):
    try:
        return _day_off_schema(uc.add_day_off(req.date, req.reason))
    except DuplicateDayOffError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/days-off/{day_off_id}", status_code=204)
def remove_day_off(day_off_id: str, uc: SalonHoursUseCase = Depends(get_salon_hours_use_case)) -> Response:
    try:
        uc.remove_day_off(day_off_id)
    except DayOffNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
