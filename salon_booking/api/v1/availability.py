from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_booking.api.v1.schemas import AvailabilityResponseSchema, TimeSlotSchema
from salon_booking.application.exceptions import ServiceNotFoundError
from salon_booking.application.use_cases.get_available_slots import GetAvailableSlotsUseCase
from salon_booking.wiring.dependencies import get_available_slots_use_case

router = APIRouter()


@router.get("/availability", response_model=AvailabilityResponseSchema)
def get_availability(
    day: date = Query(..., alias="date"),
    service_id: str | None = None,
    duration: int | None = Query(None, gt=0),
    uc: GetAvailableSlotsUseCase = Depends(get_available_slots_use_case),
):
    try:
        result = uc.execute(day, service_id=service_id, duration_minutes=duration)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AvailabilityResponseSchema(
        date=result.date,
        duration_minutes=result.duration_minutes,
        slots=[TimeSlotSchema(id=s.id, time=s.time, available=s.available) for s in result.slots],
    )
