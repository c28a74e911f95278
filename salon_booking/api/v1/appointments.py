from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_booking.api.v1.schemas import (
    AppointmentDatesSchema,
    AppointmentSchema,
    BookAppointmentRequestSchema,
)
from salon_booking.application.exceptions import (
    AppointmentNotFoundError,
    BookingWindowError,
    InvalidStatusTransitionError,
    ServiceNotFoundError,
    SlotUnavailableError,
)
from salon_booking.application.use_cases.book_appointment import BookAppointmentUseCase
from salon_booking.application.use_cases.manage_appointments import ManageAppointmentsUseCase
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus
from salon_booking.wiring.dependencies import (
    get_book_appointment_use_case,
    get_manage_appointments_use_case,
)

router = APIRouter()


def _to_schema(appointment: Appointment) -> AppointmentSchema:
    status = appointment.status
    return AppointmentSchema(
        id=appointment.id,
        service_id=appointment.service_id,
        client_name=appointment.client_name,
        client_email=appointment.client_email,
        client_phone=appointment.client_phone,
        date=appointment.date.isoformat() if isinstance(appointment.date, date) else str(appointment.date),
        start_time=appointment.start_time,
        end_time=appointment.end_time,
        status=status.value if isinstance(status, AppointmentStatus) else str(status),
    )


@router.post("/appointments", response_model=AppointmentSchema, status_code=201)
def book_appointment(
    req: BookAppointmentRequestSchema,
    uc: BookAppointmentUseCase = Depends(get_book_appointment_use_case),
):
    try:
        appointment = uc.execute(
            service_id=req.service_id,
            day=req.date,
            start_time=req.start_time,
            client_name=req.client_name,
            client_email=req.client_email,
            client_phone=req.client_phone,
        )
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SlotUnavailableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except BookingWindowError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_schema(appointment)


@router.get("/appointments", response_model=list[AppointmentSchema])
def list_appointments(
    day: date = Query(..., alias="date"),
    uc: ManageAppointmentsUseCase = Depends(get_manage_appointments_use_case),
):
    return [_to_schema(a) for a in uc.appointments_for_date(day)]


@router.get("/appointments/dates", response_model=AppointmentDatesSchema)
def appointment_dates(uc: ManageAppointmentsUseCase = Depends(get_manage_appointments_use_case)):
    return AppointmentDatesSchema(dates=uc.appointment_dates())


@router.get("/appointments/{appointment_id}", response_model=AppointmentSchema)
def get_appointment(
    appointment_id: str,
    uc: ManageAppointmentsUseCase = Depends(get_manage_appointments_use_case),
):
    try:
        return _to_schema(uc.get(appointment_id))
    except AppointmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/appointments/{appointment_id}/{action}", response_model=AppointmentSchema)
def change_status(
    appointment_id: str,
    action: str,
    uc: ManageAppointmentsUseCase = Depends(get_manage_appointments_use_case),
):
    actions = {"cancel": uc.cancel, "complete": uc.complete, "confirm": uc.confirm}
    if action not in actions:
        raise HTTPException(status_code=404, detail=f"Unknown action: {action}")

    try:
        return _to_schema(actions[action](appointment_id))
    except AppointmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
