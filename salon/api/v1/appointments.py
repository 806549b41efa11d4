from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from salon.api.session import get_session
from salon.api.v1.schemas import (
    AppointmentRequestSchema,
    AppointmentSchema,
    DailySummarySchema,
    QuoteRequestSchema,
    QuoteResponseSchema,
)
from salon.application.exceptions import AppointmentNotFoundError, BackendUpstreamError, SchedulingError
from salon.application.use_cases.booking import AppointmentBookingUseCase
from salon.application.use_cases.daily_summary import DailySummaryUseCase
from salon.application.utils.slot_calculator import parse_time_of_day
from salon.domain.entities.appointment import AppointmentDraft
from salon.domain.entities.session import Session
from salon.wiring.dependencies import get_booking_use_case, get_summary_use_case

router = APIRouter()


def _to_draft(req: AppointmentRequestSchema) -> AppointmentDraft:
    return AppointmentDraft(
        client_id=req.client_id,
        employee_id=req.employee_id,
        service_ids=tuple(req.service_ids),
        date=req.appointment_date,
        start_time=parse_time_of_day(req.start_time),
        price=req.price,
        notes=req.notes,
    )


@router.post("/quote", response_model=QuoteResponseSchema)
def quote(
    req: QuoteRequestSchema,
    session: Session = Depends(get_session),
    uc: AppointmentBookingUseCase = Depends(get_booking_use_case),
):
    try:
        result = uc.quote(session, req.service_ids, req.start_time)
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return QuoteResponseSchema(
        end_time=result.end_time,
        total_price=result.total_price,
        total_duration_minutes=result.total_duration_minutes,
        crosses_midnight=result.crosses_midnight,
    )


@router.get("/summary", response_model=DailySummarySchema)
def summary(
    day: date | None = Query(None),
    upcoming_limit: int = Query(5, ge=0, le=50),
    session: Session = Depends(get_session),
    uc: DailySummaryUseCase = Depends(get_summary_use_case),
):
    day = day or date.today()
    try:
        result = uc.summary(session, day)
        upcoming = uc.upcoming(session, day, limit=upcoming_limit)
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return DailySummarySchema(
        day=result.day,
        total=result.total,
        completed=result.completed,
        pending=result.pending,
        cancelled=result.cancelled,
        expected_revenue=result.expected_revenue,
        upcoming=[AppointmentSchema.from_entity(a) for a in upcoming],
    )


@router.post("", response_model=AppointmentSchema, status_code=201)
def create_appointment(
    req: AppointmentRequestSchema,
    session: Session = Depends(get_session),
    uc: AppointmentBookingUseCase = Depends(get_booking_use_case),
):
    try:
        appointment = uc.book(session, _to_draft(req))
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return AppointmentSchema.from_entity(appointment)


@router.put("/{appointment_id}", response_model=AppointmentSchema)
def update_appointment(
    appointment_id: str,
    req: AppointmentRequestSchema,
    session: Session = Depends(get_session),
    uc: AppointmentBookingUseCase = Depends(get_booking_use_case),
):
    try:
        appointment = uc.update(session, appointment_id, _to_draft(req))
    except AppointmentNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return AppointmentSchema.from_entity(appointment)


@router.post("/{appointment_id}/complete", response_model=AppointmentSchema)
def complete_appointment(
    appointment_id: str,
    session: Session = Depends(get_session),
    uc: AppointmentBookingUseCase = Depends(get_booking_use_case),
):
    try:
        appointment = uc.complete(session, appointment_id)
    except AppointmentNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return AppointmentSchema.from_entity(appointment)


@router.post("/{appointment_id}/cancel", response_model=AppointmentSchema)
def cancel_appointment(
    appointment_id: str,
    session: Session = Depends(get_session),
    uc: AppointmentBookingUseCase = Depends(get_booking_use_case),
):
    try:
        appointment = uc.cancel(session, appointment_id)
    except AppointmentNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return AppointmentSchema.from_entity(appointment)


@router.delete("/{appointment_id}", status_code=204)
def delete_appointment(
    appointment_id: str,
    session: Session = Depends(get_session),
    uc: AppointmentBookingUseCase = Depends(get_booking_use_case),
):
    try:
        uc.delete(session, appointment_id)
    except AppointmentNotFoundError:
        raise HTTPException(status_code=404, detail="Appointment not found")
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return Response(status_code=204)
