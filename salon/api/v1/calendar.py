from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from salon.api.session import get_session
from salon.api.v1.schemas import (
    CalendarCellSchema,
    CalendarDaySchema,
    OccupantSchema,
    WeekCalendarSchema,
)
from salon.application.exceptions import BackendUpstreamError
from salon.application.use_cases.calendar_view import WeekCalendarUseCase
from salon.core.config import settings
from salon.domain.entities.session import Session
from salon.wiring.dependencies import get_calendar_use_case

router = APIRouter()


@router.get("/week", response_model=WeekCalendarSchema)
def week(
    selected: date | None = Query(None, alias="date"),
    offset: int = Query(0, ge=-520, le=520),
    compact: bool | None = Query(None),
    session: Session = Depends(get_session),
    uc: WeekCalendarUseCase = Depends(get_calendar_use_case),
):
    try:
        view = uc.build(
            session,
            selected or date.today(),
            week_offset=offset,
            compact=settings.CALENDAR_COMPACT if compact is None else compact,
        )
    except BackendUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return WeekCalendarSchema(
        week=list(view.window),
        title=view.title,
        range_label=view.range_label,
        utc_offset_label=view.utc_offset_label,
        compact=view.compact,
        days=[
            CalendarDaySchema(date=d.date, label=d.label, is_today=d.is_today, is_selected=d.is_selected)
            for d in view.days
        ],
        slots=list(view.slots),
        rows=[
            [
                CalendarCellSchema(
                    date=cell.date,
                    slot=cell.slot,
                    occupants=[
                        OccupantSchema(
                            appointment_id=o.appointment_id,
                            client_name=o.client_name,
                            service_name=o.service_name,
                            status=o.status,
                            completed=o.completed,
                        )
                        for o in cell.occupants
                    ],
                )
                for cell in row
            ]
            for row in view.rows
        ],
    )
