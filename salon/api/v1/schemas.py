from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from salon.domain.entities.appointment import Appointment, AppointmentStatus


class QuoteRequestSchema(BaseModel):
    service_ids: list[str] = Field(default_factory=list)
    start_time: str | None = None


class QuoteResponseSchema(BaseModel):
    end_time: str | None
    total_price: Decimal
    total_duration_minutes: int
    crosses_midnight: bool = False


class AppointmentRequestSchema(BaseModel):
    client_id: str = Field(min_length=1)
    employee_id: str = Field(min_length=1)
    service_ids: list[str] = Field(min_length=1)
    appointment_date: date
    start_time: str
    price: Decimal | None = None
    notes: str | None = None


class AppointmentSchema(BaseModel):
    id: str
    client_id: str
    employee_id: str
    service_ids: list[str]
    appointment_date: date
    start_time: str
    end_time: str
    status: AppointmentStatus
    price: Decimal | None = None
    notes: str | None = None
    client_name: str | None = None
    employee_name: str | None = None
    service_name: str | None = None

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentSchema":
        return cls(
            id=appointment.id,
            client_id=appointment.client_id,
            employee_id=appointment.employee_id,
            service_ids=list(appointment.service_ids),
            appointment_date=appointment.date,
            start_time=appointment.start_time.strftime("%H:%M"),
            end_time=appointment.end_time.strftime("%H:%M"),
            status=appointment.status,
            price=appointment.price,
            notes=appointment.notes,
            client_name=appointment.client_name,
            employee_name=appointment.employee_name,
            service_name=appointment.service_name,
        )


class DailySummarySchema(BaseModel):
    day: date
    total: int
    completed: int
    pending: int
    cancelled: int
    expected_revenue: Decimal
    upcoming: list[AppointmentSchema] = Field(default_factory=list)


class OccupantSchema(BaseModel):
    appointment_id: str
    client_name: str
    service_name: str | None = None
    status: str
    completed: bool


class CalendarCellSchema(BaseModel):
    date: date
    slot: str
    occupants: list[OccupantSchema] = Field(default_factory=list)


class CalendarDaySchema(BaseModel):
    date: date
    label: str
    is_today: bool
    is_selected: bool


class WeekCalendarSchema(BaseModel):
    week: list[date]
    title: str
    range_label: str
    utc_offset_label: str
    compact: bool
    days: list[CalendarDaySchema]
    slots: list[str]
    rows: list[list[CalendarCellSchema]]
