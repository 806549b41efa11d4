from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from salon.application.ports.appointment_repository import AppointmentRepositoryPort
from salon.domain.entities.appointment import Appointment, AppointmentStatus
from salon.domain.entities.session import Session


@dataclass(frozen=True)
class DailySummary:
    day: date
    total: int
    completed: int
    pending: int
    cancelled: int
    expected_revenue: Decimal


def summarize_day(appointments: Iterable[Appointment], day: date) -> DailySummary:
    """Counts by status for one day; cancelled appointments add no revenue."""
    todays = [appointment for appointment in appointments if appointment.date == day]
    active = [a for a in todays if a.status is not AppointmentStatus.CANCELLED]
    return DailySummary(
        day=day,
        total=len(active),
        completed=sum(1 for a in todays if a.status is AppointmentStatus.COMPLETED),
        pending=sum(1 for a in todays if a.status is AppointmentStatus.SCHEDULED),
        cancelled=sum(1 for a in todays if a.status is AppointmentStatus.CANCELLED),
        expected_revenue=sum((a.price or Decimal("0.00") for a in active), Decimal("0.00")),
    )


def upcoming_appointments(
    appointments: Iterable[Appointment],
    today: date,
    limit: int = 5,
) -> list[Appointment]:
    scheduled = [
        appointment
        for appointment in appointments
        if appointment.status is AppointmentStatus.SCHEDULED and appointment.date >= today
    ]
    scheduled.sort(key=lambda appointment: (appointment.date, appointment.start_time))
    return scheduled[:limit]


class DailySummaryUseCase:
    def __init__(self, repository: AppointmentRepositoryPort) -> None:
        self._repository = repository

    def summary(self, session: Session, day: date) -> DailySummary:
        return summarize_day(self._repository.list_appointments(session, day, day), day)

    def upcoming(self, session: Session, today: date, limit: int = 5) -> list[Appointment]:
        return upcoming_appointments(self._repository.list_appointments(session, today), today, limit)
