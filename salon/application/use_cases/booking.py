from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import time
from decimal import Decimal
from typing import Iterable

from salon.application.exceptions import (
    AppointmentNotFoundError,
    BookingValidationError,
    InvalidStatusTransitionError,
)
from salon.application.ports.appointment_repository import AppointmentRepositoryPort
from salon.application.ports.service_catalog import ServiceCatalogPort
from salon.application.utils.duration_aggregator import aggregate, dedupe_selection
from salon.application.utils.slot_calculator import (
    add_minutes,
    compute_end_time,
    crosses_midnight,
    parse_time_of_day,
)
from salon.domain.entities.appointment import Appointment, AppointmentDraft, AppointmentStatus
from salon.domain.entities.service import Service
from salon.domain.entities.session import Session


@dataclass(frozen=True)
class AppointmentQuote:
    end_time: str | None  # None while no start time or no known service is selected
    total_price: Decimal
    total_duration_minutes: int
    crosses_midnight: bool = False


def transition_status(current: AppointmentStatus, target: AppointmentStatus) -> AppointmentStatus:
    if not current.can_transition_to(target):
        raise InvalidStatusTransitionError(
            f"Cannot move appointment from {current.value} to {target.value}"
        )
    return target


class AppointmentBookingUseCase:
    def __init__(
        self,
        catalog: ServiceCatalogPort,
        repository: AppointmentRepositoryPort,
    ) -> None:
        self._catalog = catalog
        self._repository = repository
        self._logger = logging.getLogger(__name__)

    def quote(
        self,
        session: Session,
        service_ids: Iterable[str],
        start_time: str | time | None,
    ) -> AppointmentQuote:
        """Totals and derived end time for the form, recomputed on every change."""
        totals = aggregate(dedupe_selection(service_ids), self._catalog.get_catalog(session))
        if not start_time or totals.duration_minutes <= 0:
            return AppointmentQuote(
                end_time=None,
                total_price=totals.price,
                total_duration_minutes=totals.duration_minutes,
            )
        return AppointmentQuote(
            end_time=compute_end_time(start_time, totals.duration_minutes),
            total_price=totals.price,
            total_duration_minutes=totals.duration_minutes,
            crosses_midnight=crosses_midnight(start_time, totals.duration_minutes),
        )

    def book(self, session: Session, draft: AppointmentDraft) -> Appointment:
        appointment = self._build(session, draft, appointment_id="", status=AppointmentStatus.SCHEDULED)
        saved = self._repository.save_appointment(session, appointment)
        self._logger.info(
            "Appointment booked",
            extra={
                "appointment_id": saved.id,
                "service_id": saved.primary_service_id,
                "start_time": f"{saved.date.isoformat()} {saved.start_time:%H:%M}",
            },
        )
        return saved

    def update(self, session: Session, appointment_id: str, draft: AppointmentDraft) -> Appointment:
        existing = self._require(session, appointment_id)
        appointment = self._build(session, draft, appointment_id=existing.id, status=existing.status)
        saved = self._repository.save_appointment(session, appointment)
        self._logger.info("Appointment updated", extra={"appointment_id": saved.id})
        return saved

    def complete(self, session: Session, appointment_id: str) -> Appointment:
        return self._move(session, appointment_id, AppointmentStatus.COMPLETED)

    def cancel(self, session: Session, appointment_id: str) -> Appointment:
        return self._move(session, appointment_id, AppointmentStatus.CANCELLED)

    def delete(self, session: Session, appointment_id: str) -> None:
        if not self._repository.delete_appointment(session, appointment_id):
            raise AppointmentNotFoundError(appointment_id)
        self._logger.info("Appointment deleted", extra={"appointment_id": appointment_id})

    def _move(self, session: Session, appointment_id: str, target: AppointmentStatus) -> Appointment:
        existing = self._require(session, appointment_id)
        status = transition_status(existing.status, target)
        saved = self._repository.save_appointment(session, replace(existing, status=status))
        self._logger.info(
            "Appointment status changed",
            extra={"appointment_id": saved.id, "status": status.value},
        )
        return saved

    def _require(self, session: Session, appointment_id: str) -> Appointment:
        appointment = self._repository.get_appointment(session, appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    def _build(
        self,
        session: Session,
        draft: AppointmentDraft,
        appointment_id: str,
        status: AppointmentStatus,
    ) -> Appointment:
        if not draft.client_id:
            raise BookingValidationError("Client is required")
        if not draft.employee_id:
            raise BookingValidationError("Employee is required")

        service_ids = dedupe_selection(draft.service_ids)
        if not service_ids:
            raise BookingValidationError("At least one service is required")

        catalog = self._catalog.get_catalog(session)
        unknown = [service_id for service_id in service_ids if service_id not in catalog]
        if unknown:
            raise BookingValidationError(f"Unknown services: {', '.join(unknown)}")

        totals = aggregate(service_ids, catalog)
        if totals.duration_minutes <= 0:
            raise BookingValidationError("Selected services have no duration")

        start = parse_time_of_day(draft.start_time)
        if crosses_midnight(start, totals.duration_minutes):
            self._logger.info(
                "Booking rejected",
                extra={"reason": "crosses_midnight", "start_time": f"{start:%H:%M}"},
            )
            raise BookingValidationError("Appointment must end before midnight")

        if draft.price is not None and draft.price < 0:
            raise BookingValidationError("Price cannot be negative")

        return Appointment(
            id=appointment_id,
            client_id=draft.client_id,
            employee_id=draft.employee_id,
            service_ids=service_ids,
            date=draft.date,
            start_time=start,
            end_time=add_minutes(start, totals.duration_minutes),
            status=status,
            price=draft.price if draft.price is not None else totals.price,
            notes=draft.notes or None,
            service_name=_service_names(service_ids, catalog),
        )


def _service_names(service_ids: tuple[str, ...], catalog: dict[str, Service]) -> str:
    return ", ".join(catalog[service_id].name for service_id in service_ids)
