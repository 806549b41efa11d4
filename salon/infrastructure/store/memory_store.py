from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date

from salon.application.ports.appointment_repository import AppointmentRepositoryPort
from salon.application.ports.service_catalog import ServiceCatalogPort
from salon.domain.entities.appointment import Appointment
from salon.domain.entities.service import Service
from salon.domain.entities.session import Session


class MemoryServiceCatalog(ServiceCatalogPort):
    def __init__(
        self,
        services: dict[str, list[Service]] | None = None,
        default_services: list[Service] | None = None,
    ) -> None:
        self._services: dict[str, list[Service]] = {
            user_id: list(items) for user_id, items in (services or {}).items()
        }
        # Served to any salon that has not registered services of its own
        self._default_services = list(default_services or [])

    def list_services(self, session: Session) -> list[Service]:
        return list(self._services.get(session.user_id) or self._default_services)

    def add_service(self, session: Session, service: Service) -> None:
        items = self._services.setdefault(session.user_id, [])
        items[:] = [existing for existing in items if existing.id != service.id]
        items.append(service)


class MemoryAppointmentRepository(AppointmentRepositoryPort):
    def __init__(self) -> None:
        self._appointments: dict[str, dict[str, Appointment]] = {}

    def list_appointments(self, session: Session, start: date, end: date | None = None) -> list[Appointment]:
        rows = self._appointments.get(session.user_id, {}).values()
        matching = [
            appointment
            for appointment in rows
            if appointment.date >= start and (end is None or appointment.date <= end)
        ]
        matching.sort(key=lambda appointment: (appointment.date, appointment.start_time))
        return matching

    def get_appointment(self, session: Session, appointment_id: str) -> Appointment | None:
        return self._appointments.get(session.user_id, {}).get(appointment_id)

    def save_appointment(self, session: Session, appointment: Appointment) -> Appointment:
        if not appointment.id:
            appointment = replace(appointment, id=str(uuid.uuid4()))
        self._appointments.setdefault(session.user_id, {})[appointment.id] = appointment
        return appointment

    def delete_appointment(self, session: Session, appointment_id: str) -> bool:
        return self._appointments.get(session.user_id, {}).pop(appointment_id, None) is not None
