from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from salon.domain.entities.appointment import Appointment, AppointmentStatus
from salon.domain.entities.service import Service
from salon.domain.entities.session import Session
from salon.infrastructure.store.memory_store import MemoryAppointmentRepository, MemoryServiceCatalog


@pytest.fixture
def session() -> Session:
    return Session(user_id="owner-1", access_token="token-1")


@pytest.fixture
def catalog(session: Session) -> MemoryServiceCatalog:
    store = MemoryServiceCatalog()
    store.add_service(session, Service(id="A", name="Corte", price=Decimal("50.00"), duration_minutes=30))
    store.add_service(session, Service(id="B", name="Escova", price=Decimal("80.00"), duration_minutes=45))
    store.add_service(session, Service(id="Z", name="Consulta", price=Decimal("0.00"), duration_minutes=0))
    return store


@pytest.fixture
def repository() -> MemoryAppointmentRepository:
    return MemoryAppointmentRepository()


def make_appointment(
    appointment_id: str,
    day: date,
    start: time,
    end: time,
    status: AppointmentStatus = AppointmentStatus.SCHEDULED,
    price: str | None = "50.00",
    client_name: str | None = "Ana",
) -> Appointment:
    return Appointment(
        id=appointment_id,
        client_id="client-1",
        employee_id="employee-1",
        service_ids=("A",),
        date=day,
        start_time=start,
        end_time=end,
        status=status,
        price=Decimal(price) if price is not None else None,
        client_name=client_name,
        service_name="Corte",
    )
