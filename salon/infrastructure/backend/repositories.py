from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from salon.application.exceptions import BackendUpstreamError
from salon.application.ports.appointment_repository import AppointmentRepositoryPort
from salon.application.ports.service_catalog import ServiceCatalogPort
from salon.application.utils.slot_calculator import parse_time_of_day
from salon.domain.entities.appointment import Appointment, AppointmentStatus
from salon.domain.entities.service import Service
from salon.domain.entities.session import Session
from salon.infrastructure.backend.rest_client import BackendRestClient

APPOINTMENT_SELECT = "*,clients(name),employees(name),services(name),appointment_services(service_id,position)"

logger = logging.getLogger(__name__)


def _eq(value: str) -> str:
    return f"eq.{value}"


def _decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    return Decimal(str(value)).quantize(Decimal("0.01"))


def _stored_time(value: str) -> time:
    """Stored start/end times come back either as "HH:MM:SS" or as a full ISO date-time."""
    if "T" in value:
        return datetime.fromisoformat(value).time().replace(second=0, microsecond=0, tzinfo=None)
    return parse_time_of_day(value)


def _joined_name(row: dict[str, Any], relation: str) -> str | None:
    joined = row.get(relation)
    if isinstance(joined, dict):
        return joined.get("name")
    return None


def row_to_service(row: dict[str, Any]) -> Service:
    return Service(
        id=str(row["id"]),
        name=row.get("name") or "",
        price=_decimal(row.get("price")) or Decimal("0.00"),
        duration_minutes=int(row.get("duration_minutes") or 0),
        category=row.get("category"),
        description=row.get("description"),
    )


def row_to_appointment(row: dict[str, Any]) -> Appointment:
    links = sorted(row.get("appointment_services") or [], key=lambda link: link.get("position") or 0)
    service_ids = tuple(str(link["service_id"]) for link in links)
    if not service_ids and row.get("service_id"):
        service_ids = (str(row["service_id"]),)

    return Appointment(
        id=str(row["id"]),
        client_id=str(row["client_id"]),
        employee_id=str(row["employee_id"]),
        service_ids=service_ids,
        date=date.fromisoformat(str(row["appointment_date"])[:10]),
        start_time=_stored_time(row["start_time"]),
        end_time=_stored_time(row["end_time"]),
        status=AppointmentStatus(row.get("status") or AppointmentStatus.SCHEDULED.value),
        price=_decimal(row.get("price")),
        notes=row.get("notes"),
        client_name=_joined_name(row, "clients"),
        employee_name=_joined_name(row, "employees"),
        service_name=_joined_name(row, "services"),
    )


def appointment_to_row(session: Session, appointment: Appointment) -> dict[str, Any]:
    # The legacy service_id column keeps the first selected service; the full
    # selection lives in appointment_services.
    return {
        "user_id": session.user_id,
        "client_id": appointment.client_id,
        "employee_id": appointment.employee_id,
        "service_id": appointment.primary_service_id,
        "appointment_date": appointment.date.isoformat(),
        "start_time": appointment.start_time.strftime("%H:%M:%S"),
        "end_time": appointment.end_time.strftime("%H:%M:%S"),
        "status": appointment.status.value,
        "price": str(appointment.price) if appointment.price is not None else None,
        "notes": appointment.notes,
    }


class RestServiceCatalog(ServiceCatalogPort):
    def __init__(self, client: BackendRestClient) -> None:
        self._client = client

    def list_services(self, session: Session) -> list[Service]:
        rows = self._client.select(
            session,
            "services",
            {"select": "*", "user_id": _eq(session.user_id), "order": "name"},
        )
        return [row_to_service(row) for row in rows]


class RestAppointmentRepository(AppointmentRepositoryPort):
    def __init__(self, client: BackendRestClient) -> None:
        self._client = client

    def list_appointments(self, session: Session, start: date, end: date | None = None) -> list[Appointment]:
        params = {
            "select": APPOINTMENT_SELECT,
            "user_id": _eq(session.user_id),
            "order": "appointment_date,start_time",
        }
        if end is None:
            params["appointment_date"] = f"gte.{start.isoformat()}"
        else:
            params["and"] = f"(appointment_date.gte.{start.isoformat()},appointment_date.lte.{end.isoformat()})"
        return self._convert(self._client.select(session, "appointments", params))

    def get_appointment(self, session: Session, appointment_id: str) -> Appointment | None:
        rows = self._client.select(
            session,
            "appointments",
            {"select": APPOINTMENT_SELECT, "user_id": _eq(session.user_id), "id": _eq(appointment_id)},
        )
        appointments = self._convert(rows)
        return appointments[0] if appointments else None

    def save_appointment(self, session: Session, appointment: Appointment) -> Appointment:
        """
        The appointment row and its service links are two requests with no
        transaction around them. If the link write fails, the row stays written
        with its previous (or no) links and BackendUpstreamError is raised;
        saving again overwrites both, last writer wins.
        """
        row = appointment_to_row(session, appointment)
        if appointment.id:
            stored = self._client.update(
                session,
                "appointments",
                {"id": _eq(appointment.id), "user_id": _eq(session.user_id)},
                row,
            )
        else:
            stored = self._client.insert(session, "appointments", [row])
        if not stored:
            raise BackendUpstreamError("Backend did not return the saved appointment")

        appointment_id = str(stored[0]["id"])
        try:
            self._replace_service_links(session, appointment_id, appointment.service_ids)
        except BackendUpstreamError as e:
            logger.error(
                "Appointment saved without its service links",
                extra={"appointment_id": appointment_id, "error": str(e)},
            )
            raise
        return replace(appointment, id=appointment_id)

    def delete_appointment(self, session: Session, appointment_id: str) -> bool:
        removed = self._client.delete(
            session,
            "appointments",
            {"id": _eq(appointment_id), "user_id": _eq(session.user_id)},
        )
        if not removed:
            return False
        self._client.delete(session, "appointment_services", self._link_filter(session, appointment_id))
        return True

    def _link_filter(self, session: Session, appointment_id: str) -> dict[str, str]:
        return {"appointment_id": _eq(appointment_id), "user_id": _eq(session.user_id)}

    def _replace_service_links(self, session: Session, appointment_id: str, service_ids: tuple[str, ...]) -> None:
        self._client.delete(session, "appointment_services", self._link_filter(session, appointment_id))
        if not service_ids:
            return
        self._client.insert(
            session,
            "appointment_services",
            [
                {
                    "user_id": session.user_id,
                    "appointment_id": appointment_id,
                    "service_id": service_id,
                    "position": position,
                }
                for position, service_id in enumerate(service_ids)
            ],
        )

    def _convert(self, rows: list[dict[str, Any]]) -> list[Appointment]:
        appointments: list[Appointment] = []
        for row in rows:
            try:
                appointments.append(row_to_appointment(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Skipping malformed appointment row",
                    extra={"appointment_id": row.get("id"), "error": str(e)},
                )
        return appointments
