from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not AppointmentStatus.SCHEDULED

    def can_transition_to(self, target: "AppointmentStatus") -> bool:
        return self is AppointmentStatus.SCHEDULED and target.is_terminal


@dataclass(frozen=True)
class AppointmentDraft:
    """Form input for creating or editing an appointment; end time is always derived."""

    client_id: str
    employee_id: str
    service_ids: tuple[str, ...]
    date: date
    start_time: time
    price: Decimal | None = None  # explicit override, wins over the catalog total
    notes: str | None = None


@dataclass(frozen=True)
class Appointment:
    id: str
    client_id: str
    employee_id: str
    service_ids: tuple[str, ...]
    date: date
    start_time: time
    end_time: time
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    price: Decimal | None = None
    notes: str | None = None
    # Display names joined in by the data store (read model only)
    client_name: str | None = None
    employee_name: str | None = None
    service_name: str | None = None

    @property
    def primary_service_id(self) -> str | None:
        return self.service_ids[0] if self.service_ids else None

    def to_view(self) -> "AppointmentView":
        return AppointmentView(
            id=self.id,
            start_time=f"{self.date.isoformat()}T{self.start_time.strftime('%H:%M:%S')}",
            end_time=f"{self.date.isoformat()}T{self.end_time.strftime('%H:%M:%S')}",
            status=self.status.value,
            client_name=self.client_name,
            service_name=self.service_name,
        )


@dataclass(frozen=True)
class AppointmentView:
    """Calendar read model. start_time is either "HH:MM[:SS]" or a full ISO date-time."""

    id: str
    start_time: str
    end_time: str = ""
    status: str = AppointmentStatus.SCHEDULED.value
    client_name: str | None = None
    service_name: str | None = None
