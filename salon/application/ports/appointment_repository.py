from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from salon.domain.entities.appointment import Appointment
from salon.domain.entities.session import Session


class AppointmentRepositoryPort(ABC):
    @abstractmethod
    def list_appointments(self, session: Session, start: date, end: date | None = None) -> list[Appointment]:
        """Appointments dated start..end inclusive (no upper bound when end is None), ordered by date then start time."""
        raise NotImplementedError

    @abstractmethod
    def get_appointment(self, session: Session, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def save_appointment(self, session: Session, appointment: Appointment) -> Appointment:
        """
        Insert when appointment.id is empty, otherwise overwrite the stored row.
        Returns the stored appointment with its id assigned.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_appointment(self, session: Session, appointment_id: str) -> bool:
        """Hard delete. Returns True if a row was removed."""
        raise NotImplementedError
