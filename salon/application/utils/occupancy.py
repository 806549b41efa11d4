from __future__ import annotations

import logging
import re
from datetime import date, datetime, time
from typing import Iterable

from salon.domain.entities.appointment import AppointmentView

logger = logging.getLogger(__name__)

DATE_TIME_SEPARATOR = "T"

_BARE_TIME_PATTERN = re.compile(r"^\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?$")

# (date, "HH:MM") for full date-times, (None, "HH:MM") for bare times of day
SlotKey = tuple[date | None, str]


def _coerce_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _coerce_slot(value: time | str) -> str:
    if isinstance(value, time):
        return f"{value.hour:02d}:{value.minute:02d}"
    return value.strip()[:5]


def slot_key(appointment: AppointmentView) -> SlotKey | None:
    """
    Where an appointment sits on the grid, or None when its start time is
    unusable. Full date-times are read as naive wall-clock values, no
    timezone conversion is applied.
    """
    raw = (appointment.start_time or "").strip()
    if not raw:
        return None

    if DATE_TIME_SEPARATOR in raw:
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            logger.warning(
                "Invalid appointment time format",
                extra={"appointment_id": appointment.id, "start_time": raw},
            )
            return None
        return parsed.date(), parsed.strftime("%H:%M")

    if not _BARE_TIME_PATTERN.match(raw):
        logger.warning(
            "Invalid appointment time format",
            extra={"appointment_id": appointment.id, "start_time": raw},
        )
        return None
    # Bare times are assumed to be pre-filtered to the day by the caller
    return None, raw[:5]


def _key_matches(key: SlotKey | None, day: date, slot: str) -> bool:
    if key is None:
        return False
    key_day, key_slot = key
    if key_slot != slot:
        return False
    return key_day is None or key_day == day


def occupants_for(
    day: date | str,
    slot: time | str,
    appointments: Iterable[AppointmentView],
) -> list[AppointmentView]:
    """All appointments starting in the given (date, slot) cell, in input order."""
    target_day = _coerce_date(day)
    target_slot = _coerce_slot(slot)
    return [
        appointment
        for appointment in appointments
        if _key_matches(slot_key(appointment), target_day, target_slot)
    ]


def occupancy_map(
    days: Iterable[date],
    slots: Iterable[str],
    appointments: Iterable[AppointmentView],
) -> dict[tuple[date, str], list[AppointmentView]]:
    """
    Occupants for every (date, slot) cell of a grid. Each appointment is
    parsed once; the result has an entry for every cell, empty or not.
    """
    slot_list = [_coerce_slot(slot) for slot in slots]
    keyed: list[tuple[SlotKey, AppointmentView]] = []
    for appointment in appointments:
        key = slot_key(appointment)
        if key is not None:
            keyed.append((key, appointment))

    return {
        (day, slot): [appointment for key, appointment in keyed if _key_matches(key, day, slot)]
        for day in days
        for slot in slot_list
    }
