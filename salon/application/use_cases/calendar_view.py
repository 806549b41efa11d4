from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from salon.application.ports.appointment_repository import AppointmentRepositoryPort
from salon.application.utils.occupancy import occupancy_map
from salon.application.utils.week_grid import (
    day_labels,
    month_year_label,
    range_label,
    resolve_locale,
    shift_week,
    time_slots,
    week_window,
)
from salon.domain.entities.appointment import AppointmentStatus, AppointmentView
from salon.domain.entities.session import Session
from salon.domain.entities.week_window import WeekWindow

UNTITLED_LABELS = {"pt-BR": "(Sem título)", "en": "(No title)"}


@dataclass(frozen=True)
class OccupantSummary:
    appointment_id: str
    client_name: str
    service_name: str | None
    status: str

    @property
    def completed(self) -> bool:
        return self.status == AppointmentStatus.COMPLETED.value


@dataclass(frozen=True)
class CalendarCell:
    date: date
    slot: str
    occupants: tuple[OccupantSummary, ...] = ()

    @property
    def occupied(self) -> bool:
        return bool(self.occupants)

    @property
    def headline(self) -> OccupantSummary | None:
        """The occupant rendered inside the cell."""
        return self.occupants[0] if self.occupants else None


@dataclass(frozen=True)
class CalendarDay:
    date: date
    label: str
    is_today: bool
    is_selected: bool


@dataclass(frozen=True)
class WeekCalendarView:
    window: WeekWindow
    title: str
    range_label: str
    utc_offset_label: str
    compact: bool
    days: tuple[CalendarDay, ...]
    slots: tuple[str, ...]
    rows: tuple[tuple[CalendarCell, ...], ...]  # one row per slot, one cell per day


class WeekCalendarUseCase:
    def __init__(
        self,
        repository: AppointmentRepositoryPort,
        locale: str | None = None,
        utc_offset_label: str = "",
    ) -> None:
        self._repository = repository
        self._locale = resolve_locale(locale)
        self._utc_offset_label = utc_offset_label

    def build(
        self,
        session: Session,
        selected_date: date,
        week_offset: int = 0,
        compact: bool = False,
        today: date | None = None,
    ) -> WeekCalendarView:
        window = week_window(selected_date)
        if week_offset:
            window = shift_week(window, week_offset)

        appointments = self._repository.list_appointments(session, window.start, window.end)
        views = [appointment.to_view() for appointment in appointments]
        return self.render(window, views, selected_date, compact=compact, today=today or date.today())

    def render(
        self,
        window: WeekWindow,
        appointments: list[AppointmentView],
        selected_date: date,
        compact: bool = False,
        today: date | None = None,
    ) -> WeekCalendarView:
        slots = time_slots(compact)
        occupancy = occupancy_map(window, slots, appointments)
        labels = day_labels(self._locale)

        days = tuple(
            CalendarDay(
                date=day,
                label=labels[index],
                is_today=day == today,
                is_selected=day == selected_date,
            )
            for index, day in enumerate(window)
        )
        rows = tuple(
            tuple(
                CalendarCell(
                    date=day,
                    slot=slot,
                    occupants=tuple(self._summarize(view, compact) for view in occupancy[(day, slot)]),
                )
                for day in window
            )
            for slot in slots
        )
        return WeekCalendarView(
            window=window,
            title=month_year_label(window, self._locale),
            range_label=range_label(window, self._locale),
            utc_offset_label=self._utc_offset_label,
            compact=compact,
            days=days,
            slots=slots,
            rows=rows,
        )

    def _summarize(self, view: AppointmentView, compact: bool) -> OccupantSummary:
        return OccupantSummary(
            appointment_id=view.id,
            client_name=view.client_name or UNTITLED_LABELS[self._locale],
            service_name=None if compact else view.service_name,
            status=view.status,
        )
