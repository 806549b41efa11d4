"""
Tests for composing the weekly calendar grid.
"""

from __future__ import annotations

from datetime import date, time

from salon.application.use_cases.calendar_view import WeekCalendarUseCase
from salon.domain.entities.appointment import AppointmentStatus

from conftest import make_appointment


def test_week_view_places_appointments_in_cells(repository, session):
    repository.save_appointment(session, make_appointment("1", date(2025, 8, 26), time(9, 0), time(9, 30)))
    repository.save_appointment(
        session,
        make_appointment(
            "2", date(2025, 8, 29), time(18, 0), time(18, 45), status=AppointmentStatus.COMPLETED, client_name=None
        ),
    )
    # Outside the window
    repository.save_appointment(session, make_appointment("3", date(2025, 9, 2), time(9, 0), time(9, 30)))

    use_case = WeekCalendarUseCase(repository, locale="pt-BR", utc_offset_label="GMT-03")
    view = use_case.build(session, date(2025, 8, 26), today=date(2025, 8, 25))

    assert view.window.isoformat()[0] == "2025-08-24"
    assert view.title == "agosto de 2025"
    assert view.range_label == "24/08 - 30/08"
    assert view.utc_offset_label == "GMT-03"
    assert [d.label for d in view.days] == ["DOM", "SEG", "TER", "QUA", "QUI", "SEX", "SAB"]
    assert [d.date for d in view.days if d.is_selected] == [date(2025, 8, 26)]
    assert [d.date for d in view.days if d.is_today] == [date(2025, 8, 25)]
    assert len(view.rows) == 16
    assert all(len(row) == 7 for row in view.rows)

    nine = view.rows[view.slots.index("09:00")]
    tuesday = nine[2]
    assert tuesday.occupied
    assert tuesday.headline.client_name == "Ana"
    assert tuesday.headline.service_name == "Corte"
    assert tuesday.headline.completed is False

    friday = view.rows[view.slots.index("18:00")][5]
    assert friday.headline.client_name == "(Sem título)"
    assert friday.headline.completed is True

    occupied = [cell for row in view.rows for cell in row if cell.occupied]
    assert len(occupied) == 2


def test_week_view_navigation_and_compact_mode(repository, session):
    repository.save_appointment(session, make_appointment("1", date(2025, 9, 2), time(10, 0), time(10, 30)))
    use_case = WeekCalendarUseCase(repository, locale="en")

    view = use_case.build(session, date(2025, 8, 26), week_offset=1, compact=True)

    assert view.window.start == date(2025, 8, 31)
    assert view.title == "Aug – September 2025"
    assert view.slots == ("08:00", "10:00", "12:00", "14:00", "16:00", "18:00", "20:00")
    assert not any(d.is_selected for d in view.days)
    cell = view.rows[view.slots.index("10:00")][2]
    assert cell.headline.client_name == "Ana"
    assert cell.headline.service_name is None
