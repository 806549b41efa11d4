"""
Tests for the Sunday-aligned week window and its header labels.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from salon.application.utils.week_grid import (
    COMPACT_TIME_SLOTS,
    TIME_SLOTS,
    day_labels,
    month_year_label,
    range_label,
    shift_week,
    time_slots,
    week_window,
)
from salon.domain.entities.week_window import WeekWindow


def test_week_window_for_a_tuesday():
    window = week_window(date(2025, 8, 26))
    assert window.isoformat() == [
        "2025-08-24",
        "2025-08-25",
        "2025-08-26",
        "2025-08-27",
        "2025-08-28",
        "2025-08-29",
        "2025-08-30",
    ]


@pytest.mark.parametrize("offset", range(0, 400, 13))
def test_week_window_is_seven_days_starting_sunday(offset):
    reference = date(2024, 1, 1) + timedelta(days=offset)
    window = week_window(reference)
    assert len(window) == 7
    assert window.start.weekday() == 6
    assert reference in window
    assert window.end - window.start == timedelta(days=6)


def test_sunday_and_saturday_stay_in_their_own_week():
    assert week_window(date(2025, 8, 24)).start == date(2025, 8, 24)
    assert week_window(date(2025, 8, 30)).start == date(2025, 8, 24)


def test_week_window_across_year_boundary():
    window = week_window(date(2026, 1, 1))
    assert window.start == date(2025, 12, 28)
    assert window.end == date(2026, 1, 3)


def test_shift_week_round_trip():
    window = week_window(date(2025, 8, 26))
    assert shift_week(shift_week(window, 1), -1) == window
    assert shift_week(window, 1).start == date(2025, 8, 31)
    assert shift_week(window, -1).start == date(2025, 8, 17)
    assert shift_week(window, 0) == window


def test_week_window_rejects_misaligned_days():
    with pytest.raises(ValueError):
        WeekWindow(tuple(date(2025, 8, 25) + timedelta(days=i) for i in range(7)))
    with pytest.raises(ValueError):
        WeekWindow((date(2025, 8, 24),))


def test_month_year_label_within_one_month():
    window = week_window(date(2025, 8, 26))
    assert month_year_label(window, "pt-BR") == "agosto de 2025"
    assert month_year_label(window, "en") == "August 2025"


def test_month_year_label_spanning_two_months():
    window = week_window(date(2025, 9, 2))
    assert month_year_label(window, "pt-BR") == "ago. – setembro de 2025"
    assert month_year_label(window, "en") == "Aug – September 2025"


def test_month_year_label_spanning_two_years():
    window = week_window(date(2025, 12, 30))
    assert month_year_label(window, "pt-BR") == "dez. – janeiro de 2026"


def test_range_label():
    window = week_window(date(2025, 8, 26))
    assert range_label(window, "pt-BR") == "24/08 - 30/08"
    assert range_label(window, "en") == "08/24 - 08/30"


def test_day_labels_are_sunday_first():
    assert day_labels("pt-BR")[0] == "DOM"
    assert day_labels("en_US") == ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
    assert day_labels(None) == day_labels("pt-BR")


def test_time_slots():
    assert len(TIME_SLOTS) == 16
    assert TIME_SLOTS[0] == "07:00"
    assert TIME_SLOTS[-1] == "22:00"
    assert time_slots(compact=True) == COMPACT_TIME_SLOTS
    assert len(COMPACT_TIME_SLOTS) == 7
