from __future__ import annotations

import re
from datetime import time

from salon.application.exceptions import InvalidTimeError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?$")


def parse_time_of_day(value: str | time) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a minute-resolution time."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)

    match = _TIME_PATTERN.match((value or "").strip())
    if not match:
        raise InvalidTimeError(f"Invalid time of day: {value!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTimeError(f"Invalid time of day: {value!r}")
    return time(hour, minute)


def format_time_of_day(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute


def add_minutes(start: str | time, duration_minutes: int | None) -> time:
    """
    Clock arithmetic on a single day: the result wraps past midnight and the
    date is never advanced. Durations of a full day or more are rejected.
    """
    start_time = parse_time_of_day(start)
    if not duration_minutes:
        return start_time
    if duration_minutes < 0 or duration_minutes >= MINUTES_PER_DAY:
        raise InvalidTimeError(
            f"Duration must be between 0 and {MINUTES_PER_DAY - 1} minutes, got {duration_minutes}"
        )

    total = (minutes_since_midnight(start_time) + duration_minutes) % MINUTES_PER_DAY
    return time(total // 60, total % 60)


def compute_end_time(start: str | time, duration_minutes: int | None) -> str:
    """End time as zero-padded "HH:MM"; a zero or missing duration returns the start."""
    return format_time_of_day(add_minutes(start, duration_minutes))


def crosses_midnight(start: str | time, duration_minutes: int | None) -> bool:
    """True when the appointment would not end strictly before midnight of its own day."""
    if not duration_minutes:
        return False
    return minutes_since_midnight(parse_time_of_day(start)) + duration_minutes >= MINUTES_PER_DAY
