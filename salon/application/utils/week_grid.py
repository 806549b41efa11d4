from __future__ import annotations

from datetime import date, timedelta

from salon.domain.entities.week_window import DAYS_IN_WEEK, WeekWindow

# 07:00 through 22:00, one slot per hour
TIME_SLOTS: tuple[str, ...] = tuple(f"{hour:02d}:00" for hour in range(7, 23))
COMPACT_TIME_SLOTS: tuple[str, ...] = ("08:00", "10:00", "12:00", "14:00", "16:00", "18:00", "20:00")

DEFAULT_LOCALE = "pt-BR"

# Sunday first
DAY_LABELS: dict[str, tuple[str, ...]] = {
    "pt-BR": ("DOM", "SEG", "TER", "QUA", "QUI", "SEX", "SAB"),
    "en": ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"),
}

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "pt-BR": (
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

SHORT_MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "pt-BR": ("jan.", "fev.", "mar.", "abr.", "mai.", "jun.", "jul.", "ago.", "set.", "out.", "nov.", "dez."),
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
}


def resolve_locale(locale: str | None) -> str:
    normalized = (locale or DEFAULT_LOCALE).strip().replace("_", "-").lower()
    if normalized.startswith("pt"):
        return "pt-BR"
    if normalized.startswith("en"):
        return "en"
    return DEFAULT_LOCALE


def time_slots(compact: bool = False) -> tuple[str, ...]:
    return COMPACT_TIME_SLOTS if compact else TIME_SLOTS


def week_window(reference_date: date) -> WeekWindow:
    """The Sunday-to-Saturday window containing reference_date."""
    days_since_sunday = (reference_date.weekday() + 1) % DAYS_IN_WEEK
    start = reference_date - timedelta(days=days_since_sunday)
    return WeekWindow(tuple(start + timedelta(days=offset) for offset in range(DAYS_IN_WEEK)))


def shift_week(current: WeekWindow, delta_weeks: int) -> WeekWindow:
    return week_window(current.start + timedelta(weeks=delta_weeks))


def day_labels(locale: str | None = None) -> tuple[str, ...]:
    return DAY_LABELS[resolve_locale(locale)]


def _month_year(day: date, locale: str) -> str:
    month = MONTH_NAMES[locale][day.month - 1]
    if locale == "pt-BR":
        return f"{month} de {day.year}"
    return f"{month} {day.year}"


def month_year_label(window: WeekWindow, locale: str | None = None) -> str:
    """
    Header label for the grid. A window inside one month gives "Month Year";
    a window spanning two months gives "ShortMonth – Month Year" using the
    year of the last day.
    """
    resolved = resolve_locale(locale)
    first, last = window.start, window.end
    if (first.year, first.month) == (last.year, last.month):
        return _month_year(first, resolved)
    short = SHORT_MONTH_NAMES[resolved][first.month - 1]
    return f"{short} – {_month_year(last, resolved)}"


def range_label(window: WeekWindow, locale: str | None = None) -> str:
    if resolve_locale(locale) == "en":
        return f"{window.start:%m/%d} - {window.end:%m/%d}"
    return f"{window.start:%d/%m} - {window.end:%d/%m}"
