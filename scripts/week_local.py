#!/usr/bin/env python3
"""
Local calendar harness (no HTTP, no hosted store).

Usage:
  python3 scripts/week_local.py --date 2025-08-26 [--offset 1] [--compact] [--locale en]

What it does:
- Seeds the in-memory store with a small catalog and a few appointments
- Books them through the same AppointmentBookingUseCase the API uses
- Prints the weekly grid built by WeekCalendarUseCase
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, time, timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from salon.application.use_cases.booking import AppointmentBookingUseCase
from salon.application.use_cases.calendar_view import WeekCalendarUseCase, WeekCalendarView
from salon.domain.entities.appointment import AppointmentDraft
from salon.domain.entities.session import Session
from salon.infrastructure.store.memory_store import MemoryAppointmentRepository, MemoryServiceCatalog
from salon.infrastructure.store.service_catalog_data import SERVICE_CATALOG

CELL_WIDTH = 14


def _seed(session: Session, reference: date) -> MemoryAppointmentRepository:
    catalog = MemoryServiceCatalog(default_services=SERVICE_CATALOG)

    repository = MemoryAppointmentRepository()
    booking = AppointmentBookingUseCase(catalog=catalog, repository=repository)

    bookings = [
        (0, time(9, 0), ("corte", "escova")),
        (1, time(14, 0), ("manicure",)),
        (3, time(18, 0), ("corte",)),
    ]
    for day_offset, start, service_ids in bookings:
        quote = booking.quote(session, service_ids, start)
        appointment = booking.book(
            session,
            AppointmentDraft(
                client_id=f"client-{day_offset}",
                employee_id="employee-1",
                service_ids=service_ids,
                date=reference + timedelta(days=day_offset),
                start_time=start,
            ),
        )
        print(f"booked {appointment.service_name} at {start:%H:%M} -> ends {quote.end_time}, R$ {quote.total_price}")

    booking.complete(session, repository.list_appointments(session, reference, reference)[0].id)
    return repository


def _print_view(view: WeekCalendarView) -> None:
    print()
    print(f"{view.title}  ({view.range_label})")
    header = [view.utc_offset_label.ljust(6)] + [
        f"{d.label} {d.date.day:02d}{'*' if d.is_selected else ' '}".ljust(CELL_WIDTH) for d in view.days
    ]
    print(" | ".join(header))
    print("-" * (len(" | ".join(header))))
    for slot, row in zip(view.slots, view.rows):
        cells = []
        for cell in row:
            headline = cell.headline
            if headline is None:
                cells.append("".ljust(CELL_WIDTH))
                continue
            marker = "+" if headline.completed else "o"
            cells.append(f"{marker} {headline.client_name}"[:CELL_WIDTH].ljust(CELL_WIDTH))
        print(" | ".join([slot.ljust(6)] + cells))


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the weekly appointment grid")
    parser.add_argument("--date", type=date.fromisoformat, default=date.today())
    parser.add_argument("--offset", type=int, default=0, help="weeks to move forward (negative for back)")
    parser.add_argument("--compact", action="store_true")
    parser.add_argument("--locale", default="pt-BR")
    args = parser.parse_args()

    session = Session(user_id="local")
    repository = _seed(session, args.date)
    use_case = WeekCalendarUseCase(repository, locale=args.locale, utc_offset_label="GMT-03")
    _print_view(use_case.build(session, args.date, week_offset=args.offset, compact=args.compact))


if __name__ == "__main__":
    main()
