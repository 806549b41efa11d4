from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Mapping

from salon.domain.entities.service import Service


@dataclass(frozen=True)
class ServiceTotals:
    duration_minutes: int = 0
    price: Decimal = Decimal("0.00")

    def __add__(self, other: "ServiceTotals") -> "ServiceTotals":
        return ServiceTotals(
            duration_minutes=self.duration_minutes + other.duration_minutes,
            price=self.price + other.price,
        )


def catalog_by_id(services: Iterable[Service]) -> dict[str, Service]:
    return {service.id: service for service in services}


def dedupe_selection(service_ids: Iterable[str]) -> tuple[str, ...]:
    """Drop blanks and repeated ids, keeping first-seen order for display."""
    seen: dict[str, None] = {}
    for service_id in service_ids:
        key = (service_id or "").strip()
        if key and key not in seen:
            seen[key] = None
    return tuple(seen)


def aggregate(service_ids: Iterable[str], catalog: Mapping[str, Service]) -> ServiceTotals:
    """
    Sum duration and price of the selected services.

    Ids missing from the catalog contribute nothing, so the form stays usable
    while the catalog is still loading.
    """
    totals = ServiceTotals()
    for service_id in service_ids:
        service = catalog.get(service_id)
        if service is None:
            continue
        totals += ServiceTotals(duration_minutes=service.duration_minutes, price=service.price)
    return totals
