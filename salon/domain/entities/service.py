from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    price: Decimal
    duration_minutes: int
    category: str | None = None
    description: str | None = None
