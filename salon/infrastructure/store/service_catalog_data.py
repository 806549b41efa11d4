from __future__ import annotations

from decimal import Decimal

from salon.domain.entities.service import Service

SERVICE_CATALOG: list[Service] = [
    Service(id="corte", name="Corte", price=Decimal("50.00"), duration_minutes=30, category="cabelo"),
    Service(id="escova", name="Escova", price=Decimal("80.00"), duration_minutes=45, category="cabelo"),
    Service(id="coloracao", name="Coloração", price=Decimal("150.00"), duration_minutes=120, category="cabelo"),
    Service(id="manicure", name="Manicure", price=Decimal("35.00"), duration_minutes=40, category="unhas"),
    Service(id="pedicure", name="Pedicure", price=Decimal("40.00"), duration_minutes=50, category="unhas"),
    Service(id="sobrancelha", name="Design de sobrancelha", price=Decimal("30.00"), duration_minutes=20, category="estética"),
]
