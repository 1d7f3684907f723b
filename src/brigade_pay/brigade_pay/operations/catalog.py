"""Static catalog of operation types and hourly rates (zł/h)."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from .model import OperationType

OPERATION_TYPES: tuple[OperationType, ...] = (
    OperationType(key="fire", label="Akcja ratownicza", hourly_rate=Decimal("25")),
    OperationType(key="training", label="Szkolenie/ćwiczenie", hourly_rate=Decimal("8")),
    OperationType(key="other", label="Zadania zlecone", hourly_rate=Decimal("5")),
    OperationType(key="course", label="Kurs podstawowy", hourly_rate=Decimal("5")),
)


def get_operation_type(key: str, catalog=OPERATION_TYPES) -> Optional[OperationType]:
    for t in catalog:
        if t.key == key:
            return t
    return None
