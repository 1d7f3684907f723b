from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class OperationType:
    """Catalog entry: event category with its hourly compensation rate."""

    key: str
    label: str
    hourly_rate: Decimal


@dataclass(frozen=True)
class Operation:
    """Domain entity: a logged service event (zdarzenie).

    member_name, type and rate are copied at creation time, so later roster
    or catalog edits never change past records. total is hours * rate as of
    creation and is never recomputed.
    """

    operation_id: str
    member_id: str
    member_name: str
    date: date
    type: str
    hours: Decimal
    rate: Decimal
    total: Decimal
