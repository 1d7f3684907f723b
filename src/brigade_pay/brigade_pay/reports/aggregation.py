"""Aggregation over any collection of operations (full history or a period).

All functions are pure: inputs are never mutated, empty inputs give zero or
empty results.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from ..members.model import Member
from ..operations.model import Operation


@dataclass(frozen=True)
class Totals:
    total_compensation: Decimal
    total_hours: Decimal
    total_operations: int


@dataclass(frozen=True)
class MemberSummaryRow:
    member_id: str
    name: str
    rank: str
    operation_count: int
    hours: Decimal
    total: Decimal


@dataclass(frozen=True)
class TypeSummaryRow:
    type: str
    count: int
    hours: Decimal
    total: Decimal


@dataclass(frozen=True)
class Summary:
    totals: Totals
    member_summary: list[MemberSummaryRow]
    type_summary: list[TypeSummaryRow]

    @property
    def total_compensation(self) -> Decimal:
        return self.totals.total_compensation

    @property
    def total_hours(self) -> Decimal:
        return self.totals.total_hours

    @property
    def total_operations(self) -> int:
        return self.totals.total_operations

    @property
    def active_members(self) -> int:
        return sum(1 for row in self.member_summary if row.operation_count > 0)


def compute_totals(operations: Iterable[Operation]) -> Totals:
    compensation = Decimal("0")
    hours = Decimal("0")
    count = 0
    for op in operations:
        compensation += op.total
        hours += op.hours
        count += 1
    return Totals(total_compensation=compensation, total_hours=hours, total_operations=count)


def summarize_by_member(
    operations: Sequence[Operation],
    members: Sequence[Member],
    *,
    active_only: bool = False,
) -> list[MemberSummaryRow]:
    """One row per member, highest total first.

    Members without operations are kept unless active_only is set. sorted()
    is stable, so equal totals keep roster order.
    """

    rows = []
    for m in members:
        own = [op for op in operations if op.member_id == m.member_id]
        t = compute_totals(own)
        rows.append(
            MemberSummaryRow(
                member_id=m.member_id,
                name=m.name,
                rank=m.rank,
                operation_count=t.total_operations,
                hours=t.total_hours,
                total=t.total_compensation,
            )
        )

    if active_only:
        rows = [r for r in rows if r.operation_count > 0]
    rows.sort(key=lambda r: r.total, reverse=True)
    return rows


@dataclass
class _TypeGroup:
    count: int = 0
    hours: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


def summarize_by_type(operations: Iterable[Operation]) -> list[TypeSummaryRow]:
    """Group by the type label stored on each operation, highest total first.

    Groups appear in first-occurrence order before the (stable) sort.
    """

    groups: dict[str, _TypeGroup] = {}
    for op in operations:
        g = groups.get(op.type)
        if g is None:
            g = _TypeGroup()
            groups[op.type] = g
        g.count += 1
        g.hours += op.hours
        g.total += op.total

    rows = [TypeSummaryRow(type=label, count=g.count, hours=g.hours, total=g.total) for label, g in groups.items()]
    rows.sort(key=lambda r: r.total, reverse=True)
    return rows


def compute_summary(
    operations: Sequence[Operation],
    members: Sequence[Member],
    *,
    active_only: bool = False,
) -> Summary:
    return Summary(
        totals=compute_totals(operations),
        member_summary=summarize_by_member(operations, members, active_only=active_only),
        type_summary=summarize_by_type(operations),
    )
