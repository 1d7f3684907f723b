from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..common.datetime_utils import today
from ..core.enums import Quarter
from ..core.exceptions import ValidationError
from ..members.model import Member
from ..members.repository import MemberRepository
from ..operations.model import Operation
from ..operations.repository import OperationRepository
from .aggregation import MemberSummaryRow, Summary, Totals, TypeSummaryRow, compute_summary
from .periods import QuarterRange, filter_operations, list_available_years, quarter_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuarterlyReport:
    period: QuarterRange
    totals: Totals
    member_summary: list[MemberSummaryRow]
    type_summary: list[TypeSummaryRow]
    operations: list[Operation]

    @property
    def total_compensation(self):
        return self.totals.total_compensation

    @property
    def total_hours(self):
        return self.totals.total_hours

    @property
    def total_operations(self) -> int:
        return self.totals.total_operations


def compute_quarterly_report(
    operations: Sequence[Operation],
    members: Sequence[Member],
    quarter: Optional[Union[Quarter, str]],
    year: int,
) -> Optional[QuarterlyReport]:
    """Report for one quarter, or None when no quarter is selected.

    Only members active in the period are listed. Detail rows read
    chronologically (earliest first), unlike the running log.
    """

    if not quarter:
        return None

    period = quarter_range(Quarter(quarter), int(year))
    in_period = filter_operations(operations, period)
    summary = compute_summary(in_period, members, active_only=True)

    return QuarterlyReport(
        period=period,
        totals=summary.totals,
        member_summary=summary.member_summary,
        type_summary=summary.type_summary,
        operations=sorted(in_period, key=lambda op: op.date),
    )


class ReportService:
    """Use case: summaries and quarterly reports over the current state."""

    def __init__(self, operations: OperationRepository, members: MemberRepository):
        self._operations = operations
        self._members = members

    def compute_summary(self) -> Summary:
        return compute_summary(self._operations.list_all(), self._members.list_all())

    def compute_quarterly_report(self, *, quarter: Optional[str], year: Union[int, str, None] = None) -> Optional[QuarterlyReport]:
        if not quarter:
            return None

        q = Quarter.parse(quarter)
        if year is None or str(year).strip() == "":
            year = today().year
        try:
            year = int(year)
        except (TypeError, ValueError):
            raise ValidationError(f"Nieprawidłowy rok: {year}") from None
        if not 1 <= year <= 9999:
            raise ValidationError(f"Nieprawidłowy rok: {year}")

        report = compute_quarterly_report(self._operations.list_all(), self._members.list_all(), q, year)
        logger.debug("quarterly report %s/%d operations=%d", q.value, year, report.total_operations)
        return report

    def list_available_years(self) -> list[int]:
        return list_available_years(self._operations.list_all())
