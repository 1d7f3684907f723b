from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import today
from ..core.constants import QUARTER_MONTHS
from ..core.enums import Quarter
from ..operations.model import Operation


@dataclass(frozen=True)
class QuarterRange:
    quarter: Quarter
    year: int
    start: datetime
    end: datetime

    def contains(self, value: date) -> bool:
        moment = datetime.combine(value, time.min)
        return self.start <= moment <= self.end


def _last_day_of_month(year: int, month: int) -> date:
    # day 0 of the following month
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def quarter_range(quarter: Quarter, year: int) -> QuarterRange:
    """Inclusive range: first day 00:00:00 to last day 23:59:59."""

    quarter = Quarter(quarter)
    start_month, end_month = QUARTER_MONTHS[quarter.value]
    start = datetime(year, start_month, 1, 0, 0, 0)
    end = datetime.combine(_last_day_of_month(year, end_month), time(23, 59, 59))
    return QuarterRange(quarter=quarter, year=int(year), start=start, end=end)


def filter_operations(operations: Iterable[Operation], period: QuarterRange) -> list[Operation]:
    return [op for op in operations if period.contains(op.date)]


def list_available_years(operations: Sequence[Operation], *, current_year: Optional[int] = None) -> list[int]:
    """Distinct operation years plus the current one, newest first."""

    if current_year is None:
        current_year = today().year
    years = {op.date.year for op in operations}
    years.add(int(current_year))
    return sorted(years, reverse=True)
