from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.brigade_pay.brigade_pay.core.enums import Quarter
from src.brigade_pay.brigade_pay.core.exceptions import ValidationError
from src.brigade_pay.brigade_pay.operations.model import Operation
from src.brigade_pay.brigade_pay.reports import periods
from src.brigade_pay.brigade_pay.reports.periods import filter_operations, list_available_years, quarter_range


def op_on(work_date: date, op_id: str = "1") -> Operation:
    return Operation(
        operation_id=op_id,
        member_id="m",
        member_name="M",
        date=work_date,
        type="Akcja ratownicza",
        hours=Decimal("1"),
        rate=Decimal("25"),
        total=Decimal("25"),
    )


@pytest.mark.parametrize(
    "quarter,start,end",
    [
        (Quarter.Q1, datetime(2023, 1, 1), datetime(2023, 3, 31, 23, 59, 59)),
        (Quarter.Q2, datetime(2023, 4, 1), datetime(2023, 6, 30, 23, 59, 59)),
        (Quarter.Q3, datetime(2023, 7, 1), datetime(2023, 9, 30, 23, 59, 59)),
        (Quarter.Q4, datetime(2023, 10, 1), datetime(2023, 12, 31, 23, 59, 59)),
    ],
)
def test_quarter_range_bounds(quarter, start, end):
    r = quarter_range(quarter, 2023)

    assert r.start == start
    assert r.end == end


def test_quarter_range_accepts_plain_string():
    assert quarter_range("Q2", 2024).quarter is Quarter.Q2


def test_q1_leap_year_ends_on_march_31():
    # February length must not leak into the end computation
    assert quarter_range(Quarter.Q1, 2024).end == datetime(2024, 3, 31, 23, 59, 59)


def test_filter_is_inclusive_on_both_boundaries():
    ops = [
        op_on(date(2024, 3, 31), "before"),
        op_on(date(2024, 4, 1), "first"),
        op_on(date(2024, 6, 30), "last"),
        op_on(date(2024, 7, 1), "after"),
    ]

    selected = filter_operations(ops, quarter_range(Quarter.Q2, 2024))

    assert [op.operation_id for op in selected] == ["first", "last"]


def test_available_years_empty_is_current_year():
    assert list_available_years([], current_year=2026) == [2026]


def test_available_years_default_uses_today(monkeypatch):
    monkeypatch.setattr(periods, "today", lambda: date(2031, 5, 5))

    assert list_available_years([]) == [2031]


def test_available_years_distinct_descending_with_current_year():
    ops = [op_on(date(2022, 1, 1)), op_on(date(2024, 5, 5)), op_on(date(2022, 8, 8))]

    assert list_available_years(ops, current_year=2026) == [2026, 2024, 2022]


def test_available_years_current_year_not_duplicated():
    ops = [op_on(date(2026, 1, 1))]

    assert list_available_years(ops, current_year=2026) == [2026]


def test_quarter_parse_rejects_unknown_value():
    with pytest.raises(ValidationError):
        Quarter.parse("Q5")


def test_quarter_parse_is_case_insensitive():
    assert Quarter.parse(" q3 ") is Quarter.Q3


def test_q4_of_last_supported_year_does_not_overflow():
    r = quarter_range(Quarter.Q4, 9999)

    assert r.end == datetime(9999, 12, 31, 23, 59, 59)
    assert filter_operations([op_on(date(9999, 12, 31))], r)[0].date == date(9999, 12, 31)
