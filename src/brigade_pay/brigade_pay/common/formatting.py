from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import CURRENCY


def format_money(value: Decimal) -> str:
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_hours(value: Decimal) -> str:
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_money_label(value: Decimal) -> str:
    """Display form used in printed reports, e.g. '58.00zł'."""
    return f"{format_money(value)}{CURRENCY}"
