from __future__ import annotations

from decimal import Decimal

from .base import CompensationCalculator


class StandardCompensationCalculator(CompensationCalculator):
    """Standard rule: hours * hourly rate, exact (no rounding)."""

    def total(self, *, hours: Decimal, rate: Decimal) -> Decimal:
        return Decimal(hours) * Decimal(rate)
