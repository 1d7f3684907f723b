from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class CompensationCalculator(ABC):
    """Calculator interface (Strategy Pattern for compensation)."""

    @abstractmethod
    def total(self, *, hours: Decimal, rate: Decimal) -> Decimal:
        raise NotImplementedError
