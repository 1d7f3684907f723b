from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class Quarter(str, Enum):
    """Kwartał roku kalendarzowego używany w raportach okresowych."""

    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"

    @property
    def label(self) -> str:
        return {
            Quarter.Q1: "Q1 (Styczeń - Marzec)",
            Quarter.Q2: "Q2 (Kwiecień - Czerwiec)",
            Quarter.Q3: "Q3 (Lipiec - Wrzesień)",
            Quarter.Q4: "Q4 (Październik - Grudzień)",
        }[self]

    @classmethod
    def parse(cls, value: str) -> "Quarter":
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValidationError(f"Nieprawidłowy kwartał: {value}") from None
