from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..common.datetime_utils import parse_iso_date
from ..common.ids import MonotonicIdGenerator
from ..common.validators import require_non_empty, require_positive_decimal
from ..compensation.calculator.base import CompensationCalculator
from ..compensation.calculator.standard_calculator import StandardCompensationCalculator
from ..core.exceptions import NotFoundError, ValidationError
from ..members.repository import MemberRepository
from .catalog import OPERATION_TYPES, get_operation_type
from .model import Operation, OperationType
from .repository import OperationRepository

logger = logging.getLogger(__name__)


def sort_recent_first(operations: Sequence[Operation]) -> list[Operation]:
    """Running log order: most recent date first (stable for equal dates)."""
    return sorted(operations, key=lambda op: op.date, reverse=True)


class OperationService:
    """Use case: log and remove service events."""

    def __init__(
        self,
        operations: OperationRepository,
        members: MemberRepository,
        *,
        catalog: Sequence[OperationType] = OPERATION_TYPES,
        calculator: Optional[CompensationCalculator] = None,
        ids: Optional[MonotonicIdGenerator] = None,
    ):
        self._operations = operations
        self._members = members
        self._catalog = tuple(catalog)
        self._calculator = calculator or StandardCompensationCalculator()
        self._ids = ids or MonotonicIdGenerator()

    @property
    def catalog(self) -> tuple[OperationType, ...]:
        return self._catalog

    def _require_type(self, type_key: str) -> OperationType:
        type_key = require_non_empty(type_key, "Rodzaj zdarzenia")
        op_type = get_operation_type(type_key, self._catalog)
        if not op_type:
            raise ValidationError("Nieznany rodzaj zdarzenia")
        return op_type

    def add_operation(
        self,
        *,
        member_id: str,
        type_key: str,
        work_date: Union[date, str],
        hours,
    ) -> Operation:
        member_id = require_non_empty(member_id, "Strażak")
        member = self._members.get_by_id(member_id)
        if not member:
            raise ValidationError("Strażak nie istnieje")

        op_type = self._require_type(type_key)
        if isinstance(work_date, datetime):
            work_date = work_date.date()
        elif not isinstance(work_date, date):
            work_date = parse_iso_date(require_non_empty(work_date, "Data"))
        hours = require_positive_decimal(hours, "Liczba godzin")

        operation = Operation(
            operation_id=self._ids.next_id(),
            member_id=member.member_id,
            member_name=member.name,
            date=work_date,
            type=op_type.label,
            hours=hours,
            rate=op_type.hourly_rate,
            total=self._calculator.total(hours=hours, rate=op_type.hourly_rate),
        )
        self._operations.add(operation)
        logger.info(
            "operation added id=%s member=%s type=%s hours=%s total=%s",
            operation.operation_id,
            operation.member_id,
            op_type.key,
            operation.hours,
            operation.total,
        )
        return operation

    def delete_operation(self, operation_id: str) -> None:
        if not self._operations.delete_by_id(operation_id):
            raise NotFoundError("Zdarzenie nie istnieje")
        logger.info("operation deleted id=%s", operation_id)

    def list_operations(self) -> list[Operation]:
        return sort_recent_first(self._operations.list_all())

    def preview_total(self, *, type_key: str, hours) -> Decimal:
        op_type = self._require_type(type_key)
        hours = require_positive_decimal(hours, "Liczba godzin")
        return self._calculator.total(hours=hours, rate=op_type.hourly_rate)
