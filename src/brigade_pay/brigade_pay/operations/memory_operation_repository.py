from __future__ import annotations

from typing import Optional, Sequence

from ..state import BrigadeState
from .model import Operation


class InMemoryOperationRepository:
    def __init__(self, state: BrigadeState):
        self._state = state

    def list_all(self) -> Sequence[Operation]:
        return list(self._state.operations)

    def get_by_id(self, operation_id: str) -> Optional[Operation]:
        for op in self._state.operations:
            if op.operation_id == operation_id:
                return op
        return None

    def add(self, operation: Operation) -> None:
        self._state.operations.append(operation)

    def delete_by_id(self, operation_id: str) -> bool:
        return self._remove(lambda op: op.operation_id == operation_id) > 0

    def delete_by_member(self, member_id: str) -> int:
        return self._remove(lambda op: op.member_id == member_id)

    def _remove(self, predicate) -> int:
        kept = [op for op in self._state.operations if not predicate(op)]
        removed = len(self._state.operations) - len(kept)
        self._state.operations[:] = kept
        return removed
