from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Operation


class OperationRepository(Protocol):
    def list_all(self) -> Sequence[Operation]:
        raise NotImplementedError

    def get_by_id(self, operation_id: str) -> Optional[Operation]:
        raise NotImplementedError

    def add(self, operation: Operation) -> None:
        raise NotImplementedError

    def delete_by_id(self, operation_id: str) -> bool:
        raise NotImplementedError

    def delete_by_member(self, member_id: str) -> int:
        """Cascade used when a member is removed. Returns removed count."""

        raise NotImplementedError
