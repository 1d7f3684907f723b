from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Repository interface for Member.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def add(self, member: Member) -> None:
        raise NotImplementedError

    def delete_by_id(self, member_id: str) -> bool:
        raise NotImplementedError
