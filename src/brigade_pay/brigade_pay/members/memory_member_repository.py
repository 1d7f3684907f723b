from __future__ import annotations

from typing import Optional, Sequence

from ..state import BrigadeState
from .model import Member


class InMemoryMemberRepository:
    def __init__(self, state: BrigadeState):
        self._state = state

    def list_all(self) -> Sequence[Member]:
        return list(self._state.members)

    def get_by_id(self, member_id: str) -> Optional[Member]:
        for m in self._state.members:
            if m.member_id == member_id:
                return m
        return None

    def add(self, member: Member) -> None:
        self._state.members.append(member)

    def delete_by_id(self, member_id: str) -> bool:
        before = len(self._state.members)
        self._state.members[:] = [m for m in self._state.members if m.member_id != member_id]
        return len(self._state.members) != before
