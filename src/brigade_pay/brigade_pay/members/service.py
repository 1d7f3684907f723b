from __future__ import annotations

import logging
from typing import Optional

from ..common.ids import MonotonicIdGenerator
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_MEMBERS
from ..core.exceptions import NotFoundError
from ..operations.repository import OperationRepository
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: manage the brigade roster."""

    def __init__(
        self,
        members: MemberRepository,
        operations: OperationRepository,
        *,
        ids: Optional[MonotonicIdGenerator] = None,
    ):
        self._members = members
        self._operations = operations
        self._ids = ids or MonotonicIdGenerator()

    def list_members(self):
        return self._members.list_all()

    def add_member(self, *, name: str, rank: str) -> Member:
        name = require_non_empty(name, "Imię i nazwisko")
        rank = require_non_empty(rank, "Stanowisko")

        member = Member(member_id=self._ids.next_id(), name=name, rank=rank)
        self._members.add(member)
        logger.info("member added id=%s name=%s", member.member_id, member.name)
        return member

    def delete_member(self, member_id: str) -> int:
        """Remove a member together with all of their operations.

        Returns the number of operations removed by the cascade.
        """

        if not self._members.get_by_id(member_id):
            raise NotFoundError("Strażak nie istnieje")

        self._members.delete_by_id(member_id)
        removed = self._operations.delete_by_member(member_id)
        logger.info("member deleted id=%s cascaded_operations=%d", member_id, removed)
        return removed

    def seed_defaults(self) -> None:
        if self._members.list_all():
            return
        for member_id, name, rank in DEFAULT_MEMBERS:
            self._members.add(Member(member_id=member_id, name=name, rank=rank))
        logger.info("seeded %d demo members", len(DEFAULT_MEMBERS))
