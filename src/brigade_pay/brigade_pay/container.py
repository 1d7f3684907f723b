from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.ids import MonotonicIdGenerator
from .members.memory_member_repository import InMemoryMemberRepository
from .members.service import MemberService
from .operations.memory_operation_repository import InMemoryOperationRepository
from .operations.service import OperationService
from .reports.service import ReportService
from .state import BrigadeState
from .storage.kv_store import KeyValueStore, build_store
from .users.kv_user_repository import KeyValueUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    state: BrigadeState
    store: KeyValueStore

    members_repo: InMemoryMemberRepository
    operations_repo: InMemoryOperationRepository
    users_repo: KeyValueUserRepository

    auth_service: AuthService
    member_service: MemberService
    operation_service: OperationService
    report_service: ReportService


def build_container(
    *,
    users_store_path: Optional[str] = None,
    seed_demo_members: bool = False,
    state: Optional[BrigadeState] = None,
    store: Optional[KeyValueStore] = None,
) -> Container:
    state = state if state is not None else BrigadeState()
    store = store if store is not None else build_store(users_store_path)
    ids = MonotonicIdGenerator()

    members_repo = InMemoryMemberRepository(state)
    operations_repo = InMemoryOperationRepository(state)
    users_repo = KeyValueUserRepository(store)

    auth_service = AuthService(users_repo)
    member_service = MemberService(members_repo, operations_repo, ids=ids)
    operation_service = OperationService(operations_repo, members_repo, ids=ids)
    report_service = ReportService(operations_repo, members_repo)

    if seed_demo_members:
        member_service.seed_defaults()

    return Container(
        state=state,
        store=store,
        members_repo=members_repo,
        operations_repo=operations_repo,
        users_repo=users_repo,
        auth_service=auth_service,
        member_service=member_service,
        operation_service=operation_service,
        report_service=report_service,
    )
