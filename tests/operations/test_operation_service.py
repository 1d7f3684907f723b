from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime
from decimal import Decimal

import pytest

from src.brigade_pay.brigade_pay.core.exceptions import NotFoundError, ValidationError
from src.brigade_pay.brigade_pay.members.model import Member
from src.brigade_pay.brigade_pay.operations.model import OperationType
from src.brigade_pay.brigade_pay.operations.service import OperationService


class FakeMembersRepo:
    def __init__(self, members):
        self._members = {m.member_id: m for m in members}

    def get_by_id(self, member_id):
        return self._members.get(member_id)


class FakeOperationsRepo:
    def __init__(self):
        self.items = []

    def list_all(self):
        return list(self.items)

    def add(self, operation):
        self.items.append(operation)

    def delete_by_id(self, operation_id):
        before = len(self.items)
        self.items = [op for op in self.items if op.operation_id != operation_id]
        return len(self.items) != before


@pytest.fixture
def repo():
    return FakeOperationsRepo()


@pytest.fixture
def svc(repo):
    return OperationService(repo, FakeMembersRepo([Member(member_id="1", name="John Smith", rank="Captain")]))


def test_add_operation_snapshots_member_type_and_rate(svc, repo):
    op = svc.add_operation(member_id="1", type_key="fire", work_date="2024-02-10", hours="2")

    assert op.member_name == "John Smith"
    assert op.type == "Akcja ratownicza"
    assert op.rate == Decimal("25")
    assert op.total == Decimal("50")
    assert op.date == date(2024, 2, 10)
    assert repo.items == [op]


def test_total_is_not_recomputed_after_catalog_change(repo):
    members = FakeMembersRepo([Member(member_id="1", name="John Smith", rank="Captain")])
    old = OperationService(repo, members, catalog=[OperationType("fire", "Akcja ratownicza", Decimal("25"))])
    first = old.add_operation(member_id="1", type_key="fire", work_date=date(2024, 1, 1), hours="1")

    new = OperationService(repo, members, catalog=[OperationType("fire", "Akcja ratownicza", Decimal("30"))])
    new.add_operation(member_id="1", type_key="fire", work_date=date(2024, 1, 2), hours="1")

    assert repo.items[0] is first
    assert repo.items[0].total == Decimal("25")
    assert repo.items[1].total == Decimal("30")
    with pytest.raises(FrozenInstanceError):
        first.total = Decimal("0")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"member_id": "", "type_key": "fire", "work_date": "2024-01-01", "hours": "1"},
        {"member_id": "404", "type_key": "fire", "work_date": "2024-01-01", "hours": "1"},
        {"member_id": "1", "type_key": "parade", "work_date": "2024-01-01", "hours": "1"},
        {"member_id": "1", "type_key": "fire", "work_date": "2024-13-01", "hours": "1"},
        {"member_id": "1", "type_key": "fire", "work_date": "", "hours": "1"},
        {"member_id": "1", "type_key": "fire", "work_date": "2024-01-01", "hours": "0"},
        {"member_id": "1", "type_key": "fire", "work_date": "2024-01-01", "hours": "-2"},
        {"member_id": "1", "type_key": "fire", "work_date": "2024-01-01", "hours": "abc"},
        {"member_id": "1", "type_key": "fire", "work_date": "2024-01-01", "hours": "NaN"},
    ],
)
def test_add_operation_rejects_invalid_input(svc, repo, kwargs):
    with pytest.raises(ValidationError):
        svc.add_operation(**kwargs)
    assert repo.items == []


def test_list_operations_is_most_recent_first(svc):
    svc.add_operation(member_id="1", type_key="other", work_date="2024-01-05", hours="1")
    svc.add_operation(member_id="1", type_key="other", work_date="2024-03-05", hours="1")
    svc.add_operation(member_id="1", type_key="other", work_date="2024-02-05", hours="1")

    assert [op.date.month for op in svc.list_operations()] == [3, 2, 1]


def test_delete_operation(svc, repo):
    op = svc.add_operation(member_id="1", type_key="course", work_date="2024-01-05", hours="4")

    svc.delete_operation(op.operation_id)

    assert repo.items == []
    with pytest.raises(NotFoundError):
        svc.delete_operation(op.operation_id)


def test_preview_total(svc):
    assert svc.preview_total(type_key="training", hours="1.5") == Decimal("12.0")


def test_datetime_work_date_is_stored_as_plain_date(svc):
    svc.add_operation(member_id="1", type_key="other", work_date="2024-01-02", hours="1")
    op = svc.add_operation(member_id="1", type_key="other", work_date=datetime(2024, 1, 3, 10, 0), hours="1")

    assert type(op.date) is date
    assert op.date == date(2024, 1, 3)
    assert [o.date for o in svc.list_operations()] == [date(2024, 1, 3), date(2024, 1, 2)]
