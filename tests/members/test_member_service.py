from __future__ import annotations

import pytest

from src.brigade_pay.brigade_pay.common.ids import MonotonicIdGenerator
from src.brigade_pay.brigade_pay.container import build_container
from src.brigade_pay.brigade_pay.core.exceptions import NotFoundError, ValidationError


def test_add_member_strips_and_assigns_unique_ids():
    c = build_container()

    a = c.member_service.add_member(name="  Anna ", rank="Druh")
    b = c.member_service.add_member(name="Bartek", rank="Naczelnik")

    assert a.name == "Anna"
    assert a.member_id != b.member_id
    assert [m.name for m in c.member_service.list_members()] == ["Anna", "Bartek"]


@pytest.mark.parametrize("name,rank", [("", "Druh"), ("Anna", "   ")])
def test_add_member_requires_name_and_rank(name, rank):
    c = build_container()

    with pytest.raises(ValidationError):
        c.member_service.add_member(name=name, rank=rank)


def test_delete_member_cascades_only_their_operations():
    c = build_container()
    a = c.member_service.add_member(name="Anna", rank="Druh")
    b = c.member_service.add_member(name="Bartek", rank="Naczelnik")
    c.operation_service.add_operation(member_id=a.member_id, type_key="fire", work_date="2024-01-01", hours="1")
    c.operation_service.add_operation(member_id=a.member_id, type_key="other", work_date="2024-01-02", hours="2")
    kept = c.operation_service.add_operation(member_id=b.member_id, type_key="fire", work_date="2024-01-03", hours="3")

    removed = c.member_service.delete_member(a.member_id)

    assert removed == 2
    assert c.state.members == [b]
    assert c.state.operations == [kept]


def test_delete_unknown_member_raises():
    c = build_container()

    with pytest.raises(NotFoundError):
        c.member_service.delete_member("nope")


def test_seed_defaults_only_on_empty_roster():
    c = build_container(seed_demo_members=True)
    c.member_service.seed_defaults()

    assert [m.name for m in c.member_service.list_members()] == ["John Smith", "Sarah Johnson", "Mike Davis"]


def test_id_generator_is_strictly_increasing_within_same_millisecond():
    ids = MonotonicIdGenerator(clock=lambda: 1700000000000)

    assert [ids.next_id() for _ in range(3)] == ["1700000000000", "1700000000001", "1700000000002"]
