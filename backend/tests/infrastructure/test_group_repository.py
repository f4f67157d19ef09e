"""Group Repository - verifies SQLAlchemy persistence against the protocol contract.

Invariants:
    - create assigns ids; find_by_id returns None for a missing id
    - update/delete raise GroupNotFoundError for a missing id
"""

from datetime import datetime, timezone

import pytest

from incalink.core.errors import GroupNotFoundError
from incalink.infrastructure.group_repository import SqlAlchemyGroupRepository
from incalink.schemas.group import GroupPayload


def _payload(name: str = "Group A") -> GroupPayload:
    return GroupPayload(
        group_name=name,
        arrival=datetime(2024, 1, 1, 10, tzinfo=timezone.utc),
        departure=datetime(2024, 1, 10, 10, tzinfo=timezone.utc),
    )


@pytest.fixture
def repo(test_db):
    return SqlAlchemyGroupRepository(test_db)


async def test_create_assigns_increasing_ids(repo):
    first = await repo.create(_payload("A"))
    second = await repo.create(_payload("B"))
    assert first.id is not None
    assert second.id > first.id


async def test_find_all_empty(repo):
    assert await repo.find_all() == []


async def test_find_all_returns_every_group(repo):
    await repo.create(_payload("A"))
    await repo.create(_payload("B"))

    groups = await repo.find_all()

    assert [g.group_name for g in groups] == ["A", "B"]


async def test_find_by_id_missing_returns_none(repo):
    assert await repo.find_by_id(12345) is None


async def test_update_overwrites_fields(repo):
    group = await repo.create(_payload("A"))
    replacement = GroupPayload(
        group_name="Z",
        arrival=datetime(2030, 6, 1, tzinfo=timezone.utc),
        departure=datetime(2030, 6, 2, tzinfo=timezone.utc),
    )

    updated = await repo.update(group.id, replacement)

    assert updated.id == group.id
    assert updated.group_name == "Z"
    assert updated.arrival.replace(tzinfo=timezone.utc) == replacement.arrival
    assert updated.departure.replace(tzinfo=timezone.utc) == replacement.departure


async def test_update_missing_raises_not_found(repo):
    with pytest.raises(GroupNotFoundError) as exc_info:
        await repo.update(777, _payload())
    assert exc_info.value.group_id == 777


async def test_delete_removes_group(repo):
    group = await repo.create(_payload())

    await repo.delete(group.id)

    assert await repo.find_by_id(group.id) is None


async def test_delete_missing_raises_not_found(repo):
    with pytest.raises(GroupNotFoundError):
        await repo.delete(777)
