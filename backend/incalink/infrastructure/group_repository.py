"""Group Repository - SQLAlchemy implementation of the GroupRepository protocol.

Invariants:
    - Writes commit before returning; returned rows carry their assigned id
    - update/delete raise GroupNotFoundError when the id has no row
    - find_all returns every row ordered by id, no filtering or paging
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from incalink.core.errors import GroupNotFoundError
from incalink.models.group import Group
from incalink.schemas.group import GroupPayload

logger = logging.getLogger(__name__)


class SqlAlchemyGroupRepository:
    """Group persistence over a single AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[Group]:
        result = await self._db.execute(select(Group).order_by(Group.id))
        return list(result.scalars().all())

    async def find_by_id(self, group_id: int) -> Group | None:
        return await self._db.get(Group, group_id)

    async def create(self, data: GroupPayload) -> Group:
        group = Group(
            group_name=data.group_name,
            arrival=data.arrival,
            departure=data.departure,
        )
        self._db.add(group)
        await self._db.commit()
        await self._db.refresh(group)
        logger.info(
            f"Group {group.id} created", extra={"group_id": group.id},
        )
        return group

    async def update(self, group_id: int, data: GroupPayload) -> Group:
        group = await self._get_or_raise(group_id)
        group.group_name = data.group_name
        group.arrival = data.arrival
        group.departure = data.departure
        await self._db.commit()
        await self._db.refresh(group)
        logger.info(
            f"Group {group_id} updated", extra={"group_id": group_id},
        )
        return group

    async def delete(self, group_id: int) -> None:
        group = await self._get_or_raise(group_id)
        await self._db.delete(group)
        await self._db.commit()
        logger.info(
            f"Group {group_id} deleted", extra={"group_id": group_id},
        )

    async def _get_or_raise(self, group_id: int) -> Group:
        group = await self._db.get(Group, group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        return group
