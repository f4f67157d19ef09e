"""Group Routes - list/get/create/update/delete over the Group resource.

Invariants:
    - Payloads and path ids are validated by FastAPI/Pydantic before a handler runs
    - get is the only operation that reports a missing id as 404
    - Every other failure collapses to OperationFailedError with a fixed message
    - The collection answers with and without a trailing slash (no redirect)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from incalink.core.errors import GroupNotFoundError, OperationFailedError
from incalink.core.repository_protocols import GroupRepository
from incalink.infrastructure.database import get_db
from incalink.infrastructure.group_repository import SqlAlchemyGroupRepository
from incalink.schemas.group import GroupPayload, GroupResponse, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/groups", tags=["groups"])


def get_group_repository(
    db: AsyncSession = Depends(get_db),
) -> GroupRepository:
    return SqlAlchemyGroupRepository(db)


@router.get("", response_model=list[GroupResponse])
@router.get(
    "/", response_model=list[GroupResponse], include_in_schema=False,
)
async def list_groups(repo: GroupRepository = Depends(get_group_repository)):
    """Return every group."""
    try:
        return await repo.find_all()
    except Exception as e:
        logger.error(f"Failed to fetch groups: {e}", exc_info=True)
        raise OperationFailedError("Failed to fetch groups", "list") from e


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: int, repo: GroupRepository = Depends(get_group_repository),
):
    """Return one group or 404."""
    try:
        group = await repo.find_by_id(group_id)
    except Exception as e:
        logger.error(
            f"Failed to fetch group {group_id}: {e}",
            exc_info=True, extra={"group_id": group_id},
        )
        raise OperationFailedError("Failed to fetch group", "get") from e
    if group is None:
        raise GroupNotFoundError(group_id)
    return group


@router.post(
    "", response_model=GroupResponse, status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=GroupResponse, status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_group(
    body: GroupPayload, repo: GroupRepository = Depends(get_group_repository),
):
    """Create a group; the datastore assigns its id."""
    try:
        return await repo.create(body)
    except Exception as e:
        logger.error(f"Failed to create group: {e}", exc_info=True)
        raise OperationFailedError("Failed to create group", "create") from e


@router.put("/{group_id}", response_model=GroupResponse)
async def update_group(
    group_id: int,
    body: GroupPayload,
    repo: GroupRepository = Depends(get_group_repository),
):
    """Overwrite all mutable fields of a group."""
    try:
        return await repo.update(group_id, body)
    except Exception as e:
        # a missing id is not distinguished from other failures here
        logger.error(
            f"Failed to update group {group_id}: {e}",
            exc_info=True, extra={"group_id": group_id},
        )
        raise OperationFailedError("Failed to update group", "update") from e


@router.delete("/{group_id}", response_model=MessageResponse)
async def delete_group(
    group_id: int, repo: GroupRepository = Depends(get_group_repository),
):
    try:
        await repo.delete(group_id)
    except Exception as e:
        logger.error(
            f"Failed to delete group {group_id}: {e}",
            exc_info=True, extra={"group_id": group_id},
        )
        raise OperationFailedError("Failed to delete group", "delete") from e
    return {"message": "Group deleted"}
