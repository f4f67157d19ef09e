"""Boundary Protocols - contracts between the API layer and persistence.

Invariants:
    - Routes depend on GroupRepository, never on a concrete implementation
    - update/delete raise GroupNotFoundError for a missing id; find_by_id returns None

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
"""

from datetime import datetime
from typing import Protocol

from incalink.schemas.group import GroupPayload


class GroupLike(Protocol):
    """Structural contract for Group rows handed back to routes."""
    id: int
    group_name: str
    arrival: datetime
    departure: datetime


class GroupRepository(Protocol):
    """Contract for group persistence, implemented by infrastructure."""
    async def find_all(self) -> list[GroupLike]: ...
    async def find_by_id(self, group_id: int) -> GroupLike | None: ...
    async def create(self, data: GroupPayload) -> GroupLike: ...
    async def update(self, group_id: int, data: GroupPayload) -> GroupLike: ...
    async def delete(self, group_id: int) -> None: ...
