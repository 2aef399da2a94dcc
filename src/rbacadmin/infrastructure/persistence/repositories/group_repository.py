"""Repository for group database operations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rbacadmin.infrastructure.persistence.models import GroupModel

SORTABLE_COLUMNS = ("id", "name", "created_at", "updated_at")


class GroupRepository:
    """Repository for group database operations.

    Writes are flushed but never committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, group: GroupModel) -> GroupModel:
        """Create a new group.

        Args:
            group: Group model to create.

        Returns:
            Created group model with its id assigned.
        """
        self.session.add(group)
        await self.session.flush()
        return group

    async def update(self, group: GroupModel) -> GroupModel:
        """Flush pending changes of a group.

        Args:
            group: Group model to update.

        Returns:
            Updated group model.
        """
        if group not in self.session:
            self.session.add(group)

        await self.session.flush()
        return group

    async def delete(self, group: GroupModel) -> None:
        """Delete a group and its association rows.

        Args:
            group: Group model to delete.
        """
        await self.session.delete(group)
        await self.session.flush()

    async def get_by_id(self, group_id: int) -> GroupModel | None:
        """Get a group by ID.

        Args:
            group_id: Group ID.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(
            select(GroupModel).where(GroupModel.id == group_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> GroupModel | None:
        """Get a group by its unique name.

        Args:
            name: Group name.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(
            select(GroupModel).where(GroupModel.name == name)
        )
        return result.scalar_one_or_none()

    async def get_by_ids(self, group_ids: Iterable[int]) -> list[GroupModel]:
        """Get all groups whose ID is in the given collection.

        IDs that match no group are ignored.

        Args:
            group_ids: Group IDs.

        Returns:
            List of matching group models, in no particular order.
        """
        ids = set(group_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(GroupModel).where(GroupModel.id.in_(ids))
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[GroupModel]:
        """List every group ordered by ID."""
        result = await self.session.execute(
            select(GroupModel).order_by(GroupModel.id)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count all groups."""
        result = await self.session.execute(
            select(func.count()).select_from(GroupModel)
        )
        return result.scalar_one()

    async def get_page(
        self,
        offset: int = 0,
        limit: int = 20,
        sort_by: str = "id",
        sort_order: Literal["asc", "desc"] = "asc",
    ) -> tuple[list[GroupModel], int]:
        """Get one page of groups together with the total group count.

        Args:
            offset: Number of rows to skip.
            limit: Maximum number of rows to return.
            sort_by: Column to sort by (id, name, created_at, updated_at).
            sort_order: Sort order (asc or desc).

        Returns:
            Tuple of (groups on the page, total number of groups).
        """
        total = await self.count()

        if sort_by not in SORTABLE_COLUMNS:
            sort_by = "id"
        sort_column = getattr(GroupModel, sort_by)
        order = sort_column.desc() if sort_order == "desc" else sort_column.asc()

        query = select(GroupModel).order_by(order)
        # Tie-break on id so pages are stable
        if sort_by != "id":
            query = query.order_by(GroupModel.id.asc())

        result = await self.session.execute(query.offset(offset).limit(limit))
        return list(result.scalars().all()), total
