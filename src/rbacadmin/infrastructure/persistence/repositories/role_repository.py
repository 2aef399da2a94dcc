"""Role repository for database operations."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rbacadmin.infrastructure.persistence.models import RoleModel


class RoleRepository:
    """Repository for role database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_ids(self, role_ids: Iterable[int]) -> list[RoleModel]:
        """Get the roles matching the given IDs, skipping unknown IDs.

        Args:
            role_ids: Role IDs.

        Returns:
            List of role models ordered by ID.
        """
        ids = set(role_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.id.in_(ids)).order_by(RoleModel.id)
        )
        return list(result.scalars().all())
