"""Resource repository for database operations."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rbacadmin.infrastructure.persistence.models import ResourceModel


class ResourceRepository:
    """Repository for resource database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_ids(self, resource_ids: Iterable[int]) -> list[ResourceModel]:
        """Get the resources matching the given IDs, skipping unknown IDs.

        Args:
            resource_ids: Resource IDs.

        Returns:
            List of resource models ordered by ID.
        """
        ids = set(resource_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(ResourceModel)
            .where(ResourceModel.id.in_(ids))
            .order_by(ResourceModel.id)
        )
        return list(result.scalars().all())
