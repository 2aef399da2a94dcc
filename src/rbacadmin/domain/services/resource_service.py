"""Resource lookup service."""

from collections.abc import Iterable

from rbacadmin.core.exceptions import ResourceNotFoundError
from rbacadmin.core.logging import get_logger
from rbacadmin.infrastructure.persistence.models import ResourceModel
from rbacadmin.infrastructure.persistence.repositories import ResourceRepository

logger = get_logger(__name__)


class ResourceService:
    """Service resolving resource ids."""

    def __init__(self, resource_repo: ResourceRepository) -> None:
        self.resource_repo = resource_repo

    async def get_resources_by_ids(self, resource_ids: Iterable[int]) -> list[ResourceModel]:
        """Resolve every id to a resource.

        Raises:
            ResourceNotFoundError: If any id matches no resource.
        """
        ids = set(resource_ids)
        resources = await self.resource_repo.get_by_ids(ids)
        missing = ids - {resource.id for resource in resources}
        if missing:
            logger.info("Resource lookup failed", missing_ids=sorted(missing))
            raise ResourceNotFoundError(missing)
        return resources
