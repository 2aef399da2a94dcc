"""Role lookup service.

Resolves role ids to roles for services that associate roles with other
entities.
"""

from collections.abc import Iterable

from rbacadmin.core.exceptions import RoleNotFoundError
from rbacadmin.core.logging import get_logger
from rbacadmin.infrastructure.persistence.models import RoleModel
from rbacadmin.infrastructure.persistence.repositories import RoleRepository

logger = get_logger(__name__)


class RoleService:
    """Service resolving role ids."""

    def __init__(self, role_repo: RoleRepository) -> None:
        """Initialize the role service.

        Args:
            role_repo: Role repository.
        """
        self.role_repo = role_repo

    async def get_roles_by_ids(self, role_ids: Iterable[int]) -> list[RoleModel]:
        """Resolve every id to a role.

        Args:
            role_ids: Role IDs. Duplicates are collapsed.

        Returns:
            List of role models, one per distinct id.

        Raises:
            RoleNotFoundError: If any id matches no role.
        """
        ids = set(role_ids)
        roles = await self.role_repo.get_by_ids(ids)
        missing = ids - {role.id for role in roles}
        if missing:
            logger.info("Role lookup failed", missing_ids=sorted(missing))
            raise RoleNotFoundError(missing)
        return roles
