"""Persistence repositories for database operations."""

from rbacadmin.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from rbacadmin.infrastructure.persistence.repositories.resource_repository import (
    ResourceRepository,
)
from rbacadmin.infrastructure.persistence.repositories.role_repository import (
    RoleRepository,
)

__all__ = [
    "GroupRepository",
    "ResourceRepository",
    "RoleRepository",
]
