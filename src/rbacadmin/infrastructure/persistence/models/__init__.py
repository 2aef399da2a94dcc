"""SQLAlchemy models for the RBAC Admin tables.

All models inherit from the Base class defined in database.py.
"""

from rbacadmin.infrastructure.persistence.models.group import GroupModel
from rbacadmin.infrastructure.persistence.models.groups_roles import (
    GroupsResourcesModel,
    GroupsRolesModel,
)
from rbacadmin.infrastructure.persistence.models.resource import ResourceModel
from rbacadmin.infrastructure.persistence.models.role import RoleModel

__all__ = [
    "GroupModel",
    "GroupsResourcesModel",
    "GroupsRolesModel",
    "ResourceModel",
    "RoleModel",
]
