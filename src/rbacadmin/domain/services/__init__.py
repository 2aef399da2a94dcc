"""Domain services for RBAC Admin.

Services contain the business logic of the admin module and the helpers
that map between parameters, stored models and views.
"""

from rbacadmin.domain.services.group_service import GroupService
from rbacadmin.domain.services.resource_service import ResourceService
from rbacadmin.domain.services.result_helper import ResultHelper
from rbacadmin.domain.services.role_service import RoleService
from rbacadmin.domain.services.transformer import Transformer

__all__ = [
    "GroupService",
    "ResourceService",
    "ResultHelper",
    "RoleService",
    "Transformer",
]
