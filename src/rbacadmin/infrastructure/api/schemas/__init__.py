"""API Schemas for request/response validation."""

from rbacadmin.infrastructure.api.schemas.group_schemas import (
    GroupParam,
    GroupVO,
    GroupWrite,
    ResourceSummary,
    RoleSummary,
)
from rbacadmin.infrastructure.api.schemas.result_schemas import (
    ObjectsVO,
    PageRequest,
    PageVO,
    ResultStatus,
    ResultVO,
)

__all__ = [
    "GroupParam",
    "GroupVO",
    "GroupWrite",
    "ObjectsVO",
    "PageRequest",
    "PageVO",
    "ResourceSummary",
    "ResultStatus",
    "ResultVO",
    "RoleSummary",
]
