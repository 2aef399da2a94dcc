"""FastAPI dependencies wiring services to the request-scoped session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rbacadmin.domain.services import (
    GroupService,
    ResourceService,
    ResultHelper,
    RoleService,
    Transformer,
)
from rbacadmin.infrastructure.persistence.database import get_db_session
from rbacadmin.infrastructure.persistence.repositories import (
    GroupRepository,
    ResourceRepository,
    RoleRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_group_service(session: DbSession) -> GroupService:
    """Build a group service bound to the request's session."""
    return GroupService(
        group_repo=GroupRepository(session),
        role_service=RoleService(RoleRepository(session)),
        resource_service=ResourceService(ResourceRepository(session)),
        result_helper=ResultHelper(),
        transformer=Transformer(),
    )


GroupSvc = Annotated[GroupService, Depends(get_group_service)]
