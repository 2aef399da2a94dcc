"""Router for group management.

Handlers only translate HTTP to service calls and commit the session after
writes; service errors are turned into responses by the application's
exception handlers.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Path, Query, status

from rbacadmin.core.config import get_settings
from rbacadmin.infrastructure.api.dependencies import DbSession, GroupSvc
from rbacadmin.infrastructure.api.schemas import (
    GroupParam,
    GroupVO,
    GroupWrite,
    ObjectsVO,
    PageRequest,
    PageVO,
)
from rbacadmin.infrastructure.api.schemas.group_schemas import MAX_ID

GroupId = Annotated[int, Path(ge=1, le=MAX_ID, description="Group ID")]
GroupName = Annotated[str, Path(min_length=1, max_length=100, description="Group name")]

router = APIRouter(tags=["Groups"])


@router.post(
    "",
    response_model=GroupVO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new group",
)
async def create_group(
    group_data: GroupWrite,
    group_service: GroupSvc,
    session: DbSession,
) -> GroupVO:
    """Create a new group with the given roles and resources."""
    result = await group_service.create(group_data.to_param())
    await session.commit()
    return result


@router.get(
    "",
    response_model=ObjectsVO,
    summary="List all groups",
)
async def list_groups(group_service: GroupSvc) -> ObjectsVO:
    """List every group."""
    return await group_service.list_all()


@router.get(
    "/page",
    response_model=PageVO,
    summary="List one page of groups",
)
async def list_groups_page(
    group_service: GroupSvc,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    sort_by: Literal["id", "name", "created_at", "updated_at"] = "id",
    sort_order: Literal["asc", "desc"] = "asc",
) -> PageVO:
    """List one page of groups. Page size is capped by configuration."""
    settings = get_settings()
    size = min(page_size or settings.default_page_size, settings.max_page_size)
    page_request = PageRequest(
        page=page,
        page_size=size,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return await group_service.list_page(page_request)


@router.get(
    "/name/{name}",
    response_model=GroupVO,
    summary="Get a group by name",
)
async def get_group_by_name(name: GroupName, group_service: GroupSvc) -> GroupVO:
    """Get a group by its unique name."""
    return await group_service.get_by_name(GroupParam(name=name))


@router.get(
    "/{group_id}",
    response_model=GroupVO,
    summary="Get a group",
)
async def get_group(group_id: GroupId, group_service: GroupSvc) -> GroupVO:
    """Get a specific group by ID."""
    return await group_service.get_by_id(GroupParam(id=group_id))


@router.put(
    "/{group_id}",
    response_model=GroupVO,
    summary="Replace a group",
)
async def update_group(
    group_id: GroupId,
    group_data: GroupWrite,
    group_service: GroupSvc,
    session: DbSession,
) -> GroupVO:
    """Replace a group's name, description, roles and resources."""
    result = await group_service.update(group_data.to_param(group_id))
    await session.commit()
    return result


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a group",
)
async def delete_group(
    group_id: GroupId,
    group_service: GroupSvc,
    session: DbSession,
) -> None:
    """Delete a group."""
    await group_service.delete(GroupParam(id=group_id))
    await session.commit()
