"""Integration tests for GroupService against a real database."""

import pytest
from sqlalchemy import func, select

from rbacadmin.core.exceptions import (
    EmptyCollectionError,
    NameTakenError,
    NotFoundByIdError,
    NotFoundByNameError,
    ResourceNotFoundError,
    RoleNotFoundError,
)
from rbacadmin.domain.services import (
    GroupService,
    ResourceService,
    ResultHelper,
    RoleService,
    Transformer,
)
from rbacadmin.infrastructure.api.schemas import GroupParam, PageRequest
from rbacadmin.infrastructure.persistence.models import (
    GroupModel,
    GroupsResourcesModel,
    GroupsRolesModel,
)
from rbacadmin.infrastructure.persistence.repositories import (
    GroupRepository,
    ResourceRepository,
    RoleRepository,
)

ADMIN_ROLE_ID = 1
USER_ROLE_ID = 2
GROUPS_RESOURCE_ID = 1
ROLES_RESOURCE_ID = 2


@pytest.fixture
def group_service(db_session):
    return GroupService(
        group_repo=GroupRepository(db_session),
        role_service=RoleService(RoleRepository(db_session)),
        resource_service=ResourceService(ResourceRepository(db_session)),
        result_helper=ResultHelper(),
        transformer=Transformer(),
    )


async def count_rows(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_create_then_lookup_by_id_and_name(group_service):
    """getById and getByName describe the same created group."""
    created = await group_service.create(GroupParam(name="X", description="x group"))

    by_id = await group_service.get_by_id(GroupParam(id=created.id))
    by_name = await group_service.get_by_name(GroupParam(name="X"))

    assert by_id.id == by_name.id == created.id
    assert by_id.name == by_name.name == "X"
    assert by_id.description == "x group"
    assert by_id.created_at is not None


@pytest.mark.asyncio
async def test_create_resolves_associations(group_service, db_session):
    created = await group_service.create(
        GroupParam(
            name="Admins",
            resource_ids=f"{ROLES_RESOURCE_ID}, {GROUPS_RESOURCE_ID}",
            role_ids=f"{ADMIN_ROLE_ID},{ADMIN_ROLE_ID},",
        )
    )

    assert [r.id for r in created.resources] == [GROUPS_RESOURCE_ID, ROLES_RESOURCE_ID]
    assert [r.id for r in created.roles] == [ADMIN_ROLE_ID]
    assert created.roles[0].name == "admin"
    assert await count_rows(db_session, GroupsRolesModel) == 1
    assert await count_rows(db_session, GroupsResourcesModel) == 2


@pytest.mark.asyncio
async def test_create_duplicate_name(group_service):
    await group_service.create(GroupParam(name="Admins"))

    with pytest.raises(NameTakenError):
        await group_service.create(
            GroupParam(name="Admins", description="other", role_ids=str(USER_ROLE_ID))
        )


@pytest.mark.asyncio
async def test_create_with_unknown_ids_persists_nothing(group_service, db_session):
    with pytest.raises(RoleNotFoundError) as exc:
        await group_service.create(GroupParam(name="Admins", role_ids="1,99"))
    assert exc.value.missing_ids == [99]

    with pytest.raises(ResourceNotFoundError):
        await group_service.create(GroupParam(name="Admins", resource_ids="42"))

    assert await count_rows(db_session, GroupModel) == 0


@pytest.mark.asyncio
async def test_list_all(group_service):
    with pytest.raises(EmptyCollectionError):
        await group_service.list_all()

    await group_service.create(GroupParam(name="A"))
    await group_service.create(GroupParam(name="B"))

    result = await group_service.list_all()

    assert [item.name for item in result.items] == ["A", "B"]


@pytest.mark.asyncio
async def test_list_page(group_service):
    with pytest.raises(EmptyCollectionError):
        await group_service.list_page(PageRequest())

    for name in ["c", "a", "e", "b", "d"]:
        await group_service.create(GroupParam(name=name))

    page = await group_service.list_page(
        PageRequest(page=2, page_size=2, sort_by="name", sort_order="asc")
    )
    assert [item.name for item in page.items] == ["c", "d"]
    assert page.total == 5
    assert page.total_pages == 3

    past_end = await group_service.list_page(PageRequest(page=4, page_size=2))
    assert past_end.items == []
    assert past_end.total == 5


@pytest.mark.asyncio
async def test_get_by_ids_skips_unknown(group_service):
    a = await group_service.create(GroupParam(name="A"))
    b = await group_service.create(GroupParam(name="B"))

    groups = await group_service.get_by_ids([a.id, 999, b.id, 1000])

    assert {group.id for group in groups} == {a.id, b.id}


@pytest.mark.asyncio
async def test_update_replaces_everything(group_service, db_session):
    created = await group_service.create(
        GroupParam(
            name="Ops",
            description="old",
            resource_ids=str(GROUPS_RESOURCE_ID),
            role_ids=str(ADMIN_ROLE_ID),
        )
    )

    updated = await group_service.update(
        GroupParam(
            id=created.id,
            name="Operations",
            resource_ids="",
            role_ids=[USER_ROLE_ID],
        )
    )

    assert updated.id == created.id
    assert updated.name == "Operations"
    assert updated.description is None
    assert updated.resources == []
    assert [role.id for role in updated.roles] == [USER_ROLE_ID]
    assert await count_rows(db_session, GroupModel) == 1
    assert await count_rows(db_session, GroupsResourcesModel) == 0

    with pytest.raises(NotFoundByNameError):
        await group_service.get_by_name(GroupParam(name="Ops"))


@pytest.mark.asyncio
async def test_update_missing_group(group_service, db_session):
    with pytest.raises(NotFoundByIdError):
        await group_service.update(GroupParam(id=123, name="Ghost"))

    assert await count_rows(db_session, GroupModel) == 0


@pytest.mark.asyncio
async def test_update_rename_onto_other_group(group_service):
    await group_service.create(GroupParam(name="A"))
    b = await group_service.create(GroupParam(name="B"))

    with pytest.raises(NameTakenError):
        await group_service.update(GroupParam(id=b.id, name="A"))


@pytest.mark.asyncio
async def test_delete(group_service, db_session):
    """Create, find, delete, then the name no longer resolves."""
    created = await group_service.create(
        GroupParam(name="Admins", resource_ids="", role_ids=str(ADMIN_ROLE_ID))
    )
    found = await group_service.get_by_name(GroupParam(name="Admins"))
    assert found.id == created.id

    await group_service.delete(GroupParam(id=created.id))

    with pytest.raises(NotFoundByNameError):
        await group_service.get_by_name(GroupParam(name="Admins"))
    assert await count_rows(db_session, GroupsRolesModel) == 0


@pytest.mark.asyncio
async def test_delete_missing_group_leaves_store_unchanged(group_service, db_session):
    await group_service.create(GroupParam(name="Keep"))

    with pytest.raises(NotFoundByIdError):
        await group_service.delete(GroupParam(id=999))

    assert await count_rows(db_session, GroupModel) == 1
