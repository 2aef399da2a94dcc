"""Unit tests for RoleService and ResourceService."""

from unittest.mock import AsyncMock

import pytest

from rbacadmin.core.exceptions import ResourceNotFoundError, RoleNotFoundError
from rbacadmin.domain.services.resource_service import ResourceService
from rbacadmin.domain.services.role_service import RoleService
from rbacadmin.infrastructure.persistence.models import ResourceModel, RoleModel
from rbacadmin.infrastructure.persistence.repositories import (
    ResourceRepository,
    RoleRepository,
)


@pytest.fixture
def role_repo():
    return AsyncMock(spec=RoleRepository)


@pytest.fixture
def resource_repo():
    return AsyncMock(spec=ResourceRepository)


@pytest.mark.asyncio
async def test_get_roles_by_ids(role_repo):
    """Duplicate ids are collapsed before the lookup."""
    roles = [RoleModel(id=1, name="admin"), RoleModel(id=2, name="user")]
    role_repo.get_by_ids.return_value = roles

    result = await RoleService(role_repo).get_roles_by_ids([2, 1, 2])

    assert result == roles
    role_repo.get_by_ids.assert_awaited_once_with({1, 2})


@pytest.mark.asyncio
async def test_get_roles_by_ids_missing(role_repo):
    """Any unresolved id fails the whole lookup."""
    role_repo.get_by_ids.return_value = [RoleModel(id=1, name="admin")]

    with pytest.raises(RoleNotFoundError) as exc:
        await RoleService(role_repo).get_roles_by_ids([1, 8, 9])

    assert exc.value.missing_ids == [8, 9]
    assert exc.value.code == "ROL0012"
    assert "8, 9" in exc.value.message


@pytest.mark.asyncio
async def test_get_resources_by_ids(resource_repo):
    resources = [ResourceModel(id=4, name="groups", path="/groups/**")]
    resource_repo.get_by_ids.return_value = resources

    result = await ResourceService(resource_repo).get_resources_by_ids([4])

    assert result == resources


@pytest.mark.asyncio
async def test_get_resources_by_ids_missing(resource_repo):
    resource_repo.get_by_ids.return_value = []

    with pytest.raises(ResourceNotFoundError) as exc:
        await ResourceService(resource_repo).get_resources_by_ids([3])

    assert exc.value.missing_ids == [3]
    assert exc.value.code == "RSC0012"
