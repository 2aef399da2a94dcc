"""Unit tests for GroupRepository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from rbacadmin.infrastructure.persistence.models import GroupModel
from rbacadmin.infrastructure.persistence.repositories.group_repository import GroupRepository


@pytest.fixture
def mock_session():
    """Create a mock database session."""
    session = AsyncMock(spec=AsyncSession)
    return session


@pytest.fixture
def group_repo(mock_session):
    """Create a GroupRepository instance."""
    return GroupRepository(mock_session)


@pytest.mark.asyncio
async def test_create_group(group_repo, mock_session):
    """Test creating a group."""
    group = GroupModel(name="Admins")

    result = await group_repo.create(group)

    assert result == group
    mock_session.add.assert_called_once_with(group)
    mock_session.flush.assert_called_once()


@pytest.mark.asyncio
async def test_get_by_id(group_repo, mock_session):
    """Test getting a group by ID."""
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = GroupModel(id=1, name="Admins")
    mock_session.execute.return_value = mock_result

    result = await group_repo.get_by_id(1)

    assert result is not None
    assert result.id == 1
    mock_session.execute.assert_called_once()


@pytest.mark.asyncio
async def test_get_by_ids_empty_skips_query(group_repo, mock_session):
    """Test that an empty id collection does not hit the database."""
    result = await group_repo.get_by_ids([])

    assert result == []
    mock_session.execute.assert_not_called()


@pytest.mark.asyncio
async def test_delete(group_repo, mock_session):
    group = GroupModel(id=1, name="Admins")

    await group_repo.delete(group)

    mock_session.delete.assert_called_once_with(group)
    mock_session.flush.assert_called_once()
