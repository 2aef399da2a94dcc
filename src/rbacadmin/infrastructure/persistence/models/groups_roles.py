"""SQLAlchemy models for the group association tables.

Implement the many-to-many relationships between groups and roles, and
between groups and resources.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from rbacadmin.infrastructure.persistence.database import Base


class GroupsRolesModel(Base):
    """Junction table between groups and roles."""

    __tablename__ = "groups_roles"

    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
    )
    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<GroupsRoles(group_id={self.group_id}, role_id={self.role_id})>"


class GroupsResourcesModel(Base):
    """Junction table between groups and resources."""

    __tablename__ = "groups_resources"

    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
    )
    resource_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resources.id", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<GroupsResources(group_id={self.group_id}, resource_id={self.resource_id})>"
