"""SQLAlchemy model for the groups table.

Groups bundle roles and resources so they can be granted together.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rbacadmin.infrastructure.persistence.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GroupModel(Base):
    """SQLAlchemy model for the groups table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Group name, unique across all groups.
        description: Optional description.
        created_at: Timestamp when the group was created.
        updated_at: Timestamp when the group was last updated.
        roles: Roles granted through this group.
        resources: Resources granted through this group.
    """

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Group name",
    )
    description: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Description of the group's purpose",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    # Relationships are loaded eagerly so async callers never lazy-load
    roles: Mapped[list["RoleModel"]] = relationship(  # noqa: F821
        "RoleModel",
        secondary="groups_roles",
        back_populates="groups",
        lazy="selectin",
    )
    resources: Mapped[list["ResourceModel"]] = relationship(  # noqa: F821
        "ResourceModel",
        secondary="groups_resources",
        back_populates="groups",
        lazy="selectin",
    )

    __table_args__ = (
        # Enforced by the database so concurrent creates cannot both succeed
        UniqueConstraint("name", name="uq_groups_name"),
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name})>"
