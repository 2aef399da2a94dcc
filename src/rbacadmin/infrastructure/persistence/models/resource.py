"""SQLAlchemy model for the resources table.

A resource is a protected path that groups can be granted access to.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rbacadmin.infrastructure.persistence.database import Base


class ResourceModel(Base):
    """SQLAlchemy model for the resources table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Unique resource name.
        path: URL pattern the resource protects.
        description: Optional description.
    """

    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
    )
    path: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="URL pattern, e.g. '/api/v1/groups/**'",
    )
    description: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    groups: Mapped[list["GroupModel"]] = relationship(  # noqa: F821
        "GroupModel",
        secondary="groups_resources",
        back_populates="resources",
    )

    def __repr__(self) -> str:
        return f"<Resource(id={self.id}, name={self.name}, path={self.path})>"
