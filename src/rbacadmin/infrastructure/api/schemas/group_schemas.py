"""Pydantic schemas for Group operations."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rbacadmin.infrastructure.api.schemas.result_schemas import ResultVO

# Largest id a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_ID)]
IdsStr = Annotated[str, Field(pattern=r"^[0-9\s,]*$")]


class GroupFields(BaseModel):
    """Fields shared by group input schemas.

    ``resource_ids`` and ``role_ids`` accept either a comma-delimited string
    (``"1, 2,,3"``) or a list of integers.
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = Field(None, max_length=500, description="Group description")
    resource_ids: IdsStr | list[EntityId] | None = Field(
        None,
        alias="resourceIds",
        description="Resource IDs to grant, comma-delimited or as a list",
    )
    role_ids: IdsStr | list[EntityId] | None = Field(
        None,
        alias="roleIds",
        description="Role IDs to grant, comma-delimited or as a list",
    )

    @field_validator("resource_ids", "role_ids")
    @classmethod
    def validate_ids_str(cls, v: str | list[int] | None) -> str | list[int] | None:
        """Reject id strings with a segment that is not a valid id."""
        if not isinstance(v, str):
            return v
        for segment in v.split(","):
            segment = segment.strip()
            if not segment:
                continue
            if (
                not segment.isdecimal()
                or len(segment) > len(str(MAX_ID))
                or not 1 <= int(segment) <= MAX_ID
            ):
                raise ValueError(f"invalid id '{segment}' in comma-separated id list")
        return v


class GroupParam(GroupFields):
    """Input parameters for group operations.

    Which fields matter depends on the operation: lookups use ``id`` or
    ``name``, writes use every field.
    """

    id: EntityId | None = Field(None, description="Group ID")
    name: str | None = Field(None, min_length=1, max_length=100, description="Group name")


class GroupWrite(GroupFields):
    """Request body for creating or replacing a group."""

    name: str = Field(..., min_length=1, max_length=100, description="Group name")

    def to_param(self, group_id: int | None = None) -> GroupParam:
        """Build service parameters from this body."""
        return GroupParam(
            id=group_id,
            name=self.name,
            description=self.description,
            resource_ids=self.resource_ids,
            role_ids=self.role_ids,
        )


class RoleSummary(BaseModel):
    """Role granted through a group."""

    id: int
    name: str


class ResourceSummary(BaseModel):
    """Resource granted through a group."""

    id: int
    name: str
    path: str


class GroupVO(ResultVO):
    """View of a group returned to callers."""

    id: int = Field(..., description="Group ID")
    name: str = Field(..., description="Group name")
    description: str | None = Field(None, description="Group description")
    roles: list[RoleSummary] = Field(default_factory=list, description="Granted roles")
    resources: list[ResourceSummary] = Field(
        default_factory=list, description="Granted resources"
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None
