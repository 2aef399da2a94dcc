"""Pydantic schemas for the result envelope and paging.

Every response object extends ``ResultVO`` so callers can tell success from
failure and read a human-readable message without inspecting the payload.
"""

import math
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ResultStatus(str, Enum):
    """Outcome of an operation."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class ResultVO(BaseModel):
    """Envelope shared by all response objects."""

    result: ResultStatus | None = Field(None, description="Outcome of the operation")
    error_code: str | None = Field(None, description="Error code when the operation failed")
    message: str | None = Field(None, description="Human-readable result message")


class ObjectsVO(ResultVO):
    """Bundled list of view objects."""

    items: list[Any] = Field(default_factory=list, description="View objects")


class PageVO(ResultVO):
    """One page of view objects with paging metadata."""

    items: list[Any] = Field(default_factory=list, description="View objects on this page")
    total: int = Field(..., ge=0, description="Total number of objects across all pages")
    page: int = Field(..., ge=1, description="Current page number (1-indexed)")
    page_size: int = Field(..., ge=1, description="Number of items per page")
    total_pages: int = Field(..., ge=0, description="Total number of pages")


class PageRequest(BaseModel):
    """Requested page, page size and ordering."""

    page: int = Field(1, ge=1, description="Page number (1-indexed)")
    page_size: int = Field(20, ge=1, le=1000, description="Number of items per page")
    sort_by: Literal["id", "name", "created_at", "updated_at"] = Field(
        "id", description="Column to sort by"
    )
    sort_order: Literal["asc", "desc"] = Field("asc", description="Sort order")

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.page_size

    def total_pages(self, total: int) -> int:
        """Number of pages needed to hold ``total`` items."""
        return math.ceil(total / self.page_size) if total else 0
