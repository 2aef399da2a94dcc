"""Mapping helpers shared by the admin services.

Parses the legacy comma-delimited id lists and wraps lists of view objects
into the bundled list and page envelopes.
"""

from collections.abc import Hashable, Iterable
from typing import Any, TypeVar

from rbacadmin.infrastructure.api.schemas.result_schemas import (
    ObjectsVO,
    PageRequest,
    PageVO,
)

T = TypeVar("T", bound=Hashable)


class Transformer:
    """Stateless conversions between input, stored and output shapes."""

    @staticmethod
    def ids_str_to_list(ids: str | Iterable[int] | None) -> list[int]:
        """Parse an id list.

        Strings are split on commas; each segment is trimmed and blank
        segments are ignored. Order and duplicates are preserved.

        Args:
            ids: Comma-delimited id string, an iterable of ints, or None.

        Returns:
            List of integer ids.

        Raises:
            ValueError: If a segment is not an integer.
        """
        if ids is None:
            return []
        if not isinstance(ids, str):
            return [int(i) for i in ids]

        result = []
        for segment in ids.split(","):
            segment = segment.strip()
            if not segment:
                continue
            try:
                result.append(int(segment))
            except ValueError:
                raise ValueError(f"Invalid id '{segment}' in id list") from None
        return result

    @staticmethod
    def iterable_to_unique_list(items: Iterable[T]) -> list[T]:
        """Drop repeated items while keeping first-seen order."""
        return list(dict.fromkeys(items))

    @staticmethod
    def vo_list_to_objects_vo(items: list[Any], message: str | None = None) -> ObjectsVO:
        """Bundle view objects into an ``ObjectsVO``."""
        return ObjectsVO(items=items, message=message)

    @staticmethod
    def po_page_to_vo(
        items: list[Any],
        page_request: PageRequest,
        total: int,
        message: str | None = None,
    ) -> PageVO:
        """Bundle one page of view objects with its paging metadata.

        Args:
            items: View objects on the page.
            page_request: The request the page was produced for.
            total: Total number of objects across all pages.
            message: Optional result message.

        Returns:
            PageVO: The bundled page.
        """
        return PageVO(
            items=items,
            total=total,
            page=page_request.page,
            page_size=page_request.page_size,
            total_pages=page_request.total_pages(total),
            message=message,
        )
