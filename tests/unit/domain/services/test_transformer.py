"""Unit tests for Transformer."""

import pytest

from rbacadmin.domain.services.transformer import Transformer
from rbacadmin.infrastructure.api.schemas import PageRequest


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, []),
        ("", []),
        ("   ", []),
        ("1", [1]),
        (" 1, 2 ,3 ", [1, 2, 3]),
        ("1,,2,", [1, 2]),
        (",, ,", []),
        ("3,1,3", [3, 1, 3]),
        ([5, 4], [5, 4]),
    ],
)
def test_ids_str_to_list(raw, expected):
    assert Transformer.ids_str_to_list(raw) == expected


def test_ids_str_to_list_rejects_non_integers():
    with pytest.raises(ValueError, match="Invalid id 'x'"):
        Transformer.ids_str_to_list("1,x")


def test_iterable_to_unique_list_keeps_first_seen_order():
    assert Transformer.iterable_to_unique_list([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_vo_list_to_objects_vo():
    result = Transformer.vo_list_to_objects_vo(["a", "b"], "done")

    assert result.items == ["a", "b"]
    assert result.message == "done"
    assert result.result is None


def test_po_page_to_vo():
    page_request = PageRequest(page=3, page_size=10)

    result = Transformer.po_page_to_vo(["x"], page_request, 21, "done")

    assert result.items == ["x"]
    assert result.total == 21
    assert result.page == 3
    assert result.page_size == 10
    assert result.total_pages == 3
    assert result.message == "done"
