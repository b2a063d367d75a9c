# topmark:header:start
#
#   project      : KeySeq
#   file         : test_sorting.py
#   file_relpath : tests/ops/test_sorting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for stable sorting in `keyseq.ops.sorting`."""

from __future__ import annotations

import pytest

from keyseq.core.errors import InvalidArgumentError, TypeMismatchError
from keyseq.core.ordering import SortOrder, spaceship
from keyseq.ops import sorting
from tests.conftest import parametrize


@parametrize("order", [SortOrder.ASC, "asc", "ascending"])
def test_sort_ascending(order: SortOrder | str) -> None:
    assert sorting.sort([3, 1, 2], order) == [1, 2, 3]


def test_sort_desc_and_map_keys() -> None:
    assert sorting.sort_desc([3, 1, 2]) == [3, 2, 1]
    result = sorting.sort_asc({"a": 3, "b": 1, "c": 2})
    assert isinstance(result, dict)
    assert list(result.items()) == [("b", 1), ("c", 2), ("a", 3)]


def test_sort_is_stable_in_both_directions() -> None:
    pairs = [("x", 1), ("y", 0), ("z", 1), ("w", 0)]
    assert sorting.sort_asc(pairs, lambda v: v[1]) == [("y", 0), ("w", 0), ("x", 1), ("z", 1)]
    assert sorting.sort_desc(pairs, lambda v: v[1]) == [("x", 1), ("z", 1), ("y", 0), ("w", 0)]


def test_sort_by_selector_with_key() -> None:
    source = {"bb": 1, "a": 2, "ccc": 0}
    assert sorting.sort_asc(source, lambda v, k: len(k), reindex=True) == [2, 1, 0]


def test_sort_rejects_unknown_order() -> None:
    with pytest.raises(InvalidArgumentError, match="Unknown sort order"):
        sorting.sort([1], "sideways")


def test_sort_rejects_unorderable_values() -> None:
    with pytest.raises(TypeMismatchError, match="cannot be ordered"):
        sorting.sort_asc([1, "a"])


def test_sort_by_key_always_returns_a_dict() -> None:
    assert sorting.sort_by_key_asc({"b": 0, "a": 1}) == {"a": 1, "b": 0}
    assert list(sorting.sort_by_key_asc({"b": 0, "a": 1})) == ["a", "b"]
    assert list(sorting.sort_by_key_desc([5, 6, 7])) == [2, 1, 0]
    with pytest.raises(TypeMismatchError):
        sorting.sort_by_key({1: "a", "b": 2})


def test_sort_with_comparator() -> None:
    def by_length(a: str, b: str) -> int:
        return spaceship(len(a), len(b))

    assert sorting.sort_with(["ccc", "a", "bb", "d"], by_length) == ["a", "d", "bb", "ccc"]
    assert list(sorting.sort_with_key({"ccc": 1, "a": 2}, by_length)) == ["a", "ccc"]


def test_reverse() -> None:
    assert sorting.reverse([1, 2, 3]) == [3, 2, 1]
    reversed_map = sorting.reverse({"a": 1, "b": 2})
    assert isinstance(reversed_map, dict)
    assert list(reversed_map.items()) == [("b", 2), ("a", 1)]
    assert sorting.reverse([1, 2], reindex=False) == {1: 2, 0: 1}
