# topmark:header:start
#
#   project      : KeySeq
#   file         : test_access.py
#   file_relpath : tests/ops/test_access.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for positional and keyed access in `keyseq.ops.access`."""

from __future__ import annotations

from typing import Any

import pytest

from keyseq.core.errors import (
    EmptyNotAllowedError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidKeyError,
    NoMatchFoundError,
)
from keyseq.lazy import LazySequence
from keyseq.ops import access
from tests.conftest import parametrize

MAP: dict[str, int] = {"a": 1, "b": 2, "c": 3}


@parametrize(
    "source, index, expected",
    [
        ([10, 20, 30], 0, 10),
        ([10, 20, 30], -1, 30),
        ([10, 20, 30], -3, 10),
        (MAP, 1, 2),
        (MAP, -1, 3),
        ((x for x in "xyz"), 2, "z"),
    ],
)
def test_at(source: Any, index: int, expected: Any) -> None:
    assert access.at(source, index) == expected


@parametrize("index", [3, -4])
def test_at_out_of_bounds(index: int) -> None:
    with pytest.raises(IndexOutOfBoundsError):
        access.at([1, 2, 3], index)
    assert access.at_or([1, 2, 3], index, "d") == "d"
    assert access.at_or_none([1, 2, 3], index) is None


def test_key_at() -> None:
    assert access.key_at(MAP, 0) == "a"
    assert access.key_at(MAP, -1) == "c"
    assert access.key_at_or_none(MAP, 5) is None
    with pytest.raises(IndexOutOfBoundsError):
        access.key_at([], 0)


@parametrize("index", [3, -4])
def test_out_of_bounds_reports_count_of_one_shot_source(index: int) -> None:
    with pytest.raises(IndexOutOfBoundsError, match=f"Size: 3 index: {index}.") as exc_info:
        access.at(iter([1, 2, 3]), index)
    assert exc_info.value.context["count"] == 3

    with pytest.raises(IndexOutOfBoundsError) as exc_info:
        access.key_at((letter for letter in "abc"), index)
    assert exc_info.value.context["count"] == 3


def test_get() -> None:
    assert access.get(MAP, "b") == 2
    assert access.get([5, 6], 1) == 6
    assert access.get_or(MAP, "z", 0) == 0
    assert access.get_or_none({"n": None}, "n") is None
    with pytest.raises(InvalidKeyError, match='Key: "z" does not exist.'):
        access.get(MAP, "z")


def test_first_and_last() -> None:
    assert access.first(MAP) == 1
    assert access.last(MAP) == 3
    assert access.first([1, 2, 3, 4], lambda v: v % 2 == 0) == 2
    assert access.last([1, 2, 3, 4], lambda v: v % 2 == 1) == 3
    assert access.first_key(MAP, lambda v, k: k != "a") == "b"
    assert access.last_key(MAP) == "c"
    assert access.first_key_or_none(MAP, lambda v: v > 5) is None
    assert access.last_key_or_none([], None) is None


def test_first_distinguishes_empty_from_no_match() -> None:
    with pytest.raises(EmptyNotAllowedError):
        access.first([])
    with pytest.raises(NoMatchFoundError):
        access.first([1], lambda v: v > 1)
    with pytest.raises(EmptyNotAllowedError):
        access.last({})
    with pytest.raises(NoMatchFoundError):
        access.last_key([1], lambda v: v > 1)


def test_or_variants_keep_stored_none_apart_from_absent() -> None:
    assert access.first_or([None], "default") is None
    assert access.first_or([], "default") == "default"
    assert access.last_or([], "default", lambda v: True) == "default"
    assert access.first_or_none([]) is None
    assert access.last_or_none([1, 2]) == 2


def test_index_lookups() -> None:
    source = {"a": 1, "b": True, "c": 1}
    assert access.first_index(source, 1) == 0
    assert access.first_index(source, True) == 1
    assert access.first_index(source, lambda v, k: k == "c") == 2
    assert access.first_index_or_none(source, "x") is None
    assert access.last_index(source, 1) == 2
    assert access.last_index(source) == 2
    assert access.last_index_or_none([]) is None
    with pytest.raises(NoMatchFoundError):
        access.first_index(source, 2)
    with pytest.raises(EmptyNotAllowedError):
        access.last_index([])


def test_keys_and_values() -> None:
    assert access.keys(MAP) == ["a", "b", "c"]
    assert access.keys(MAP, lambda v: v > 1) == ["b", "c"]
    assert access.values(MAP) == [1, 2, 3]
    assert access.values(LazySequence(MAP).take_first(1)) == [1]


def test_single() -> None:
    assert access.single([7]) == 7
    assert access.single([1, 2, 3], lambda v: v == 2) == 2
    with pytest.raises(InvalidArgumentError, match="2 given"):
        access.single([1, 2])
    with pytest.raises(NoMatchFoundError):
        access.single([1], lambda v: v == 5)
    with pytest.raises(EmptyNotAllowedError):
        access.single([])


def test_coalesce() -> None:
    assert access.coalesce([None, 0, 1]) == 0
    assert access.coalesce_or_none([None, None]) is None
    with pytest.raises(NoMatchFoundError):
        access.coalesce([None])


def test_count_and_emptiness() -> None:
    assert access.count(MAP) == 3
    assert access.count(MAP, lambda v: v >= 2) == 2
    assert access.count(iter([1, 2])) == 2
    assert access.is_empty([])
    assert access.is_empty({})
    assert access.is_not_empty(iter([0]))
