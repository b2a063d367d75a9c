# topmark:header:start
#
#   project      : KeySeq
#   file         : test_mutation.py
#   file_relpath : tests/ops/test_mutation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for in-place mutation in `keyseq.ops.mutation`."""

from __future__ import annotations

from typing import Any

import pytest

from keyseq.core.errors import (
    DuplicateKeyError,
    EmptyNotAllowedError,
    InvalidArgumentError,
    InvalidKeyError,
    TypeMismatchError,
)
from keyseq.ops import mutation
from tests.conftest import parametrize


def test_targets_keep_their_identity() -> None:
    target = [1, 2, 3]
    alias = target
    mutation.pull(target, 1)
    mutation.push(target, 4)
    assert alias is target
    assert target == [1, 3, 4]


def test_only_lists_and_dicts_are_targets() -> None:
    with pytest.raises(InvalidArgumentError):
        mutation.clear((1, 2))  # type: ignore[arg-type]


def test_clear_and_reindex() -> None:
    target: dict[Any, Any] = {"a": 1, "b": 2}
    mutation.reindex(target)
    assert target == {0: 1, 1: 2}
    mutation.clear(target)
    assert target == {}


@parametrize(
    "index, expected",
    [
        (0, [9, 1, 2, 3]),
        (1, [1, 9, 2, 3]),
        (3, [1, 2, 3, 9]),
        (-1, [1, 2, 3, 9]),
        (-2, [1, 2, 9, 3]),
        (-3, [1, 9, 2, 3]),
        (-4, [9, 1, 2, 3]),
        (-10, [9, 1, 2, 3]),
        (10, [1, 2, 3, 9]),
    ],
)
def test_insert_at_list(index: int, expected: list[int]) -> None:
    target = [1, 2, 3]
    mutation.insert_at(target, index, [9])
    assert target == expected


def test_insert_at_map() -> None:
    target: dict[str, int] = {"a": 1, "c": 3}
    mutation.insert_at(target, 1, {"b": 2})
    assert list(target.items()) == [("a", 1), ("b", 2), ("c", 3)]


def test_insert_at_map_negative_index() -> None:
    target: dict[str, int] = {"a": 1, "b": 2, "c": 3}
    mutation.insert_at(target, -2, {"x": 9})
    assert list(target.items()) == [("a", 1), ("b", 2), ("x", 9), ("c", 3)]

    mutation.insert_at(target, -1, {"y": 0})
    assert list(target)[-1] == "y"


def test_insert_at_list_kind_dict_negative_index() -> None:
    target: dict[int, str] = {0: "a", 1: "b"}
    mutation.insert_at(target, -2, ["z"])
    assert target == {0: "a", 1: "z", 2: "b"}


def test_insert_at_map_key_clash() -> None:
    target: dict[str, int] = {"a": 1, "b": 2}
    with pytest.raises(DuplicateKeyError, match="Tried to overwrite existing key: a."):
        mutation.insert_at(target, 2, {"a": 0})
    assert target == {"a": 1, "b": 2}

    mutation.insert_at(target, 2, {"a": 0}, overwrite=True)
    assert list(target.items()) == [("b", 2), ("a", 0)]


def test_insert_at_rejects_mixed_kinds() -> None:
    with pytest.raises(TypeMismatchError, match=r"Values' kind \(map\) does not match"):
        mutation.insert_at([1], 0, {"a": 1})


def test_list_target_cannot_keep_keys() -> None:
    with pytest.raises(TypeMismatchError, match="cannot preserve keys"):
        mutation.pull([1, 2], 0, reindex=False)


def test_push() -> None:
    target = [1]
    mutation.push(target, 2, 3)
    assert target == [1, 2, 3]
    as_dict: dict[Any, Any] = {0: "a"}
    mutation.push(as_dict, "b")
    assert as_dict == {0: "a", 1: "b"}
    with pytest.raises(TypeMismatchError, match="Target must be a list, map given."):
        mutation.push({"a": 1}, 2)


def test_pop() -> None:
    target = [1, 2]
    assert mutation.pop(target) == 2
    assert mutation.pop_or_none(target) == 1
    assert mutation.pop_or_none(target) is None
    with pytest.raises(EmptyNotAllowedError):
        mutation.pop(target)
    assert mutation.pop({"a": 1, "b": 2}) == 2


def test_pop_many() -> None:
    target = [1, 2, 3]
    assert mutation.pop_many(target, 2) == [2, 3]
    assert target == [1]
    as_map: dict[str, int] = {"a": 1, "b": 2}
    assert mutation.pop_many(as_map, 5) == {"a": 1, "b": 2}
    assert as_map == {}
    with pytest.raises(InvalidArgumentError):
        mutation.pop_many([1], 0)


def test_shift() -> None:
    target = [1, 2, 3]
    assert mutation.shift(target) == 1
    assert target == [2, 3]
    assert mutation.shift_or_none([]) is None
    with pytest.raises(EmptyNotAllowedError):
        mutation.shift({})


def test_shift_renumbers_list_kind_dicts() -> None:
    target: dict[Any, Any] = {0: "a", 1: "b", 2: "c"}
    assert mutation.shift(target) == "a"
    assert target == {0: "b", 1: "c"}


def test_shift_many() -> None:
    target: dict[str, int] = {"a": 1, "b": 2, "c": 3}
    assert mutation.shift_many(target, 2) == {"a": 1, "b": 2}
    assert target == {"c": 3}
    as_list = [1, 2, 3]
    assert mutation.shift_many(as_list, 2) == [1, 2]
    assert as_list == [3]
    with pytest.raises(InvalidArgumentError):
        mutation.shift_many([1], 0)


def test_pull() -> None:
    target: dict[str, Any] = {"a": 1, "b": None}
    assert mutation.pull(target, "b") is None
    assert target == {"a": 1}
    with pytest.raises(InvalidKeyError, match='Tried to pull undefined key "z".'):
        mutation.pull(target, "z")
    assert mutation.pull_or(target, "z", 0) == 0
    assert mutation.pull_or_none(target, "a") == 1
    assert target == {}


def test_pull_keeps_gaps_on_request() -> None:
    target: dict[Any, Any] = {0: "a", 1: "b", 2: "c"}
    mutation.pull(target, 1, reindex=False)
    assert target == {0: "a", 2: "c"}


def test_pull_many() -> None:
    target = ["a", "b", "c", "d"]
    assert mutation.pull_many(target, [3, 1, 9]) == {3: "d", 1: "b"}
    assert target == ["a", "c"]


def test_set() -> None:
    as_map: dict[Any, Any] = {"a": 1}
    mutation.set(as_map, "b", 2)
    assert as_map == {"a": 1, "b": 2}
    as_list = [1, 2]
    mutation.set(as_list, 0, 9)
    mutation.set(as_list, 2, 3)
    assert as_list == [9, 2, 3]
    with pytest.raises(TypeMismatchError):
        mutation.set(as_list, 7, 0)
    with pytest.raises(TypeMismatchError):
        mutation.set(as_list, "a", 0)
    with pytest.raises(InvalidKeyError):
        mutation.set(as_map, 1.5, 0)  # type: ignore[arg-type]


def test_set_if_exists_and_not_exists() -> None:
    target: dict[str, int] = {"a": 1}
    assert mutation.set_if_exists(target, "a", 2)
    assert not mutation.set_if_exists(target, "b", 2)
    assert mutation.set_if_not_exists(target, "b", 3)
    assert not mutation.set_if_not_exists(target, "a", 9)
    assert target == {"a": 2, "b": 3}


def test_remove() -> None:
    target = [1, True, 1, 2, 1]
    assert mutation.remove(target, 1) == [0, 2, 4]
    assert target == [True, 2]

    as_map: dict[str, Any] = {"a": None, "b": 0, "c": None}
    assert mutation.remove(as_map, None, 1) == ["a"]
    assert as_map == {"b": 0, "c": None}
    assert mutation.remove(as_map, "missing") == []
    with pytest.raises(InvalidArgumentError):
        mutation.remove(as_map, None, -1)
