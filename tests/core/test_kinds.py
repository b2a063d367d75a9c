# topmark:header:start
#
#   project      : KeySeq
#   file         : test_kinds.py
#   file_relpath : tests/core/test_kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for List/Map classification and the reindex policy in `keyseq.core.kinds`."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any

import pytest

from keyseq.core.errors import InvalidArgumentError, InvalidKeyError
from keyseq.core.kinds import (
    PairSource,
    SequenceKind,
    assemble,
    classify,
    ensure_key,
    is_different_kind,
    is_list,
    is_list_keys,
    is_map,
    is_nested,
    iter_pairs,
    materialize,
    next_index,
    resolve_reindex,
    view,
)
from keyseq.lazy import LazySequence
from tests.conftest import parametrize


@parametrize(
    "source, expected",
    [
        ([], SequenceKind.LIST),
        ([1, 2], SequenceKind.LIST),
        ((1, 2), SequenceKind.LIST),
        ({}, SequenceKind.LIST),
        ({0: "a", 1: "b"}, SequenceKind.LIST),
        ({1: "a", 0: "b"}, SequenceKind.MAP),
        ({0: "a", 2: "b"}, SequenceKind.MAP),
        ({"a": 1}, SequenceKind.MAP),
        ({"0": 1}, SequenceKind.MAP),
        (range(3), SequenceKind.LIST),
    ],
)
def test_classify(source: Any, expected: SequenceKind) -> None:
    """Kind is derived from the keys in iteration order."""
    assert classify(source) is expected


def test_empty_sequence_is_both_list_and_map() -> None:
    """Both predicates answer True on the empty sequence."""
    assert is_list([]) is True
    assert is_map([]) is True
    assert is_list({}) is True
    assert is_map({}) is True


def test_is_list_and_is_map_are_exclusive_when_non_empty() -> None:
    assert is_list([1]) and not is_map([1])
    assert is_map({"a": 1}) and not is_list({"a": 1})


def test_is_list_keys_rejects_bool_keys() -> None:
    """``True`` equals ``1`` but is not an integer key run."""
    assert is_list_keys([0, 1, 2])
    assert not is_list_keys([False, True])


def test_iter_pairs_walks_lists_mappings_and_pair_sources() -> None:
    assert list(iter_pairs(["a", "b"])) == [(0, "a"), (1, "b")]
    assert list(iter_pairs({"x": 1})) == [("x", 1)]
    lazy = LazySequence({"k": 2})
    assert isinstance(lazy, PairSource)
    assert list(iter_pairs(lazy)) == [("k", 2)]


@parametrize("value", ["abc", b"abc", bytearray(b"abc")])
def test_iter_pairs_rejects_text(value: Any) -> None:
    """Strings and bytes are values, not sequences."""
    with pytest.raises(InvalidArgumentError):
        iter_pairs(value)


def test_materialize_returns_an_independent_copy() -> None:
    source = {"a": 1}
    copy = materialize(source)
    copy["b"] = 2
    assert source == {"a": 1}
    assert materialize(x for x in "ab") == {0: "a", 1: "b"}


def test_view_returns_mappings_unchanged() -> None:
    source = OrderedDict(a=1)
    assert view(source) is source
    assert view([5]) == {0: 5}


@parametrize(
    "reindex, seq, expected",
    [
        (None, {0: 1, 1: 2}, True),
        (None, {"a": 1}, False),
        (None, {}, True),
        (True, {"a": 1}, True),
        (False, {0: 1}, False),
    ],
)
def test_resolve_reindex(reindex: bool | None, seq: dict[Any, Any], expected: bool) -> None:
    assert resolve_reindex(reindex, seq) is expected


def test_assemble_builds_list_or_dict() -> None:
    pairs = [("a", 1), ("b", 2)]
    assert assemble(pairs, True) == [1, 2]
    assert assemble(pairs, False) == {"a": 1, "b": 2}


def test_is_different_kind_ignores_empty_sequences() -> None:
    assert is_different_kind({0: 1}, {"a": 1})
    assert not is_different_kind({}, {"a": 1})
    assert not is_different_kind({"a": 1}, {"b": 2})


def test_is_nested() -> None:
    assert is_nested([1])
    assert is_nested((1,))
    assert is_nested({"a": 1})
    assert is_nested(LazySequence([1]))
    assert not is_nested("abc")
    assert not is_nested(3)


def test_ensure_key() -> None:
    assert ensure_key(3) == 3
    assert ensure_key("a") == "a"
    with pytest.raises(InvalidKeyError):
        ensure_key(True)
    with pytest.raises(InvalidKeyError):
        ensure_key(1.5)


def test_next_index_uses_largest_int_key() -> None:
    assert next_index({}) == 0
    assert next_index({"a": 1}) == 0
    assert next_index({3: "x", "a": 1, 1: "y"}) == 4
