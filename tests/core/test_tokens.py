# topmark:header:start
#
#   project      : KeySeq
#   file         : test_tokens.py
#   file_relpath : tests/core/test_tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for identity tokens in `keyseq.core.tokens`."""

from __future__ import annotations

import math
from typing import Any

import pytest

from keyseq.core.errors import UnreachableError
from keyseq.core.tokens import same, tokenize
from tests.conftest import parametrize


@parametrize(
    "first, second",
    [
        (1, True),
        (0, False),
        (1, 1.0),
        (1, "1"),
        (None, 0),
        (None, ""),
        (0.0, -0.0),
        ([1, 2], [2, 1]),
        ({"a": 1}, {"b": 1}),
        ([1], {0: 1, "x": 2}),
    ],
)
def test_values_that_compare_equal_may_still_differ(first: Any, second: Any) -> None:
    """Each primitive type has its own namespace."""
    assert tokenize(first) != tokenize(second)
    assert not same(first, second)


@parametrize(
    "first, second",
    [
        (1, 1),
        ("a", "a"),
        (None, None),
        (math.nan, math.nan),
        (b"x", bytearray(b"x")),
        ([1, [2, 3]], [1, [2, 3]]),
        ([1, 2], (1, 2)),
        ({"a": [1]}, {"a": [1]}),
    ],
)
def test_structurally_identical_values_share_a_token(first: Any, second: Any) -> None:
    assert tokenize(first) == tokenize(second)
    assert same(first, second)


def test_objects_are_identified_by_identity() -> None:
    class Box:
        pass

    box = Box()
    assert same(box, box)
    assert not same(box, Box())


def test_tokens_are_hashable() -> None:
    tokens = {tokenize([1, {"a": None}]), tokenize(2.5), tokenize("s")}
    assert len(tokens) == 3


def test_nested_mapping_with_invalid_key_is_a_bug() -> None:
    with pytest.raises(UnreachableError):
        tokenize({1.5: "x"})
