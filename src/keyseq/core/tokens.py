# topmark:header:start
#
#   project      : KeySeq
#   file         : tokens.py
#   file_relpath : src/keyseq/core/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value identity tokens.

[`tokenize`][keyseq.core.tokens.tokenize] turns any value into a hashable token used
wherever "sameness" must be stricter than ``==`` (deduplication, grouping, set
membership, identity search):

- each primitive type gets its own namespace, so ``True``, ``1`` and ``1.0`` never
  collide although they compare equal;
- nested sequences (``list``, ``tuple``, ``Mapping``, lazy sequences) are tokenized
  element by element, keys included;
- every other object is identified by ``id()``: stable for the lifetime of the
  object, not across processes.

Tokens are plain tuples and are never meant to be inspected by callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from keyseq.core.errors import UnreachableError
from keyseq.core.kinds import PairSource, is_nested

Token = tuple[Any, ...]

_NULL: Token = ("n",)


def _tokenize_pairs(value: Any) -> Token:
    items: list[tuple[Any, Token]] = []
    pairs = value.items() if isinstance(value, (Mapping, PairSource)) else enumerate(value)
    for key, item in pairs:
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise UnreachableError(
                f"Nested sequence holds a key of type {type(key).__name__}.",
                {"value": value, "key": key},
            )
        items.append((key, tokenize(item)))
    return ("a", tuple(items))


def tokenize(value: Any) -> Token:
    """Return the identity token of ``value``.

    Args:
        value (Any): Any value, including nested sequences.

    Returns:
        Token: A hashable token. Two values share a token iff the engine treats them
            as identical.

    Raises:
        UnreachableError: If a nested mapping holds a key that is not ``int | str``.
    """
    if value is None:
        return _NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ("b", value)
    if isinstance(value, int):
        return ("i", int(value))
    if isinstance(value, float):
        # repr() keeps nan == nan and distinguishes 0.0 from -0.0
        return ("f", repr(float(value)))
    if isinstance(value, complex):
        return ("c", repr(complex(value)))
    if isinstance(value, str):
        return ("s", str(value))
    if isinstance(value, (bytes, bytearray)):
        return ("y", bytes(value))
    if is_nested(value):
        return _tokenize_pairs(value)
    return ("o", id(value))


def same(first: Any, second: Any) -> bool:
    """Return True if ``first`` and ``second`` share an identity token."""
    if first is second:
        return True
    return tokenize(first) == tokenize(second)
