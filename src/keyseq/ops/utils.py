# topmark:header:start
#
#   project      : KeySeq
#   file         : utils.py
#   file_relpath : src/keyseq/ops/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal helpers shared by the eager operation modules.

Lookups return the found ``(key, value)`` pair, or None when nothing matched, so a
stored ``None`` value is never mistaken for "absent".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from keyseq.core.callables import adapt
from keyseq.core.errors import (
    EmptyNotAllowedError,
    InvalidArgumentError,
    KeySeqError,
    NoMatchFoundError,
    TypeMismatchError,
)
from keyseq.core.kinds import is_list_keys
from keyseq.core.tokens import same

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from keyseq.core.kinds import Key

Pair = tuple["Key", Any]
Condition = Callable[[Any, "Key"], Any]


def condition_or_all(condition: Callable[..., Any] | None) -> Condition:
    """Return an adapted ``condition``, or a condition matching everything."""
    if condition is None:
        return lambda value, key: True
    return adapt(condition)


def condition_or_same(condition: Any) -> Condition:
    """Return an adapted callable, or an identity match against a plain value."""
    if callable(condition):
        return adapt(condition)
    return lambda value, key: same(value, condition)


def find_first(pairs: Iterable[Pair], condition: Condition) -> Pair | None:
    for key, value in pairs:
        if condition(value, key):
            return key, value
    return None


def find_last(seq: Mapping[Key, Any], condition: Condition) -> tuple[int, Pair] | None:
    """Return ``(position, (key, value))`` of the last match, scanning from the end."""
    items = list(seq.items())
    for position in range(len(items) - 1, -1, -1):
        key, value = items[position]
        if condition(value, key):
            return position, (key, value)
    return None


def missing_error(
    condition: Callable[..., Any] | None, context: dict[str, Any]
) -> KeySeqError:
    """Error for an empty lookup: NoMatchFound with a condition, EmptyNotAllowed without."""
    if condition is not None:
        return NoMatchFoundError("Failed to find matching condition.", context)
    return EmptyNotAllowedError("Sequence must contain at least one element.", context)


def empty_error(context: dict[str, Any]) -> EmptyNotAllowedError:
    return EmptyNotAllowedError("Sequence must contain at least one element.", context)


def ensure_list(seq: Mapping[Key, Any], name: str = "sequence") -> None:
    """Raise ``TypeMismatchError`` unless ``seq`` is List kind."""
    if not is_list_keys(seq.keys()):
        raise TypeMismatchError(f"Expected {name} to be a list, map given.", {name: seq})


def ensure_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise InvalidArgumentError(f"Expected: {name} >= 0. Got: {value}.", {name: value})


def ensure_positive(value: int, name: str) -> None:
    if value < 1:
        raise InvalidArgumentError(f"Expected: {name} >= 1. Got: {value}.", {name: value})


def resolve_index(index: int, count: int) -> int:
    """Resolve a negative positional index against ``count``."""
    return count + index if index < 0 else index
