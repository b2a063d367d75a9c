# topmark:header:start
#
#   project      : KeySeq
#   file         : access.py
#   file_relpath : src/keyseq/ops/access.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Positional and keyed element access.

Naming convention shared by every lookup family:

- ``x(...)`` raises when nothing is found;
- ``x_or(..., default)`` returns ``default`` instead;
- ``x_or_none(...)`` returns None instead.

Negative positions count from the end and are resolved against the materialized
count of the source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidKeyError,
    NoMatchFoundError,
)
from keyseq.core.kinds import iter_pairs, view
from keyseq.ops.utils import (
    condition_or_all,
    condition_or_same,
    find_first,
    find_last,
    missing_error,
    resolve_index,
)

if TYPE_CHECKING:
    from keyseq.core.kinds import Key, Source
    from keyseq.ops.utils import Pair

V = TypeVar("V")
D = TypeVar("D")


def _locate(source: Source[V], index: int) -> tuple[Pair | None, int]:
    """Find the pair at ``index``; on a miss, also report the source's element count."""
    if isinstance(source, list):
        count = len(source)
        position = resolve_index(index, count)
        return ((position, source[position]) if 0 <= position < count else None), count
    if index < 0:
        seq = view(source)
        position = resolve_index(index, len(seq))
        if position < 0:
            return None, len(seq)
        pairs = iter(seq.items())
    else:
        position = index
        pairs = iter_pairs(source)
    seen = 0
    for seen, pair in enumerate(pairs, start=1):
        if seen - 1 == position:
            return pair, seen
    return None, seen


def _pair_at(source: Source[V], index: int) -> Pair | None:
    return _locate(source, index)[0]


def _out_of_bounds(source: Source[Any], index: int, count: int) -> IndexOutOfBoundsError:
    return IndexOutOfBoundsError(
        f"Size: {count} index: {index}.",
        {"source": source, "index": index, "count": count},
    )


def at(source: Source[V], index: int) -> V:
    """Return the value at position ``index``.

    Raises:
        IndexOutOfBoundsError: If the resolved index is outside ``[0, count)``.
    """
    found, count = _locate(source, index)
    if found is None:
        raise _out_of_bounds(source, index, count)
    return found[1]


def at_or(source: Source[V], index: int, default: D) -> V | D:
    found = _pair_at(source, index)
    return default if found is None else found[1]


def at_or_none(source: Source[V], index: int) -> V | None:
    return at_or(source, index, None)


def key_at(source: Source[Any], index: int) -> Key:
    """Return the key at position ``index`` (negative counts from the end)."""
    found, count = _locate(source, index)
    if found is None:
        raise _out_of_bounds(source, index, count)
    return found[0]


def key_at_or_none(source: Source[Any], index: int) -> Key | None:
    found = _pair_at(source, index)
    return None if found is None else found[0]


def get(source: Source[V], key: Key) -> V:
    """Return the value stored under ``key``.

    Raises:
        InvalidKeyError: If ``key`` does not exist.
    """
    seq = view(source)
    if key not in seq:
        formatted = f'"{key}"' if isinstance(key, str) else f"{key}"
        raise InvalidKeyError(
            f"Key: {formatted} does not exist.",
            {"source": source, "key": key},
        )
    return seq[key]


def get_or(source: Source[V], key: Key, default: D) -> V | D:
    seq = view(source)
    return seq[key] if key in seq else default


def get_or_none(source: Source[V], key: Key) -> V | None:
    return get_or(source, key, None)


# ---------------------------------------------------------------------------
# first / last
# ---------------------------------------------------------------------------


def first(source: Source[V], condition: Callable[..., Any] | None = None) -> V:
    """Return the first value (matching ``condition``, when given).

    Raises:
        NoMatchFoundError: If a condition is given and nothing matches.
        EmptyNotAllowedError: If no condition is given and the source is empty.
    """
    found = find_first(iter_pairs(source), condition_or_all(condition))
    if found is None:
        raise missing_error(condition, {"source": source, "condition": condition})
    return found[1]


def first_or(source: Source[V], default: D, condition: Callable[..., Any] | None = None) -> V | D:
    found = find_first(iter_pairs(source), condition_or_all(condition))
    return default if found is None else found[1]


def first_or_none(source: Source[V], condition: Callable[..., Any] | None = None) -> V | None:
    return first_or(source, None, condition)


def first_key(source: Source[Any], condition: Callable[..., Any] | None = None) -> Key:
    found = find_first(iter_pairs(source), condition_or_all(condition))
    if found is None:
        raise missing_error(condition, {"source": source, "condition": condition})
    return found[0]


def first_key_or_none(
    source: Source[Any], condition: Callable[..., Any] | None = None
) -> Key | None:
    found = find_first(iter_pairs(source), condition_or_all(condition))
    return None if found is None else found[0]


def first_index_or_none(source: Source[Any], condition: Any) -> int | None:
    """Return the position of the first match, or None.

    Args:
        source (Source[Any]): Iteration source.
        condition (Any): A callback, or a plain value matched by identity token.
    """
    match = condition_or_same(condition)
    for position, (key, value) in enumerate(iter_pairs(source)):
        if match(value, key):
            return position
    return None


def first_index(source: Source[Any], condition: Any) -> int:
    """Return the position of the first match.

    Raises:
        NoMatchFoundError: If nothing matches.
    """
    result = first_index_or_none(source, condition)
    if result is None:
        raise NoMatchFoundError(
            "Failed to find matching condition.",
            {"source": source, "condition": condition},
        )
    return result


def last(source: Source[V], condition: Callable[..., Any] | None = None) -> V:
    """Return the last value (matching ``condition``, when given).

    Raises:
        NoMatchFoundError: If a condition is given and nothing matches.
        EmptyNotAllowedError: If no condition is given and the source is empty.
    """
    found = find_last(view(source), condition_or_all(condition))
    if found is None:
        raise missing_error(condition, {"source": source, "condition": condition})
    return found[1][1]


def last_or(source: Source[V], default: D, condition: Callable[..., Any] | None = None) -> V | D:
    found = find_last(view(source), condition_or_all(condition))
    return default if found is None else found[1][1]


def last_or_none(source: Source[V], condition: Callable[..., Any] | None = None) -> V | None:
    return last_or(source, None, condition)


def last_key(source: Source[Any], condition: Callable[..., Any] | None = None) -> Key:
    found = find_last(view(source), condition_or_all(condition))
    if found is None:
        raise missing_error(condition, {"source": source, "condition": condition})
    return found[1][0]


def last_key_or_none(
    source: Source[Any], condition: Callable[..., Any] | None = None
) -> Key | None:
    found = find_last(view(source), condition_or_all(condition))
    return None if found is None else found[1][0]


def last_index_or_none(source: Source[Any], condition: Any = None) -> int | None:
    """Return the position of the last match (or of the last element), or None."""
    match = condition_or_all(None) if condition is None else condition_or_same(condition)
    found = find_last(view(source), match)
    return None if found is None else found[0]


def last_index(source: Source[Any], condition: Any = None) -> int:
    result = last_index_or_none(source, condition)
    if result is None:
        raise missing_error(condition, {"source": source, "condition": condition})
    return result


# ---------------------------------------------------------------------------
# Whole-sequence accessors
# ---------------------------------------------------------------------------


def keys(source: Source[Any], condition: Callable[..., Any] | None = None) -> list[Key]:
    """Return the keys (of the elements matching ``condition``, when given)."""
    match = condition_or_all(condition)
    return [key for key, value in iter_pairs(source) if match(value, key)]


def values(source: Source[V]) -> list[V]:
    return [value for _, value in iter_pairs(source)]


def single(source: Source[V], condition: Callable[..., Any] | None = None) -> V:
    """Return the only value (matching ``condition``, when given).

    Raises:
        InvalidArgumentError: If more than one element matches.
        NoMatchFoundError: If a condition is given and nothing matches.
        EmptyNotAllowedError: If no condition is given and the source is empty.
    """
    match = condition_or_all(condition)
    found: Pair | None = None
    matches = 0
    for key, value in iter_pairs(source):
        if match(value, key):
            matches += 1
            found = (key, value)
    if matches > 1:
        raise InvalidArgumentError(
            f"Expected only one element in result. {matches} given.",
            {"source": source, "condition": condition, "count": matches},
        )
    if found is None:
        raise missing_error(condition, {"source": source, "condition": condition, "count": 0})
    return found[1]


def coalesce_or_none(source: Source[V]) -> V | None:
    """Return the first value that is not None, or None."""
    for _, value in iter_pairs(source):
        if value is not None:
            return value
    return None


def coalesce(source: Source[V]) -> V:
    """Return the first value that is not None.

    Raises:
        NoMatchFoundError: If every value is None (or the source is empty).
    """
    result = coalesce_or_none(source)
    if result is None:
        raise NoMatchFoundError("Non-null value could not be found.", {"source": source})
    return result


def count(source: Source[Any], condition: Callable[..., Any] | None = None) -> int:
    """Return the number of elements (matching ``condition``, when given)."""
    if condition is None and isinstance(source, (list, tuple, dict)):
        return len(source)
    match = condition_or_all(condition)
    return sum(1 for key, value in iter_pairs(source) if match(value, key))


def is_empty(source: Source[Any]) -> bool:
    for _ in iter_pairs(source):
        return False
    return True


def is_not_empty(source: Source[Any]) -> bool:
    return not is_empty(source)
