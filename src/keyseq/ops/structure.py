# topmark:header:start
#
#   project      : KeySeq
#   file         : structure.py
#   file_relpath : src/keyseq/ops/structure.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Construction and structural reshaping: append, merge, pad, rotate, swap, zip.

Every function returns a new sequence; inputs are never modified. For in-place
variants see [`keyseq.ops.mutation`][keyseq.ops.mutation].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from keyseq.core.errors import InvalidArgumentError, InvalidKeyError, TypeMismatchError
from keyseq.core.kinds import (
    assemble,
    is_different_kind,
    is_list_keys,
    is_nested,
    materialize,
    next_index,
    resolve_reindex,
    view,
)
from keyseq.lazy import steps
from keyseq.ops.utils import ensure_list, ensure_non_negative

if TYPE_CHECKING:
    from collections.abc import Mapping

    from keyseq.core.kinds import Key, Source

V = TypeVar("V")


def _as_detected(seq: Mapping[Key, V]) -> list[V] | dict[Key, V]:
    """Return ``seq`` as a ``list`` when its keys are ``0..n-1``, else as a ``dict``."""
    return assemble(seq.items(), is_list_keys(seq.keys()))


def of(*values: V) -> list[V]:
    """Return the given values as a list."""
    return list(values)


def from_iterable(source: Source[V], *, reindex: bool | None = None) -> list[V] | dict[Key, V]:
    """Materialize ``source`` into a new ``list`` (List kind) or ``dict`` (Map kind)."""
    seq = materialize(source)
    return assemble(seq.items(), resolve_reindex(reindex, seq))


def append(source: Source[V], *values: V) -> list[V]:
    """Return a copy of a List with ``values`` added at the end.

    Raises:
        TypeMismatchError: If ``source`` is a Map.
    """
    seq = view(source)
    ensure_list(seq)
    return [*seq.values(), *values]


def prepend(source: Source[V], *values: V) -> list[V]:
    """Return a copy of a List with ``values`` added at the front.

    Raises:
        TypeMismatchError: If ``source`` is a Map.
    """
    seq = view(source)
    ensure_list(seq)
    return [*values, *seq.values()]


def merge_recursive(
    first: Source[Any],
    second: Source[Any],
    depth: int | None = None,
) -> list[Any] | dict[Key, Any]:
    """Merge ``second`` into a copy of ``first``.

    Integer keys of ``second`` are appended (renumbered after the largest integer
    key); string keys overwrite, and when both sides hold a nested sequence under
    the same string key they are merged recursively, up to ``depth`` levels.

    Raises:
        TypeMismatchError: If one side is a List and the other a Map.
    """
    merged = materialize(first)
    merging = view(second)
    if is_different_kind(merged, merging):
        raise TypeMismatchError(
            "Tried to merge list with map. Try converting the map to a list.",
            {"first": first, "second": second, "depth": depth},
        )
    for key, value in merging.items():
        if isinstance(key, int):
            merged[next_index(merged)] = value
        elif (
            (depth is None or depth > 1)
            and key in merged
            and is_nested(merged[key])
            and is_nested(value)
        ):
            merged[key] = merge_recursive(
                merged[key], value, None if depth is None else depth - 1
            )
        else:
            merged[key] = value
    return _as_detected(merged)


def merge(*sources: Source[Any]) -> list[Any] | dict[Key, Any]:
    """Merge sequences left to right (one level deep).

    Raises:
        InvalidArgumentError: If no source is given.
        TypeMismatchError: If Lists and Maps are mixed.
    """
    if not sources:
        raise InvalidArgumentError("At least one sequence must be given.", {"sources": sources})
    result: list[Any] | dict[Key, Any] = from_iterable(sources[0])
    for source in sources[1:]:
        result = merge_recursive(result, source, 1)
    return result


def _pad(source: Source[V], length: int, value: V, *, left: bool) -> list[V]:
    seq = view(source)
    if not is_list_keys(seq.keys()):
        raise TypeMismatchError(
            "Padding can only be applied to a list, map given.",
            {"source": source, "length": length, "value": value},
        )
    ensure_non_negative(length, "length")
    values = list(seq.values())
    fill = [value] * max(0, length - len(values))
    return fill + values if left else values + fill


def pad_left(source: Source[V], length: int, value: V) -> list[V]:
    """Prepend ``value`` until the List holds ``length`` elements."""
    return _pad(source, length, value, left=True)


def pad_right(source: Source[V], length: int, value: V) -> list[V]:
    """Append ``value`` until the List holds ``length`` elements."""
    return _pad(source, length, value, left=False)


def repeat(source: Source[V], times: int) -> list[V]:
    """Return the values repeated ``times`` times.

    Raises:
        InvalidArgumentError: If ``times < 0``.
    """
    return [value for _, value in steps.repeat(source, times)]


def rotate(source: Source[V], steps: int, *, reindex: bool | None = None) -> list[V] | dict[Key, V]:
    """Rotate elements: positive ``steps`` moves the first elements to the tail.

    ``rotate([1, 2, 3], 1)`` is ``[2, 3, 1]``; ``rotate([1, 2, 3], -1)`` is
    ``[3, 1, 2]``.

    Negative ``steps`` are normalized by adding the count once; there is no modulo,
    so ``|steps| >= count`` leaves the order unchanged. ``steps == 0`` returns a copy.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    pairs = list(seq.items())
    if steps < 0:
        steps = len(pairs) + steps
    if steps <= 0:
        return assemble(pairs, flag)
    return assemble(pairs[steps:] + pairs[:steps], flag)


def swap(
    source: Source[V], key1: Key, key2: Key, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Exchange the positions of the elements stored under ``key1`` and ``key2``.

    Raises:
        InvalidKeyError: If either key does not exist.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    for key in (key1, key2):
        if key not in seq:
            raise InvalidKeyError(
                f"Key: {key} does not exist.",
                {"source": source, "key1": key1, "key2": key2},
            )
    pairs = list(seq.items())
    keys = [key for key, _ in pairs]
    i, j = keys.index(key1), keys.index(key2)
    if flag:
        # List: values trade places, keys stay put
        pairs[i], pairs[j] = (key1, seq[key2]), (key2, seq[key1])
    else:
        pairs[i], pairs[j] = pairs[j], pairs[i]
    return assemble(pairs, flag)


def with_defaults(source: Source[V], defaults: Source[V]) -> list[V] | dict[Key, V]:
    """Return ``source`` completed with the entries of ``defaults`` it lacks."""
    result = materialize(source)
    for key, value in view(defaults).items():
        result.setdefault(key, value)
    return _as_detected(result)


def zip(*sources: Source[Any]) -> list[list[Any]]:
    """Group the n-th values of every List together.

    The first List drives the length; shorter Lists contribute ``None``.
    ``zip([1, 2], [3])`` is ``[[1, 3], [2, None]]``.

    Raises:
        InvalidArgumentError: If no source is given.
        TypeMismatchError: If an argument is a Map.
    """
    if not sources:
        raise InvalidArgumentError("zip() expects at least 1 argument.", {"sources": sources})
    columns: list[list[Any]] = []
    for position, source in enumerate(sources, 1):
        seq = view(source)
        if not is_list_keys(seq.keys()):
            raise TypeMismatchError(
                f"Argument #{position} must be a list, map given.",
                {"sources": sources, "position": position},
            )
        columns.append(list(seq.values()))
    head, rest = columns[0], columns[1:]
    return [
        [value, *(column[i] if i < len(column) else None for column in rest)]
        for i, value in enumerate(head)
    ]
