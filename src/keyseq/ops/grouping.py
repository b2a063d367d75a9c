# topmark:header:start
#
#   project      : KeySeq
#   file         : grouping.py
#   file_relpath : src/keyseq/ops/grouping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grouping, keying, splitting and mapping.

Functions returning groups (``chunk``, ``slide``, ``split_*``, ``partition``) return
a ``list`` of groups; each group is itself a ``list`` or a ``dict`` according to the
reindex policy resolved from the input.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.callables import adapt
from keyseq.core.errors import DuplicateKeyError, InvalidArgumentError, InvalidKeyError
from keyseq.core.kinds import assemble, ensure_key, resolve_reindex, view
from keyseq.lazy import steps
from keyseq.ops.utils import resolve_index

if TYPE_CHECKING:
    from collections.abc import Iterable

    from keyseq.core.kinds import Key, Source

V = TypeVar("V")
R = TypeVar("R")


def _add(group: list[Any] | dict[Key, Any], key: Key, value: Any) -> None:
    if isinstance(group, list):
        group.append(value)
    else:
        group[key] = value


def _new_group(reindex: bool) -> list[Any] | dict[Key, Any]:
    return [] if reindex else {}


def group_by(
    source: Source[V],
    callback: Callable[..., Key],
    *,
    reindex: bool | None = None,
) -> dict[Key, list[V] | dict[Key, V]]:
    """Group elements under the key ``callback`` returns for each of them.

    Groups appear in order of first occurrence; each group keeps input order.

    Raises:
        InvalidKeyError: If ``callback`` returns something other than ``int | str``.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    fn = adapt(callback)
    groups: dict[Key, list[V] | dict[Key, V]] = {}
    for key, value in seq.items():
        group_key = fn(value, key)
        if isinstance(group_key, bool) or not isinstance(group_key, (int, str)):
            raise InvalidKeyError(
                "Expected: Grouping key of type int|str. "
                f"Got: {type(group_key).__name__}.",
                {"source": source, "key": key, "value": value, "group_key": group_key},
            )
        if group_key not in groups:
            groups[group_key] = _new_group(flag)
        _add(groups[group_key], key, value)
    return groups


def key_by(
    source: Source[V],
    callback: Callable[..., Key],
    *,
    overwrite: bool = False,
) -> dict[Key, V]:
    """Re-key every element with the key ``callback`` returns.

    Raises:
        InvalidKeyError: If a returned key is not ``int | str``.
        DuplicateKeyError: If two elements get the same key and ``overwrite`` is False.
    """
    fn = adapt(callback)
    result: dict[Key, V] = {}
    for old_key, value in view(source).items():
        new_key = ensure_key(fn(value, old_key))
        if not overwrite and new_key in result:
            raise DuplicateKeyError(
                f"Tried to overwrite existing key: {new_key}.",
                {"source": source, "new_key": new_key},
            )
        result[new_key] = value
    return result


def flip(source: Source[Key], *, overwrite: bool = False) -> dict[Key, Key]:
    """Swap keys and values.

    Raises:
        InvalidKeyError: If a value is not ``int | str``.
        DuplicateKeyError: If a value repeats and ``overwrite`` is False.
    """
    flipped: dict[Key, Key] = {}
    for key, value in view(source).items():
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise InvalidKeyError(
                f"Expected: value of type int|str. Got: {type(value).__name__}.",
                {"source": source, "key": key, "value": value},
            )
        if not overwrite and value in flipped:
            raise DuplicateKeyError(
                f"Tried to overwrite existing key: {value}.",
                {"source": source, "key": value},
            )
        flipped[value] = key
    return flipped


def partition(
    source: Source[V],
    condition: Callable[..., Any],
    *,
    reindex: bool | None = None,
) -> tuple[list[V] | dict[Key, V], list[V] | dict[Key, V]]:
    """Split into ``(matching, non_matching)``, preserving order within each half."""
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    cond = adapt(condition)
    truthy = _new_group(flag)
    falsy = _new_group(flag)
    for key, value in seq.items():
        _add(truthy if cond(value, key) else falsy, key, value)
    return truthy, falsy


def chunk(
    source: Source[V], size: int, *, reindex: bool | None = None
) -> list[list[V] | dict[Key, V]]:
    """Split into consecutive groups of ``size``; the last group may be shorter.

    Raises:
        InvalidArgumentError: If ``size < 1``.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    return [window for _, window in steps.chunk(seq, size, reindex=flag)]


def slide(
    source: Source[V], size: int, *, reindex: bool | None = None
) -> list[list[V] | dict[Key, V]]:
    """Return every window of ``size`` consecutive elements.

    Raises:
        InvalidArgumentError: If ``size < 1``.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    return [window for _, window in steps.slide(seq, size, reindex=flag)]


def _split(
    source: Source[V],
    condition: Callable[..., Any],
    reindex: bool | None,
    *,
    after: bool,
) -> list[list[V] | dict[Key, V]]:
    seq = view(source)
    if len(seq) == 0:
        return []
    flag = resolve_reindex(reindex, seq)
    cond = adapt(condition)
    groups: list[list[V] | dict[Key, V]] = []
    current = _new_group(flag)
    for key, value in seq.items():
        if after:
            _add(current, key, value)
        if cond(value, key):
            groups.append(current)
            current = _new_group(flag)
        if not after:
            _add(current, key, value)
    groups.append(current)
    return groups


def split_after(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[list[V] | dict[Key, V]]:
    """Split after every element satisfying ``condition`` (empty input gives ``[]``)."""
    return _split(source, condition, reindex, after=True)


def split_before(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[list[V] | dict[Key, V]]:
    """Split before every element satisfying ``condition`` (empty input gives ``[]``)."""
    return _split(source, condition, reindex, after=False)


def _split_at(
    source: Source[V], boundary: int, reindex: bool | None
) -> tuple[list[V] | dict[Key, V], list[V] | dict[Key, V]]:
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    head = _new_group(flag)
    tail = _new_group(flag)
    for position, (key, value) in enumerate(seq.items()):
        _add(head if position < boundary else tail, key, value)
    return head, tail


def split_after_index(
    source: Source[V], index: int, *, reindex: bool | None = None
) -> tuple[list[V] | dict[Key, V], list[V] | dict[Key, V]]:
    """Split into the elements up to and including position ``index``, and the rest."""
    seq = view(source)
    return _split_at(seq, resolve_index(index, len(seq)) + 1, reindex)


def split_before_index(
    source: Source[V], index: int, *, reindex: bool | None = None
) -> tuple[list[V] | dict[Key, V], list[V] | dict[Key, V]]:
    """Split into the elements before position ``index``, and the rest."""
    seq = view(source)
    return _split_at(seq, resolve_index(index, len(seq)), reindex)


def split_evenly(
    source: Source[V], parts: int, *, reindex: bool | None = None
) -> list[list[V] | dict[Key, V]]:
    """Split into groups of ``ceil(count / parts)`` elements.

    The arithmetic is not a balanced partition: ``split_evenly([1, 2, 3, 4, 5], 3)``
    is ``[[1, 2], [3, 4], [5]]`` and fewer than ``parts`` groups may come out.

    Raises:
        InvalidArgumentError: If ``parts < 1``.
    """
    if parts <= 0:
        raise InvalidArgumentError(
            f"Expected: parts > 0. Got: {parts}.",
            {"source": source, "parts": parts, "reindex": reindex},
        )
    seq = view(source)
    if len(seq) == 0:
        return []
    size = math.ceil(len(seq) / parts)
    return chunk(seq, size, reindex=reindex)


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def map(source: Source[V], callback: Callable[..., R]) -> list[R] | dict[Key, R]:
    """Apply ``callback`` to every value; keys and kind are kept."""
    seq = view(source)
    return assemble(steps.map(seq, callback), resolve_reindex(None, seq))


def map_with_key(
    source: Source[V],
    callback: Callable[..., Any],
    *,
    overwrite: bool = False,
) -> dict[Key, Any]:
    """Build a new mapping from the pairs ``callback`` returns for each element.

    ``callback`` returns a mapping (usually of one entry) per element.

    Raises:
        DuplicateKeyError: If a key repeats and ``overwrite`` is False.
    """
    result: dict[Key, Any] = {}
    for key, value in steps.map_with_key(view(source), callback):
        ensure_key(key)
        if not overwrite and key in result:
            raise DuplicateKeyError(
                f"Tried to overwrite existing key: {key}.",
                {"source": source, "key": key},
            )
        result[key] = value
    return result


def flat_map(source: Source[V], callback: Callable[..., Iterable[R]]) -> list[R]:
    """Map every element to an iterable and concatenate the results."""
    return [value for _, value in steps.flat_map(source, callback)]


def flatten(source: Source[Any], depth: int = 1) -> list[Any]:
    """Flatten nested sequences up to ``depth`` levels into a list of values.

    Raises:
        InvalidArgumentError: If ``depth < 1``.
    """
    return [value for _, value in steps.flatten(source, depth)]


def each(source: Source[V], callback: Callable[..., Any]) -> None:
    """Call ``callback`` for every element."""
    for _ in steps.each(source, callback):
        pass
