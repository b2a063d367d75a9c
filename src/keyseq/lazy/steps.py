# topmark:header:start
#
#   project      : KeySeq
#   file         : steps.py
#   file_relpath : src/keyseq/lazy/steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass, pull-based transformation steps.

Every step takes an iteration source and returns an iterator of ``(key, value)``
pairs. Arguments are validated when the step is called; elements are only read when
the caller pulls. A step is consumed once: iterate again by calling it again.

When ``reindex=True`` the emitted keys are a fresh ``0, 1, ...`` run; otherwise the
source keys are kept. Steps that emit groups (``chunk``, ``slide``) key the groups
``0, 1, ...`` and build each group as a ``list`` (reindexed) or a ``dict``.

Callbacks are called as ``fn(value, key)`` or ``fn(value)``, depending on what they
accept (see [`adapt`][keyseq.core.callables.adapt]).
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.callables import adapt
from keyseq.core.errors import InvalidArgumentError
from keyseq.core.kinds import is_nested, iter_pairs
from keyseq.core.tokens import same

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from keyseq.core.kinds import Key, Source

V = TypeVar("V")
R = TypeVar("R")


def _renumber(pairs: Iterable[tuple[Key, V]]) -> Iterator[tuple[Key, V]]:
    for index, (_, value) in enumerate(pairs):
        yield index, value


def _emit(pairs: Iterator[tuple[Key, V]], reindex: bool) -> Iterator[tuple[Key, V]]:
    return _renumber(pairs) if reindex else pairs


def _ensure(condition: bool, message: str, context: dict[str, Any]) -> None:
    if not condition:
        raise InvalidArgumentError(message, context)


# ---------------------------------------------------------------------------
# Windowing
# ---------------------------------------------------------------------------


def slice(
    source: Source[V],
    offset: int,
    length: int | None = None,
    *,
    reindex: bool = False,
) -> Iterator[tuple[Key, V]]:
    """Yield the pairs from position ``offset`` up to ``length`` elements.

    Args:
        source (Source[V]): Iteration source.
        offset (int): Start position. Negative values count from the end.
        length (int | None): Maximum number of elements. Negative values stop that
            many elements before the end. None means "up to the end".
        reindex (bool): Renumber the emitted keys.

    Returns:
        Iterator[tuple[Key, V]]: Lazy pair iterator.

    Notes:
        Negative ``offset``/``length`` are resolved once against the full count,
        which materializes the source; non-negative arguments stream.
    """
    pairs: Iterable[tuple[Key, V]]
    if offset < 0 or (length is not None and length < 0):
        pairs = list(iter_pairs(source))
        count = len(pairs)
        if offset < 0:
            offset = max(0, count + offset)
        if length is not None and length < 0:
            length = count + length - offset
    else:
        pairs = iter_pairs(source)
    return _emit(_slice(pairs, offset, length), reindex)


def _slice(
    pairs: Iterable[tuple[Key, V]], offset: int, length: int | None
) -> Iterator[tuple[Key, V]]:
    if length is not None and length <= 0:
        return
    stop = None if length is None else offset + length
    for position, pair in enumerate(pairs):
        if position < offset:
            continue
        if stop is not None and position >= stop:
            break
        yield pair


def take_first(source: Source[V], amount: int) -> Iterator[tuple[Key, V]]:
    """Yield the first ``amount`` pairs (``amount >= 0``)."""
    _ensure(amount >= 0, f"Expected: amount >= 0. Got: {amount}.", {"amount": amount})
    return slice(source, 0, amount)


def drop_first(source: Source[V], amount: int, *, reindex: bool = False) -> Iterator[tuple[Key, V]]:
    """Yield every pair after the first ``amount`` (``amount >= 0``)."""
    _ensure(amount >= 0, f"Expected: amount >= 0. Got: {amount}.", {"amount": amount})
    return slice(source, amount, reindex=reindex)


def chunk(
    source: Source[V],
    size: int,
    *,
    reindex: bool = False,
) -> Iterator[tuple[int, list[V] | dict[Key, V]]]:
    """Group consecutive pairs into chunks of ``size``; the last chunk may be shorter.

    Raises:
        InvalidArgumentError: If ``size < 1``.
    """
    _ensure(size >= 1, f"Expected: size >= 1. Got: {size}.", {"size": size})
    return _chunk(iter_pairs(source), size, reindex)


def _chunk(
    pairs: Iterator[tuple[Key, V]], size: int, reindex: bool
) -> Iterator[tuple[int, list[V] | dict[Key, V]]]:
    index = 0
    bucket: list[tuple[Key, V]] = []
    for pair in pairs:
        bucket.append(pair)
        if len(bucket) == size:
            yield index, _window(bucket, reindex)
            index += 1
            bucket = []
    if bucket:
        yield index, _window(bucket, reindex)


def _window(pairs: Iterable[tuple[Key, V]], reindex: bool) -> list[V] | dict[Key, V]:
    if reindex:
        return [value for _, value in pairs]
    return dict(pairs)


def slide(
    source: Source[V],
    size: int,
    *,
    reindex: bool = False,
) -> Iterator[tuple[int, list[V] | dict[Key, V]]]:
    """Yield overlapping windows of ``size`` consecutive pairs (a sliding window).

    A window is emitted each time the buffer is full, then the oldest pair is
    dropped. When the source holds fewer than ``size`` elements a single short
    window with everything is emitted, so an empty source yields one empty window.

    Raises:
        InvalidArgumentError: If ``size <= 0``.
    """
    _ensure(size > 0, f"Expected: size > 0. Got: {size}.", {"size": size})
    return _slide(iter_pairs(source), size, reindex)


def _slide(
    pairs: Iterator[tuple[Key, V]], size: int, reindex: bool
) -> Iterator[tuple[int, list[V] | dict[Key, V]]]:
    buffer: deque[tuple[Key, V]] = deque(maxlen=size)
    index = 0
    for pair in pairs:
        buffer.append(pair)
        if len(buffer) == size:
            # each window is an independent copy of the ring buffer
            yield index, _window(buffer, reindex)
            index += 1
    if index == 0:
        yield index, _window(buffer, reindex)


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def take_if(
    source: Source[V],
    condition: Callable[..., Any],
    *,
    reindex: bool = False,
) -> Iterator[tuple[Key, V]]:
    """Yield the pairs for which ``condition`` is truthy."""
    cond = adapt(condition)
    return _emit((p for p in iter_pairs(source) if cond(p[1], p[0])), reindex)


def drop_if(
    source: Source[V],
    condition: Callable[..., Any],
    *,
    reindex: bool = False,
) -> Iterator[tuple[Key, V]]:
    """Yield the pairs for which ``condition`` is falsy."""
    cond = adapt(condition)
    return _emit((p for p in iter_pairs(source) if not cond(p[1], p[0])), reindex)


def take_instance_of(
    source: Source[Any],
    cls: type[V] | tuple[type, ...],
    *,
    reindex: bool = False,
) -> Iterator[tuple[Key, V]]:
    """Yield the pairs whose value is an instance of ``cls``.

    Raises:
        InvalidArgumentError: If ``cls`` is not a class (or tuple of classes).
    """
    classes = cls if isinstance(cls, tuple) else (cls,)
    _ensure(
        all(isinstance(c, type) for c in classes),
        f"Expected: a class. Got: {cls!r}.",
        {"cls": cls},
    )
    return _emit((p for p in iter_pairs(source) if isinstance(p[1], cls)), reindex)


def take_while(source: Source[V], condition: Callable[..., Any]) -> Iterator[tuple[Key, V]]:
    """Yield pairs until ``condition`` first returns falsy."""
    cond = adapt(condition)
    return _take_while(iter_pairs(source), cond, stop_on=False)


def take_until(source: Source[V], condition: Callable[..., Any]) -> Iterator[tuple[Key, V]]:
    """Yield pairs until ``condition`` first returns truthy."""
    cond = adapt(condition)
    return _take_while(iter_pairs(source), cond, stop_on=True)


def _take_while(
    pairs: Iterator[tuple[Key, V]],
    cond: Callable[[Any, Key], Any],
    *,
    stop_on: bool,
) -> Iterator[tuple[Key, V]]:
    for key, value in pairs:
        if bool(cond(value, key)) is stop_on:
            break
        yield key, value


def drop_while(
    source: Source[V],
    condition: Callable[..., Any],
    *,
    reindex: bool = False,
) -> Iterator[tuple[Key, V]]:
    """Skip pairs while ``condition`` is truthy, then yield everything left."""
    cond = adapt(condition)
    return _emit(_drop_while(iter_pairs(source), cond, resume_on=False), reindex)


def drop_until(
    source: Source[V],
    condition: Callable[..., Any],
    *,
    reindex: bool = False,
) -> Iterator[tuple[Key, V]]:
    """Skip pairs until ``condition`` is truthy, then yield everything left."""
    cond = adapt(condition)
    return _emit(_drop_while(iter_pairs(source), cond, resume_on=True), reindex)


def _drop_while(
    pairs: Iterator[tuple[Key, V]],
    cond: Callable[[Any, Key], Any],
    *,
    resume_on: bool,
) -> Iterator[tuple[Key, V]]:
    dropping = True
    for key, value in pairs:
        if dropping and bool(cond(value, key)) is resume_on:
            dropping = False
        if not dropping:
            yield key, value


def replace(
    source: Source[V],
    search: Any,
    replacement: Any,
    limit: int | None = None,
) -> Iterator[tuple[Key, Any]]:
    """Yield the pairs with values identical to ``search`` replaced.

    Args:
        source (Source[V]): Iteration source.
        search (Any): Value to look for (identity-token match, so ``1`` never
            matches ``True``).
        replacement (Any): Value emitted instead.
        limit (int | None): Maximum number of replacements; None for all.

    Raises:
        InvalidArgumentError: If ``limit < 0``.
    """
    if limit is not None:
        _ensure(limit >= 0, f"Expected: limit >= 0. Got: {limit}.", {"limit": limit})
    return _replace(iter_pairs(source), search, replacement, limit)


def _replace(
    pairs: Iterator[tuple[Key, V]], search: Any, replacement: Any, limit: int | None
) -> Iterator[tuple[Key, Any]]:
    remaining = limit
    for key, value in pairs:
        if remaining != 0 and same(value, search):
            yield key, replacement
            if remaining is not None:
                remaining -= 1
        else:
            yield key, value


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def map(source: Source[V], callback: Callable[..., R]) -> Iterator[tuple[Key, R]]:
    """Yield ``(key, callback(value, key))`` for every pair."""
    fn = adapt(callback)
    return ((key, fn(value, key)) for key, value in iter_pairs(source))


def map_with_key(source: Source[V], callback: Callable[..., Any]) -> Iterator[tuple[Key, Any]]:
    """Yield the pairs of the sequence ``callback`` returns for each element.

    The callback returns a mapping (or any iteration source); its pairs replace the
    original pair.
    """
    fn = adapt(callback)
    for key, value in iter_pairs(source):
        yield from iter_pairs(fn(value, key))


def flat_map(source: Source[V], callback: Callable[..., Iterable[R]]) -> Iterator[tuple[int, R]]:
    """Yield the values of every iterable ``callback`` returns, keyed ``0, 1, ...``."""
    fn = adapt(callback)
    return _renumber(
        (key, item) for key, value in iter_pairs(source) for _, item in iter_pairs(fn(value, key))
    )


def flatten(source: Source[Any], depth: int = 1) -> Iterator[tuple[Key, Any]]:
    """Yield leaf pairs, descending into nested sequences up to ``depth`` levels.

    Leaves found at a descended level keep their inner key; callers usually take
    the values only.

    Raises:
        InvalidArgumentError: If ``depth < 1``.
    """
    _ensure(depth >= 1, f"Expected: depth > 0. Got: {depth}.", {"depth": depth})
    return _flatten(source, depth)


def _flatten(source: Source[Any], depth: int) -> Iterator[tuple[Key, Any]]:
    for key, value in iter_pairs(source):
        if depth > 0 and is_nested(value):
            yield from _flatten(value, depth - 1)
        else:
            yield key, value


def each(source: Source[V], callback: Callable[..., Any]) -> Iterator[tuple[Key, V]]:
    """Call ``callback`` for every pair as it is pulled, and pass the pair on."""
    fn = adapt(callback)
    for key, value in iter_pairs(source):
        fn(value, key)
        yield key, value


def repeat(source: Source[V], times: int) -> Iterator[tuple[Key, V]]:
    """Yield the pairs of ``source`` ``times`` times over (keys repeat).

    Raises:
        InvalidArgumentError: If ``times < 0``.
    """
    _ensure(times >= 0, f"Expected: times >= 0. Got: {times}.", {"times": times})
    return _repeat(source, times)


def _repeat(source: Source[V], times: int) -> Iterator[tuple[Key, V]]:
    if times == 0:
        return
    # one-shot sources are read once and replayed
    pairs = list(iter_pairs(source))
    for _ in range(times):
        yield from pairs


def keys(source: Source[Any]) -> Iterator[tuple[int, Key]]:
    """Yield the keys as values, keyed ``0, 1, ...``."""
    return ((index, key) for index, (key, _) in enumerate(iter_pairs(source)))


def values(source: Source[V]) -> Iterator[tuple[int, V]]:
    """Yield the values, keyed ``0, 1, ...``."""
    return _renumber(iter_pairs(source))
