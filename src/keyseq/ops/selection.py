# topmark:header:start
#
#   project      : KeySeq
#   file         : selection.py
#   file_relpath : src/keyseq/ops/selection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Eager selection: filtering, take/drop families, slicing and key picking.

Every function accepts ``reindex: bool | None``. With the default ``None`` a List
input yields a ``list`` and a Map input yields a ``dict`` that keeps the original
keys; the decision is taken from the input before anything is selected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.callables import adapt
from keyseq.core.errors import MissingKeyError
from keyseq.core.kinds import assemble, resolve_reindex, view
from keyseq.core.tokens import same
from keyseq.lazy import steps
from keyseq.ops.utils import ensure_non_negative, ensure_positive

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from keyseq.core.kinds import Key, Source

V = TypeVar("V")


def _select(
    seq: Mapping[Key, V],
    pairs: Iterator[tuple[Key, V]] | Iterable[tuple[Key, V]],
    reindex: bool | None,
) -> list[V] | dict[Key, V]:
    return assemble(pairs, resolve_reindex(reindex, seq))


def take_if(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Keep the elements for which ``condition`` is truthy."""
    seq = view(source)
    return _select(seq, steps.take_if(seq, condition), reindex)


def filter(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Alias of [`take_if`][keyseq.ops.selection.take_if]."""
    return take_if(source, condition, reindex=reindex)


def drop_if(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Remove the elements for which ``condition`` is truthy."""
    seq = view(source)
    return _select(seq, steps.drop_if(seq, condition), reindex)


def take_first(
    source: Source[V], amount: int, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Keep the first ``amount`` elements.

    Raises:
        InvalidArgumentError: If ``amount < 0``.
    """
    seq = view(source)
    return _select(seq, steps.take_first(seq, amount), reindex)


def drop_first(
    source: Source[V], amount: int, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Remove the first ``amount`` elements.

    Raises:
        InvalidArgumentError: If ``amount < 0``.
    """
    seq = view(source)
    return _select(seq, steps.drop_first(seq, amount), reindex)


def take_last(
    source: Source[V], amount: int, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Keep the last ``amount`` elements.

    Raises:
        InvalidArgumentError: If ``amount < 0``.
    """
    ensure_non_negative(amount, "amount")
    seq = view(source)
    offset = max(0, len(seq) - amount)
    return _select(seq, steps.slice(seq, offset), reindex)


def drop_last(
    source: Source[V], amount: int, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Remove the last ``amount`` elements.

    Raises:
        InvalidArgumentError: If ``amount < 0``.
    """
    ensure_non_negative(amount, "amount")
    seq = view(source)
    return _select(seq, steps.slice(seq, 0, max(0, len(seq) - amount)), reindex)


def take_while(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Keep elements from the front while ``condition`` holds."""
    seq = view(source)
    return _select(seq, steps.take_while(seq, condition), reindex)


def take_until(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Keep elements from the front until ``condition`` first holds."""
    seq = view(source)
    return _select(seq, steps.take_until(seq, condition), reindex)


def drop_while(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Drop elements from the front while ``condition`` holds, keep the rest."""
    seq = view(source)
    return _select(seq, steps.drop_while(seq, condition), reindex)


def drop_until(
    source: Source[V], condition: Callable[..., Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Drop elements from the front until ``condition`` first holds, keep the rest."""
    seq = view(source)
    return _select(seq, steps.drop_until(seq, condition), reindex)


def take_every(
    source: Source[V], nth: int, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Keep every ``nth`` element (the ``nth``, ``2*nth``, ... ones).

    Raises:
        InvalidArgumentError: If ``nth < 1``.
    """
    ensure_positive(nth, "nth")
    seq = view(source)
    pairs = (pair for position, pair in enumerate(seq.items(), 1) if position % nth == 0)
    return _select(seq, pairs, reindex)


def drop_every(
    source: Source[V], nth: int, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Remove every ``nth`` element.

    Raises:
        InvalidArgumentError: If ``nth < 1``.
    """
    ensure_positive(nth, "nth")
    seq = view(source)
    pairs = (pair for position, pair in enumerate(seq.items(), 1) if position % nth != 0)
    return _select(seq, pairs, reindex)


def take_keys(
    source: Source[V],
    keys: Iterable[Key],
    *,
    safe: bool = True,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Keep the elements stored under ``keys``, in the order ``keys`` lists them.

    Raises:
        MissingKeyError: If ``safe`` and some keys are absent.
    """
    seq = view(source)
    wanted = list(keys)
    missing = [key for key in wanted if key not in seq]
    if safe and missing:
        raise MissingKeyError(
            missing, {"source": source, "given_keys": wanted, "missing_keys": missing}
        )
    return _select(seq, ((key, seq[key]) for key in wanted if key in seq), reindex)


def drop_keys(
    source: Source[V],
    keys: Iterable[Key],
    *,
    safe: bool = True,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Remove the elements stored under ``keys``.

    Raises:
        MissingKeyError: If ``safe`` and some keys are absent.
    """
    seq = view(source)
    unwanted = list(keys)
    missing = [key for key in unwanted if key not in seq]
    if safe and missing:
        raise MissingKeyError(
            missing, {"source": source, "given_keys": unwanted, "missing_keys": missing}
        )
    dropped = set(unwanted)
    return _select(seq, ((k, v) for k, v in seq.items() if k not in dropped), reindex)


def slice(
    source: Source[V],
    offset: int,
    length: int | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Return up to ``length`` elements starting at position ``offset``.

    Negative ``offset`` counts from the end; negative ``length`` stops that many
    elements before the end.
    """
    seq = view(source)
    return _select(seq, steps.slice(seq, offset, length), reindex)


def without(
    source: Source[V], value: Any, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Remove every element identical to ``value``."""
    seq = view(source)
    return _select(seq, ((k, v) for k, v in seq.items() if not same(v, value)), reindex)


def prioritize(
    source: Source[V],
    condition: Callable[..., Any],
    limit: int | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Move up to ``limit`` elements satisfying ``condition`` to the front.

    Relative order is kept within the moved and the remaining elements.
    """
    if limit is not None:
        ensure_non_negative(limit, "limit")
    cond = adapt(condition)
    seq = view(source)
    front: list[tuple[Key, V]] = []
    rest: list[tuple[Key, V]] = []
    for key, value in seq.items():
        if (limit is None or len(front) < limit) and cond(value, key):
            front.append((key, value))
        else:
            rest.append((key, value))
    return _select(seq, front + rest, reindex)


def replace(
    source: Source[V],
    search: Any,
    replacement: Any,
    limit: int | None = None,
    *,
    reindex: bool | None = None,
) -> list[Any] | dict[Key, Any]:
    """Replace values identical to ``search`` (at most ``limit`` times) by ``replacement``.

    Raises:
        InvalidArgumentError: If ``limit < 0``.
    """
    seq = view(source)
    return _select(seq, steps.replace(seq, search, replacement, limit), reindex)
