# topmark:header:start
#
#   project      : KeySeq
#   file         : sorting.py
#   file_relpath : src/keyseq/ops/sorting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable sorting by value, by selector, by key, or with a comparator.

All sorts are stable: elements that rank equal keep their input order, in both
directions. With a ``by`` selector the elements are ranked by the selected value
while the original values are carried along.

Values that cannot be ordered against each other (e.g. ``1`` and ``"a"``) raise
[`TypeMismatchError`][keyseq.core.errors.TypeMismatchError].
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.callables import adapt
from keyseq.core.errors import InvalidArgumentError, TypeMismatchError
from keyseq.core.kinds import assemble, resolve_reindex, view
from keyseq.core.ordering import SortOrder

if TYPE_CHECKING:
    from keyseq.core.kinds import Key, Source

V = TypeVar("V")


def _sorted_pairs(
    pairs: list[tuple[Key, V]],
    rank: Callable[[tuple[Key, V]], Any],
    descending: bool,
    source: Source[Any],
) -> list[tuple[Key, V]]:
    try:
        return sorted(pairs, key=rank, reverse=descending)
    except TypeError as exc:
        raise TypeMismatchError(
            f"Elements cannot be ordered: {exc}",
            {"source": source},
        ) from exc


def _parse_order(order: SortOrder | str) -> SortOrder:
    parsed = SortOrder.parse(order)
    if parsed is None:
        raise InvalidArgumentError(
            f"Unknown sort order: {order!r}. Expected 'asc' or 'desc'.",
            {"order": order},
        )
    return parsed


def sort(
    source: Source[V],
    order: SortOrder | str,
    by: Callable[..., Any] | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Sort by value (or by ``by(value, key)``) in the given order.

    Args:
        source (Source[V]): Iteration source.
        order (SortOrder | str): ``SortOrder.ASC``/``SortOrder.DESC`` or ``"asc"``/``"desc"``.
        by (Callable[..., Any] | None): Optional selector giving the sort rank.
        reindex (bool | None): Output policy, decided from the input.

    Returns:
        list[V] | dict[Key, V]: The sorted sequence.

    Raises:
        InvalidArgumentError: If ``order`` is not recognized.
        TypeMismatchError: If ranks cannot be compared.
    """
    direction = _parse_order(order)
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    pairs = list(seq.items())
    if by is None:
        ranked = _sorted_pairs(pairs, lambda p: p[1], direction is SortOrder.DESC, source)
    else:
        select = adapt(by)
        # rank once per element, then carry the original pair along
        ranks = [(select(value, key), (key, value)) for key, value in pairs]
        ordered = _sorted_pairs(ranks, lambda r: r[0], direction is SortOrder.DESC, source)
        ranked = [pair for _, pair in ordered]
    return assemble(ranked, flag)


def sort_asc(
    source: Source[V], by: Callable[..., Any] | None = None, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    return sort(source, SortOrder.ASC, by, reindex=reindex)


def sort_desc(
    source: Source[V], by: Callable[..., Any] | None = None, *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    return sort(source, SortOrder.DESC, by, reindex=reindex)


def sort_by_key(source: Source[V], ascending: bool = True) -> dict[Key, V]:
    """Sort by key; keys are always kept, so the result is a ``dict``.

    Raises:
        TypeMismatchError: If ``int`` and ``str`` keys are mixed.
    """
    pairs = list(view(source).items())
    return dict(_sorted_pairs(pairs, lambda p: p[0], not ascending, source))


def sort_by_key_asc(source: Source[V]) -> dict[Key, V]:
    return sort_by_key(source, True)


def sort_by_key_desc(source: Source[V]) -> dict[Key, V]:
    return sort_by_key(source, False)


def sort_with(
    source: Source[V],
    comparator: Callable[[Any, Any], int],
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Sort values with a three-way ``comparator(a, b)`` (negative, zero, positive)."""
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    rank = cmp_to_key(comparator)
    pairs = _sorted_pairs(list(seq.items()), lambda p: rank(p[1]), False, source)
    return assemble(pairs, flag)


def sort_with_key(source: Source[V], comparator: Callable[[Any, Any], int]) -> dict[Key, V]:
    """Sort keys with a three-way ``comparator(a, b)``; the result is a ``dict``."""
    rank = cmp_to_key(comparator)
    pairs = list(view(source).items())
    return dict(_sorted_pairs(pairs, lambda p: rank(p[0]), False, source))


def reverse(source: Source[V], *, reindex: bool | None = None) -> list[V] | dict[Key, V]:
    """Reverse the order; a Map keeps its keys, a List is renumbered."""
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    return assemble(reversed(list(seq.items())), flag)
