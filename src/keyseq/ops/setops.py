# topmark:header:start
#
#   project      : KeySeq
#   file         : setops.py
#   file_relpath : src/keyseq/ops/setops.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Set algebra and deduplication.

``diff``/``diff_keys``/``sym_diff`` match elements with a pluggable three-way
comparator (``by(a, b) == 0`` means "equal"); the default is
[`spaceship`][keyseq.core.ordering.spaceship]. ``intersect``, ``unique`` and
``duplicates`` match by identity token instead, so ``1`` and ``True`` stay apart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.callables import adapt
from keyseq.core.errors import TypeMismatchError
from keyseq.core.kinds import assemble, is_different_kind, kind_name, resolve_reindex, view
from keyseq.core.tokens import tokenize
from keyseq.ops.utils import ensure_list

if TYPE_CHECKING:
    from collections.abc import Mapping

    from keyseq.core.kinds import Key, Source
    from keyseq.core.tokens import Token

V = TypeVar("V")

Comparator = Callable[[Any, Any], int]


def _matcher(by: Comparator | None) -> Callable[[Any, Any], bool]:
    if by is None:
        # spaceship() is 0 exactly when the operands are ==
        return lambda a, b: bool(a == b)
    return lambda a, b: by(a, b) == 0


def _diff_pairs(
    first: Mapping[Key, V], second: Mapping[Key, Any], by: Comparator | None
) -> list[tuple[Key, V]]:
    match = _matcher(by)
    others = list(second.values())
    return [
        (key, value)
        for key, value in first.items()
        if not any(match(value, other) for other in others)
    ]


def diff(
    first: Source[V],
    second: Source[Any],
    by: Comparator | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Return the elements of ``first`` whose value matches no value of ``second``.

    Args:
        first (Source[V]): Sequence to filter.
        second (Source[Any]): Values to subtract.
        by (Comparator | None): Three-way comparator; ``0`` means equal.
        reindex (bool | None): Output policy, decided from ``first``.

    Returns:
        list[V] | dict[Key, V]: The remaining elements of ``first``.
    """
    seq1 = view(first)
    seq2 = view(second)
    flag = resolve_reindex(reindex, seq1)
    return assemble(_diff_pairs(seq1, seq2, by), flag)


def diff_keys(
    first: Source[V],
    second: Source[Any],
    by: Comparator | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Return the elements of ``first`` whose key matches no key of ``second``."""
    seq1 = view(first)
    seq2 = view(second)
    flag = resolve_reindex(reindex, seq1)
    match = _matcher(by)
    other_keys = list(seq2.keys())
    pairs = [
        (key, value)
        for key, value in seq1.items()
        if not any(match(key, other) for other in other_keys)
    ]
    return assemble(pairs, flag)


def _ensure_same_kind(seq1: Mapping[Key, Any], seq2: Mapping[Key, Any], what: str) -> None:
    if is_different_kind(seq1, seq2):
        raise TypeMismatchError(
            f"First sequence's {what} ({kind_name(seq1)}) does not match "
            f"second sequence's ({kind_name(seq2)}).",
            {"first": seq1, "second": seq2},
        )


def intersect(
    first: Source[V], second: Source[Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Return the elements of ``first`` whose value is identical to some value of ``second``.

    Raises:
        TypeMismatchError: If both sequences are non-empty and of different kinds.
    """
    seq1 = view(first)
    seq2 = view(second)
    _ensure_same_kind(seq1, seq2, "inner type")
    flag = resolve_reindex(reindex, seq1)
    wanted = {tokenize(value) for value in seq2.values()}
    return assemble(((k, v) for k, v in seq1.items() if tokenize(v) in wanted), flag)


def intersect_keys(
    first: Source[V], second: Source[Any], *, reindex: bool | None = None
) -> list[V] | dict[Key, V]:
    """Return the elements of ``first`` whose key also exists in ``second``.

    Raises:
        TypeMismatchError: If both sequences are non-empty and of different kinds.
    """
    seq1 = view(first)
    seq2 = view(second)
    _ensure_same_kind(seq1, seq2, "kind")
    flag = resolve_reindex(reindex, seq1)
    return assemble(((k, v) for k, v in seq1.items() if k in seq2), flag)


def sym_diff(first: Source[V], second: Source[V], by: Comparator | None = None) -> list[V]:
    """Return ``diff(first, second) + diff(second, first)`` as a list.

    Raises:
        TypeMismatchError: If either sequence is a Map.
    """
    seq1 = view(first)
    seq2 = view(second)
    ensure_list(seq1, "first")
    ensure_list(seq2, "second")
    left = [value for _, value in _diff_pairs(seq1, seq2, by)]
    right = [value for _, value in _diff_pairs(seq2, seq1, by)]
    return left + right


def unique(
    source: Source[V],
    by: Callable[..., Any] | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Keep the first element of every group of identical values.

    Args:
        source (Source[V]): Iteration source.
        by (Callable[..., Any] | None): Optional selector; elements whose selected
            values share an identity token are duplicates.
        reindex (bool | None): Output policy.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    select = adapt(by) if by is not None else None
    seen: set[Token] = set()
    kept: list[tuple[Key, V]] = []
    for key, value in seq.items():
        token = tokenize(select(value, key) if select is not None else value)
        if token not in seen:
            seen.add(token)
            kept.append((key, value))
    return assemble(kept, flag)


def duplicates(
    source: Source[V],
    by: Callable[..., Any] | None = None,
    *,
    reindex: bool | None = None,
) -> list[V] | dict[Key, V]:
    """Return the first occurrence of every value that appears more than once."""
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    select = adapt(by) if by is not None else None
    groups: dict[Token, list[Key]] = {}
    for key, value in seq.items():
        token = tokenize(select(value, key) if select is not None else value)
        groups.setdefault(token, []).append(key)
    return assemble(((keys[0], seq[keys[0]]) for keys in groups.values() if len(keys) > 1), flag)
