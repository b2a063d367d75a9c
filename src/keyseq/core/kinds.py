# topmark:header:start
#
#   project      : KeySeq
#   file         : kinds.py
#   file_relpath : src/keyseq/core/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequence kind classification and the reindex policy.

An *ordered key-value sequence* is a finite run of ``(key, value)`` pairs with unique
``int | str`` keys. Its *kind* is derived, never stored:

- **List**: the keys, read in iteration order, are exactly ``0, 1, ..., n-1``
  (the empty sequence is a List);
- **Map**: anything else.

Python renditions:

- a ``list``/``tuple`` (or any plain iterable) is walked with ``enumerate`` and is
  always a List;
- a ``Mapping`` (or any object exposing ``items()``, such as
  [`LazySequence`][keyseq.lazy.pipeline.LazySequence]) contributes its own pairs;
- strings and bytes are values, not sequences, and are rejected.

Operations that accept ``reindex: bool | None`` decide List-vs-Map **once, from the
input**, via [`resolve_reindex`][keyseq.core.kinds.resolve_reindex], then build the
output with [`assemble`][keyseq.core.kinds.assemble]: a ``list`` when reindexing, a
``dict`` otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any, Protocol, TypeAlias, TypeVar, Union, runtime_checkable

from keyseq.core.errors import InvalidArgumentError, InvalidKeyError

V = TypeVar("V")
V_co = TypeVar("V_co", covariant=True)

Key: TypeAlias = Union[int, str]


@runtime_checkable
class PairSource(Protocol[V_co]):
    """Anything that can walk its own ``(key, value)`` pairs front to back."""

    def items(self) -> Iterable[tuple[Key, V_co]]: ...  # pragma: no cover - protocol


Source: TypeAlias = Union[PairSource[V], Iterable[V]]


class SequenceKind(str, Enum):
    """Derived classification of an ordered key-value sequence."""

    LIST = "list"
    MAP = "map"


_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def _reject_text(source: object) -> None:
    if isinstance(source, _TEXT_TYPES):
        raise InvalidArgumentError(
            f"Expected an iterable source, got {type(source).__name__}.",
            {"source": source},
        )


def is_nested(value: object) -> bool:
    """Return True if ``value`` is itself a sequence (``list``, ``tuple``, mapping, pair source)."""
    return isinstance(value, (list, tuple, Mapping, PairSource))


def iter_pairs(source: Source[V]) -> Iterator[tuple[Key, V]]:
    """Walk ``source`` once, yielding ``(key, value)`` pairs.

    Args:
        source (Source[V]): A mapping, pair source, or plain iterable.

    Returns:
        Iterator[tuple[Key, V]]: Lazy pair iterator.

    Raises:
        InvalidArgumentError: If ``source`` is a ``str``/``bytes`` value.
    """
    _reject_text(source)
    if isinstance(source, PairSource):
        return iter(source.items())
    return enumerate(source)


def materialize(source: Source[V]) -> dict[Key, V]:
    """Return a new, independently owned ``dict`` holding the pairs of ``source``.

    A later pair with an already seen key replaces the earlier value.
    """
    _reject_text(source)
    if isinstance(source, dict):
        return dict(source)
    return dict(iter_pairs(source))


def view(source: Source[V]) -> Mapping[Key, V]:
    """Return ``source`` itself when it already is a mapping, else a materialized copy.

    Use this for read-only access; callers must not mutate the result.
    """
    if isinstance(source, Mapping):
        return source
    return materialize(source)


def is_list_keys(keys: Iterable[Any]) -> bool:
    """Return True if ``keys`` are exactly ``0..n-1`` in order."""
    for expected, key in enumerate(keys):
        if type(key) is not int or key != expected:
            return False
    return True


def classify(source: Source[Any]) -> SequenceKind:
    """Classify ``source`` as List or Map.

    ``list`` and ``tuple`` are answered in O(1). Mappings are scanned; other
    iterables are materialized first (one-shot iterators are consumed).
    """
    if isinstance(source, (list, tuple)):
        return SequenceKind.LIST
    keys: Iterable[Any] = view(source).keys()
    return SequenceKind.LIST if is_list_keys(keys) else SequenceKind.MAP


def is_list(source: Source[Any]) -> bool:
    """Return True if ``source`` is List kind (the empty sequence is a List)."""
    return classify(source) is SequenceKind.LIST


def is_map(source: Source[Any]) -> bool:
    """Return True if ``source`` is Map kind.

    The empty sequence answers True here as well as in
    [`is_list`][keyseq.core.kinds.is_list], so both predicates act as no-ops on it.
    """
    seq = view(source)
    if len(seq) == 0:
        return True
    return not is_list_keys(seq.keys())


def kind_name(source: Source[Any]) -> str:
    return classify(source).value


def resolve_reindex(reindex: bool | None, materialized: Mapping[Key, Any]) -> bool:
    """Resolve the tri-state reindex policy against the input's kind.

    Args:
        reindex (bool | None): ``True`` forces a List, ``False`` preserves keys,
            ``None`` inherits the kind of ``materialized``.
        materialized (Mapping[Key, Any]): The input, already materialized. The decision
            is taken here, before the caller's algorithm runs.

    Returns:
        bool: Whether the output must be renumbered ``0..m-1``.
    """
    if reindex is None:
        return is_list_keys(materialized.keys())
    return reindex


def assemble(pairs: Iterable[tuple[Key, V]], reindex: bool) -> list[V] | dict[Key, V]:
    """Build an output sequence from ``pairs``: a ``list`` when reindexing, else a ``dict``."""
    if reindex:
        return [value for _, value in pairs]
    return dict(pairs)


def is_different_kind(first: Mapping[Key, Any], second: Mapping[Key, Any]) -> bool:
    """Return True if both sequences are non-empty and of different kinds."""
    if len(first) == 0 or len(second) == 0:
        return False
    return is_list_keys(first.keys()) != is_list_keys(second.keys())


def ensure_key(value: object) -> Key:
    """Return ``value`` if it can be used as a key, else raise ``InvalidKeyError``."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidKeyError(
            f"Expected: key of type int|str. {type(value).__name__} given.",
            {"key": value},
        )
    return value


def next_index(seq: Mapping[Key, Any]) -> int:
    """Return the integer key an appended value receives (largest int key + 1, or 0)."""
    int_keys = [k for k in seq if type(k) is int]
    return max(int_keys) + 1 if int_keys else 0
