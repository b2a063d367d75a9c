# topmark:header:start
#
#   project      : KeySeq
#   file         : reductions.py
#   file_relpath : src/keyseq/ops/reductions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Aggregations: arithmetic totals, extremes, ratios and folds.

Arithmetic reductions (``sum``, ``product``, ``average``) accept numbers only.
``bool`` is not a number here and nothing is coerced: any other element raises
[`TypeMismatchError`][keyseq.core.errors.TypeMismatchError]. A NaN element (or a
NaN ranking value in ``min``/``max``) raises
[`InvalidElementError`][keyseq.core.errors.InvalidElementError].

Accumulator callbacks receive ``(carry, value, key)`` when they accept three
positional parameters, ``(carry, value)`` otherwise.
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.core.callables import adapt, adapt_reducer
from keyseq.core.errors import InvalidElementError, TypeMismatchError
from keyseq.core.kinds import iter_pairs
from keyseq.ops.utils import empty_error

if TYPE_CHECKING:
    from keyseq.core.kinds import Source

V = TypeVar("V")
D = TypeVar("D")
R = TypeVar("R")


def _is_nan(value: Any) -> bool:
    return isinstance(value, numbers.Number) and value != value


def _numbers(source: Source[Any]) -> list[Any]:
    values: list[Any] = []
    for key, value in iter_pairs(source):
        if isinstance(value, bool) or not isinstance(value, numbers.Number):
            raise TypeMismatchError(
                f"Expected a number at key {key!r}. Got: {type(value).__name__}.",
                {"source": source, "key": key, "value": value},
            )
        if _is_nan(value):
            raise InvalidElementError(
                "Sequence cannot contain NaN.",
                {"source": source, "key": key},
            )
        values.append(value)
    return values


def _checked(result: Any, source: Source[Any]) -> Any:
    if _is_nan(result):
        raise InvalidElementError(
            "Result is NaN.",
            {"source": source, "result": result},
        )
    return result


def sum(source: Source[Any]) -> Any:
    """Return the total of all values (``0`` when empty).

    Raises:
        InvalidElementError: If an element or the running total is NaN
            (``inf + -inf``).
    """
    total: Any = 0
    for value in _numbers(source):
        total = _checked(total + value, source)
    return total


def product(source: Source[Any]) -> Any:
    """Return the product of all values (``1`` when empty).

    Raises:
        InvalidElementError: If an element or the running product is NaN
            (``inf * 0``).
    """
    result: Any = 1
    for value in _numbers(source):
        result = _checked(result * value, source)
    return result


def average_or_none(source: Source[Any]) -> float | None:
    """Return the arithmetic mean, or None when empty."""
    values = _numbers(source)
    if not values:
        return None
    return _checked(sum(values) / len(values), source)


def average(source: Source[Any]) -> float:
    """Return the arithmetic mean.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
    """
    result = average_or_none(source)
    if result is None:
        raise empty_error({"source": source})
    return result


def _extremes(
    source: Source[V],
    by: Callable[..., Any] | None,
) -> tuple[V, V] | None:
    """Return ``(smallest, largest)`` by ranking value, first occurrence winning ties."""
    rank = adapt(by) if by is not None else (lambda value, key: value)
    found = False
    low_rank: Any = None
    high_rank: Any = None
    low: Any = None
    high: Any = None
    for key, value in iter_pairs(source):
        result = rank(value, key)
        if _is_nan(result):
            raise InvalidElementError(
                "Sequence cannot contain NaN.",
                {"source": source, "key": key, "result": result},
            )
        try:
            if not found or result < low_rank:
                low_rank, low = result, value
            if not found or result > high_rank:
                high_rank, high = result, value
        except TypeError as exc:
            raise TypeMismatchError(
                f"Elements cannot be compared: {exc}",
                {"source": source, "key": key, "value": value},
            ) from exc
        found = True
    return (low, high) if found else None


def min_or_none(source: Source[V], by: Callable[..., Any] | None = None) -> V | None:
    found = _extremes(source, by)
    return None if found is None else found[0]


def min(source: Source[V], by: Callable[..., Any] | None = None) -> V:
    """Return the smallest value (ranked by ``by(value, key)`` when given).

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
        InvalidElementError: If a ranking value is NaN.
    """
    found = _extremes(source, by)
    if found is None:
        raise empty_error({"source": source, "by": by})
    return found[0]


def max_or_none(source: Source[V], by: Callable[..., Any] | None = None) -> V | None:
    found = _extremes(source, by)
    return None if found is None else found[1]


def max(source: Source[V], by: Callable[..., Any] | None = None) -> V:
    """Return the largest value (ranked by ``by(value, key)`` when given).

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
        InvalidElementError: If a ranking value is NaN.
    """
    found = _extremes(source, by)
    if found is None:
        raise empty_error({"source": source, "by": by})
    return found[1]


def min_max_or_none(
    source: Source[V], by: Callable[..., Any] | None = None
) -> dict[str, V] | None:
    found = _extremes(source, by)
    return None if found is None else {"min": found[0], "max": found[1]}


def min_max(source: Source[V], by: Callable[..., Any] | None = None) -> dict[str, V]:
    """Return ``{"min": smallest, "max": largest}`` in a single pass.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
    """
    found = min_max_or_none(source, by)
    if found is None:
        raise empty_error({"source": source, "by": by})
    return found


def ratio_or_none(source: Source[Any], condition: Callable[..., Any]) -> float | None:
    """Return the share of elements satisfying ``condition``, or None when empty."""
    cond = adapt(condition)
    total = 0
    hits = 0
    for key, value in iter_pairs(source):
        total += 1
        if cond(value, key):
            hits += 1
    if total == 0:
        return None
    return hits / total


def ratio(source: Source[Any], condition: Callable[..., Any]) -> float:
    """Return the share of elements satisfying ``condition``.

    ``ratio([1, 2, 3, 4], lambda v: v > 1)`` is ``0.75``.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
    """
    result = ratio_or_none(source, condition)
    if result is None:
        raise empty_error({"source": source, "condition": condition})
    return result


def _reduce(source: Source[V], callback: Callable[..., Any]) -> tuple[bool, Any]:
    step = adapt_reducer(callback)
    started = False
    carry: Any = None
    for key, value in iter_pairs(source):
        if not started:
            carry, started = value, True
        else:
            carry = step(carry, value, key)
    return started, carry


def reduce_or(source: Source[V], callback: Callable[..., Any], default: D) -> Any | D:
    """Reduce using the first value as the seed; return ``default`` when empty."""
    started, carry = _reduce(source, callback)
    return carry if started else default


def reduce_or_none(source: Source[V], callback: Callable[..., Any]) -> Any | None:
    return reduce_or(source, callback, None)


def reduce(source: Source[V], callback: Callable[..., Any]) -> Any:
    """Reduce using the first value as the seed.

    ``reduce([1, 2, 3], lambda carry, v: carry + v)`` is ``6``.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
    """
    started, carry = _reduce(source, callback)
    if not started:
        raise empty_error({"source": source, "callback": callback})
    return carry


def fold(source: Source[V], initial: R, callback: Callable[..., R]) -> R:
    """Reduce starting from ``initial``; an empty source returns ``initial``."""
    step = adapt_reducer(callback)
    carry = initial
    for key, value in iter_pairs(source):
        carry = step(carry, value, key)
    return carry
