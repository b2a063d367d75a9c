# topmark:header:start
#
#   project      : KeySeq
#   file         : membership.py
#   file_relpath : src/keyseq/ops/membership.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Membership tests, predicates over whole sequences, and assertions.

Value membership is decided by identity token
([`same`][keyseq.core.tokens.same]), so ``contains([1], True)`` is False.
The ``ensure_*`` functions return None on success and raise otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from keyseq.core.callables import adapt
from keyseq.core.errors import (
    CountMismatchError,
    ExcessKeyError,
    MissingKeyError,
    TypeMismatchError,
)
from keyseq.core.kinds import iter_pairs, view
from keyseq.core.tokens import tokenize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from keyseq.core.kinds import Key, Source
    from keyseq.core.tokens import Token


def _token_set(values: Source[Any]) -> set[Token]:
    return {tokenize(value) for _, value in iter_pairs(values)}


def _value_tokens(source: Source[Any]) -> list[Token]:
    return [tokenize(value) for _, value in iter_pairs(source)]


def contains(source: Source[Any], value: Any) -> bool:
    """Return True if ``source`` holds a value identical to ``value``."""
    token = tokenize(value)
    return any(tokenize(item) == token for _, item in iter_pairs(source))


def does_not_contain(source: Source[Any], value: Any) -> bool:
    return not contains(source, value)


def contains_all(source: Source[Any], values: Source[Any]) -> bool:
    """Return True if every one of ``values`` is found in ``source`` (vacuously True)."""
    wanted = _token_set(values)
    if not wanted:
        return True
    for _, item in iter_pairs(source):
        wanted.discard(tokenize(item))
        if not wanted:
            return True
    return False


def contains_any(source: Source[Any], values: Source[Any]) -> bool:
    wanted = _token_set(values)
    return any(tokenize(item) in wanted for _, item in iter_pairs(source))


def contains_none(source: Source[Any], values: Source[Any]) -> bool:
    return not contains_any(source, values)


def contains_key(source: Source[Any], key: Key) -> bool:
    return key in view(source)


def does_not_contain_key(source: Source[Any], key: Key) -> bool:
    return not contains_key(source, key)


def contains_all_keys(source: Source[Any], keys: Iterable[Key]) -> bool:
    seq = view(source)
    return all(key in seq for key in keys)


def contains_any_keys(source: Source[Any], keys: Iterable[Key]) -> bool:
    seq = view(source)
    return any(key in seq for key in keys)


def contains_slice(source: Source[Any], values: Source[Any]) -> bool:
    """Return True if ``values`` occur contiguously, in order, inside ``source``.

    Keys are ignored. An empty ``values`` is always contained. When no contiguous
    run matches, the two sequences are compared as wholes.
    """
    haystack = _value_tokens(source)
    needle = _value_tokens(values)
    if not needle:
        return True
    width = len(needle)
    for start in range(len(haystack) - width + 1):
        if haystack[start : start + width] == needle:
            return True
    return haystack == needle


def starts_with(source: Source[Any], values: Source[Any]) -> bool:
    """Return True if the first values of ``source`` are ``values`` (keys ignored)."""
    needle = _value_tokens(values)
    index = 0
    for _, item in iter_pairs(source):
        if index == len(needle):
            break
        if tokenize(item) != needle[index]:
            return False
        index += 1
    return index >= len(needle)


def ends_with(source: Source[Any], values: Source[Any]) -> bool:
    """Return True if the last values of ``source`` are ``values`` (keys ignored)."""
    haystack = _value_tokens(source)
    needle = _value_tokens(values)
    if len(needle) > len(haystack):
        return False
    return haystack[len(haystack) - len(needle) :] == needle


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def satisfy_all(source: Source[Any], condition: Callable[..., Any]) -> bool:
    """Return True if every element satisfies ``condition`` (vacuously True)."""
    cond = adapt(condition)
    return all(cond(value, key) for key, value in iter_pairs(source))


def satisfy_any(source: Source[Any], condition: Callable[..., Any]) -> bool:
    cond = adapt(condition)
    return any(cond(value, key) for key, value in iter_pairs(source))


def satisfy_none(source: Source[Any], condition: Callable[..., Any]) -> bool:
    return not satisfy_any(source, condition)


def satisfy_once(source: Source[Any], condition: Callable[..., Any]) -> bool:
    """Return True if exactly one element satisfies ``condition``."""
    cond = adapt(condition)
    satisfied = False
    for key, value in iter_pairs(source):
        if cond(value, key):
            if satisfied:
                return False
            satisfied = True
    return satisfied


# ---------------------------------------------------------------------------
# Assertions
# ---------------------------------------------------------------------------


def ensure_count_is(source: Source[Any], size: int) -> None:
    """Raise ``CountMismatchError`` unless ``source`` holds exactly ``size`` elements."""
    actual = len(view(source))
    if actual != size:
        raise CountMismatchError(
            f"Expected count: {size}, Got: {actual}.",
            {"source": source, "count": size},
        )


def ensure_element_type(source: Source[Any], cls: type | tuple[type, ...]) -> None:
    """Raise ``TypeMismatchError`` at the first value that is not an instance of ``cls``."""
    expected = " | ".join(c.__name__ for c in cls) if isinstance(cls, tuple) else cls.__name__
    for key, value in iter_pairs(source):
        if isinstance(value, cls):
            continue
        given = type(value).__name__
        raise TypeMismatchError(
            f"Expected type: {expected}, Got: {given} at {key}.",
            {"source": source, "type": cls, "got": given},
        )


def ensure_exact_keys(source: Source[Any], keys: Iterable[Key]) -> None:
    """Assert that ``source`` holds exactly ``keys`` (order ignored).

    Raises:
        ExcessKeyError: If ``source`` holds keys not listed (checked first).
        MissingKeyError: If listed keys are absent.
    """
    present = list(view(source).keys())
    expected = list(keys)
    expected_set = set(expected)
    excess = [key for key in present if key not in expected_set]
    if excess:
        raise ExcessKeyError(excess, {"source": source, "keys": expected, "excess": excess})
    present_set = set(present)
    missing = [key for key in expected if key not in present_set]
    if missing:
        raise MissingKeyError(missing, {"source": source, "keys": expected, "missing": missing})
