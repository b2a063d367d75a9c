# topmark:header:start
#
#   project      : KeySeq
#   file         : mutation.py
#   file_relpath : src/keyseq/ops/mutation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-place mutation of a caller-owned ``list`` or ``dict``.

These are the only operations with side effects: they change ``target`` itself
(its identity is kept) and take effect at the point of call.

Kind rules:

- a ``list`` target is always a List; asking it to keep gapped keys
  (``reindex=False``) raises
  [`TypeMismatchError`][keyseq.core.errors.TypeMismatchError];
- a ``dict`` target that is List kind is renumbered after removals by default,
  so it stays a List; a Map keeps its keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, Union

from keyseq.config.logging import KeySeqLogger, get_logger
from keyseq.core.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    InvalidKeyError,
    TypeMismatchError,
)
from keyseq.core.kinds import (
    ensure_key,
    is_different_kind,
    is_list_keys,
    kind_name,
    materialize,
    next_index,
    resolve_reindex,
)
from keyseq.core.tokens import same
from keyseq.ops.utils import empty_error, ensure_positive

if TYPE_CHECKING:
    from collections.abc import Iterable

    from keyseq.core.kinds import Key, Source

logger: KeySeqLogger = get_logger(__name__)

D = TypeVar("D")

Target = Union[list, dict]


def _pairs_of(target: Target) -> list[tuple[Key, Any]]:
    if isinstance(target, list):
        return list(enumerate(target))
    if isinstance(target, dict):
        return list(target.items())
    raise InvalidArgumentError(
        f"Expected a list or dict target. Got: {type(target).__name__}.",
        {"target": target},
    )


def _resolve(target: Target, reindex: bool | None) -> bool:
    """Resolve the reindex policy for ``target`` before it is changed."""
    if isinstance(target, list):
        if reindex is False:
            raise TypeMismatchError(
                "A list target cannot preserve keys; use a dict target instead.",
                {"target": target},
            )
        return True
    _pairs_of(target)
    return resolve_reindex(reindex, target)


def _write_back(target: Target, pairs: Iterable[tuple[Key, Any]], reindex: bool) -> None:
    if isinstance(target, list):
        target[:] = [value for _, value in pairs]
    else:
        rebuilt = dict(enumerate(v for _, v in pairs)) if reindex else dict(pairs)
        target.clear()
        target.update(rebuilt)
    logger.trace("rewrote %s target in place (%d elements)", type(target).__name__, len(target))


def clear(target: Target) -> None:
    """Remove every element."""
    _pairs_of(target)
    target.clear()


def reindex(target: Target) -> None:
    """Renumber the keys of ``target`` to ``0..n-1`` in place (a no-op on a List)."""
    pairs = _pairs_of(target)
    if is_list_keys(k for k, _ in pairs):
        return
    _write_back(target, pairs, True)


def insert_at(
    target: Target,
    index: int,
    values: Source[Any],
    *,
    reindex: bool | None = None,
    overwrite: bool = False,
) -> None:
    """Insert ``values`` at position ``index``.

    A negative ``index`` counts from the end with an offset of one: ``-1`` inserts
    after the last element, ``-2`` before the last element.

    Raises:
        TypeMismatchError: If ``target`` and ``values`` are of different kinds.
        DuplicateKeyError: If keys are kept, some already exist, and ``overwrite``
            is False.
    """
    pairs = _pairs_of(target)
    inserting = materialize(values)
    if index < 0:
        index = max(0, len(pairs) + index + 1)
    current = dict(pairs)
    if is_different_kind(current, inserting):
        raise TypeMismatchError(
            f"Values' kind ({kind_name(inserting)}) does not match "
            f"target's ({kind_name(current)}).",
            {"target": target, "index": index, "values": inserting, "overwrite": overwrite},
        )
    flag = _resolve(target, reindex)
    if not flag:
        clashes = [key for key in inserting if key in current]
        if clashes and not overwrite:
            raise DuplicateKeyError(
                f"Tried to overwrite existing key: {clashes[0]}.",
                {"target": target, "index": index, "values": inserting, "key": clashes[0]},
            )
        pairs = [(k, v) for k, v in pairs if k not in inserting]
    _write_back(target, pairs[:index] + list(inserting.items()) + pairs[index:], flag)


def push(target: Target, *values: Any) -> None:
    """Append ``values`` to a List target.

    Raises:
        TypeMismatchError: If ``target`` is a Map.
    """
    pairs = _pairs_of(target)
    if not is_list_keys(k for k, _ in pairs):
        raise TypeMismatchError(
            "Target must be a list, map given.",
            {"target": target, "values": values},
        )
    if isinstance(target, list):
        target.extend(values)
    else:
        for value in values:
            target[next_index(target)] = value


def pop_or_none(target: Target) -> Any | None:
    """Remove and return the last value, or None when empty."""
    pairs = _pairs_of(target)
    if not pairs:
        return None
    return target.pop() if isinstance(target, list) else target.popitem()[1]


def pop(target: Target) -> Any:
    """Remove and return the last value.

    Raises:
        EmptyNotAllowedError: If ``target`` is empty.
    """
    if len(_pairs_of(target)) == 0:
        raise empty_error({"target": target})
    return pop_or_none(target)


def pop_many(target: Target, amount: int) -> list[Any] | dict[Key, Any]:
    """Remove and return up to ``amount`` elements from the end.

    Raises:
        InvalidArgumentError: If ``amount < 1``.
    """
    ensure_positive(amount, "amount")
    pairs = _pairs_of(target)
    flag = _resolve(target, None)
    cut = max(0, len(pairs) - amount)
    _write_back(target, pairs[:cut], flag)
    removed = pairs[cut:]
    return [v for _, v in removed] if flag else dict(removed)


def _shift(target: Target, amount: int) -> list[tuple[Key, Any]]:
    pairs = _pairs_of(target)
    flag = _resolve(target, None)
    _write_back(target, pairs[amount:], flag)
    return pairs[:amount]


def shift_or_none(target: Target) -> Any | None:
    """Remove and return the first value, or None when empty."""
    removed = _shift(target, 1)
    return removed[0][1] if removed else None


def shift(target: Target) -> Any:
    """Remove and return the first value.

    Raises:
        EmptyNotAllowedError: If ``target`` is empty.
    """
    if len(_pairs_of(target)) == 0:
        raise empty_error({"target": target})
    return _shift(target, 1)[0][1]


def shift_many(target: Target, amount: int) -> list[Any] | dict[Key, Any]:
    """Remove and return up to ``amount`` elements from the front.

    Raises:
        InvalidArgumentError: If ``amount < 1``.
    """
    ensure_positive(amount, "amount")
    flag = _resolve(target, None)
    removed = _shift(target, amount)
    return [v for _, v in removed] if flag else dict(removed)


def _pull(target: Target, key: Key, reindex: bool | None) -> tuple[Key, Any] | None:
    pairs = _pairs_of(target)
    flag = _resolve(target, reindex)
    current = dict(pairs)
    if key not in current:
        return None
    found = (key, current[key])
    _write_back(target, [(k, v) for k, v in pairs if k != key], flag)
    return found


def pull(target: Target, key: Key, *, reindex: bool | None = None) -> Any:
    """Remove the element stored under ``key`` and return its value.

    Raises:
        InvalidKeyError: If ``key`` does not exist.
    """
    found = _pull(target, key, reindex)
    if found is None:
        raise InvalidKeyError(
            f'Tried to pull undefined key "{key}".',
            {"target": target, "key": key},
        )
    return found[1]


def pull_or(target: Target, key: Key, default: D, *, reindex: bool | None = None) -> Any | D:
    found = _pull(target, key, reindex)
    return default if found is None else found[1]


def pull_or_none(target: Target, key: Key, *, reindex: bool | None = None) -> Any | None:
    return pull_or(target, key, None, reindex=reindex)


def pull_many(
    target: Target,
    keys: Iterable[Key],
    *,
    reindex: bool | None = None,
) -> dict[Key, Any]:
    """Remove the elements stored under ``keys``; return them keyed as they were.

    Absent keys are ignored.
    """
    pairs = _pairs_of(target)
    flag = _resolve(target, reindex)
    current = dict(pairs)
    pulled = {key: current[key] for key in keys if key in current}
    _write_back(target, [(k, v) for k, v in pairs if k not in pulled], flag)
    return pulled


def set(target: Target, key: Key, value: Any) -> None:
    """Store ``value`` under ``key`` (insert or overwrite).

    On a ``list`` target, ``key`` must be an existing index or ``len(target)``.

    Raises:
        InvalidKeyError: If ``key`` is not ``int | str``.
        TypeMismatchError: If a ``list`` target would stop being a List.
    """
    ensure_key(key)
    _pairs_of(target)
    if isinstance(target, dict):
        target[key] = value
        return
    if isinstance(key, int) and 0 <= key < len(target):
        target[key] = value
    elif key == len(target):
        target.append(value)
    else:
        raise TypeMismatchError(
            f"Key: {key!r} cannot be set on a list of size {len(target)}.",
            {"target": target, "key": key},
        )


def set_if_exists(target: Target, key: Key, value: Any) -> bool:
    """Overwrite the value under ``key`` only if it exists; return whether it did."""
    if key in dict(_pairs_of(target)):
        set(target, key, value)
        return True
    return False


def set_if_not_exists(target: Target, key: Key, value: Any) -> bool:
    """Insert ``value`` under ``key`` only if absent; return whether it was inserted."""
    if key in dict(_pairs_of(target)):
        return False
    set(target, key, value)
    return True


def remove(
    target: Target,
    value: Any,
    limit: int | None = None,
    *,
    reindex: bool | None = None,
) -> list[Key]:
    """Remove elements identical to ``value``, at most ``limit`` of them.

    Returns:
        list[Key]: The keys the removed elements had.
    """
    if limit is not None and limit < 0:
        raise InvalidArgumentError(f"Expected: limit >= 0. Got: {limit}.", {"limit": limit})
    pairs = _pairs_of(target)
    flag = _resolve(target, reindex)
    removed: list[Key] = []
    kept: list[tuple[Key, Any]] = []
    for key, item in pairs:
        if (limit is None or len(removed) < limit) and same(item, value):
            removed.append(key)
        else:
            kept.append((key, item))
    if removed:
        _write_back(target, kept, flag)
        logger.debug("removed %d element(s)", len(removed))
    return removed
