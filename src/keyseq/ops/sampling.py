# topmark:header:start
#
#   project      : KeySeq
#   file         : sampling.py
#   file_relpath : src/keyseq/ops/sampling.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Random sampling and shuffling.

Every function takes an optional ``randomizer``; when omitted, the process-wide
default from [`get_default_randomizer`][keyseq.core.randomizer.get_default_randomizer]
is used. Pass a seeded [`StdRandomizer`][keyseq.core.randomizer.StdRandomizer] for
reproducible results.

Sampling *without* replacement picks distinct keys first and permutes them
afterwards, so both the selection and the order are random. Sampling *with*
replacement draws ``amount`` independent positions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from keyseq.core.errors import InvalidArgumentError
from keyseq.core.kinds import assemble, resolve_reindex, view
from keyseq.core.randomizer import resolve_randomizer
from keyseq.ops.utils import empty_error

if TYPE_CHECKING:
    from keyseq.core.kinds import Key, Source
    from keyseq.core.randomizer import Randomizer

V = TypeVar("V")
D = TypeVar("D")


def sample_keys(
    source: Source[Any],
    amount: int,
    replace: bool = False,
    randomizer: Randomizer | None = None,
) -> list[Key]:
    """Return ``amount`` randomly chosen keys.

    Args:
        source (Source[Any]): Iteration source.
        amount (int): Number of keys to return.
        replace (bool): Allow the same key to be picked more than once.
        randomizer (Randomizer | None): Source of randomness.

    Returns:
        list[Key]: The chosen keys, in random order.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
        InvalidArgumentError: If ``amount`` is negative, or exceeds the number of
            elements while sampling without replacement.
    """
    keys = list(view(source).keys())
    size = len(keys)
    if size == 0:
        raise empty_error({"source": source, "randomizer": randomizer})
    if amount < 0 or (not replace and amount > size):
        raise InvalidArgumentError(
            f"Expected: 0 <= amount <= {size}. Got: {amount}.",
            {"source": source, "amount": amount, "replace": replace},
        )
    if amount == 0:
        return []
    rng = resolve_randomizer(randomizer)
    if not replace:
        return rng.permute(rng.choose_keys(keys, amount))
    return [keys[rng.integer(0, size - 1)] for _ in range(amount)]


def sample_key_or_none(source: Source[Any], randomizer: Randomizer | None = None) -> Key | None:
    seq = view(source)
    if len(seq) == 0:
        return None
    return sample_keys(seq, 1, False, randomizer)[0]


def sample_key(source: Source[Any], randomizer: Randomizer | None = None) -> Key:
    """Return one random key.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
    """
    seq = view(source)
    if len(seq) == 0:
        raise empty_error({"source": source, "randomizer": randomizer})
    return sample_keys(seq, 1, False, randomizer)[0]


def sample(source: Source[V], randomizer: Randomizer | None = None) -> V:
    """Return one random value.

    Raises:
        EmptyNotAllowedError: If ``source`` is empty.
    """
    seq = view(source)
    return seq[sample_key(seq, randomizer)]


def sample_or(source: Source[V], default: D, randomizer: Randomizer | None = None) -> V | D:
    seq = view(source)
    if len(seq) == 0:
        return default
    return seq[sample_key(seq, randomizer)]


def sample_or_none(source: Source[V], randomizer: Randomizer | None = None) -> V | None:
    return sample_or(source, None, randomizer)


def sample_many(
    source: Source[V],
    amount: int,
    replace: bool = False,
    randomizer: Randomizer | None = None,
) -> list[V]:
    """Return ``amount`` random values (see [`sample_keys`][keyseq.ops.sampling.sample_keys])."""
    seq = view(source)
    return [seq[key] for key in sample_keys(seq, amount, replace, randomizer)]


def shuffle(
    source: Source[V],
    *,
    reindex: bool | None = None,
    randomizer: Randomizer | None = None,
) -> list[V] | dict[Key, V]:
    """Return the elements in a random order.

    A Map keeps its keys (only the iteration order changes); a List is renumbered.
    """
    seq = view(source)
    flag = resolve_reindex(reindex, seq)
    order = resolve_randomizer(randomizer).permute(list(seq.keys()))
    return assemble(((key, seq[key]) for key in order), flag)
