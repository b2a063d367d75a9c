# topmark:header:start
#
#   project      : KeySeq
#   file         : randomizer.py
#   file_relpath : src/keyseq/core/randomizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pluggable randomness for sampling and shuffling.

Algorithms never call the ``random`` module directly: they receive a
[`Randomizer`][keyseq.core.randomizer.Randomizer] (explicitly, or the process-wide
default returned by
[`get_default_randomizer`][keyseq.core.randomizer.get_default_randomizer]).

The default is constructed lazily on first use and can be replaced at any time,
e.g. with a seeded [`StdRandomizer`][keyseq.core.randomizer.StdRandomizer] for
reproducible runs. It is never reset automatically.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from keyseq.config.logging import KeySeqLogger, get_logger
from keyseq.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: KeySeqLogger = get_logger(__name__)

K = TypeVar("K")


@runtime_checkable
class Randomizer(Protocol):
    """Source of uniform randomness consumed by the sampling algorithms."""

    def integer(self, minimum: int, maximum: int) -> int:
        """Return a uniformly distributed integer in ``[minimum, maximum]``."""
        ...  # pragma: no cover - protocol

    def choose_keys(self, keys: Sequence[K], count: int) -> list[K]:
        """Return ``count`` distinct keys, in the order they appear in ``keys``."""
        ...  # pragma: no cover - protocol

    def permute(self, keys: Sequence[K]) -> list[K]:
        """Return a uniformly random permutation of ``keys``."""
        ...  # pragma: no cover - protocol


def ensure_population(population: int, count: int) -> None:
    """Validate a without-replacement request before any randomness is consumed.

    Raises:
        InvalidArgumentError: If ``count`` is negative or exceeds ``population``.
    """
    if count < 0:
        raise InvalidArgumentError(
            f"Expected: count >= 0. Got: {count}.",
            {"count": count},
        )
    if count > population:
        raise InvalidArgumentError(
            f"Cannot choose {count} distinct keys from a population of {population}.",
            {"count": count, "population": population},
        )


class StdRandomizer:
    """[`Randomizer`][keyseq.core.randomizer.Randomizer] backed by ``random.Random``.

    Args:
        seed (int | None): Optional seed for reproducible sequences.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed: int | None = seed
        self._rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r})"

    def integer(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            raise InvalidArgumentError(
                f"Expected: minimum <= maximum. Got: {minimum} > {maximum}.",
                {"minimum": minimum, "maximum": maximum},
            )
        return self._rng.randint(minimum, maximum)

    def choose_keys(self, keys: Sequence[K], count: int) -> list[K]:
        ensure_population(len(keys), count)
        picked = sorted(self._rng.sample(range(len(keys)), count))
        return [keys[i] for i in picked]

    def permute(self, keys: Sequence[K]) -> list[K]:
        result = list(keys)
        self._rng.shuffle(result)
        return result


_default: Randomizer | None = None


def get_default_randomizer() -> Randomizer:
    """Return the process-wide randomizer, constructing it on first use."""
    global _default
    if _default is None:
        _default = StdRandomizer()
        logger.debug("constructed default randomizer %r", _default)
    return _default


def set_default_randomizer(randomizer: Randomizer | None) -> None:
    """Replace the process-wide randomizer.

    Args:
        randomizer (Randomizer | None): The new default, or None to fall back to a
            lazily constructed ``StdRandomizer``.
    """
    global _default
    logger.debug("default randomizer replaced with %r", randomizer)
    _default = randomizer


def resolve_randomizer(randomizer: Randomizer | None) -> Randomizer:
    """Return ``randomizer`` or the process-wide default."""
    return randomizer if randomizer is not None else get_default_randomizer()
