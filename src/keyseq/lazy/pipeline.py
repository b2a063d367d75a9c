# topmark:header:start
#
#   project      : KeySeq
#   file         : pipeline.py
#   file_relpath : src/keyseq/lazy/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chainable lazy sequences.

[`LazySequence`][keyseq.lazy.pipeline.LazySequence] composes the steps of
[`keyseq.lazy.steps`][keyseq.lazy.steps] without materializing anything in between.
Each chaining method returns a *new* ``LazySequence``; nothing runs until a terminal
method (``to_list``, ``to_dict``, ``collect``) or plain iteration pulls elements.

Example:
    ```python
    from keyseq.lazy import LazySequence

    evens = LazySequence(range(10)).take_if(lambda v: v % 2 == 0).map(lambda v: v * 10)
    assert evens.to_list() == [0, 20, 40, 60, 80]
    assert evens.take_first(2).to_dict() == {0: 0, 2: 20}
    ```

Each pull re-runs the whole chain from the source. Built on a one-shot iterator,
a ``LazySequence`` can therefore be consumed once only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from keyseq.config.logging import KeySeqLogger, get_logger
from keyseq.core.kinds import V, assemble, is_list_keys, iter_pairs
from keyseq.lazy import steps

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from keyseq.core.kinds import Key, Source

logger: KeySeqLogger = get_logger(__name__)

R = TypeVar("R")


class LazySequence(Generic[V]):
    """Immutable, chainable wrapper around a pair producer.

    Args:
        source (Source[V]): Any iteration source, including another ``LazySequence``.
    """

    def __init__(self, source: Source[V]) -> None:
        self._producer: Callable[[], Iterator[tuple[Key, V]]] = lambda: iter_pairs(source)

    @classmethod
    def _from_producer(cls, producer: Callable[[], Iterator[tuple[Key, Any]]]) -> LazySequence[Any]:
        seq: LazySequence[Any] = cls.__new__(cls)
        seq._producer = producer
        return seq

    def _with_step(
        self,
        step: Callable[..., Iterator[tuple[Key, Any]]],
        *args: Any,
        **kwargs: Any,
    ) -> LazySequence[Any]:
        logger.trace("chaining step %s", step.__name__)
        # validate arguments now rather than on first pull
        step(iter(()), *args, **kwargs)
        parent = self
        return self._from_producer(lambda: step(parent, *args, **kwargs))

    # --------- iteration ----------

    def items(self) -> Iterator[tuple[Key, V]]:
        """Run the chain and return its ``(key, value)`` pairs."""
        return self._producer()

    def __iter__(self) -> Iterator[V]:
        for _, value in self._producer():
            yield value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<lazy>)"

    # --------- chainable steps (lazy) ----------

    def slice(
        self, offset: int, length: int | None = None, *, reindex: bool = False
    ) -> LazySequence[V]:
        return self._with_step(steps.slice, offset, length, reindex=reindex)

    def chunk(self, size: int, *, reindex: bool = False) -> LazySequence[Any]:
        return self._with_step(steps.chunk, size, reindex=reindex)

    def slide(self, size: int, *, reindex: bool = False) -> LazySequence[Any]:
        return self._with_step(steps.slide, size, reindex=reindex)

    def take_first(self, amount: int) -> LazySequence[V]:
        return self._with_step(steps.take_first, amount)

    def drop_first(self, amount: int, *, reindex: bool = False) -> LazySequence[V]:
        return self._with_step(steps.drop_first, amount, reindex=reindex)

    def take_if(self, condition: Callable[..., Any], *, reindex: bool = False) -> LazySequence[V]:
        return self._with_step(steps.take_if, condition, reindex=reindex)

    filter = take_if

    def drop_if(self, condition: Callable[..., Any], *, reindex: bool = False) -> LazySequence[V]:
        return self._with_step(steps.drop_if, condition, reindex=reindex)

    def take_instance_of(self, cls: type[R], *, reindex: bool = False) -> LazySequence[R]:
        return self._with_step(steps.take_instance_of, cls, reindex=reindex)

    def take_while(self, condition: Callable[..., Any]) -> LazySequence[V]:
        return self._with_step(steps.take_while, condition)

    def take_until(self, condition: Callable[..., Any]) -> LazySequence[V]:
        return self._with_step(steps.take_until, condition)

    def drop_while(
        self, condition: Callable[..., Any], *, reindex: bool = False
    ) -> LazySequence[V]:
        return self._with_step(steps.drop_while, condition, reindex=reindex)

    def drop_until(
        self, condition: Callable[..., Any], *, reindex: bool = False
    ) -> LazySequence[V]:
        return self._with_step(steps.drop_until, condition, reindex=reindex)

    def map(self, callback: Callable[..., R]) -> LazySequence[R]:
        return self._with_step(steps.map, callback)

    def map_with_key(self, callback: Callable[..., Any]) -> LazySequence[Any]:
        return self._with_step(steps.map_with_key, callback)

    def flat_map(self, callback: Callable[..., Iterable[R]]) -> LazySequence[R]:
        return self._with_step(steps.flat_map, callback)

    def flatten(self, depth: int = 1) -> LazySequence[Any]:
        return self._with_step(steps.flatten, depth)

    def each(self, callback: Callable[..., Any]) -> LazySequence[V]:
        return self._with_step(steps.each, callback)

    def replace(self, search: Any, replacement: Any, limit: int | None = None) -> LazySequence[Any]:
        return self._with_step(steps.replace, search, replacement, limit)

    def repeat(self, times: int) -> LazySequence[V]:
        return self._with_step(steps.repeat, times)

    def keys(self) -> LazySequence[Key]:
        return self._with_step(steps.keys)

    def values(self) -> LazySequence[V]:
        return self._with_step(steps.values)

    # --------- terminals (force evaluation) ----------

    def to_list(self) -> list[V]:
        """Pull every element and return the values as a ``list``."""
        return list(self)

    def to_dict(self) -> dict[Key, V]:
        """Pull every element and return the pairs as a ``dict`` (later keys win)."""
        return dict(self._producer())

    def collect(self, *, reindex: bool | None = None) -> list[V] | dict[Key, V]:
        """Pull every element and assemble a ``list`` or ``dict``.

        Args:
            reindex (bool | None): ``True`` for a ``list``, ``False`` for a ``dict``,
                None to return a ``list`` only when the emitted keys are ``0..n-1``.
        """
        pairs = list(self._producer())
        if reindex is None:
            reindex = is_list_keys(k for k, _ in pairs)
        return assemble(pairs, reindex)
