# topmark:header:start
#
#   project      : KeySeq
#   file         : errors.py
#   file_relpath : src/keyseq/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the KeySeq engine.

Every error derives from [`KeySeqError`][keyseq.core.errors.KeySeqError] and carries the
offending inputs in ``context`` so callers can report what went wrong without
re-deriving it. Errors are raised at the point of detection; the engine never
retries or recovers internally.

Where a builtin exception has the same meaning, the KeySeq error also derives from it
(e.g. [`IndexOutOfBoundsError`][keyseq.core.errors.IndexOutOfBoundsError] is an
``IndexError``), so generic ``except`` clauses keep working.

Usage:
    ```python
    from keyseq import arr
    from keyseq.core.errors import EmptyNotAllowedError

    try:
        arr.first([])
    except EmptyNotAllowedError as exc:
        print(exc.context)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class KeySeqError(Exception):
    """Base class for all KeySeq engine errors.

    Args:
        message (str): Human-readable description of the failure.
        context (Mapping[str, Any] | None): Diagnostic values (the sequence, the
            offending key/index/value, ...).

    Attributes:
        message (str): The error message.
        context (dict[str, Any]): Diagnostic values attached to the error.
    """

    message: str
    context: dict[str, Any]

    def __init__(self, message: str, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context is not None else {}

    def __str__(self) -> str:
        return self.message

    def add_context(self, key: str, value: Any) -> KeySeqError:
        """Attach one diagnostic value and return ``self`` for chaining."""
        self.context[key] = value
        return self

    def merge_context(self, context: Mapping[str, Any]) -> KeySeqError:
        """Attach several diagnostic values and return ``self`` for chaining."""
        self.context.update(context)
        return self


class EmptyNotAllowedError(KeySeqError):
    """An operation requiring at least one element received none."""


class NoMatchFoundError(KeySeqError):
    """A predicate-driven lookup found no match."""


class IndexOutOfBoundsError(KeySeqError, IndexError):
    """A resolved positional index is outside ``[0, count)``."""


class InvalidKeyError(KeySeqError, KeyError):
    """A key has the wrong type or does not exist."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return self.message


def _format_keys(keys: Iterable[object]) -> str:
    return "[" + ", ".join(f"'{k}'" if isinstance(k, str) else str(k) for k in keys) + "]"


class MissingKeyError(InvalidKeyError):
    """Keys were requested but are absent.

    Attributes:
        keys (list[object]): The missing keys.
    """

    keys: list[object]

    def __init__(self, keys: Iterable[object], context: Mapping[str, Any] | None = None) -> None:
        self.keys = list(keys)
        super().__init__(f"Keys: {_format_keys(self.keys)} did not exist.", context)


class ExcessKeyError(InvalidKeyError):
    """Keys are present but were not expected.

    Attributes:
        keys (list[object]): The unexpected keys.
    """

    keys: list[object]

    def __init__(self, keys: Iterable[object], context: Mapping[str, Any] | None = None) -> None:
        self.keys = list(keys)
        super().__init__(f"Keys: {_format_keys(self.keys)} should not exist.", context)


class DuplicateKeyError(InvalidKeyError):
    """A key collision happened during insertion or keying."""


class TypeMismatchError(KeySeqError, TypeError):
    """A List-only operation received a Map, or two operands have incompatible kinds."""


class InvalidElementError(KeySeqError, ValueError):
    """A numeric reduction produced not-a-number."""


class InvalidArgumentError(KeySeqError, ValueError):
    """A parameter is malformed (negative size, sample amount too large, ...)."""


class CountMismatchError(KeySeqError):
    """A sequence does not have the asserted number of elements."""


class UnreachableError(KeySeqError, RuntimeError):
    """An internal invariant was violated; this indicates a KeySeq bug."""
