# topmark:header:start
#
#   project      : KeySeq
#   file         : callables.py
#   file_relpath : src/keyseq/core/callables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Callback introspection.

Element callbacks (conditions, selectors, mappers) may be written either as
``f(value)`` or as ``f(value, key)``. [`adapt`][keyseq.core.callables.adapt] inspects
the callable once and returns a uniform two-argument wrapper, so algorithms always
call ``fn(value, key)``.
"""

from __future__ import annotations

import inspect
from inspect import getmodule
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from keyseq.config.logging import KeySeqLogger, get_logger

if TYPE_CHECKING:
    from keyseq.core.kinds import Key

logger: KeySeqLogger = get_logger(__name__)

R = TypeVar("R")

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _accepts(fn: Callable[..., Any], count: int) -> bool:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    positional = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in _POSITIONAL:
            positional += 1
    return positional >= count


def accepts_key(fn: Callable[..., Any]) -> bool:
    """Return True if ``fn`` can be called with two positional arguments.

    Callables whose signature cannot be inspected (some builtins) are assumed to
    take the value only.
    """
    return _accepts(fn, 2)


def adapt(fn: Callable[..., R]) -> Callable[[Any, Key], R]:
    """Wrap ``fn`` so it can always be called as ``fn(value, key)``.

    Args:
        fn (Callable[..., R]): A one- or two-argument callback.

    Returns:
        Callable[[Any, Key], R]: ``fn`` itself when it accepts a key, else a wrapper
            that drops the key.
    """
    if accepts_key(fn):
        return fn
    logger.trace("callback %s receives the value only", format_callable_pretty(fn))

    def _value_only(value: Any, key: Key) -> R:
        return fn(value)

    return _value_only


def adapt_reducer(fn: Callable[..., R]) -> Callable[[Any, Any, Key], R]:
    """Wrap an accumulator callback so it can be called as ``fn(carry, value, key)``."""
    if _accepts(fn, 3):
        return fn

    def _without_key(carry: Any, value: Any, key: Key) -> R:
        return fn(carry, value)

    return _without_key


def format_callable_pretty(obj: Any) -> str:
    """Return a human-friendly ``(module.qualname)`` for any callable.

    Used in diagnostics only.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"({mod_name}.{call_name})" if mod_name else f"({call_name})"
