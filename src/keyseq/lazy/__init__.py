# topmark:header:start
#
#   project      : KeySeq
#   file         : __init__.py
#   file_relpath : src/keyseq/lazy/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lazy, pull-based sequence transformation.

- ``keyseq.lazy.steps``: single-pass generator steps yielding ``(key, value)`` pairs.
- ``keyseq.lazy.pipeline``: ``LazySequence``, a chainable wrapper around those steps.
"""

from __future__ import annotations

from keyseq.lazy.pipeline import LazySequence

__all__ = ["LazySequence"]
