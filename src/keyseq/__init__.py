# topmark:header:start
#
#   project      : KeySeq
#   file         : __init__.py
#   file_relpath : src/keyseq/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq package.

KeySeq is a toolkit for ordered key-value sequences. A sequence is either a
*List* (keys ``0..n-1``) or a *Map* (any other ``int | str`` keys), and every
operation decides the kind of its output from its input.

It offers:

- ``keyseq.arr``: eager operations returning new ``list``/``dict`` values, plus a
  small set of in-place mutations;
- ``keyseq.lazy``: ``LazySequence``, a chainable single-pass pipeline;
- ``keyseq.cli``: the ``keyseq`` command line front-end.
"""

from __future__ import annotations
