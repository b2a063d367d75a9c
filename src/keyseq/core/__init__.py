# topmark:header:start
#
#   project      : KeySeq
#   file         : __init__.py
#   file_relpath : src/keyseq/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by every KeySeq operation.

The ``keyseq.core`` package holds the small building blocks the eager and lazy
layers are made of. Modules here never print and never read configuration.

Included modules:

- ``kinds``
  List/Map classification, iteration sources and the reindex policy.

- ``tokens``
  Identity tokens used wherever sameness must be stricter than ``==``.

- ``ordering``
  Sort direction and the default three-way comparator.

- ``callables``
  Callback adaptation (``fn(value)`` vs ``fn(value, key)``).

- ``randomizer``
  The pluggable randomness provider and its process-wide default.

- ``errors``
  The ``KeySeqError`` hierarchy.
"""

from __future__ import annotations
