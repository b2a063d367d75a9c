# topmark:header:start
#
#   project      : KeySeq
#   file         : __init__.py
#   file_relpath : src/keyseq/ops/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Eager operations, one module per family.

Every function takes an iteration source (``list``, ``tuple``, mapping, generator,
``LazySequence``...) and returns a new value; only ``keyseq.ops.mutation`` changes
its argument. Most users go through the flat [`keyseq.arr`][keyseq.arr] facade.

Included modules:

- ``access``: positional and keyed lookup.
- ``membership``: containment, predicates and assertions.
- ``selection``: filtering, taking and dropping.
- ``setops``: difference, intersection and deduplication.
- ``grouping``: grouping, splitting and mapping.
- ``sorting``: stable sorts.
- ``structure``: construction, merging and reshaping.
- ``mutation``: in-place changes to a ``list`` or ``dict``.
- ``sampling``: random picks and shuffles.
- ``reductions``: totals, extremes and folds.
- ``text``: joining and URL query strings.
"""

from __future__ import annotations
