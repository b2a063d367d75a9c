# topmark:header:start
#
#   project      : KeySeq
#   file         : __init__.py
#   file_relpath : src/keyseq/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for KeySeq front-ends.

- ``keyseq.config.logging``: TRACE-aware logger class and colored console setup.
- ``keyseq.config.model``: the immutable ``Config`` snapshot, its ``MutableConfig``
  builder, and ``apply_config``.
- ``keyseq.config.io``: TOML discovery and loading (``keyseq.toml`` or
  ``[tool.keyseq]`` in ``pyproject.toml``).

The engine modules (``keyseq.core``, ``keyseq.ops``, ``keyseq.lazy``) only use the
logging module; nothing here is imported implicitly to avoid import cycles.
"""

from __future__ import annotations
