# topmark:header:start
#
#   project      : KeySeq
#   file         : __init__.py
#   file_relpath : src/keyseq/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``keyseq`` CLI (``version``, ``ops``, ``apply``)."""

from __future__ import annotations
