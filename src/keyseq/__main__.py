# topmark:header:start
#
#   project      : KeySeq
#   file         : __main__.py
#   file_relpath : src/keyseq/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running KeySeq via ``python -m keyseq``.

It delegates directly to :func:`keyseq.cli.main.cli`, the single CLI entry point.

Examples:
    Chunk a JSON list read from stdin::

        echo '[1, 2, 3]' | python -m keyseq apply chunk size=2
"""

from __future__ import annotations

from keyseq.cli.main import cli

if __name__ == "__main__":
    cli()
