# topmark:header:start
#
#   project      : KeySeq
#   file         : console.py
#   file_relpath : src/keyseq/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Where ``keyseq`` writes what the user asked to see.

Results, hints and warnings go through [`ClickConsole`][keyseq.cli.console.ClickConsole];
diagnostics go through ``logging`` instead.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Writes program output with ``click.echo``, honouring ``--no-color``.

    Args:
        enable_color (bool): Emit ANSI styling when True.
        out (TextIO | None): Stream for results; ``sys.stdout`` when None.
        err (TextIO | None): Stream for warnings and errors; ``sys.stderr`` when None.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def _emit(self, text: str, *, to_err: bool, nl: bool, **style: Any) -> None:
        stream = (self.err or sys.stderr) if to_err else (self.out or sys.stdout)
        click.echo(
            self.styled(text, **style) if style else text,
            nl=nl,
            file=stream,
            color=self.enable_color,
        )

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self._emit(text, to_err=False, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        self._emit(text, to_err=True, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        self._emit(text, to_err=True, nl=nl, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        """``click.style(text, **style)``, or ``text`` unchanged when color is off."""
        return click.style(text, **style) if self.enable_color else text
