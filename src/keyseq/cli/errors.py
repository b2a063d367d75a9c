# topmark:header:start
#
#   project      : KeySeq
#   file         : errors.py
#   file_relpath : src/keyseq/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``click.ClickException`` subclasses carrying KeySeq's exit codes.

Commands raise these; Click catches them, calls ``show()`` and exits with the
class's ``exit_code``. When the root group has put a console in ``ctx.obj`` the
message goes through it (so ``--no-color`` applies), otherwise Click prints it.
"""

from __future__ import annotations

from typing import IO, Any

import click

from keyseq.cli.exit_codes import ExitCode


class KeySeqCliError(click.ClickException):
    """Base class; exits with ``ExitCode.FAILURE``."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        return self.message

    def show(self, file: IO[Any] | None = None) -> None:
        ctx = click.get_current_context(silent=True)
        obj = ctx.obj if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
        else:
            console.error(self.format_message())


class KeySeqUsageError(KeySeqCliError):
    """Bad invocation: unknown operation, missing or malformed arguments."""

    exit_code = ExitCode.USAGE_ERROR


class KeySeqDataError(KeySeqCliError):
    """The input could not be decoded, or the operation rejected it."""

    exit_code = ExitCode.DATA_ERROR


class KeySeqInputNotFoundError(KeySeqCliError):
    exit_code = ExitCode.INPUT_NOT_FOUND


class KeySeqInternalError(KeySeqCliError):
    """An unexpected exception escaped an operation."""

    exit_code = ExitCode.INTERNAL_ERROR


class KeySeqConfigError(KeySeqCliError):
    """The config file is unreadable, malformed or holds invalid values."""

    exit_code = ExitCode.CONFIG_ERROR
