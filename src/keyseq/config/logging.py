# topmark:header:start
#
#   project      : KeySeq
#   file         : logging.py
#   file_relpath : src/keyseq/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq logging with a TRACE level.

The engine itself only emits DEBUG/TRACE diagnostics (randomizer lifecycle,
in-place mutations, lazy pipeline construction). Output is configured once by the
application, usually through [`setup_logging`][keyseq.config.logging.setup_logging];
the CLI calls it on start-up.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "KEYSEQ_LOG_LEVEL"


class KeySeqLogger(logging.Logger):
    """`logging.Logger` with an extra ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level (below DEBUG).

        Args:
            msg (object): Message or format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(KeySeqLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; a record takes the first style whose level it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colours the whole formatted record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(text)
        return chalk.dim(text)


def parse_log_level(value: str | None) -> int | None:
    """Translate a level name (``"TRACE"``, ``"debug"``) or number (``"10"``) to an int.

    Returns:
        int | None: The numeric level, or ``None`` when ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from ``KEYSEQ_LOG_LEVEL`` or None if unset."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stdout handler on the root logger.

    Args:
        level (int | None): Root level. None falls back to ``KEYSEQ_LOG_LEVEL``,
            then to CRITICAL (effectively silent).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    # Replacing, not adding: repeated calls must not duplicate output.
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(DEBUG_LOG_FORMAT if level < logging.INFO else LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> KeySeqLogger:
    """Return the `KeySeqLogger` registered under ``name``."""
    return cast("KeySeqLogger", logging.getLogger(name))
