# topmark:header:start
#
#   project      : KeySeq
#   file         : options.py
#   file_relpath : src/keyseq/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Options shared by several commands, plus the code that interprets them.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, ParamSpec, TypeVar, cast

import click

from keyseq.cli.errors import KeySeqUsageError
from keyseq.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for informational commands.

    Members:
      TEXT: Human-friendly text output; may include ANSI color if enabled.
      JSON: Machine-readable JSON, never colored.
    """

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Click parameter type accepting an Enum member by its value, in any letter case.

    Args:
        enum_cls (type[E]): The Enum whose string values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {
            str(member.value).lower(): member for member in cast("Iterable[E]", enum_cls)
        }
        self.choices: list[str] = [str(member.value) for member in cast("Iterable[E]", enum_cls)]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self.by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member


# Number of ``-v`` flags -> log level; more than three behaves like three.
_VERBOSE_LEVELS: tuple[int, ...] = (logging.INFO, logging.DEBUG, TRACE_LEVEL)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Turn the ``-v``/``-q`` counts into a log level.

    ``-v`` is INFO, ``-vv`` DEBUG and ``-vvv`` TRACE; any number of ``-q`` is ERROR.

    Returns:
        int | None: The level, or None when neither flag was given so that the
            environment and the config file decide.

    Raises:
        KeySeqUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise KeySeqUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS)) - 1]
    return logging.ERROR if quiet_count else None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach the repeatable ``-v``/``--verbose`` and ``-q``/``--quiet`` counters."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``--no-color``."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``--format text|json`` (None when omitted)."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
