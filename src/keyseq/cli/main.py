# topmark:header:start
#
#   project      : KeySeq
#   file         : main.py
#   file_relpath : src/keyseq/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq CLI entry point.

Key ideas:
- Group-level options (verbosity, color, config) are initialized once and placed
  into ``ctx.obj``.
- Subcommands read the shared console and frozen config from ``ctx.obj``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from keyseq.cli.commands.apply import apply_command
from keyseq.cli.commands.ops import ops_command
from keyseq.cli.commands.version import version_command
from keyseq.cli.console import ClickConsole
from keyseq.cli.errors import KeySeqConfigError
from keyseq.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from keyseq.config.io import load_config
from keyseq.config.logging import (
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from keyseq.config.model import ConfigError, apply_config

if TYPE_CHECKING:
    from keyseq.config.logging import KeySeqLogger
    from keyseq.config.model import Config

logger: KeySeqLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (logging, color, config) on the Click context.

    Log level precedence: ``-v``/``-q``, then ``KEYSEQ_LOG_LEVEL``, then the
    ``log_level`` config key.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit config file, or None to discover one.
    """
    ctx.obj = ctx.obj or {}

    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console
    ctx.color = not no_color

    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    # Configured before config discovery; the config file may refine it below.
    setup_logging(level=level_cli if level_cli is not None else level_env)

    try:
        config: Config = load_config(config_path)
    except ConfigError as exc:
        raise KeySeqConfigError(exc.message) from exc
    ctx.obj["config"] = config

    if level_cli is None and level_env is None and config.log_level is not None:
        setup_logging(level=parse_log_level(config.log_level))
    apply_config(config)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="KeySeq CLI: run ordered key-value sequence operations on JSON data.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Use this TOML file instead of discovering keyseq.toml / pyproject.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the KeySeq CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'keyseq ops' to list operations, 'keyseq apply OP' to run one.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(ops_command)

cli.add_command(apply_command)

if __name__ == "__main__":
    cli()
