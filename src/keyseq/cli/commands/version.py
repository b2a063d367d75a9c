# topmark:header:start
#
#   project      : KeySeq
#   file         : version.py
#   file_relpath : src/keyseq/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq `version` command.

Prints the current KeySeq version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from keyseq.cli.options import OutputFormat, output_format_option
from keyseq.constants import KEYSEQ_VERSION

if TYPE_CHECKING:
    from keyseq.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of KeySeq.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of KeySeq.

    Args:
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": KEYSEQ_VERSION}))
    else:
        console.print(console.styled(KEYSEQ_VERSION, bold=True))
