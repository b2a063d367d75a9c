# topmark:header:start
#
#   project      : KeySeq
#   file         : ops.py
#   file_relpath : src/keyseq/cli/commands/ops.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq `ops` command.

Lists the operations that `keyseq apply` can run, grouped by family.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from keyseq.cli.options import OutputFormat, output_format_option
from keyseq.cli.registry import OPERATIONS

if TYPE_CHECKING:
    from keyseq.cli.console import ClickConsole


@click.command(
    name="ops",
    help="List the operations available to 'keyseq apply'.",
)
@output_format_option
def ops_command(*, output_format: OutputFormat | None = None) -> None:
    """List the operations available to ``keyseq apply``.

    Args:
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        payload = [
            {
                "name": spec.name,
                "family": spec.family,
                "params": [p.name for p in spec.parameters],
                "reindex": spec.accepts_reindex,
                "summary": spec.summary,
            }
            for spec in OPERATIONS.values()
        ]
        console.print(json.dumps(payload))
        return

    family: str | None = None
    for spec in OPERATIONS.values():
        if spec.family != family:
            family = spec.family
            console.print(console.styled(f"{family}:", bold=True, underline=True))
        console.print(f"  {spec.usage():<40} {spec.summary}")
