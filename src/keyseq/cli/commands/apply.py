# topmark:header:start
#
#   project      : KeySeq
#   file         : apply.py
#   file_relpath : src/keyseq/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq `apply` command.

Reads a JSON array or object, runs one eager operation on it and prints the
result as JSON.

Examples:
    Chunk a list read from STDIN::

        echo '[1, 2, 3, 4, 5]' | keyseq apply chunk size=2

    Sort a map by value, keeping its keys, with pretty output::

        keyseq apply sort_desc --input scores.json --keep-keys --indent 2

Parameters are passed as ``NAME=VALUE``; each value is parsed as JSON and falls
back to the raw string (``glue=,`` and ``glue='","'`` are both accepted).
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

import click

from keyseq.cli.errors import (
    KeySeqDataError,
    KeySeqInternalError,
    KeySeqUsageError,
)
from keyseq.cli.io import parse_params, read_sequence, render_json
from keyseq.cli.registry import get_operation
from keyseq.config.logging import get_logger
from keyseq.core.errors import InvalidArgumentError, KeySeqError, UnreachableError
from keyseq.core.randomizer import StdRandomizer

if TYPE_CHECKING:
    from keyseq.cli.console import ClickConsole
    from keyseq.cli.registry import OperationSpec
    from keyseq.config.logging import KeySeqLogger
    from keyseq.config.model import Config

logger: KeySeqLogger = get_logger(__name__)


def build_arguments(
    spec: OperationSpec,
    params: tuple[str, ...],
    *,
    reindex: bool | None,
    seed: int | None,
) -> dict[str, Any]:
    """Turn CLI parameters and flags into keyword arguments for ``spec``.

    Raises:
        KeySeqUsageError: On unknown parameters, or ``--reindex``/``--keep-keys``
            given to an operation without a reindex policy.
    """
    kwargs = parse_params(params)
    allowed = {p.name for p in spec.parameters}
    unknown = sorted(set(kwargs) - allowed)
    if unknown:
        raise KeySeqUsageError(
            f"Unknown parameter(s) for {spec.name}: {', '.join(unknown)}. "
            f"Usage: {spec.usage()}"
        )
    if reindex is not None:
        if not spec.accepts_reindex:
            raise KeySeqUsageError(f"Operation {spec.name} does not take --reindex/--keep-keys.")
        kwargs["reindex"] = reindex
    if seed is not None and spec.accepts_randomizer:
        kwargs["randomizer"] = StdRandomizer(seed)
    return kwargs


def run_operation(spec: OperationSpec, sequence: Any, kwargs: dict[str, Any]) -> Any:
    """Call ``spec`` on ``sequence``, translating engine errors into CLI errors."""
    try:
        bound = inspect.signature(spec.func).bind(sequence, **kwargs)
    except TypeError as exc:
        raise KeySeqUsageError(f"{exc}. Usage: {spec.usage()}") from exc
    logger.debug("Running %s with %r", spec.name, kwargs)
    try:
        return spec.func(*bound.args, **bound.kwargs)
    except InvalidArgumentError as exc:
        raise KeySeqUsageError(exc.message) from exc
    except UnreachableError as exc:
        raise KeySeqInternalError(exc.message) from exc
    except KeySeqError as exc:
        raise KeySeqDataError(f"{type(exc).__name__}: {exc.message}") from exc


@click.command(
    name="apply",
    help="Run OPERATION on a JSON array/object and print the JSON result.",
)
@click.argument("operation")
@click.argument("params", nargs=-1)
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Read the sequence from this file instead of STDIN ('-' means STDIN).",
)
@click.option(
    "--reindex/--keep-keys",
    "reindex",
    default=None,
    help="Force a renumbered list, or keep the input keys (default: decided by the input).",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for randomized operations (overrides the configured seed).",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Indent JSON output by this many spaces.",
)
def apply_command(
    *,
    operation: str,
    params: tuple[str, ...],
    input_path: str | None,
    reindex: bool | None,
    seed: int | None,
    indent: int | None,
) -> None:
    """Run one eager operation and print its JSON result.

    Args:
        operation (str): Name of the operation (see ``keyseq ops``).
        params (tuple[str, ...]): ``NAME=VALUE`` parameters.
        input_path (str | None): Input file; STDIN when omitted.
        reindex (bool | None): Output policy override.
        seed (int | None): Seed for randomized operations.
        indent (int | None): JSON indentation override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    config: Config = ctx.obj["config"]

    spec = get_operation(operation)
    kwargs = build_arguments(spec, params, reindex=reindex, seed=seed)
    if seed is not None and not spec.accepts_randomizer:
        console.warn(f"--seed has no effect on {spec.name}.")
    sequence = read_sequence(input_path)
    result = run_operation(spec, sequence, kwargs)
    console.print(
        render_json(
            result,
            indent=indent if indent is not None else config.indent,
            sort_keys=config.sort_keys,
        )
    )
