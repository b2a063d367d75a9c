# topmark:header:start
#
#   project      : KeySeq
#   file         : io.py
#   file_relpath : src/keyseq/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON input/output helpers for the CLI.

Input is a JSON array (a List) or a JSON object (a Map, with string keys), read
from a file or from STDIN. Results are written back as JSON; tuples become arrays
and integer keys become strings, as usual for JSON.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from keyseq.cli.errors import KeySeqDataError, KeySeqInputNotFoundError, KeySeqUsageError
from keyseq.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from keyseq.config.logging import KeySeqLogger

logger: KeySeqLogger = get_logger(__name__)


def read_sequence(path: str | None) -> list[Any] | dict[str, Any]:
    """Read the input sequence from ``path`` (``None`` or ``"-"`` means STDIN).

    Raises:
        KeySeqInputNotFoundError: If ``path`` does not exist.
        KeySeqDataError: If the input is not a JSON array or object.
    """
    if path is None or path == "-":
        logger.debug("Reading input from STDIN")
        text = sys.stdin.read()
        where = "<stdin>"
    else:
        file = Path(path)
        if not file.is_file():
            raise KeySeqInputNotFoundError(f"Input file not found: {path}")
        text = file.read_text(encoding="utf-8")
        where = str(file)
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise KeySeqDataError(f"Invalid JSON in {where}: {exc}") from exc
    if not isinstance(data, (list, dict)):
        raise KeySeqDataError(
            f"Expected a JSON array or object in {where}, got {type(data).__name__}."
        )
    return data


def parse_value(raw: str) -> Any:
    """Parse a parameter value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_params(items: Iterable[str]) -> dict[str, Any]:
    """Parse ``NAME=VALUE`` arguments into keyword arguments.

    Raises:
        KeySeqUsageError: If an argument lacks ``=`` or a name repeats.
    """
    params: dict[str, Any] = {}
    for item in items:
        name, sep, raw = item.partition("=")
        if not sep or not name:
            raise KeySeqUsageError(f"Expected PARAM=VALUE, got {item!r}.")
        if name in params:
            raise KeySeqUsageError(f"Parameter given more than once: {name!r}.")
        params[name] = parse_value(raw)
    return params


def render_json(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Serialize a result to JSON text.

    Raises:
        KeySeqDataError: If the result cannot be represented as JSON.
    """
    try:
        return json.dumps(value, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise KeySeqDataError(f"Result cannot be written as JSON: {exc}") from exc
