# topmark:header:start
#
#   project      : KeySeq
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running KeySeq in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so configuration discovery (``keyseq.toml`` /
``pyproject.toml``) only sees files the test created.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from keyseq.cli.exit_codes import ExitCode
from keyseq.cli.main import cli
from keyseq.config import logging
from tests.conftest import fixture

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test logging setup; each CLI run replaces the root handlers."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Run ``keyseq argv...`` from inside ``tmp_path`` so config discovery sees only it.

    ``input_text`` is fed to stdin, e.g. the JSON sequence ``apply`` reads::

        run_cli_in(tmp_path, ["apply", "sum"], input_text="[1, 2]")
    """
    previous: str = os.getcwd()
    os.chdir(tmp_path)
    try:
        return CliRunner().invoke(cli, argv, input=input_text)
    finally:
        os.chdir(previous)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Run the CLI in the current directory (for commands that never read config)."""
    return CliRunner().invoke(cli, argv, input=input_text)


def json_output(result: Result) -> Any:
    """Parse the command's standard output as JSON."""
    return json.loads(result.stdout)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_INPUT_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with INPUT_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.INPUT_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_CLICK_USAGE(result: Result) -> None:
    """Assert that Click itself rejected the invocation (code 2)."""
    assert result.exit_code == 2, result.output
