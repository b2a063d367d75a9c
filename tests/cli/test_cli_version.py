# topmark:header:start
#
#   project      : KeySeq
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``keyseq version``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from keyseq.constants import KEYSEQ_VERSION
from tests.cli.conftest import assert_SUCCESS, json_output, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result

@mark_cli
def test_version_plain() -> None:
    result: Result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == KEYSEQ_VERSION

@mark_cli
def test_version_colored_still_contains_the_version() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert KEYSEQ_VERSION in result.output

@mark_cli
def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json_output(result) == {"version": KEYSEQ_VERSION}

@mark_cli
def test_version_rejects_unknown_format() -> None:
    result: Result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code == 2
    assert "Must be one of: text, json" in result.output
