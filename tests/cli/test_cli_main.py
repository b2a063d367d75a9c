# topmark:header:start
#
#   project      : KeySeq
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the top-level ``keyseq`` group: help, hints and verbosity flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_CLICK_USAGE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'keyseq ops'" in result.output
    assert "apply" in result.output
    assert "Usage:" in result.output


def test_help_option() -> None:
    result: Result = run_cli(["-h"])
    assert_SUCCESS(result)
    assert "--no-color" in result.output
    assert "--config" in result.output


def test_unknown_subcommand() -> None:
    assert_CLICK_USAGE(run_cli(["frobnicate"]))


def test_verbose_and_quiet_are_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_debug_logging_reaches_stdout(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["-vv", "apply", "sum"], input_text="[1, 2]")
    assert_SUCCESS(result)
    assert "Running sum" in result.output


def test_missing_config_file_is_a_click_usage_error(tmp_path: Path) -> None:
    assert_CLICK_USAGE(run_cli_in(tmp_path, ["--config", "absent.toml", "version"]))
