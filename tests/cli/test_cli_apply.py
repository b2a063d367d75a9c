# topmark:header:start
#
#   project      : KeySeq
#   file         : test_cli_apply.py
#   file_relpath : tests/cli/test_cli_apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``keyseq apply``: JSON in, one operation, JSON out."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_CLICK_USAGE,
    assert_CONFIG_ERROR,
    assert_DATA_ERROR,
    assert_INPUT_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    json_output,
    run_cli_in,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_chunk_from_stdin(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path, ["apply", "chunk", "size=2"], input_text="[1, 2, 3, 4, 5]"
    )
    assert_SUCCESS(result)
    assert json_output(result) == [[1, 2], [3, 4], [5]]


def test_map_input_keeps_its_keys(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["apply", "sort_asc"], input_text='{"b": 2, "a": 1}')
    assert_SUCCESS(result)
    assert list(json_output(result).items()) == [("a", 1), ("b", 2)]


def test_reindex_flags(tmp_path: Path) -> None:
    renumbered: Result = run_cli_in(
        tmp_path, ["apply", "sort_asc", "--reindex"], input_text='{"b": 2, "a": 1}'
    )
    assert_SUCCESS(renumbered)
    assert json_output(renumbered) == [1, 2]

    kept: Result = run_cli_in(tmp_path, ["apply", "reverse", "--keep-keys"], input_text="[1, 2]")
    assert_SUCCESS(kept)
    assert list(json_output(kept).items()) == [("1", 2), ("0", 1)]


def test_raw_string_and_json_parameters(tmp_path: Path) -> None:
    joined: Result = run_cli_in(tmp_path, ["apply", "join", "glue=,"], input_text="[1, 2]")
    assert_SUCCESS(joined)
    assert json_output(joined) == "1,2"

    picked: Result = run_cli_in(
        tmp_path, ["apply", "take_keys", 'keys=["a"]'], input_text='{"a": 1, "b": 2}'
    )
    assert_SUCCESS(picked)
    assert json_output(picked) == {"a": 1}


def test_input_file_and_indent(tmp_path: Path) -> None:
    (tmp_path / "data.json").write_text("[3, 1, 2]", encoding="utf-8")
    result: Result = run_cli_in(
        tmp_path, ["apply", "sort_desc", "--input", "data.json", "--indent", "2"]
    )
    assert_SUCCESS(result)
    assert result.stdout == "[\n  3,\n  2,\n  1\n]\n"


def test_config_controls_output_layout(tmp_path: Path) -> None:
    (tmp_path / "keyseq.toml").write_text("indent = 1\nsort_keys = true\n", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["apply", "values"], input_text='{"b": {"y": 1, "x": 2}}')
    assert_SUCCESS(result)
    assert result.stdout == '[\n {\n  "x": 2,\n  "y": 1\n }\n]\n'


def test_seed_flag_and_config_seed_agree(tmp_path: Path) -> None:
    data = json.dumps(list(range(20)))
    flagged: Result = run_cli_in(tmp_path, ["apply", "shuffle", "--seed", "3"], input_text=data)
    again: Result = run_cli_in(tmp_path, ["apply", "shuffle", "--seed", "3"], input_text=data)
    assert_SUCCESS(flagged)
    assert flagged.stdout == again.stdout
    assert sorted(json_output(flagged)) == list(range(20))

    (tmp_path / "keyseq.toml").write_text("seed = 3\n", encoding="utf-8")
    configured: Result = run_cli_in(tmp_path, ["apply", "shuffle"], input_text=data)
    assert_SUCCESS(configured)
    assert configured.stdout == flagged.stdout


def test_seed_on_a_deterministic_operation_warns(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "apply", "sum", "--seed", "1"], input_text="[1, 2, 3]"
    )
    assert_SUCCESS(result)
    assert "--seed has no effect on sum." in result.output
    assert result.output.strip().endswith("6")


@parametrize(
    "argv, fragment",
    [
        (["apply", "nope"], "Unknown operation: 'nope'"),
        (["apply", "chunk", "size=2", "width=3"], "Unknown parameter(s) for chunk: width"),
        (["apply", "chunk"], "Usage: chunk size=..."),
        (["apply", "chunk", "size"], "Expected PARAM=VALUE"),
        (["apply", "chunk", "size=1", "size=2"], "Parameter given more than once"),
        (["apply", "sum", "--reindex"], "does not take --reindex/--keep-keys"),
        (["apply", "chunk", "size=0"], "Expected: size >= 1. Got: 0."),
    ],
)
def test_usage_errors(tmp_path: Path, argv: list[str], fragment: str) -> None:
    result: Result = run_cli_in(tmp_path, argv, input_text="[1, 2, 3]")
    assert_USAGE_ERROR(result)
    assert fragment in result.output


def test_engine_errors_are_data_errors(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["apply", "sum"], input_text='["a"]')
    assert_DATA_ERROR(result)
    assert "TypeMismatchError: Expected a number at key 0." in result.output


@parametrize(
    "text, fragment",
    [
        ("[1, 2", "Invalid JSON in <stdin>"),
        ("3", "Expected a JSON array or object in <stdin>, got int."),
    ],
)
def test_unreadable_input(tmp_path: Path, text: str, fragment: str) -> None:
    result: Result = run_cli_in(tmp_path, ["apply", "count"], input_text=text)
    assert_DATA_ERROR(result)
    assert fragment in result.output


def test_missing_input_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["apply", "count", "--input", "absent.json"])
    assert_INPUT_NOT_FOUND(result)
    assert "Input file not found: absent.json" in result.output


def test_negative_indent_is_rejected_by_click(tmp_path: Path) -> None:
    assert_CLICK_USAGE(run_cli_in(tmp_path, ["apply", "count", "--indent", "-1"], input_text="[]"))


@parametrize("toml_text", ["seed = 'x'\n", "seed = = 1\n", "log_level = 'LOUD'\n"])
def test_bad_config_is_a_config_error(tmp_path: Path, toml_text: str) -> None:
    (tmp_path / "keyseq.toml").write_text(toml_text, encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["apply", "count"], input_text="[1]")
    assert_CONFIG_ERROR(result)
