# topmark:header:start
#
#   project      : KeySeq
#   file         : test_cli_ops.py
#   file_relpath : tests/cli/test_cli_ops.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``keyseq ops`` and the operation registry behind it."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from keyseq.cli.errors import KeySeqUsageError
from keyseq.cli.registry import OPERATIONS, get_operation
from tests.cli.conftest import assert_SUCCESS, json_output, run_cli

if TYPE_CHECKING:
    from click.testing import Result

pytestmark = pytest.mark.cli


def test_ops_text_lists_families_and_usages() -> None:
    result: Result = run_cli(["--no-color", "ops"])
    assert_SUCCESS(result)
    assert "grouping:" in result.output
    assert "chunk size=..." in result.output
    assert "join glue=... [prefix=...] [suffix=...]" in result.output


def test_ops_json_describes_every_operation() -> None:
    result: Result = run_cli(["ops", "--format", "json"])
    assert_SUCCESS(result)
    payload: list[dict[str, Any]] = json_output(result)
    assert [entry["name"] for entry in payload] == list(OPERATIONS)
    by_name = {entry["name"]: entry for entry in payload}
    assert by_name["chunk"]["family"] == "grouping"
    assert by_name["chunk"]["params"] == ["size"]
    assert by_name["chunk"]["reindex"] is True
    assert by_name["sum"]["reindex"] is False
    assert by_name["sample"]["params"] == []


def test_registry_hides_forwarded_and_callback_parameters() -> None:
    assert [p.name for p in get_operation("first").parameters] == []
    assert [p.name for p in get_operation("sample_keys").parameters] == ["amount", "replace"]
    assert get_operation("shuffle").accepts_randomizer
    assert not get_operation("sum").accepts_randomizer


def test_registry_unknown_operation() -> None:
    with pytest.raises(KeySeqUsageError, match="Unknown operation: 'nope'"):
        get_operation("nope")


def test_registry_summaries_come_from_docstrings() -> None:
    assert get_operation("chunk").summary.startswith("Split into consecutive groups")
