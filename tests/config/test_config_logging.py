# topmark:header:start
#
#   project      : KeySeq
#   file         : test_config_logging.py
#   file_relpath : tests/config/test_config_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `keyseq.config.logging`."""

from __future__ import annotations

import logging as std_logging

import pytest

from keyseq.config import logging
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("trace", logging.TRACE_LEVEL),
        (" Debug ", std_logging.DEBUG),
        ("WARN", std_logging.WARNING),
        ("15", 15),
        ("", None),
        (None, None),
        ("LOUD", None),
    ],
)
def test_parse_log_level(raw: str | None, expected: int | None) -> None:
    assert logging.parse_log_level(raw) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert logging.resolve_env_log_level() is None
    monkeypatch.setenv(logging.LOG_LEVEL_ENV, "info")
    assert logging.resolve_env_log_level() == std_logging.INFO


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.get_logger("keyseq.tests.trace")
    assert isinstance(log, logging.KeySeqLogger)
    caplog.set_level(logging.TRACE_LEVEL, logger="keyseq.tests.trace")
    log.trace("walked %d pairs", 3)
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "walked 3 pairs")]


def test_chalk_formatter_keeps_the_message() -> None:
    record = std_logging.LogRecord("x", std_logging.WARNING, __file__, 1, "careful", None, None)
    text = logging.ChalkFormatter(logging.LOG_FORMAT).format(record)
    assert "[WARNING] careful" in text


def test_setup_logging_installs_one_handler() -> None:
    logging.setup_logging(level=std_logging.ERROR)
    logging.setup_logging(level=std_logging.ERROR)
    root = std_logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == std_logging.ERROR
    logging.setup_logging(level=logging.TRACE_LEVEL)
