# topmark:header:start
#
#   project      : KeySeq
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the KeySeq test suite.

Shared fixtures, typed decorator helpers and a deterministic randomizer.

Notes:
    The process-wide default randomizer is reset around every test, so a test that
    seeds it (directly, or through ``keyseq apply --seed``/a config ``seed``) never
    leaks its state into the next one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from keyseq.config import logging
from keyseq.core.randomizer import set_default_randomizer

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# A decorator that hands back the function it was given, with its type intact.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Adapt an untyped pytest decorator (a mark, a fixture factory) for pyright."""

    def _apply(func: F) -> F:
        return cast("F", mark(func))

    return _apply


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def parametrize(*args: Any, **kwargs: Any) -> DecoratorType[Any]:
    """``pytest.mark.parametrize`` with the decorated test's signature preserved."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> DecoratorType[Any]:
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> DecoratorType[Any]:
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_keyseq_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ``KEYSEQ_LOG_LEVEL`` exported in the developer's shell."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_randomizer() -> Iterator[None]:
    """Start and end every test with an unseeded, lazily built default randomizer."""
    set_default_randomizer(None)
    yield
    set_default_randomizer(None)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE while the suite runs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty temporary working directory.

    Config discovery looks at the working directory, so tests that exercise it must
    not see the repository's own ``pyproject.toml``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class FixedRandomizer:
    """Deterministic randomizer for tests: no randomness at all.

    ``integer`` replays ``draws`` in a cycle (clamped to the requested range),
    ``choose_keys`` takes the first ``count`` keys and ``permute`` reverses.

    Args:
        draws (Sequence[int]): Values returned by successive ``integer`` calls.
    """

    def __init__(self, draws: Sequence[int] = (0,)) -> None:
        self.draws: list[int] = list(draws)
        self.calls: int = 0

    def integer(self, minimum: int, maximum: int) -> int:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return max(minimum, min(maximum, value))

    def choose_keys(self, keys: Sequence[Any], count: int) -> list[Any]:
        return list(keys[:count])

    def permute(self, keys: Sequence[Any]) -> list[Any]:
        return list(reversed(keys))
