# topmark:header:start
#
#   project      : KeySeq
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff lint.
  - `lint_fixall`: Apply ruff's automatic lint fixes.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: pytest (fast markers only) and pyright, once per supported Python.
  - `property_test`: The slow hypothesis suite; never part of `qa`.
  - `package_check`: Build both distributions and run `twine check` on them.

Notes:
  - Virtualenvs are created with `uv`.
  - Development tools come from the ``dev`` extra in ``pyproject.toml``.

Common invocations:
  - `nox -s lint`
  - `nox -s format_check`
  - `nox -s qa-3.12`
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    # tomllib is available since Python version 3.11
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import tomlkit

    def _toml_loads(text: str) -> dict[str, Any]:
        return cast("dict[str, Any]", tomlkit.parse(text).unwrap())


CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"
CLASSIFIER_PREFIX: str = "Programming Language :: Python :: "


def _read_classifiers() -> list[str]:
    """Return the trove classifiers declared in ``pyproject.toml`` (or an empty list).

    Evaluated when Nox imports this file, so only the TOML parser may be used here.
    """
    path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.is_file():
        return []
    project = _toml_loads(path.read_text(encoding="utf-8")).get("project")
    if not isinstance(project, dict):
        return []
    return list(cast("dict[str, Any]", project).get("classifiers") or [])


def _as_version(classifier: str) -> tuple[int, int] | None:
    if not classifier.startswith(CLASSIFIER_PREFIX):
        return None
    major, _, minor = classifier[len(CLASSIFIER_PREFIX) :].strip().partition(".")
    if not (major.isdigit() and minor.isdigit()):
        return None
    return int(major), int(minor)


def get_supported_pythons() -> list[str]:
    """List the ``X.Y`` interpreter versions KeySeq declares support for, oldest first."""
    found = {v for v in map(_as_version, _read_classifiers()) if v is not None}
    if not found:
        warnings.warn(
            f"No Python classifiers in pyproject.toml; using {CURRENT_PYTHON_VERSION} only.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return [f"{major}.{minor}" for major, minor in sorted(found)]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the fast test suite and pyright against one interpreter."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install("-e", ".[dev]")

    session.run("pytest", "-q", "tests", "-m", "not slow and not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Lint sources and tests with ruff."""
    session.install("-e", ".[dev]")

    session.run("ruff", "check", "src/keyseq", "tests", "noxfile.py")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Apply ruff's lint autofixes."""
    session.install("-e", ".[dev]")

    session.run("ruff", "check", "--fix", "src/keyseq", "tests", "noxfile.py")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting."""
    session.install("-e", ".[dev]")

    session.run("ruff", "format", "--check", "src/keyseq", "tests", "noxfile.py")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install("-e", ".[dev]")

    session.run("ruff", "format", "src/keyseq", "tests", "noxfile.py")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the hypothesis_slow property tests."""
    session.install("-e", ".[dev]")

    session.run("pytest", "-vv", "tests/test_properties_slow.py", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install("-e", ".[dev]")

    # Start from an empty dist/.
    session.run(
        "python",
        "-c",
        "import shutil; shutil.rmtree('dist', ignore_errors=True)",
    )

    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
