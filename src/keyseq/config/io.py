# topmark:header:start
#
#   project      : KeySeq
#   file         : io.py
#   file_relpath : src/keyseq/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML discovery and loading for KeySeq configuration.

Typical flow:
    1. Find a config file in the working directory (``discover_config_file``):
       ``keyseq.toml`` first, then a ``pyproject.toml`` carrying ``[tool.keyseq]``.
    2. Parse it with `tomlkit` (``load_toml_dict``).
    3. Turn the relevant table into a `MutableConfig` and freeze it
       (``load_config``).

An explicit path (``--config``) skips discovery.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from keyseq.config.logging import get_logger
from keyseq.config.model import ConfigError, MutableConfig
from keyseq.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from keyseq.config.logging import KeySeqLogger
    from keyseq.config.model import Config

logger: KeySeqLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table; an empty dict if missing or not a table."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", {"path": path}) from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", {"path": path}) from e
    data_any: Any = doc.unwrap()
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def extract_keyseq_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the KeySeq table of a parsed file, or None when it holds none.

    A ``pyproject.toml`` contributes its ``[tool.keyseq]`` table; any other file is
    read as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool = get_table_value(data, "tool")
    if PYPROJECT_TOOL_TABLE not in tool:
        return None
    return get_table_value(tool, PYPROJECT_TOOL_TABLE)


def discover_config_file(start: Path | None = None) -> Path | None:
    """Return the config file to use for ``start`` (default: the working directory).

    ``keyseq.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only counts
    when it carries a ``[tool.keyseq]`` table.
    """
    base = start if start is not None else Path.cwd()
    candidate = base / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject = base / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            data = load_toml_dict(pyproject)
        except ConfigError as e:
            logger.warning("Skipping %s: %s", pyproject, e)
            return None
        if extract_keyseq_table(pyproject, data) is not None:
            return pyproject
    return None


def load_config(path: Path | None = None, *, start: Path | None = None) -> Config:
    """Load the effective configuration.

    Args:
        path (Path | None): Explicit config file; skips discovery when given.
        start (Path | None): Directory to discover from (default: the working directory).

    Returns:
        Config: The frozen configuration (defaults when no file applies).

    Raises:
        ConfigError: If the file is unreadable, malformed, or holds invalid values.
    """
    draft = MutableConfig()
    resolved = path if path is not None else discover_config_file(start)
    if resolved is None:
        logger.debug("No config file found; using defaults")
        return draft.freeze()
    table = extract_keyseq_table(resolved, load_toml_dict(resolved))
    if table is None:
        logger.info("No [tool.%s] table in %s; using defaults", PYPROJECT_TOOL_TABLE, resolved)
        return draft.freeze()
    return draft.merge_with(MutableConfig.from_mapping(table, source=resolved)).freeze()
