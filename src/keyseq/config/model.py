# topmark:header:start
#
#   project      : KeySeq
#   file         : model.py
#   file_relpath : src/keyseq/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq settings: the values, how layers combine, and how they take effect.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by the CLI.
    - `MutableConfig`: the builder that file layers and CLI overrides are merged
      into; `freeze()` yields a `Config`, `Config.thaw()` goes back.
    - `apply_config`: pushes a snapshot into the process (default randomizer seed).

TOML discovery and parsing live in [`keyseq.config.io`][keyseq.config.io].

Recognized keys (top-level table of ``keyseq.toml`` or ``[tool.keyseq]``):

```toml
seed = 42            # seed for the default randomizer
log_level = "DEBUG"  # TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
indent = 2           # JSON output indentation (omit for compact output)
sort_keys = false    # sort object keys in JSON output
```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from keyseq.config.logging import get_logger, parse_log_level
from keyseq.core.errors import KeySeqError
from keyseq.core.randomizer import StdRandomizer, set_default_randomizer

if TYPE_CHECKING:
    from pathlib import Path

    from keyseq.config.logging import KeySeqLogger

logger: KeySeqLogger = get_logger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset({"seed", "log_level", "indent", "sort_keys"})


class ConfigError(KeySeqError):
    """Raised when a configuration value has the wrong type or is out of range."""


def _int_or_none(table: Mapping[str, Any], key: str, where: str) -> int | None:
    value: Any | None = table.get(key)
    if value is None:
        return None
    # bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(
            f"Expected int in {where}.{key}, got {type(value).__name__}: {value!r}",
            {"key": key, "value": value, "where": where},
        )
    return value


def _bool_or_none(table: Mapping[str, Any], key: str, where: str) -> bool | None:
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(
        f"Expected bool in {where}.{key}, got {type(value).__name__}: {value!r}",
        {"key": key, "value": value, "where": where},
    )


def _str_or_none(table: Mapping[str, Any], key: str, where: str) -> str | None:
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(
        f"Expected str in {where}.{key}, got {type(value).__name__}: {value!r}",
        {"key": key, "value": value, "where": where},
    )


# Snapshot


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        seed (int | None): Seed for the process-wide randomizer; None keeps it unseeded.
        log_level (str | None): Log level name; None defers to ``KEYSEQ_LOG_LEVEL``.
        indent (int | None): JSON output indentation; None writes compact JSON.
        sort_keys (bool): Whether JSON objects are written with sorted keys.
        config_files (tuple[Path | str, ...]): Sources merged into this snapshot.
    """

    seed: int | None = None
    log_level: str | None = None
    indent: int | None = None
    sort_keys: bool = False
    config_files: tuple[Path | str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            seed=self.seed,
            log_level=self.log_level,
            indent=self.indent,
            sort_keys=self.sort_keys,
            config_files=list(self.config_files),
        )


# Builder


@dataclass
class MutableConfig:
    """Settings being assembled from defaults, config files and CLI overrides.

    Every field is tri-state: ``None`` means "not set here" and never overrides a
    value set by an earlier layer.
    """

    seed: int | None = None
    log_level: str | None = None
    indent: int | None = None
    sort_keys: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    @classmethod
    def from_mapping(
        cls, table: Mapping[str, Any], *, source: Path | str = "<mapping>"
    ) -> MutableConfig:
        """Build a draft from a parsed TOML table (or any mapping).

        Unknown keys are logged and ignored.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        where = str(source)
        for key in table:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", key, where)
        return cls(
            seed=_int_or_none(table, "seed", where),
            log_level=_str_or_none(table, "log_level", where),
            indent=_int_or_none(table, "indent", where),
            sort_keys=_bool_or_none(table, "sort_keys", where),
            config_files=[source],
        )

    def merge_with(self, other: MutableConfig | Mapping[str, Any]) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        if isinstance(other, Mapping):
            other = MutableConfig.from_mapping(other)
        return MutableConfig(
            seed=other.seed if other.seed is not None else self.seed,
            log_level=other.log_level if other.log_level is not None else self.log_level,
            indent=other.indent if other.indent is not None else self.indent,
            sort_keys=other.sort_keys if other.sort_keys is not None else self.sort_keys,
            config_files=self.config_files + other.config_files,
        )

    def freeze(self) -> Config:
        """Validate this draft and return an immutable `Config`.

        Raises:
            ConfigError: If ``log_level`` is unknown or ``indent`` is negative.
        """
        if self.log_level is not None and parse_log_level(self.log_level) is None:
            raise ConfigError(
                f"Unknown log level: {self.log_level!r}",
                {"log_level": self.log_level},
            )
        if self.indent is not None and self.indent < 0:
            raise ConfigError(
                f"Expected: indent >= 0. Got: {self.indent}.",
                {"indent": self.indent},
            )
        return Config(
            seed=self.seed,
            log_level=self.log_level,
            indent=self.indent,
            sort_keys=bool(self.sort_keys),
            config_files=tuple(self.config_files),
        )


def apply_config(config: Config) -> None:
    """Apply process-wide settings from ``config``.

    A configured ``seed`` replaces the default randomizer with a seeded one.
    """
    if config.seed is not None:
        set_default_randomizer(StdRandomizer(config.seed))
    logger.debug("applied config: %r", config)
