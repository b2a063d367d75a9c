# topmark:header:start
#
#   project      : KeySeq
#   file         : constants.py
#   file_relpath : src/keyseq/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KeySeq Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

KEYSEQ_VERSION: str = get_version("keyseq")

CONFIG_FILE_NAME: str = "keyseq.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "keyseq"

VALUE_NOT_SET: str = "<not set>"
