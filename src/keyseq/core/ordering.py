# topmark:header:start
#
#   project      : KeySeq
#   file         : ordering.py
#   file_relpath : src/keyseq/core/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordering helpers shared by sorting and set algebra.

Provided:
    - ``SortOrder``: ascending/descending direction with tolerant parsing.
    - ``spaceship(a, b)``: generic three-way comparator (``-1``, ``0`` or ``1``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

_SO = TypeVar("_SO", bound="SortOrder")


def _norm_token(s: str) -> str:
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class SortOrder(str, Enum):
    """Sort direction.

    Attributes:
        ASC: Smallest first.
        DESC: Largest first.
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls: type[_SO], raw: str | SortOrder | None) -> _SO | None:
        """Parse a token (``"asc"``, ``"DESC"``, ``"descending"``) into a member.

        Matching is case-insensitive; returns None on miss.
        """
        if raw is None:
            return None
        if isinstance(raw, cls):
            return raw
        token: str = _norm_token(str(raw.value if isinstance(raw, Enum) else raw))
        for m in cls:
            if token in (m.value, m.name.lower(), f"{m.value}ending"):
                return m
        return None


def spaceship(first: Any, second: Any) -> int:
    """Three-way compare ``first`` with ``second``.

    Args:
        first (Any): Left operand.
        second (Any): Right operand.

    Returns:
        int: ``0`` when equal, ``-1`` when ``first < second``, ``1`` otherwise.

    Raises:
        TypeError: If the operands cannot be ordered against each other.
    """
    if first == second:
        return 0
    return -1 if first < second else 1
