# topmark:header:start
#
#   project      : KeySeq
#   file         : registry.py
#   file_relpath : src/keyseq/cli/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of eager operations exposed by ``keyseq apply``.

Only operations whose parameters are plain data (numbers, strings, JSON
arrays/objects) are listed; operations taking callbacks cannot be driven from a
command line. Each entry records which optional knobs (``reindex``,
``randomizer``) the operation understands, so the ``apply`` command can forward
its flags only where they apply.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from keyseq.cli.errors import KeySeqUsageError
from keyseq.ops import (
    access,
    grouping,
    membership,
    reductions,
    sampling,
    selection,
    setops,
    sorting,
    structure,
    text,
)

if TYPE_CHECKING:
    from types import ModuleType

# Forwarded from CLI flags (reindex, randomizer) or not expressible as data.
_HIDDEN_PARAMS: frozenset[str] = frozenset(
    {"reindex", "randomizer", "condition", "by", "callback", "comparator"}
)


@dataclass(frozen=True)
class OperationSpec:
    """One CLI-exposed operation.

    Attributes:
        name (str): Operation name (the function name).
        family (str): Name of the ``keyseq.ops`` module defining it.
        func (Callable[..., Any]): The eager function.
    """

    name: str
    family: str
    func: Callable[..., Any]

    @property
    def parameters(self) -> list[inspect.Parameter]:
        """Data parameters: no source sequence, forwarded knobs, or callbacks."""
        params = list(inspect.signature(self.func).parameters.values())[1:]
        return [p for p in params if p.name not in _HIDDEN_PARAMS]

    @property
    def accepts_reindex(self) -> bool:
        return "reindex" in inspect.signature(self.func).parameters

    @property
    def accepts_randomizer(self) -> bool:
        return "randomizer" in inspect.signature(self.func).parameters

    @property
    def summary(self) -> str:
        doc = inspect.getdoc(self.func) or ""
        return doc.splitlines()[0] if doc else ""

    def usage(self) -> str:
        """Return ``name PARAM=... [PARAM=...]`` for help output."""
        parts = [self.name]
        for param in self.parameters:
            if param.default is inspect.Parameter.empty:
                parts.append(f"{param.name}=...")
            else:
                parts.append(f"[{param.name}=...]")
        return " ".join(parts)


_EXPOSED: list[tuple[ModuleType, tuple[str, ...]]] = [
    (
        access,
        (
            "at",
            "get",
            "first",
            "last",
            "first_key",
            "last_key",
            "key_at",
            "keys",
            "values",
            "coalesce",
            "count",
            "is_empty",
        ),
    ),
    (
        membership,
        (
            "contains",
            "contains_all",
            "contains_any",
            "contains_none",
            "contains_key",
            "contains_all_keys",
            "contains_any_keys",
            "contains_slice",
            "starts_with",
            "ends_with",
        ),
    ),
    (
        selection,
        (
            "take_first",
            "take_last",
            "drop_first",
            "drop_last",
            "take_every",
            "drop_every",
            "take_keys",
            "drop_keys",
            "slice",
            "without",
            "replace",
        ),
    ),
    (
        setops,
        ("diff", "diff_keys", "intersect", "intersect_keys", "sym_diff", "unique", "duplicates"),
    ),
    (
        grouping,
        (
            "chunk",
            "slide",
            "split_evenly",
            "split_after_index",
            "split_before_index",
            "flip",
            "flatten",
        ),
    ),
    (
        sorting,
        (
            "sort",
            "sort_asc",
            "sort_desc",
            "sort_by_key",
            "sort_by_key_asc",
            "sort_by_key_desc",
            "reverse",
        ),
    ),
    (
        structure,
        ("pad_left", "pad_right", "repeat", "rotate", "swap", "with_defaults", "from_iterable"),
    ),
    (sampling, ("sample", "sample_key", "sample_keys", "sample_many", "shuffle")),
    (reductions, ("sum", "product", "average", "min", "max", "min_max")),
    (text, ("join", "to_url_query")),
]


def _build() -> dict[str, OperationSpec]:
    registry: dict[str, OperationSpec] = {}
    for module, names in _EXPOSED:
        family = module.__name__.rsplit(".", 1)[-1]
        for name in names:
            registry[name] = OperationSpec(name=name, family=family, func=getattr(module, name))
    return registry


OPERATIONS: dict[str, OperationSpec] = _build()


def get_operation(name: str) -> OperationSpec:
    """Return the spec registered under ``name``.

    Raises:
        KeySeqUsageError: If no such operation is exposed.
    """
    spec = OPERATIONS.get(name)
    if spec is None:
        raise KeySeqUsageError(
            f"Unknown operation: {name!r}. Run 'keyseq ops' to list the available ones."
        )
    return spec
