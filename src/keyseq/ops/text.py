# topmark:header:start
#
#   project      : KeySeq
#   file         : text.py
#   file_relpath : src/keyseq/ops/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Consume a sequence into a single string."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from keyseq.core.kinds import is_nested, iter_pairs

if TYPE_CHECKING:
    from collections.abc import Iterator

    from keyseq.core.kinds import Source


def join(
    source: Source[Any],
    glue: str,
    prefix: str | None = None,
    suffix: str | None = None,
) -> str:
    """Concatenate the values with ``glue``, wrapped in ``prefix`` and ``suffix``.

    Values are converted with ``str()``. ``prefix`` and ``suffix`` are added even
    when the source is empty.

    Example:
        ``join([1, 2], ", ", "[", "]")`` is ``"[1, 2]"``.
    """
    body = glue.join(str(value) for _, value in iter_pairs(source))
    return f"{prefix or ''}{body}{suffix or ''}"


def _encode(text: str) -> str:
    # RFC 3986: everything outside the unreserved set is percent-encoded
    return quote(text, safe="-._~")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _query_fields(prefix: str | None, source: Source[Any]) -> Iterator[str]:
    for key, value in iter_pairs(source):
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if value is None:
            continue
        if is_nested(value):
            yield from _query_fields(name, value)
        else:
            yield f"{_encode(name)}={_encode(_scalar(value))}"


def to_url_query(source: Source[Any], namespace: str | None = None) -> str:
    """Build a URL query string from ``source``.

    Nested sequences become bracketed field names (``a[b][0]``, percent-encoded),
    ``None`` values are skipped and booleans are written as ``1``/``0``. With a
    ``namespace`` every top-level key is nested under it.

    Example:
        ``to_url_query({"a": 1, "b": [True, None]})`` is ``"a=1&b%5B0%5D=1"``.
    """
    return "&".join(_query_fields(namespace, source))
