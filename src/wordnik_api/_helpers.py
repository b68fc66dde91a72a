"""Small value helpers shared by the client and the response normalizer."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date
from typing import Any

_TAG_RE = re.compile(r"<[^>]*>")
_INTEGER_RE = re.compile(r"\s*-?[0-9]+\s*")


def join_csv(value: str | Iterable[str]) -> str:
    """Join a sequence of filter values with commas; strings pass through."""
    if isinstance(value, str):
        return value
    return ",".join(str(item) for item in value)


def strip_markup(text: str) -> str:
    """Remove tag-like markup, newlines and square brackets from a string.

    Etymologies arrive as fragments such as
    ``<ety>[<ets>Latin</ets> <er>rubeus</er>]</ety>``.
    """
    text = _TAG_RE.sub("", text)
    text = text.replace("\n", "").replace("[", "").replace("]", "")
    return text.strip()


def coerce_int(value: Any) -> Any:
    """Convert a numeric string to ``int``; other values are returned as-is."""
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value):
        return int(value)
    return value


def query_value(value: Any) -> str:
    """Render a parameter value the way the API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
