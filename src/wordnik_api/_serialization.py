"""JSON key transformation between camelCase and snake_case."""

from __future__ import annotations

import re
from datetime import date, timezone
from typing import Any

from dateutil.parser import isoparse

_MODULE_SEPARATOR = "::"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

_TIMESTAMP_RE = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(?:\.[0-9]{2,4})?Z"
)
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def lowercase_first(text: str) -> str:
    """Lowercase the first character only, leaving the rest untouched."""
    if not text:
        return text
    return text[0].lower() + text[1:]


def to_snake(name: str) -> str:
    """Convert a wire (camelCase) key to snake_case.

    ``sourceDictionary`` becomes ``source_dictionary``, ``APIKey`` becomes
    ``api_key`` and ``Word::Nik`` becomes ``word/nik``.
    """
    name = name.replace(_MODULE_SEPARATOR, "/")
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


def to_camel(name: str) -> str:
    """Convert a snake_case key to camelCase.

    Acronyms are not restored: ``api_key`` becomes ``apiKey``.
    """
    if not name:
        return name
    return lowercase_first("".join(capitalize_first(part) for part in name.split("_")))


def parse_timestamp(value: Any) -> Any:
    """Parse ISO timestamps and dates, returning anything else unchanged.

    ``2023-10-01T12:34:56Z`` (optionally with 2-4 fractional digits) becomes
    an aware UTC ``datetime`` and ``2023-10-01`` becomes a ``date``. A string
    matching either pattern that still fails to parse raises ``ValueError``.
    """
    if not isinstance(value, str):
        return value
    if _TIMESTAMP_RE.fullmatch(value):
        return isoparse(value).replace(tzinfo=timezone.utc)
    if _DATE_RE.fullmatch(value):
        return date.fromisoformat(value)
    return value


def decamelize(data: Any) -> Any:
    """Recursively convert all dict keys from camelCase to snake_case.

    Every string leaf is passed through :func:`parse_timestamp`, so nested
    dates come back as ``date``/``datetime`` objects. The input is not
    mutated.
    """
    if isinstance(data, dict):
        return {to_snake(str(k)): decamelize(v) for k, v in data.items()}
    if isinstance(data, list):
        return [decamelize(item) for item in data]
    return parse_timestamp(data)


def camelize(data: Any) -> Any:
    """Recursively convert all dict keys from snake_case to camelCase."""
    if isinstance(data, dict):
        return {to_camel(str(k)): camelize(v) for k, v in data.items()}
    if isinstance(data, list):
        return [camelize(item) for item in data]
    return data

