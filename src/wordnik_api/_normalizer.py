"""Per-endpoint clean-up policy for decamelized API responses.

The Wordnik API is inconsistent about how it reports "no data": most
endpoints answer with a ``{"status_code": 404, ...}`` object, etymologies
answers with a 500, and word-of-the-day answers with an empty body. Each
endpoint's handling lives in :data:`ENDPOINT_POLICIES` so the deviations
can be read in one place.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ._helpers import coerce_int, strip_markup
from .exceptions import ApiError

STATUS_OK = 200
STATUS_NOT_FOUND = 404
STATUS_SERVER_ERROR = 500

Reshaper = Callable[[Any, Mapping[str, Any]], Any]


@dataclass(frozen=True)
class EndpointPolicy:
    """How one endpoint's payload is reshaped when clean-up is enabled.

    Attributes:
        empty: Factory for the value returned when the API reports no data.
        reshape: Turns a success payload into the caller-facing shape.
        not_found_codes: Status codes treated as "no data" rather than errors.
    """

    empty: Callable[[], Any]
    reshape: Reshaper
    not_found_codes: frozenset[int] = frozenset({STATUS_NOT_FOUND})


def _as_list(payload: Any) -> list[Any]:
    return payload if isinstance(payload, list) else []


def _sequence(payload: Any, _options: Mapping[str, Any]) -> list[Any]:
    return _as_list(payload)


def _mapping(payload: Any, _options: Mapping[str, Any]) -> dict[str, Any]:
    return payload if isinstance(payload, dict) else {}


def _field(name: str, default: Callable[[], Any]) -> Reshaper:
    def reshape(payload: Any, _options: Mapping[str, Any]) -> Any:
        if not isinstance(payload, dict):
            return default()
        value = payload.get(name)
        return default() if value is None else value

    return reshape


def _definitions(payload: Any, _options: Mapping[str, Any]) -> list[Any]:
    return [
        entry
        for entry in _as_list(payload)
        if isinstance(entry, dict) and entry.get("text")
    ]


def _etymologies(payload: Any, _options: Mapping[str, Any]) -> list[Any]:
    return [
        strip_markup(entry) if isinstance(entry, str) else entry
        for entry in _as_list(payload)
    ]


def _frequency(payload: Any, _options: Mapping[str, Any]) -> list[Any]:
    entries = payload.get("frequency") if isinstance(payload, dict) else None
    result = []
    for entry in _as_list(entries):
        if isinstance(entry, dict):
            entry = {
                key: coerce_int(value) if key in ("year", "count") else value
                for key, value in entry.items()
            }
        result.append(entry)
    return result


def _pronunciations(payload: Any, options: Mapping[str, Any]) -> list[Any]:
    entries = _as_list(payload)
    wanted = options.get("type_format")
    if wanted is None:
        return entries
    return [
        entry
        for entry in entries
        if isinstance(entry, dict) and entry.get("raw_type") == wanted
    ]


def _random_words(payload: Any, _options: Mapping[str, Any]) -> list[Any]:
    return [
        entry.get("word") if isinstance(entry, dict) else entry
        for entry in _as_list(payload)
    ]


def _word_of_the_day(payload: Any, _options: Mapping[str, Any]) -> Any:
    # The API answers with an empty body when there is no word for the date.
    if payload == "" or payload is None:
        return None
    return payload


ENDPOINT_POLICIES: dict[str, EndpointPolicy] = {
    "audio": EndpointPolicy(empty=list, reshape=_sequence),
    "definitions": EndpointPolicy(empty=list, reshape=_definitions),
    # Absent etymologies come back as a malformed 500 instead of a 404.
    "etymologies": EndpointPolicy(
        empty=list,
        reshape=_etymologies,
        not_found_codes=frozenset({STATUS_NOT_FOUND, STATUS_SERVER_ERROR}),
    ),
    "examples": EndpointPolicy(empty=list, reshape=_field("examples", list)),
    "frequency": EndpointPolicy(empty=list, reshape=_frequency),
    "hyphenation": EndpointPolicy(empty=list, reshape=_sequence),
    "phrases": EndpointPolicy(empty=list, reshape=_sequence),
    "pronunciations": EndpointPolicy(empty=list, reshape=_pronunciations),
    "related_words": EndpointPolicy(empty=list, reshape=_sequence),
    "scrabble_score": EndpointPolicy(empty=lambda: 0, reshape=_field("value", lambda: 0)),
    "top_example": EndpointPolicy(empty=dict, reshape=_mapping),
    "random_word": EndpointPolicy(empty=lambda: None, reshape=_field("word", lambda: None)),
    "random_words": EndpointPolicy(empty=list, reshape=_random_words),
    "word_of_the_day": EndpointPolicy(empty=lambda: None, reshape=_word_of_the_day),
}


def status_code_of(payload: Any) -> int | None:
    """Return the ``status_code`` embedded in an error-shaped payload, if any."""
    if isinstance(payload, dict) and "status_code" in payload:
        return payload["status_code"]
    return None


def normalize_response(
    endpoint: str,
    payload: Any,
    *,
    clean_up: bool,
    options: Mapping[str, Any] | None = None,
) -> Any:
    """Apply the endpoint's clean-up policy to a decamelized payload.

    With ``clean_up`` disabled the payload is returned untouched, error
    markers included.

    Raises:
        ApiError: If the payload carries a status code that is neither 200
            nor one of the endpoint's not-found codes.
        KeyError: If ``endpoint`` has no policy.
    """
    policy = ENDPOINT_POLICIES[endpoint]
    if not clean_up:
        return payload

    status_code = status_code_of(payload)
    if status_code is not None and status_code != STATUS_OK:
        if status_code in policy.not_found_codes:
            return policy.empty()
        message = payload.get("message") or payload.get("error") or f"HTTP {status_code}"
        raise ApiError(str(message), status_code=status_code)

    return policy.reshape(payload, options or {})
