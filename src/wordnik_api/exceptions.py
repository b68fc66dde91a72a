"""Exception hierarchy for the Wordnik API client."""

from __future__ import annotations


class WordnikError(Exception):
    """Base exception for all Wordnik API errors."""


class ConfigurationError(WordnikError):
    """No usable configuration (missing API key, unreadable config file)."""


class ApiConnectionError(WordnikError):
    """API is unreachable (network error, DNS, timeout)."""


class ApiError(WordnikError):
    """API returned an error payload that is not a "not found" marker.

    Attributes:
        message: The ``message`` field of the error payload.
        status_code: Status code carried by the payload, if available.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
