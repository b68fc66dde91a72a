"""Async Python client for the Wordnik dictionary API."""

from .const import __version__
from ._client import WordnikApiClient
from ._normalizer import ENDPOINT_POLICIES, EndpointPolicy, normalize_response
from ._serialization import camelize, decamelize, parse_timestamp, to_camel, to_snake
from .configuration import Configuration
from .exceptions import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    WordnikError,
)

__all__ = [
    "__version__",
    "WordnikApiClient",
    "Configuration",
    "ApiConnectionError",
    "ApiError",
    "ConfigurationError",
    "WordnikError",
    "ENDPOINT_POLICIES",
    "EndpointPolicy",
    "normalize_response",
    "camelize",
    "decamelize",
    "parse_timestamp",
    "to_camel",
    "to_snake",
]
