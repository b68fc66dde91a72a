"""Configuration for the Wordnik API client."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .const import (
    CONFIG_FILE_NAME,
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_API_VERSION,
    ENV_API_KEY,
)
from .exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


def default_search_paths() -> list[Path]:
    """Config file locations, in lookup order: working directory, then home."""
    return [Path.cwd() / CONFIG_FILE_NAME, Path.home() / CONFIG_FILE_NAME]


@dataclass(frozen=True, repr=False)
class Configuration:
    """Connection settings shared by every call a client makes.

    Instances are immutable; build one directly or with :meth:`load`.
    """

    api_key: str
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError(
                "No API key found. Please set it in the environment variable "
                f"{ENV_API_KEY} or in a {CONFIG_FILE_NAME} file"
            )
        if not self.api_host:
            raise ConfigurationError("api_host cannot be empty")

    def __repr__(self) -> str:
        return (
            f"<Configuration api_key: *****, api_host: {self.api_host}:{self.api_port}, "
            f"api_version: {self.api_version}>"
        )

    @property
    def api_url(self) -> str:
        """Scheme and authority of the API, without the version segment."""
        if self.api_port == 443:
            return f"https://{self.api_host}"
        if self.api_port == 80:
            return f"http://{self.api_host}"
        return f"https://{self.api_host}:{self.api_port}"

    @classmethod
    def load(
        cls,
        *,
        search_paths: Iterable[Path] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Configuration:
        """Build a configuration from a ``.wordnik.yml`` file and the environment.

        The first existing file among ``search_paths`` is read. The API key
        comes from that file, falling back to ``WORDNIK_API_KEY``; host, port
        and version come from the file or the defaults.

        Raises:
            ConfigurationError: If the file is not valid YAML or no API key
                can be resolved.
        """
        if environ is None:
            environ = os.environ
        paths = default_search_paths() if search_paths is None else search_paths
        loaded = _read_config_file(paths)

        return cls(
            api_key=loaded.get("api_key") or environ.get(ENV_API_KEY) or "",
            api_host=loaded.get("api_host") or DEFAULT_API_HOST,
            api_port=int(loaded.get("api_port") or DEFAULT_API_PORT),
            api_version=loaded.get("api_version") or DEFAULT_API_VERSION,
        )


def _read_config_file(paths: Iterable[Path]) -> dict[str, Any]:
    """Load the first existing YAML file; an empty dict if there is none."""
    for path in paths:
        if not path.is_file():
            continue
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise ConfigurationError(f"Invalid YAML in {path}: {err}") from err
        except OSError as err:
            raise ConfigurationError(f"Could not read {path}: {err}") from err

        if not isinstance(data, dict):
            _LOGGER.warning(
                "Ignoring %s: expected a mapping, got %s", path, type(data).__name__
            )
            return {}
        _LOGGER.debug("Loaded configuration from %s", path)
        return data
    return {}
