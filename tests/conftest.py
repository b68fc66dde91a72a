"""Conftest: a fake aiohttp session so client tests never touch the network.

The fake records every GET (URL and query params) and replays canned
responses, which is all ``WordnikApiClient`` needs from a session.
"""

from __future__ import annotations

import json
from collections import deque
from typing import Any

import pytest

from wordnik_api import Configuration, WordnikApiClient


# --------------------------------------------------------------------------- #
#  Lightweight aiohttp stand-ins
# --------------------------------------------------------------------------- #


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as a context manager."""

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        *,
        text: str | None = None,
        undecodable: bool = False,
    ) -> None:
        self.status = status
        self._undecodable = undecodable
        if text is not None:
            self._text = text
        elif body is None:
            self._text = ""
        else:
            self._text = json.dumps(body)

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *_: Any) -> None:
        return None

    async def text(self) -> str:
        if self._undecodable:
            raise UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")
        return self._text


class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.timeouts: list[Any] = []
        self._responses: deque[FakeResponse | Exception] = deque()
        self.closed = False

    def queue(
        self,
        status: int = 200,
        body: Any = None,
        *,
        text: str | None = None,
        undecodable: bool = False,
    ) -> None:
        self._responses.append(FakeResponse(status, body, text=text, undecodable=undecodable))

    def queue_error(self, error: Exception) -> None:
        self._responses.append(error)

    def get(
        self, url: str, *, params: dict[str, str] | None = None, timeout: Any = None
    ) -> FakeResponse:
        self.calls.append((url, dict(params or {})))
        self.timeouts.append(timeout)
        item = self._responses.popleft()
        if isinstance(item, Exception):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True


# --------------------------------------------------------------------------- #
#  Fixtures
# --------------------------------------------------------------------------- #


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def configuration() -> Configuration:
    return Configuration(api_key="test-key")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession, configuration: Configuration) -> WordnikApiClient:
    return WordnikApiClient(session, configuration=configuration)  # type: ignore[arg-type]


@pytest.fixture
def raw_client(session: FakeSession, configuration: Configuration) -> WordnikApiClient:
    return WordnikApiClient(session, configuration=configuration, clean_up=False)  # type: ignore[arg-type]
