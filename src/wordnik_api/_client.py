"""Wordnik API client."""

from __future__ import annotations

import asyncio
import datetime
import json
import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

import aiohttp

from ._helpers import join_csv, query_value
from ._normalizer import normalize_response, status_code_of
from ._serialization import camelize, decamelize
from .configuration import Configuration
from .const import (
    API_KEY_PARAM,
    CSV_PARAMS,
    DEFAULT_RELATED_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    RANDOM_WORD_ENDPOINT,
    RANDOM_WORDS_ENDPOINT,
    RELATIONSHIP_ANTONYM,
    RELATIONSHIP_EQUIVALENT,
    RELATIONSHIP_HYPERNYM,
    RELATIONSHIP_HYPONYM,
    RELATIONSHIP_RHYME,
    RELATIONSHIP_SYNONYM,
    WORD_AUDIO_ENDPOINT,
    WORD_DEFINITIONS_ENDPOINT,
    WORD_ETYMOLOGIES_ENDPOINT,
    WORD_EXAMPLES_ENDPOINT,
    WORD_FREQUENCY_ENDPOINT,
    WORD_HYPHENATION_ENDPOINT,
    WORD_OF_THE_DAY_ENDPOINT,
    WORD_PHRASES_ENDPOINT,
    WORD_PRONUNCIATIONS_ENDPOINT,
    WORD_RELATED_WORDS_ENDPOINT,
    WORD_SCRABBLE_SCORE_ENDPOINT,
    WORD_TOP_EXAMPLE_ENDPOINT,
)
from .exceptions import ApiConnectionError, ApiError

_LOGGER = logging.getLogger(__name__)


class WordnikApiClient:
    """Async client for the Wordnik dictionary API.

    Usage::

        async with WordnikApiClient() as client:
            definitions = await client.definitions("ruby", limit=3)
            score = await client.scrabble_score("ruby")

    With ``clean_up`` enabled (the default) every method returns a simple,
    predictable shape and "not found" answers become empty values. With it
    disabled the decamelized payload is returned as the API sent it.

    If no session is provided, the client creates and manages its own on
    first use. Call ``async_close()`` when done, or use the client as an async
    context manager.

    ``timeout`` (seconds) is applied to every request, including those made
    through a caller-provided session.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        configuration: Configuration | None = None,
        clean_up: bool = True,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._configuration = configuration or Configuration.load()
        self._clean_up = clean_up
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session

    async def __aenter__(self) -> WordnikApiClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.async_close()

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def clean_up(self) -> bool:
        """Whether responses are reshaped into simplified results."""
        return self._clean_up

    async def async_close(self) -> None:
        """Close the HTTP session if the client owns it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    # ------------------------------------------------------------------ #
    #  Word endpoints
    # ------------------------------------------------------------------ #

    async def audio(
        self,
        word: str,
        *,
        use_canonical: bool | None = None,
        limit: int | None = None,
        **params: Any,
    ) -> Any:
        """Fetch audio pronunciation metadata for a word."""
        return await self._call(
            "audio",
            WORD_AUDIO_ENDPOINT.format(word=_quote(word)),
            dict(params, use_canonical=use_canonical, limit=limit),
        )

    async def definitions(
        self,
        word: str,
        *,
        limit: int | None = None,
        part_of_speech: str | Iterable[str] | None = None,
        source_dictionaries: str | Iterable[str] | None = None,
        include_related: bool | None = None,
        use_canonical: bool | None = None,
        include_tags: bool | None = None,
        **params: Any,
    ) -> Any:
        """Fetch definitions for a word.

        Args:
            word: The word to define.
            limit: Maximum number of definitions.
            part_of_speech: One part of speech or several (``["noun", "verb"]``).
            source_dictionaries: One source dictionary or several (``"ahd-5"``).
            include_related: Also return related words.
            use_canonical: Try to return the canonical form of the word.
            include_tags: Return closed-set XML tags in the response.

        With clean-up enabled, definitions without text are dropped.
        """
        return await self._call(
            "definitions",
            WORD_DEFINITIONS_ENDPOINT.format(word=_quote(word)),
            dict(
                params,
                limit=limit,
                part_of_speech=part_of_speech,
                source_dictionaries=source_dictionaries,
                include_related=include_related,
                use_canonical=use_canonical,
                include_tags=include_tags,
            ),
        )

    async def etymologies(
        self,
        word: str,
        *,
        use_canonical: bool | None = None,
        **params: Any,
    ) -> Any:
        """Fetch etymologies for a word, with markup stripped under clean-up."""
        return await self._call(
            "etymologies",
            WORD_ETYMOLOGIES_ENDPOINT.format(word=_quote(word)),
            dict(params, use_canonical=use_canonical),
        )

    async def examples(
        self,
        word: str,
        *,
        include_duplicates: bool | None = None,
        use_canonical: bool | None = None,
        skip: int | None = None,
        limit: int | None = None,
        **params: Any,
    ) -> Any:
        """Fetch usage examples for a word."""
        return await self._call(
            "examples",
            WORD_EXAMPLES_ENDPOINT.format(word=_quote(word)),
            dict(
                params,
                include_duplicates=include_duplicates,
                use_canonical=use_canonical,
                skip=skip,
                limit=limit,
            ),
        )

    async def frequency(
        self,
        word: str,
        *,
        use_canonical: bool | None = None,
        start_year: int | None = None,
        end_year: int | None = None,
        **params: Any,
    ) -> Any:
        """Fetch per-year usage counts for a word.

        With clean-up enabled, returns the list of ``{"year", "count"}``
        entries with both values as integers.
        """
        return await self._call(
            "frequency",
            WORD_FREQUENCY_ENDPOINT.format(word=_quote(word)),
            dict(
                params,
                use_canonical=use_canonical,
                start_year=start_year,
                end_year=end_year,
            ),
        )

    async def hyphenation(
        self,
        word: str,
        *,
        use_canonical: bool | None = None,
        source_dictionary: str | None = None,
        limit: int | None = None,
        **params: Any,
    ) -> Any:
        """Fetch syllable breaks for a word."""
        return await self._call(
            "hyphenation",
            WORD_HYPHENATION_ENDPOINT.format(word=_quote(word)),
            dict(
                params,
                use_canonical=use_canonical,
                source_dictionary=source_dictionary,
                limit=limit,
            ),
        )

    async def phrases(
        self,
        word: str,
        *,
        limit: int | None = None,
        wlmi: int | None = None,
        use_canonical: bool | None = None,
        **params: Any,
    ) -> Any:
        """Fetch bi-gram phrases containing a word."""
        return await self._call(
            "phrases",
            WORD_PHRASES_ENDPOINT.format(word=_quote(word)),
            dict(params, limit=limit, wlmi=wlmi, use_canonical=use_canonical),
        )

    async def pronunciations(
        self,
        word: str,
        *,
        use_canonical: bool | None = None,
        source_dictionary: str | None = None,
        type_format: str | None = None,
        limit: int | None = None,
        **params: Any,
    ) -> Any:
        """Fetch pronunciations for a word.

        ``type_format`` (e.g. ``"IPA"``, ``"ahd-5"``) is sent to the API and,
        with clean-up enabled, also used to keep only entries whose
        ``raw_type`` matches it.
        """
        return await self._call(
            "pronunciations",
            WORD_PRONUNCIATIONS_ENDPOINT.format(word=_quote(word)),
            dict(
                params,
                use_canonical=use_canonical,
                source_dictionary=source_dictionary,
                type_format=type_format,
                limit=limit,
            ),
            options={"type_format": type_format},
        )

    async def related_words(
        self,
        word: str,
        *,
        relationship_types: str | Iterable[str] | None = None,
        limit_per_relationship_type: int | None = None,
        use_canonical: bool | None = None,
        **params: Any,
    ) -> Any:
        """Fetch related-word groups (synonyms, rhymes, ...) for a word."""
        return await self._call(
            "related_words",
            WORD_RELATED_WORDS_ENDPOINT.format(word=_quote(word)),
            dict(
                params,
                relationship_types=relationship_types,
                limit_per_relationship_type=limit_per_relationship_type,
                use_canonical=use_canonical,
            ),
        )

    async def scrabble_score(self, word: str, **params: Any) -> Any:
        """Fetch the Scrabble score of a word; 0 for words Scrabble rejects."""
        return await self._call(
            "scrabble_score",
            WORD_SCRABBLE_SCORE_ENDPOINT.format(word=_quote(word)),
            params,
        )

    async def top_example(
        self,
        word: str,
        *,
        use_canonical: bool | None = None,
        **params: Any,
    ) -> Any:
        """Fetch the single best usage example for a word."""
        return await self._call(
            "top_example",
            WORD_TOP_EXAMPLE_ENDPOINT.format(word=_quote(word)),
            dict(params, use_canonical=use_canonical),
        )

    # ------------------------------------------------------------------ #
    #  Words endpoints
    # ------------------------------------------------------------------ #

    async def random_word(
        self,
        *,
        has_dictionary_def: bool | None = None,
        include_part_of_speech: str | Iterable[str] | None = None,
        exclude_part_of_speech: str | Iterable[str] | None = None,
        **params: Any,
    ) -> Any:
        """Fetch one random word; just the word string under clean-up."""
        return await self._call(
            "random_word",
            RANDOM_WORD_ENDPOINT,
            dict(
                params,
                has_dictionary_def=has_dictionary_def,
                include_part_of_speech=include_part_of_speech,
                exclude_part_of_speech=exclude_part_of_speech,
            ),
        )

    async def random_words(
        self,
        *,
        limit: int | None = None,
        has_dictionary_def: bool | None = None,
        include_part_of_speech: str | Iterable[str] | None = None,
        exclude_part_of_speech: str | Iterable[str] | None = None,
        **params: Any,
    ) -> Any:
        """Fetch several random words; a list of strings under clean-up."""
        return await self._call(
            "random_words",
            RANDOM_WORDS_ENDPOINT,
            dict(
                params,
                limit=limit,
                has_dictionary_def=has_dictionary_def,
                include_part_of_speech=include_part_of_speech,
                exclude_part_of_speech=exclude_part_of_speech,
            ),
        )

    async def word_of_the_day(
        self,
        *,
        date: datetime.date | str | None = None,
        **params: Any,
    ) -> Any:
        """Fetch the word of the day, optionally for a given date.

        Returns ``None`` under clean-up when the API has no word for the date.
        """
        return await self._call(
            "word_of_the_day",
            WORD_OF_THE_DAY_ENDPOINT,
            dict(params, date=date),
        )

    wotd = word_of_the_day

    # ------------------------------------------------------------------ #
    #  Related-word shortcuts
    # ------------------------------------------------------------------ #

    async def rhymes(self, word: str, *, limit: int = DEFAULT_RELATED_LIMIT) -> Any:
        """Words that rhyme with ``word``."""
        return await self._related_of_type(word, RELATIONSHIP_RHYME, limit)

    async def antonyms(self, word: str, *, limit: int = DEFAULT_RELATED_LIMIT) -> Any:
        """Words of opposite meaning."""
        return await self._related_of_type(word, RELATIONSHIP_ANTONYM, limit)

    async def synonyms(self, word: str, *, limit: int = DEFAULT_RELATED_LIMIT) -> Any:
        """Words of the same meaning."""
        return await self._related_of_type(word, RELATIONSHIP_SYNONYM, limit)

    async def hypernyms(self, word: str, *, limit: int = DEFAULT_RELATED_LIMIT) -> Any:
        """Broader terms (``dog`` gives ``mammal``)."""
        return await self._related_of_type(word, RELATIONSHIP_HYPERNYM, limit)

    async def hyponyms(self, word: str, *, limit: int = DEFAULT_RELATED_LIMIT) -> Any:
        """Narrower terms (``mammal`` gives ``dog``)."""
        return await self._related_of_type(word, RELATIONSHIP_HYPONYM, limit)

    async def equivalents(self, word: str, *, limit: int = DEFAULT_RELATED_LIMIT) -> Any:
        """Equivalent words and expressions."""
        return await self._related_of_type(word, RELATIONSHIP_EQUIVALENT, limit)

    async def _related_of_type(
        self, word: str, relationship_type: str, limit: int
    ) -> Any:
        """Flatten the ``words`` of every relation of one type.

        Without clean-up, a payload that is not a list of relations (an error
        or not-found object) is returned unchanged for the caller to inspect.
        """
        relations = await self.related_words(
            word,
            relationship_types=relationship_type,
            limit_per_relationship_type=limit,
        )
        if not isinstance(relations, list):
            return [] if self._clean_up else relations
        return [
            related
            for relation in relations
            if isinstance(relation, dict)
            and relation.get("relationship_type") == relationship_type
            for related in relation.get("words") or []
        ]

    # ------------------------------------------------------------------ #
    #  Internal HTTP layer
    # ------------------------------------------------------------------ #

    async def _call(
        self,
        endpoint: str,
        path: str,
        params: dict[str, Any],
        *,
        options: dict[str, Any] | None = None,
    ) -> Any:
        data = await self._request(path, params)
        return normalize_response(
            endpoint, data, clean_up=self._clean_up, options=options
        )

    def _compose_url(self, path: str) -> str:
        config = self._configuration
        return f"{config.api_url}/{config.api_version}/{path}"

    def _normalize_params(self, params: dict[str, Any]) -> dict[str, str]:
        """Drop unset options, join list filters, camelize, then add the key.

        The API key goes in last so its ``api_key`` name is not camelized.
        """
        prepared = {
            key: join_csv(value) if key in CSV_PARAMS else value
            for key, value in params.items()
            if value is not None
        }
        query = {key: query_value(value) for key, value in camelize(prepared).items()}
        query[API_KEY_PARAM] = self._configuration.api_key
        return query

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def _request(self, path: str, params: dict[str, Any]) -> Any:
        """Execute a GET request and return the decamelized body.

        Error bodies are returned rather than raised so that the endpoint
        policy can decide between "not found" and a real error. An error
        status without an API error object is turned into one.

        Raises:
            ApiError: On a body that is not UTF-8, or a non-JSON body for a
                successful status.
            ApiConnectionError: On network errors and timeouts.
        """
        url = self._compose_url(path)
        query = self._normalize_params(params)
        _LOGGER.debug("GET %s", url)

        timeout = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with self._get_session().get(url, params=query, timeout=timeout) as resp:
                status = resp.status
                try:
                    text = await resp.text()
                except UnicodeDecodeError as err:
                    raise ApiError(
                        f"Undecodable API response: HTTP {status}", status_code=status
                    ) from err
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise ApiConnectionError(f"Connection error: {err}") from err

        _LOGGER.debug("GET %s returned HTTP %s", url, status)
        return _decode_body(status, text)


def _decode_body(status: int, text: str) -> Any:
    if not text.strip():
        data: Any = ""
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as err:
            if status < 400:
                raise ApiError(
                    f"Invalid JSON in API response: HTTP {status}", status_code=status
                ) from err
            data = None
        else:
            data = decamelize(data)

    if status >= 400 and status_code_of(data) is None:
        return {"status_code": status, "message": text.strip() or f"HTTP {status}"}
    return data


def _quote(word: str) -> str:
    return quote(word, safe="")
