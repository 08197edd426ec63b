"""
Scryfall API client.

Two lookups are used:
    GET  /cards/named       one card by fuzzy or exact name
    POST /cards/collection  many cards by name in a single request

The collection endpoint returns matched cards in request order with
unmatched identifiers omitted from `data` and listed in `not_found`.

API docs: https://scryfall.com/docs/api/cards/collection
"""

import asyncio
import logging
from collections.abc import AsyncGenerator, Sequence
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Protocol

import httpx

from proxifier.config import MAX_COLLECTION_IDENTIFIERS, settings

logger = logging.getLogger(__name__)

NAMED_PATH = "/cards/named"
COLLECTION_PATH = "/cards/collection"

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


class CardLookupError(Exception):
    """Raised when a lookup against the card database fails."""

    pass


class MalformedResponseError(CardLookupError):
    """Raised when the card database answers with an unexpected body."""

    pass


class TooManyIdentifiersError(CardLookupError):
    """Raised when a collection request exceeds the identifier cap."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Decklist has {count} distinct card names, but Scryfall resolves at most "
            f"{MAX_COLLECTION_IDENTIFIERS} per lookup. Split the list into smaller batches."
        )


@dataclass(frozen=True)
class CollectionResponse:
    """
    Raw answer to a collection lookup.

    Attributes:
        data: Matched card payloads, in request order, unmatched omitted
        not_found: Names that had no match
    """

    data: list[dict[str, Any]] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)


class CardLookup(Protocol):
    """Outbound card database operations used by the resolver and API."""

    async def fetch_collection(self, names: Sequence[str]) -> CollectionResponse: ...

    async def lookup_named(
        self, name: str, set_code: str | None = None, exact: bool = False
    ) -> dict[str, Any] | None: ...


def parse_collection_body(body: Any) -> CollectionResponse:
    """
    Validate and unpack a /cards/collection response body.

    Raises:
        MalformedResponseError: If `data` or `not_found` have the wrong shape
    """
    if not isinstance(body, dict):
        raise MalformedResponseError("Collection response is not an object")

    data = body.get("data")
    if not isinstance(data, list) or not all(isinstance(card, dict) for card in data):
        raise MalformedResponseError("Collection response has no valid 'data' list")

    not_found_names: list[str] = []
    for identifier in body.get("not_found") or []:
        if not isinstance(identifier, dict) or not isinstance(identifier.get("name"), str):
            raise MalformedResponseError(f"Unexpected not_found identifier: {identifier!r}")
        not_found_names.append(identifier["name"])

    return CollectionResponse(data=data, not_found=not_found_names)


class ScryfallClient:
    """
    Async Scryfall client.

    Usage:
        async with ScryfallClient() as client:
            response = await client.fetch_collection(["Lightning Bolt"])

    Every request is bounded by `timeout`. With `retries` above zero,
    transport errors and 429/5xx answers are retried with exponential
    backoff; otherwise the first failure raises CardLookupError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        backoff: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._base_url = base_url or settings.scryfall_base_url
        self._timeout = timeout if timeout is not None else settings.lookup_timeout
        self._retries = retries if retries is not None else settings.lookup_retries
        self._backoff = backoff if backoff is not None else settings.lookup_retry_backoff
        self._user_agent = user_agent or settings.user_agent
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ScryfallClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self._user_agent,
                },
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Send a request, retrying transient failures if configured.

        Returns the response of the last attempt; status handling is left
        to the caller.

        Raises:
            CardLookupError: If the request could not be completed
        """
        client = self._get_client()
        attempts = self._retries + 1

        for attempt in range(attempts):
            last_attempt = attempt == attempts - 1
            delay = self._backoff * (2**attempt)

            try:
                response = await client.request(method, path, **kwargs)
            except httpx.RequestError as e:
                if last_attempt:
                    logger.error("Scryfall %s %s failed: %s", method, path, e)
                    raise CardLookupError(f"Scryfall request failed: {e}") from e
                logger.warning("Scryfall request failed (%s), retrying in %.1fs", e, delay)
                await asyncio.sleep(delay)
                continue

            if response.status_code in RETRYABLE_STATUS and not last_attempt:
                logger.warning(
                    "Scryfall answered %d, retrying in %.1fs", response.status_code, delay
                )
                await asyncio.sleep(delay)
                continue

            return response

        raise CardLookupError("Max retries exceeded for Scryfall request")

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Scryfall returned HTTP %d", e.response.status_code)
            raise CardLookupError(
                f"Scryfall lookup failed: HTTP {e.response.status_code}"
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError("Scryfall response is not valid JSON") from e

    async def fetch_collection(self, names: Sequence[str]) -> CollectionResponse:
        """
        Look up many cards by name in one request.

        Args:
            names: Distinct card names, in the order results should follow

        Returns:
            CollectionResponse with matched payloads and unmatched names

        Raises:
            TooManyIdentifiersError: If there are more names than one
                request may carry
            CardLookupError: If the request fails or times out
            MalformedResponseError: If the body has the wrong shape
        """
        if len(names) > MAX_COLLECTION_IDENTIFIERS:
            raise TooManyIdentifiersError(len(names))

        payload = {"identifiers": [{"name": name} for name in names]}
        response = await self._request("POST", COLLECTION_PATH, json=payload)
        return parse_collection_body(self._json(response))

    async def lookup_named(
        self, name: str, set_code: str | None = None, exact: bool = False
    ) -> dict[str, Any] | None:
        """
        Look up one card by name.

        Args:
            name: Card name
            set_code: Restrict the match to this set
            exact: Require an exact name match instead of a fuzzy one

        Returns:
            Raw card payload, or None if no card matched

        Raises:
            CardLookupError: If the request fails or times out
            MalformedResponseError: If the body is not a card object
        """
        params = {"exact" if exact else "fuzzy": name}
        if set_code:
            params["set"] = set_code.lower()

        response = await self._request("GET", NAMED_PATH, params=params)
        if response.status_code == 404:
            logger.info("No card named %r", name)
            return None

        body = self._json(response)
        if not isinstance(body, dict):
            raise MalformedResponseError("Named lookup response is not an object")
        return body


async def get_card_lookup() -> AsyncGenerator[CardLookup, None]:
    """FastAPI dependency providing a Scryfall client for one request."""
    async with ScryfallClient() as client:
        yield client
