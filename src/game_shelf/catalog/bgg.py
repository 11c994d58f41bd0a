"""
BoardGameGeek XML API v2 client.

Fetches a user's owned collection, polling while BGG prepares the
export, and resolves category/mechanic tags for a batch of games
through the thing endpoint.
"""

import time
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from game_shelf.catalog.base import (
    APIError,
    BaseCatalogClient,
    FetchResult,
    FetchStatus,
    ProcessingError,
)
from game_shelf.catalog.fixtures import fixtures_for
from game_shelf.config import Settings, get_settings
from game_shelf.contracts import BGGErrorPayload, parse_collection, parse_things
from game_shelf.models import Game
from game_shelf.normalize import from_collection_item

PROCESSING_MESSAGE = "BGG is processing your request. Please try again later."


class BGGClient(BaseCatalogClient):
    """
    Client for the BGG collection and thing endpoints.

    Example:
        >>> async with BGGClient(bearer_token="...") as client:
        ...     result = await client.fetch_collection("alice")
        ...     if result.success:
        ...         print(len(result.data))
    """

    accept = "application/xml"

    def __init__(
        self,
        *,
        base_url: str = "https://boardgamegeek.com/xmlapi2",
        bearer_token: str | None = None,
        max_retries: int = 6,
        retry_delay: float = 3.0,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the BGG client.

        Args:
            base_url: XML API v2 root
            bearer_token: Sent as ``Authorization: Bearer`` when set
            max_retries: Polling retries after the first collection request
            retry_delay: Seconds to wait between polling attempts
            **kwargs: Arguments passed to BaseCatalogClient
        """
        self._base_url = base_url.rstrip("/")
        self._bearer_token = bearer_token
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        super().__init__(**kwargs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "BGGClient":
        """Build a client from application settings."""
        settings = settings or get_settings()
        token = settings.bgg.bearer_token
        return cls(
            base_url=settings.bgg.base_url,
            bearer_token=token.get_secret_value() if token else None,
            max_retries=settings.bgg.max_retries,
            retry_delay=settings.bgg.retry_delay_seconds,
            timeout=settings.bgg.timeout_seconds,
            fixtures=fixtures_for(settings.demo_fixtures),
            **kwargs,
        )

    @property
    def source_name(self) -> str:
        return "bgg"

    def _default_headers(self) -> dict[str, str]:
        headers = super()._default_headers()
        if self._bearer_token:
            headers["Authorization"] = f"Bearer {self._bearer_token}"
        return headers

    # Collection

    def _log_processing(self, retry_state: RetryCallState) -> None:
        self._logger.warning(
            "Collection still processing, retrying",
            attempt=retry_state.attempt_number,
            max_attempts=self._max_retries + 1,
            wait_seconds=self._retry_delay,
        )

    async def _request_collection(self, url: str, params: dict[str, Any]) -> httpx.Response:
        response = await self._get(url, params=params)
        if response.status_code == 202:
            raise ProcessingError(
                "Collection export is being prepared",
                source=self.source_name,
                endpoint=url,
                status_code=202,
            )
        return response

    async def fetch_collection(self, username: str) -> FetchResult[list[Game]]:
        """
        Fetch the games ``username`` owns.

        Retries while BGG answers 202, waiting a fixed delay between
        attempts. Never raises: exhausted retries give a PROCESSING
        result, remote errors a FAILED result carrying the status code.
        """
        url = f"{self._base_url}/collection"
        params = {"username": username, "own": 1, "stats": 1}
        endpoint = f"{url}?username={username}&own=1&stats=1"
        started = time.perf_counter()

        self._logger.info("Fetching collection", username=username)

        canned = self._fixtures.collection_xml(username)
        if canned is not None:
            self._logger.info("Serving fixture collection", username=username)
            return self._collection_result(canned, endpoint, started)

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(ProcessingError),
                stop=stop_after_attempt(self._max_retries + 1),
                wait=wait_fixed(self._retry_delay),
                before_sleep=self._log_processing,
                reraise=True,
            ):
                with attempt:
                    response = await self._request_collection(url, params)

        except ProcessingError:
            self._logger.warning(
                "Collection still processing after retries",
                username=username,
                attempts=self._max_retries + 1,
            )
            return self._result(
                FetchStatus.PROCESSING,
                endpoint,
                started,
                error_message=PROCESSING_MESSAGE,
                status_code=202,
            )

        except APIError as e:
            self._logger.error("Collection request failed", username=username, status_code=e.status_code)
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message=f"Failed to fetch collection from BGG. Status: {e.status_code}",
                status_code=e.status_code,
            )

        except httpx.HTTPError as e:
            self._logger.error("Collection request error", username=username, error=str(e))
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message="Internal Server Error",
                status_code=500,
            )

        return self._collection_result(response.text, endpoint, started)

    def _collection_result(self, xml_text: str, endpoint: str, started: float) -> FetchResult[list[Game]]:
        try:
            items = parse_collection(xml_text)
        except BGGErrorPayload as e:
            self._logger.error("BGG returned an error payload", error=str(e))
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message="Error parsing BGG response.",
                status_code=500,
            )
        except ET.ParseError as e:
            self._logger.warning("Malformed collection document", error=str(e))
            items = []

        games = [from_collection_item(item) for item in items]
        self._logger.info("Collection fetched", games=len(games))
        return self._result(FetchStatus.OK, endpoint, started, data=games, status_code=200)

    # Thing (tags)

    async def fetch_tags(self, ids: Sequence[str]) -> FetchResult[dict[str, list[str]]]:
        """
        Resolve category and mechanic tags for a batch of game ids.

        One request covers the whole batch. Games without any tag are
        left out of the returned mapping.
        """
        id_list = ",".join(ids)
        endpoint = f"{self._base_url}/thing?id={id_list}&type=boardgame"
        started = time.perf_counter()

        canned = self._fixtures.thing_xml(ids)
        if canned is not None:
            self._logger.info("Serving fixture thing batch", requested=len(ids))
            xml_text = canned
        else:
            try:
                response = await self._get(endpoint)
            except APIError as e:
                self._logger.error("Thing request failed", status_code=e.status_code, requested=len(ids))
                return self._result(
                    FetchStatus.FAILED,
                    endpoint,
                    started,
                    error_message=str(e),
                    status_code=e.status_code,
                )
            except httpx.HTTPError as e:
                self._logger.error("Thing request error", error=str(e), requested=len(ids))
                return self._result(FetchStatus.FAILED, endpoint, started, error_message=str(e))
            xml_text = response.text

        try:
            items = parse_things(xml_text)
        except (BGGErrorPayload, ET.ParseError) as e:
            self._logger.warning("Undecodable thing document", error=str(e))
            items = []

        tags = {item.id: item.tag_names for item in items if item.tag_names}
        return self._result(FetchStatus.OK, endpoint, started, data=tags, status_code=200)
