"""
Base catalog client with HTTP client management and error handling.

Provides the foundation for the BGG and Steam clients: a lazily
created ``httpx.AsyncClient``, error types carrying the remote status,
a result wrapper, and structured logging.
"""

import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel

from game_shelf.catalog.fixtures import FixtureResolver, NoFixtures
from game_shelf.logger import get_logger

T = TypeVar("T")

USER_AGENT = "GameShelf/1.0"


class CatalogError(Exception):
    """Base exception for catalog client errors."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        endpoint: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class APIError(CatalogError):
    """Raised when the API returns a non-success status."""

    pass


class ProcessingError(CatalogError):
    """Raised while the remote is still preparing a response (HTTP 202)."""

    pass


class RemoteError(CatalogError):
    """Raised when the remote answers with an explicit error payload."""

    pass


class FetchStatus(str, Enum):
    """Outcome of a catalog fetch."""

    OK = "ok"
    PROCESSING = "processing"
    FAILED = "failed"


class FetchResult(BaseModel, Generic[T]):
    """
    Wrapper for catalog fetch results with metadata.

    ``PROCESSING`` means "try again later" and is not a failure.
    """

    status: FetchStatus
    data: T | None = None
    error_message: str | None = None
    status_code: int | None = None
    source: str
    endpoint: str
    duration_ms: float | None = None
    fetched_at: datetime | None = None

    @property
    def success(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def http_status(self) -> int:
        """HTTP status a request handler should answer with."""
        if self.status is FetchStatus.OK:
            return 200
        if self.status is FetchStatus.PROCESSING:
            return 202
        return self.status_code or 500


class BaseCatalogClient(ABC):
    """
    Abstract base class for catalog clients.

    Subclasses define ``source_name`` and ``accept`` and build their
    endpoint-specific fetch methods on ``_get``.
    """

    accept = "application/json"

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        fixtures: FixtureResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            timeout: HTTP request timeout in seconds
            fixtures: Canned responses for demo identifiers (none by default)
            transport: Custom httpx transport, mainly for tests
        """
        self._timeout = timeout
        self._fixtures = fixtures or NoFixtures()
        self._transport = transport
        self._logger = get_logger(
            self.__class__.__name__,
            component="catalog_client",
            source=self.source_name,
        )
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return identifier for this data source."""
        ...

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            "Accept": self.accept,
        }

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                headers=self._default_headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BaseCatalogClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        """
        Issue a GET request.

        Raises:
            APIError: If the response status is not 2xx
            httpx.HTTPError: For transport failures
        """
        self._logger.debug("Making request", url=url)

        response = await self.client.get(url, **kwargs)

        if not response.is_success:
            raise APIError(
                f"API error: {response.status_code}",
                source=self.source_name,
                endpoint=str(response.request.url),
                status_code=response.status_code,
            )
        return response

    def _result(
        self,
        status: FetchStatus,
        endpoint: str,
        started: float,
        *,
        data: Any = None,
        error_message: str | None = None,
        status_code: int | None = None,
    ) -> FetchResult[Any]:
        return FetchResult(
            status=status,
            data=data,
            error_message=error_message,
            status_code=status_code,
            source=self.source_name,
            endpoint=endpoint,
            duration_ms=(time.perf_counter() - started) * 1000,
            fetched_at=datetime.now(timezone.utc),
        )
