"""
Steam Web API and Store API client.

Fetches a user's owned games (resolving vanity names first) and the
genre list of a single app from the Store /appdetails endpoint.
"""

import re
import time
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from game_shelf.catalog.base import (
    APIError,
    BaseCatalogClient,
    FetchResult,
    FetchStatus,
    RemoteError,
)
from game_shelf.catalog.fixtures import fixtures_for
from game_shelf.config import Settings, get_settings
from game_shelf.contracts import (
    AppDetailsEntry,
    OwnedGame,
    OwnedGamesResponse,
    VanityURLResponse,
)
from game_shelf.models import Game
from game_shelf.normalize import from_owned_game

STEAM_ID64 = re.compile(r"^\d{17}$")

PRIVATE_PROFILE_MESSAGE = (
    "Profile is private or ID is invalid. "
    "Ensure your 'Game Details' are set to Public in Steam settings."
)


class SteamClient(BaseCatalogClient):
    """
    Client for the Steam owned-games and appdetails endpoints.

    Example:
        >>> async with SteamClient(api_key="...") as client:
        ...     result = await client.fetch_genres("413150")
        ...     if result.success:
        ...         print(result.data)
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = "https://api.steampowered.com",
        store_url: str = "https://store.steampowered.com/api",
        **kwargs: Any,
    ) -> None:
        """
        Initialize the Steam client.

        Args:
            api_key: Steam Web API key, needed for owned-games lookups only
            base_url: Steam Web API root
            store_url: Steam Store API root
            **kwargs: Arguments passed to BaseCatalogClient
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._store_url = store_url.rstrip("/")
        super().__init__(**kwargs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "SteamClient":
        """Build a client from application settings."""
        settings = settings or get_settings()
        api_key = settings.steam.api_key
        return cls(
            api_key=api_key.get_secret_value() if api_key else None,
            base_url=settings.steam.base_url,
            store_url=settings.steam.store_url,
            timeout=settings.steam.timeout_seconds,
            fixtures=fixtures_for(settings.demo_fixtures),
            **kwargs,
        )

    @property
    def source_name(self) -> str:
        return "steam"

    # Owned games

    async def _resolve_steam_id(self, steam_id: str) -> str:
        """
        Return a SteamID64 for ``steam_id``, resolving vanity names.

        Raises:
            RemoteError: 404 if the vanity name does not resolve, 500 if
                the resolution request itself fails
        """
        if STEAM_ID64.match(steam_id):
            return steam_id

        url = f"{self._base_url}/ISteamUser/ResolveVanityURL/v0001/"
        try:
            response = await self._get(url, params={"key": self._api_key, "vanityurl": steam_id})
            body = response.json()
            payload = body.get("response") if isinstance(body, dict) else None
            resolved = VanityURLResponse.model_validate(payload or {})
        except (httpx.HTTPError, APIError, ValueError) as e:
            self._logger.error("Vanity resolution failed", steam_id=steam_id, error=str(e))
            raise RemoteError(
                "Failed to resolve Steam username",
                source=self.source_name,
                endpoint=url,
                status_code=500,
                original_error=e,
            ) from e

        if not resolved.resolved:
            raise RemoteError(
                "Steam Username not found",
                source=self.source_name,
                endpoint=url,
                status_code=404,
            )
        return resolved.steamid  # type: ignore[return-value]

    async def fetch_owned_games(self, steam_id: str) -> FetchResult[list[Game]]:
        """
        Fetch the games owned by ``steam_id`` (SteamID64 or vanity name).

        Never raises; failures come back as FAILED results carrying the
        HTTP status a handler should answer with.
        """
        url = f"{self._base_url}/IPlayerService/GetOwnedGames/v0001/"
        endpoint = f"{url}?steamid={steam_id}"
        started = time.perf_counter()

        canned = self._fixtures.owned_games(steam_id)
        if canned is not None:
            self._logger.info("Serving fixture library", steam_id=steam_id)
            games = [from_owned_game(OwnedGame.model_validate(raw)) for raw in canned]
            return self._result(FetchStatus.OK, endpoint, started, data=games, status_code=200)

        if not self._api_key:
            self._logger.error("Steam API key is not configured")
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message="Server misconfiguration: API Key missing",
                status_code=500,
            )

        try:
            resolved_id = await self._resolve_steam_id(steam_id)
            response = await self._get(
                url,
                params={
                    "key": self._api_key,
                    "steamid": resolved_id,
                    "include_appinfo": "true",
                    "format": "json",
                },
            )
            body = response.json()
            payload = body.get("response") if isinstance(body, dict) else None
            owned = OwnedGamesResponse.model_validate(payload or {})

        except RemoteError as e:
            self._logger.warning("Vanity name did not resolve", steam_id=steam_id, status_code=e.status_code)
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message=str(e),
                status_code=e.status_code,
            )

        except APIError as e:
            self._logger.error("Owned games request failed", steam_id=steam_id, status_code=e.status_code)
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message=f"Steam API Error: {e.status_code}",
                status_code=e.status_code,
            )

        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers undecodable JSON and pydantic validation errors
            self._logger.error("Owned games request error", steam_id=steam_id, error=str(e))
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message="Internal Server Error fetching Steam games",
                status_code=500,
            )

        if owned.games is None:
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message=PRIVATE_PROFILE_MESSAGE,
                status_code=403,
            )

        games = [from_owned_game(game) for game in owned.games]
        self._logger.info("Owned games fetched", steam_id=steam_id, games=len(games))
        return self._result(FetchStatus.OK, endpoint, started, data=games, status_code=200)

    # App details (tags)

    async def fetch_genres(self, app_id: str) -> FetchResult[list[str]]:
        """
        Fetch the genre descriptions of one app.

        ``success=false`` and missing genres are OK results with an
        empty list; transport and HTTP errors are FAILED results.
        """
        url = f"{self._store_url}/appdetails"
        endpoint = f"{url}?appids={app_id}&filters=genres&l=en"
        started = time.perf_counter()

        try:
            response = await self._get(url, params={"appids": app_id, "filters": "genres", "l": "en"})
            raw_data = response.json()
        except APIError as e:
            self._logger.error("App details request failed", app_id=app_id, status_code=e.status_code)
            return self._result(
                FetchStatus.FAILED,
                endpoint,
                started,
                error_message=str(e),
                status_code=e.status_code,
            )
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("App details request error", app_id=app_id, error=str(e))
            return self._result(FetchStatus.FAILED, endpoint, started, error_message=str(e))

        # Steam returns {app_id: {success: bool, data: {...}}}
        app_data = raw_data.get(str(app_id)) if isinstance(raw_data, dict) else None
        try:
            entry = AppDetailsEntry.model_validate(app_data or {"success": False})
        except PydanticValidationError as e:
            self._logger.warning("Unexpected app details shape", app_id=app_id, error=str(e))
            entry = AppDetailsEntry(success=False)

        if not entry.success:
            self._logger.warning("API returned success=false", app_id=app_id)

        return self._result(FetchStatus.OK, endpoint, started, data=entry.genre_names, status_code=200)
