"""Digital game enricher: tags from Steam Store genres."""

import asyncio
from typing import Any

from game_shelf.cache import TagCache
from game_shelf.catalog import SteamClient
from game_shelf.enrichment.base import BaseEnricher
from game_shelf.models import Game, GameSource


class DigitalGameEnricher(BaseEnricher):
    """
    Ranks by hours played and resolves misses with one appdetails
    request per game, all in flight at once.

    Every miss is cached, including those that resolved to no genres
    or whose request failed; they are not fetched again. BoardGameEnricher
    instead caches nothing for a failed batch.
    """

    source = GameSource.DIGITAL

    def __init__(self, client: SteamClient, cache: TagCache, **kwargs: Any) -> None:
        super().__init__(cache, **kwargs)
        self._client = client

    def ranking_key(self, game: Game) -> float | None:
        return game.playtime_hours

    async def _fetch_one(self, game: Game) -> list[str]:
        result = await self._client.fetch_genres(game.id)
        if not result.success:
            self._logger.warning(
                "Genre fetch failed, caching empty tags",
                app_id=game.id,
                status_code=result.status_code,
            )
            return []
        return result.data or []

    async def _resolve_misses(self, misses: list[Game]) -> dict[str, list[str]]:
        results = await asyncio.gather(
            *(self._fetch_one(game) for game in misses),
            return_exceptions=True,
        )

        resolved: dict[str, list[str]] = {}
        for game, result in zip(misses, results):
            if isinstance(result, BaseException):
                self._logger.error("Genre fetch raised", app_id=game.id, error=str(result))
                resolved[game.cache_key] = []
            else:
                resolved[game.cache_key] = result
        return resolved
