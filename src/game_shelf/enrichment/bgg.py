"""Board game enricher: tags from BGG categories and mechanics."""

from typing import Any

from game_shelf.cache import TagCache
from game_shelf.catalog import BGGClient
from game_shelf.enrichment.base import BaseEnricher
from game_shelf.models import Game, GameSource, cache_key


class BoardGameEnricher(BaseEnricher):
    """
    Ranks by BGG rating and resolves misses with one batched thing request.

    A failed batch tags nothing and caches nothing, so every miss is
    retried on the next run. Games the thing response has no tags for
    are not cached either.

    Example:
        >>> async with BGGClient() as client:
        ...     enricher = BoardGameEnricher(client, InMemoryTagCache())
        ...     games = await enricher.enrich(collection)
    """

    source = GameSource.BOARD

    def __init__(self, client: BGGClient, cache: TagCache, **kwargs: Any) -> None:
        super().__init__(cache, **kwargs)
        self._client = client

    def ranking_key(self, game: Game) -> float | None:
        return game.rating

    async def _resolve_misses(self, misses: list[Game]) -> dict[str, list[str]]:
        ids = [game.id for game in misses]
        result = await self._client.fetch_tags(ids)

        if not result.success or not result.data:
            if not result.success:
                self._logger.warning(
                    "Batch tag fetch failed, leaving misses untagged",
                    misses=len(ids),
                    status_code=result.status_code,
                    error=result.error_message,
                )
            return {}

        requested = set(ids)
        return {
            cache_key(self.source, game_id): tags
            for game_id, tags in result.data.items()
            if game_id in requested and tags
        }
