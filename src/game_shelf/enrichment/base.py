"""
Base enricher: rank, take the top N, consult the tag cache, fetch the
misses, save what was found and merge the tags into the result.

Subclasses pick the ranking signal and the miss resolution strategy.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from game_shelf.cache import TagCache
from game_shelf.enrichment.utils import merge_tags, rank_games
from game_shelf.logger import get_logger
from game_shelf.models import Game, GameSource

DEFAULT_TOP_N = 20


class BaseEnricher(ABC):
    """
    Abstract tag enricher for one catalog source.

    ``enrich`` never raises: fetch failures and cache errors are logged
    and the affected games are returned without tags.
    """

    source: ClassVar[GameSource]

    def __init__(self, cache: TagCache, *, top_n: int = DEFAULT_TOP_N) -> None:
        self._cache = cache
        self._top_n = top_n
        self._logger = get_logger(
            self.__class__.__name__,
            component="enricher",
            source=self.source.value,
        )

    @abstractmethod
    def ranking_key(self, game: Game) -> float | None:
        """Value games are ranked by, highest first."""
        ...

    @abstractmethod
    async def _resolve_misses(self, misses: list[Game]) -> dict[str, list[str]]:
        """
        Fetch tags for games missing from the cache.

        Returns:
            Mapping from cache key to tags for every miss that should
            be saved and applied. Misses left out stay untagged.
        """
        ...

    async def _lookup(self, keys: list[str]) -> dict[str, list[str]]:
        try:
            return await self._cache.get_tags(keys)
        except Exception as e:
            self._logger.error("Tag cache lookup failed, treating as miss", error=str(e))
            return {}

    async def _save(self, entries: dict[str, list[str]]) -> None:
        try:
            await self._cache.save_tags(entries)
        except Exception as e:
            self._logger.error("Tag cache save failed", entries=len(entries), error=str(e))

    async def enrich(self, games: Sequence[Game]) -> list[Game]:
        """
        Return ``games`` ranked, with tags on the top N where resolved.

        Args:
            games: Games of this enricher's source

        Returns:
            Every input game, sorted by ranking key descending
        """
        ranked = rank_games(games, self.ranking_key)
        candidates = ranked[: self._top_n]
        if not candidates:
            return ranked

        keys = [game.cache_key for game in candidates]
        cached = await self._lookup(keys)

        resolved = {key: cached[key] for key in keys if key in cached}
        misses = [game for game in candidates if game.cache_key not in cached]

        self._logger.info(
            "Tag cache lookup complete",
            candidates=len(candidates),
            hits=len(candidates) - len(misses),
            misses=len(misses),
        )

        if misses:
            try:
                fetched = await self._resolve_misses(misses)
            except Exception as e:
                self._logger.error("Tag resolution failed", misses=len(misses), error=str(e))
                fetched = {}

            if fetched:
                await self._save(fetched)
                resolved.update(fetched)
                self._logger.info("New tags saved", entries=len(fetched))

        return merge_tags(ranked, resolved, self._top_n)
