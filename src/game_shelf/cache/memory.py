"""In-process tag cache."""

import asyncio
from collections.abc import Mapping, Sequence

from game_shelf.cache.base import TagCache
from game_shelf.logger import get_logger


class InMemoryTagCache(TagCache):
    """
    Dict-backed tag cache guarded by an ``asyncio.Lock``.

    Lists are copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self, initial: Mapping[str, Sequence[str]] | None = None) -> None:
        self._entries: dict[str, tuple[str, ...]] = {
            key: tuple(tags) for key, tags in (initial or {}).items()
        }
        self._lock = asyncio.Lock()
        self._logger = get_logger(__name__, component="tag_cache")

    async def get_tags(self, keys: Sequence[str]) -> dict[str, list[str]]:
        async with self._lock:
            found = {key: list(self._entries[key]) for key in keys if key in self._entries}
        self._logger.debug("Tag lookup", requested=len(keys), found=len(found))
        return found

    async def save_tags(self, entries: Mapping[str, Sequence[str]]) -> None:
        async with self._lock:
            for key, tags in entries.items():
                self._entries[key] = tuple(tags)
        self._logger.debug("Tags saved", entries=len(entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
