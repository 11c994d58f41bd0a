"""Tag cache interface and implementations."""

from game_shelf.cache.base import TagCache
from game_shelf.cache.memory import InMemoryTagCache

__all__ = [
    "InMemoryTagCache",
    "TagCache",
]
