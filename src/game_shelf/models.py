"""
Unified game record shared by every catalog source.

BGG collection items and Steam owned games are both normalized into
``Game`` so that enrichment and the HTTP layer handle one shape.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GameSource(str, Enum):
    """Catalog a game record came from."""

    BOARD = "board"
    DIGITAL = "digital"

    @property
    def cache_namespace(self) -> str:
        """Prefix used for this source's tag cache keys."""
        return _CACHE_NAMESPACES[self]


_CACHE_NAMESPACES = {
    GameSource.BOARD: "bgg",
    GameSource.DIGITAL: "steam",
}


class Game(BaseModel):
    """
    A single game in a user's collection.

    ``id`` is only unique together with ``source``. Records are frozen;
    enrichment produces tagged copies instead of mutating them.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., description="Source-scoped identifier")
    name: str = Field(..., description="Display title")
    thumbnail: str = Field(default="", description="Thumbnail URL, may be empty")
    source: GameSource

    # Board games
    min_players: str | None = None
    max_players: str | None = None
    playing_time: str | None = Field(default=None, description="Minutes, as reported")
    rating: float | None = Field(default=None, description="Ranking signal for enrichment")

    # Digital games
    playtime_hours: float | None = Field(default=None, ge=0)

    tags: list[str] | None = None

    @property
    def cache_key(self) -> str:
        """Namespaced tag cache key for this game."""
        return cache_key(self.source, self.id)

    def with_tags(self, tags: list[str]) -> "Game":
        """Return a copy carrying ``tags``."""
        return self.model_copy(update={"tags": list(tags)})

    def to_json(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def cache_key(source: GameSource, game_id: str) -> str:
    """Build the ``"{namespace}:{id}"`` tag cache key."""
    return f"{source.cache_namespace}:{game_id}"
