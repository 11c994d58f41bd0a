"""
Data contracts for catalog API responses.

Pydantic models describing what the BoardGameGeek and Steam
endpoints return, decoded before normalization.
"""

from game_shelf.contracts.bgg import (
    BGGErrorPayload,
    CollectionItem,
    CollectionStats,
    ThingItem,
    ThingLink,
    parse_collection,
    parse_things,
)
from game_shelf.contracts.steam import (
    AppDetailsData,
    AppDetailsEntry,
    Genre,
    OwnedGame,
    OwnedGamesResponse,
    VanityURLResponse,
)

__all__ = [
    "AppDetailsData",
    "AppDetailsEntry",
    "BGGErrorPayload",
    "CollectionItem",
    "CollectionStats",
    "Genre",
    "OwnedGame",
    "OwnedGamesResponse",
    "ThingItem",
    "ThingLink",
    "VanityURLResponse",
    "parse_collection",
    "parse_things",
]
