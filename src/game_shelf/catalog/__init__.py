"""
Catalog clients for BoardGameGeek and Steam.

All clients share a common base with HTTP client management,
error types, result wrapping and structured logging.
"""

from game_shelf.catalog.base import (
    APIError,
    BaseCatalogClient,
    CatalogError,
    FetchResult,
    FetchStatus,
    ProcessingError,
    RemoteError,
)
from game_shelf.catalog.bgg import BGGClient
from game_shelf.catalog.fixtures import DemoFixtures, FixtureResolver, NoFixtures, fixtures_for
from game_shelf.catalog.steam import SteamClient

__all__ = [
    # Base classes and errors
    "APIError",
    "BaseCatalogClient",
    "CatalogError",
    "FetchResult",
    "FetchStatus",
    "ProcessingError",
    "RemoteError",
    # Fixtures
    "DemoFixtures",
    "FixtureResolver",
    "NoFixtures",
    "fixtures_for",
    # Clients
    "BGGClient",
    "SteamClient",
]
