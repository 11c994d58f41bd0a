"""Tests for the HTTP endpoints with injected clients."""

from collections.abc import Iterator, Sequence
from typing import Any

import pytest
from fastapi.testclient import TestClient

from game_shelf.api import app, get_bgg_client, get_settings, get_steam_client, get_tag_cache
from game_shelf.cache import InMemoryTagCache
from game_shelf.catalog import FetchResult, FetchStatus
from game_shelf.config import Settings
from game_shelf.models import Game, GameSource


def _result(status: FetchStatus, data: Any = None, status_code: int | None = None, error: str | None = None) -> FetchResult[Any]:
    return FetchResult(
        status=status,
        data=data,
        status_code=status_code,
        error_message=error,
        source="stub",
        endpoint="stub",
    )


class StubBGGClient:
    def __init__(self, collection: FetchResult[Any], tags: dict[str, list[str]] | None = None) -> None:
        self.collection = collection
        self.tags = tags or {}
        self.usernames: list[str] = []

    async def fetch_collection(self, username: str) -> FetchResult[Any]:
        self.usernames.append(username)
        return self.collection

    async def fetch_tags(self, ids: Sequence[str]) -> FetchResult[Any]:
        return _result(FetchStatus.OK, {i: self.tags[i] for i in ids if i in self.tags})


class StubSteamClient:
    def __init__(self, library: FetchResult[Any], genres: dict[str, list[str]] | None = None) -> None:
        self.library = library
        self.genres = genres or {}

    async def fetch_owned_games(self, steam_id: str) -> FetchResult[Any]:
        return self.library

    async def fetch_genres(self, app_id: str) -> FetchResult[Any]:
        return _result(FetchStatus.OK, self.genres.get(app_id, []))


BOARD_GAMES = [
    Game(id="13", name="CATAN", source=GameSource.BOARD, rating=7.1, min_players="3"),
    Game(id="174430", name="Gloomhaven", source=GameSource.BOARD, rating=8.6),
]

DIGITAL_GAMES = [
    Game(id="620", name="Portal 2", source=GameSource.DIGITAL, playtime_hours=4.0),
    Game(id="413150", name="Stardew Valley", source=GameSource.DIGITAL, playtime_hours=120.3),
]


@pytest.fixture
def cache() -> InMemoryTagCache:
    return InMemoryTagCache()


@pytest.fixture
def client_factory(cache: InMemoryTagCache) -> Iterator[Any]:
    """Install stub catalog clients and return a TestClient."""

    def install(bgg: StubBGGClient | None = None, steam: StubSteamClient | None = None) -> TestClient:
        if bgg is not None:
            app.dependency_overrides[get_bgg_client] = lambda: bgg
        if steam is not None:
            app.dependency_overrides[get_steam_client] = lambda: steam
        app.dependency_overrides[get_tag_cache] = lambda: cache
        app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
        return TestClient(app)

    yield install
    app.dependency_overrides.clear()


class TestBGGEndpoint:
    """Tests for GET /api/bgg."""

    def test_username_required(self, client_factory: Any) -> None:
        client = client_factory(bgg=StubBGGClient(_result(FetchStatus.OK, [])))

        response = client.get("/api/bgg")

        assert response.status_code == 400
        assert response.json() == {"error": "Username is required"}

    def test_collection(self, client_factory: Any) -> None:
        bgg = StubBGGClient(_result(FetchStatus.OK, BOARD_GAMES))
        client = client_factory(bgg=bgg)

        response = client.get("/api/bgg", params={"username": "alice"})

        assert response.status_code == 200
        games = response.json()["games"]
        assert [g["id"] for g in games] == ["13", "174430"]
        assert games[0]["minPlayers"] == "3"
        assert "tags" not in games[0]
        assert bgg.usernames == ["alice"]

    def test_collection_enriched(self, client_factory: Any, cache: InMemoryTagCache) -> None:
        bgg = StubBGGClient(_result(FetchStatus.OK, BOARD_GAMES), tags={"174430": ["Adventure"]})
        client = client_factory(bgg=bgg)

        response = client.get("/api/bgg", params={"username": "alice", "enrich": "true"})

        games = response.json()["games"]
        assert [g["id"] for g in games] == ["174430", "13"]
        assert games[0]["tags"] == ["Adventure"]
        assert "tags" not in games[1]
        assert "bgg:174430" in cache

    def test_processing(self, client_factory: Any) -> None:
        client = client_factory(
            bgg=StubBGGClient(
                _result(FetchStatus.PROCESSING, status_code=202, error="BGG is processing your request. Please try again later.")
            )
        )

        response = client.get("/api/bgg", params={"username": "alice"})

        assert response.status_code == 202
        assert "try again later" in response.json()["error"]

    def test_remote_failure(self, client_factory: Any) -> None:
        client = client_factory(
            bgg=StubBGGClient(_result(FetchStatus.FAILED, status_code=404, error="Failed to fetch collection from BGG. Status: 404"))
        )

        response = client.get("/api/bgg", params={"username": "alice"})

        assert response.status_code == 404


class TestSteamEndpoint:
    """Tests for GET /api/steam."""

    def test_steam_id_required(self, client_factory: Any) -> None:
        client = client_factory(steam=StubSteamClient(_result(FetchStatus.OK, [])))

        response = client.get("/api/steam")

        assert response.status_code == 400
        assert response.json() == {"error": "Steam ID or Vanity URL is required"}

    def test_library_enriched(self, client_factory: Any, cache: InMemoryTagCache) -> None:
        steam = StubSteamClient(_result(FetchStatus.OK, DIGITAL_GAMES), genres={"413150": ["Indie", "RPG"]})
        client = client_factory(steam=steam)

        response = client.get("/api/steam", params={"steamId": "76561197960287930", "enrich": "true"})

        assert response.status_code == 200
        games = response.json()["games"]
        assert [g["id"] for g in games] == ["413150", "620"]
        assert games[0]["tags"] == ["Indie", "RPG"]
        assert games[0]["playtimeHours"] == 120.3
        assert games[1]["tags"] == []

    def test_private_profile(self, client_factory: Any) -> None:
        client = client_factory(
            steam=StubSteamClient(_result(FetchStatus.FAILED, status_code=403, error="Profile is private"))
        )

        response = client.get("/api/steam", params={"steamId": "someone"})

        assert response.status_code == 403
        assert response.json() == {"error": "Profile is private"}
