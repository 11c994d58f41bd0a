"""
HTTP endpoints for fetching (and optionally enriching) collections.

Handlers validate the query parameter, delegate to a catalog client
and map the FetchResult onto a JSON response.
"""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, FastAPI, Query, status
from fastapi.responses import JSONResponse

from game_shelf import __version__
from game_shelf.cache import InMemoryTagCache, TagCache
from game_shelf.catalog import BGGClient, FetchResult, SteamClient
from game_shelf.config import Settings, get_settings
from game_shelf.enrichment import BoardGameEnricher, DigitalGameEnricher
from game_shelf.models import Game

app = FastAPI(title="Game Shelf", version=__version__)

_tag_cache = InMemoryTagCache()


def get_tag_cache() -> TagCache:
    return _tag_cache


async def get_bgg_client(settings: Annotated[Settings, Depends(get_settings)]) -> AsyncIterator[BGGClient]:
    async with BGGClient.from_settings(settings) as client:
        yield client


async def get_steam_client(settings: Annotated[Settings, Depends(get_settings)]) -> AsyncIterator[SteamClient]:
    async with SteamClient.from_settings(settings) as client:
        yield client


def _error(status_code: int, message: str | None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message or "Unknown error"})


def _games(games: list[Game]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"games": [game.to_json() for game in games]},
    )


def _failure(result: FetchResult[list[Game]]) -> JSONResponse:
    return _error(result.http_status, result.error_message)


@app.get("/api/bgg")
async def get_bgg_collection(
    client: Annotated[BGGClient, Depends(get_bgg_client)],
    cache: Annotated[TagCache, Depends(get_tag_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
    username: Annotated[str | None, Query()] = None,
    enrich: Annotated[bool, Query()] = False,
) -> JSONResponse:
    if not username:
        return _error(status.HTTP_400_BAD_REQUEST, "Username is required")

    result = await client.fetch_collection(username)
    if not result.success:
        return _failure(result)

    games = result.data or []
    if enrich:
        enricher = BoardGameEnricher(client, cache, top_n=settings.enrichment.top_n)
        games = await enricher.enrich(games)
    return _games(games)


@app.get("/api/steam")
async def get_steam_library(
    client: Annotated[SteamClient, Depends(get_steam_client)],
    cache: Annotated[TagCache, Depends(get_tag_cache)],
    settings: Annotated[Settings, Depends(get_settings)],
    steam_id: Annotated[str | None, Query(alias="steamId")] = None,
    enrich: Annotated[bool, Query()] = False,
) -> JSONResponse:
    if not steam_id:
        return _error(status.HTTP_400_BAD_REQUEST, "Steam ID or Vanity URL is required")

    result = await client.fetch_owned_games(steam_id)
    if not result.success:
        return _failure(result)

    games = result.data or []
    if enrich:
        enricher = DigitalGameEnricher(client, cache, top_n=settings.enrichment.top_n)
        games = await enricher.enrich(games)
    return _games(games)
