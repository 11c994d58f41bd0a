"""
Command-line interface for Game Shelf.

Fetches collections, optionally enriches them, and serves the HTTP API.
"""

import asyncio
import json
import sys
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from game_shelf.config import get_settings
from game_shelf.logger import get_logger, setup_logging

logger = get_logger(__name__, component="cli")


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(), indent=2, default=str))


async def cmd_bgg(username: str, enrich: bool = False) -> bool:
    """Fetch a BGG collection, optionally with tags."""
    from game_shelf.cache import InMemoryTagCache
    from game_shelf.catalog import BGGClient
    from game_shelf.enrichment import BoardGameEnricher

    settings = get_settings()
    logger.info("Fetching BGG collection", username=username, enrich=enrich)

    async with BGGClient.from_settings(settings) as client:
        result = await client.fetch_collection(username)
        games = result.data or []
        if result.success and enrich:
            enricher = BoardGameEnricher(client, InMemoryTagCache(), top_n=settings.enrichment.top_n)
            games = await enricher.enrich(games)

    print_json(
        CLIOutput(
            success=result.success,
            command="bgg",
            data=[game.to_json() for game in games] if result.success else None,
            error=result.error_message,
        )
    )
    return result.success


async def cmd_steam(steam_id: str, enrich: bool = False) -> bool:
    """Fetch a Steam library, optionally with tags."""
    from game_shelf.cache import InMemoryTagCache
    from game_shelf.catalog import SteamClient
    from game_shelf.enrichment import DigitalGameEnricher

    settings = get_settings()
    logger.info("Fetching Steam library", steam_id=steam_id, enrich=enrich)

    async with SteamClient.from_settings(settings) as client:
        result = await client.fetch_owned_games(steam_id)
        games = result.data or []
        if result.success and enrich:
            enricher = DigitalGameEnricher(client, InMemoryTagCache(), top_n=settings.enrichment.top_n)
            games = await enricher.enrich(games)

    print_json(
        CLIOutput(
            success=result.success,
            command="steam",
            data=[game.to_json() for game in games] if result.success else None,
            error=result.error_message,
        )
    )
    return result.success


def cmd_test_config() -> None:
    """Test configuration loading."""
    settings = get_settings()

    print_json(
        CLIOutput(
            success=True,
            command="test-config",
            data={
                "environment": settings.environment,
                "demo_fixtures": settings.demo_fixtures,
                "bgg_base_url": settings.bgg.base_url,
                "bgg_token_configured": settings.bgg.bearer_token is not None,
                "bgg_max_retries": settings.bgg.max_retries,
                "steam_store_url": settings.steam.store_url,
                "steam_api_key_configured": settings.steam.api_key is not None,
                "enrichment_top_n": settings.enrichment.top_n,
            },
        )
    )


def cmd_serve(port: int = 8000) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("game_shelf.api:app", host="0.0.0.0", port=port)


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
Game Shelf CLI
==============

Usage: game-shelf <command> [arguments]

Commands:
  test-config                 Test configuration loading
  bgg <username>              Fetch a BoardGameGeek collection
  steam <steam_id>            Fetch a Steam library (SteamID64 or vanity name)
  serve                       Run the HTTP API

Options:
  --enrich                    Add tags to the top-ranked games (bgg, steam)
  --port <port>               Port for 'serve' (default 8000)

Examples:
  game-shelf bgg mock --enrich
  game-shelf steam gabelogannewell
"""
    print(usage)


def _option(name: str, default: str) -> str:
    if name in sys.argv:
        idx = sys.argv.index(name)
        if idx + 1 < len(sys.argv):
            return sys.argv[idx + 1]
    return default


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    setup_logging()
    command = sys.argv[1]
    enrich = "--enrich" in sys.argv

    try:
        if command == "test-config":
            cmd_test_config()

        elif command == "bgg":
            if len(sys.argv) < 3:
                print("Error: username required")
                sys.exit(1)
            if not asyncio.run(cmd_bgg(sys.argv[2], enrich=enrich)):
                sys.exit(1)

        elif command == "steam":
            if len(sys.argv) < 3:
                print("Error: steam_id required")
                sys.exit(1)
            if not asyncio.run(cmd_steam(sys.argv[2], enrich=enrich)):
                sys.exit(1)

        elif command == "serve":
            cmd_serve(int(_option("--port", "8000")))

        elif command in ("help", "--help", "-h"):
            print_usage()

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception("CLI error", error=str(e))
        print_json(
            CLIOutput(
                success=False,
                command=command,
                error=str(e),
            )
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
