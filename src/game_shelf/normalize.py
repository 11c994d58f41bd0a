"""Map raw catalog items onto the unified ``Game`` record."""

import math

from game_shelf.contracts import CollectionItem, OwnedGame
from game_shelf.models import Game, GameSource

STEAM_ICON_URL = "https://media.steampowered.com/steamcommunity/public/images/apps/{appid}/{icon}.jpg"


def playtime_hours(minutes: int) -> float:
    """Convert Steam's ``playtime_forever`` minutes to hours, one decimal, halves rounded up."""
    return math.floor(minutes / 60 * 10 + 0.5) / 10 if minutes else 0.0


def from_collection_item(item: CollectionItem) -> Game:
    """Normalize a BGG collection item."""
    return Game(
        id=item.objectid,
        name=item.name,
        thumbnail=item.thumbnail,
        source=GameSource.BOARD,
        min_players=item.stats.minplayers,
        max_players=item.stats.maxplayers,
        playing_time=item.stats.playingtime,
        rating=item.stats.average_rating,
    )


def from_owned_game(owned: OwnedGame) -> Game:
    """Normalize a Steam owned game."""
    return Game(
        id=str(owned.appid),
        name=owned.name,
        thumbnail=STEAM_ICON_URL.format(appid=owned.appid, icon=owned.img_icon_url),
        source=GameSource.DIGITAL,
        playtime_hours=playtime_hours(owned.playtime_forever),
    )
