"""Tests for the unified game record and normalizers."""

import pytest
from pydantic import ValidationError

from game_shelf.contracts import CollectionItem, CollectionStats, OwnedGame
from game_shelf.models import Game, GameSource, cache_key
from game_shelf.normalize import from_collection_item, from_owned_game, playtime_hours


class TestGame:
    """Tests for the Game record."""

    def test_cache_key_namespaces(self) -> None:
        assert cache_key(GameSource.BOARD, "13") == "bgg:13"
        assert cache_key(GameSource.DIGITAL, "13") == "steam:13"

        game = Game(id="42", name="X", source=GameSource.DIGITAL)
        assert game.cache_key == "steam:42"

    def test_frozen(self) -> None:
        game = Game(id="1", name="X", source=GameSource.BOARD)

        with pytest.raises(ValidationError):
            game.tags = ["nope"]  # type: ignore[misc]

    def test_with_tags_returns_copy(self) -> None:
        game = Game(id="1", name="X", source=GameSource.BOARD, rating=7.5)
        tagged = game.with_tags(["Dice"])

        assert tagged.tags == ["Dice"]
        assert tagged.rating == 7.5
        assert game.tags is None

    def test_to_json_uses_camel_case_and_omits_unset(self) -> None:
        game = Game(
            id="1",
            name="Wingspan",
            source=GameSource.BOARD,
            min_players="1",
            max_players="5",
            playing_time="70",
        )

        assert game.to_json() == {
            "id": "1",
            "name": "Wingspan",
            "thumbnail": "",
            "source": "board",
            "minPlayers": "1",
            "maxPlayers": "5",
            "playingTime": "70",
        }

    def test_accepts_camel_case_input(self) -> None:
        game = Game.model_validate(
            {"id": "2", "name": "Y", "source": "digital", "playtimeHours": 12.5}
        )

        assert game.playtime_hours == 12.5

    def test_negative_playtime_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Game(id="1", name="X", source=GameSource.DIGITAL, playtime_hours=-1)


class TestNormalize:
    """Tests for source item normalization."""

    def test_from_collection_item(self) -> None:
        item = CollectionItem(
            objectid="13",
            name="CATAN",
            thumbnail="https://example.com/catan.jpg",
            stats=CollectionStats(minplayers="3", maxplayers="4", playingtime="120", average_rating=7.1),
        )

        game = from_collection_item(item)

        assert game.id == "13"
        assert game.source is GameSource.BOARD
        assert game.min_players == "3"
        assert game.playing_time == "120"
        assert game.rating == 7.1
        assert game.playtime_hours is None
        assert game.tags is None

    def test_from_owned_game(self) -> None:
        owned = OwnedGame(appid=413150, name="Stardew Valley", img_icon_url="abc", playtime_forever=7215)

        game = from_owned_game(owned)

        assert game.id == "413150"
        assert game.source is GameSource.DIGITAL
        assert game.playtime_hours == 120.3
        assert game.thumbnail == (
            "https://media.steampowered.com/steamcommunity/public/images/apps/413150/abc.jpg"
        )
        assert game.rating is None

    @pytest.mark.parametrize(
        ("minutes", "hours"),
        [(0, 0.0), (60, 1.0), (90, 1.5), (30030, 500.5), (7, 0.1), (9, 0.2), (15, 0.3), (75, 1.3), (7215, 120.3)],
    )
    def test_playtime_hours(self, minutes: int, hours: float) -> None:
        assert playtime_hours(minutes) == hours
