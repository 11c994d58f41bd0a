"""Tests for ranking and merge helpers."""

from game_shelf.enrichment import merge_tags, rank_games
from game_shelf.models import Game, GameSource


def board(game_id: str, rating: float | None = None) -> Game:
    return Game(id=game_id, name=f"Game {game_id}", source=GameSource.BOARD, rating=rating)


class TestRankGames:
    """Tests for rank_games."""

    def test_descending(self) -> None:
        games = [board("a", 7.0), board("b", 9.0), board("c", 8.0)]

        ranked = rank_games(games, lambda g: g.rating)

        assert [g.id for g in ranked] == ["b", "c", "a"]

    def test_stable_for_ties_and_missing(self) -> None:
        games = [board("a"), board("b", 5.0), board("c", 0.0), board("d", 5.0), board("e")]

        ranked = rank_games(games, lambda g: g.rating)

        # Missing ratings rank as 0 and keep input order among themselves
        assert [g.id for g in ranked] == ["b", "d", "a", "c", "e"]

    def test_input_untouched(self) -> None:
        games = [board("a", 1.0), board("b", 2.0)]

        rank_games(games, lambda g: g.rating)

        assert [g.id for g in games] == ["a", "b"]


class TestMergeTags:
    """Tests for merge_tags."""

    def test_applies_tags_within_limit_only(self) -> None:
        ranked = [board("1"), board("2"), board("3")]
        tags = {"bgg:1": ["Dice"], "bgg:3": ["Economic"]}

        merged = merge_tags(ranked, tags, limit=2)

        assert merged[0].tags == ["Dice"]
        assert merged[1].tags is None
        assert merged[2].tags is None

    def test_empty_list_is_applied(self) -> None:
        merged = merge_tags([board("1")], {"bgg:1": []}, limit=20)

        assert merged[0].tags == []

    def test_untagged_games_are_same_objects(self) -> None:
        ranked = [board("1"), board("2")]

        merged = merge_tags(ranked, {"bgg:1": ["Dice"]}, limit=20)

        assert merged[1] is ranked[1]
        assert ranked[0].tags is None
