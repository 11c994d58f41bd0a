"""Ranking and merge helpers shared by the enrichers."""

from collections.abc import Callable, Mapping, Sequence

from game_shelf.models import Game


def rank_games(games: Sequence[Game], key: Callable[[Game], float | None]) -> list[Game]:
    """
    Sort descending by ``key``, treating ``None`` as 0.

    The sort is stable: games with equal keys keep their input order.
    """
    return sorted(games, key=lambda game: key(game) or 0.0, reverse=True)


def merge_tags(ranked: Sequence[Game], tags_by_key: Mapping[str, Sequence[str]], limit: int) -> list[Game]:
    """
    Return ``ranked`` with tags applied to the first ``limit`` games.

    Games without an entry in ``tags_by_key``, and every game past
    ``limit``, are passed through unchanged.
    """
    merged: list[Game] = []
    for position, game in enumerate(ranked):
        tags = tags_by_key.get(game.cache_key) if position < limit else None
        merged.append(game.with_tags(list(tags)) if tags is not None else game)
    return merged
