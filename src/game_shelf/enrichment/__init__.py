"""
Tag enrichment for normalized games.

One enricher per catalog source, sharing the rank / cache / fetch /
merge flow in BaseEnricher.
"""

from game_shelf.enrichment.base import DEFAULT_TOP_N, BaseEnricher
from game_shelf.enrichment.bgg import BoardGameEnricher
from game_shelf.enrichment.steam import DigitalGameEnricher
from game_shelf.enrichment.utils import merge_tags, rank_games

__all__ = [
    "DEFAULT_TOP_N",
    "BaseEnricher",
    "BoardGameEnricher",
    "DigitalGameEnricher",
    "merge_tags",
    "rank_games",
]
