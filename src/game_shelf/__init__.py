"""
Game Shelf.

Aggregates BoardGameGeek and Steam collections into one game list
and enriches the top entries with cached tags.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
