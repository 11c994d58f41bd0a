"""Tag cache interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence


class TagCache(ABC):
    """
    Key-value store from ``"{namespace}:{id}"`` keys to tag lists.

    Implementations must tolerate concurrent ``get_tags`` and
    ``save_tags`` calls from independent enrichment runs; last write
    wins on overlapping keys.
    """

    @abstractmethod
    async def get_tags(self, keys: Sequence[str]) -> dict[str, list[str]]:
        """
        Bulk lookup.

        Keys absent from the store are omitted from the result. A key
        stored with an empty list is present with ``[]``.
        """
        ...

    @abstractmethod
    async def save_tags(self, entries: Mapping[str, Sequence[str]]) -> None:
        """Bulk upsert; saving the same entries twice is a no-op."""
        ...
