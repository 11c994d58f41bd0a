"""
Data contracts for BoardGameGeek XML API v2 responses.

The XML documents are decoded with ElementTree into these Pydantic
models. A single ``<item>`` and many ``<item>`` elements decode to the
same list shape.
"""

import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field

TAG_LINK_TYPES = frozenset({"category", "mechanic"})


class BGGErrorPayload(ValueError):
    """Raised when BGG answers with an explicit ``<errors>`` document."""


class CollectionStats(BaseModel):
    """Player counts, play time and rating from ``<stats>``."""

    minplayers: str | None = None
    maxplayers: str | None = None
    playingtime: str | None = None
    average_rating: float | None = None


class CollectionItem(BaseModel):
    """One ``<item>`` of the collection endpoint."""

    objectid: str
    name: str = "Unknown"
    thumbnail: str = ""
    stats: CollectionStats = Field(default_factory=CollectionStats)


class ThingLink(BaseModel):
    """A ``<link>`` of a thing item (category, mechanic, designer, ...)."""

    type: str
    value: str

    @property
    def is_tag(self) -> bool:
        """Whether this link is a category or a mechanic."""
        return self.type.removeprefix("boardgame") in TAG_LINK_TYPES


class ThingItem(BaseModel):
    """One ``<item>`` of the thing endpoint."""

    id: str
    links: list[ThingLink] = Field(default_factory=list)

    @property
    def tag_names(self) -> list[str]:
        """Category and mechanic values, de-duplicated, first occurrence wins."""
        return list(dict.fromkeys(link.value for link in self.links if link.is_tag))


def _parse_root(xml_text: str) -> ET.Element:
    root = ET.fromstring(xml_text)
    if root.tag in ("errors", "error"):
        message = root.findtext(".//message") or "BGG returned an error payload"
        raise BGGErrorPayload(message.strip())
    return root


def _node_text(node: ET.Element | None) -> str | None:
    if node is None:
        return None
    text = (node.text or "").strip()
    return text or node.get("value")


def _parse_float(value: str | None) -> float | None:
    try:
        return float(value) if value is not None else None
    except ValueError:
        return None


def parse_collection(xml_text: str) -> list[CollectionItem]:
    """
    Decode a collection document.

    Raises:
        BGGErrorPayload: If the document is an ``<errors>`` payload
        xml.etree.ElementTree.ParseError: If the document is malformed
    """
    root = _parse_root(xml_text)
    if root.tag != "items":
        return []

    items: list[CollectionItem] = []
    for node in root.findall("item"):
        object_id = node.get("objectid")
        if not object_id:
            continue

        stats_node = node.find("stats")
        stats = CollectionStats()
        if stats_node is not None:
            average = stats_node.find("rating/average")
            stats = CollectionStats(
                minplayers=stats_node.get("minplayers"),
                maxplayers=stats_node.get("maxplayers"),
                playingtime=stats_node.get("playingtime"),
                average_rating=_parse_float(average.get("value") if average is not None else None),
            )

        items.append(
            CollectionItem(
                objectid=object_id,
                name=_node_text(node.find("name")) or "Unknown",
                thumbnail=_node_text(node.find("thumbnail")) or "",
                stats=stats,
            )
        )
    return items


def parse_things(xml_text: str) -> list[ThingItem]:
    """
    Decode a thing document into items with their links.

    Raises:
        BGGErrorPayload: If the document is an ``<errors>`` payload
        xml.etree.ElementTree.ParseError: If the document is malformed
    """
    root = _parse_root(xml_text)
    if root.tag != "items":
        return []

    return [
        ThingItem(
            id=node.get("id", ""),
            links=[
                ThingLink(type=link.get("type", ""), value=link.get("value", ""))
                for link in node.findall("link")
            ],
        )
        for node in root.findall("item")
        if node.get("id")
    ]
