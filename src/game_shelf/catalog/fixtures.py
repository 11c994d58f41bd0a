"""
Canned catalog responses for demo usernames and ids.

Clients ask their ``FixtureResolver`` before touching the network; a
non-None answer replaces the whole request. ``DemoFixtures`` is enabled
through ``Settings.demo_fixtures`` so the app can be shown without
BGG or Steam credentials.
"""

from collections.abc import Sequence
from typing import Any


class FixtureResolver:
    """Resolver that never short-circuits. Override the hooks to serve fixtures."""

    def collection_xml(self, username: str) -> str | None:
        """Canned BGG collection document for ``username``."""
        return None

    def thing_xml(self, ids: Sequence[str]) -> str | None:
        """Canned BGG thing document covering a batch of ``ids``."""
        return None

    def owned_games(self, steam_id: str) -> list[dict[str, Any]] | None:
        """Canned Steam owned-games list (GetOwnedGames shape)."""
        return None


class NoFixtures(FixtureResolver):
    """Always go to the network."""


DEMO_USERNAME = "mock"
DEMO_STEAM_ID = "mock"
DEMO_THING_IDS = frozenset({"68448", "167791"})

DEMO_COLLECTION_XML = """\
<items totalitems="2" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
<item objecttype="thing" objectid="68448" subtype="boardgame" collid="96698360">
<name sortindex="1">7 Wonders</name>
<yearpublished>2010</yearpublished>
<image>https://cf.geekdo-images.com/35h9Za_JvMMMtx_92kT0Jg__original/img/jt70jJDZ1y1FWJs4ZQf5FI8APVY=/0x0/filters:format(jpeg)/pic7149798.jpg</image>
<thumbnail>https://cf.geekdo-images.com/35h9Za_JvMMMtx_92kT0Jg__small/img/BUOso8b0M1aUOkU80FWlhE8uuxc=/fit-in/200x150/filters:strip_icc()/pic7149798.jpg</thumbnail>
<stats minplayers="2" maxplayers="7" minplaytime="30" maxplaytime="30" playingtime="30" numowned="153606">
<rating value="N/A">
<usersrated value="111315"/>
<average value="7.66526"/>
<bayesaverage value="7.55239"/>
</rating>
</stats>
<status own="1" prevowned="0" fortrade="0" want="0" wanttoplay="0" wanttobuy="0" wishlist="0" preordered="0"/>
<numplays>0</numplays>
</item>
<item objecttype="thing" objectid="167791" subtype="boardgame" collid="12345678">
<name sortindex="1">Terraforming Mars</name>
<yearpublished>2016</yearpublished>
<image>https://cf.geekdo-images.com/wg9oOLcsKvDesSUdZQ4rxw__original/img/LuWkeIx866vYpX8C7Yj_jJ3a464=/0x0/filters:format(jpeg)/pic3536616.jpg</image>
<thumbnail>https://cf.geekdo-images.com/wg9oOLcsKvDesSUdZQ4rxw__small/img/iC5hVbLpD08_O0L8o_jJ3a464=/fit-in/200x150/filters:strip_icc()/pic3536616.jpg</thumbnail>
<stats minplayers="1" maxplayers="5" minplaytime="120" maxplaytime="120" playingtime="120" numowned="100000">
<rating value="N/A">
<usersrated value="80000"/>
<average value="8.4"/>
<bayesaverage value="8.2"/>
</rating>
</stats>
<status own="1" prevowned="0" fortrade="0" want="0" wanttoplay="0" wanttobuy="0" wishlist="0" preordered="0"/>
<numplays>10</numplays>
</item>
</items>
"""

DEMO_THING_XML = """\
<items>
  <item type="boardgame" id="68448">
    <link type="boardgamecategory" id="1002" value="Card Game" />
    <link type="boardgamecategory" id="1015" value="Civilization" />
    <link type="boardgamemechanic" id="2984" value="Closed Drafting" />
    <link type="boardgamemechanic" id="2040" value="Hand Management" />
  </item>
  <item type="boardgame" id="167791">
    <link type="boardgamecategory" id="1002" value="Strategy" />
    <link type="boardgamecategory" id="1084" value="Space Exploration" />
    <link type="boardgamemechanic" id="2040" value="Hand Management" />
    <link type="boardgamemechanic" id="2023" value="Engine Building" />
  </item>
</items>
"""

DEMO_OWNED_GAMES: list[dict[str, Any]] = [
    {
        "appid": 10,
        "name": "Counter-Strike",
        "img_icon_url": "6b0312cda02f5f777efa2f3318c307ff9acafbb5",
        "playtime_forever": 30030,
    },
    {
        "appid": 413150,
        "name": "Stardew Valley",
        "img_icon_url": "687a4128dfd9876d750a9df03d4957e28424a919",
        "playtime_forever": 7200,
    },
    {
        "appid": 271590,
        "name": "Grand Theft Auto V",
        "img_icon_url": "0ec5956947b52f6b86a8a3857d9036a655255474",
        "playtime_forever": 3000,
    },
]


class DemoFixtures(FixtureResolver):
    """Serves the demo collection, thing batch and Steam library."""

    def collection_xml(self, username: str) -> str | None:
        if username.lower() == DEMO_USERNAME:
            return DEMO_COLLECTION_XML
        return None

    def thing_xml(self, ids: Sequence[str]) -> str | None:
        # Any demo id in the batch swaps the whole batch for the canned document
        if DEMO_THING_IDS.intersection(ids):
            return DEMO_THING_XML
        return None

    def owned_games(self, steam_id: str) -> list[dict[str, Any]] | None:
        if steam_id == DEMO_STEAM_ID:
            return [dict(game) for game in DEMO_OWNED_GAMES]
        return None


def fixtures_for(enabled: bool) -> FixtureResolver:
    """Pick the resolver for the ``demo_fixtures`` setting."""
    return DemoFixtures() if enabled else NoFixtures()
