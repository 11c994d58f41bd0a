"""
Data contracts for Steam Web API and Store API responses.

These Pydantic models define the expected structure of data
from the Steam APIs, providing validation and type safety.
"""

from pydantic import BaseModel, Field


class Genre(BaseModel):
    """Game genre."""

    id: str = ""
    description: str


class AppDetailsData(BaseModel):
    """``data`` block of /appdetails filtered to genres."""

    genres: list[Genre] = Field(default_factory=list)


class AppDetailsEntry(BaseModel):
    """
    Per-app entry of the /appdetails response.

    The API returns ``{app_id: {success: bool, data: {...}}}``.
    """

    success: bool
    data: AppDetailsData | None = None

    @property
    def genre_names(self) -> list[str]:
        """Extract genre names as simple list."""
        if not self.success or self.data is None:
            return []
        return [g.description for g in self.data.genres]


class OwnedGame(BaseModel):
    """A game from IPlayerService/GetOwnedGames."""

    appid: int = Field(..., gt=0)
    name: str = ""
    img_icon_url: str = ""
    playtime_forever: int = Field(default=0, ge=0, description="Minutes played")


class OwnedGamesResponse(BaseModel):
    """``response`` block of GetOwnedGames; ``games`` is absent for private profiles."""

    game_count: int = 0
    games: list[OwnedGame] | None = None


class VanityURLResponse(BaseModel):
    """``response`` block of ISteamUser/ResolveVanityURL."""

    success: int = 0
    steamid: str | None = None
    message: str | None = None

    @property
    def resolved(self) -> bool:
        return self.success == 1 and bool(self.steamid)
