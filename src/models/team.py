"""Team model type definitions for database operations."""

from typing import Literal, TypedDict

League = Literal["NBA", "WNBA"]


class TeamSocialHandles(TypedDict, total=False):
    """Social media handles stored alongside a team."""

    twitter: str
    instagram: str
    facebook: str


class Team(TypedDict):
    """Team row representation.

    Shared shape of a ``teams`` table row and an entry of the bundled
    static index (``src/data/teams.json``).
    """

    id: str
    name: str
    city: str
    full_name: str
    abbreviation: str
    league: League
    conference: str | None
    division: str | None
    logo_url: str
    primary_color: str
    secondary_color: str
    founded: int
    championships: int
    playoff_appearances: int
    arena: str | None
    location: str | None
    website: str | None
    social: TeamSocialHandles | None
