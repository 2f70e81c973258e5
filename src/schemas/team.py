"""Team Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field


class TeamSocial(BaseModel):
    """Team social media handles."""

    model_config = ConfigDict(from_attributes=True)

    twitter: str | None = None
    instagram: str | None = None
    facebook: str | None = None


class TeamResponse(BaseModel):
    """Schema for a single team record.

    Extra columns from the live ``teams`` table are passed through untouched.
    """

    model_config = ConfigDict(from_attributes=True, extra="allow")

    id: str = Field(description="Team slug, e.g. 'lakers'")
    name: str = Field(description="Team name")
    city: str | None = Field(default=None, description="Team city or region")
    full_name: str | None = Field(default=None, description="City and name")
    abbreviation: str | None = Field(default=None, description="Three-letter abbreviation")
    league: str | None = Field(default=None, description="League (NBA or WNBA)")
    conference: str | None = Field(default=None, description="Conference")
    division: str | None = Field(default=None, description="Division (NBA only)")
    logo_url: str | None = Field(default=None, description="Logo image URL")
    primary_color: str | None = Field(default=None, description="Primary brand color (hex)")
    secondary_color: str | None = Field(default=None, description="Secondary brand color (hex)")
    founded: int | None = Field(default=None, description="Founding year")
    championships: int | None = Field(default=None, description="Championship count")
    playoff_appearances: int | None = Field(default=None, description="Playoff appearance count")
    arena: str | None = Field(default=None, description="Home arena")
    location: str | None = Field(default=None, description="Arena location")
    website: str | None = Field(default=None, description="Official website")
    social: TeamSocial | None = Field(default=None, description="Social media handles")
