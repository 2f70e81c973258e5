"""Team lookup service with live and static data sources."""

import json
import logging
from pathlib import Path
from typing import Protocol

from postgrest.exceptions import APIError as PostgrestAPIError

from src.api.middleware.error_handler import DatabaseError
from src.core.config import Settings
from src.core.supabase import get_supabase_client
from src.models.team import Team

logger = logging.getLogger(__name__)

# Bundled team index used when Supabase is not configured
TEAMS_INDEX_PATH = Path(__file__).parent.parent / "data" / "teams.json"


class TeamRepository(Protocol):
    """Read access to team records."""

    source: str

    def get_team(self, team_id: str) -> Team | None:
        ...


class StaticTeamRepository:
    """Team repository backed by the bundled JSON index."""

    source = "static"

    def __init__(self, index_path: Path = TEAMS_INDEX_PATH) -> None:
        """Load the team index from disk.

        Args:
            index_path: Path to a JSON array of team records.
        """
        with open(index_path) as f:
            teams: list[Team] = json.load(f)
        self._teams: dict[str, Team] = {team["id"]: team for team in teams}
        logger.info("Loaded %d teams from %s", len(self._teams), index_path)

    def get_team(self, team_id: str) -> Team | None:
        return self._teams.get(team_id)


class SupabaseTeamRepository:
    """Team repository backed by the Supabase ``teams`` table."""

    source = "supabase"

    def __init__(self) -> None:
        """Initialize repository with the public Supabase client."""
        self.client = get_supabase_client()

    def get_team(self, team_id: str) -> Team | None:
        """Get a team by ID.

        Args:
            team_id: The team's ID.

        Returns:
            Team | None: The team row, or None if not found.

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            response = (
                self.client.table("teams")
                .select("*")
                .eq("id", team_id)
                .maybe_single()
                .execute()
            )
        except PostgrestAPIError as e:
            logger.error("Error fetching team %s: %s", team_id, e.message)
            raise DatabaseError("Failed to fetch team") from e

        return response.data if response and response.data else None


def build_team_repository(settings: Settings) -> TeamRepository:
    """Build the team repository selected by configuration.

    Called once at startup; the choice does not change per request.

    Args:
        settings: Application settings.

    Returns:
        TeamRepository: Supabase-backed or static repository.
    """
    source = settings.resolved_team_data_source
    if source == "supabase":
        if not settings.supabase_configured:
            raise RuntimeError("TEAM_DATA_SOURCE=supabase requires SUPABASE_URL and SUPABASE_ANON_KEY")
        return SupabaseTeamRepository()
    return StaticTeamRepository()
