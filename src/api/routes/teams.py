"""Team lookup routes."""

from fastapi import APIRouter

from src.api.deps import Teams
from src.api.middleware.error_handler import NotFoundError
from src.schemas.common import ErrorResponse
from src.schemas.team import TeamResponse

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get(
    "/{team_id}",
    response_model=TeamResponse,
    summary="Get team by ID",
    description="Returns a single team from the configured team data source.",
    responses={
        404: {"model": ErrorResponse, "description": "Team not found"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
async def get_team(team_id: str, teams: Teams) -> TeamResponse:
    """Get a team by ID.

    Args:
        team_id: The team's ID (e.g. ``lakers``).
        teams: Team repository selected at startup.

    Returns:
        TeamResponse: The team record.

    Raises:
        NotFoundError: If no team has this ID.
    """
    team = teams.get_team(team_id)
    if team is None:
        raise NotFoundError("Team not found")
    return TeamResponse(**team)
