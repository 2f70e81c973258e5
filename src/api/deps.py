"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Header, Request

from src.core.config import get_settings
from src.services.admin_service import AdminService
from src.services.profile_service import ProfileService
from src.services.team_service import TeamRepository


def get_access_token(
    request: Request,
    authorization: Annotated[str | None, Header(description="Bearer token")] = None,
) -> str | None:
    """Extract the Supabase access token from the request.

    Checks the Authorization header first, then falls back to the auth
    cookie set by the storefront.

    Args:
        request: FastAPI request object.
        authorization: Optional Authorization header value.

    Returns:
        str | None: The access token or None if not present.
    """
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]

    settings = get_settings()
    return request.cookies.get(settings.auth_cookie_name) or None


def get_admin_service() -> AdminService:
    """Provide an AdminService for the current request."""
    return AdminService()


def get_profile_service() -> ProfileService:
    """Provide a ProfileService for the current request."""
    return ProfileService()


def get_team_repository(request: Request) -> TeamRepository:
    """Return the team repository selected at startup.

    Args:
        request: FastAPI request object.

    Returns:
        TeamRepository: Repository stored on app state by the lifespan hook.
    """
    return request.app.state.team_repository


# Type aliases for cleaner dependency injection
AccessToken = Annotated[str | None, Depends(get_access_token)]
Admins = Annotated[AdminService, Depends(get_admin_service)]
Profiles = Annotated[ProfileService, Depends(get_profile_service)]
Teams = Annotated[TeamRepository, Depends(get_team_repository)]
