"""Authentication routes for the current user."""

import logging

from fastapi import APIRouter

from src.api.deps import AccessToken, Admins, Profiles
from src.api.middleware.error_handler import AuthenticationError, DatabaseError
from src.schemas.auth import CurrentUserInfo, CurrentUserResponse
from src.schemas.common import ErrorResponse
from src.services.profile_service import DEFAULT_MEMBERSHIP_STATUS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "/user",
    response_model=CurrentUserResponse,
    summary="Get current user",
    description="Returns the signed-in user with profile details and whether they hold an admin role.",
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def get_current_user(
    token: AccessToken, admins: Admins, profiles: Profiles
) -> CurrentUserResponse:
    """Return the current user with their profile and admin role.

    A failed admin or profile lookup degrades to a regular free user rather
    than failing the request.

    Args:
        token: Access token from the Authorization header or auth cookie.
        admins: Admin service.
        profiles: Profile service.

    Returns:
        CurrentUserResponse: User info and admin flag.

    Raises:
        AuthenticationError: If no principal can be resolved.
    """
    user = await admins.identity_service.get_current_user(token)
    if user is None:
        raise AuthenticationError("Not authenticated")

    try:
        profile = await profiles.get_profile(user, token)
    except DatabaseError as e:
        logger.warning("Profile lookup failed for user %s: %s", user.id, e.__cause__ or e)
        profile = None

    try:
        role = await admins.get_admin_role(user)
    except DatabaseError as e:
        logger.warning("Admin role lookup failed for user %s: %s", user.id, e.__cause__ or e)
        role = None

    profile = profile or {}
    return CurrentUserResponse(
        user=CurrentUserInfo(
            id=user.id,
            email=user.email,
            full_name=profile.get("full_name"),
            membership_status=profile.get("membership_status") or DEFAULT_MEMBERSHIP_STATUS,
            role=role or "user",
        ),
        is_admin=role is not None,
    )
