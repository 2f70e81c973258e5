"""Admin authorization routes."""

from fastapi import APIRouter

from src.api.deps import AccessToken, Admins
from src.schemas.auth import AdminAccessResult

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/access",
    response_model=AdminAccessResult,
    response_model_exclude_none=True,
    summary="Check admin access",
    description="Reports whether the current user holds an admin role. Always 200; the body carries the decision.",
)
async def check_admin_access(token: AccessToken, admins: Admins) -> AdminAccessResult:
    """Return the admin access decision for the current request.

    Args:
        token: Access token from the Authorization header or auth cookie.
        admins: Admin service.

    Returns:
        AdminAccessResult: ``isAdmin`` with the role, or a denial reason.
    """
    return await admins.verify_admin_access(token)
