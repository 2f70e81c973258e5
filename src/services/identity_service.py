"""Principal resolution against Supabase Auth."""

import logging

from supabase_auth.errors import AuthApiError

from src.core.config import get_settings
from src.core.supabase import create_auth_client
from src.schemas.auth import Principal

logger = logging.getLogger(__name__)


class IdentityService:
    """Resolves the principal behind a request's access token.

    Session validation is delegated to Supabase Auth (``auth.get_user``);
    no JWT is decoded locally.
    """

    def __init__(self) -> None:
        """Initialize identity service with settings."""
        self.settings = get_settings()

    async def get_current_user(self, access_token: str | None) -> Principal | None:
        """Resolve the current principal.

        Args:
            access_token: Supabase access token from the request, if any.

        Returns:
            Principal | None: The principal, or None when there is no token,
            Supabase rejects it, or Supabase is not configured.

        Raises:
            Exception: Transport failures talking to Supabase Auth propagate.
        """
        if not access_token:
            return None

        if not self.settings.supabase_configured:
            logger.warning("Supabase is not configured; treating request as unauthenticated")
            return None

        client = create_auth_client()
        try:
            response = client.auth.get_user(access_token)
        except AuthApiError as e:
            logger.info("Access token rejected by Supabase Auth: %s", e.message)
            return None

        if not response or not response.user:
            return None

        return Principal(id=response.user.id, email=response.user.email)
