"""User profile service for the current-user endpoint."""

import logging

from postgrest.exceptions import APIError as PostgrestAPIError

from src.api.middleware.error_handler import DatabaseError
from src.core.supabase import create_user_client
from src.models.profile import UserProfile
from src.schemas.auth import Principal

logger = logging.getLogger(__name__)

DEFAULT_MEMBERSHIP_STATUS = "free"


class ProfileService:
    """Reads the signed-in user's own ``user_profiles`` row.

    Queries run under the user's access token, never the service-role key.
    """

    async def get_profile(self, user: Principal, access_token: str) -> UserProfile | None:
        """Get the profile row of the current user.

        Args:
            user: The resolved principal.
            access_token: The principal's Supabase access token.

        Returns:
            UserProfile | None: The profile, or None if the user has none.

        Raises:
            DatabaseError: If the query fails.
        """
        client = create_user_client(access_token)
        try:
            response = (
                client.table("user_profiles")
                .select("full_name, membership_status")
                .eq("id", str(user.id))
                .maybe_single()
                .execute()
            )
        except PostgrestAPIError as e:
            logger.error("Error fetching profile for user %s: %s", user.id, e.message)
            raise DatabaseError("Failed to fetch user profile") from e

        return response.data if response and response.data else None
