"""Admin authorization service."""

import logging

from postgrest.exceptions import APIError as PostgrestAPIError

from src.api.middleware.error_handler import DatabaseError
from src.core.supabase import get_service_client
from src.models.admin import AdminRecord
from src.schemas.auth import AdminAccessReason, AdminAccessResult, Principal
from src.services.identity_service import IdentityService

logger = logging.getLogger(__name__)

# PostgREST error code for ``.single()`` matching zero rows
NO_ROWS_CODE = "PGRST116"


class AdminRecordStore:
    """Read-only lookup of ``admin_users`` rows.

    This is the only holder of the service-role Supabase client. RLS on
    ``admin_users`` blocks the anon key, so the lookup runs with elevated
    credentials; keep any other elevated query out of this class.
    """

    def __init__(self) -> None:
        """Initialize store with the service-role Supabase client."""
        self.client = get_service_client()

    def find_by_principal_id(self, user_id: str) -> AdminRecord | None:
        """Find the admin record for a principal.

        Args:
            user_id: Supabase auth user ID.

        Returns:
            AdminRecord | None: The record, or None if the user is not an admin.

        Raises:
            DatabaseError: On any PostgREST failure other than zero rows.
        """
        try:
            response = (
                self.client.table("admin_users")
                .select("role")
                .eq("user_id", user_id)
                .single()
                .execute()
            )
        except PostgrestAPIError as e:
            if e.code == NO_ROWS_CODE:
                return None
            raise DatabaseError("Database error checking admin status") from e

        return response.data if response.data else None


class AdminService:
    """Service deciding whether the current principal is an admin."""

    def __init__(
        self,
        identity_service: IdentityService | None = None,
        record_store: AdminRecordStore | None = None,
    ) -> None:
        """Initialize admin service with identity and admin record lookups."""
        self.identity_service = identity_service or IdentityService()
        self._record_store = record_store

    @property
    def record_store(self) -> AdminRecordStore:
        # Built lazily so unauthenticated requests never touch the service-role client
        if self._record_store is None:
            self._record_store = AdminRecordStore()
        return self._record_store

    async def get_admin_role(self, user: Principal) -> str | None:
        """Look up the admin role of an already resolved principal.

        Args:
            user: The resolved principal.

        Returns:
            str | None: The role label, or None if the user is not an admin.

        Raises:
            DatabaseError: If the admin record lookup fails.
        """
        record = self.record_store.find_by_principal_id(str(user.id))
        return record["role"] if record else None

    async def verify_admin_access(self, access_token: str | None) -> AdminAccessResult:
        """Check whether the principal behind ``access_token`` is an admin.

        Outcomes are never raised: every path returns an AdminAccessResult.
        A missing admin record is the common case and is not logged as an
        error.

        Args:
            access_token: Supabase access token from the request, if any.

        Returns:
            AdminAccessResult: Granted with the role, or denied with a reason.
        """
        try:
            user = await self.identity_service.get_current_user(access_token)
            if user is None:
                return AdminAccessResult.denied(
                    AdminAccessReason.UNAUTHENTICATED, "Not authenticated"
                )

            try:
                role = await self.get_admin_role(user)
            except DatabaseError as e:
                logger.error("Admin check error for user %s: %s", user.id, e.__cause__ or e)
                return AdminAccessResult.denied(AdminAccessReason.DATABASE_ERROR, e.message)

            if role is None:
                return AdminAccessResult.denied(
                    AdminAccessReason.ADMIN_ACCESS_REQUIRED, "Admin access required"
                )

            return AdminAccessResult.granted(user, role)

        except Exception:
            logger.exception("verify_admin_access failed unexpectedly")
            return AdminAccessResult.denied(
                AdminAccessReason.INTERNAL_ERROR, "Internal server error"
            )
