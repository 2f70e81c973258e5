"""Supabase client factories for database and auth operations."""

from functools import lru_cache
from typing import Any

from supabase import Client, create_client
from supabase.lib.client_options import SyncClientOptions
from supabase_auth import SyncMemoryStorage

from src.core.config import get_settings


def _client_options(**overrides: Any) -> SyncClientOptions:
    """Build client options with the configured PostgREST timeout applied."""
    settings = get_settings()
    return SyncClientOptions(
        postgrest_client_timeout=settings.supabase_timeout_seconds,
        function_client_timeout=settings.supabase_timeout_seconds,
        **overrides,
    )


@lru_cache
def get_supabase_client() -> Client:
    """Get cached Supabase client singleton for public data reads.

    Uses the anon key, so row-level security policies apply to every query
    made through this client.

    Returns:
        Client: Supabase client instance.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=_client_options(),
    )


@lru_cache
def get_service_client() -> Client:
    """Get cached Supabase client authenticated with the service-role key.

    The service-role key bypasses RLS at the PostgREST level. It is only
    imported by AdminRecordStore, which needs to read ``admin_users`` on
    behalf of a principal that has already been resolved.

    Returns:
        Client: Supabase client instance with elevated credentials.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=_client_options(),
    )


def create_auth_client() -> Client:
    """Create a fresh Supabase client for auth operations.

    Each call creates a new isolated client instance so that a user's
    session never leaks into the cached clients' Authorization header.

    Returns:
        Client: Fresh Supabase client instance with isolated session storage.
    """
    settings = get_settings()
    options = _client_options(
        storage=SyncMemoryStorage(),
        auto_refresh_token=False,
        persist_session=False,
    )
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=options,
    )


def create_user_client(access_token: str) -> Client:
    """Create a fresh Supabase client that queries as the signed-in user.

    PostgREST requests carry the user's access token instead of the anon
    key, so row-level security scopes reads to the user's own rows.

    Args:
        access_token: Supabase access token of the current user.

    Returns:
        Client: Isolated Supabase client bound to the user's token.
    """
    client = create_auth_client()
    client.postgrest.auth(access_token)
    return client


async def check_database_connection() -> dict[str, Any]:
    """Check if database connection is healthy.

    Performs a simple query to verify database connectivity.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        client.table("teams").select("id").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}
