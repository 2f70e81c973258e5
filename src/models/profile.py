"""User profile model type definitions for database operations."""

from typing import TypedDict


class UserProfile(TypedDict, total=False):
    """Row of the ``user_profiles`` table as selected for the current user."""

    full_name: str | None
    membership_status: str | None
