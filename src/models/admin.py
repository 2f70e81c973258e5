"""Admin user model type definitions for database operations."""

from typing import TypedDict


class AdminRecord(TypedDict):
    """Row of the ``admin_users`` table as selected by the admin check.

    Only ``role`` is selected; the row's existence is the grant.
    """

    role: str
