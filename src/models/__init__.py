"""Database model type definitions."""

from src.models.admin import AdminRecord
from src.models.profile import UserProfile
from src.models.team import League, Team, TeamSocialHandles

__all__ = [
    "AdminRecord",
    "League",
    "Team",
    "TeamSocialHandles",
    "UserProfile",
]
