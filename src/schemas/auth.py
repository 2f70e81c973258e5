"""Authentication schemas for principals and admin access decisions."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Principal(BaseModel):
    """Authenticated identity behind the current request.

    Resolved from Supabase Auth on every request; never persisted.
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Supabase auth user ID")
    email: str | None = Field(default=None, description="User's email address if available")


class AdminAccessReason(str, Enum):
    """Why an admin access check came back negative."""

    UNAUTHENTICATED = "unauthenticated"
    ADMIN_ACCESS_REQUIRED = "admin_access_required"
    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"


class AdminAccessResult(BaseModel):
    """Outcome of an admin access check.

    Serialized in camelCase (``isAdmin``, ``adminRole``) for the storefront
    admin guard.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    is_admin: bool = Field(description="Whether the principal holds an admin role")
    user: Principal | None = Field(default=None, description="Resolved principal, set when is_admin is true")
    admin_role: str | None = Field(default=None, description="Role label from admin_users")
    reason: AdminAccessReason | None = Field(default=None, description="Reason code for a negative decision")
    error: str | None = Field(default=None, description="Human-readable reason for a negative decision")

    @classmethod
    def granted(cls, user: Principal, role: str) -> "AdminAccessResult":
        return cls(is_admin=True, user=user, admin_role=role)

    @classmethod
    def denied(cls, reason: AdminAccessReason, error: str) -> "AdminAccessResult":
        return cls(is_admin=False, reason=reason, error=error)


class CurrentUserInfo(BaseModel):
    """User block of the current-user response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Supabase auth user ID")
    email: str | None = Field(default=None, description="User's email address")
    full_name: str | None = Field(default=None, description="Display name from the user's profile")
    membership_status: str = Field(default="free", description="Membership tier from the user's profile")
    role: str = Field(default="user", description="Admin role label, or 'user'")


class CurrentUserResponse(BaseModel):
    """Response for GET /auth/user."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    user: CurrentUserInfo = Field(description="The authenticated user")
    is_admin: bool = Field(description="Whether the user holds an admin role")
