"""Application configuration management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TeamDataSource = Literal["auto", "supabase", "static"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Required settings will raise validation errors if not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="courtside-store-api", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # Stripe
    stripe_secret_key: str = Field(..., description="Stripe secret API key")
    stripe_timeout_seconds: float | None = Field(
        default=None,
        description="Upper bound on Stripe HTTP calls. Unset keeps the SDK default.",
    )

    # Supabase (all optional: absence switches team lookups to the static index)
    supabase_url: str = Field(default="", description="Supabase project URL")
    supabase_anon_key: str = Field(default="", description="Supabase public (anon) key")
    supabase_service_role_key: str = Field(
        default="",
        description="Supabase service-role key, used only for the admin record lookup",
    )
    supabase_timeout_seconds: int = Field(default=30, description="Timeout for Supabase PostgREST calls")

    # Data sources
    team_data_source: TeamDataSource = Field(
        default="auto",
        description="Team lookup backend: auto picks supabase when configured, else static",
    )

    # Auth
    auth_cookie_name: str = Field(
        default="sb-access-token",
        description="Cookie holding the Supabase access token when no Authorization header is sent",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_stripe_test_mode(self) -> bool:
        """Check if using Stripe test keys."""
        return self.stripe_secret_key.startswith("sk_test_")

    @property
    def supabase_configured(self) -> bool:
        """Check if the public Supabase connection settings are present."""
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def admin_lookup_configured(self) -> bool:
        """Check if the service-role key needed by the admin check is present."""
        return bool(self.supabase_url and self.supabase_service_role_key)

    @property
    def resolved_team_data_source(self) -> Literal["supabase", "static"]:
        """Resolve the team data source, collapsing ``auto`` to a concrete backend."""
        if self.team_data_source == "auto":
            return "supabase" if self.supabase_configured else "static"
        return self.team_data_source


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
