"""Integration tests for application startup."""

import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from src.core.config import Settings


def _settings(**overrides) -> Settings:
    base = {
        "stripe_secret_key": "sk_test_abc",
        "supabase_url": "https://test-project.supabase.co",
        "supabase_anon_key": "test-anon-key",
        "supabase_service_role_key": "test-service-role-key",
        "team_data_source": "static",
    }
    return Settings(_env_file=None, **{**base, **overrides})


class TestLifespan:
    """Tests for the startup hook."""

    def test_warns_when_service_role_key_missing(
        self, mock_supabase_client: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a public-only Supabase config logs a startup warning."""
        from src.main import app

        with patch("src.main.get_settings", return_value=_settings(supabase_service_role_key="")):
            with caplog.at_level(logging.WARNING, logger="src.main"):
                with TestClient(app):
                    pass

        assert "SUPABASE_SERVICE_ROLE_KEY is not set" in caplog.text

    def test_no_warning_when_fully_configured(
        self, mock_supabase_client: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a complete Supabase config starts quietly."""
        from src.main import app

        with patch("src.main.get_settings", return_value=_settings()):
            with caplog.at_level(logging.WARNING, logger="src.main"):
                with TestClient(app):
                    pass

        assert "SUPABASE_SERVICE_ROLE_KEY" not in caplog.text

    def test_selects_static_team_repository(self, mock_supabase_client: MagicMock) -> None:
        """Test that the configured team source is stored on app state."""
        from src.main import app

        with patch("src.main.get_settings", return_value=_settings()):
            with TestClient(app):
                assert app.state.team_repository.source == "static"
