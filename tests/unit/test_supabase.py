"""Unit tests for Supabase client helpers."""

from unittest.mock import MagicMock, patch

from src.core.supabase import create_user_client


class TestCreateUserClient:
    """Tests for create_user_client function."""

    @patch("src.core.supabase.create_auth_client")
    def test_binds_postgrest_to_user_token(self, mock_create_auth_client: MagicMock) -> None:
        """Test that database requests carry the user's token, not the anon key."""
        client = create_user_client("user-jwt")

        assert client is mock_create_auth_client.return_value
        client.postgrest.auth.assert_called_once_with("user-jwt")

    @patch("src.core.supabase.create_auth_client")
    def test_creates_fresh_client_per_call(self, mock_create_auth_client: MagicMock) -> None:
        """Test that user-bound clients are never shared between calls."""
        create_user_client("first")
        create_user_client("second")

        assert mock_create_auth_client.call_count == 2
