"""Integration tests for current-user and admin access endpoints."""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_admin_service, get_profile_service
from src.api.middleware.error_handler import DatabaseError
from src.schemas.auth import Principal
from src.services.admin_service import AdminRecordStore, AdminService
from src.services.profile_service import ProfileService

USER_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def mock_identity() -> MagicMock:
    """Identity service resolving a fixed principal for a known token."""
    identity = MagicMock()

    async def _resolve(token: str | None) -> Principal | None:
        if token == "good-token":
            return Principal(id=UUID(USER_ID), email="owner@example.com")
        return None

    identity.get_current_user = AsyncMock(side_effect=_resolve)
    return identity


@pytest.fixture
def mock_store() -> MagicMock:
    """Admin record store with no admin rows by default."""
    store = MagicMock(spec=AdminRecordStore)
    store.find_by_principal_id.return_value = None
    return store


@pytest.fixture
def mock_profiles() -> MagicMock:
    """Profile service with no profile row by default."""
    profiles = MagicMock(spec=ProfileService)
    profiles.get_profile = AsyncMock(return_value=None)
    return profiles


@pytest.fixture
def admin_client(
    client: TestClient,
    mock_identity: MagicMock,
    mock_store: MagicMock,
    mock_profiles: MagicMock,
) -> TestClient:
    """Test client with the admin and profile services wired to mocks."""
    client.app.dependency_overrides[get_profile_service] = lambda: mock_profiles
    client.app.dependency_overrides[get_admin_service] = lambda: AdminService(
        identity_service=mock_identity, record_store=mock_store
    )
    return client


class TestAdminAccess:
    """Tests for GET /api/admin/access endpoint."""

    def test_grants_owner(self, admin_client: TestClient, mock_store: MagicMock) -> None:
        """Test that an owner gets isAdmin with role and user."""
        mock_store.find_by_principal_id.return_value = {"role": "owner"}

        response = admin_client.get(
            "/api/admin/access", headers={"Authorization": "Bearer good-token"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "isAdmin": True,
            "adminRole": "owner",
            "user": {"id": USER_ID, "email": "owner@example.com"},
        }

    def test_denies_non_admin(self, admin_client: TestClient) -> None:
        """Test that a signed-in non-admin is told admin access is required."""
        response = admin_client.get(
            "/api/admin/access", headers={"Authorization": "Bearer good-token"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isAdmin"] is False
        assert data["error"] == "Admin access required"
        assert data["reason"] == "admin_access_required"

    def test_reads_token_from_cookie(self, admin_client: TestClient, mock_store: MagicMock) -> None:
        """Test that the auth cookie is accepted in place of the header."""
        mock_store.find_by_principal_id.return_value = {"role": "editor"}

        response = admin_client.get(
            "/api/admin/access", headers={"Cookie": "sb-access-token=good-token"}
        )

        assert response.json()["adminRole"] == "editor"

    def test_denies_unauthenticated(self, admin_client: TestClient, mock_store: MagicMock) -> None:
        """Test that a request without credentials is unauthenticated."""
        response = admin_client.get("/api/admin/access")

        assert response.status_code == 200
        assert response.json() == {
            "isAdmin": False,
            "reason": "unauthenticated",
            "error": "Not authenticated",
        }
        mock_store.find_by_principal_id.assert_not_called()

    def test_denies_on_database_error(self, admin_client: TestClient, mock_store: MagicMock) -> None:
        """Test that a database error is reported in the decision, not as a 500."""
        mock_store.find_by_principal_id.side_effect = DatabaseError(
            "Database error checking admin status"
        )

        response = admin_client.get(
            "/api/admin/access", headers={"Authorization": "Bearer good-token"}
        )

        assert response.status_code == 200
        assert response.json()["reason"] == "database_error"


class TestCurrentUser:
    """Tests for GET /api/auth/user endpoint."""

    def test_returns_admin_user(self, admin_client: TestClient, mock_store: MagicMock) -> None:
        """Test that an admin's role is reported."""
        mock_store.find_by_principal_id.return_value = {"role": "owner"}

        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        assert response.json() == {
            "user": {
                "id": USER_ID,
                "email": "owner@example.com",
                "full_name": None,
                "membership_status": "free",
                "role": "owner",
            },
            "isAdmin": True,
        }

    def test_returns_regular_user(self, admin_client: TestClient) -> None:
        """Test that a non-admin is reported with the user role."""
        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        data = response.json()
        assert data["isAdmin"] is False
        assert data["user"]["role"] == "user"

    def test_degrades_to_regular_user_on_database_error(
        self, admin_client: TestClient, mock_store: MagicMock
    ) -> None:
        """Test that a failed admin lookup does not fail the request."""
        mock_store.find_by_principal_id.side_effect = DatabaseError()

        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        assert response.json()["isAdmin"] is False

    def test_returns_401_when_not_authenticated(self, admin_client: TestClient) -> None:
        """Test that an unknown token is a 401."""
        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer bad-token"})

        assert response.status_code == 401
        assert response.json()["error"] == "authentication_error"

    def test_returns_profile_details(
        self, admin_client: TestClient, mock_profiles: MagicMock
    ) -> None:
        """Test that the profile's name and membership tier are returned."""
        mock_profiles.get_profile.return_value = {
            "full_name": "Jordan Fan",
            "membership_status": "premium",
        }

        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["full_name"] == "Jordan Fan"
        assert user["membership_status"] == "premium"
        assert mock_profiles.get_profile.await_args.args[1] == "good-token"

    def test_defaults_to_free_without_profile(self, admin_client: TestClient) -> None:
        """Test that a user with no profile row is a free member."""
        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["full_name"] is None
        assert user["membership_status"] == "free"

    def test_defaults_to_free_on_profile_database_error(
        self, admin_client: TestClient, mock_profiles: MagicMock, mock_store: MagicMock
    ) -> None:
        """Test that a failed profile lookup still returns the user and role."""
        mock_profiles.get_profile.side_effect = DatabaseError("Failed to fetch user profile")
        mock_store.find_by_principal_id.return_value = {"role": "editor"}

        response = admin_client.get("/api/auth/user", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["membership_status"] == "free"
        assert data["user"]["role"] == "editor"
        assert data["isAdmin"] is True
