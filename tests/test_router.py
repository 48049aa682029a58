"""Tests for the client registration API."""

import pytest
from fastapi.testclient import TestClient

from client_registry.api.app import create_app
from client_registry.clients.service import (
    ClientRegistrationService,
    get_client_registration_service,
)

# base64(SHA-256("hunter2"))
HUNTER2_HASH = "9S+9MrKzuG/4jvbEkGKChfSCrxXdyylUH5S89Saj9sc="


@pytest.fixture
def service():
    """Create a registration service without a protector."""
    return ClientRegistrationService()


@pytest.fixture
def client(service):
    """Create test client with the service overridden."""
    app = create_app()
    app.dependency_overrides[get_client_registration_service] = lambda: service
    return TestClient(app)


class TestClientsRouter:
    """Tests for POST /admin/clients."""

    def test_create_client(self, client):
        """Test building a descriptor from a password."""
        response = client.post(
            "/admin/clients",
            json={
                "client_id": "svc1",
                "client_name": "Service One",
                "password": "hunter2",
                "flow": "authorization_code",
                "redirect_uris": ["https://svc1.example.com/callback"],
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["client"]["client_id"] == "svc1"
        assert data["client"]["client_secret"] == HUNTER2_HASH
        assert data["client"]["flow"] == "authorization_code"
        assert data["client"]["redirect_uris"] == ["https://svc1.example.com/callback"]
        assert data["client"]["access_token_lifetime"] == 3600
        assert [w["code"] for w in data["warnings"]] == ["no_protector"]

    def test_create_client_with_protector(self, protector):
        """Test the configured protector is applied."""
        app = create_app()
        app.dependency_overrides[get_client_registration_service] = (
            lambda: ClientRegistrationService(protector=protector)
        )
        client = TestClient(app)

        response = client.post(
            "/admin/clients",
            json={"client_id": "svc1", "client_name": "Service One", "client_secret": "c2VjcmV0"},
        )

        assert response.status_code == 201
        assert response.json()["warnings"] == []
        assert protector.calls == [b"secret"]

    def test_missing_required_secret(self, client):
        """Test the error when the signing key needs a secret."""
        response = client.post(
            "/admin/clients",
            json={
                "client_id": "svc1",
                "client_name": "Service One",
                "identity_token_signing_key_type": "client-secret",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "missing_required_secret"

    def test_invalid_secret_encoding(self, client):
        """Test the error for a malformed secret."""
        response = client.post(
            "/admin/clients",
            json={
                "client_id": "svc1",
                "client_name": "Service One",
                "client_secret": "not-base64!!",
                "password": "hunter2",
            },
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "invalid_secret_encoding"
        assert "base64" in data["error_description"]

    def test_negative_lifetime(self, client):
        """Test that a negative lifetime is a validation error."""
        response = client.post(
            "/admin/clients",
            json={"client_id": "svc1", "client_name": "Service One", "access_token_lifetime": -5},
        )

        assert response.status_code == 422

    def test_missing_client_name(self, client):
        """Test that client_name is required."""
        response = client.post("/admin/clients", json={"client_id": "svc1"})

        assert response.status_code == 422


class TestHealth:
    """Tests for the probe endpoints."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client):
        """Test the readiness endpoint."""
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
