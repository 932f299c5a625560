"""End-to-end tests for the health endpoint."""

import pytest
from fastapi.testclient import TestClient

from remark.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "git_sha" in body
        assert "environment" in body

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json()["status"] == "error"
