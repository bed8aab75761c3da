"""Unit tests for the FastAPI process host.

Tests cover:
- Lifespan starts and stops the side-effect runtime
- /health reflects runtime state
- /config is development-only
"""

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_side_effect_runtime
from src.main import create_app


@pytest.mark.unit
class TestHealthEndpoint:
    """Test the health probe."""

    def test_healthy_while_running(self):
        # Arrange / Act
        with TestClient(create_app()) as client:
            response = client.get("/health")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["running"] is True
        assert data["workers"] == {
            "notification": True,
            "ban_expiry": True,
            "proposal_expiry": True,
        }
        assert data["notification_queue_depth"] == 0

    def test_runtime_stopped_after_shutdown(self):
        with TestClient(create_app()):
            runtime = get_side_effect_runtime()
            assert runtime.is_running is True

        assert runtime.is_running is False

    def test_unhealthy_without_lifespan(self):
        client = TestClient(create_app())

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


@pytest.mark.unit
class TestConfigEndpoint:
    """Test the development-only config endpoint."""

    def test_forbidden_outside_development(self):
        client = TestClient(create_app())

        response = client.get("/config")

        assert response.status_code == 403

    def test_sanitized_config_in_development(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("REDIS_URL", "redis://:secret@cache:6379/0")

        client = TestClient(create_app())
        response = client.get("/config")

        assert response.status_code == 200
        data = response.json()
        assert data["environment"] == "development"
        assert data["cache"]["url"] == "<redacted>"
        assert "secret" not in response.text
        assert data["reconciliation"]["proposal_expiry_window_hours"] == 24
