"""
Test suite for admin and analytics endpoints.

System role: Verification of protected diagnostics and theme counters
"""

import pytest
from fastapi.testclient import TestClient

from backend.api.main import create_app

ADMIN = ("admin", "s3cret")


@pytest.fixture
def client(service_cache):
    with TestClient(create_app(service_cache)) as client:
        yield client


class TestProviderStatus:
    """Test suite for GET /admin/provider-status."""

    def test_reports_provider_and_cache(self, client: TestClient):
        response = client.get("/admin/provider-status", auth=ADMIN)

        assert response.status_code == 200
        body = response.json()
        assert body["provider"] == "fake"
        assert body["is_configured"] is True
        assert body["supports_embeddings"] is True
        assert body["cache_mode"] == "scored"
        assert body["cache_size"] == 10

    def test_requires_auth(self, client: TestClient):
        assert client.get("/admin/provider-status").status_code == 401


class TestThemeAnalytics:
    """Test suite for theme analytics endpoints."""

    def test_record_then_read(self, client: TestClient):
        # Act
        client.post("/api/theme-analytics", json={"theme": "modern"})
        client.post("/api/theme-analytics", json={"theme": "modern"})
        stats = client.get("/admin/theme-stats", auth=ADMIN)

        # Assert
        assert stats.status_code == 200
        assert stats.json() == {"minimal": 0, "modern": 2, "elegant": 0, "retro": 0}

    @pytest.mark.parametrize("payload", [{"theme": "neon"}, {}])
    def test_unknown_theme_returns_400(self, client: TestClient, payload: dict):
        response = client.post("/api/theme-analytics", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid theme name"

    def test_stats_require_auth(self, client: TestClient):
        assert client.get("/admin/theme-stats").status_code == 401
