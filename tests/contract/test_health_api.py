"""Contract tests for the health endpoint."""

import pytest
from fastapi.testclient import TestClient


# API version prefix
API_PREFIX = "/api/v1"


pytestmark = pytest.mark.contract


class TestHealthEndpoint:
    """Contract tests for GET /api/v1/health."""

    def test_health(self, client: TestClient):
        response = client.get(f"{API_PREFIX}/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert len(data["events"]) == 5
        assert "upsertAttributes" in data["merge_modes"]
