"""API tests for the health controller."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from badgehub import __version__

# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_healthy_when_http_client_open(self, client: TestClient) -> None:
        response = client.get("/health")
        body = response.json()

        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["http_client"] == "ready"
        assert body["version"] == __version__
        assert body["environment"] == "test"

    def test_unhealthy_when_http_client_closed(
        self, client: TestClient, mock_http_client: MagicMock
    ) -> None:
        mock_http_client.is_closed = True

        body = client.get("/health").json()

        assert body["status"] == "unhealthy"
        assert body["error"] == "HTTP client is closed"


class TestRootRedirect:
    """Tests for GET /."""

    def test_redirects_to_health(self, client: TestClient) -> None:
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/health"
