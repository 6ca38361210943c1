"""Shared fixtures for API (controller) tests.

Builds a minimal FastAPI test application with the badge service and HTTP
client injected via app.state, so tests focus on routing, format selection
and response shaping rather than upstream calls.

Key exports:
    - mock_jenkins_service: badge service whose invoke() returns a fixed badge
    - mock_http_client: stand-in for the shared httpx client
    - app: FastAPI instance with all routers and the error middleware
    - client: synchronous TestClient bound to app
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from badgehub.badge.badge_data import BadgeData  # noqa: E402

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_test_app(
    mock_jenkins_service: MagicMock, mock_http_client: MagicMock
) -> FastAPI:
    """Build a FastAPI app with all routers mounted and mocks injected.

    Args:
        mock_jenkins_service: Jenkins plugin installs service mock
        mock_http_client: Shared HTTP client mock

    Returns:
        Configured FastAPI application
    """
    from badgehub.controller import health_controller, jenkins_controller
    from badgehub.middleware import ErrorHandlerMiddleware

    app = FastAPI()
    app.state.debug = False
    app.state.environment = "test"
    app.state.http_client = mock_http_client
    app.state.jenkins_plugin_installs_service = mock_jenkins_service

    app.add_middleware(ErrorHandlerMiddleware)
    app.include_router(health_controller.router)
    app.include_router(jenkins_controller.router)

    return app


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_jenkins_service() -> MagicMock:
    """Jenkins service returning a finished 12-installs badge."""
    service = MagicMock()
    service.invoke = AsyncMock(
        return_value=BadgeData(
            label="installs",
            message="12",
            color="yellowgreen",
            label_color="grey",
        )
    )
    return service


@pytest.fixture
def mock_http_client() -> MagicMock:
    """Open shared HTTP client."""
    http_client = MagicMock()
    http_client.is_closed = False
    return http_client


@pytest.fixture
def app(mock_jenkins_service: MagicMock, mock_http_client: MagicMock) -> FastAPI:
    return _make_test_app(mock_jenkins_service, mock_http_client)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
