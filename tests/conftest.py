"""Root-level pytest configuration and shared fixtures.

Adds the src/ directory to sys.path so badgehub can be imported without installation.
Wires the Jenkins badge service to a real httpx client so respx can intercept
outbound requests to the statistics site.

Key exports:
    - http_client / json_client: outbound HTTP plumbing
    - jenkins_service: JenkinsPluginInstallsService pointed at a test host
    - stats_url: trend document URL for the default test plugin
"""

import sys
from pathlib import Path
from typing import AsyncIterator

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from badgehub.infrastructure.http.json_client import UpstreamJsonClient  # noqa: E402
from badgehub.service.jenkins_plugin_installs_service import (  # noqa: E402
    JenkinsPluginInstallsService,
)

TEST_STATS_BASE_URL = "https://stats.jenkins.test"
TEST_PLUGIN = "view-job-filters"


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Provide a real httpx client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def json_client(http_client: httpx.AsyncClient) -> UpstreamJsonClient:
    """Provide an UpstreamJsonClient over the shared httpx client."""
    return UpstreamJsonClient(http_client)


@pytest.fixture
def jenkins_service(json_client: UpstreamJsonClient) -> JenkinsPluginInstallsService:
    """Provide a JenkinsPluginInstallsService pointed at the test stats site."""
    return JenkinsPluginInstallsService(
        json_client=json_client, base_url=TEST_STATS_BASE_URL
    )


@pytest.fixture
def plugin() -> str:
    """Plugin identifier used by service tests."""
    return TEST_PLUGIN


@pytest.fixture
def stats_url(jenkins_service: JenkinsPluginInstallsService, plugin: str) -> str:
    """Trend document URL for the test plugin."""
    return jenkins_service.stats_url(plugin)
