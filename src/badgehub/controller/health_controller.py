"""Basic health check endpoint.

This module provides a simple health check endpoint for monitoring
service availability. Upstream badge APIs are not probed.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from badgehub import __version__

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Overall service status (healthy/unhealthy)
        version: Service version
        environment: Deployment environment
        http_client: Outbound HTTP client status
        error: Error message if unhealthy
    """

    status: str = Field(..., description="Overall service status")
    version: str = Field(..., description="Service version")
    environment: Optional[str] = Field(None, description="Deployment environment")
    http_client: Optional[str] = Field(None, description="Outbound HTTP client status")
    error: Optional[str] = Field(None, description="Error message if unhealthy")

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "production",
                    "http_client": "ready",
                },
                {
                    "status": "unhealthy",
                    "version": "1.0.0",
                    "error": "HTTP client is closed",
                },
            ]
        }


@router.get("/", include_in_schema=False)
async def root_redirect() -> RedirectResponse:
    """Redirect root path to /health."""
    return RedirectResponse(url="/health")


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    summary="Service Health Check",
    description="Verifies service availability and that the shared outbound HTTP client is usable.",
)
async def health_check(request: Request) -> HealthResponse:
    """Basic health check endpoint.

    Args:
        request: FastAPI request

    Returns:
        Health status with outbound client details
    """
    environment = getattr(request.app.state, "environment", None)

    try:
        _check_http_client(request.app.state.http_client)

        return HealthResponse(
            status="healthy",
            version=__version__,
            environment=environment,
            http_client="ready",
        )

    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        return HealthResponse(
            status="unhealthy",
            version=__version__,
            environment=environment,
            error=str(e),
        )


def _check_http_client(http_client) -> None:
    """Verify the shared httpx client is open.

    Args:
        http_client: Shared httpx AsyncClient

    Raises:
        RuntimeError: If the client has been closed
    """
    if http_client.is_closed:
        raise RuntimeError("HTTP client is closed")
