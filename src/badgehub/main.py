"""badgehub FastAPI application.

This module initializes and configures the badgehub badge API with
middleware, routers, and lifecycle management.
"""

# ruff: noqa: E402  load_dotenv() must run before any badgehub imports that read env

import logging
from contextlib import asynccontextmanager

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from badgehub import __version__
from badgehub.config.app_settings import AppSettings, get_settings
from badgehub.controller import health_controller, jenkins_controller
from badgehub.infrastructure.http.json_client import UpstreamJsonClient
from badgehub.middleware import ErrorHandlerMiddleware
from badgehub.service.jenkins_plugin_installs_service import (
    JenkinsPluginInstallsService,
)

app_settings = get_settings()

logging.basicConfig(
    level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_http_client(app_settings: AppSettings) -> httpx.AsyncClient:
    """Create the shared outbound HTTP client."""
    return httpx.AsyncClient(
        timeout=app_settings.upstream_timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": app_settings.user_agent},
    )


def create_badge_services(
    http_client: httpx.AsyncClient, app_settings: AppSettings
) -> dict[str, JenkinsPluginInstallsService]:
    """Create all badge service instances."""
    json_client = UpstreamJsonClient(http_client)

    return {
        "jenkins_plugin_installs_service": JenkinsPluginInstallsService(
            json_client=json_client,
            base_url=app_settings.jenkins_stats_base_url,
        ),
    }


def log_production_config_problems(app_settings: AppSettings) -> None:
    """Warn about settings unsuitable for production."""
    if not app_settings.is_production():
        return

    for problem in app_settings.validate_production_config():
        logger.warning(f"Production configuration problem: {problem}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("=== badgehub Startup ===")

    app.state.app_settings = app_settings
    log_production_config_problems(app_settings)

    http_client = create_http_client(app_settings)
    app.state.http_client = http_client

    services = create_badge_services(http_client, app_settings)
    app.state.jenkins_plugin_installs_service = services[
        "jenkins_plugin_installs_service"
    ]

    logger.info(
        "=== badgehub Ready ===",
        extra={"jenkins_stats_base_url": app_settings.jenkins_stats_base_url},
    )

    yield

    logger.info("=== badgehub Shutdown ===")

    await http_client.aclose()

    logger.info("=== badgehub Stopped ===")


def configure_cors_middleware(application: FastAPI, allowed_origins: list[str]) -> None:
    """Configure CORS middleware with specified origins."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


def configure_error_handlers_middleware(
    app: FastAPI, app_settings: AppSettings
) -> None:
    """Set up error handlers for FastAPI application."""
    app.state.debug = app_settings.debug
    app.state.environment = app_settings.environment

    app.add_middleware(ErrorHandlerMiddleware)

    logger.info(
        "Error handling middleware configured",
        extra={"debug": app.state.debug, "environment": app.state.environment},
    )


def register_api_routers(application: FastAPI) -> None:
    """Register all API route controllers."""
    application.include_router(health_controller.router)
    application.include_router(jenkins_controller.router)


app = FastAPI(
    title="badgehub",
    description="""
# Badge Service

Small status badges describing third-party package statistics.

## Formats

* **SVG** (default): `/jenkins/plugin/i/view-job-filters` or `.svg`
* **JSON**: `/jenkins/plugin/i/view-job-filters.json`, in the shields.io endpoint schema

## Overrides

`label`, `color` and `labelColor` query parameters customize any badge.
""",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "health",
            "description": "Health check endpoint for monitoring service availability.",
        },
        {
            "name": "downloads",
            "description": "Download and install count badges.",
        },
    ],
    openapi_url="/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
)

cors_origins = app_settings.cors_origins if app_settings.cors_origins else ["*"]
configure_cors_middleware(app, cors_origins)
configure_error_handlers_middleware(app, app_settings)

register_api_routers(app)

logger.info("badgehub application configured")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "badgehub.main:app",
        host=app_settings.api_host,
        port=app_settings.api_port,
        reload=app_settings.debug,
    )
