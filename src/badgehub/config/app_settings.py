"""Application configuration from environment variables.

This module provides the AppSettings class which loads immutable configuration
from environment variables at startup (bind address, logging, upstream API
locations and timeouts).

All badge services read their upstream endpoints from AppSettings, so pointing
the service at a mirror or a local stub only requires an environment change.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from badgehub.constants import (
    DEFAULT_JENKINS_STATS_BASE_URL,
    DEFAULT_UPSTREAM_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    ENV_DEVELOPMENT,
    ENV_PRODUCTION,
    HTTPS_SCHEME,
)


class AppSettings(BaseSettings):
    """Static configuration loaded from environment variables.

    All settings can be overridden via environment variables with the
    BADGEHUB_ prefix. For example, api_port can be set via BADGEHUB_API_PORT.

    Attributes:
        api_host: API server bind address
        api_port: API server port
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Deployment environment (development, staging, production)
        debug: Enable debug mode
        cors_origins: List of allowed CORS origins
        jenkins_stats_base_url: Base URL of the Jenkins statistics site
        upstream_timeout_seconds: Timeout for upstream HTTP requests
        user_agent: User-Agent header sent to upstream APIs
    """

    model_config = SettingsConfigDict(
        env_prefix="BADGEHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8080)

    log_level: str = Field(default="INFO")

    environment: str = Field(default=ENV_DEVELOPMENT)
    debug: bool = Field(default=False)

    cors_origins: list[str] = Field(default=["*"])

    jenkins_stats_base_url: str = Field(
        default=DEFAULT_JENKINS_STATS_BASE_URL,
        description="Base URL of the Jenkins plugin statistics site",
    )
    upstream_timeout_seconds: float = Field(
        default=DEFAULT_UPSTREAM_TIMEOUT_SECONDS, gt=0
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == ENV_PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == ENV_DEVELOPMENT

    def validate_production_config(self) -> list[str]:
        """Validate configuration for production deployment.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.debug:
            errors.append("DEBUG should be False in production")

        if not self.jenkins_stats_base_url.startswith(HTTPS_SCHEME):
            errors.append("Jenkins stats URL should use HTTPS in production")

        return errors


_app_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get singleton instance of static settings.

    Settings are loaded once and cached for application lifetime.

    Returns:
        AppSettings instance
    """
    global _app_settings

    if _app_settings is None:
        _app_settings = AppSettings()

    return _app_settings
