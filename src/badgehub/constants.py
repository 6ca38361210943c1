"""Shared constants for badgehub."""

ENV_DEVELOPMENT = "development"
ENV_PRODUCTION = "production"

HTTPS_SCHEME = "https://"

DEFAULT_JENKINS_STATS_BASE_URL = "https://old.stats.jenkins.io"
DEFAULT_UPSTREAM_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "badgehub/1.0.0"

SVG_MEDIA_TYPE = "image/svg+xml"
JSON_MEDIA_TYPE = "application/json"

DEFAULT_BADGE_COLOR = "lightgrey"
DEFAULT_LABEL_COLOR = "grey"
ERROR_BADGE_COLOR = "red"

ENDPOINT_SCHEMA_VERSION = 1
