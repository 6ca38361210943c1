"""Outbound HTTP integration for upstream JSON APIs."""

from badgehub.infrastructure.http.json_client import UpstreamJsonClient

__all__ = ["UpstreamJsonClient"]
