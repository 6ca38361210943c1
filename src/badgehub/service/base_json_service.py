"""Base contract for badge services backed by an upstream JSON API.

A concrete service declares its category and default badge data, fetches its
document through _request_json() and implements handle(), which turns route
parameters into BadgeData. invoke() wraps handle() with error-badge rendering
and override coalescing, and is what controllers call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel

from badgehub.badge.badge_data import BadgeData, BadgeOverrides
from badgehub.badge.coalesce import coalesce_badge
from badgehub.constants import DEFAULT_BADGE_COLOR, ERROR_BADGE_COLOR
from badgehub.exception.api_exceptions import (
    BadgeError,
    InvalidParameterError,
    NotFoundError,
)
from badgehub.infrastructure.http.json_client import UpstreamJsonClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseJsonBadgeService(ABC):
    """Abstract badge service fetching one JSON document per request.

    Attributes:
        category: Badge category the service belongs to (e.g. "downloads")
        default_badge_data: Defaults applied when the service leaves fields unset
    """

    category: str = ""
    default_badge_data: BadgeData = BadgeData()

    def __init__(self, json_client: UpstreamJsonClient):
        """Initialize service.

        Args:
            json_client: Client used for upstream JSON requests
        """
        self.json_client = json_client

    async def _request_json(
        self,
        url: str,
        schema: type[ModelT],
        http_errors: Optional[Mapping[int, str]] = None,
    ) -> ModelT:
        return await self.json_client.request_json(
            url=url, schema=schema, http_errors=http_errors
        )

    @abstractmethod
    async def handle(self, **params: Any) -> BadgeData:
        """Produce badge content for the given route parameters.

        Raises:
            BadgeError: When the failure should be shown on the badge
        """
        pass

    def render_error(self, error: BadgeError) -> BadgeData:
        """Turn a badge error into error badge content."""
        if isinstance(error, (NotFoundError, InvalidParameterError)):
            color = ERROR_BADGE_COLOR
        else:
            color = DEFAULT_BADGE_COLOR

        return BadgeData(
            label=self.default_badge_data.label,
            message=error.pretty_message,
            color=color,
            is_error=True,
        )

    async def invoke(
        self, overrides: Optional[BadgeOverrides] = None, **params: Any
    ) -> BadgeData:
        """Run the service and produce the final badge.

        Args:
            overrides: Query parameter overrides (label, color, label color)
            **params: Route parameters passed to handle()

        Returns:
            Coalesced BadgeData, an error badge if a BadgeError was raised
        """
        try:
            service_data = await self.handle(**params)
        except BadgeError as e:
            logger.info(
                f"{type(self).__name__} rendered error badge: {e.pretty_message}",
                extra={"code": e.code, "params": params, "details": e.details},
            )
            service_data = self.render_error(e)

        return coalesce_badge(
            overrides or BadgeOverrides(),
            service_data,
            self.default_badge_data,
        )
