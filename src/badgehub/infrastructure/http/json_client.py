"""Upstream JSON API client.

Fetches a JSON document over HTTP, maps upstream failures onto badge errors
and validates the payload against a pydantic model.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from badgehub.exception.api_exceptions import (
    InaccessibleError,
    InvalidResponseError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_HTTP_ERRORS: dict[int, str] = {
    404: "not found",
    429: "rate limited by upstream service",
}


class UpstreamJsonClient:
    """HTTP client for upstream JSON APIs backing badge services."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
        """
        self._client = http_client

    async def request_json(
        self,
        url: str,
        schema: type[ModelT],
        http_errors: Optional[Mapping[int, str]] = None,
    ) -> ModelT:
        """Fetch a JSON document and validate it against a schema.

        Args:
            url: Absolute URL of the upstream document
            schema: Pydantic model the payload must satisfy
            http_errors: Pretty messages keyed by upstream status code

        Returns:
            Validated schema instance

        Raises:
            NotFoundError: Upstream answered 404
            InaccessibleError: Upstream unreachable, rate limited or failing (5xx)
            InvalidResponseError: Unexpected status, unparseable or invalid payload
        """
        logger.debug("Fetching upstream JSON", extra={"url": url})

        try:
            response = await self._client.get(
                url, headers={"Accept": "application/json"}
            )
        except httpx.RequestError as e:
            logger.warning(
                f"Upstream request failed: {type(e).__name__}",
                extra={"url": url},
            )
            raise InaccessibleError(
                message=f"Request to {url} failed: {e}",
                details={"url": url},
            ) from e

        check_error_response(response, http_errors)

        try:
            data = response.json()
        except ValueError as e:
            raise InvalidResponseError(
                pretty_message="unparseable json response",
                message=f"Response from {url} is not valid JSON",
                details={"url": url},
            ) from e

        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            logger.info(
                f"Upstream payload failed {schema.__name__} validation",
                extra={"url": url, "error_count": e.error_count()},
            )
            raise InvalidResponseError(
                pretty_message="invalid response data",
                message=f"Response from {url} does not match {schema.__name__}",
                details={
                    "url": url,
                    "errors": e.errors(include_url=False, include_context=False),
                },
            ) from e


def check_error_response(
    response: httpx.Response,
    http_errors: Optional[Mapping[int, str]] = None,
) -> None:
    """Raise the badge error matching a non-success upstream status.

    Args:
        response: Upstream HTTP response
        http_errors: Pretty messages keyed by status code, overriding defaults

    Raises:
        NotFoundError: On 404
        InaccessibleError: On 429 and 5xx
        InvalidResponseError: On any other non-2xx status
    """
    status_code = response.status_code
    if response.is_success:
        return

    messages = {**DEFAULT_HTTP_ERRORS, **(http_errors or {})}
    pretty_message = messages.get(status_code)
    details = {"url": str(response.request.url), "status_code": status_code}
    message = f"Upstream responded with HTTP {status_code}"

    if status_code == 404:
        raise NotFoundError(pretty_message, message=message, details=details)

    if status_code == 429 or status_code >= 500:
        raise InaccessibleError(pretty_message, message=message, details=details)

    raise InvalidResponseError(pretty_message, message=message, details=details)
