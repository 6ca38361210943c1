"""Custom exceptions for badgehub.

All custom exceptions should inherit from BadgeHubException for consistent error handling.
Failures that should be shown on a badge (rather than as an API error) inherit
from BadgeError, which carries the short pretty_message rendered on the badge.
"""

from typing import Any, Dict, Optional


class BadgeHubException(Exception):
    """Base exception for all badgehub errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize badgehub exception.

        Args:
            message: Human-readable error message
            code: Error code for programmatic handling
            status_code: HTTP status code
            field: Field name if validation error
            details: Additional error context
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.field = field
        self.details = details or {}
        super().__init__(message)


# Badge Errors (rendered on the badge itself)
class BadgeError(BadgeHubException):
    """Error that is reported to the caller as a badge state."""

    default_pretty_message = "error"

    def __init__(
        self,
        pretty_message: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs,
    ):
        self.pretty_message = pretty_message or self.default_pretty_message
        super().__init__(
            message=message or self.pretty_message,
            code=kwargs.pop("code", "BADGE_ERROR"),
            status_code=kwargs.pop("status_code", 500),
            **kwargs,
        )


class NotFoundError(BadgeError):
    """Requested upstream resource (or part of it) does not exist."""

    default_pretty_message = "not found"

    def __init__(self, pretty_message: Optional[str] = None, **kwargs):
        super().__init__(
            pretty_message=pretty_message,
            code=kwargs.pop("code", "NOT_FOUND"),
            status_code=404,
            **kwargs,
        )


class InvalidParameterError(BadgeError):
    """Badge parameters are malformed."""

    default_pretty_message = "invalid parameter"

    def __init__(self, pretty_message: Optional[str] = None, **kwargs):
        super().__init__(
            pretty_message=pretty_message,
            code=kwargs.pop("code", "INVALID_PARAMETER"),
            status_code=400,
            **kwargs,
        )


class InvalidResponseError(BadgeError):
    """Upstream answered, but with something we cannot use."""

    default_pretty_message = "invalid"

    def __init__(self, pretty_message: Optional[str] = None, **kwargs):
        super().__init__(
            pretty_message=pretty_message,
            code=kwargs.pop("code", "INVALID_UPSTREAM_RESPONSE"),
            status_code=502,
            **kwargs,
        )


class InaccessibleError(BadgeError):
    """Upstream could not be reached or is failing."""

    default_pretty_message = "inaccessible"

    def __init__(self, pretty_message: Optional[str] = None, **kwargs):
        super().__init__(
            pretty_message=pretty_message,
            code=kwargs.pop("code", "UPSTREAM_INACCESSIBLE"),
            status_code=503,
            **kwargs,
        )
