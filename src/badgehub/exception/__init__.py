"""Exception handling package.

This package provides custom exception classes mapped to badge states and
HTTP responses.
"""

from badgehub.exception.api_exceptions import (
    BadgeError,
    BadgeHubException,
    InaccessibleError,
    InvalidParameterError,
    InvalidResponseError,
    NotFoundError,
)

__all__ = [
    "BadgeError",
    "BadgeHubException",
    "InaccessibleError",
    "InvalidParameterError",
    "InvalidResponseError",
    "NotFoundError",
]
