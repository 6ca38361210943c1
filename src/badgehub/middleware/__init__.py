"""Middleware components.

This package provides the error handling middleware.
"""

from badgehub.middleware.error_handler_middleware import ErrorHandlerMiddleware

__all__ = ["ErrorHandlerMiddleware"]
