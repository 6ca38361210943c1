"""Error handling middleware for badgehub.

Badge routes render their own failures as badges. This middleware catches what
escapes a route (unexpected exceptions, domain errors raised outside badge
rendering) and returns the uniform JSON error envelope. Every HTTP response
is stamped with an X-Request-ID header.
"""

import logging
import traceback
import uuid
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import MutableHeaders
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from badgehub.controller.schemas.responses import ErrorDetail, error_response
from badgehub.exception.api_exceptions import BadgeHubException

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

HTTP_STATUS_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    422: "UNPROCESSABLE_ENTITY",
    500: "INTERNAL_SERVER_ERROR",
    502: "BAD_GATEWAY",
    503: "SERVICE_UNAVAILABLE",
    504: "GATEWAY_TIMEOUT",
}


class ErrorHandlerMiddleware:
    """Pure ASGI middleware to catch and format all exceptions."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive=receive)
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        response_started = False

        async def send_with_request_id(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                headers = MutableHeaders(scope=message)
                headers.append(REQUEST_ID_HEADER, request_id)
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        except Exception as exc:
            if response_started:
                raise
            response = self.handle_exception(request, exc, request_id)
            await response(scope, receive, send)

    def handle_exception(
        self, request: Request, exc: Exception, request_id: str
    ) -> JSONResponse:
        """Handle exception and return formatted error response.

        Args:
            request: Request that caused the exception
            exc: Exception that was raised
            request_id: Request ID for tracing

        Returns:
            JSONResponse with formatted error
        """
        debug_mode = getattr(request.app.state, "debug", False)
        environment = getattr(request.app.state, "environment", "production")
        show_stack_trace = debug_mode or environment == "development"

        path = request.url.path
        method = request.method

        logger.error(
            f"Error processing request: {method} {path}",
            extra={
                "request_id": request_id,
                "path": path,
                "method": method,
                "exception_type": type(exc).__name__,
            },
            exc_info=True,
        )

        status_code, content = self._describe(exc, show_stack_trace)
        content = error_response(
            **content,
            request_id=request_id,
            path=path,
            method=method,
            stack_trace=traceback.format_exc() if show_stack_trace else None,
        )

        return JSONResponse(
            status_code=status_code,
            content=content,
            headers={REQUEST_ID_HEADER: request_id},
        )

    @staticmethod
    def _describe(exc: Exception, show_details: bool) -> tuple[int, Dict[str, Any]]:
        """Map an exception to a status code and error envelope fields."""
        if isinstance(exc, BadgeHubException):
            return exc.status_code, {
                "code": exc.code,
                "message": exc.message,
                "field": exc.field,
                "details": exc.details or None,
            }

        if isinstance(exc, PydanticValidationError):
            return status.HTTP_422_UNPROCESSABLE_CONTENT, {
                "code": "VALIDATION_ERROR",
                "message": "Data validation failed",
                "errors": [
                    ErrorDetail(
                        code="VALIDATION_ERROR",
                        message=error["msg"],
                        field=" -> ".join(str(loc) for loc in error["loc"]),
                        details={"type": error["type"]},
                    )
                    for error in exc.errors()
                ],
            }

        if isinstance(exc, StarletteHTTPException):
            return exc.status_code, {
                "code": HTTP_STATUS_CODES.get(exc.status_code, "HTTP_ERROR"),
                "message": str(exc.detail),
                "details": {"status_code": exc.status_code},
            }

        details: Optional[Dict[str, Any]] = (
            {"exception_type": type(exc).__name__} if show_details else None
        )
        return status.HTTP_500_INTERNAL_SERVER_ERROR, {
            "code": "INTERNAL_ERROR",
            "message": str(exc) if show_details else "An internal error occurred",
            "details": details,
        }
