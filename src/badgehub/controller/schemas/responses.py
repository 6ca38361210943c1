"""Response schemas for badgehub API errors.

This module provides a consistent response format for error cases raised
outside of badge rendering (unexpected failures, invalid requests).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(None, description="Field name if validation error")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error context"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "code": "VALIDATION_ERROR",
                "message": "String should have at most 256 characters",
                "field": "query -> label",
                "details": {"type": "string_too_long"},
            }
        }


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    errors: Optional[List[ErrorDetail]] = Field(
        None, description="Multiple errors (e.g., validation)"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Error timestamp (UTC)"
    )
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
    path: Optional[str] = Field(None, description="API path that caused the error")
    method: Optional[str] = Field(None, description="HTTP method")

    stack_trace: Optional[str] = Field(
        None, description="Stack trace (development only)"
    )
    debug_info: Optional[Dict[str, Any]] = Field(
        None, description="Debug information (development only)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                },
                "timestamp": "2026-02-18T00:00:00Z",
                "request_id": "req_abc123",
                "path": "/jenkins/plugin/i/view-job-filters",
                "method": "GET",
            }
        }


def error_response(
    code: str,
    message: str,
    field: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    errors: Optional[List[ErrorDetail]] = None,
    request_id: Optional[str] = None,
    path: Optional[str] = None,
    method: Optional[str] = None,
    stack_trace: Optional[str] = None,
    debug_info: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Create an error response."""
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, field=field, details=details),
        errors=errors,
        request_id=request_id,
        path=path,
        method=method,
        stack_trace=stack_trace,
        debug_info=debug_info,
    ).model_dump(mode="json", exclude_none=True)
