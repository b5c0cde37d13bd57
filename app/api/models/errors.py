"""API error envelope."""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None, description="Context such as the offending URL"
    )


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx answer, nested under ``detail``."""

    error: ErrorDetail

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": {
                    "code": "URL_NOT_ACCESSIBLE",
                    "message": "Failed to fetch URL: 404 Not Found",
                    "details": {"url": "https://example.com/missing"},
                }
            }
        }
    }


class ErrorCodes:
    """Error codes returned by the API."""

    INVALID_URL = "INVALID_URL"  # rejected before fetching
    URL_NOT_ACCESSIBLE = "URL_NOT_ACCESSIBLE"  # target failed or answered non-2xx
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    ANALYSIS_FAILED = "ANALYSIS_FAILED"


def api_error(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
    **details: Any,
) -> HTTPException:
    """Build an HTTPException carrying the error envelope."""
    error = ErrorDetail(code=code, message=message, details=details or None)
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error).model_dump(),
        headers=headers,
    )
