"""Health check endpoint."""
from __future__ import annotations

from datetime import UTC, datetime

from bs4 import FeatureNotFound
from fastapi import APIRouter

from app.api.models.responses import HealthResponse
from src.parser.html_document import HtmlDocument
from src.storage.analysis_store import analysis_store

router = APIRouter(tags=["Health"])

VERSION = "1.0.0"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check API health and service status.",
)
async def health_check() -> HealthResponse:
    """Return API health status."""
    checks: dict[str, bool] = {}

    # The lxml parser backend must be usable
    try:
        checks["html_parser"] = HtmlDocument("<title>ok</title>").text("title") == "ok"
    except FeatureNotFound:
        checks["html_parser"] = False

    checks["storage"] = analysis_store is not None

    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=VERSION,
        timestamp=datetime.now(UTC),
        checks=checks,
    )
