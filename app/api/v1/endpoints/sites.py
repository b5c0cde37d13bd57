"""Stored analyses endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Query

from app.api.models.responses import AnalyzedSite
from src.config.settings import settings
from src.storage.analysis_store import analysis_store

router = APIRouter(tags=["Sites"])


@router.get(
    "/sites/recent",
    response_model=list[AnalyzedSite],
    summary="Recently analyzed sites",
    description="List the most recent analyses, newest first.",
)
async def recent_sites(
    limit: int = Query(
        settings.storage.recent_default_limit,
        ge=1,
        le=settings.storage.recent_max_limit,
        description="Maximum number of analyses to return",
    ),
) -> list[AnalyzedSite]:
    """Return the latest stored analyses."""
    return [
        AnalyzedSite.model_validate(record.to_dict())
        for record in analysis_store.list_recent(limit)
    ]
