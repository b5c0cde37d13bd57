"""Analysis endpoint."""
from __future__ import annotations

import logging

import requests
from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from app.api.models.errors import ErrorCodes, ErrorResponse, api_error
from app.api.models.requests import AnalyzeRequest
from app.api.models.responses import AnalyzedSite
from app.api.v1.deps import check_rate_limit
from src.fetcher.html_fetcher import FetchError
from src.seo.analyzer import analyze_url
from src.storage.analysis_store import analysis_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze",
    response_model=AnalyzedSite,
    dependencies=[Depends(check_rate_limit)],
    responses={
        400: {"model": ErrorResponse, "description": "URL rejected or not accessible"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Analyze the meta tags of a URL",
    description="""
Fetch a page and analyze its SEO and social meta tags.

**Analysis evaluates:**
- **Title** and **meta description** length
- **Canonical** URL presence
- **Open Graph** and **Twitter Card** completeness

The response carries a score per category, the issues found and
prioritized recommendations with example markup.

A URL analyzed within the last hour is served from storage instead of
being fetched again.
""",
)
async def analyze_site(body: AnalyzeRequest) -> AnalyzedSite:
    """Analyze a URL, re-using a recent stored analysis when there is one."""
    url = str(body.url)

    cached = analysis_store.get_fresh(url)
    if cached is not None:
        logger.info("Serving cached analysis %d for %s", cached.id, url)
        return AnalyzedSite.model_validate(cached.to_dict())

    try:
        result = await run_in_threadpool(analyze_url, url)
    except ValueError as e:
        raise api_error(status.HTTP_400_BAD_REQUEST, ErrorCodes.INVALID_URL, str(e), url=url)
    except FetchError as e:
        raise api_error(status.HTTP_400_BAD_REQUEST, ErrorCodes.URL_NOT_ACCESSIBLE, str(e), url=url)
    except requests.RequestException as e:
        logger.warning("Could not fetch %s: %s", url, e)
        raise api_error(
            status.HTTP_400_BAD_REQUEST,
            ErrorCodes.URL_NOT_ACCESSIBLE,
            f"Failed to fetch URL: {type(e).__name__}",
            url=url,
        )
    except Exception:
        logger.exception("Error analyzing %s", url)
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCodes.ANALYSIS_FAILED,
            "Failed to analyze website",
            url=url,
        )

    stored = analysis_store.create(result)
    return AnalyzedSite.model_validate(stored.to_dict())
