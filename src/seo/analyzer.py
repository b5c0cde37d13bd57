"""Meta tag analysis pipeline."""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from src.fetcher.html_fetcher import FetchedPage, fetch_page
from src.parser.metadata_extractor import extract_metadata
from src.seo.issue_detector import detect_issues
from src.seo.models import Analysis, AnalysisResult
from src.seo.recommendations import recommend
from src.seo.scorer import score_metadata

logger = logging.getLogger(__name__)


def analyze(html: str, page_url: str) -> Analysis:
    """Analyze the metadata of an already fetched page.

    Pure and deterministic: the same ``html`` and ``page_url`` always give
    an equal result.

    Args:
        html: Raw HTML string
        page_url: URL of the page, used to resolve relative image URLs

    Returns:
        Analysis with the scored metadata, category scores, issues and
        recommendations
    """
    metadata, scores = score_metadata(extract_metadata(html, page_url))
    return Analysis(
        metadata=metadata,
        scores=scores,
        issues=tuple(detect_issues(metadata)),
        recommendations=tuple(recommend(metadata)),
    )


def build_result(url: str, analysis: Analysis, analyzed_at: datetime) -> AnalysisResult:
    """Flatten an analysis into the record that gets stored and served."""
    meta = analysis.metadata
    og = meta.open_graph
    twitter = meta.twitter
    return AnalysisResult(
        url=url,
        title=meta.title.content,
        description=meta.description.content,
        canonical=meta.canonical.content,
        og_title=og.title,
        og_description=og.description,
        og_image=og.image,
        og_url=og.url,
        og_type=og.type,
        og_site_name=og.site_name,
        twitter_card=twitter.card,
        twitter_title=twitter.title,
        twitter_description=twitter.description,
        twitter_image=twitter.image,
        meta_tags=meta,
        issues=analysis.issues,
        recommendations=analysis.recommendations,
        score_title=analysis.scores.title,
        score_description=analysis.scores.description,
        score_open_graph=analysis.scores.open_graph,
        score_twitter=analysis.scores.twitter,
        analyzed_at=analyzed_at,
    )


def analyze_url(
    url: str,
    fetch: Callable[[str], FetchedPage] = fetch_page,
    now: Callable[[], datetime] = lambda: datetime.now(UTC),
) -> AnalysisResult:
    """Fetch ``url`` and analyze it.

    Relative images are resolved against the URL the page was finally
    served from, while the record stays keyed by the requested ``url``.
    Fetch errors propagate to the caller.
    """
    page = fetch(url)
    logger.info("Analyzing %s (%d bytes)", page.final_url, len(page.html))
    analysis = analyze(page.html, page.final_url)
    return build_result(url, analysis, now())
