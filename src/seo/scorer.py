"""Category scoring for extracted metadata."""
from __future__ import annotations

from dataclasses import replace

from src.seo.models import (
    CategoryScores,
    DescriptionMeta,
    MetadataRecord,
    OpenGraphMeta,
    ScoreCategory,
    TitleMeta,
    TwitterMeta,
)

# Scoring thresholds
TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60

DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160

# Numeric weights used only for the combined summary score
SCORE_VALUES = {
    ScoreCategory.EXCELLENT: 100,
    ScoreCategory.GOOD: 75,
    ScoreCategory.NEEDS_WORK: 40,
    ScoreCategory.MISSING: 10,
}

SUMMARY_EXCELLENT_THRESHOLD = 90
SUMMARY_GOOD_THRESHOLD = 70
SUMMARY_NEEDS_WORK_THRESHOLD = 30


def _score_length(length: int, min_length: int, max_length: int) -> ScoreCategory:
    if min_length <= length <= max_length:
        return ScoreCategory.EXCELLENT
    if 0 < length < min_length:
        return ScoreCategory.NEEDS_WORK
    if length > max_length:
        return ScoreCategory.GOOD
    return ScoreCategory.MISSING


def score_title(title: TitleMeta) -> ScoreCategory:
    if not title.content:
        return ScoreCategory.MISSING
    return _score_length(title.length, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)


def score_description(description: DescriptionMeta) -> ScoreCategory:
    if not description.content:
        return ScoreCategory.MISSING
    return _score_length(description.length, DESCRIPTION_MIN_LENGTH, DESCRIPTION_MAX_LENGTH)


def score_open_graph(og: OpenGraphMeta) -> ScoreCategory:
    """Title, description and image are required; url and type complete the set."""
    if not (og.title or og.description or og.image):
        return ScoreCategory.MISSING

    has_mandatory = bool(og.title and og.description and og.image)
    has_optional = bool(og.url and og.type)

    if has_mandatory and has_optional:
        return ScoreCategory.EXCELLENT
    if has_mandatory:
        return ScoreCategory.GOOD
    return ScoreCategory.NEEDS_WORK


def score_twitter(twitter: TwitterMeta) -> ScoreCategory:
    """Card, title and description are required; an image makes it excellent."""
    if not (twitter.card or twitter.title or twitter.description or twitter.image):
        return ScoreCategory.MISSING

    has_mandatory = bool(twitter.card and twitter.title and twitter.description)

    if has_mandatory and twitter.image:
        return ScoreCategory.EXCELLENT
    if has_mandatory:
        return ScoreCategory.GOOD
    return ScoreCategory.NEEDS_WORK


def score_metadata(metadata: MetadataRecord) -> tuple[MetadataRecord, CategoryScores]:
    """Score every category of ``metadata``.

    Returns a copy of the record with its ``score`` fields filled in, plus the
    four category scores. Canonical keeps its default score.
    """
    scores = CategoryScores(
        title=score_title(metadata.title),
        description=score_description(metadata.description),
        open_graph=score_open_graph(metadata.open_graph),
        twitter=score_twitter(metadata.twitter),
    )
    scored = replace(
        metadata,
        title=replace(metadata.title, score=scores.title),
        description=replace(metadata.description, score=scores.description),
        open_graph=replace(metadata.open_graph, score=scores.open_graph),
        twitter=replace(metadata.twitter, score=scores.twitter),
    )
    return scored, scores


def summary_score(scores: CategoryScores) -> tuple[int, ScoreCategory]:
    """Combine the category scores into a 0-100 value and its bucket.

    Example:
        >>> summary_score(CategoryScores(*[ScoreCategory.GOOD] * 4))
        (75, <ScoreCategory.GOOD: 'good'>)
    """
    values = [SCORE_VALUES[score] for score in scores.as_tuple()]
    # Round half up so 72.5 becomes 73
    total = int(sum(values) / len(values) + 0.5)

    if total >= SUMMARY_EXCELLENT_THRESHOLD:
        return total, ScoreCategory.EXCELLENT
    if total >= SUMMARY_GOOD_THRESHOLD:
        return total, ScoreCategory.GOOD
    if total >= SUMMARY_NEEDS_WORK_THRESHOLD:
        return total, ScoreCategory.NEEDS_WORK
    return total, ScoreCategory.MISSING
