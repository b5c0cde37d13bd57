"""Data model for meta tag analysis."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ScoreCategory(Enum):
    """Per-category quality bucket."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs-work"
    MISSING = "missing"


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Priority(Enum):
    """Recommendation priority levels."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _length(content: str | None) -> int:
    return len(content) if content else 0


@dataclass(frozen=True)
class TitleMeta:
    content: str | None = None
    score: ScoreCategory = ScoreCategory.MISSING

    @property
    def length(self) -> int:
        return _length(self.content)

    def to_dict(self) -> dict:
        return {"content": self.content, "length": self.length, "score": self.score.value}


@dataclass(frozen=True)
class DescriptionMeta:
    content: str | None = None
    score: ScoreCategory = ScoreCategory.MISSING

    @property
    def length(self) -> int:
        return _length(self.content)

    def to_dict(self) -> dict:
        return {"content": self.content, "length": self.length, "score": self.score.value}


@dataclass(frozen=True)
class CanonicalMeta:
    content: str | None = None
    score: ScoreCategory = ScoreCategory.MISSING

    def to_dict(self) -> dict:
        return {"content": self.content, "score": self.score.value}


@dataclass(frozen=True)
class OpenGraphMeta:
    title: str | None = None
    description: str | None = None
    image: str | None = None
    url: str | None = None
    type: str | None = None
    site_name: str | None = None
    score: ScoreCategory = ScoreCategory.MISSING

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "url": self.url,
            "type": self.type,
            "siteName": self.site_name,
            "score": self.score.value,
        }


@dataclass(frozen=True)
class TwitterMeta:
    card: str | None = None
    title: str | None = None
    description: str | None = None
    image: str | None = None
    score: ScoreCategory = ScoreCategory.MISSING

    def to_dict(self) -> dict:
        return {
            "card": self.card,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "score": self.score.value,
        }


@dataclass(frozen=True)
class MetaTag:
    """A meta tag not covered by the dedicated categories."""
    name: str
    content: str

    def to_dict(self) -> dict:
        return {"name": self.name, "content": self.content}


@dataclass(frozen=True)
class MetadataRecord:
    """Everything the extractor pulls out of a page.

    Scores are left at ``missing`` by the extractor and filled in by the
    scorer, which returns a new record rather than mutating this one.
    """
    title: TitleMeta = field(default_factory=TitleMeta)
    description: DescriptionMeta = field(default_factory=DescriptionMeta)
    canonical: CanonicalMeta = field(default_factory=CanonicalMeta)
    open_graph: OpenGraphMeta = field(default_factory=OpenGraphMeta)
    twitter: TwitterMeta = field(default_factory=TwitterMeta)
    other: tuple[MetaTag, ...] = ()

    def to_dict(self) -> dict:
        return {
            "title": self.title.to_dict(),
            "description": self.description.to_dict(),
            "canonical": self.canonical.to_dict(),
            "openGraph": self.open_graph.to_dict(),
            "twitter": self.twitter.to_dict(),
            "other": [tag.to_dict() for tag in self.other],
        }


@dataclass(frozen=True)
class CategoryScores:
    title: ScoreCategory = ScoreCategory.MISSING
    description: ScoreCategory = ScoreCategory.MISSING
    open_graph: ScoreCategory = ScoreCategory.MISSING
    twitter: ScoreCategory = ScoreCategory.MISSING

    def as_tuple(self) -> tuple[ScoreCategory, ...]:
        return (self.title, self.description, self.open_graph, self.twitter)

    def to_dict(self) -> dict:
        return {
            "title": self.title.value,
            "description": self.description.value,
            "openGraph": self.open_graph.value,
            "twitter": self.twitter.value,
        }


@dataclass(frozen=True)
class Issue:
    """Represents a problem found in the page metadata."""
    severity: Severity
    title: str
    description: str
    fix_link: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
        }
        if self.fix_link:
            d["fixLink"] = self.fix_link
        return d


@dataclass(frozen=True)
class Recommendation:
    """An actionable suggestion, optionally with example markup."""
    priority: Priority
    title: str
    description: str
    code: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
        }
        if self.code:
            d["code"] = self.code
        return d


@dataclass(frozen=True)
class Analysis:
    """Output of the pure analysis core."""
    metadata: MetadataRecord
    scores: CategoryScores
    issues: tuple[Issue, ...]
    recommendations: tuple[Recommendation, ...]

    def to_dict(self) -> dict:
        return {
            "metadata": self.metadata.to_dict(),
            "scores": self.scores.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Flattened, externally facing analysis record."""
    url: str
    title: str | None
    description: str | None
    canonical: str | None
    og_title: str | None
    og_description: str | None
    og_image: str | None
    og_url: str | None
    og_type: str | None
    og_site_name: str | None
    twitter_card: str | None
    twitter_title: str | None
    twitter_description: str | None
    twitter_image: str | None
    meta_tags: MetadataRecord
    issues: tuple[Issue, ...]
    recommendations: tuple[Recommendation, ...]
    score_title: ScoreCategory
    score_description: ScoreCategory
    score_open_graph: ScoreCategory
    score_twitter: ScoreCategory
    analyzed_at: datetime

    @property
    def scores(self) -> CategoryScores:
        return CategoryScores(
            title=self.score_title,
            description=self.score_description,
            open_graph=self.score_open_graph,
            twitter=self.score_twitter,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase record shape used by the API and storage."""
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "canonical": self.canonical,
            "ogTitle": self.og_title,
            "ogDescription": self.og_description,
            "ogImage": self.og_image,
            "ogUrl": self.og_url,
            "ogType": self.og_type,
            "ogSiteName": self.og_site_name,
            "twitterCard": self.twitter_card,
            "twitterTitle": self.twitter_title,
            "twitterDescription": self.twitter_description,
            "twitterImage": self.twitter_image,
            "metaTags": self.meta_tags.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "scoreTitle": self.score_title.value,
            "scoreDescription": self.score_description.value,
            "scoreOpenGraph": self.score_open_graph.value,
            "scoreTwitter": self.score_twitter.value,
            "analyzedAt": self.analyzed_at.isoformat(),
        }
