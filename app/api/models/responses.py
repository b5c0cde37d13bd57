"""API response models."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ScoreValue = Literal["excellent", "good", "needs-work", "missing"]


class CamelModel(BaseModel):
    """Serializes snake_case fields with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === Meta Tag Models ===


class TitleInfo(CamelModel):
    content: str | None = None
    length: int = Field(0, ge=0, description="Character count of the content")
    score: ScoreValue = "missing"


class DescriptionInfo(CamelModel):
    content: str | None = None
    length: int = Field(0, ge=0, description="Character count of the content")
    score: ScoreValue = "missing"


class CanonicalInfo(CamelModel):
    content: str | None = None
    score: ScoreValue = "missing"


class OpenGraphInfo(CamelModel):
    title: str | None = None
    description: str | None = None
    image: str | None = Field(default=None, description="Absolute image URL")
    url: str | None = None
    type: str | None = None
    site_name: str | None = None
    score: ScoreValue = "missing"


class TwitterInfo(CamelModel):
    card: str | None = None
    title: str | None = None
    description: str | None = None
    image: str | None = Field(default=None, description="Absolute image URL")
    score: ScoreValue = "missing"


class MetaTag(CamelModel):
    name: str
    content: str


class MetaTagAnalysis(CamelModel):
    """Everything extracted from the page, per category."""

    title: TitleInfo
    description: DescriptionInfo
    canonical: CanonicalInfo
    open_graph: OpenGraphInfo
    twitter: TwitterInfo
    other: list[MetaTag] = Field(default_factory=list)


# === Issue / Recommendation Models ===


class Issue(CamelModel):
    """Problem found in the page metadata."""

    severity: Literal["error", "warning", "info"]
    title: str
    description: str
    fix_link: str | None = Field(default=None, description="Documentation on how to fix it")


class Recommendation(CamelModel):
    """Suggested improvement, optionally with example markup."""

    priority: Literal["high", "medium", "low"]
    title: str
    description: str
    code: str | None = Field(default=None, description="Example markup")


# === Main Response Models ===


class AnalyzedSite(CamelModel):
    """Stored analysis of one URL."""

    id: int = Field(..., description="Storage identifier")
    url: str = Field(..., description="Analyzed URL")
    title: str | None = None
    description: str | None = None
    canonical: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_url: str | None = None
    og_type: str | None = None
    og_site_name: str | None = None
    twitter_card: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    meta_tags: MetaTagAnalysis
    issues: list[Issue] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    score_title: ScoreValue = "missing"
    score_description: ScoreValue = "missing"
    score_open_graph: ScoreValue = "missing"
    score_twitter: ScoreValue = "missing"
    analyzed_at: datetime = Field(..., description="When the analysis ran")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "url": "https://example.com/article",
                "title": "Example Article - A Practical Guide to Meta Tags",
                "scoreTitle": "excellent",
                "scoreDescription": "needs-work",
                "scoreOpenGraph": "good",
                "scoreTwitter": "missing",
                "analyzedAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    timestamp: datetime
    checks: dict[str, bool] = Field(
        default_factory=dict, description="Individual health check results"
    )
