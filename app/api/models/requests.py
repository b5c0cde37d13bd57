"""API request models."""
from __future__ import annotations

from pydantic import BaseModel, Field, HttpUrl, field_validator


class AnalyzeRequest(BaseModel):
    """Page to analyze."""

    url: HttpUrl = Field(
        ...,
        description="Public http(s) URL of the page whose meta tags should be analyzed",
        examples=["https://example.com/article"],
    )

    @field_validator("url")
    @classmethod
    def reject_credentials(cls, v: HttpUrl) -> HttpUrl:
        """Pages behind basic auth cannot be analyzed."""
        if v.username or v.password:
            raise ValueError("URLs with embedded credentials are not supported")
        return v
