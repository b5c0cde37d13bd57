"""Centralized configuration settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class FetcherSettings:
    """Settings for HTML fetcher."""
    request_timeout: int = 15
    max_response_size: int = 10 * 1024 * 1024  # 10 MB
    max_redirects: int = 5
    # Browser-like headers so sites don't serve bot pages
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
    accept_language: str = "en-US,en;q=0.5"
    referer: str = "https://www.google.com/"


@dataclass
class StorageSettings:
    """Settings for the analysis store."""
    cache_ttl_seconds: int = 3600  # Re-use analyses younger than 1 hour
    recent_default_limit: int = 5
    recent_max_limit: int = 50
    max_records: int = 1000


@dataclass
class APISettings:
    """API-specific settings."""
    # Rate limiting (requests per window per client)
    rate_limit_requests: int = 10
    rate_limit_window: int = 60  # seconds

    # CORS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class Settings:
    """Main application settings container."""
    fetcher: FetcherSettings = field(default_factory=FetcherSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    api: APISettings = field(default_factory=APISettings)

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("META_CHECKER_DEBUG", "").lower() in ("true", "1", "yes")
        self.log_level = os.environ.get(
            "META_CHECKER_LOG_LEVEL", "DEBUG" if self.debug else self.log_level
        ).upper()

        # Fetcher overrides
        if timeout := os.environ.get("META_CHECKER_REQUEST_TIMEOUT"):
            self.fetcher.request_timeout = int(timeout)

        # Storage overrides
        if cache_ttl := os.environ.get("META_CHECKER_CACHE_TTL"):
            self.storage.cache_ttl_seconds = int(cache_ttl)

        # API overrides
        if rate_limit := os.environ.get("META_CHECKER_RATE_LIMIT"):
            self.api.rate_limit_requests = int(rate_limit)
        if cors := os.environ.get("META_CHECKER_CORS_ORIGINS"):
            self.api.cors_origins = [o.strip() for o in cors.split(",")]


# Global settings instance
settings = Settings()
