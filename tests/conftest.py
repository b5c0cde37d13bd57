"""Shared test fixtures and configuration."""
from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures" / "html"


@pytest.fixture
def page_url() -> str:
    """Return the URL the test pages pretend to live at."""
    return "https://site.com/blog/post"


@pytest.fixture
def complete_html() -> str:
    """Return a page with every tag the analyzer looks for."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Meta Tags Explained: A Practical Guide for 2024</title>
    <meta name="description" content="Learn how title tags, meta descriptions, canonical URLs, Open Graph and Twitter Cards shape the way your pages look in search and social feeds.">
    <link rel="canonical" href="https://site.com/blog/post">
    <meta name="robots" content="index, follow">
    <meta name="author" content="Jane Doe">
    <meta property="og:title" content="Meta Tags Explained">
    <meta property="og:description" content="A practical guide to SEO meta tags.">
    <meta property="og:image" content="/images/cover.jpg">
    <meta property="og:url" content="https://site.com/blog/post">
    <meta property="og:type" content="article">
    <meta property="og:site_name" content="Site Blog">
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="Meta Tags Explained">
    <meta name="twitter:description" content="A practical guide to SEO meta tags.">
    <meta name="twitter:image" content="https://cdn.site.com/cover-twitter.jpg">
</head>
<body>
    <h1>Meta Tags Explained</h1>
    <article><img src="inline.png" alt="Inline"></article>
</body>
</html>"""


@pytest.fixture
def bare_html() -> str:
    """Return a page without any metadata."""
    return """<!DOCTYPE html>
<html>
<head></head>
<body><p>Content</p></body>
</html>"""


@pytest.fixture
def analyzed_at() -> datetime:
    """Return a fixed analysis timestamp."""
    return datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
