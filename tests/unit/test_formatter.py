"""Unit tests for report formatting."""
from __future__ import annotations

import json

import pytest

from src.report.formatter import format_report, score_label
from src.seo.analyzer import analyze, build_result

URL = "https://site.com/blog/post"


@pytest.fixture
def complete_results(complete_html, analyzed_at):
    data = build_result(URL, analyze(complete_html, URL), analyzed_at).to_dict()
    data["summary"] = {"score": 100, "category": "excellent"}
    return data


@pytest.fixture
def bare_results(bare_html, analyzed_at):
    return build_result(URL, analyze(bare_html, URL), analyzed_at).to_dict()


class TestScoreLabel:
    """Tests for score_label."""

    def test_known(self):
        assert score_label("needs-work") == "Needs Work"
        assert score_label("excellent") == "Excellent"

    def test_unknown(self):
        assert score_label("bogus") == "Unknown"


class TestJsonFormat:
    """Tests for JSON output."""

    def test_valid_json(self, complete_results):
        output = format_report(complete_results, "json")
        data = json.loads(output)

        assert data["url"] == URL
        assert data["summary"]["score"] == 100
        assert data["metaTags"]["openGraph"]["siteName"] == "Site Blog"


class TestCliFormat:
    """Tests for terminal output."""

    def test_contains_scores(self, complete_results):
        output = format_report(complete_results, "cli")

        assert "Meta Tag Analysis Report" in output
        assert "Overall Score" in output
        assert "Open Graph" in output
        assert "Excellent" in output

    def test_lists_issues(self, bare_results):
        output = format_report(bare_results, "cli")

        assert "Issues:" in output
        assert "Missing meta description" in output
        assert "Overall Score" not in output

    def test_escapes_markup(self, bare_results):
        bare_results["title"] = "[bold]Injected[/bold]"
        output = format_report(bare_results, "cli")

        assert "\\[bold]Injected" in output

    def test_default_is_cli(self, complete_results):
        assert format_report(complete_results) == format_report(complete_results, "cli")


class TestMarkdownFormat:
    """Tests for Markdown output."""

    def test_sections(self, bare_results):
        output = format_report(bare_results, "markdown")

        assert output.startswith("# Meta Tag Analysis Report")
        assert "## Category Scores" in output
        assert "| Title | Needs Work |" in output
        assert "## Issues" in output
        assert "## Recommendations" in output

    def test_fix_links(self, bare_results):
        output = format_report(bare_results, "markdown")

        assert "([how to fix](https://ogp.me/))" in output

    def test_code_blocks(self, bare_results):
        output = format_report(bare_results, "markdown")

        assert "   ```html" in output
        assert '   <meta name="twitter:card" content="summary_large_image">' in output

    def test_other_meta_tags(self, complete_results):
        output = format_report(complete_results, "markdown")

        assert "## Other Meta Tags" in output
        assert "| robots | index, follow |" in output
        assert "| author | Jane Doe |" in output
