"""Unit tests for the command line interface."""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest
import requests
from typer.testing import CliRunner

from src.cli.run import app
from src.fetcher.html_fetcher import FetchError
from src.seo.analyzer import analyze, build_result

URL = "https://site.com/blog/post"

runner = CliRunner()


@pytest.fixture
def complete_result(complete_html, analyzed_at):
    return build_result(URL, analyze(complete_html, URL), analyzed_at)


@pytest.fixture
def bare_result(bare_html, analyzed_at):
    return build_result(URL, analyze(bare_html, URL), analyzed_at)


class TestRunCommand:
    """Tests for `run`."""

    def test_cli_output(self, complete_result):
        with patch("src.cli.run.analyze_url", return_value=complete_result) as mock_analyze:
            result = runner.invoke(app, ["run", URL])

        assert result.exit_code == 0
        mock_analyze.assert_called_once_with(URL)
        assert "Meta Tag Analysis Report" in result.output

    def test_save_json(self, complete_result, tmp_path):
        target = tmp_path / "report.json"
        with patch("src.cli.run.analyze_url", return_value=complete_result):
            result = runner.invoke(app, ["run", URL, "-o", "json", "-s", str(target)])

        assert result.exit_code == 0
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["url"] == URL
        assert data["summary"] == {"score": 100, "category": "excellent"}

    def test_invalid_output_format(self, complete_result):
        with patch("src.cli.run.analyze_url", return_value=complete_result):
            result = runner.invoke(app, ["run", URL, "-o", "xml"])

        assert result.exit_code == 1
        assert "Invalid output format" in result.output

    def test_rejected_url(self):
        with patch("src.cli.run.analyze_url", side_effect=ValueError("Only http and https URLs are allowed")):
            result = runner.invoke(app, ["run", "file:///etc/passwd"])

        assert result.exit_code == 1
        assert "Only http and https URLs are allowed" in result.output

    def test_fetch_error(self):
        error = FetchError(404, "Not Found", URL)
        with patch("src.cli.run.analyze_url", side_effect=error):
            result = runner.invoke(app, ["run", URL])

        assert result.exit_code == 1
        assert "404 Not Found" in result.output

    def test_network_error(self):
        with patch("src.cli.run.analyze_url", side_effect=requests.ConnectionError("refused")):
            result = runner.invoke(app, ["run", URL])

        assert result.exit_code == 1
        assert "Network Error" in result.output

    def test_markup_in_target_and_error_is_printed_literally(self):
        target = "https://x.invalid/[/b]"
        with patch("src.cli.run.analyze_url", side_effect=ValueError(f"Could not resolve {target}")):
            result = runner.invoke(app, ["run", target])

        assert result.exit_code == 1
        assert "Could not resolve https://x.invalid/[/b]" in result.output
        assert "[/b]" in result.output.split("Error")[0]


class TestAnalyzeFileCommand:
    """Tests for `analyze-file`."""

    def test_markdown_from_file(self, complete_html, tmp_path):
        page = tmp_path / "page.html"
        page.write_text(complete_html, encoding="utf-8")
        target = tmp_path / "report.md"

        result = runner.invoke(
            app, ["analyze-file", str(page), "--url", URL, "-o", "markdown", "-s", str(target)]
        )

        assert result.exit_code == 0
        report = target.read_text(encoding="utf-8")
        assert "**Page:** Meta Tags Explained: A Practical Guide for 2024" in report
        assert "**100/100** (Excellent)" in report

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze-file", str(tmp_path / "nope.html"), "--url", URL])

        assert result.exit_code != 0


class TestCheckCommand:
    """Tests for `check`."""

    def test_passing_page(self, complete_result):
        with patch("src.cli.run.analyze_url", return_value=complete_result):
            result = runner.invoke(app, ["check", URL])

        assert result.exit_code == 0
        assert "(100/100)" in result.output

    def test_failing_page(self, bare_result):
        with patch("src.cli.run.analyze_url", return_value=bare_result):
            result = runner.invoke(app, ["check", URL])

        # needs-work, missing x3 -> 17.5 -> 18
        assert result.exit_code == 1
        assert "(18/100)" in result.output

    def test_markup_in_target_is_printed_literally(self, complete_result):
        target = "https://x.invalid/[bold]"
        with patch("src.cli.run.analyze_url", return_value=complete_result):
            result = runner.invoke(app, ["check", target])

        assert result.exit_code == 0
        assert "(100/100) - https://x.invalid/[bold]" in result.output

    def test_markup_in_error_is_printed_literally(self):
        with patch("src.cli.run.analyze_url", side_effect=requests.ConnectionError("[/red] refused")):
            result = runner.invoke(app, ["check", "https://x.invalid/"])

        assert result.exit_code == 1
        assert "[/red] refused" in result.output


class TestVersionCommand:
    """Tests for `version`."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output
