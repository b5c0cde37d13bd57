"""Report formatting utilities."""
from __future__ import annotations

import json
from typing import Literal

from rich.markup import escape

OutputFormat = Literal["cli", "json", "markdown"]

# Category key to display label
_CATEGORIES = [
    ("scoreTitle", "Title"),
    ("scoreDescription", "Description"),
    ("scoreOpenGraph", "Open Graph"),
    ("scoreTwitter", "Twitter Card"),
]

_SCORE_LABELS = {
    "excellent": "Excellent",
    "good": "Good",
    "needs-work": "Needs Work",
    "missing": "Missing",
}

_SCORE_COLORS = {
    "excellent": "green",
    "good": "green",
    "needs-work": "yellow",
    "missing": "red",
}

_SEVERITY_MARKS = {
    "error": ("red", "✗"),
    "warning": ("yellow", "!"),
    "info": ("blue", "i"),
}

_PRIORITY_COLORS = {"high": "red", "medium": "yellow", "low": "blue"}


def score_label(score: str) -> str:
    return _SCORE_LABELS.get(score, "Unknown")


def format_report(results: dict, output: OutputFormat = "cli") -> str:
    """Format analysis results for output.

    Args:
        results: Analysis record as produced by ``AnalysisResult.to_dict``,
            optionally with a ``summary`` entry (``score`` and ``category``)
        output: Output format - 'cli', 'json', or 'markdown'

    Returns:
        Formatted string representation of results
    """
    if output == "json":
        return _format_json(results)
    elif output == "markdown":
        return _format_markdown(results)
    else:
        return _format_cli(results)


def _format_json(results: dict) -> str:
    """Format results as JSON."""
    return json.dumps(results, ensure_ascii=False, indent=2)


def _page_title(results: dict) -> str:
    title = results.get("title") or "Unknown Page"
    if len(title) > 60:
        title = title[:57] + "..."
    return title


def _format_cli(results: dict) -> str:
    """Format results for terminal display with Rich-compatible markup."""
    lines = []

    lines.append("[bold cyan]Meta Tag Analysis Report[/bold cyan]")
    lines.append(f"[dim]Page:[/dim] {escape(_page_title(results))}")
    lines.append(f"[dim]URL:[/dim] {escape(results.get('url', ''))}")
    lines.append("")

    summary = results.get("summary")
    if summary:
        category = summary.get("category", "missing")
        color = _SCORE_COLORS.get(category, "white")
        lines.append(
            f"[bold]Overall Score:[/bold] [{color}]{summary.get('score', 0)}/100 "
            f"({score_label(category)})[/{color}]"
        )
        lines.append("")

    lines.append("[bold]Category Scores:[/bold]")
    for key, label in _CATEGORIES:
        score = results.get(key, "missing")
        color = _SCORE_COLORS.get(score, "white")
        lines.append(f"  {label:15} [{color}]{score_label(score)}[/{color}]")
    lines.append("")

    issues = results.get("issues", [])
    if issues:
        lines.append("[bold]Issues:[/bold]")
        for issue in issues:
            color, mark = _SEVERITY_MARKS.get(issue.get("severity"), ("white", "?"))
            lines.append(f"  [{color}]{mark}[/{color}] {escape(issue.get('title', ''))}")
            lines.append(f"    [dim]{escape(issue.get('description', ''))}[/dim]")
        lines.append("")

    recommendations = results.get("recommendations", [])
    if recommendations:
        lines.append("[bold]Recommendations:[/bold]")
        for i, rec in enumerate(recommendations, 1):
            priority = rec.get("priority", "low")
            color = _PRIORITY_COLORS.get(priority, "white")
            lines.append(
                f"  {i}. [{color}]\\[{priority}][/{color}] {escape(rec.get('title', ''))}"
            )

    return "\n".join(lines).rstrip()


def _format_markdown(results: dict) -> str:
    """Format results as Markdown."""
    lines = []

    lines.append("# Meta Tag Analysis Report")
    lines.append("")
    lines.append(f"**Page:** {_page_title(results)}")
    if results.get("url"):
        lines.append(f"**URL:** {results['url']}")
    lines.append("")

    summary = results.get("summary")
    if summary:
        lines.append("## Overall Score")
        lines.append("")
        lines.append(f"**{summary.get('score', 0)}/100** ({score_label(summary.get('category', 'missing'))})")
        lines.append("")

    lines.append("## Category Scores")
    lines.append("")
    lines.append("| Category | Score |")
    lines.append("|----------|-------|")
    for key, label in _CATEGORIES:
        lines.append(f"| {label} | {score_label(results.get(key, 'missing'))} |")
    lines.append("")

    issues = results.get("issues", [])
    if issues:
        lines.append("## Issues")
        lines.append("")
        emoji = {"error": "❌", "warning": "⚠️", "info": "ℹ️"}
        for issue in issues:
            entry = f"- {emoji.get(issue.get('severity'), '❓')} **{issue.get('title', '')}**: {issue.get('description', '')}"
            if issue.get("fixLink"):
                entry += f" ([how to fix]({issue['fixLink']}))"
            lines.append(entry)
        lines.append("")

    recommendations = results.get("recommendations", [])
    if recommendations:
        lines.append("## Recommendations")
        lines.append("")
        for i, rec in enumerate(recommendations, 1):
            lines.append(f"{i}. **[{rec.get('priority', 'low').upper()}]** {rec.get('title', '')}")
            lines.append(f"   {rec.get('description', '')}")
            if rec.get("code"):
                lines.append("")
                lines.append("   ```html")
                lines.extend(f"   {line}" for line in rec["code"].rstrip("\n").splitlines())
                lines.append("   ```")
            lines.append("")

    other = results.get("metaTags", {}).get("other", [])
    if other:
        lines.append("## Other Meta Tags")
        lines.append("")
        lines.append("| Name | Content |")
        lines.append("|------|---------|")
        for tag in other:
            content = tag.get("content", "").replace("|", "\\|")
            lines.append(f"| {tag.get('name', '')} | {content} |")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"
