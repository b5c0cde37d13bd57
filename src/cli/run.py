"""CLI commands."""
from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import requests
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from src.config.log_config import configure_logging
from src.report.formatter import OutputFormat, format_report, score_label
from src.seo.analyzer import analyze, analyze_url, build_result
from src.seo.models import AnalysisResult, ScoreCategory
from src.seo.scorer import summary_score

VERSION = "1.0.0"

app = typer.Typer(
    add_completion=False,
    help="Meta Tag Checker - Analyze title, description and social meta tags",
)
console = Console()

_SUMMARY_COLORS = {
    ScoreCategory.EXCELLENT: "green",
    ScoreCategory.GOOD: "blue",
    ScoreCategory.NEEDS_WORK: "yellow",
    ScoreCategory.MISSING: "red",
}


def _report_data(result: AnalysisResult) -> dict:
    total, category = summary_score(result.scores)
    return {**result.to_dict(), "summary": {"score": total, "category": category.value}}


def _emit(result: AnalysisResult, output: str, save: str | None) -> None:
    if output not in ("cli", "json", "markdown"):
        console.print(f"[red]Error:[/red] Invalid output format '{escape(output)}'. Use cli, json, or markdown.")
        raise typer.Exit(1)

    output_format: OutputFormat = output  # type: ignore
    report = format_report(_report_data(result), output_format)

    if save:
        save_path = Path(save)
        save_path.write_text(report, encoding="utf-8")
        console.print(f"\n[green]Report saved to:[/green] {escape(str(save_path))}")
    else:
        console.print("")
        if output_format == "cli":
            console.print(report)
        else:
            # JSON/Markdown - print raw
            console.print(report, markup=False, highlight=False)


@app.command()
def run(
    target: str = typer.Argument(..., help="URL to analyze"),
    output: str = typer.Option(
        "cli",
        "--output",
        "-o",
        help="Output format: cli, json, markdown",
    ),
    save: str | None = typer.Option(
        None,
        "--save",
        "-s",
        help="Save report to file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Fetch a URL and analyze its meta tags.

    Examples:
        meta-checker run https://example.com
        meta-checker run https://example.com -o json
        meta-checker run https://example.com -o markdown -s report.md
    """
    configure_logging("DEBUG" if verbose else None)

    console.print(Panel.fit(
        f"[bold cyan]Meta Tag Checker[/bold cyan]\n[dim]Analyzing:[/dim] {escape(target)}",
        border_style="cyan",
    ))

    try:
        with console.status("[bold blue]Fetching and analyzing page...", spinner="dots"):
            result = analyze_url(target)
    except ValueError as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except RuntimeError as e:
        console.print(f"\n[red]Runtime Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except requests.RequestException as e:
        console.print(f"\n[red]Network Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _emit(result, output, save)


@app.command("analyze-file")
def analyze_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Local HTML file"),
    url: str = typer.Option(
        ...,
        "--url",
        "-u",
        help="URL the page is published at (used to resolve relative images)",
    ),
    output: str = typer.Option("cli", "--output", "-o", help="Output format: cli, json, markdown"),
    save: str | None = typer.Option(None, "--save", "-s", help="Save report to file"),
) -> None:
    """Analyze a saved HTML file without fetching anything.

    Example:
        meta-checker analyze-file page.html --url https://example.com/blog/post
    """
    html = path.read_text(encoding="utf-8", errors="replace")
    result = build_result(url, analyze(html, url), datetime.now(UTC))
    _emit(result, output, save)


@app.command()
def check(
    target: str = typer.Argument(..., help="URL to quick-check"),
) -> None:
    """Quick check - prints only the overall score.

    Exits with 1 when the overall score needs work or is missing.

    Example:
        meta-checker check https://example.com
    """
    try:
        with console.status("[bold blue]Analyzing...", spinner="dots"):
            result = analyze_url(target)
    except (ValueError, RuntimeError, requests.RequestException) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    total, category = summary_score(result.scores)
    color = _SUMMARY_COLORS[category]
    console.print(f"[{color}]{score_label(category.value)}[/{color}] ({total}/100) - {escape(target)}")

    if category in (ScoreCategory.NEEDS_WORK, ScoreCategory.MISSING):
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Meta Tag Checker[/bold] v{VERSION}")
    console.print("[dim]SEO and social meta tag analyzer[/dim]")


if __name__ == "__main__":
    app()
