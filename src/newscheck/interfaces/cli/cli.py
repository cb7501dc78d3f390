"""Command-line interface for NewsCheck credibility analysis."""

import asyncio
import json
import os
import sys
from typing import List, Optional

# Set UTF-8 encoding for Windows compatibility
if sys.platform == "win32":
    os.environ["PYTHONIOENCODING"] = "utf-8"

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...application.analyzer import AnalysisService, create_analysis_service
from ...config.logging import configure_logging
from ...config.settings import get_settings
from ...domain.models import AnalysisResult, Verdict
from ...utils.sanitization import looks_like_url, sanitize_input

console = Console(force_terminal=True, legacy_windows=False)

DEMO_CASES = [
    (
        "Reliable News",
        "The World Health Organization announced today that vaccination rates have "
        "increased by 15% globally compared to last year, according to their annual "
        "health report.",
    ),
    (
        "Suspicious Content",
        "SHOCKING! Scientists don't want you to know this ONE WEIRD TRICK that will "
        "change everything! Doctors HATE this! Click now before it's banned forever!",
    ),
    (
        "Mixed Content",
        "Local weather reports indicate a chance of rain tomorrow. However, some "
        "conspiracy theorists claim this is part of a government weather control program.",
    ),
]


def _get_verdict_style(verdict: Verdict) -> tuple[str, str]:
    """Get color and icon for verdict.

    Args:
        verdict: The verdict enum value.

    Returns:
        Tuple of (color, icon/symbol).
    """
    styles = {
        Verdict.TRUE: ("green", "[OK]"),
        Verdict.MIXED: ("yellow", "[~]"),
        Verdict.FALSE: ("red", "[X]"),
        Verdict.UNVERIFIED: ("dim white", "[?]"),
    }
    return styles.get(verdict, ("white", "[?]"))


def _print_header(content: str, title: str = "Analyzing Content") -> None:
    header = Panel(
        Text(content, style="bold bright_white"),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(header)
    console.print()


def _print_error(message: str) -> None:
    console.print(
        Panel(
            f"[red]Error:[/red] {message}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        )
    )


def _print_result(result: AnalysisResult, json_output: bool = False) -> None:
    """Print analysis result to console.

    Args:
        result: AnalysisResult to print.
        json_output: If True, output as JSON. Otherwise, print formatted text.
    """
    if json_output:
        console.print_json(json.dumps(result.model_dump(mode="json", by_alias=True)))
        return

    color, icon = _get_verdict_style(result.verdict)

    verdict_text = Text()
    verdict_text.append(f"{icon} ", style=f"bold {color}")
    verdict_text.append(result.verdict.value, style=f"bold {color}")
    verdict_text.append(f"   confidence {result.confidence}%", style="bright_white")
    verdict_text.append(
        "   credible" if result.is_credible else "   not credible", style=color
    )
    console.print(Panel(verdict_text, border_style=color, padding=(0, 2)))
    console.print()

    console.print(
        Panel(
            Text(result.reasoning),
            title="[bold]Reasoning[/bold]",
            border_style="blue",
            padding=(1, 2),
        )
    )
    console.print()

    if result.warnings:
        warning_text = Text()
        for warning in result.warnings:
            warning_text.append(f"! {warning}\n", style="yellow")
        console.print(
            Panel(warning_text, title="[bold]Warnings[/bold]", border_style="yellow")
        )
        console.print()

    detail = result.detailed_analysis
    detail_table = Table(
        title="[bold]Detailed Analysis[/bold]",
        show_header=True,
        header_style="bold magenta",
        border_style="magenta",
        padding=(0, 1),
    )
    detail_table.add_column("Metric", style="bright_white")
    detail_table.add_column("Score", style="bright_cyan", justify="right")
    detail_table.add_row("Factual Accuracy", f"{detail.factual_accuracy}%")
    detail_table.add_row("Source Credibility", f"{detail.source_credibility}%")
    detail_table.add_row("Emotional Manipulation", f"{detail.emotional_manipulation}%")
    detail_table.add_row("Logical Consistency", f"{detail.logical_consistency}%")
    detail_table.add_row("Bias Level", f"{detail.bias_level}%")
    console.print(detail_table)
    console.print()

    if result.sources:
        console.print("[bold]Recommended sources:[/bold] " + ", ".join(result.sources))
    if result.categories:
        console.print("[bold]Categories:[/bold] " + ", ".join(result.categories))

    if result.is_heuristic:
        console.print(
            f"[dim]AI service unavailable ({result.fallback_reason}); "
            "used pattern-based analysis.[/dim]"
        )
    else:
        console.print("[dim]Analyzed by the remote AI model.[/dim]")


async def _analyze(
    content: str,
    as_url: bool = False,
    json_output: bool = False,
    service: Optional[AnalysisService] = None,
) -> int:
    """Analyze text or a URL and print the result.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    service = service or create_analysis_service()

    if not json_output:
        _print_header(content, "Analyzing URL" if as_url else "Analyzing Content")
        with console.status("[cyan]Analyzing...[/cyan]", spinner="dots"):
            if as_url:
                result = await service.analyze_url(content)
            else:
                result = await service.analyze_content(content)
    elif as_url:
        result = await service.analyze_url(content)
    else:
        result = await service.analyze_content(content)

    _print_result(result, json_output=json_output)
    return 0


async def _run_demo(service: Optional[AnalysisService] = None) -> int:
    """Analyze the three built-in sample texts."""
    service = service or create_analysis_service()
    for title, content in DEMO_CASES:
        console.rule(f"[bold bright_green]{title}[/bold bright_green]")
        await _analyze(content, service=service)
        console.print()
    return 0


def _print_help() -> None:
    help_content = Text()
    help_content.append("NewsCheck CLI", style="bold cyan")
    help_content.append(" - AI-Powered Credibility Analysis\n\n", style="white")

    help_content.append("Usage:\n", style="bold")
    for usage, description in (
        ("newscheck <text>", "Analyze a piece of text"),
        ("newscheck --url <url>", "Analyze a URL and its domain"),
        ("newscheck --json [--url] <input>", "Output results as JSON"),
        ("newscheck --demo", "Analyze three sample texts"),
        ("newscheck --verbose ...", "Enable debug logging"),
    ):
        help_content.append(f"  {usage:<36}", style="cyan")
        help_content.append(f"{description}\n", style="dim")

    help_content.append("\nEnvironment Variables:\n", style="bold")
    help_content.append("  GEMINI_API_KEY", style="yellow")
    help_content.append("        Gemini API key (heuristic analysis without it)\n", style="dim")
    help_content.append("  HTTP_TIMEOUT_SECONDS", style="yellow")
    help_content.append("  Timeout per remote request (default 5)\n", style="dim")

    console.print(
        Panel(
            help_content,
            title="[bold bright_blue]Help[/bold bright_blue]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Usage:
        newscheck <text>            # Analyze text
        newscheck --url <url>       # Analyze a URL
        newscheck --json <text>     # Output as JSON
        newscheck --demo            # Analyze sample texts
        newscheck --help            # Show help

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in ("-h", "--help"):
        _print_help()
        return 0

    json_output = False
    as_url = False
    verbose = False
    demo = False
    while args and args[0].startswith("--"):
        flag = args.pop(0)
        if flag == "--json":
            json_output = True
        elif flag == "--url":
            as_url = True
        elif flag == "--verbose":
            verbose = True
        elif flag == "--demo":
            demo = True
        else:
            _print_error(f"Unknown option {flag}")
            return 1

    configure_logging("DEBUG" if verbose else get_settings().log_level)

    if demo:
        return asyncio.run(_run_demo())

    content = sanitize_input(" ".join(args))
    if not content:
        _print_error("Content to analyze cannot be empty")
        return 1

    if as_url and not looks_like_url(content):
        _print_error(f"Not a valid URL: {content}")
        return 1

    return asyncio.run(_analyze(content, as_url=as_url, json_output=json_output))


if __name__ == "__main__":
    sys.exit(main())
