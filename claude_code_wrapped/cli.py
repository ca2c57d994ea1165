"""CLI interface for Claude Code Wrapped.

This module provides the ``claude-code-wrapped`` command. It uses Click for
argument parsing and Rich for terminal formatting.

Steps, in order:
    1. Pick the display language (--lang or LANG-style environment)
    2. Validate that Claude Code data exists (exit 1 if not)
    3. Analyze the data for the reporting year
    4. Print JSON and stop (--json), or:
    5. Print the terminal report (unless --no-tui)
    6. Write and open the HTML report (unless --no-html)
    7. Export a PNG screenshot (--export-png)
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .analyzer import analyze_data
from .constants import CORAL
from .export import check_browser_available, export_to_png
from .html import generate_html
from .i18n import SUPPORTED_LANGUAGES, resolve_language, tr
from .logger import log, setup_logger
from .models import WrappedSummary
from .paths import validate_claude_data
from .tui import print_error, print_loading, print_report, print_success

__all__ = ["main"]

console = Console()


@click.command()
@click.version_option(version=__version__, prog_name="claude-code-wrapped")
@click.option("--tui/--no-tui", default=True, help="Print the report in the terminal")
@click.option("--html/--no-html", default=True, help="Generate and open the HTML report")
@click.option("--export-png", is_flag=True, help="Export the report as a PNG image")
@click.option("--json", "as_json", is_flag=True, help="Output stats as JSON and exit")
@click.option(
    "--lang",
    "-l",
    type=click.Choice(SUPPORTED_LANGUAGES),
    default=None,
    help="Language: en (English) or zh (Chinese). Detected from LANG if omitted",
)
@click.option("--year", "-y", type=int, default=None, help="Reporting year (default: current year)")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Claude Code data directory (default: ~/.claude)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
def main(
    tui: bool,
    html: bool,
    export_png: bool,
    as_json: bool,
    lang: Optional[str],
    year: Optional[int],
    data_dir: Optional[Path],
    verbose: bool,
) -> None:
    """Generate your Claude Code year-in-review wrapped report.

    Reads local Claude Code usage data and presents it as a terminal
    report, an HTML dashboard, a PNG image, or JSON.
    """
    setup_logger("DEBUG" if verbose else "WARNING")
    lang = resolve_language(lang)

    try:
        validation = validate_claude_data(data_dir)
        if not validation.valid:
            for error in validation.errors:
                log.debug(error)
            print_error(tr(lang, "data_not_found"), console)
            console.print()
            console.print(f"[dim]{tr(lang, 'expected_location')}[/dim] {validation.paths.root}")
            console.print()
            console.print(f"[dim]{tr(lang, 'install_hint')}[/dim]")
            sys.exit(1)

        if as_json:
            summary = analyze_data(validation.paths, year=year)
            click.echo(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
            return

        with console.status(tr(lang, "analyzing")):
            summary = analyze_data(validation.paths, year=year)
        print_success(tr(lang, "analysis_complete"), console)
        console.print()

        if tui:
            print_report(summary, lang, console)

        if html:
            with console.status(tr(lang, "generating_html")):
                html_path = generate_html(summary, lang)
            print_success(tr(lang, "html_generated"), console)
            console.print()
            print_loading(tr(lang, "opening_browser"), console)
            click.launch(str(html_path))
            print_success(f"{tr(lang, 'report_saved')} {html_path}", console)

        if export_png:
            console.print()
            _export_png(summary, lang)

        console.print()
        console.print(f"[{CORAL}]{tr(lang, 'thank_you', year=summary.year)}[/]")
    except Exception as e:
        log.opt(exception=e).debug("Unhandled error")
        print_error(tr(lang, "error", message=str(e)), console)
        sys.exit(1)


def _export_png(summary: WrappedSummary, lang: str) -> None:
    """Write a fresh HTML report and screenshot it, if a browser is available."""
    with console.status(tr(lang, "checking_browser")):
        available = check_browser_available()

    if not available:
        print_error(tr(lang, "browser_not_available"), console)
        console.print(f"[dim]{tr(lang, 'export_hint')}[/dim]")
        return

    with console.status(tr(lang, "generating_png")):
        html_path = generate_html(summary, lang)
        png_path = export_to_png(html_path, summary.year)
    print_success(tr(lang, "png_exported"), console)
    print_success(f"{tr(lang, 'png_saved')} {png_path}", console)


if __name__ == "__main__":
    main()
