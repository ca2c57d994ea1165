"""Terminal report for Claude Code Wrapped.

Renders a WrappedSummary with Rich:
- print_report(): The full year-in-review report
- print_loading(), print_error(), print_success(): One-line status messages

Every function takes the display language explicitly and an optional
Console, so output can be captured in tests.
"""

from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from sparklines import sparklines

from .constants import (
    BAR_WIDTH,
    CORAL,
    DATE_FORMAT,
    HOUR_BUCKETS,
    PROJECT_NAME_DISPLAY_LIMIT,
    RULE_WIDTH,
    TOP_PROJECTS_LIMIT,
)
from .i18n import level_label, title_label, tr
from .models import ProjectStats, WrappedSummary
from .utils import (
    format_duration,
    format_number,
    pad_number,
    peak_index,
    round_half_up,
    truncate,
)

BANNER = r"""
   ____ _                 _         ____          _
  / ___| | __ _ _   _  __| | ___   / ___|___   __| | ___
 | |   | |/ _` | | | |/ _` |/ _ \ | |   / _ \ / _` |/ _ \
 | |___| | (_| | |_| | (_| |  __/ | |__| (_) | (_| |  __/
  \____|_|\__,_|\__,_|\__,_|\___|  \____\___/ \__,_|\___|
"""

_default_console = Console()


def safe_sparkline(values: List[int]) -> Optional[str]:
    """Generate a sparkline string, returning None on failure.

    Wraps the sparklines library with error handling for edge cases
    like empty lists, single values, or all-zero data.
    """
    if not values or len(values) < 2 or not any(values):
        return None
    try:
        result = sparklines(values)
        return result[0] if result else None
    except (ValueError, TypeError, ZeroDivisionError):
        return None


def bucket_hours(hourly_distribution: dict, lang: str) -> List[Tuple[str, int]]:
    """Sum the hourly distribution into the four labelled time-of-day buckets."""
    return [
        (tr(lang, key), sum(hourly_distribution.get(h, 0) for h in hours))
        for key, hours in HOUR_BUCKETS
    ]


def _print_banner(console: Console, summary: WrappedSummary, lang: str) -> None:
    console.print(BANNER, style=f"bold {CORAL}", highlight=False)
    console.print(
        f"            WRAPPED // EDITION.{summary.year} // SYNC.SUCCESS",
        style=CORAL,
        highlight=False,
    )
    first = summary.first_session_date
    since = first.strftime(DATE_FORMAT) if first else "-"
    console.print(f"        {tr(lang, 'neural_link_established')}: {since}", style="dim")


def _print_overview(console: Console, summary: WrappedSummary, lang: str) -> None:
    table = Table(box=box.SQUARE, border_style="grey50", show_header=True, header_style="dim")
    for key in ("total_sessions", "active_days", "peak_messages", "tool_calls"):
        table.add_column(tr(lang, key).upper(), justify="left", min_width=18)

    table.add_row(
        *(
            f"[bold white]{pad_number(value)}[/bold white]"
            for value in (
                summary.total_sessions,
                summary.active_days,
                summary.peak_daily_messages,
                summary.total_tool_calls,
            )
        )
    )
    console.print(table)


def _print_impact(console: Console, summary: WrappedSummary, lang: str) -> None:
    title = title_label(lang, summary.user_title).upper()
    level = level_label(lang, summary.user_level)
    body = (
        f"[bold {CORAL}]{tr(lang, 'identified')}: {escape(title)}[/]\n\n"
        f"[bold underline white]{summary.total_messages:,}[/] "
        f"[dim]{tr(lang, 'total_messages')}[/dim]\n\n"
        f"[dim]{tr(lang, 'collaboration_density')}[/dim]\n"
        f"[dim]{tr(lang, 'cumulative_intelligence')}:[/dim] "
        f"[white]{format_number(summary.total_tokens)}[/white] [dim]{tr(lang, 'tokens')}[/dim]\n"
        f"[dim]{tr(lang, 'primary_model')}:[/dim] [white]{escape(summary.primary_model)}[/white]\n\n"
        f"[black on {CORAL}] {tr(lang, 'level')}: {escape(level)} [/]"
    )
    console.print(Panel(body, box=box.DOUBLE, border_style="grey50", padding=1))


def _print_monthly(console: Console, summary: WrappedSummary, lang: str) -> None:
    sparkline = safe_sparkline(list(summary.monthly_activity))
    if sparkline:
        console.print(f"[dim]{tr(lang, 'monthly_activity')}[/dim]  [{CORAL}]{sparkline}[/]")


def _print_activity_distribution(
    console: Console, summary: WrappedSummary, lang: str
) -> None:
    rule = "─" * RULE_WIDTH
    console.print(rule, style="dim")
    header = tr(lang, "activity_distribution")
    zone = tr(lang, "time_zone")
    gap = max(1, RULE_WIDTH - len(header) - len(zone))
    console.print(f"[grey50]{header}[/grey50]{' ' * gap}[dim]{zone}[/dim]")
    console.print(rule, style="dim")

    buckets = bucket_hours(summary.hourly_distribution, lang)
    counts = [count for _, count in buckets]
    max_count = max(counts)
    peak = peak_index(counts)

    for i, (label, count) in enumerate(buckets):
        is_peak = i == peak
        bar_length = round_half_up(count / max_count * BAR_WIDTH) if max_count > 0 else 0
        fill = "█" if is_peak else "▓"
        bar = f"[{CORAL}]{fill * bar_length}[/][dim]{'░' * (BAR_WIDTH - bar_length)}[/dim]"
        if is_peak:
            console.print(f"  [{CORAL}]{label:<12}[/]  {bar}  [bold {CORAL}]{count:>4}[/]")
        else:
            console.print(f"  [dim]{label:<12}[/dim]  {bar}  [dim]{count:>4}[/dim]")


def _print_projects(console: Console, summary: WrappedSummary, lang: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold white]{tr(lang, 'active_registry', year=summary.year).upper()}[/]",
            box=box.DOUBLE,
            border_style="grey50",
            expand=False,
            padding=(0, 2),
        )
    )

    projects: List[ProjectStats] = summary.top_projects[:TOP_PROJECTS_LIMIT]
    table = Table(box=box.SIMPLE_HEAD, show_header=False, show_edge=False, padding=(0, 1))
    table.add_column(min_width=30)
    table.add_column(style="dim", min_width=4)
    table.add_column(min_width=30)
    table.add_column(style="dim", min_width=4)

    for i in range(0, len(projects), 2):
        row = []
        for offset in (0, 1):
            if i + offset < len(projects):
                name = truncate(projects[i + offset].name, PROJECT_NAME_DISPLAY_LIMIT)
                row.extend([f"[white]{escape(name)}[/white]", pad_number(i + offset + 1, 2)])
            else:
                row.extend(["", ""])
        table.add_row(*row)

    if projects:
        console.print(table)
    console.print(f"  [dim]{tr(lang, 'total_projects')}: {summary.total_projects}[/dim]")


def _print_longest_session(console: Console, summary: WrappedSummary, lang: str) -> None:
    session = summary.longest_session
    if not session:
        return
    text = tr(
        lang,
        "marathon_session",
        duration=format_duration(session.duration),
        messages=f"{session.message_count:,}",
    )
    console.print()
    console.print(
        Panel(
            f'[italic grey50]"{text}\n{tr(lang, "system_recognizes")}"[/]',
            box=box.ROUNDED,
            border_style=CORAL,
            padding=1,
        )
    )


def _print_footer(console: Console, summary: WrappedSummary, lang: str) -> None:
    console.print()
    console.print(
        f"[dim]{tr(lang, 'sys_ref', year=summary.year)}[/dim]"
        f"{' ' * 8}[{CORAL}]{tr(lang, 'terminal_ready')}[/]"
        "[dim] (C) CLAUDE-CODE-WRAPPED[/dim]"
    )


def print_report(
    summary: WrappedSummary, lang: str = "en", console: Optional[Console] = None
) -> None:
    """Print the full year-in-review report to the terminal.

    Sections, top to bottom: banner, overview counters, impact panel,
    monthly sparkline, time-of-day distribution, top projects, longest
    session and footer.

    Args:
        summary: Summary to render
        lang: Display language ("en" or "zh")
        console: Console to print to (default: a stdout Console)
    """
    console = console or _default_console

    _print_banner(console, summary, lang)
    console.print()
    _print_overview(console, summary, lang)
    console.print()
    _print_impact(console, summary, lang)
    console.print()
    _print_monthly(console, summary, lang)
    _print_activity_distribution(console, summary, lang)
    _print_projects(console, summary, lang)
    _print_longest_session(console, summary, lang)
    _print_footer(console, summary, lang)


def print_loading(message: str, console: Optional[Console] = None) -> None:
    (console or _default_console).print(f"[dim]\\[[{CORAL}]*[/]] {escape(message)}[/dim]")


def print_error(message: str, console: Optional[Console] = None) -> None:
    (console or _default_console).print(f"[red]\\[!] {escape(message)}[/red]")


def print_success(message: str, console: Optional[Console] = None) -> None:
    (console or _default_console).print(f"[green]\\[✓] {escape(message)}[/green]")
