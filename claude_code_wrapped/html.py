"""HTML report for Claude Code Wrapped.

This module renders a WrappedSummary as a single self-contained HTML page:
- build_html(): Return the page as a string
- generate_html(): Write the page to a temp file and return its path

The dashboard element carries ``id="wrapped-content"`` so the PNG exporter
can crop to it. The page's own "Export PNG" button uses html2canvas and
works without Python.
"""

import json
import tempfile
import time
from datetime import date
from html import escape
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import (
    EXPORT_CONTENT_SELECTOR,
    HOUR_BUCKETS,
    HTML_FILE_PREFIX,
    HTML_TOP_MODELS,
    HTML_TOP_PROJECTS,
)
from .i18n import achievement_label, level_label, title_label, tr
from .logger import log
from .models import WrappedSummary
from .utils import format_cost, format_duration, format_number, peak_index, round_half_up

PROJECT_COLORS = ["var(--coral)", "var(--sage)", "var(--amber)", "var(--purple)"]
MODEL_COLORS = ["var(--coral)", "var(--sage)", "var(--amber)"]

STYLES = """
        :root {
            --cream: #FAF9F7;
            --warm-gray: #F5F4F2;
            --border: #E8E6E3;
            --text-primary: #1A1915;
            --text-secondary: #6B6966;
            --text-muted: #9C9A97;
            --coral: #D97757;
            --coral-light: #F5E6E0;
            --coral-soft: rgba(217, 119, 87, 0.1);
            --sage: #5B8A72;
            --sage-light: #E8F0EC;
            --amber: #C4963A;
            --amber-light: #FBF5E8;
            --purple: #8B7EC8;
            --purple-light: #F0EDF8;
        }
        * { box-sizing: border-box; }
        html, body { margin: 0; padding: 0; min-height: 100vh; }
        body {
            background-color: var(--cream);
            color: var(--text-primary);
            font-family: 'JetBrains Mono', monospace;
            line-height: 1.4;
            display: flex;
            flex-direction: column;
        }
        .landing-header {
            width: 100%;
            padding: 20px 48px;
            display: flex;
            justify-content: space-between;
            align-items: center;
            border-bottom: 1px solid var(--border);
        }
        .page-wrapper {
            flex: 1;
            padding: 60px 24px;
            display: flex;
            flex-direction: column;
            align-items: center;
            position: relative;
            overflow: hidden;
        }
        .dashboard {
            width: 100%;
            max-width: 1360px;
            padding: 32px 40px;
            background: white;
            display: flex;
            flex-direction: column;
            border-radius: 16px;
            box-shadow: 0 4px 24px rgba(0, 0, 0, 0.06);
            gap: 16px;
            position: relative;
            z-index: 10;
        }
        .bg-animation {
            position: absolute;
            inset: 0;
            z-index: 1;
            pointer-events: none;
        }
        .floating-shape {
            position: absolute;
            border-radius: 50%;
            opacity: 0.15;
            animation: float 20s ease-in-out infinite;
        }
        .shape-1 { width: 300px; height: 300px; top: 10%; left: -5%;
            background: linear-gradient(135deg, var(--coral), var(--amber)); }
        .shape-2 { width: 200px; height: 200px; top: 60%; right: -3%; animation-delay: -5s;
            background: linear-gradient(135deg, var(--sage), var(--purple)); }
        .shape-3 { width: 150px; height: 150px; bottom: 20%; left: 10%; animation-delay: -10s;
            background: linear-gradient(135deg, var(--purple), var(--coral)); }
        @keyframes float {
            0%, 100% { transform: translate(0, 0) rotate(0deg) scale(1); }
            25% { transform: translate(30px, -30px) rotate(5deg) scale(1.05); }
            50% { transform: translate(-20px, 20px) rotate(-5deg) scale(0.95); }
            75% { transform: translate(20px, 10px) rotate(3deg) scale(1.02); }
        }
        .tui-box {
            border: 1px solid var(--border);
            background: white;
            position: relative;
            border-radius: 4px;
            padding: 24px;
        }
        .tui-box::before {
            content: attr(data-title);
            position: absolute;
            top: -9px;
            left: 12px;
            background: white;
            padding: 0 8px;
            font-size: 11px;
            font-weight: 600;
            color: var(--text-muted);
            text-transform: uppercase;
            letter-spacing: 0.1em;
        }
        .stat-card {
            background: var(--warm-gray);
            border-radius: 8px;
            padding: 24px;
            text-align: center;
        }
        .stat-label {
            font-size: 11px;
            color: var(--text-muted);
            font-weight: 500;
            text-transform: uppercase;
            letter-spacing: 0.1em;
            margin-bottom: 8px;
        }
        .stat-value { font-size: 2.25rem; font-weight: 700; }
        .tag {
            display: inline-flex;
            align-items: center;
            padding: 4px 10px;
            border-radius: 4px;
            font-size: 10px;
            font-weight: 600;
            text-transform: uppercase;
            letter-spacing: 0.04em;
        }
        .tag-coral { background: var(--coral-light); color: var(--coral); }
        .tag-sage { background: var(--sage-light); color: var(--sage); }
        .activity-bar {
            height: 100%;
            background: var(--coral);
            border-radius: 3px;
            min-width: 4px;
        }
        .project-item {
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 10px 14px;
            border-radius: 6px;
        }
        .project-dot {
            width: 8px;
            height: 8px;
            border-radius: 50%;
            margin-right: 10px;
        }
        .cursor {
            display: inline-block;
            width: 10px;
            height: 18px;
            background: var(--coral);
            animation: blink 1s step-end infinite;
            margin-left: 4px;
            vertical-align: middle;
        }
        @keyframes blink {
            0%, 50% { opacity: 1; }
            51%, 100% { opacity: 0; }
        }
        .export-btn {
            padding: 10px 20px;
            background: var(--coral);
            color: white;
            border: none;
            border-radius: 8px;
            font-family: 'JetBrains Mono', monospace;
            font-size: 13px;
            font-weight: 600;
            cursor: pointer;
        }
        .export-btn:hover { background: #c56a4d; }
        .export-btn:disabled { opacity: 0.6; cursor: not-allowed; }
"""

LOGO = """\
╔═╗╦  ╔═╗╦ ╦╔╦╗╔═╗  ╔═╗╔═╗╔╦╗╔═╗
║  ║  ╠═╣║ ║ ║║║╣   ║  ║ ║ ║║║╣
╚═╝╩═╝╩ ╩╚═╝═╩╝╚═╝  ╚═╝╚═╝═╩╝╚═╝"""


def _stat_card(label: str, value: str, color: str) -> str:
    return f"""<div class="stat-card">
                    <div class="stat-label">{escape(label)}</div>
                    <div class="stat-value" style="color: var(--{color})">{value}</div>
                </div>"""


def build_hourly_html(summary: WrappedSummary, lang: str) -> str:
    """Four time-of-day bars, widths relative to the busiest bucket."""
    counts = [
        sum(summary.hourly_distribution.get(h, 0) for h in hours) for _, hours in HOUR_BUCKETS
    ]
    max_count = max(counts)
    peak = peak_index(counts)

    rows = []
    for i, ((key, _), count) in enumerate(zip(HOUR_BUCKETS, counts)):
        width = round_half_up(count / max_count * 100) if max_count > 0 else 0
        style = (
            "color: var(--coral); font-weight: 600;"
            if i == peak
            else "color: var(--text-muted);"
        )
        rows.append(
            f"""<div class="flex items-center gap-3">
                        <span class="w-28 text-xs" style="{style}">{escape(tr(lang, key))}</span>
                        <div class="flex-1 h-6 rounded overflow-hidden" style="background: var(--warm-gray)">
                            <div class="activity-bar" style="width: {width}%"></div>
                        </div>
                        <span class="w-12 text-right text-xs" style="{style}">{count}</span>
                    </div>"""
        )
    return "\n".join(rows)


def build_weekly_html(summary: WrappedSummary, lang: str) -> str:
    """Seven day-of-week columns, Monday first; weekends in amber."""
    counts = list(summary.weekday_distribution)
    labels = tr(lang, "weekdays").split(",")
    max_count = max(counts) if counts else 0
    peak = peak_index(counts) if counts else -1

    columns = []
    for i, (label, count) in enumerate(zip(labels, counts)):
        ratio = count / max_count if max_count > 0 else 0
        height = max(20, round_half_up(ratio * 100))
        is_peak = i == peak
        if is_peak:
            color = "var(--coral)"
        elif i >= 5:
            color = "var(--amber)"
        else:
            color = "var(--sage)"
        opacity = 1 if is_peak else round(ratio * 0.5 + 0.5, 2)
        label_style = (
            "color: var(--coral); font-weight: 600;" if is_peak else "color: var(--text-muted);"
        )
        columns.append(
            f"""<div class="flex-1 flex flex-col items-center gap-1 h-full">
                        <div class="w-full rounded-t flex-1 flex items-end">
                            <div class="w-full rounded-t" style="height: {height}%; background: {color}; opacity: {opacity}"></div>
                        </div>
                        <span class="text-xs" style="{label_style}">{escape(label)}</span>
                    </div>"""
        )
    return "\n".join(columns)


def build_projects_html(summary: WrappedSummary) -> str:
    """Top projects as colored rows; the first one is starred."""
    rows = []
    for idx, project in enumerate(summary.top_projects[:HTML_TOP_PROJECTS]):
        first = idx == 0
        background = "background: var(--coral-soft);" if first else ""
        star = '<span class="text-xs" style="color: var(--text-muted)">★</span>' if first else ""
        weight = " font-medium" if first else ""
        rows.append(
            f"""<div class="project-item" style="{background}" title="{escape(project.path)}">
                        <div class="flex items-center">
                            <div class="project-dot" style="background: {PROJECT_COLORS[idx]}"></div>
                            <span class="text-sm{weight}">{escape(project.name)}</span>
                        </div>
                        {star}
                    </div>"""
        )
    return "\n".join(rows)


def top_model_shares(summary: WrappedSummary) -> List[Tuple[str, int]]:
    """(display name, percent of all tokens) for the top models by tokens."""
    total = sum(summary.tokens_by_model.values())
    models = sorted(summary.tokens_by_model.items(), key=lambda kv: kv[1], reverse=True)
    return [
        (name, round_half_up(tokens / total * 100) if total > 0 else 0)
        for name, tokens in models[:HTML_TOP_MODELS]
    ]


def build_model_usage_html(summary: WrappedSummary) -> str:
    rows = []
    for idx, (name, percent) in enumerate(top_model_shares(summary)):
        short_name = name.replace("Claude ", "")
        rows.append(
            f"""<div class="flex items-center gap-2">
                        <span class="text-xs w-24" style="color: var(--text-muted)">{escape(short_name)}</span>
                        <div class="flex-1 h-4 rounded overflow-hidden" style="background: var(--warm-gray)">
                            <div class="h-full rounded" style="width: {percent}%; background: {MODEL_COLORS[idx]}"></div>
                        </div>
                        <span class="text-xs" style="color: var(--text-muted)">{percent}%</span>
                    </div>"""
        )
    return "\n".join(rows)


def build_achievements_html(summary: WrappedSummary, lang: str) -> str:
    items = []
    if summary.longest_session:
        duration = format_duration(summary.longest_session.duration)
        items.append(tr(lang, "marathon", duration=duration))
    items.extend(achievement_label(lang, tag) for tag in summary.achievements)
    if not items:
        items.append(title_label(lang, summary.user_title))

    return "\n".join(
        f"""<div class="flex items-center gap-2">
                        <span style="color: var(--amber)">★</span>
                        <span class="text-sm">{escape(item)}</span>
                    </div>"""
        for item in items
    )


def build_html(summary: WrappedSummary, lang: str = "en", today: Optional[date] = None) -> str:
    """Render the full HTML page for a summary.

    Args:
        summary: Summary to render
        lang: Display language ("en" or "zh")
        today: Date shown in the header tag (default: date.today())

    Returns:
        The HTML document as a string
    """
    today = today or date.today()
    year = summary.year
    title = escape(title_label(lang, summary.user_title))
    level = escape(level_label(lang, summary.user_level))
    content_id = EXPORT_CONTENT_SELECTOR.lstrip("#")

    overview = "\n                ".join(
        [
            _stat_card(tr(lang, "total_sessions"), f"{summary.total_sessions:,}", "coral"),
            _stat_card(tr(lang, "active_days"), str(summary.active_days), "sage"),
            _stat_card(tr(lang, "peak_messages"), f"{summary.peak_daily_messages:,}", "amber"),
            _stat_card(tr(lang, "tool_calls"), f"{summary.total_tool_calls:,}", "purple"),
            _stat_card(tr(lang, "total_tokens"), format_number(summary.total_tokens), "coral"),
            _stat_card(tr(lang, "projects"), str(summary.total_projects), "sage"),
        ]
    )

    return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Claude Code Wrapped {year}</title>
    <script src="https://cdn.tailwindcss.com"></script>
    <script src="https://html2canvas.hertzen.com/dist/html2canvas.min.js"></script>
    <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@300;400;500;600;700&display=swap" rel="stylesheet">
    <style>{STYLES}    </style>
</head>
<body>
    <header class="landing-header">
        <span class="text-sm font-semibold" style="color: var(--coral)">CLAUDE CODE WRAPPED</span>
        <button class="export-btn" onclick="exportImage()">{escape(tr(lang, "export_png"))}</button>
    </header>
    <div class="page-wrapper">
    <div class="bg-animation">
        <div class="floating-shape shape-1"></div>
        <div class="floating-shape shape-2"></div>
        <div class="floating-shape shape-3"></div>
    </div>
    <div class="dashboard" id="{content_id}">
        <header class="flex justify-between items-start mb-4">
            <div>
                <pre style="font-size: 20px; line-height: 1.2; color: var(--coral); margin: 0; font-weight: bold;">{LOGO}</pre>
                <p class="text-sm font-semibold tracking-wider mt-2" style="color: var(--text-muted)">WRAPPED {year}</p>
            </div>
            <div class="flex items-center gap-3">
                <span class="tag tag-coral">{today.isoformat()}</span>
                <span class="tag tag-sage">{level}</span>
            </div>
        </header>

        <div class="tui-box" data-title="{escape(tr(lang, "overview"))}">
            <div class="grid grid-cols-6 gap-5">
                {overview}
            </div>
        </div>

        <div class="grid grid-cols-12 gap-4">
            <div class="col-span-5 tui-box" data-title="{escape(tr(lang, "impact"))}">
                <div class="h-full flex flex-col justify-center">
                    <div class="flex items-center gap-2 mb-3">
                        <span class="tag tag-coral">{title}</span>
                        <span class="tag tag-sage">{level}</span>
                    </div>
                    <div class="text-7xl font-bold mb-2">{summary.total_messages:,}</div>
                    <div class="text-base" style="color: var(--text-secondary)">{escape(tr(lang, "messages_with_claude"))}</div>
                </div>
            </div>
            <div class="col-span-4 tui-box" data-title="{escape(tr(lang, "hourly_activity"))}">
                <div class="space-y-2 h-full flex flex-col justify-center">
                    {build_hourly_html(summary, lang)}
                </div>
            </div>
            <div class="col-span-3 tui-box" data-title="{escape(tr(lang, "weekly_pattern"))}">
                <div class="flex items-end gap-3 h-full">
                    {build_weekly_html(summary, lang)}
                </div>
            </div>
        </div>

        <div class="grid grid-cols-12 gap-4">
            <div class="col-span-3 tui-box" data-title="{escape(tr(lang, "projects"))}">
                <div class="space-y-2 h-full flex flex-col justify-center">
                    {build_projects_html(summary)}
                </div>
            </div>
            <div class="col-span-4 tui-box" data-title="{escape(tr(lang, "model_usage"))}">
                <div class="space-y-3 h-full flex flex-col justify-center">
                    <div class="flex items-center justify-between text-base">
                        <span style="color: var(--text-muted)">{escape(tr(lang, "primary"))}</span>
                        <span class="font-semibold">{escape(summary.primary_model)}</span>
                    </div>
                    {build_model_usage_html(summary)}
                </div>
            </div>
            <div class="col-span-2 tui-box flex flex-col" data-title="{escape(tr(lang, "cost_estimate"))}">
                <div class="space-y-3 flex-1 flex flex-col justify-center">
                    <div>
                        <span class="text-2xl font-bold" style="color: var(--coral)">${format_cost(summary.estimated_cost)}</span>
                        <span class="text-xs ml-1" style="color: var(--text-muted)">USD</span>
                    </div>
                    <div class="pt-2 border-t text-xs" style="border-color: var(--border); color: var(--text-muted)">
                        {escape(tr(lang, "based_on_api_pricing"))}
                    </div>
                </div>
            </div>
            <div class="col-span-3 tui-box flex flex-col" data-title="{escape(tr(lang, "achievements"))}">
                <div class="space-y-3 flex-1 flex flex-col justify-center">
                    {build_achievements_html(summary, lang)}
                </div>
            </div>
        </div>

        <footer class="flex justify-between items-center mt-6 text-xs" style="color: var(--text-muted)">
            <div class="flex items-center gap-2">
                <span style="color: var(--coral)">$</span>
                <span>claude-code --wrapped {year}</span>
                <span class="cursor"></span>
            </div>
            <span>{escape(tr(lang, "sys_ref", year=year))}</span>
        </footer>
    </div>
    </div>
    <script>
    async function exportImage() {{
        const btn = document.querySelector('.export-btn');
        const originalText = btn.innerHTML;
        btn.disabled = true;
        btn.innerHTML = {json.dumps(tr(lang, "exporting"))};
        try {{
            btn.style.display = 'none';
            const dashboard = document.getElementById('{content_id}');
            const canvas = await html2canvas(dashboard, {{
                scale: 2,
                useCORS: true,
                backgroundColor: '#FFFFFF',
                logging: false
            }});
            const link = document.createElement('a');
            link.download = 'claude-code-wrapped-{year}.png';
            link.href = canvas.toDataURL('image/png');
            link.click();
        }} catch (err) {{
            console.error('Export failed:', err);
            alert({json.dumps(tr(lang, "export_failed"))});
        }} finally {{
            btn.style.display = '';
            btn.disabled = false;
            btn.innerHTML = originalText;
        }}
    }}
    </script>
</body>
</html>
"""


def generate_html(
    summary: WrappedSummary, lang: str = "en", output_dir: Optional[Path] = None
) -> Path:
    """Write the HTML report and return its path.

    Args:
        summary: Summary to render
        lang: Display language
        output_dir: Directory to write into (default: the system temp dir)

    Returns:
        Path of the written ``claude-code-wrapped-<ms>.html`` file
    """
    output_dir = Path(output_dir) if output_dir else Path(tempfile.gettempdir())
    output_dir.mkdir(parents=True, exist_ok=True)
    file_path = output_dir / f"{HTML_FILE_PREFIX}-{int(time.time() * 1000)}.html"
    file_path.write_text(build_html(summary, lang), encoding="utf-8")
    log.debug("Wrote HTML report to {}", file_path)
    return file_path
