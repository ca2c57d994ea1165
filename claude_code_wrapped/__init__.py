"""Claude Code Wrapped - Your year with Claude Code, in review.

This package reads the local usage data Claude Code keeps in ~/.claude/
and turns it into a year-in-review report for the terminal, the browser,
a PNG image, or JSON.

Modules:
    models: Data classes for raw records and the WrappedSummary
    paths: Data directory discovery and validation
    collector: Readers for stats-cache.json, history.jsonl and projects/
    pricing: Model name normalization and cost estimation
    analyzer: Aggregation of raw data into a WrappedSummary
    i18n: English and Chinese strings
    tui: Terminal report
    html: HTML report
    export: PNG export (requires Playwright)
    cli: Command-line interface

Example:
    >>> from claude_code_wrapped import analyze_data
    >>> summary = analyze_data(year=2025)
    >>> print(f"{summary.total_messages} messages, {summary.longest_streak}-day streak")
"""

__version__ = "0.1.0"

# Re-export commonly used symbols for convenience
from .analyzer import analyze_data, build_summary
from .collector import get_project_stats, read_history, read_stats_cache
from .exceptions import ExportError, StatsCacheNotFoundError, WrappedError
from .models import (
    DailyActivity,
    HistoryEntry,
    LongestSession,
    ModelUsage,
    ProjectStats,
    StatsCache,
    WrappedSummary,
)
from .paths import DataPaths, get_claude_dir, get_data_paths, validate_claude_data
from .pricing import calculate_estimated_cost, normalize_model_name

__all__ = [
    # Version
    "__version__",
    # Data models
    "DailyActivity",
    "HistoryEntry",
    "LongestSession",
    "ModelUsage",
    "ProjectStats",
    "StatsCache",
    "WrappedSummary",
    # Paths
    "DataPaths",
    "get_claude_dir",
    "get_data_paths",
    "validate_claude_data",
    # Readers
    "read_stats_cache",
    "read_history",
    "get_project_stats",
    # Analysis
    "analyze_data",
    "build_summary",
    "normalize_model_name",
    "calculate_estimated_cost",
    # Errors
    "WrappedError",
    "StatsCacheNotFoundError",
    "ExportError",
]
