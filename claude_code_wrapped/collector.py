"""Raw data readers for Claude Code Wrapped.

This module reads the three local data sources:
- read_stats_cache(): Parse stats-cache.json (None when missing or corrupt)
- read_history(): Parse history.jsonl, skipping malformed lines
- get_project_stats(): Scan the projects directory for per-project counts

Every reader except read_stats_cache degrades to an empty result rather
than raising; the analyzer decides whether a missing cache is fatal.
"""

import json
from pathlib import Path
from typing import List, Optional

from .constants import (
    PROJECT_SAMPLE_SIZE,
    SESSION_FILE_EXTENSION,
    UNKNOWN_PROJECT_NAME,
)
from .logger import log
from .models import DailyActivity, HistoryEntry, ProjectStats, StatsCache
from .paths import get_data_paths
from .utils import round_half_up


def read_stats_cache(path: Optional[Path] = None) -> Optional[StatsCache]:
    """Read and parse stats-cache.json.

    Args:
        path: File to read (default: the OS data root's stats-cache.json)

    Returns:
        Parsed StatsCache, or None if the file is missing or unparseable
    """
    path = path or get_data_paths().stats_cache
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return StatsCache.from_dict(data)
    except FileNotFoundError:
        log.debug("Stats cache not found: {}", path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        log.debug("Could not read stats cache {}: {}", path, e)
    except (TypeError, ValueError, OverflowError) as e:
        log.debug("Stats cache {} has an unexpected shape: {}", path, e)
    return None


def read_history(path: Optional[Path] = None) -> List[HistoryEntry]:
    """Read history.jsonl line by line.

    Undecodable bytes become U+FFFD. Blank lines, lines that are not JSON
    objects and entries with unusable field values are skipped
    individually; an OS error returns what was collected so far.

    Example:
        >>> entries = read_history(Path("~/.claude/history.jsonl").expanduser())
        >>> entries[0].display
        'fix the failing test'
    """
    path = path or get_data_paths().history
    entries: List[HistoryEntry] = []

    if not path.exists():
        log.debug("History log not found: {}", path)
        return entries

    skipped = 0
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                    if not isinstance(data, dict):
                        raise TypeError(f"expected an object, got {type(data).__name__}")
                    entries.append(HistoryEntry.from_json(data))
                except (json.JSONDecodeError, TypeError, ValueError):
                    skipped += 1
    except OSError as e:
        log.debug("Stopped reading history log {}: {}", path, e)

    if skipped:
        log.debug("Skipped {} malformed history lines", skipped)
    return entries


def extract_project_name(project_path: str) -> str:
    """Extract a readable project name (last path segment) from a path.

    Example:
        >>> extract_project_name("/Users/foo/myproject")
        'myproject'
        >>> extract_project_name("")
        'Unknown'
    """
    parts = [p for p in project_path.split("/") if p]
    return parts[-1] if parts else UNKNOWN_PROJECT_NAME


def decode_project_path(encoded_name: str) -> str:
    """Decode a slug-encoded project directory name into a path.

    Every hyphen is treated as a path separator, so folder names that
    themselves contain hyphens are split.

    Example:
        >>> decode_project_path("-Users-foo-myproject")
        '/Users/foo/myproject'
    """
    return encoded_name.replace("-", "/")


def _count_lines(file_path: Path) -> int:
    """Count non-blank lines in a session file."""
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return sum(1 for line in f if line.strip())


def estimate_message_count(session_files: List[Path]) -> int:
    """Estimate the number of messages across a project's session files.

    Reads at most PROJECT_SAMPLE_SIZE files. When there are more files than
    that, the sample average is extrapolated to the full set; otherwise the
    exact sampled sum is returned. Unreadable files count as zero lines.

    Example:
        With 10 session files whose first 5 hold 50 lines in total:
        round(50 / 5 * 10) == 100
    """
    sample = session_files[:PROJECT_SAMPLE_SIZE]
    message_count = 0

    for file_path in sample:
        try:
            message_count += _count_lines(file_path)
        except OSError as e:
            log.debug("Skipping unreadable session file {}: {}", file_path, e)

    if sample and len(session_files) > len(sample):
        avg_per_file = message_count / len(sample)
        message_count = round_half_up(avg_per_file * len(session_files))

    return message_count


def get_project_stats(projects_dir: Optional[Path] = None) -> List[ProjectStats]:
    """Scan the projects directory and count sessions per project.

    Hidden entries and plain files are ignored. Projects are returned
    sorted by session count, most sessions first; ties keep the
    directory-name order they were discovered in.

    Returns:
        List of ProjectStats, or an empty list if the directory is missing
        or cannot be read.
    """
    projects_dir = projects_dir or get_data_paths().projects
    projects: List[ProjectStats] = []

    if not projects_dir.exists():
        log.debug("Projects directory not found: {}", projects_dir)
        return projects

    try:
        for entry in sorted(projects_dir.iterdir(), key=lambda p: p.name):
            if entry.name.startswith("."):
                continue
            if not entry.is_dir():
                continue

            session_files = sorted(
                (
                    f
                    for f in entry.iterdir()
                    if f.name.endswith(SESSION_FILE_EXTENSION)
                ),
                key=lambda p: p.name,
            )
            decoded_path = decode_project_path(entry.name)

            projects.append(
                ProjectStats(
                    name=extract_project_name(decoded_path),
                    path=decoded_path,
                    session_count=len(session_files),
                    message_count=estimate_message_count(session_files),
                )
            )
    except OSError as e:
        log.debug("Could not scan projects directory {}: {}", projects_dir, e)
        return []

    projects.sort(key=lambda p: p.session_count, reverse=True)
    return projects


def filter_by_year(daily_activity: List[DailyActivity], year: int) -> List[DailyActivity]:
    """Keep only the days whose date string starts with the given year."""
    prefix = str(year)
    return [d for d in daily_activity if d.date.startswith(prefix)]
