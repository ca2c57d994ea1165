"""Data location functions for Claude Code Wrapped.

This module provides functions to locate Claude Code's local data:
- get_claude_dir(): Get the Claude Code data directory for this OS
- get_data_paths(): Get the paths of all files the report reads
- has_claude_data(): Quick check that the stats cache exists
- validate_claude_data(): Check the data root and list what is missing
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional


@dataclass
class DataPaths:
    """Locations of Claude Code data files under one data root."""

    root: Path
    stats_cache: Path
    history: Path
    projects: Path
    telemetry: Path
    todos: Path


@dataclass
class DataValidation:
    """Result of validating a data root.

    Attributes:
        valid: True when both the root and the stats cache exist
        paths: The paths that were checked
        errors: Human-readable description of each missing item
    """

    valid: bool
    paths: DataPaths
    errors: List[str] = field(default_factory=list)


def _windows_candidates(home: Path, environ: Mapping[str, str]) -> List[Path]:
    candidates = []
    app_data = environ.get("APPDATA")
    if app_data:
        candidates.append(Path(app_data) / "claude")
        candidates.append(Path(app_data) / "Claude")
    candidates.append(home / ".claude")
    candidates.append(home / "AppData" / "Roaming" / "claude")
    candidates.append(home / "AppData" / "Local" / "claude")
    return candidates


def get_claude_dir(
    platform: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """Get the Claude Code data directory.

    macOS and Linux use ~/.claude. On Windows several locations are tried
    in order and the first one that exists wins, falling back to ~/.claude.

    Args:
        platform: Platform string (default: sys.platform)
        environ: Environment mapping (default: os.environ)

    Returns:
        Path to the data directory
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ
    home = Path.home()

    if platform == "win32":
        for candidate in _windows_candidates(home, environ):
            if candidate.exists():
                return candidate

    return home / ".claude"


def get_data_paths(root: Optional[Path] = None) -> DataPaths:
    """Get all relevant Claude Code data paths.

    Args:
        root: Data root to use instead of the OS default

    Example:
        >>> paths = get_data_paths(Path("/tmp/claude"))
        >>> paths.stats_cache
        PosixPath('/tmp/claude/stats-cache.json')
    """
    root = Path(root) if root is not None else get_claude_dir()
    return DataPaths(
        root=root,
        stats_cache=root / "stats-cache.json",
        history=root / "history.jsonl",
        projects=root / "projects",
        telemetry=root / "telemetry",
        todos=root / "todos",
    )


def has_claude_data(root: Optional[Path] = None) -> bool:
    """Check whether the data root and its stats cache exist."""
    paths = get_data_paths(root)
    return paths.root.exists() and paths.stats_cache.exists()


def validate_claude_data(root: Optional[Path] = None) -> DataValidation:
    """Validate the data directory and report what is missing."""
    paths = get_data_paths(root)
    errors = []

    if not paths.root.exists():
        errors.append(f"Claude data directory not found: {paths.root}")
    if not paths.stats_cache.exists():
        errors.append(f"Stats cache file not found: {paths.stats_cache}")

    return DataValidation(valid=not errors, paths=paths, errors=errors)
