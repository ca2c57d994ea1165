"""Test configuration and fixtures for claude-code-wrapped."""

import json
from datetime import datetime
from pathlib import Path

import pytest

from claude_code_wrapped.models import (
    DailyActivity,
    LongestSession,
    ModelUsage,
    ProjectStats,
    StatsCache,
)


def sample_stats_cache_data():
    """Sample stats-cache.json contents spanning two years."""
    return {
        "version": 1,
        "lastComputedDate": "2025-03-05",
        "dailyActivity": [
            {"date": "2024-12-31", "messageCount": 500, "sessionCount": 5, "toolCallCount": 50},
            {"date": "2025-03-01", "messageCount": 100, "sessionCount": 2, "toolCallCount": 10},
            {"date": "2025-03-02", "messageCount": 200, "sessionCount": 3, "toolCallCount": 20},
            {"date": "2025-03-03", "messageCount": 300, "sessionCount": 4, "toolCallCount": 30},
        ],
        "dailyModelTokens": [
            {"date": "2025-03-01", "tokensByModel": {"claude-sonnet-4-5-20250929": 1000}},
        ],
        "modelUsage": {
            "claude-sonnet-4-5-20250929": {
                "inputTokens": 1_000_000,
                "outputTokens": 100_000,
                "cacheReadInputTokens": 2_000_000,
                "cacheCreationInputTokens": 0,
                "webSearchRequests": 0,
                "costUSD": 0,
                "contextWindow": 0,
            },
            "claude-opus-4-5-20251101": {
                "inputTokens": 10_000,
                "outputTokens": 5_000,
                "cacheReadInputTokens": 0,
                "cacheCreationInputTokens": 0,
            },
        },
        "totalSessions": 14,
        "totalMessages": 1100,
        "longestSession": {
            "sessionId": "abc-123",
            "duration": 2 * 60 * 60 * 1000 + 5 * 60 * 1000,
            "messageCount": 640,
            "timestamp": "2025-03-02T14:00:00.000Z",
        },
        "firstSessionDate": "2024-12-31T09:00:00.000Z",
        "hourCounts": {"9": 3, "14": 7, "22": 7},
    }


def sample_history_lines():
    """Sample history.jsonl lines, including malformed ones."""
    in_2025 = int(datetime(2025, 3, 2, 12, 0).timestamp() * 1000)
    in_2024 = int(datetime(2024, 6, 1, 12, 0).timestamp() * 1000)
    return [
        json.dumps({"display": "fix the tests", "pastedContents": {}, "timestamp": in_2025,
                    "project": "/Users/test/alpha", "sessionId": "s1"}),
        "",
        "{not valid json",
        json.dumps(["not", "an", "object"]),
        json.dumps({"display": "refactor", "timestamp": in_2025, "project": "/Users/test/beta"}),
        json.dumps({"display": "old prompt", "timestamp": in_2024, "project": "/Users/test/alpha"}),
    ]


def write_session_files(project_dir: Path, lines_per_file):
    """Create numbered .jsonl session files with the given line counts."""
    project_dir.mkdir(parents=True, exist_ok=True)
    for i, count in enumerate(lines_per_file):
        content = "".join(json.dumps({"n": n}) + "\n" for n in range(count))
        (project_dir / f"session-{i:02d}.jsonl").write_text(content, encoding="utf-8")


@pytest.fixture
def claude_dir(tmp_path):
    """A complete fake Claude Code data directory."""
    root = tmp_path / ".claude"
    root.mkdir()
    (root / "stats-cache.json").write_text(
        json.dumps(sample_stats_cache_data()), encoding="utf-8"
    )
    (root / "history.jsonl").write_text(
        "\n".join(sample_history_lines()) + "\n", encoding="utf-8"
    )

    projects = root / "projects"
    write_session_files(projects / "-Users-test-alpha", [3, 4])
    write_session_files(projects / "-Users-test-beta", [1, 1, 1])
    write_session_files(projects / "-Users-test-gamma", [2])
    (projects / ".hidden").mkdir()
    (projects / "stray.txt").write_text("not a project", encoding="utf-8")
    return root


@pytest.fixture
def stats_cache():
    """Parsed sample stats cache."""
    return StatsCache.from_dict(sample_stats_cache_data())


def _make_cache(days, model_usage=None, hour_counts=None, longest_session=None):
    return StatsCache(
        daily_activity=[
            DailyActivity(date=d, message_count=m, session_count=s, tool_call_count=t)
            for d, m, s, t in days
        ],
        model_usage=model_usage or {},
        hour_counts=hour_counts or {},
        longest_session=longest_session,
    )


@pytest.fixture
def make_cache():
    """Factory building a StatsCache from (date, messages, sessions, tools) tuples."""
    return _make_cache


@pytest.fixture
def write_sessions():
    """Factory creating numbered .jsonl session files with given line counts."""
    return write_session_files


@pytest.fixture
def sample_projects():
    return [
        ProjectStats(name="beta", path="/Users/test/beta", session_count=3, message_count=3),
        ProjectStats(name="alpha", path="/Users/test/alpha", session_count=2, message_count=7),
    ]


@pytest.fixture
def sample_longest_session():
    return LongestSession(session_id="abc", duration=3_600_000, message_count=600, timestamp="")


@pytest.fixture
def sonnet_usage():
    return {"claude-sonnet-4-5-20250929": ModelUsage(input_tokens=1_000_000, output_tokens=0)}


@pytest.fixture
def stats_cache_data():
    """Raw stats-cache.json dictionary."""
    return sample_stats_cache_data()
