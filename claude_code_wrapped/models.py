"""Data models for Claude Code Wrapped.

This module contains all dataclasses used throughout the package:
- DailyActivity, DailyModelTokens, ModelUsage, LongestSession: Raw records
  from stats-cache.json
- StatsCache: The parsed stats-cache.json document
- HistoryEntry: One line of history.jsonl
- ProjectStats: Per-project counts from the projects directory
- WrappedSummary: The aggregated year-in-review record
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .constants import (
    DEFAULT_LEVEL,
    DEFAULT_PEAK_HOUR,
    DEFAULT_PRIMARY_MODEL,
    DEFAULT_TITLE,
)


def _int(value: Any) -> int:
    """Coerce a JSON number (or missing value) to int.

    Raises ValueError for infinity and NaN.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"non-finite number: {value}")
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _float(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


@dataclass
class DailyActivity:
    """Activity counters for one calendar day.

    Attributes:
        date: Calendar day as "YYYY-MM-DD"
        message_count: Messages exchanged that day
        session_count: Sessions started that day
        tool_call_count: Tool invocations that day
    """

    date: str
    message_count: int = 0
    session_count: int = 0
    tool_call_count: int = 0

    @classmethod
    def from_json(cls, data: dict) -> "DailyActivity":
        return cls(
            date=str(data.get("date", "")),
            message_count=_int(data.get("messageCount")),
            session_count=_int(data.get("sessionCount")),
            tool_call_count=_int(data.get("toolCallCount")),
        )

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "messageCount": self.message_count,
            "sessionCount": self.session_count,
            "toolCallCount": self.tool_call_count,
        }


@dataclass
class DailyModelTokens:
    """Tokens per raw model identifier for one calendar day."""

    date: str
    tokens_by_model: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: dict) -> "DailyModelTokens":
        tokens = data.get("tokensByModel") or {}
        return cls(
            date=str(data.get("date", "")),
            tokens_by_model={str(k): _int(v) for k, v in tokens.items()}
            if isinstance(tokens, dict)
            else {},
        )


@dataclass
class ModelUsage:
    """Cumulative token usage for one raw model identifier.

    Attributes:
        input_tokens: Fresh prompt tokens
        output_tokens: Response tokens
        cache_read_input_tokens: Tokens served from the prompt cache
        cache_creation_input_tokens: Tokens written to the prompt cache
        web_search_requests: Web search tool requests
        cost_usd: Cost reported by the tool itself (often 0)
        context_window: Context window size of the model
    """

    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_input_tokens: int = 0
    cache_creation_input_tokens: int = 0
    web_search_requests: int = 0
    cost_usd: float = 0.0
    context_window: int = 0

    @property
    def total_tokens(self) -> int:
        """Total tokens including both cache categories."""
        return (
            self.input_tokens
            + self.output_tokens
            + self.cache_read_input_tokens
            + self.cache_creation_input_tokens
        )

    @classmethod
    def from_json(cls, data: dict) -> "ModelUsage":
        return cls(
            input_tokens=_int(data.get("inputTokens")),
            output_tokens=_int(data.get("outputTokens")),
            cache_read_input_tokens=_int(data.get("cacheReadInputTokens")),
            cache_creation_input_tokens=_int(data.get("cacheCreationInputTokens")),
            web_search_requests=_int(data.get("webSearchRequests")),
            cost_usd=_float(data.get("costUSD")),
            context_window=_int(data.get("contextWindow")),
        )


@dataclass
class LongestSession:
    """The single longest session recorded in the stats cache.

    Attributes:
        session_id: Session identifier
        duration: Duration in milliseconds
        message_count: Messages in the session
        timestamp: When the session took place (ISO string as stored)
    """

    session_id: str = ""
    duration: int = 0
    message_count: int = 0
    timestamp: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "LongestSession":
        return cls(
            session_id=str(data.get("sessionId", "")),
            duration=_int(data.get("duration")),
            message_count=_int(data.get("messageCount")),
            timestamp=str(data.get("timestamp", "")),
        )

    def to_dict(self) -> dict:
        return {
            "sessionId": self.session_id,
            "duration": self.duration,
            "messageCount": self.message_count,
            "timestamp": self.timestamp,
        }


@dataclass
class StatsCache:
    """Parsed contents of stats-cache.json.

    Example:
        >>> cache = StatsCache.from_dict({"dailyActivity": [], "modelUsage": {}})
        >>> cache.total_messages
        0
    """

    version: int = 0
    last_computed_date: str = ""
    daily_activity: List[DailyActivity] = field(default_factory=list)
    daily_model_tokens: List[DailyModelTokens] = field(default_factory=list)
    model_usage: Dict[str, ModelUsage] = field(default_factory=dict)
    total_sessions: int = 0
    total_messages: int = 0
    longest_session: Optional[LongestSession] = None
    first_session_date: str = ""
    hour_counts: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "StatsCache":
        """Build a StatsCache from the camelCase JSON document.

        Raises:
            TypeError: If ``data`` is not a JSON object
        """
        if not isinstance(data, dict):
            raise TypeError(f"stats cache must be a JSON object, got {type(data).__name__}")

        daily_activity = [
            DailyActivity.from_json(d)
            for d in data.get("dailyActivity") or []
            if isinstance(d, dict)
        ]
        daily_model_tokens = [
            DailyModelTokens.from_json(d)
            for d in data.get("dailyModelTokens") or []
            if isinstance(d, dict)
        ]
        raw_usage = data.get("modelUsage")
        if not isinstance(raw_usage, dict):
            raw_usage = {}
        model_usage = {
            str(model): ModelUsage.from_json(usage)
            for model, usage in raw_usage.items()
            if isinstance(usage, dict)
        }
        longest = data.get("longestSession")
        raw_hours = data.get("hourCounts")
        if not isinstance(raw_hours, dict):
            raw_hours = {}

        return cls(
            version=_int(data.get("version")),
            last_computed_date=str(data.get("lastComputedDate", "")),
            daily_activity=daily_activity,
            daily_model_tokens=daily_model_tokens,
            model_usage=model_usage,
            total_sessions=_int(data.get("totalSessions")),
            total_messages=_int(data.get("totalMessages")),
            longest_session=LongestSession.from_json(longest)
            if isinstance(longest, dict)
            else None,
            first_session_date=str(data.get("firstSessionDate", "")),
            hour_counts={str(k): _int(v) for k, v in raw_hours.items()},
        )


@dataclass
class HistoryEntry:
    """One prompt from history.jsonl.

    Attributes:
        display: Prompt text as shown in the history
        pasted_contents: Attachments pasted with the prompt
        timestamp: Epoch milliseconds
        project: Working directory of the prompt
        session_id: Session the prompt belongs to
    """

    display: str = ""
    pasted_contents: Dict[str, Any] = field(default_factory=dict)
    timestamp: int = 0
    project: str = ""
    session_id: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "HistoryEntry":
        pasted = data.get("pastedContents")
        return cls(
            display=str(data.get("display", "")),
            pasted_contents=pasted if isinstance(pasted, dict) else {},
            timestamp=_int(data.get("timestamp")),
            project=str(data.get("project", "")),
            session_id=str(data.get("sessionId", "")),
        )

    @property
    def local_time(self) -> Optional[datetime]:
        """Local datetime of the prompt, or None when the timestamp is unusable."""
        if self.timestamp <= 0:
            return None
        try:
            return datetime.fromtimestamp(self.timestamp / 1000)
        except (OverflowError, OSError, ValueError):
            return None


@dataclass
class ProjectStats:
    """Session and message counts for one project directory.

    ``message_count`` is estimated from a sample of session files for
    projects with many sessions.

    Example:
        >>> ProjectStats(name="bar", path="/Users/foo/bar", session_count=3, message_count=42)
        ProjectStats(name='bar', path='/Users/foo/bar', session_count=3, message_count=42)
    """

    name: str
    path: str
    session_count: int = 0
    message_count: int = 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "sessionCount": self.session_count,
            "messageCount": self.message_count,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ProjectStats":
        return cls(
            name=d.get("name", ""),
            path=d.get("path", ""),
            session_count=d.get("sessionCount", 0),
            message_count=d.get("messageCount", 0),
        )


@dataclass(frozen=True)
class WrappedSummary:
    """Year-in-review statistics for one reporting year.

    Produced once per run by ``analyzer.build_summary`` and consumed by the
    terminal, HTML, PNG and JSON outputs. ``user_title`` and ``user_level``
    hold language-neutral keys; renderers translate them.
    """

    year: int

    # Overview
    total_sessions: int = 0
    total_messages: int = 0
    total_tool_calls: int = 0
    active_days: int = 0
    first_session_date: Optional[datetime] = None
    last_session_date: Optional[datetime] = None

    # Tokens
    total_tokens: int = 0
    tokens_by_model: Dict[str, int] = field(default_factory=dict)
    primary_model: str = DEFAULT_PRIMARY_MODEL

    # Time patterns
    hourly_distribution: Dict[int, int] = field(default_factory=dict)
    peak_hour: int = DEFAULT_PEAK_HOUR
    weekday_distribution: List[int] = field(default_factory=lambda: [0] * 7)
    monthly_activity: List[int] = field(default_factory=lambda: [0] * 12)
    peak_daily_messages: int = 0
    daily_activity: List[DailyActivity] = field(default_factory=list)

    # Sessions
    longest_session: Optional[LongestSession] = None
    avg_messages_per_session: int = 0
    avg_session_duration: int = 0

    # Projects
    projects: List[ProjectStats] = field(default_factory=list)
    top_projects: List[ProjectStats] = field(default_factory=list)
    total_projects: int = 0
    total_prompts: int = 0

    # Streaks
    longest_streak: int = 0
    current_streak: int = 0

    # Title and achievements
    user_title: str = DEFAULT_TITLE
    user_level: str = DEFAULT_LEVEL
    achievements: List[str] = field(default_factory=list)

    # Cost estimation (USD)
    estimated_cost: float = 0.0
    cost_by_model: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary (camelCase keys)."""
        return {
            "year": self.year,
            "totalSessions": self.total_sessions,
            "totalMessages": self.total_messages,
            "totalToolCalls": self.total_tool_calls,
            "activeDays": self.active_days,
            "firstSessionDate": self.first_session_date.isoformat()
            if self.first_session_date
            else None,
            "lastSessionDate": self.last_session_date.isoformat()
            if self.last_session_date
            else None,
            "totalTokens": self.total_tokens,
            "tokensByModel": dict(self.tokens_by_model),
            "primaryModel": self.primary_model,
            "hourlyDistribution": {str(h): c for h, c in self.hourly_distribution.items()},
            "peakHour": self.peak_hour,
            "weekdayDistribution": list(self.weekday_distribution),
            "monthlyActivity": list(self.monthly_activity),
            "peakDailyMessages": self.peak_daily_messages,
            "dailyActivity": [d.to_dict() for d in self.daily_activity],
            "longestSession": self.longest_session.to_dict()
            if self.longest_session
            else None,
            "avgMessagesPerSession": self.avg_messages_per_session,
            "avgSessionDuration": self.avg_session_duration,
            "projects": [p.to_dict() for p in self.projects],
            "topProjects": [p.to_dict() for p in self.top_projects],
            "totalProjects": self.total_projects,
            "totalPrompts": self.total_prompts,
            "longestStreak": self.longest_streak,
            "currentStreak": self.current_streak,
            "userTitle": self.user_title,
            "userLevel": self.user_level,
            "achievements": list(self.achievements),
            "estimatedCost": self.estimated_cost,
            "costByModel": dict(self.cost_by_model),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "WrappedSummary":
        """Create from a dictionary produced by ``to_dict``."""

        def _dt(value: Optional[str]) -> Optional[datetime]:
            return datetime.fromisoformat(value) if value else None

        longest = d.get("longestSession")
        return cls(
            year=d.get("year", 0),
            total_sessions=d.get("totalSessions", 0),
            total_messages=d.get("totalMessages", 0),
            total_tool_calls=d.get("totalToolCalls", 0),
            active_days=d.get("activeDays", 0),
            first_session_date=_dt(d.get("firstSessionDate")),
            last_session_date=_dt(d.get("lastSessionDate")),
            total_tokens=d.get("totalTokens", 0),
            tokens_by_model=dict(d.get("tokensByModel", {})),
            primary_model=d.get("primaryModel", DEFAULT_PRIMARY_MODEL),
            hourly_distribution={
                int(h): c for h, c in d.get("hourlyDistribution", {}).items()
            },
            peak_hour=d.get("peakHour", DEFAULT_PEAK_HOUR),
            weekday_distribution=list(d.get("weekdayDistribution", [0] * 7)),
            monthly_activity=list(d.get("monthlyActivity", [0] * 12)),
            peak_daily_messages=d.get("peakDailyMessages", 0),
            daily_activity=[DailyActivity.from_json(x) for x in d.get("dailyActivity", [])],
            longest_session=LongestSession.from_json(longest) if longest else None,
            avg_messages_per_session=d.get("avgMessagesPerSession", 0),
            avg_session_duration=d.get("avgSessionDuration", 0),
            projects=[ProjectStats.from_dict(p) for p in d.get("projects", [])],
            top_projects=[ProjectStats.from_dict(p) for p in d.get("topProjects", [])],
            total_projects=d.get("totalProjects", 0),
            total_prompts=d.get("totalPrompts", 0),
            longest_streak=d.get("longestStreak", 0),
            current_streak=d.get("currentStreak", 0),
            user_title=d.get("userTitle", DEFAULT_TITLE),
            user_level=d.get("userLevel", DEFAULT_LEVEL),
            achievements=list(d.get("achievements", [])),
            estimated_cost=d.get("estimatedCost", 0.0),
            cost_by_model=dict(d.get("costByModel", {})),
        )
