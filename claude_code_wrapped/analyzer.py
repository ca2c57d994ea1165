"""Statistics analyzer for Claude Code Wrapped.

This module turns raw Claude Code data into a WrappedSummary:
- build_summary(): Aggregate a stats cache (plus projects and history)
- analyze_data(): Read all local sources and build the summary
- Various find_*/calculate_*/compute_* helpers for individual metrics

build_summary is a pure function of its arguments. The reporting year's
daily activity is selected once, up front, and every count, streak and
distribution below is derived from that filtered list.
"""

from datetime import date, datetime
from typing import (
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from .collector import filter_by_year, get_project_stats, read_history, read_stats_cache
from .constants import (
    DEFAULT_LEVEL,
    DEFAULT_PEAK_HOUR,
    DEFAULT_PRIMARY_MODEL,
    DEFAULT_TITLE,
    TITLE_TIERS,
    TOP_PROJECTS_LIMIT,
)
from .exceptions import StatsCacheNotFoundError
from .logger import log
from .models import DailyActivity, HistoryEntry, ProjectStats, StatsCache, WrappedSummary
from .paths import DataPaths, get_data_paths
from .pricing import calculate_estimated_cost, calculate_total_tokens, get_tokens_by_model
from .utils import round_half_up


class AchievementInputs(NamedTuple):
    """Values the achievement table is evaluated against."""

    total_messages: int
    total_sessions: int
    total_tool_calls: int
    active_days: int
    longest_streak: int
    total_tokens: int
    longest_session_messages: int


# Each tag is evaluated independently; a summary may carry any subset.
ACHIEVEMENTS: List[Tuple[str, Callable[[AchievementInputs], bool]]] = [
    ("10K_MESSAGES", lambda s: s.total_messages >= 10_000),
    ("1K_MESSAGES", lambda s: s.total_messages >= 1_000),
    ("500_SESSIONS", lambda s: s.total_sessions >= 500),
    ("100_SESSIONS", lambda s: s.total_sessions >= 100),
    ("MONTHLY_ACTIVE", lambda s: s.active_days >= 30),
    ("WEEKLY_ACTIVE", lambda s: s.active_days >= 7),
    ("WEEK_STREAK", lambda s: s.longest_streak >= 7),
    ("3_DAY_STREAK", lambda s: s.longest_streak >= 3),
    ("TOOL_MASTER", lambda s: s.total_tool_calls >= 5_000),
    ("TOOL_USER", lambda s: s.total_tool_calls >= 1_000),
    ("MARATHON_SESSION", lambda s: s.longest_session_messages >= 1_000),
    ("LONG_SESSION", lambda s: s.longest_session_messages >= 500),
    ("100M_TOKENS", lambda s: s.total_tokens >= 100_000_000),
    ("10M_TOKENS", lambda s: s.total_tokens >= 10_000_000),
]


def _parse_day(value: str) -> Optional[date]:
    """Parse the calendar-day part of a "YYYY-MM-DD..." string."""
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def find_primary_model(tokens_by_model: Mapping[str, int]) -> str:
    """Find the display name with the most tokens.

    Ties keep the first model seen; an empty mapping (or one with no
    positive counts) yields DEFAULT_PRIMARY_MODEL.
    """
    max_tokens = 0
    primary_model = DEFAULT_PRIMARY_MODEL

    for model, tokens in tokens_by_model.items():
        if tokens > max_tokens:
            max_tokens = tokens
            primary_model = model

    return primary_model


def normalize_hour_counts(hour_counts: Mapping[str, int]) -> Dict[int, int]:
    """Convert "0".."23" string keys to ints, dropping keys that aren't hours."""
    result: Dict[int, int] = {}
    for hour, count in hour_counts.items():
        try:
            result[int(hour)] = count
        except (TypeError, ValueError):
            continue
    return dict(sorted(result.items()))


def find_peak_hour(hourly_distribution: Mapping[int, int]) -> int:
    """Find the hour of day with the most activity.

    Hours are visited in ascending order and only a strictly greater count
    replaces the current peak, so ties resolve to the earliest hour.
    Returns DEFAULT_PEAK_HOUR when there is no activity.

    Example:
        >>> find_peak_hour({9: 5, 14: 12, 22: 12})
        14
        >>> find_peak_hour({})
        12
    """
    max_count = 0
    peak_hour = DEFAULT_PEAK_HOUR

    for hour in sorted(hourly_distribution):
        count = hourly_distribution[hour]
        if count > max_count:
            max_count = count
            peak_hour = hour

    return peak_hour


def calculate_streaks(
    daily_activity: Sequence[DailyActivity], today: Optional[date] = None
) -> Tuple[int, int]:
    """Compute the longest and current consecutive-day streaks.

    Dates are de-duplicated and sorted. A run extends while consecutive
    dates are exactly one day apart. The final run counts as the current
    streak only if the last active day is today or yesterday.

    Args:
        daily_activity: Year-filtered daily activity
        today: Reference date (default: date.today())

    Returns:
        Tuple of (longest_streak, current_streak)

    Example:
        Days 01-01, 01-02, 01-03 with today = 01-04 -> (3, 3)
        Same days with today = 01-10 -> (3, 0)
    """
    dates = sorted({d for d in (_parse_day(a.date) for a in daily_activity) if d})
    if not dates:
        return 0, 0

    longest_streak = 1
    temp_streak = 1

    for i in range(1, len(dates)):
        if (dates[i] - dates[i - 1]).days == 1:
            temp_streak += 1
            longest_streak = max(longest_streak, temp_streak)
        else:
            temp_streak = 1

    today = today or date.today()
    days_since_last_activity = (today - dates[-1]).days
    current_streak = temp_streak if days_since_last_activity <= 1 else 0

    return longest_streak, current_streak


def calculate_title(total_messages: int) -> Tuple[str, str]:
    """Pick the (title, level) keys for a total message count."""
    for threshold, title, level in TITLE_TIERS:
        if total_messages >= threshold:
            return title, level
    return DEFAULT_TITLE, DEFAULT_LEVEL


def calculate_achievements(inputs: AchievementInputs) -> List[str]:
    """Return every achievement tag whose predicate holds, in table order."""
    return [tag for tag, earned in ACHIEVEMENTS if earned(inputs)]


def compute_weekday_distribution(daily_activity: Iterable[DailyActivity]) -> List[int]:
    """Messages per day of week (index 0 = Monday)."""
    counts = [0] * 7
    for activity in daily_activity:
        day = _parse_day(activity.date)
        if day:
            counts[day.weekday()] += activity.message_count
    return counts


def compute_monthly_activity(daily_activity: Iterable[DailyActivity]) -> List[int]:
    """Messages per calendar month (index 0 = January)."""
    counts = [0] * 12
    for activity in daily_activity:
        day = _parse_day(activity.date)
        if day:
            counts[day.month - 1] += activity.message_count
    return counts


def count_prompts_in_year(history: Iterable[HistoryEntry], year: int) -> int:
    """Count history entries whose local timestamp falls in ``year``."""
    total = 0
    for entry in history:
        when = entry.local_time
        if when is not None and when.year == year:
            total += 1
    return total


def build_summary(
    cache: Optional[StatsCache],
    projects: Sequence[ProjectStats] = (),
    history: Sequence[HistoryEntry] = (),
    year: Optional[int] = None,
    now: Optional[datetime] = None,
) -> WrappedSummary:
    """Aggregate raw Claude Code data into a WrappedSummary.

    Args:
        cache: Parsed stats cache (None when it could not be read)
        projects: Project stats, already sorted by session count
        history: Prompt history entries
        year: Reporting year (default: the year of ``now``)
        now: Reference time for streaks and empty date ranges
            (default: datetime.now())

    Returns:
        WrappedSummary for the reporting year

    Raises:
        StatsCacheNotFoundError: If ``cache`` is None

    Example:
        >>> summary = build_summary(read_stats_cache(), year=2025)
        >>> print(f"{summary.total_messages} messages over {summary.active_days} days")
    """
    if cache is None:
        raise StatsCacheNotFoundError()

    now = now or datetime.now()
    year = year or now.year

    # Year filter, applied once
    daily_activity = filter_by_year(cache.daily_activity, year)

    # Totals
    total_messages = sum(d.message_count for d in daily_activity)
    total_sessions = sum(d.session_count for d in daily_activity)
    total_tool_calls = sum(d.tool_call_count for d in daily_activity)
    active_days = len(daily_activity)

    # Date range (both bounds fall back to now when the year is empty)
    days = sorted(d for d in (_parse_day(a.date) for a in daily_activity) if d)
    if days:
        first_session_date = datetime.combine(days[0], datetime.min.time())
        last_session_date = datetime.combine(days[-1], datetime.min.time())
    else:
        first_session_date = last_session_date = now

    # Tokens
    total_tokens = calculate_total_tokens(cache.model_usage)
    tokens_by_model = get_tokens_by_model(cache.model_usage)
    primary_model = find_primary_model(tokens_by_model)

    # Cost
    estimated_cost, cost_by_model = calculate_estimated_cost(cache.model_usage)

    # Time patterns
    hourly_distribution = normalize_hour_counts(cache.hour_counts)
    peak_hour = find_peak_hour(hourly_distribution)
    weekday_distribution = compute_weekday_distribution(daily_activity)
    monthly_activity = compute_monthly_activity(daily_activity)
    peak_daily_messages = max((d.message_count for d in daily_activity), default=0)

    # Session averages. avg_session_duration divides the *longest* session's
    # duration by the session count, so it is not a true mean.
    longest_session = cache.longest_session
    avg_messages_per_session = (
        round_half_up(total_messages / total_sessions) if total_sessions > 0 else 0
    )
    if longest_session and total_sessions > 0:
        avg_session_duration = round_half_up(
            longest_session.duration / total_sessions / 1000 / 60
        )
    else:
        avg_session_duration = 0

    # Streaks
    longest_streak, current_streak = calculate_streaks(daily_activity, now.date())

    # Title and achievements
    user_title, user_level = calculate_title(total_messages)
    achievements = calculate_achievements(
        AchievementInputs(
            total_messages=total_messages,
            total_sessions=total_sessions,
            total_tool_calls=total_tool_calls,
            active_days=active_days,
            longest_streak=longest_streak,
            total_tokens=total_tokens,
            longest_session_messages=longest_session.message_count
            if longest_session
            else 0,
        )
    )

    projects = list(projects)

    log.debug(
        "Summary for {}: {} active days, {} messages, {} projects",
        year,
        active_days,
        total_messages,
        len(projects),
    )

    return WrappedSummary(
        year=year,
        total_sessions=total_sessions,
        total_messages=total_messages,
        total_tool_calls=total_tool_calls,
        active_days=active_days,
        first_session_date=first_session_date,
        last_session_date=last_session_date,
        total_tokens=total_tokens,
        tokens_by_model=tokens_by_model,
        primary_model=primary_model,
        hourly_distribution=hourly_distribution,
        peak_hour=peak_hour,
        weekday_distribution=weekday_distribution,
        monthly_activity=monthly_activity,
        peak_daily_messages=peak_daily_messages,
        daily_activity=daily_activity,
        longest_session=longest_session,
        avg_messages_per_session=avg_messages_per_session,
        avg_session_duration=avg_session_duration,
        projects=projects,
        top_projects=projects[:TOP_PROJECTS_LIMIT],
        total_projects=len(projects),
        total_prompts=count_prompts_in_year(history, year),
        longest_streak=longest_streak,
        current_streak=current_streak,
        user_title=user_title,
        user_level=user_level,
        achievements=achievements,
        estimated_cost=estimated_cost,
        cost_by_model=cost_by_model,
    )


def analyze_data(
    paths: Optional[DataPaths] = None,
    year: Optional[int] = None,
    now: Optional[datetime] = None,
) -> WrappedSummary:
    """Read all local Claude Code data and build the summary.

    Raises:
        StatsCacheNotFoundError: If stats-cache.json is missing or corrupt
    """
    paths = paths or get_data_paths()
    cache = read_stats_cache(paths.stats_cache)
    history = read_history(paths.history)
    projects = get_project_stats(paths.projects)
    return build_summary(cache, projects, history, year=year, now=now)
