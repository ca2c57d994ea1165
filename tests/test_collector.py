"""Tests for the raw data readers in claude_code_wrapped.collector."""

import json

from claude_code_wrapped.collector import (
    decode_project_path,
    estimate_message_count,
    extract_project_name,
    filter_by_year,
    get_project_stats,
    read_history,
    read_stats_cache,
)
from claude_code_wrapped.models import DailyActivity


class TestReadStatsCache:
    """Tests for read_stats_cache."""

    def test_reads_sample(self, claude_dir):
        """Test parsing a well-formed stats cache."""
        cache = read_stats_cache(claude_dir / "stats-cache.json")

        assert cache is not None
        assert len(cache.daily_activity) == 4
        assert cache.daily_activity[1].message_count == 100
        assert cache.model_usage["claude-opus-4-5-20251101"].output_tokens == 5000
        assert cache.longest_session.message_count == 640
        assert cache.hour_counts == {"9": 3, "14": 7, "22": 7}

    def test_missing_file(self, tmp_path):
        """Test that a missing file yields None."""
        assert read_stats_cache(tmp_path / "stats-cache.json") is None

    def test_corrupt_json(self, tmp_path):
        """Test that unparseable JSON yields None."""
        path = tmp_path / "stats-cache.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_stats_cache(path) is None

    def test_wrong_shape(self, tmp_path):
        """Test that a JSON array instead of an object yields None."""
        path = tmp_path / "stats-cache.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert read_stats_cache(path) is None

    def test_missing_fields_default(self, tmp_path):
        """Test that an empty object parses with empty defaults."""
        path = tmp_path / "stats-cache.json"
        path.write_text("{}", encoding="utf-8")
        cache = read_stats_cache(path)

        assert cache is not None
        assert cache.daily_activity == []
        assert cache.model_usage == {}
        assert cache.longest_session is None


class TestReadHistory:
    """Tests for read_history."""

    def test_skips_malformed_lines(self, claude_dir):
        """Test that blank, invalid and non-object lines are skipped."""
        entries = read_history(claude_dir / "history.jsonl")

        assert [e.display for e in entries] == ["fix the tests", "refactor", "old prompt"]
        assert entries[0].session_id == "s1"
        assert entries[1].project == "/Users/test/beta"

    def test_missing_file(self, tmp_path):
        """Test that a missing history file yields an empty list."""
        assert read_history(tmp_path / "history.jsonl") == []

    def test_invalid_utf8_line_skipped(self, tmp_path):
        """Test that undecodable bytes only affect their own line."""
        path = tmp_path / "history.jsonl"
        path.write_bytes(
            b'{"display": "a", "timestamp": 1}\n'
            b"\xff\xfe not json\n"
            b'{"display": "c", "timestamp": 3}\n'
        )

        assert [e.display for e in read_history(path)] == ["a", "c"]

    def test_out_of_range_numbers_skipped(self, tmp_path):
        """Test that infinite and NaN timestamps drop only that entry."""
        path = tmp_path / "history.jsonl"
        path.write_text(
            '{"display": "a", "timestamp": 1}\n'
            '{"display": "b", "timestamp": 1e400}\n'
            '{"display": "n", "timestamp": NaN}\n'
            '{"display": "c", "timestamp": 3}\n',
            encoding="utf-8",
        )

        assert [e.display for e in read_history(path)] == ["a", "c"]


class TestProjectNames:
    """Tests for project path helpers."""

    def test_extract_project_name(self):
        """Test the last non-empty segment is used."""
        assert extract_project_name("/Users/foo/myproject") == "myproject"
        assert extract_project_name("/Users/foo/myproject/") == "myproject"

    def test_extract_project_name_empty(self):
        """Test the fallback for empty paths."""
        assert extract_project_name("") == "Unknown"
        assert extract_project_name("///") == "Unknown"

    def test_decode_project_path(self):
        """Test hyphens become path separators."""
        assert decode_project_path("-Users-foo-myproject") == "/Users/foo/myproject"

    def test_decode_splits_hyphenated_names(self):
        """Test that a hyphen inside a folder name is also decoded."""
        decoded = decode_project_path("-Users-foo-my-app")
        assert decoded == "/Users/foo/my/app"
        assert extract_project_name(decoded) == "app"


class TestEstimateMessageCount:
    """Tests for estimate_message_count."""

    def test_exact_when_few_files(self, tmp_path, write_sessions):
        """Test that five or fewer files are counted exactly."""
        write_sessions(tmp_path, [3, 4, 5])
        files = sorted(tmp_path.glob("*.jsonl"))
        assert estimate_message_count(files) == 12

    def test_extrapolates_from_sample(self, tmp_path, write_sessions):
        """Test ten files whose first five hold 50 lines estimate to 100."""
        write_sessions(tmp_path, [10, 10, 10, 10, 10, 999, 999, 999, 999, 999])
        files = sorted(tmp_path.glob("*.jsonl"))
        assert estimate_message_count(files) == 100

    def test_blank_lines_not_counted(self, tmp_path):
        """Test that empty lines are ignored."""
        path = tmp_path / "s.jsonl"
        path.write_text('{"a": 1}\n\n   \n{"b": 2}\n', encoding="utf-8")
        assert estimate_message_count([path]) == 2

    def test_unreadable_file_counts_zero(self, tmp_path, write_sessions):
        """Test that a missing sample file contributes nothing."""
        write_sessions(tmp_path, [4])
        files = sorted(tmp_path.glob("*.jsonl")) + [tmp_path / "missing.jsonl"]
        assert estimate_message_count(files) == 4

    def test_invalid_utf8_still_counted(self, tmp_path):
        """Test that a bad byte does not zero out the file's line count."""
        path = tmp_path / "s.jsonl"
        path.write_bytes(b'{"a": 1}\n{"b": "\xff"}\n{"c": 3}\n')
        assert estimate_message_count([path]) == 3

    def test_no_files(self):
        """Test an empty project."""
        assert estimate_message_count([]) == 0


class TestGetProjectStats:
    """Tests for get_project_stats."""

    def test_scans_projects(self, claude_dir):
        """Test counts and ordering over the fake projects directory."""
        projects = get_project_stats(claude_dir / "projects")

        assert [p.name for p in projects] == ["beta", "alpha", "gamma"]
        assert [p.session_count for p in projects] == [3, 2, 1]
        assert [p.message_count for p in projects] == [3, 7, 2]
        assert projects[1].path == "/Users/test/alpha"

    def test_hidden_and_files_skipped(self, claude_dir):
        """Test that dot-directories and plain files are not projects."""
        names = [p.name for p in get_project_stats(claude_dir / "projects")]
        assert "hidden" not in names
        assert not any("stray" in n for n in names)

    def test_ties_keep_directory_order(self, tmp_path, write_sessions):
        """Test that projects with equal session counts stay in name order."""
        write_sessions(tmp_path / "-b-second", [1])
        write_sessions(tmp_path / "-a-first", [1])
        write_sessions(tmp_path / "-c-top", [1, 1])

        projects = get_project_stats(tmp_path)
        assert [p.name for p in projects] == ["top", "first", "second"]

    def test_only_jsonl_files_are_sessions(self, tmp_path, write_sessions):
        """Test that other files in a project directory are ignored."""
        write_sessions(tmp_path / "-x-proj", [2])
        (tmp_path / "-x-proj" / "notes.txt").write_text("hello\n", encoding="utf-8")

        (project,) = get_project_stats(tmp_path)
        assert project.session_count == 1
        assert project.message_count == 2

    def test_missing_directory(self, tmp_path):
        """Test that a missing projects directory yields an empty list."""
        assert get_project_stats(tmp_path / "nope") == []


class TestFilterByYear:
    """Tests for filter_by_year."""

    def test_prefix_match(self):
        """Test that only dates starting with the year are kept."""
        days = [
            DailyActivity(date="2024-12-31"),
            DailyActivity(date="2025-01-01"),
            DailyActivity(date="2025-12-31"),
        ]
        assert [d.date for d in filter_by_year(days, 2025)] == ["2025-01-01", "2025-12-31"]

    def test_round_trip_from_json(self):
        """Test that records survive a JSON round trip."""
        record = DailyActivity(date="2025-02-03", message_count=1, session_count=2, tool_call_count=3)
        restored = DailyActivity.from_json(json.loads(json.dumps(record.to_dict())))
        assert restored == record
