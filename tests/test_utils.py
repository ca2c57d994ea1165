"""Tests for formatting helpers in claude_code_wrapped.utils."""

import pytest

from claude_code_wrapped.utils import (
    format_cost,
    format_duration,
    format_number,
    pad_number,
    peak_index,
    round_half_up,
    truncate,
)


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_halves_round_up(self):
        """Test that .5 rounds up rather than to even."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_below_half(self):
        """Test values below .5 round down."""
        assert round_half_up(2.49) == 2
        assert round_half_up(0) == 0


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "0"),
            (999, "999"),
            (1000, "1.0K"),
            (1234, "1.2K"),
            (15_300_000, "15.3M"),
            (2_500_000_000, "2.5B"),
        ],
    )
    def test_abbreviations(self, value, expected):
        """Test K/M/B suffixes."""
        assert format_number(value) == expected


class TestFormatDuration:
    """Tests for format_duration."""

    def test_minutes_only(self):
        """Test durations under an hour."""
        assert format_duration(45 * 60 * 1000) == "45m"
        assert format_duration(0) == "0m"

    def test_hours_and_minutes(self):
        """Test durations over an hour."""
        assert format_duration((2 * 60 + 5) * 60 * 1000) == "2h 5m"


class TestFormatCost:
    """Tests for format_cost."""

    @pytest.mark.parametrize(
        "cost,expected",
        [
            (0, "0.00"),
            (3.0, "3.00"),
            (12.34, "12.3"),
            (123.4, "123"),
            (1234.4, "1,234"),
            (12345.0, "12.3K"),
        ],
    )
    def test_precision_by_magnitude(self, cost, expected):
        """Test that precision shrinks as the amount grows."""
        assert format_cost(cost) == expected


class TestPadAndTruncate:
    """Tests for pad_number and truncate."""

    def test_pad_number(self):
        """Test zero padding to six digits by default."""
        assert pad_number(42) == "000042"
        assert pad_number(3, 2) == "03"
        assert pad_number(1234567) == "1234567"

    def test_truncate(self):
        """Test truncation keeps the total within the limit."""
        assert truncate("short", 10) == "short"
        result = truncate("a-very-long-project-name", 10)
        assert result == "a-very-..."
        assert len(result) == 10


class TestPeakIndex:
    """Tests for peak_index."""

    def test_first_maximum_wins(self):
        """Test that ties resolve to the earliest position."""
        assert peak_index([1, 5, 5, 2]) == 1
        assert peak_index([0, 0, 0]) == 0

    def test_empty(self):
        """Test an empty series."""
        assert peak_index([]) == 0
