"""
Integration tests for the claude-code-wrapped command.

These tests verify that:
1. JSON mode prints only the summary
2. Missing data exits with an error and a hint
3. Each output stage runs or is skipped according to its flag
4. Errors are reported and exit non-zero

The browser and Playwright are always mocked.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from claude_code_wrapped import __version__
from claude_code_wrapped.cli import main
from claude_code_wrapped.html import generate_html


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def quiet_logger():
    """Keep loguru from binding to the runner's temporary streams."""
    with patch("claude_code_wrapped.cli.setup_logger") as mock:
        yield mock


@pytest.mark.usefixtures("quiet_logger")
class TestJsonMode:
    """Tests for --json."""

    def test_outputs_summary(self, runner, claude_dir):
        """Test that JSON mode prints a parseable summary and nothing else."""
        result = runner.invoke(
            main, ["--json", "--data-dir", str(claude_dir), "--year", "2025", "-l", "en"]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["year"] == 2025
        assert payload["totalMessages"] == 600
        assert payload["totalProjects"] == 3
        assert payload["primaryModel"] == "Claude Sonnet 4.5"

    def test_json_skips_renderers(self, runner, claude_dir):
        """Test that JSON mode never renders the report or opens a browser."""
        with patch("claude_code_wrapped.cli.print_report") as mock_report, patch(
            "claude_code_wrapped.cli.click.launch"
        ) as mock_launch:
            result = runner.invoke(main, ["--json", "--data-dir", str(claude_dir)])

        assert result.exit_code == 0
        mock_report.assert_not_called()
        mock_launch.assert_not_called()


@pytest.mark.usefixtures("quiet_logger")
class TestMissingData:
    """Tests for a data directory without Claude Code data."""

    def test_exits_with_hint(self, runner, tmp_path):
        """Test the error, expected location and install hint."""
        missing = tmp_path / "nope"
        result = runner.invoke(main, ["--data-dir", str(missing), "-l", "en"])

        assert result.exit_code == 1
        assert "Claude Code data not found!" in result.output
        assert "Expected location:" in result.output
        assert "Make sure you have Claude Code installed" in result.output

    def test_chinese_message(self, runner, tmp_path):
        """Test the Chinese error text."""
        result = runner.invoke(main, ["--data-dir", str(tmp_path), "-l", "zh"])

        assert result.exit_code == 1
        assert "未找到 Claude Code 数据" in result.output


@pytest.mark.usefixtures("quiet_logger")
class TestFullRun:
    """Tests for the terminal, HTML and PNG stages."""

    def test_terminal_only(self, runner, claude_dir):
        """Test --no-html prints the report and the closing line."""
        with patch("claude_code_wrapped.cli.click.launch") as mock_launch:
            result = runner.invoke(
                main, ["--no-html", "--data-dir", str(claude_dir), "-y", "2025", "-l", "en"]
            )

        assert result.exit_code == 0, result.output
        assert "Analysis complete!" in result.output
        assert "IDENTIFIED" in result.output
        assert "Thank you for using Claude Code in 2025!" in result.output
        mock_launch.assert_not_called()

    def test_no_tui(self, runner, claude_dir):
        """Test --no-tui skips the terminal report."""
        with patch("claude_code_wrapped.cli.print_report") as mock_report:
            result = runner.invoke(
                main, ["--no-tui", "--no-html", "--data-dir", str(claude_dir), "-l", "en"]
            )

        assert result.exit_code == 0
        mock_report.assert_not_called()

    def test_html_opened(self, runner, claude_dir, tmp_path):
        """Test the HTML report is written and opened."""
        out_dir = tmp_path / "out"

        def write_to_tmp(summary, lang):
            return generate_html(summary, lang, output_dir=out_dir)

        with patch("claude_code_wrapped.cli.generate_html", side_effect=write_to_tmp), patch(
            "claude_code_wrapped.cli.click.launch"
        ) as mock_launch:
            result = runner.invoke(
                main, ["--no-tui", "--data-dir", str(claude_dir), "-y", "2025", "-l", "en"]
            )

        assert result.exit_code == 0, result.output
        written = list(out_dir.glob("claude-code-wrapped-*.html"))
        assert len(written) == 1
        mock_launch.assert_called_once_with(str(written[0]))
        assert "HTML report generated!" in result.output

    def test_png_unavailable(self, runner, claude_dir):
        """Test that PNG export degrades with a hint when no browser exists."""
        with patch(
            "claude_code_wrapped.cli.check_browser_available", return_value=False
        ), patch("claude_code_wrapped.cli.export_to_png") as mock_export:
            result = runner.invoke(
                main,
                ["--no-tui", "--no-html", "--export-png", "--data-dir", str(claude_dir), "-l", "en"],
            )

        assert result.exit_code == 0
        assert "Headless browser not available" in result.output
        mock_export.assert_not_called()

    def test_png_exported(self, runner, claude_dir, tmp_path):
        """Test a successful PNG export."""
        png = tmp_path / "wrapped.png"
        with patch(
            "claude_code_wrapped.cli.check_browser_available", return_value=True
        ), patch(
            "claude_code_wrapped.cli.generate_html", return_value=tmp_path / "r.html"
        ), patch(
            "claude_code_wrapped.cli.export_to_png", return_value=png
        ) as mock_export:
            result = runner.invoke(
                main,
                [
                    "--no-tui",
                    "--no-html",
                    "--export-png",
                    "--data-dir",
                    str(claude_dir),
                    "-y",
                    "2025",
                    "-l",
                    "en",
                ],
            )

        assert result.exit_code == 0, result.output
        mock_export.assert_called_once_with(tmp_path / "r.html", 2025)
        assert "PNG exported!" in result.output


@pytest.mark.usefixtures("quiet_logger")
class TestErrors:
    """Tests for error handling and global options."""

    def test_unexpected_error(self, runner, claude_dir):
        """Test that any failure is reported and exits 1."""
        with patch("claude_code_wrapped.cli.analyze_data", side_effect=RuntimeError("boom")):
            result = runner.invoke(main, ["--no-html", "--data-dir", str(claude_dir), "-l", "en"])

        assert result.exit_code == 1
        assert "[!] Error: boom" in result.output

    def test_invalid_language(self, runner, claude_dir):
        """Test that unsupported languages are rejected by the parser."""
        result = runner.invoke(main, ["--data-dir", str(claude_dir), "-l", "fr"])
        assert result.exit_code == 2

    def test_version(self, runner):
        """Test --version."""
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_enables_debug(self, runner, claude_dir, quiet_logger):
        """Test that --verbose switches logging to DEBUG."""
        runner.invoke(main, ["--json", "--verbose", "--data-dir", str(claude_dir)])
        quiet_logger.assert_called_once_with("DEBUG")

    def test_default_log_level(self, runner, claude_dir, quiet_logger):
        """Test the default WARNING level."""
        runner.invoke(main, ["--json", "--data-dir", str(claude_dir)])
        quiet_logger.assert_called_once_with("WARNING")
