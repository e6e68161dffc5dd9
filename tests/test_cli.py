"""Tests for Typer-based CLI."""

import json

import yaml
from typer.testing import CliRunner

from commitinfo import __version__
from commitinfo.cli.app import app


class TestCLIStructure:
    """Test CLI structure and basic functionality."""

    def test_app_help(self):
        """Test main app help output."""
        runner = CliRunner()
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "show" in result.output
        assert "empty" in result.output

    def test_version_flag(self):
        """Test --version flag."""
        runner = CliRunner()
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"commitinfo v{__version__}" in result.output

    def test_show_requires_session_id(self):
        """Test show requires SESSION_ID."""
        runner = CliRunner()
        result = runner.invoke(app, ["show"])

        assert result.exit_code != 0
        assert "Missing argument" in result.output


class TestShowCommand:
    """Test the show command."""

    def test_show_text(self):
        """Test text output with every option."""
        runner = CliRunner()
        result = runner.invoke(
            app,
            [
                "show",
                "s1",
                "--user",
                "alice",
                "--message",
                "fix typo",
                "--path",
                "/content/en",
                "--timestamp",
                "1700000000123",
            ],
        )

        assert result.exit_code == 0
        assert "alice" in result.output
        assert "fix typo" in result.output
        assert "/content/en" in result.output
        assert "2023-11-14T22:13:20.123Z" in result.output

    def test_show_defaults(self):
        """Test defaults for user and path, and no message line."""
        runner = CliRunner()
        result = runner.invoke(app, ["show", "s2", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["session_id"] == "s2"
        assert data["user_id"] == "oak:unknown"
        assert data["path"] == "/"
        assert "message" not in data

    def test_show_yaml(self):
        """Test YAML output."""
        runner = CliRunner()
        result = runner.invoke(
            app, ["show", "s1", "--timestamp", "0", "--format", "yaml"]
        )

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["timestamp"] == 0
        assert data["created_utc"] == "1970-01-01T00:00:00.000Z"

    def test_show_invalid_timestamp(self):
        """Test a negative timestamp is reported as an error."""
        runner = CliRunner()
        result = runner.invoke(app, ["show", "s1", "--timestamp=-1"])

        assert result.exit_code == 1
        assert "Invalid commit metadata" in result.output

    def test_show_timestamp_past_year_9999(self):
        """Test a timestamp beyond the datetime range is reported as an error."""
        runner = CliRunner()
        result = runner.invoke(app, ["show", "s1", "--timestamp", str(10**17)])

        assert result.exit_code == 1
        assert "Invalid commit metadata" in result.output
        assert "timestamp" in result.output

    def test_show_latest_timestamp(self):
        """Test the last representable instant is displayed."""
        runner = CliRunner()
        result = runner.invoke(app, ["show", "s1", "--timestamp", "253402300799999"])

        assert result.exit_code == 0
        assert "9999-12-31T23:59:59.999Z" in result.output

    def test_show_invalid_format(self):
        """Test an unknown output format is rejected."""
        runner = CliRunner()
        result = runner.invoke(app, ["show", "s1", "--format", "xml"])

        assert result.exit_code != 0

    def test_show_invalid_log_level(self):
        """Test an unknown log level exits with an error."""
        runner = CliRunner()
        result = runner.invoke(app, ["show", "s1", "--log-level", "verbose"])

        assert result.exit_code == 1
        assert "Invalid log level" in result.output


class TestEmptyCommand:
    """Test the empty command."""

    def test_empty_text(self):
        """Test the placeholder is displayed."""
        runner = CliRunner()
        result = runner.invoke(app, ["empty"])

        assert result.exit_code == 0
        assert "oak:unknown" in result.output
        assert "message" not in result.output

    def test_empty_json(self):
        """Test the placeholder as JSON."""
        runner = CliRunner()
        result = runner.invoke(app, ["empty", "--format", "json", "--log-level", "warn"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["session_id"] == "oak:unknown"
        assert data["user_id"] == "oak:unknown"
        assert data["path"] == "/"
