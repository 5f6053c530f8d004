"""
Unit Tests for run.py Entry Script.

Tests individual functions with mocked dependencies.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from run import main, validate_project_root


class TestValidateProjectRoot:
    """Tests for validate_project_root function."""

    def test_validate_project_root_succeeds_when_marker_exists(self, tmp_path):
        """Should return path when .project_root exists."""
        (tmp_path / ".project_root").touch()

        with patch("run.PROJECT_ROOT", tmp_path):
            assert validate_project_root() == tmp_path

    def test_validate_project_root_exits_when_marker_missing(self, tmp_path):
        """Should exit with error when .project_root is missing."""
        with patch("run.PROJECT_ROOT", tmp_path):
            with pytest.raises(SystemExit) as exc_info:
                validate_project_root()
            assert exc_info.value.code == 1


class TestMainCLI:
    """Tests for main CLI entry point."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    def test_help_displays_usage(self, runner):
        """Should display help text with --help."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Notes API Entry Point" in result.output
        assert "--action" in result.output
        assert "--base-url" in result.output

    def test_info_action_displays_app_info(self, runner):
        """Should display application info with --action info."""
        result = runner.invoke(main, ["--action", "info"])

        assert result.exit_code == 0
        assert "Notes API" in result.output
        assert "Available Actions:" in result.output

    def test_verbose_flag_sets_info_logging(self, runner):
        """Should configure INFO level logging with --verbose."""
        with patch("run.setup_logging") as mock_setup:
            runner.invoke(main, ["--action", "info", "--verbose"])

        assert mock_setup.call_args.kwargs["level"] == "INFO"

    def test_debug_flag_sets_debug_logging(self, runner):
        """Should configure DEBUG level logging with --debug."""
        with patch("run.setup_logging") as mock_setup:
            runner.invoke(main, ["--action", "info", "--debug"])

        assert mock_setup.call_args.kwargs["level"] == "DEBUG"

    def test_config_action_lists_sections(self, runner):
        result = runner.invoke(main, ["--action", "config"])

        assert result.exit_code == 0
        assert "Application Settings (from YAML):" in result.output
        assert "Note Limits (from YAML):" in result.output
        assert "title_max_length: 200" in result.output

    def test_health_action_passes(self, runner):
        result = runner.invoke(main, ["--action", "health"])

        assert result.exit_code == 0
        assert "All checks passed!" in result.output

    def test_server_action_builds_uvicorn_command(self, runner):
        with patch("run.subprocess.run") as mock_run:
            result = runner.invoke(main, ["--action", "server", "--port", "4000", "--reload"])

        assert result.exit_code == 0
        cmd = mock_run.call_args.args[0]
        assert "notes_api.main:app" in cmd
        assert cmd[cmd.index("--port") + 1] == "4000"
        assert "--reload" in cmd

    def test_demo_action_reports_unreachable_server(self, runner):
        result = runner.invoke(
            main, ["--action", "demo", "--base-url", "http://127.0.0.1:1"],
        )

        assert result.exit_code == 1
        assert "Could not reach server" in result.output
