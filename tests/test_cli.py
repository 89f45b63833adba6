"""Smoke tests for the CLI.

These tests verify basic CLI functionality without requiring
network access or a running MCP client.
"""

import json
import os
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from miro_boards import __version__
from miro_boards.cli import app

runner = CliRunner()


class TestCLIHelp:
    """Test CLI help and version commands."""

    def test_help_returns_zero(self) -> None:
        """CLI --help should return exit code 0."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Miro MCP server" in result.stdout

    def test_version_flag(self) -> None:
        """CLI --version should print version and exit 0."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_short_version_flag(self) -> None:
        """CLI -V should print version and exit 0."""
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestConfigCommand:
    """Test config command."""

    def test_config_shows_settings(self) -> None:
        """config should show effective settings without the token."""
        with patch.dict(os.environ, {"MIRO_OAUTH_TOKEN": "hidden-token"}):
            result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "API base URL" in result.stdout
        assert "hidden-token" not in result.stdout

    def test_config_json(self) -> None:
        """config --json should output valid JSON."""
        result = runner.invoke(app, ["config", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["api_base_url"] == "https://api.miro.com/v2"


class TestToolsCommand:
    """Test tools command."""

    def test_tools_lists_names(self) -> None:
        """tools should list every registered tool."""
        result = runner.invoke(app, ["tools"])
        assert result.exit_code == 0
        assert "bulk_delete_items" in result.stdout
        assert "create_sticky_note" in result.stdout

    def test_tools_json(self) -> None:
        """tools --json should output input schemas keyed by name."""
        result = runner.invoke(app, ["tools", "--json"])
        assert result.exit_code == 0
        schemas = json.loads(result.stdout)
        assert schemas["get_items_in_frame"]["required"] == ["boardId", "frameId"]


class TestServeCommand:
    """Test serve command startup checks."""

    def test_missing_token_exits_one(self) -> None:
        """serve without a token should fail with exit code 1."""
        with patch.dict(os.environ, {}, clear=True):
            with patch("mcp_server.server.run_stdio", new=AsyncMock()) as run:
                result = runner.invoke(app, ["serve"])
        assert result.exit_code == 1
        run.assert_not_called()

    def test_token_flag_starts_server(self) -> None:
        """serve --token should start the stdio server with that token."""
        with patch.dict(os.environ, {}, clear=True):
            with patch("mcp_server.server.run_stdio", new=AsyncMock()) as run:
                result = runner.invoke(app, ["serve", "--token", "flag-token"])
        assert result.exit_code == 0
        config = run.call_args.args[0]
        assert config.token == "flag-token"
