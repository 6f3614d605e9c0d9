"""Integration tests for the startheme CLI.

Tests the complete user workflows of listing, changing and inspecting
themes through the Typer application, with HOME pointed at a temporary
directory.
"""

import json
import os
import sys

import pytest
from typer.testing import CliRunner

from startheme import __version__
from startheme.app import app

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="requires POSIX symlinks")


class TestCliWorkflows:
    """Integration tests for the list, change, get and help commands."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def home(self, tmp_path, monkeypatch):
        """Temporary home directory with a few themes installed."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("STARTHEME_OUTPUT_FORMAT", raising=False)
        themes_dir = tmp_path / ".config" / "starship"
        themes_dir.mkdir(parents=True)
        for name in ["gruvbox", "nord", "pastel"]:
            (themes_dir / f"{name}.toml").write_text(f"# {name}\n")
        (themes_dir / "README.md").write_text("")
        (themes_dir / "archive").mkdir()
        return tmp_path

    @pytest.fixture
    def config_path(self, home):
        return home / ".config" / "starship.toml"

    def test_list_themes(self, runner, home):
        """Test listing available themes."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "Available themes:" in lines[0]
        assert lines[1:] == [
            "  gruvbox",
            "  nord",
            "  pastel",
        ]

    def test_list_themes_json(self, runner, home):
        """Test listing themes as JSON."""
        result = runner.invoke(app, ["-o", "json", "list"])

        assert result.exit_code == 0
        assert json.loads(result.output) == ["gruvbox", "nord", "pastel"]

    def test_list_missing_directory(self, runner, tmp_path, monkeypatch):
        """Test that an unreadable themes directory exits with status 1."""
        monkeypatch.setenv("HOME", str(tmp_path))

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "Error reading starship directory" in result.output

    def test_change_then_get(self, runner, home, config_path):
        """Test the full switch workflow.

        Validates:
        1. Changing theme creates the symlink
        2. Getting the theme reports the new name
        3. Changing again repoints the symlink
        """
        result = runner.invoke(app, ["change", "nord"])

        assert result.exit_code == 0
        assert "✓ Successfully changed theme to: nord" in result.output
        assert os.readlink(config_path) == str(home / ".config" / "starship" / "nord.toml")

        result = runner.invoke(app, ["get"])
        assert result.exit_code == 0
        assert "Current theme: nord" in result.output

        runner.invoke(app, ["change", "pastel"])
        result = runner.invoke(app, ["get"])
        assert "Current theme: pastel" in result.output

    def test_change_missing_argument(self, runner, home, config_path):
        """Test that change without a theme fails before touching anything."""
        config_path.write_text("# mine\n")

        result = runner.invoke(app, ["change"])

        assert result.exit_code == 1
        assert "missing arguments" in result.output
        assert config_path.read_text() == "# mine\n"
        assert not config_path.is_symlink()

    def test_change_unknown_theme(self, runner, home, config_path):
        """Test that an unknown theme fails and keeps the current link."""
        runner.invoke(app, ["change", "gruvbox"])

        result = runner.invoke(app, ["change", "solarized"])

        assert result.exit_code == 1
        assert "solarized: No such file or directory" in result.output
        assert os.readlink(config_path).endswith("gruvbox.toml")

    def test_change_theme_is_directory(self, runner, home):
        """Test that a directory named like a theme is rejected."""
        (home / ".config" / "starship" / "broken.toml").mkdir()

        result = runner.invoke(app, ["change", "broken"])

        assert result.exit_code == 1
        assert "broken is a directory" in result.output

    def test_change_replaces_unmanaged_config(self, runner, home, config_path):
        """Test that a hand-written config is replaced by the symlink."""
        config_path.write_text("# mine\n")

        result = runner.invoke(app, ["change", "gruvbox"])

        assert result.exit_code == 0
        assert config_path.is_symlink()
        assert config_path.read_text() == "# gruvbox\n"

    def test_change_dry_run(self, runner, home, config_path):
        """Test that dry runs leave the filesystem untouched."""
        result = runner.invoke(app, ["--dry-run", "change", "nord"])

        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert not os.path.lexists(config_path)

    def test_get_without_config(self, runner, home):
        """Test that a missing config is reported with exit status 0."""
        result = runner.invoke(app, ["get"])

        assert result.exit_code == 0
        assert "No starship config found" in result.output

    def test_get_unmanaged_config(self, runner, home, config_path):
        """Test that a regular file is reported as unmanaged with exit status 0."""
        config_path.write_text("# mine\n")

        result = runner.invoke(app, ["get"])

        assert result.exit_code == 0
        assert "not managed by startheme" in result.output

    def test_get_stat_error_exits_zero(self, runner, tmp_path, monkeypatch):
        """Test that unexpected errors from get are printed, not fatal."""
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / ".config").write_text("not a directory")

        result = runner.invoke(app, ["get"])

        assert result.exit_code == 0
        assert "Error checking config" in result.output

    def test_get_yaml(self, runner, home):
        """Test inspecting the theme as YAML."""
        runner.invoke(app, ["change", "nord"])

        result = runner.invoke(app, ["--output", "yaml", "get"])

        assert result.exit_code == 0
        assert "state: active" in result.output
        assert "theme: nord" in result.output

    def test_invalid_output_format(self, runner, home):
        """Test that unknown output formats exit with status 1."""
        result = runner.invoke(app, ["-o", "xml", "list"])

        assert result.exit_code == 1
        assert "Unknown output format" in result.output

    @pytest.mark.parametrize("args", [[], ["help"], ["-h"], ["--help"]])
    def test_help(self, runner, home, args):
        """Test every way of asking for help."""
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert "change" in result.output
        assert "list" in result.output
        assert "WARNING" in result.output

    def test_unknown_subcommand(self, runner, home):
        """Test that unknown subcommands print usage and exit with status 1."""
        result = runner.invoke(app, ["frobnicate"])

        assert result.exit_code == 1
        assert "Unknown subcommand: frobnicate" in result.output
        assert "change" in result.output

    def test_version(self, runner):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.strip() == f"startheme {__version__}"

    def test_debug_shows_paths(self, runner, home):
        """Test that debug mode prints the resolved paths."""
        result = runner.invoke(app, ["--debug", "get"])

        assert result.exit_code == 0
        assert "Debug mode enabled" in result.output
        assert "Config path:" in result.output

    def test_long_theme_names_stay_on_one_line(self, runner, home):
        """Test that names wider than the terminal are not wrapped."""
        long_name = "x" * 120
        (home / ".config" / "starship" / f"{long_name}.toml").write_text("")

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert any(line.strip() == long_name for line in result.output.splitlines())

        result = runner.invoke(app, ["change", long_name])
        assert result.exit_code == 0
        assert any(f"Successfully changed theme to: {long_name}" in line for line in result.output.splitlines())

        result = runner.invoke(app, ["get"])
        assert result.exit_code == 0
        assert any(f"Current theme: {long_name}" in line for line in result.output.splitlines())

    @pytest.mark.parametrize("flag", ["--bogus", "-x"])
    def test_unknown_option_is_unknown_subcommand(self, runner, home, flag):
        """Test that unknown leading options are reported like unknown subcommands."""
        result = runner.invoke(app, [flag])

        assert result.exit_code == 1
        assert f"Unknown subcommand: {flag}" in result.output
        assert "change" in result.output

    @pytest.mark.parametrize("command", ["get", "list"])
    def test_extra_arguments_are_ignored(self, runner, home, command):
        """Test that trailing arguments do not change the exit status."""
        result = runner.invoke(app, [command, "extra", "--more"])

        assert result.exit_code == 0

    def test_change_ignores_extra_arguments(self, runner, home, config_path):
        """Test that only the first argument to change is used."""
        result = runner.invoke(app, ["change", "nord", "pastel"])

        assert result.exit_code == 0
        assert os.readlink(config_path).endswith("nord.toml")

    def test_change_dash_prefixed_theme(self, runner, home, config_path):
        """Test that a theme name starting with a dash is looked up as a theme."""
        (home / ".config" / "starship" / "-dark.toml").write_text("# dark\n")

        result = runner.invoke(app, ["change", "-dark"])

        assert result.exit_code == 0
        assert os.readlink(config_path).endswith("-dark.toml")

        result = runner.invoke(app, ["change", "-missing"])
        assert result.exit_code == 1
        assert "-missing: No such file or directory" in result.output
