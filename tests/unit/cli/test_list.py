"""Unit tests for list command.

Tests for the snapsweep list command and global CLI options.
"""

import json
from pathlib import Path

import pytest
from snapsweep import __version__
from snapsweep.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestGlobalOptions:
    """Tests for the top-level application."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help_lists_commands(self) -> None:
        """Top-level help lists the subcommands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "list" in result.stdout
        assert "clean" in result.stdout


class TestListCommand:
    """Tests for snapsweep list."""

    def test_list_help(self) -> None:
        """List command shows help."""
        result = runner.invoke(app, ["list", "--help"])
        assert result.exit_code == 0
        assert "--sort" in result.stdout
        assert "--format" in result.stdout

    def test_list_empty_directory(self, work_dir: Path) -> None:
        """An empty directory reports no screenshots."""
        result = runner.invoke(app, ["list", "--dir", str(work_dir)])

        assert result.exit_code == 0
        assert "No screenshots found" in result.stdout

    def test_list_table(self, work_dir: Path) -> None:
        """Screenshots are shown in a table with a summary."""
        (work_dir / "Screenshot 1.png").write_bytes(b"x" * 10)
        (work_dir / "Screenshot 2.png").write_bytes(b"x" * 20)
        (work_dir / "notes.txt").write_text("ignored")

        result = runner.invoke(app, ["list", "--dir", str(work_dir)])

        assert result.exit_code == 0
        assert "Screenshot 1.png" in result.stdout
        assert "Screenshot 2.png" in result.stdout
        assert "notes.txt" not in result.stdout
        assert "2 screenshot(s)" in result.stdout

    def test_list_json_sorted_with_limit(self, work_dir: Path) -> None:
        """JSON output honors sort order and limit."""
        (work_dir / "Screenshot a.png").write_bytes(b"x" * 10)
        (work_dir / "Screenshot b.png").write_bytes(b"x" * 30)
        (work_dir / "Screenshot c.png").write_bytes(b"x" * 20)

        result = runner.invoke(
            app,
            [
                "list",
                "--dir",
                str(work_dir),
                "--sort",
                "size",
                "--desc",
                "--limit",
                "2",
                "-f",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["fileName"] for item in data] == ["Screenshot b.png", "Screenshot c.png"]
        assert data[0]["sizeBytes"] == 30

    def test_list_sort_is_case_insensitive(self, work_dir: Path) -> None:
        """Sort keys are accepted in any case."""
        (work_dir / "Screenshot 1.png").write_bytes(b"x")

        result = runner.invoke(app, ["list", "--dir", str(work_dir), "--sort", "modifiedat"])

        assert result.exit_code == 0

    def test_list_invalid_sort(self, work_dir: Path) -> None:
        """Unknown sort keys are rejected."""
        result = runner.invoke(app, ["list", "--dir", str(work_dir), "--sort", "color"])
        assert result.exit_code != 0

    def test_list_shows_bracketed_names(self, work_dir: Path) -> None:
        """Names containing square brackets are printed as-is."""
        (work_dir / "Screenshot [draft].png").write_bytes(b"x")
        (work_dir / "Screenshot [bold]a[:].png").write_bytes(b"x")

        result = runner.invoke(app, ["list", "--dir", str(work_dir)])

        assert result.exit_code == 0
        assert "Screenshot [draft].png" in result.output
        assert "Screenshot [bold]a[:].png" in result.output

    def test_list_relative_dir_gives_absolute_paths(
        self, work_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A relative --dir is resolved, so reported paths are absolute."""
        (work_dir / "Screenshot 1.png").write_bytes(b"x")
        monkeypatch.chdir(work_dir)

        result = runner.invoke(app, ["list", "--dir", ".", "-f", "json"])

        assert result.exit_code == 0
        (item,) = json.loads(result.stdout)
        assert Path(item["path"]).is_absolute()
        assert Path(item["path"]) == (work_dir / "Screenshot 1.png").resolve()
