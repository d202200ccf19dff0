"""Unit tests for scan command.

Tests for the CLI scan command implementation.
"""

import json
from pathlib import Path

import pytest
from mcfuninstall.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("config_home")


class TestScanCommand:
    """Tests for mcf-uninstall scan command."""

    def test_scan_help(self) -> None:
        """Scan command shows help."""
        result = runner.invoke(app, ["scan", "--help"])
        assert result.exit_code == 0
        assert "List declared resources" in result.stdout

    def test_table_output(self, datapack: Path) -> None:
        result = runner.invoke(app, ["scan", str(datapack)])

        assert result.exit_code == 0
        assert "Declared Resources" in result.stdout
        assert "demo.progress" in result.stdout
        assert "Found 9 identifier(s)" in result.stdout

    def test_quiet_hides_totals(self, datapack: Path) -> None:
        result = runner.invoke(app, ["-q", "scan", str(datapack)])

        assert result.exit_code == 0
        assert "Found" not in result.stdout

    def test_json_output(self, datapack: Path) -> None:
        """JSON output lists every match, duplicates included."""
        result = runner.invoke(app, ["scan", str(datapack), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert list(data) == ["scoreboard", "team", "bossbar", "storage", "tag"]
        assert data["scoreboard"]["total"] == 4
        assert [m["id"] for m in data["scoreboard"]["matches"]] == [
            "demo.hits",
            "demo.kills",
            "demo.kills",
            "demo.timer",
        ]
        first = data["team"]["matches"][0]
        assert first["line"] == 3
        assert first["file"].endswith("load.mcfunction")

    def test_json_with_filter_and_skip(self, datapack: Path) -> None:
        result = runner.invoke(
            app,
            ["scan", str(datapack), "-f", "json", "-x", "storage", "-F", "team=blue"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert "storage" not in data
        assert data["team"] == {"total": 1, "filtered_out": 1, "matches": []}

    def test_no_resources(self, tmp_path: Path) -> None:
        (tmp_path / "empty.mcfunction").write_text("say hi\n", encoding="utf-8")

        result = runner.invoke(app, ["scan", str(tmp_path)])

        assert result.exit_code == 0
        assert "No declared resources found" in result.stdout

    def test_missing_path(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["scan", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Invalid path" in result.output

    def test_invalid_format(self, datapack: Path) -> None:
        result = runner.invoke(app, ["scan", str(datapack), "--format", "xml"])
        assert result.exit_code != 0
