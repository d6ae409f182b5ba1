"""Tests for the stylesig command line."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from stylesig.cli.main import cli

SHEET = """
root {
  FontSize 12
  element {
    activity { FontSize 14 }
  }
}
.foo { LineColor red }
"""


@pytest.fixture
def sheet(tmp_path: Path) -> Path:
    path = tmp_path / "style.css"
    path.write_text(SHEET)
    return path


class TestMatchCommand:
    def test_depth_match(self) -> None:
        result = CliRunner().invoke(cli, ["match", "* depth(1)", "root element depth(2)"])
        assert result.exit_code == 0
        assert "match" in result.output

    def test_no_match(self) -> None:
        result = CliRunner().invoke(cli, ["match", "root", "root *"])
        assert result.exit_code == 1
        assert "no match" in result.output

    def test_invalid_token(self) -> None:
        result = CliRunner().invoke(cli, ["match", "a&b", "root"])
        assert result.exit_code == 2


class TestInspectCommand:
    def test_lists_rules(self, sheet: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(sheet)])
        assert result.exit_code == 0
        assert "Rules: 3" in result.output
        assert "fontsize: 14" in result.output

    def test_parse_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.css"
        bad.write_text("root {{{")
        result = CliRunner().invoke(cli, ["inspect", str(bad)])
        assert result.exit_code == 1

    def test_nonexistent_file(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "/nonexistent/style.css"])
        assert result.exit_code != 0


class TestResolveCommand:
    def test_resolves_path(self, sheet: Path) -> None:
        result = CliRunner().invoke(cli, ["resolve", str(sheet), "root", "element", "activity"])
        assert result.exit_code == 0
        assert "fontsize: 14" in result.output

    def test_with_stereotype(self, sheet: Path) -> None:
        result = CliRunner().invoke(
            cli, ["resolve", str(sheet), "root", "element", "--stereotype", "<<foo>>"]
        )
        assert result.exit_code == 0
        assert "linecolor: red" in result.output

    def test_no_style(self, sheet: Path) -> None:
        result = CliRunner().invoke(cli, ["resolve", str(sheet), "note"])
        assert result.exit_code == 1

    def test_verbose_flag(self, sheet: Path) -> None:
        result = CliRunner().invoke(cli, ["-v", "resolve", str(sheet), "root"])
        assert result.exit_code == 0
