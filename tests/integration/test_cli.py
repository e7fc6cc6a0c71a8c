"""End-to-end tests for the axisthin command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from axisthin import __version__
from axisthin.cli.app import app
from axisthin.core import build_star_forest
from axisthin.io import dump_forest, parse_path_str
from axisthin.utils import configure_logging

SQUARE = "M0 0 L10 0 L10 10 L0 10 Z"
SQUARE_HALF = "M2.5 2.5 L7.5 2.5 L7.5 7.5 L2.5 7.5 L2.5 2.5 Z"

runner = CliRunner()


@pytest.fixture(autouse=True)
def detach_console_logging():
    """Drop the console handler bound to the runner's closed stream."""
    yield
    configure_logging(quiet=True)


@pytest.fixture
def forest_file(tmp_path: Path) -> Path:
    """Star transform forest of the square written as JSON."""
    path = tmp_path / "square.json"
    dump_forest(build_star_forest(parse_path_str(SQUARE)), path)
    return path


class TestOutlineCommand:
    """Tests for the outline command."""

    def test_raw(self):
        """Test raw output is the thinned path only."""
        result = runner.invoke(app, ["-q", "outline", SQUARE, "--percent", "50", "--raw"])
        assert result.exit_code == 0
        assert result.output.strip() == SQUARE_HALF

    def test_report(self):
        """Test the full report shows both paths."""
        result = runner.invoke(app, ["-q", "outline", SQUARE, "-p", "0", "-e", "20"])
        assert result.exit_code == 0
        assert "M0 0 L10 0 L10 10 L0 10 L0 0 Z" in result.output
        assert "view box 0 0 10 10" in result.output

    def test_bad_path(self):
        """Test unparseable path data exits with an error."""
        result = runner.invoke(app, ["-q", "outline", "L0 0"])
        assert result.exit_code == 1

    def test_percent_out_of_range(self):
        """Test slider values outside 0-100 are rejected."""
        result = runner.invoke(app, ["-q", "outline", SQUARE, "--percent", "150"])
        assert result.exit_code == 2


class TestPolygonCommand:
    """Tests for the polygon command."""

    def test_raw(self):
        """Test a thinned polygon is one closed sub-path."""
        result = runner.invoke(app, ["-q", "polygon", "6", "--radius", "30", "--raw"])
        path = result.output.strip()

        assert result.exit_code == 0
        assert path.startswith("M")
        assert path.endswith("Z")
        assert path.count("M") == 1
        assert path.count("L") == 6

    def test_identity_at_zero(self):
        """Test thinning by 0% reproduces the polygon outline."""
        result = runner.invoke(app, ["-q", "polygon", "4", "-r", "10", "-p", "0", "--raw"])
        assert result.output.startswith("M0 10 ")

    def test_too_few_sides(self):
        """Test polygons need three sides."""
        result = runner.invoke(app, ["-q", "polygon", "2"])
        assert result.exit_code != 0


class TestForestCommands:
    """Tests for the thin and info commands."""

    def test_thin_raw(self, forest_file: Path):
        """Test thinning a forest read from JSON."""
        result = runner.invoke(app, ["-q", "thin", str(forest_file), "-p", "50", "--raw"])
        assert result.exit_code == 0
        assert result.output.strip() == SQUARE_HALF

    def test_thin_missing_file(self, tmp_path: Path):
        """Test a missing forest file exits with an error."""
        result = runner.invoke(app, ["-q", "thin", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_thin_invalid_file(self, tmp_path: Path):
        """Test a malformed forest file exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text('{"trees": [{"nodes": 3}]}', encoding="utf-8")
        result = runner.invoke(app, ["-q", "thin", str(path)])
        assert result.exit_code == 1

    def test_axis_raw(self, forest_file: Path):
        """Test one axis path per boundary curve, collapsed at the center."""
        result = runner.invoke(app, ["-q", "axis", str(forest_file), "--raw"])
        assert result.exit_code == 0
        assert result.output.split("\n")[:4] == ["M5 5 L5 5"] * 4

    def test_axis_missing_file(self, tmp_path: Path):
        """Test a missing forest file exits with an error."""
        result = runner.invoke(app, ["-q", "axis", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_info(self, forest_file: Path):
        """Test the forest summary."""
        result = runner.invoke(app, ["-q", "info", str(forest_file), "-e", "50"])
        assert result.exit_code == 0
        assert "Max radius" in result.output
        assert "2.5" in result.output


class TestGlyphCommand:
    """Tests for the glyph command."""

    def test_missing_font(self, tmp_path: Path):
        """Test a missing font file exits with an error."""
        result = runner.invoke(app, ["-q", "glyph", str(tmp_path / "none.ttf"), "a"])
        assert result.exit_code == 1

    def test_multiple_characters(self, tmp_path: Path):
        """Test only single characters are accepted."""
        result = runner.invoke(app, ["-q", "glyph", str(tmp_path / "none.ttf"), "ab"])
        assert result.exit_code == 1


def test_version():
    """Test --version prints the version and exits."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_log_level_case_insensitive():
    """Test level names are accepted in any case."""
    result = runner.invoke(app, ["--log-level", "debug", "-q", "outline", SQUARE, "--raw"])
    assert result.exit_code == 0
    assert result.output.strip() == SQUARE_HALF


def test_unknown_log_level():
    """Test an unknown level is a usage error."""
    result = runner.invoke(app, ["--log-level", "LOUD", "outline", SQUARE])
    assert result.exit_code == 2
