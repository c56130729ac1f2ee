"""Tests for the classwalk command line."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from classwalk import __version__
from classwalk.cli import app
from classwalk.exceptions import ClasswalkError

runner = CliRunner()


class TestScan:
    """Tests for the scan command."""

    def test_prints_qualified_names(self, tmp_path):
        root = tmp_path / "com" / "example"
        (root / "sub").mkdir(parents=True)
        (root / "Foo.class").touch()
        (root / "sub" / "Bar.class").touch()
        (root / "notes.txt").touch()

        result = runner.invoke(app, [str(root), "com.example"])

        assert result.exit_code == 0
        assert "com.example.Foo" in result.output
        assert "com.example.sub.Bar" in result.output
        assert "notes" not in result.output
        assert "Found 2 classes" in result.output

    def test_mismatched_package_exits_with_error(self, tmp_path):
        root = tmp_path / "org" / "other"
        root.mkdir(parents=True)

        result = runner.invoke(app, [str(root), "com.example"])

        assert result.exit_code == 1
        assert "does not end with com.example" in result.output

    def test_missing_root_exits_with_error(self, tmp_path):
        root = tmp_path / "com" / "example"

        result = runner.invoke(app, [str(root), "com.example"])

        assert result.exit_code == 1
        assert "Filesystem error" in result.output

    def test_permission_error_exits_with_error(self, tmp_path):
        root = tmp_path / "com" / "example"
        root.mkdir(parents=True)

        def failing_walk(self, top_down=True, on_error=None, follow_symlinks=False):
            on_error(PermissionError(13, "Permission denied", str(self)))
            yield self, [], []

        with patch.object(Path, "walk", failing_walk):
            result = runner.invoke(app, [str(root), "com.example"])

        assert result.exit_code == 1
        assert "Permission denied" in result.output

    def test_other_classwalk_error_exits_with_error(self, tmp_path):
        root = tmp_path / "com" / "example"
        root.mkdir(parents=True)

        with patch("classwalk.cli.PathVisitor", side_effect=ClasswalkError("boom")):
            result = runner.invoke(app, [str(root), "com.example"])

        assert result.exit_code == 1
        assert "Error: boom" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"classwalk {__version__}" in result.output
