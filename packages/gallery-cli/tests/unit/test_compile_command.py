"""Tests for gallery compile command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
import pytest

from gallery_cli.commands.compile import compile_cmd


class TestCompileToFile:
    """Tests for compile with --output."""

    def test_compile_web_json(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """Web JSON output is a list of container nodes."""
        output_dir = tmp_path / "build"
        result = cli_runner.invoke(
            compile_cmd,
            ["--file", str(valid_gallery_yaml), "--output", str(output_dir)],
        )

        assert result.exit_code == 0
        assert "compiled web gallery" in result.output.lower()

        nodes = json.loads((output_dir / "gallery.web.json").read_text())
        assert len(nodes) == 2
        assert nodes[0] == {
            "tag": "div",
            "attributes": {"data-index": "0"},
            "children": [
                {
                    "tag": "img",
                    "attributes": {"src": "/a.jpg", "width": "200", "height": "150"},
                    "children": [],
                },
                {"tag": "span", "attributes": {}, "children": [], "text": "Cap A"},
            ],
        }
        assert [child["tag"] for child in nodes[1]["children"]] == ["img"]

    def test_compile_web_html(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """--format html writes gallery.html."""
        result = cli_runner.invoke(
            compile_cmd,
            ["-f", str(valid_gallery_yaml), "-o", str(tmp_path), "--format", "html"],
        )

        assert result.exit_code == 0
        html = (tmp_path / "gallery.html").read_text()
        assert html.splitlines() == [
            '<div data-index="0"><img src="/a.jpg" width="200" height="150">'
            "<span>Cap A</span></div>",
            '<div data-index="1"><img src="/b.jpg" width="200" height="150"></div>',
        ]

    def test_compile_native_json(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """Native JSON carries columnCount and explicit null captions."""
        result = cli_runner.invoke(
            compile_cmd,
            ["-f", str(valid_gallery_yaml), "-t", "native", "-o", str(tmp_path)],
        )

        assert result.exit_code == 0
        descriptor = json.loads((tmp_path / "gallery.native.json").read_text())
        assert descriptor == {
            "columnCount": 2,
            "items": [
                {"src": "/a.jpg", "width": 200, "height": 150, "caption": "Cap A"},
                {"src": "/b.jpg", "width": 200, "height": 150, "caption": None},
            ],
        }

    def test_compile_creates_output_directory(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """Nested output directories are created."""
        output_dir = tmp_path / "nested" / "out"
        result = cli_runner.invoke(
            compile_cmd, ["-f", str(valid_gallery_yaml), "-o", str(output_dir)]
        )

        assert result.exit_code == 0
        assert (output_dir / "gallery.web.json").exists()


class TestCompileColumns:
    """Tests for the native column count sources."""

    def test_columns_option(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """--columns sets columnCount."""
        result = cli_runner.invoke(
            compile_cmd,
            ["-f", str(valid_gallery_yaml), "-t", "native", "-o", str(tmp_path), "--columns", "4"],
        )

        assert result.exit_code == 0
        assert json.loads((tmp_path / "gallery.native.json").read_text())["columnCount"] == 4

    def test_environment_variable(
        self,
        cli_runner: CliRunner,
        valid_gallery_yaml: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """GALLERY_NATIVE_COLUMNS sets columnCount; --columns wins over it."""
        monkeypatch.setenv("GALLERY_NATIVE_COLUMNS", "3")
        args = ["-f", str(valid_gallery_yaml), "-t", "native", "-o", str(tmp_path)]

        cli_runner.invoke(compile_cmd, args)
        assert json.loads((tmp_path / "gallery.native.json").read_text())["columnCount"] == 3

        cli_runner.invoke(compile_cmd, [*args, "--columns", "6"])
        assert json.loads((tmp_path / "gallery.native.json").read_text())["columnCount"] == 6

    def test_invalid_environment_variable(
        self,
        cli_runner: CliRunner,
        valid_gallery_yaml: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """An unusable GALLERY_NATIVE_COLUMNS exits 1."""
        monkeypatch.setenv("GALLERY_NATIVE_COLUMNS", "many")

        result = cli_runner.invoke(compile_cmd, ["-f", str(valid_gallery_yaml), "-t", "native"])

        assert result.exit_code == 1
        assert "GALLERY_NATIVE_COLUMNS" in result.output

    @pytest.mark.parametrize("columns", ["0", "13"])
    def test_columns_out_of_range(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, columns: str
    ) -> None:
        """Out-of-range --columns is a usage error."""
        result = cli_runner.invoke(
            compile_cmd, ["-f", str(valid_gallery_yaml), "--columns", columns]
        )
        assert result.exit_code == 2


class TestCompileStdout:
    """Tests for compile without --output."""

    def test_native_to_stdout(self, cli_runner: CliRunner, valid_gallery_yaml: Path) -> None:
        """Without --output the descriptor is printed."""
        result = cli_runner.invoke(compile_cmd, ["-f", str(valid_gallery_yaml), "-t", "native"])

        assert result.exit_code == 0
        assert '"columnCount": 2' in result.output
        assert '"caption": null' in result.output

    def test_html_to_stdout(self, cli_runner: CliRunner, valid_gallery_yaml: Path) -> None:
        """Without --output the HTML fragment is printed."""
        result = cli_runner.invoke(compile_cmd, ["-f", str(valid_gallery_yaml), "--format", "html"])

        assert result.exit_code == 0
        assert 'data-index="1"' in result.output


class TestCompileErrors:
    """Tests for compile failures and exit codes."""

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """A missing file exits 2."""
        result = cli_runner.invoke(compile_cmd, ["--file", str(tmp_path / "nonexistent.yaml")])

        assert result.exit_code == 2
        assert "not found" in result.output.lower()

    def test_invalid_file(
        self, cli_runner: CliRunner, invalid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """An invalid gallery exits 1 and writes nothing."""
        output_dir = tmp_path / "build"
        result = cli_runner.invoke(
            compile_cmd, ["-f", str(invalid_gallery_yaml), "-o", str(output_dir)]
        )

        assert result.exit_code == 1
        assert "images[1]" in result.output
        assert not output_dir.exists()

    def test_html_requires_web_target(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path
    ) -> None:
        """--format html with the native target is rejected."""
        result = cli_runner.invoke(
            compile_cmd, ["-f", str(valid_gallery_yaml), "-t", "native", "--format", "html"]
        )

        assert result.exit_code == 1
        assert "web target" in result.output

    def test_output_path_is_a_file(
        self, cli_runner: CliRunner, valid_gallery_yaml: Path, tmp_path: Path
    ) -> None:
        """An --output that names an existing file exits 2 instead of crashing."""
        blocker = tmp_path / "build"
        blocker.write_text("not a directory")

        result = cli_runner.invoke(
            compile_cmd, ["-f", str(valid_gallery_yaml), "-o", str(blocker)]
        )

        assert result.exit_code == 2
        assert not isinstance(result.exception, FileExistsError)
        assert "Cannot write to" in result.output

    def test_unknown_target(self, cli_runner: CliRunner, valid_gallery_yaml: Path) -> None:
        """Unknown targets are rejected by click."""
        result = cli_runner.invoke(compile_cmd, ["-f", str(valid_gallery_yaml), "-t", "tv"])
        assert result.exit_code == 2
