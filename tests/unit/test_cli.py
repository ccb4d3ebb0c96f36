"""Unit tests for the dotbuild CLI."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from dotbuild import __version__
from dotbuild.cli import app

runner = CliRunner()

DESCRIPTION = {
    "name": "Data Pipeline",
    "nodes": [{"name": "a", "shape": "box"}],
    "edges": [{"from": "a", "to": "b", "color": "red"}],
}

EXPECTED_SOURCE = (
    'digraph "Data Pipeline" {\n'
    '"a" [shape="box";];\n'
    '"b" [];\n'
    '"a"->"b" [color="red";];\n'
    "}\n"
)


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """A working directory holding graph.json and no config file."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "graph.json").write_text(json.dumps(DESCRIPTION), encoding="utf-8")
    return tmp_path


def _completed(stdout: bytes) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["dot"], 0, stdout=stdout, stderr=b"")


class TestVersion:
    """Test the --version option."""

    def test_version(self):
        """Test --version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"dotbuild version {__version__}" in result.stdout


class TestSourceCommand:
    """Test the source command."""

    def test_prints_source(self, workdir):
        """Test prints source."""
        result = runner.invoke(app, ["source", "graph.json"])
        assert result.exit_code == 0
        assert result.stdout == EXPECTED_SOURCE

    def test_writes_source(self, workdir):
        """Test writes source."""
        result = runner.invoke(app, ["source", "graph.json", "--out", "graph.dot"])
        assert result.exit_code == 0
        assert (workdir / "graph.dot").read_text(encoding="utf-8") == EXPECTED_SOURCE

    def test_unwritable_output(self, workdir):
        """Test writing source into a missing directory fails cleanly."""
        result = runner.invoke(app, ["source", "graph.json", "--out", "missing/dir/graph.dot"])
        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert not isinstance(result.exception, OSError)

    def test_missing_description(self, workdir):
        """Test missing description."""
        result = runner.invoke(app, ["source", "nope.json"])
        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_invalid_description(self, workdir):
        """Test invalid description."""
        (workdir / "bad.json").write_text('{"edges": [{"from": "a"}]}', encoding="utf-8")
        result = runner.invoke(app, ["source", "bad.json"])
        assert result.exit_code == 1
        assert "Invalid graph description" in result.stdout


class TestRenderCommand:
    """Test the render command with Graphviz mocked out."""

    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_default_output_name(self, mock_run, workdir):
        """Test default output name."""
        mock_run.return_value = _completed(b"<svg/>")

        result = runner.invoke(app, ["render", "graph.json"])

        assert result.exit_code == 0, result.stdout
        assert "Graph rendered" in result.stdout
        assert (workdir / "data-pipeline.svg").read_bytes() == b"<svg/>"
        assert mock_run.call_args.args[0] == ["dot", "-Tsvg"]
        assert mock_run.call_args.kwargs["input"] == EXPECTED_SOURCE.encode("utf-8")

    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_format_engine_and_out(self, mock_run, workdir):
        """Test format engine and out."""
        mock_run.return_value = _completed(b"PNG")

        result = runner.invoke(app, [
            "render", "graph.json", "--format", "png", "--engine", "neato", "--out", "out/g.png"
        ])

        assert result.exit_code == 0, result.stdout
        assert (workdir / "out" / "g.png").read_bytes() == b"PNG"
        assert mock_run.call_args.args[0] == ["neato", "-Tpng"]

    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_config_file_settings(self, mock_run, workdir):
        """Test config file settings."""
        mock_run.return_value = _completed(b"JPG")
        (workdir / ".dotbuild.json").write_text(
            json.dumps({"render": {"format": "jpg", "timeout": 9}, "output": {"dir": "rendered"}}),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["render", "graph.json"])

        assert result.exit_code == 0, result.stdout
        assert (workdir / "rendered" / "data-pipeline.jpg").read_bytes() == b"JPG"
        assert mock_run.call_args.kwargs["timeout"] == 9

    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_missing_engine(self, mock_run, workdir):
        """Test missing engine."""
        mock_run.side_effect = FileNotFoundError("dot")

        result = runner.invoke(app, ["render", "graph.json"])

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert "Install Graphviz" in result.stdout

    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_engine_failure(self, mock_run, workdir):
        """Test engine failure."""
        mock_run.side_effect = subprocess.CalledProcessError(1, ["dot"], stderr=b"bad input")

        result = runner.invoke(app, ["render", "graph.json"])

        assert result.exit_code == 1
        assert "bad input" in result.stdout
        assert not (workdir / "data-pipeline.svg").exists()

    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_output_directory_is_a_file(self, mock_run, workdir):
        """Test rendering below a regular file reports an error."""
        mock_run.return_value = _completed(b"<svg/>")
        (workdir / "afile").write_text("", encoding="utf-8")

        result = runner.invoke(app, ["render", "graph.json", "--out", "afile/g.svg"])

        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert not isinstance(result.exception, OSError)

    def test_invalid_config(self, workdir):
        """Test invalid config."""
        (workdir / ".dotbuild.json").write_text("{oops", encoding="utf-8")

        result = runner.invoke(app, ["render", "graph.json"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.stdout

    @patch("dotbuild.cli.view")
    @patch("dotbuild.render.graphviz.subprocess.run")
    def test_open_after_render(self, mock_run, mock_view, workdir):
        """Test open after render."""
        mock_run.return_value = _completed(b"<svg/>")

        result = runner.invoke(app, ["render", "graph.json", "--open"])

        assert result.exit_code == 0, result.stdout
        mock_view.assert_called_once_with((workdir / "data-pipeline.svg").resolve())


class TestFormatsCommand:
    """Test the formats command."""

    def test_lists_formats(self):
        """Test lists formats."""
        result = runner.invoke(app, ["formats"])
        assert result.exit_code == 0
        for name in ("svg", "png", "jpg", "pdf"):
            assert name in result.stdout
