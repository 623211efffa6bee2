"""
Integration tests for file-to-file résumé rendering.

Covers render_cv_file() and the scripts/render_cv.py command line.
"""

import importlib.util
import json
import shutil
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from vitae.contexts.rendering import TextStyle, render_cv_file, render_text

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "render_cv.py"


def _load_cli():
    module_spec = importlib.util.spec_from_file_location("render_cv", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def cv_dir(tmp_path):
    directory = tmp_path / "cv"
    directory.mkdir()
    shutil.copy(FIXTURES_PATH / "resume.json", directory / "cv.json")
    return directory


@pytest.fixture
def cli(cv_dir, monkeypatch):
    module = _load_cli()
    monkeypatch.setattr(module, "CV_DIR", cv_dir)
    monkeypatch.delenv("TEXT_STYLE_PATH", raising=False)
    yield module
    # Drop sinks bound to the runner's captured stdout
    logger.remove()


@pytest.mark.integration
def test_text_render_writes_document(cv_dir):
    result = render_cv_file(cv_dir / "cv.json", cv_dir / "cv.txt")

    text = (cv_dir / "cv.txt").read_text(encoding="utf-8")
    assert result.output_format == "text"
    assert result.characters == len(text)
    assert result.sections[0] == "header"
    assert "references" in result.sections
    assert text.startswith("Ada Lovelace - Software Engineer\n")
    assert text.endswith("The Enchantress of Numbers.\n")


@pytest.mark.integration
def test_text_render_matches_in_memory_render(cv_dir):
    render_cv_file(cv_dir / "cv.json", cv_dir / "cv.txt")

    raw = json.loads((cv_dir / "cv.json").read_text(encoding="utf-8"))
    assert (cv_dir / "cv.txt").read_text(encoding="utf-8") == render_text(raw)


@pytest.mark.integration
def test_text_render_fixture_content(cv_dir):
    render_cv_file(cv_dir / "cv.json", cv_dir / "cv.txt")
    text = (cv_dir / "cv.txt").read_text(encoding="utf-8")

    assert "Principal Engineer at Analytical Engines Ltd (2021-03-Present)\n" in text
    assert "Engineer at Difference Co (2016-09-01-2021-02-28)\n" in text
    assert "  - Designed the first published algorithm intended to be carried out by a\n    machine\n" in text
    education = "BSc in Mathematics, University of London (2012-2016)"
    assert f"{education}\n{'-' * len(education)}\nScore: First\n" in text
    assert "- X - https://x.com/adalovelace\n" in text
    assert all(len(line) <= 80 for line in text.split("\n"))


@pytest.mark.integration
def test_text_render_with_style(cv_dir):
    render_cv_file(cv_dir / "cv.json", cv_dir / "narrow.txt", style=TextStyle(width=40, present_label="now"))
    text = (cv_dir / "narrow.txt").read_text(encoding="utf-8")

    assert "(2021-03-now)" in text
    long_lines = [line for line in text.split("\n") if len(line) > 40]
    # Only unwrapped headers, rules and profile lines may exceed the width
    assert all(not line.startswith(("  - ", "    ")) for line in long_lines)


@pytest.mark.integration
def test_html_render_writes_document(cv_dir):
    result = render_cv_file(cv_dir / "cv.json", cv_dir / "out" / "cv.html", output_format="html")

    html = result.output_path.read_text(encoding="utf-8")
    assert result.output_format == "html"
    assert "<h1>Ada Lovelace</h1>" in html
    assert '<meta name="twitter:creator" content="@adalovelace">' in html


@pytest.mark.integration
def test_unknown_format_rejected(cv_dir):
    with pytest.raises(ValueError, match="Invalid output format"):
        render_cv_file(cv_dir / "cv.json", cv_dir / "cv.pdf", output_format="pdf")


@pytest.mark.integration
def test_invalid_json_writes_nothing(tmp_path):
    source = tmp_path / "cv.json"
    source.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        render_cv_file(source, tmp_path / "cv.txt")

    assert not (tmp_path / "cv.txt").exists()


class TestCli:
    """scripts/render_cv.py"""

    @pytest.mark.integration
    def test_text_defaults(self, cli, cv_dir, tmp_path):
        result = CliRunner().invoke(cli.app, ["text", "--log-dir", str(tmp_path / "logs")])

        assert result.exit_code == 0, result.output
        assert "Wrote " in result.output
        assert "cv.txt" in result.output
        assert (cv_dir / "cv.txt").read_text(encoding="utf-8").startswith("Ada Lovelace")
        assert (tmp_path / "logs" / "render.log").exists()

    @pytest.mark.integration
    def test_no_log_file_without_log_dir(self, cli, cv_dir, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli.app, ["text"])

        assert result.exit_code == 0, result.output
        assert (cv_dir / "cv.txt").exists()
        assert sorted(p.name for p in tmp_path.rglob("*") if p.is_file()) == ["cv.json", "cv.txt"]

    @pytest.mark.integration
    def test_text_positional_paths(self, cli, cv_dir, tmp_path):
        shutil.copy(cv_dir / "cv.json", cv_dir / "other.json")
        result = CliRunner().invoke(
            cli.app, ["text", "other.json", "other.txt", "--log-dir", str(tmp_path / "logs")]
        )

        assert result.exit_code == 0, result.output
        assert (cv_dir / "other.txt").exists()

    @pytest.mark.integration
    def test_text_style_option(self, cli, cv_dir, tmp_path):
        style = tmp_path / "style.yaml"
        style.write_text("present_label: ongoing\n", encoding="utf-8")
        result = CliRunner().invoke(
            cli.app, ["text", "--style", str(style), "--log-dir", str(tmp_path / "logs")]
        )

        assert result.exit_code == 0, result.output
        assert "(2021-03-ongoing)" in (cv_dir / "cv.txt").read_text(encoding="utf-8")

    @pytest.mark.integration
    def test_html_defaults(self, cli, cv_dir, tmp_path):
        result = CliRunner().invoke(cli.app, ["html", "--log-dir", str(tmp_path / "logs")])

        assert result.exit_code == 0, result.output
        assert (cv_dir / "cv.html").exists()

    @pytest.mark.integration
    def test_missing_input_fails(self, cli, cv_dir, tmp_path):
        result = CliRunner().invoke(cli.app, ["text", "absent.json", "--log-dir", str(tmp_path / "logs")])

        assert result.exit_code != 0
        assert isinstance(result.exception, FileNotFoundError)
        assert not (cv_dir / "cv.txt").exists()

    @pytest.mark.integration
    def test_no_command_shows_help(self, cli):
        result = CliRunner().invoke(cli.app, [])

        assert result.exit_code == 0
        assert "text" in result.output and "html" in result.output
