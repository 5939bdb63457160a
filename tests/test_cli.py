"""Tests for the command line entry point."""

from typer.testing import CliRunner

from mdtotex.cli import app

runner = CliRunner()


def test_converts_file(tmp_path) -> None:
    source = tmp_path / "doc.md"
    source.write_text("# Title\n### Intro\n\nSome *text*.\n", encoding="utf-8")
    result = runner.invoke(app, ["--filename", str(source)])
    assert result.exit_code == 0
    assert "\\section{Intro}\n" in result.stdout
    assert "Some \\textbf{text}.\n" in result.stdout
    assert "Title" not in result.stdout


def test_bad_line_does_not_stop_the_run(tmp_path) -> None:
    source = tmp_path / "doc.md"
    source.write_bytes(b"first\n\xff\xfe\nlast\n")
    result = runner.invoke(app, ["-f", str(source)])
    assert result.exit_code == 0
    assert "first\n" in result.stdout
    assert "last\n" in result.stdout


def test_missing_file_is_fatal(tmp_path) -> None:
    result = runner.invoke(app, ["-f", str(tmp_path / "missing.md")])
    assert result.exit_code == 1


def test_filename_is_required() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code != 0
