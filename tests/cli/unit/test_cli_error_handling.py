"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from microschema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["compile"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--input" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["compile", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_document_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(["compile", "--input", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Document file not found" in captured.err
    assert "Traceback" not in captured.err


def test_builder_error_returns_error_message(tmp_path: Path, capsys) -> None:
    document_path = tmp_path / "bad.yaml"
    document_path.write_text("required: name\nproperties:\n  name: string\n", encoding="utf-8")

    exit_code = main(["compile", "--input", str(document_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "'required' must be a list" in captured.err


def test_unserializable_default_returns_error_message(tmp_path: Path, capsys) -> None:
    document_path = tmp_path / "dated.yaml"
    document_path.write_text("default: 2024-01-01\nproperties:\n  name: string\n", encoding="utf-8")

    exit_code = main(["compile", "--input", str(document_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not JSON serializable" in captured.err
    assert "Traceback" not in captured.err
