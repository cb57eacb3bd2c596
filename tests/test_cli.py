"""Tests for the console front end, run against the in-memory store."""

from __future__ import annotations

from typer.testing import CliRunner

from topscorers.cli import app

runner = CliRunner()


def test_prints_top_scorers_and_score(tmp_path):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_text(
        "First Name,Second Name,Score\n"
        "Dee,Moore,56\n"
        "Sipho,Lolo,78\n"
        "Noosrat,Hoosain,64\n"
        '"George","Of ""The"" Jungle",78\n',
        encoding="utf-8",
    )

    result = runner.invoke(app, [str(csv_file), "--memory"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines == ['George Of "The" Jungle', "Sipho Lolo", "Score: 78"]


def test_byte_order_mark_is_ignored(tmp_path):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_bytes("\ufeffFirst Name,Second Name,Score\nDee,Moore,56\n".encode("utf-8"))

    result = runner.invoke(app, [str(csv_file), "--memory"])

    assert result.exit_code == 0
    assert "Dee Moore" in result.output


def test_missing_file_exits_with_error(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.csv"), "--memory"])
    assert result.exit_code == 1


def test_no_parsable_records_exits_cleanly(tmp_path):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_text("Name,Total\nDee,56\n", encoding="utf-8")

    result = runner.invoke(app, [str(csv_file), "--memory"])

    assert result.exit_code == 0
    assert "Score:" not in result.output


def test_undecodable_file_reports_error(tmp_path):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_bytes(b"First Name,Second Name,Score\nJos\xe9,Moore,56\n")

    result = runner.invoke(app, [str(csv_file), "--memory"])

    assert result.exit_code == 1
    assert result.output.startswith("Error: ")
    assert not isinstance(result.exception, UnicodeDecodeError)
