from __future__ import annotations

from pathlib import Path

from linesheet.cli import main as cli_main

"""CLI exit code contract: 0 success, 1 fatal (config / unreadable file), 2 parse failure."""


def test_exit_code_success(write_csv, client_csv, capsys):
    p = write_csv(client_csv)
    code = cli_main([str(p)])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO loaded 3 client line sheet items" in out
    assert "SUMMARY variant=client items=3/3 page=1/1" in out
    assert "Categories: All, Tops, Bottoms" in out


def test_exit_code_missing_file(temp_workdir: Path, capsys):
    code = cli_main([str(temp_workdir / "nope.csv")])
    assert code == 1
    assert "ERROR cannot read" in capsys.readouterr().out


def test_exit_code_bad_config(write_csv, client_csv, temp_workdir: Path, capsys):
    p = write_csv(client_csv)
    code = cli_main([str(p), "--config", str(temp_workdir / "config" / "missing.yml")])
    assert code == 1
    assert "ERROR config:" in capsys.readouterr().out


def test_exit_code_parse_failure(write_csv, capsys):
    p = write_csv('name,category\n"unterminated,Tops\n')
    code = cli_main([str(p)])
    out = capsys.readouterr().out
    assert code == 2
    assert "ERROR Error parsing CSV file. Please check the file format." in out
