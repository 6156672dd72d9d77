import sys

import pytest

import build_history


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["build_history.py", *args])
    build_history.main()


def test_writes_all_formats(tmp_path, monkeypatch):
    export = tmp_path / "history.txt"
    export.write_text(
        "15/01/2024 BA1 Outbound LHR 0 CDG\n20/01/2024 BA2 Inbound CDG 0 LHR\n",
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"
    run_cli(monkeypatch, "--input", str(export), "--output-dir", str(out_dir), "--quiet")

    assert sorted(p.name for p in out_dir.iterdir()) == [
        "UK_Travel_History.xlsx", "travel_history.json", "trips.csv", "trips.txt",
    ]


def test_dry_run_writes_nothing(tmp_path, monkeypatch, capsys):
    table = tmp_path / "trips.csv"
    table.write_text("Date Out,Date In\n15/01/2024,20/01/2024\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    run_cli(monkeypatch, "--table", str(table), "--output-dir", str(out_dir), "--dry-run", "--quiet")

    assert not out_dir.exists()
    assert "1 trips, 4 full days outside UK" in capsys.readouterr().out


def test_import_errors_exit_nonzero(tmp_path, monkeypatch, capsys):
    table = tmp_path / "trips.csv"
    table.write_text("Date Out,Date In\n20/01/2024,15/01/2024\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "--table", str(table), "--output-dir", str(tmp_path), "--quiet")
    assert excinfo.value.code == 1
    assert "Row 2: Departure date is after return date" in capsys.readouterr().err


def test_non_utf8_export_exits_nonzero(tmp_path, monkeypatch, capsys):
    export = tmp_path / "history.txt"
    export.write_bytes("15/01/2024 BA1 Outbound LHR 0 ZRH Zürich\n".encode("cp1252"))
    out_dir = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "--input", str(export), "--output-dir", str(out_dir), "--quiet")
    assert excinfo.value.code == 1
    assert not out_dir.exists()
    assert "File is not valid UTF-8 text" in capsys.readouterr().err
