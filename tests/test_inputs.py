from pathlib import Path

import pytest

from aocsolutions.inputs import read_input


def _write(base: Path, year: str, day: str, content: str) -> None:
    inputs = base / "inputs"
    inputs.mkdir(exist_ok=True)
    (inputs / f"year{year}_day{day}.txt").write_text(content, encoding="utf-8")


def test_trailing_newlines_are_removed(tmp_path):
    _write(tmp_path, "2024", "01", "1 2\n3 4\n\n\n")
    assert read_input("2024", "01", tmp_path) == "1 2\n3 4"


def test_other_trailing_whitespace_is_kept(tmp_path):
    _write(tmp_path, "2023", "18", "R 6  \n")
    assert read_input("2023", "18", tmp_path) == "R 6  "


def test_leading_newlines_are_kept(tmp_path):
    _write(tmp_path, "2023", "19", "\nabc\n")
    assert read_input("2023", "19", tmp_path) == "\nabc"


def test_defaults_to_current_directory(tmp_path, monkeypatch):
    _write(tmp_path, "2024", "02", "7 6 4\n")
    monkeypatch.chdir(tmp_path)
    assert read_input("2024", "02") == "7 6 4"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input("2024", "99", tmp_path)