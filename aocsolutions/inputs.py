"""Loading puzzle inputs from the ``inputs`` directory."""

from __future__ import annotations

from pathlib import Path


def read_input(year, day, base_dir=None) -> str:
    """Return the input for a puzzle with trailing newlines removed.

    The file is looked up as ``inputs/year<year>_day<day>.txt`` under
    ``base_dir``, which defaults to the current working directory.
    """
    root = Path.cwd() if base_dir is None else Path(base_dir)
    path = root / "inputs" / f"year{year}_day{day}.txt"
    return path.read_text(encoding="utf-8").rstrip("\n")