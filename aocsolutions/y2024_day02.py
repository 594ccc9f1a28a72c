"""2024 day 2: safe reactor reports."""

from __future__ import annotations

import argparse
import time
from itertools import pairwise
from pathlib import Path

from .inputs import read_input


def is_safe(report, skip_index=None) -> bool:
    """Whether levels strictly rise or fall by 1..3, ignoring ``skip_index``."""
    levels = (level for i, level in enumerate(report) if i != skip_index)
    increasing = None
    for a, b in pairwise(levels):
        if increasing is None:
            if a == b:
                return False
            increasing = b > a
        elif increasing and b <= a:
            return False
        elif not increasing and b >= a:
            return False
        if abs(b - a) > 3:
            return False
    return True


def _reports(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split(" ")] for line in text.splitlines()]


def part_1(text: str) -> str:
    return str(sum(is_safe(report) for report in _reports(text)))


def part_2(text: str) -> str:
    return str(
        sum(
            any(is_safe(report, skip) for skip in (None, *range(len(report))))
            for report in _reports(text)
        )
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2024 day 2.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2024", "02", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()