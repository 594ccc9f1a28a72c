"""2024 day 1: distances and similarity between two lists."""

from __future__ import annotations

import argparse
import time
from collections import Counter
from pathlib import Path

from .inputs import read_input


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Parse the two columns, each returned sorted."""
    pairs = [line.split("   ", 1) for line in text.splitlines()]
    left = sorted(int(a) for a, _ in pairs)
    right = sorted(int(b) for _, b in pairs)
    return left, right


def part_1(text: str) -> str:
    left, right = parse_lists(text)
    return str(sum(abs(a - b) for a, b in zip(left, right)))


def part_2(text: str) -> str:
    left, right = parse_lists(text)
    occurrences = Counter(right)
    return str(sum(x * occurrences[x] for x in left))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2024 day 1.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2024", "01", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()