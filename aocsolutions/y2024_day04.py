"""2024 day 4: word search for XMAS."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .direction import Direction, all_directions
from .inputs import read_input
from .matrix import TraversableMatrix

_TARGET = "XMAS"


def part_1(text: str) -> str:
    m = TraversableMatrix.from_str(text)
    count = 0
    for y, row in enumerate(m.grid):
        for x, cell in enumerate(row):
            if cell != _TARGET[0]:
                continue
            for direction in all_directions():
                m.set_position(x, y)
                for letter in _TARGET[1:]:
                    m.move_in_dir(direction)
                    if m.cur() != letter:
                        break
                else:
                    count += 1
    return str(count)


def _is_mas_diagonal(m: TraversableMatrix, one: Direction, other: Direction) -> bool:
    ends = (m.peek_in_dir(one), m.peek_in_dir(other))
    return ends in (("S", "M"), ("M", "S"))


def part_2(text: str) -> str:
    m = TraversableMatrix.from_str(text)
    count = 0
    for y, row in enumerate(m.grid):
        for x, cell in enumerate(row):
            if cell != "A":
                continue
            m.set_position(x, y)
            if _is_mas_diagonal(m, Direction.UP_LEFT, Direction.DOWN_RIGHT) and _is_mas_diagonal(
                m, Direction.UP_RIGHT, Direction.DOWN_LEFT
            ):
                count += 1
    return str(count)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2024 day 4.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2024", "04", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()