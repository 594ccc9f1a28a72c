"""2023 day 18: area of a dug-out lagoon."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from pathlib import Path

from .inputs import read_input

_LETTER_DIRECTIONS = {"R": (1, 0), "D": (0, 1), "L": (-1, 0), "U": (0, -1)}
_HEX_DIRECTIONS = {"0": (1, 0), "1": (0, 1), "2": (-1, 0), "3": (0, -1)}


@dataclass(frozen=True)
class Line:
    """One straight dig: where it starts, how long it is and which way it goes."""

    pos: tuple[int, int]
    length: int
    direction: tuple[int, int]


def _lookup(table: dict[str, tuple[int, int]], key: str) -> tuple[int, int]:
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"unknown direction {key!r}") from None


def parse_lines(text: str, hex_mode: bool) -> tuple[list[Line], int]:
    """Parse the dig plan; return the lines and the largest y reached."""
    x, y = 0, 0
    max_y = 0
    lines: list[Line] = []
    for row in text.splitlines():
        direction_str, length_str, hex_str = row.split()
        if hex_mode:
            length = int(hex_str[2:7], 16)
            direction = _lookup(_HEX_DIRECTIONS, hex_str[7:8])
        else:
            length = int(length_str)
            direction = _lookup(_LETTER_DIRECTIONS, direction_str)
        lines.append(Line((x, y), length, direction))
        x += length * direction[0]
        y += length * direction[1]
        max_y = max(max_y, y)
    return lines, max_y


def surface_area(lines: list[Line], max_y: int) -> int:
    """Area covered by the loop of lines, counting each cell fully."""
    area = 0
    for line in lines:
        height = max_y - line.pos[1] + 1
        if line.direction == (1, 0):
            area += height * line.length
        elif line.direction == (-1, 0):
            area -= height * line.length
        elif line.direction not in ((0, 1), (0, -1)):
            raise ValueError(f"unexpected direction {line.direction}")
    # the points are cell centres; add the half of the border outside them
    area += sum(line.length for line in lines) // 2 + 1
    return area


def part_1(text: str) -> str:
    return str(surface_area(*parse_lines(text, False)))


def part_2(text: str) -> str:
    return str(surface_area(*parse_lines(text, True)))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 18.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "18", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()