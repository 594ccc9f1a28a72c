"""2023 day 21: garden plots reachable in an exact number of steps."""

from __future__ import annotations

import argparse
import time
from collections import deque
from pathlib import Path

from .inputs import read_input

_TOTAL_STEPS = 26501365


def parse_matrix(text: str) -> tuple[list[list[str]], tuple[int, int]]:
    """Parse the garden; return the grid and the ``(x, y)`` of ``S``.

    The start cell is replaced by an ordinary plot.
    """
    grid = [list(line) for line in text.splitlines()]
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "S":
                row[x] = "."
                return grid, (x, y)
    raise ValueError("no starting position 'S' in the map")


def part_1(text: str, target_steps: int) -> str:
    """Count plots that can be reached in exactly ``target_steps`` steps."""
    grid, start = parse_matrix(text)
    height = len(grid)
    width = len(grid[0])
    parity = target_steps % 2
    seen = {start}
    queue = deque([(start, 0)])
    reachable = 0

    while queue:
        (x, y), step = queue.popleft()
        if step % 2 == parity:
            reachable += 1
        if step == target_steps:
            continue
        for nx, ny in ((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)):
            if (
                0 <= nx < width
                and 0 <= ny < height
                and (nx, ny) not in seen
                and grid[ny][nx] != "#"
            ):
                seen.add((nx, ny))
                queue.append(((nx, ny), step + 1))

    return str(reachable)


def count_positions(grid, start, steps) -> int:
    """Number of plots occupied after exactly ``steps`` steps from ``start``.

    ``start`` is a ``(row, column)`` pair and the walk stays inside the map.
    """
    positions = {tuple(start)}
    last_row = len(grid) - 1
    for _ in range(steps):
        new_positions: set[tuple[int, int]] = set()
        for y, x in positions:
            if y > 0 and grid[y - 1][x] == ".":
                new_positions.add((y - 1, x))
            if y < last_row and grid[y + 1][x] == ".":
                new_positions.add((y + 1, x))
            if x > 0 and grid[y][x - 1] == ".":
                new_positions.add((y, x - 1))
            if x < len(grid[y]) - 1 and grid[y][x + 1] == ".":
                new_positions.add((y, x + 1))
        positions = new_positions
    return len(positions)


def part_2(text: str) -> str:
    """Plots reachable in 26501365 steps on an infinitely tiled square map.

    Relies on the map being square with the start in its centre and clear
    lines from the start to the edges.
    """
    grid, start = parse_matrix(text)
    size = len(grid)
    grid_size = _TOTAL_STEPS // size - 1

    even_maps = ((grid_size + 1) // 2 * 2) ** 2
    odd_maps = (grid_size // 2 * 2 + 1) ** 2

    odd_points = count_positions(grid, start, size * 2 + 1)
    even_points = count_positions(grid, start, size * 2)
    full = odd_points * odd_maps + even_points * even_maps

    sx, sy = start
    corners = (
        count_positions(grid, (size - 1, sy), size - 1)
        + count_positions(grid, (sx, 0), size - 1)
        + count_positions(grid, (0, sy), size - 1)
        + count_positions(grid, (sx, size - 1), size - 1)
    )

    diagonal_starts = ((size - 1, 0), (0, 0), (0, size - 1), (size - 1, size - 1))
    small = (grid_size + 1) * sum(
        count_positions(grid, corner, size // 2 - 1) for corner in diagonal_starts
    )
    big = grid_size * sum(
        count_positions(grid, corner, size * 3 // 2 - 1) for corner in diagonal_starts
    )

    return str(full + corners + small + big)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 21.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "21", args.base_dir)

    print()
    for label, solve in (("Part 1", lambda t: part_1(t, 64)), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()