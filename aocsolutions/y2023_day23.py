"""2023 day 23: the longest hike through the forest trails."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .inputs import read_input

_SLOPES = {">": (1, 0), "v": (0, 1), "^": (0, -1), "<": (-1, 0)}


def parse_matrix(text: str) -> list[list[str]]:
    """The trail map as rows of characters."""
    return [list(line) for line in text.splitlines()]


def manhattan_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Taxicab distance between two ``(x, y)`` points."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _neighbours(x: int, y: int) -> tuple[tuple[int, int], ...]:
    return ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))


def _can_move_to(grid: list[list[str]], visited: set[tuple[int, int]], pos: tuple[int, int]) -> bool:
    x, y = pos
    return (
        0 <= x < len(grid[0])
        and 0 <= y < len(grid)
        and pos not in visited
        and grid[y][x] != "#"
    )


def _slippery_moves(
    grid: list[list[str]], visited: set[tuple[int, int]], pos: tuple[int, int], steps: int
) -> list[tuple[tuple[int, int], int]]:
    """Where one move from ``pos`` can land; a slope pushes on one extra cell."""
    moves = []
    for x, y in _neighbours(*pos):
        if not _can_move_to(grid, visited, (x, y)):
            continue
        slope = _SLOPES.get(grid[y][x])
        if slope is None:
            moves.append(((x, y), steps + 1))
            continue
        landing = (x + slope[0], y + slope[1])
        if _can_move_to(grid, visited, landing):
            moves.append((landing, steps + 2))
    return moves


def _end_of(grid: list[list[str]]) -> tuple[int, int]:
    return len(grid[0]) - 2, len(grid) - 1


def part_1(text: str) -> str:
    """Longest hike from the top to the bottom, obeying the slopes."""
    grid = parse_matrix(text)
    start = (1, 0)
    end = _end_of(grid)
    visited = {start}
    best = 0
    frames = [(start, iter(_slippery_moves(grid, visited, start, 0)))]

    while frames:
        pos, moves = frames[-1]
        nxt = next(moves, None)
        if nxt is None:
            frames.pop()
            visited.discard(pos)
            continue
        next_pos, next_steps = nxt
        visited.add(next_pos)
        if next_pos == end:
            best = max(best, next_steps)
        frames.append((next_pos, iter(_slippery_moves(grid, visited, next_pos, next_steps))))

    return str(best)


def _shortcuts(grid: list[list[str]]) -> dict[tuple[int, int], set[tuple[tuple[int, int], int]]]:
    """Corridor lengths between the start, the end and every junction."""
    end = _end_of(grid)
    no_visits: set[tuple[int, int]] = set()
    shortcuts: dict[tuple[int, int], set[tuple[tuple[int, int], int]]] = {}

    def link(a: tuple[int, int], b: tuple[int, int], steps: int) -> None:
        shortcuts.setdefault(a, set()).add((b, steps))
        shortcuts.setdefault(b, set()).add((a, steps))

    for m_y, row in enumerate(grid):
        for m_x, cell in enumerate(row):
            if cell == "#":
                continue
            origin = (m_x, m_y)
            connections = [p for p in _neighbours(m_x, m_y) if _can_move_to(grid, no_visits, p)]
            if origin != (1, 0) and len(connections) <= 2:
                continue
            for first in connections:
                visited = {origin}
                pending = [(first, 1)]
                while pending:
                    pos, steps = pending.pop()
                    visited.add(pos)
                    if pos == end:
                        link(origin, end, steps)
                        continue
                    onward = [p for p in _neighbours(*pos) if _can_move_to(grid, visited, p)]
                    if not onward:
                        continue
                    if len(onward) > 1:
                        link(origin, pos, steps)
                    else:
                        pending.append((onward[0], steps + 1))
    return shortcuts


def part_2(text: str) -> str:
    """Longest hike from the top to the bottom, treating slopes as paths."""
    grid = parse_matrix(text)
    shortcuts = _shortcuts(grid)
    nodes = sorted(shortcuts, key=lambda pos: (pos[1], pos[0]))
    index_of = {pos: i for i, pos in enumerate(nodes)}
    graph = [
        [(index_of[target], steps) for target, steps in shortcuts[pos]] for pos in nodes
    ]

    target_idx = len(graph) - 1
    best = 0
    # visited nodes are kept as bits of an integer
    stack = [(0, 0, 0)]
    while stack:
        idx, steps, visited = stack.pop()
        if idx == target_idx:
            best = max(best, steps)
            continue
        for next_idx, next_steps in graph[idx]:
            bit = 1 << next_idx
            if not visited & bit:
                stack.append((next_idx, steps + next_steps, visited | bit))

    return str(best)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 23.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "23", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()