"""2024 day 6: a patrolling guard and the obstacles that trap it in a loop."""

from __future__ import annotations

import argparse
import time
from bisect import bisect_left, bisect_right, insort
from dataclasses import dataclass, field
from pathlib import Path

from .direction import Direction
from .inputs import read_input
from .matrix import TraversableMatrix, UVec2

_ROTATIONS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def get_starting_position(matrix: TraversableMatrix) -> UVec2:
    """The position of the guard, marked ``^``."""
    for y, row in enumerate(matrix.grid):
        for x, cell in enumerate(row):
            if cell == "^":
                return UVec2(x, y)
    raise ValueError("could not find starting position")


def get_rotated_direction(direction: Direction) -> Direction:
    """The direction after a right turn; diagonals turn to ``UP``."""
    return _ROTATIONS.get(direction, Direction.UP)


def get_distinct_visited_positions(matrix: TraversableMatrix) -> list[UVec2]:
    """Walk the guard off the grid, marking visited cells with ``X``.

    Returns every newly visited position in order, excluding the start.
    """
    start = get_starting_position(matrix)
    matrix.set_position(start.x, start.y)
    matrix.grid[start.y][start.x] = "X"
    direction = Direction.UP
    visited: list[UVec2] = []

    while (cell := matrix.peek_in_dir(direction)) is not None:
        if cell == "#":
            direction = get_rotated_direction(direction)
            continue
        matrix.move_in_dir(direction)
        if cell == ".":
            visited.append(matrix.position)
        matrix.grid[matrix.position.y][matrix.position.x] = "X"

    return visited


@dataclass
class Obstacle:
    """An obstacle and the directions it has been hit from, as a bit set."""

    position: UVec2 = field(default_factory=lambda: UVec2(0, 0))
    collision_directions: int = 0


class MatrixObstacles:
    """Obstacles of a grid, indexed by row and column for fast lookups."""

    def __init__(self, matrix: TraversableMatrix) -> None:
        self.width = matrix.width
        self.obstacles = [Obstacle() for _ in range(matrix.width * matrix.height)]
        self.by_y: list[list[int]] = [[] for _ in range(matrix.height)]
        self.by_x: list[list[int]] = [[] for _ in range(matrix.width)]
        self.visited_indices: list[int] = []
        for y, row in enumerate(matrix.grid):
            for x, cell in enumerate(row):
                if cell == "#":
                    self.insert_obstacle(x, y)

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def find_obstacle(self, pos: UVec2, direction: Direction) -> int | None:
        """Index of the first obstacle met walking from ``pos``, if any."""
        if direction is Direction.UP:
            column = self.by_x[pos.x]
            i = bisect_left(column, pos.y) - 1
            return self._index(pos.x, column[i]) if i >= 0 else None
        if direction is Direction.DOWN:
            column = self.by_x[pos.x]
            i = bisect_right(column, pos.y)
            return self._index(pos.x, column[i]) if i < len(column) else None
        if direction is Direction.LEFT:
            row = self.by_y[pos.y]
            i = bisect_left(row, pos.x) - 1
            return self._index(row[i], pos.y) if i >= 0 else None
        if direction is Direction.RIGHT:
            row = self.by_y[pos.y]
            i = bisect_right(row, pos.x)
            return self._index(row[i], pos.y) if i < len(row) else None
        return None

    def has_loop(self, starting_position: UVec2, starting_direction: Direction) -> bool:
        """Whether a guard starting here is trapped in a loop.

        A loop is found when an obstacle is hit twice from the same direction.
        """
        pos = starting_position
        direction = starting_direction

        while (index := self.find_obstacle(pos, direction)) is not None:
            bitmask = 2 << direction.value
            obstacle = self.obstacles[index]
            if obstacle.collision_directions & bitmask:
                return True
            obstacle.collision_directions |= bitmask
            self.visited_indices.append(index)

            x, y = pos.x, pos.y
            if direction is Direction.RIGHT:
                x = obstacle.position.x - 1
            elif direction is Direction.LEFT:
                x = obstacle.position.x + 1
            elif direction is Direction.UP:
                y = obstacle.position.y + 1
            elif direction is Direction.DOWN:
                y = obstacle.position.y - 1
            pos = UVec2(x, y)
            direction = get_rotated_direction(direction)

        return False

    def insert_obstacle(self, x: int, y: int) -> None:
        self.obstacles[self._index(x, y)].position = UVec2(x, y)
        insort(self.by_y[y], x)
        insort(self.by_x[x], y)

    def remove_obstacle(self, x: int, y: int) -> None:
        obstacle = self.obstacles[self._index(x, y)]
        obstacle.position = UVec2(0, 0)
        obstacle.collision_directions = 0
        if x in self.by_y[y]:
            self.by_y[y].remove(x)
        if y in self.by_x[x]:
            self.by_x[x].remove(y)

    def reset_collisions(self) -> None:
        for index in self.visited_indices:
            self.obstacles[index].collision_directions = 0
        self.visited_indices.clear()


def part_1(text: str) -> str:
    matrix = TraversableMatrix.from_str(text)
    # the starting position counts too
    return str(len(get_distinct_visited_positions(matrix)) + 1)


def part_2(text: str) -> str:
    matrix = TraversableMatrix.from_str(text)
    start = get_starting_position(matrix)
    candidates = get_distinct_visited_positions(matrix)
    obstacles = MatrixObstacles(matrix)
    loops = 0
    for pos in candidates:
        obstacles.insert_obstacle(pos.x, pos.y)
        if obstacles.has_loop(start, Direction.UP):
            loops += 1
        obstacles.remove_obstacle(pos.x, pos.y)
        obstacles.reset_collisions()
    return str(loops)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2024 day 6.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2024", "06", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()