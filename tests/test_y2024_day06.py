import pytest

from aocsolutions.direction import Direction
from aocsolutions.matrix import TraversableMatrix, UVec2
from aocsolutions.y2024_day06 import (
    MatrixObstacles,
    get_distinct_visited_positions,
    get_rotated_direction,
    get_starting_position,
    part_1,
    part_2,
)

SAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""

LOOP_GRID = """\
.#..
...#
#...
..#."""


def test_part_1():
    assert part_1(SAMPLE) == "41"


def test_part_2():
    assert part_2(SAMPLE) == "6"


def test_starting_position():
    assert get_starting_position(TraversableMatrix.from_str(SAMPLE)) == UVec2(4, 6)


def test_starting_position_missing_raises():
    with pytest.raises(ValueError):
        get_starting_position(TraversableMatrix.from_str("...\n..."))


@pytest.mark.parametrize(
    "before, after",
    [
        (Direction.UP, Direction.RIGHT),
        (Direction.RIGHT, Direction.DOWN),
        (Direction.DOWN, Direction.LEFT),
        (Direction.LEFT, Direction.UP),
        (Direction.UP_LEFT, Direction.UP),
    ],
)
def test_rotation(before, after):
    assert get_rotated_direction(before) == after


def test_distinct_positions_marks_grid():
    matrix = TraversableMatrix.from_str(SAMPLE)
    visited = get_distinct_visited_positions(matrix)
    assert len(visited) == 40
    assert len(set(visited)) == 40
    assert sum(row.count("X") for row in matrix.grid) == 41


def test_find_obstacle():
    obstacles = MatrixObstacles(TraversableMatrix.from_str("#..\n...\n..#"))
    assert obstacles.find_obstacle(UVec2(0, 2), Direction.UP) == 0
    assert obstacles.find_obstacle(UVec2(0, 2), Direction.RIGHT) == 8
    assert obstacles.find_obstacle(UVec2(2, 0), Direction.DOWN) == 8
    assert obstacles.find_obstacle(UVec2(2, 0), Direction.LEFT) == 0
    assert obstacles.find_obstacle(UVec2(1, 1), Direction.UP) is None


def test_has_loop_and_reset():
    obstacles = MatrixObstacles(TraversableMatrix.from_str(LOOP_GRID))
    assert obstacles.has_loop(UVec2(1, 2), Direction.UP) is True
    obstacles.reset_collisions()
    assert all(o.collision_directions == 0 for o in obstacles.obstacles)
    assert obstacles.visited_indices == []


def test_no_loop_on_empty_grid():
    obstacles = MatrixObstacles(TraversableMatrix.from_str("...\n...\n..."))
    assert obstacles.has_loop(UVec2(1, 1), Direction.UP) is False


def test_insert_and_remove_obstacle():
    obstacles = MatrixObstacles(TraversableMatrix.from_str("...\n...\n..."))
    obstacles.insert_obstacle(1, 0)
    assert obstacles.find_obstacle(UVec2(1, 2), Direction.UP) == 1
    obstacles.remove_obstacle(1, 0)
    assert obstacles.find_obstacle(UVec2(1, 2), Direction.UP) is None