import pytest

from aocsolutions.y2023_day21 import count_positions, parse_matrix, part_1

SAMPLE = """
...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
""".strip()


def test_part_1():
    assert part_1(SAMPLE, 6) == "16"


def test_parse_matrix_finds_and_clears_start():
    grid, start = parse_matrix(SAMPLE)
    assert start == (5, 5)
    assert grid[5][5] == "."
    assert len(grid) == 11


def test_parse_matrix_without_start():
    with pytest.raises(ValueError):
        parse_matrix("...\n...")


def test_count_positions_matches_part_1_on_sample():
    grid, (x, y) = parse_matrix(SAMPLE)
    assert count_positions(grid, (y, x), 6) == 16


@pytest.mark.parametrize("steps, expected", [(0, 1), (1, 4), (2, 5)])
def test_count_positions_open_grid(steps, expected):
    grid = [list("..."), list("..."), list("...")]
    assert count_positions(grid, (1, 1), steps) == expected


def test_part_1_zero_steps_counts_start():
    assert part_1("...\n.S.\n...", 0) == "1"