import pytest

from aocsolutions.y2023_day23 import main, manhattan_distance, parse_matrix, part_1, part_2

EXAMPLE = """#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#"""


def test_part_1_example():
    assert part_1(EXAMPLE) == "94"


def test_part_2_example():
    assert part_2(EXAMPLE) == "154"


def test_parse_matrix_shape():
    grid = parse_matrix(EXAMPLE)
    assert len(grid) == 23
    assert all(len(row) == 23 for row in grid)
    assert grid[0][1] == "."
    assert grid[3][10] == ">"


def test_manhattan_distance_is_symmetric():
    a, b = (2, 5), (7, 1)
    assert manhattan_distance(a, b) == manhattan_distance(b, a)
    assert manhattan_distance(a, a) == 0


@pytest.mark.parametrize("grid", ["#.#\n#.#\n#.#", "#.#\n#v#\n#.#"])
def test_straight_corridor(grid):
    assert part_1(grid) == "2"
    assert part_2(grid) == "2"


def test_uphill_slope_blocks_only_part_1():
    grid = "#.#\n#^#\n#.#"
    assert part_1(grid) == "0"
    assert part_2(grid) == "2"


def test_part_2_at_least_part_1():
    assert int(part_2(EXAMPLE)) >= int(part_1(EXAMPLE))


def test_main_reads_input(tmp_path, capsys):
    inputs = tmp_path / "inputs"
    inputs.mkdir()
    (inputs / "year2023_day23.txt").write_text(EXAMPLE + "\n")
    main(["--base-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "Part 1: 94" in out
    assert "Part 2: 154" in out