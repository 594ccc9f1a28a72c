import pytest

from aocsolutions.y2024_day01 import main, parse_lists, part_1, part_2

EXAMPLE = """
3   4
4   3
2   5
1   3
3   9
3   3
""".strip()


def test_part_1():
    assert part_1(EXAMPLE) == "11"


def test_part_2():
    assert part_2(EXAMPLE) == "31"


def test_parse_lists_sorted():
    left, right = parse_lists(EXAMPLE)
    assert left == sorted(left)
    assert right == sorted(right)
    assert sorted(left + right) == sorted(
        int(n) for line in EXAMPLE.splitlines() for n in line.split()
    )


def test_bad_number_raises():
    with pytest.raises(ValueError):
        part_1("3   x")


def test_main_prints_results(tmp_path, capsys):
    (tmp_path / "inputs").mkdir()
    (tmp_path / "inputs" / "year2024_day01.txt").write_text(EXAMPLE + "\n")
    main(["--base-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "Part 1: 11 (" in out
    assert "Part 2: 31 (" in out