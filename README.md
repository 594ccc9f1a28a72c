# aocsolutions

Solutions to Advent of Code puzzles: 2023 days 18 to 25 and 2024 days 1 to 6.
Each day lives in its own module, named `aocsolutions.y<YEAR>_day<DAY>`
(for example `aocsolutions.y2024_day01`). A module offers `part_1(text)` and,
where the package solves it, `part_2(text)`. They take the puzzle input as a
string and return the answer as a string.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Puzzle inputs

`aocsolutions.inputs.read_input(year, day, base_dir=None)` reads
`inputs/year<YEAR>_day<DAY>.txt` under `base_dir` (the current directory by
default) and removes trailing newlines.

Every day module can be run on its own input, printing each part's answer and
how long it took:

    python -m aocsolutions.y2024_day01
    python -m aocsolutions.y2024_day01 --base-dir /path/to/project

## The command

The `aocsolutions` command takes a year, a day and an optional action:

    aocsolutions 2024 01 new
    aocsolutions 2024 01 run
    aocsolutions 2024 01 test

- `new` writes a template module `aocsolutions/y<YEAR>_day<DAY>.py` and an
  empty `inputs/year<YEAR>_day<DAY>.txt`, both under the current directory.
  If either file already exists, nothing is changed.
- `run` (the default when no action is given) runs
  `python -m aocsolutions.y<YEAR>_day<DAY>` and returns its exit status.
- `test` runs `ptw -- tests/test_y<YEAR>_day<DAY>.py`, which re-runs the
  day's tests as files change. If `ptw` is not on the path, it installs
  `pytest-watch` with pip and asks you to run the command again.

Any other action is reported as unrecognised, and fewer than two arguments is
an error; both give exit status 1.

## Using a solution from Python

    from aocsolutions import y2024_day01

    text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"
    print(y2024_day01.part_1(text))  # 11
    print(y2024_day01.part_2(text))  # 31

Some days take extra arguments:

- `aocsolutions.y2023_day21.part_1(text, target_steps)`
- `aocsolutions.y2023_day24.part_1(text, intersection_min, intersection_max)`

The shared helpers are `aocsolutions.direction` (the `Direction` enum and
`all_directions()`) and `aocsolutions.matrix` (`UVec2` and
`TraversableMatrix`, a character grid with a movable cursor).

## What is not included

- 2023 day 24 has only `part_1`; the package has no solution for its second
  part.
- 2023 day 25 has only `part_1`, found by repeated random contraction, so its
  running time varies from run to run.
- Some second parts rely on the shape of real puzzle inputs rather than
  working for any input: 2023 day 20 expects a single conjunction feeding
  `rx` whose inputs fire periodically, and 2023 day 21 expects a square map
  with the start in its centre and clear lines to the edges.