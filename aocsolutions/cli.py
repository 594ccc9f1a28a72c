"""Command line for creating, running and testing daily puzzle solutions."""

from __future__ import annotations

import shutil
import subprocess
import sys
import time
from pathlib import Path
from string import Template

PACKAGE = "aocsolutions"
_WATCHER = "ptw"
_WATCHER_DISTRIBUTION = "pytest-watch"

_MODULE_TEMPLATE = Template('''"""$year day $day."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .inputs import read_input


def part_1(text: str) -> str:
    return ""


def part_2(text: str) -> str:
    return ""


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve $year day $day.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("$year", "$day", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()
''')


def _module_name(year: str, day: str) -> str:
    return f"y{year}_day{day}"


def new_day(year, day, base_dir=None) -> list[Path]:
    """Create an empty solution module and input file for a day.

    Nothing is changed if either already exists. Returns the created paths.
    """
    root = Path.cwd() if base_dir is None else Path(base_dir)
    module_path = root / PACKAGE / f"{_module_name(year, day)}.py"
    input_path = root / "inputs" / f"year{year}_day{day}.txt"

    if module_path.exists() or input_path.exists():
        print("Task already exists, exiting without changing anything.")
        return []

    module_path.parent.mkdir(parents=True, exist_ok=True)
    module_path.write_text(_MODULE_TEMPLATE.substitute(year=year, day=day), encoding="utf-8")
    print(f"Created {module_path}")

    input_path.parent.mkdir(parents=True, exist_ok=True)
    input_path.write_text("", encoding="utf-8")
    print(f"Created {input_path}")

    return [module_path, input_path]


def run_day(year, day) -> int:
    """Run a day's solution; return its exit status."""
    command = [sys.executable, "-m", f"{PACKAGE}.{_module_name(year, day)}"]
    return subprocess.run(command).returncode


def watch_tests(year, day) -> int:
    """Re-run a day's tests on every change, installing the watcher if missing."""
    if shutil.which(_WATCHER) is None:
        print(f"{_WATCHER} missing. Installing now...")
        time.sleep(3)
        status = subprocess.run(
            [sys.executable, "-m", "pip", "install", _WATCHER_DISTRIBUTION]
        ).returncode
        print(f"{_WATCHER} installed. Please run command again")
        return status
    test_file = f"tests/test_{_module_name(year, day)}.py"
    return subprocess.run([_WATCHER, "--", test_file]).returncode


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Expected two arguments - year and day", file=sys.stderr)
        return 1

    year, day = args[0], args[1]
    command = args[2] if len(args) == 3 else ""

    if command == "new":
        new_day(year, day)
        return 0
    if command == "test":
        return watch_tests(year, day)
    if command in ("", "run"):
        return run_day(year, day)
    print(f"Unrecognised command '{command}'", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())