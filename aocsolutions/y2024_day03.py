"""2024 day 3: summing ``mul(a,b)`` instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re
import time
from pathlib import Path

from .inputs import read_input

_NUMBER = re.compile(r"[0-9]+")
_KEYWORD = re.compile(r"mul|do\(\)|don't\(\)")


def _expect(text: str, literal: str) -> str:
    if not text.startswith(literal):
        raise ValueError(f"expected {literal!r}")
    return text[len(literal):]


def _parse_uint(text: str) -> tuple[str, int]:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError("expected a number")
    return text[match.end():], int(match.group())


def parse_num_pair(text: str) -> tuple[str, tuple[int, int]]:
    """Parse ``a,b``; return the remaining text and the pair."""
    rest, a = _parse_uint(text)
    rest = _expect(rest, ",")
    rest, b = _parse_uint(rest)
    return rest, (a, b)


def parse_expression(text: str) -> tuple[str, tuple[int, int]]:
    """Parse ``(a,b)``; return the remaining text and the pair."""
    rest = _expect(text, "(")
    rest, pair = parse_num_pair(rest)
    rest = _expect(rest, ")")
    return rest, pair


def _try_expression(text: str) -> tuple[str, tuple[int, int] | None]:
    try:
        return parse_expression(text)
    except ValueError:
        return text, None


def part_1(text: str) -> str:
    total = 0
    rest = text
    while (index := rest.find("mul")) != -1:
        rest, pair = _try_expression(rest[index + 3:])
        if pair is not None:
            total += pair[0] * pair[1]
    return str(total)


def part_2(text: str) -> str:
    total = 0
    skipping = False
    rest = text
    while (match := _KEYWORD.search(rest)) is not None:
        rest, pair = _try_expression(rest[match.end():])
        keyword = match.group()
        if keyword == "do()":
            skipping = False
        elif keyword == "don't()":
            skipping = True
        elif not skipping and pair is not None:
            total += pair[0] * pair[1]
    return str(total)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2024 day 3.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2024", "03", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()