"""2024 day 5: page ordering rules for print updates."""

from __future__ import annotations

import argparse
import re
import time
from pathlib import Path

from .inputs import read_input

_NUMBER = re.compile(r"[0-9]+")


def _parse_uint(text: str) -> tuple[str, int]:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError("expected a number")
    return text[match.end():], int(match.group())


def _parse_number_list(text: str) -> tuple[str, list[int]]:
    rest, first = _parse_uint(text)
    numbers = [first]
    while rest.startswith(","):
        try:
            remaining, number = _parse_uint(rest[1:])
        except ValueError:
            break
        numbers.append(number)
        rest = remaining
    return rest, numbers


def parse_rule(text: str) -> tuple[str, tuple[int, int]]:
    """Parse ``a|b``; return the remaining text and the pair."""
    rest, left = _parse_uint(text)
    if not rest.startswith("|"):
        raise ValueError("expected '|'")
    rest, right = _parse_uint(rest[1:])
    return rest, (left, right)


def parse_forbidden_suffixes(text: str) -> tuple[str, dict[int, list[int]]]:
    """Map each page to the pages that must not follow it.

    Returns the unparsed remainder and the mapping.
    """
    suffixes: dict[int, list[int]] = {}
    rest = text
    while True:
        try:
            remaining, (left, right) = parse_rule(rest)
        except ValueError:
            break
        suffixes.setdefault(right, []).append(left)
        rest = remaining.removeprefix("\n")
    return rest, suffixes


def parse_updates(text: str) -> tuple[str, list[list[int]]]:
    """Parse newline-separated, comma-separated page lists."""
    rest, first = _parse_number_list(text)
    updates = [first]
    while rest.startswith("\n"):
        try:
            remaining, numbers = _parse_number_list(rest[1:])
        except ValueError:
            break
        updates.append(numbers)
        rest = remaining
    return rest, updates


def _parse_input(text: str) -> tuple[dict[int, list[int]], list[list[int]]]:
    rules_text, updates_text = text.split("\n\n", 1)
    _, suffixes = parse_forbidden_suffixes(rules_text)
    _, updates = parse_updates(updates_text)
    return suffixes, updates


def _middle_if_ordered(update: list[int], suffixes: dict[int, list[int]]) -> int:
    forbidden: set[int] = set()
    for n in update:
        if n in forbidden:
            return 0
        forbidden.update(suffixes.get(n, ()))
    return update[len(update) // 2]


def _middle_if_fixed(update: list[int], suffixes: dict[int, list[int]]) -> int:
    fixed: list[int] = []
    forbidden: set[int] = set()
    did_fix = False
    for n in update:
        if n in forbidden:
            did_fix = True
            # place n before the first page that forbids it as a suffix
            index = next(
                (i for i, page in enumerate(fixed) if n in suffixes.get(page, ())),
                None,
            )
            if index is not None:
                fixed.insert(index, n)
        else:
            fixed.append(n)
        forbidden.update(suffixes.get(n, ()))
    return fixed[len(update) // 2] if did_fix else 0


def part_1(text: str) -> str:
    suffixes, updates = _parse_input(text)
    return str(sum(_middle_if_ordered(update, suffixes) for update in updates))


def part_2(text: str) -> str:
    suffixes, updates = _parse_input(text)
    return str(sum(_middle_if_fixed(update, suffixes) for update in updates))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2024 day 5.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2024", "05", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()