"""2023 day 19: sorting machine parts through rating workflows."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Mapping
from dataclasses import astuple, dataclass
from enum import Enum
from pathlib import Path

from .inputs import read_input

_CATEGORIES = "xmas"
_FULL_RANGE = (1, 4000)


class ConditionType(Enum):
    """The comparison a workflow rule makes."""

    LESS_THAN = "<"
    GREATER_THAN = ">"


@dataclass(frozen=True)
class Condition:
    """A comparison of one rating category against a constant."""

    condition_type: ConditionType
    left: str
    right: int


@dataclass(frozen=True)
class Node:
    """A workflow rule: where a part goes when the condition holds (or always)."""

    condition: Condition | None
    then: str


@dataclass(frozen=True)
class Part:
    """The four ratings of a machine part."""

    x: int = 0
    m: int = 0
    a: int = 0
    s: int = 0


def _parse_condition(text: str) -> Condition:
    if len(text) < 3:
        raise ValueError(f"malformed condition {text!r}")
    left, operator, value = text[0], text[1], text[2:]
    if left not in _CATEGORIES:
        raise ValueError(f"unknown category {left!r}")
    try:
        condition_type = ConditionType(operator)
    except ValueError:
        raise ValueError(f"unknown comparison {operator!r}") from None
    return Condition(condition_type, left, int(value))


def _parse_node(text: str) -> Node:
    condition_text, colon, then = text.partition(":")
    if not colon:
        return Node(None, text)
    return Node(_parse_condition(condition_text), then)


def parse_workflows(text: str) -> dict[str, list[Node]]:
    """Parse lines like ``px{a<2006:qkq,m>2090:A,rfg}`` into rule lists by name."""
    workflows: dict[str, list[Node]] = {}
    for line in text.splitlines():
        name, brace, body = line.partition("{")
        if not brace:
            raise ValueError(f"malformed workflow {line!r}")
        workflows[name] = [_parse_node(node) for node in body[:-1].split(",")]
    return workflows


def parse_parts(text: str) -> list[Part]:
    """Parse lines like ``{x=787,m=2655,a=1222,s=2876}``; values are taken in order."""
    parts = []
    for line in text.splitlines():
        values = []
        for prop in line[1:-1].split(","):
            _, equals, value = prop.partition("=")
            if not equals:
                raise ValueError(f"malformed rating {prop!r}")
            values.append(int(value))
        if len(values) > len(_CATEGORIES):
            raise ValueError(f"too many ratings in {line!r}")
        parts.append(Part(*values))
    return parts


def _workflow(workflows: Mapping[str, list[Node]], name: str) -> list[Node]:
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"unknown workflow {name!r}") from None


def _passes(condition: Condition, value: int) -> bool:
    if condition.condition_type is ConditionType.GREATER_THAN:
        return value > condition.right
    return value < condition.right


def _accepted_rating(workflows: Mapping[str, list[Node]], part: Part) -> int | None:
    nodes = _workflow(workflows, "in")
    while True:
        for node in nodes:
            condition = node.condition
            if condition is None or _passes(condition, getattr(part, condition.left)):
                break
        else:
            raise ValueError("workflow has no rule matching the part")
        if node.then == "R":
            return None
        if node.then == "A":
            return sum(astuple(part))
        nodes = _workflow(workflows, node.then)


def count_accepted(workflows, workflow_id, ranges) -> int:
    """Count rating combinations within ``ranges`` that end up accepted.

    ``ranges`` maps each category to an inclusive ``(low, high)`` pair.
    """
    remaining = dict(ranges)
    total = 0
    for node in _workflow(workflows, workflow_id):
        matched = dict(remaining)
        condition = node.condition
        if condition is not None:
            key = condition.left
            if condition.condition_type is ConditionType.GREATER_THAN:
                matched[key] = (condition.right + 1, matched[key][1])
                remaining[key] = (remaining[key][0], condition.right)
            else:
                matched[key] = (matched[key][0], condition.right - 1)
                remaining[key] = (condition.right, remaining[key][1])

        if node.then == "A":
            total += math.prod(max(0, high - low + 1) for low, high in matched.values())
        elif node.then != "R":
            total += count_accepted(workflows, node.then, matched)
    return total


def _split_sections(text: str) -> tuple[str, str]:
    workflows_text, separator, parts_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected workflows and parts separated by a blank line")
    return workflows_text, parts_text


def part_1(text: str) -> str:
    workflows_text, parts_text = _split_sections(text)
    workflows = parse_workflows(workflows_text)
    ratings = (_accepted_rating(workflows, part) for part in parse_parts(parts_text))
    return str(sum(rating for rating in ratings if rating is not None))


def part_2(text: str) -> str:
    workflows_text, _ = _split_sections(text)
    workflows = parse_workflows(workflows_text)
    ranges = {category: _FULL_RANGE for category in _CATEGORIES}
    return str(count_accepted(workflows, "in", ranges))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 19.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "19", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()