import pytest

from aocsolutions.y2023_day19 import (
    Condition,
    ConditionType,
    Node,
    Part,
    count_accepted,
    parse_parts,
    parse_workflows,
    part_1,
    part_2,
)

_WORKFLOWS = [
    ("px", "a<2006:qkq,m>2090:A,rfg"),
    ("pv", "a>1716:R,A"),
    ("lnx", "m>1548:A,A"),
    ("rfg", "s<537:gd,x>2440:R,A"),
    ("qs", "s>3448:A,lnx"),
    ("qkq", "x<1416:A,crn"),
    ("crn", "x>2662:A,R"),
    ("in", "s<1351:px,qqz"),
    ("qqz", "s>2770:qs,m<1801:hdj,R"),
    ("gd", "a>3333:R,R"),
    ("hdj", "m>838:A,pv"),
]

_PARTS = [
    (787, 2655, 1222, 2876),
    (1679, 44, 2067, 496),
    (2036, 264, 79, 2244),
    (2461, 1339, 466, 291),
    (2127, 1623, 2188, 1013),
]


def _workflows(pairs):
    return "\n".join(f"{name}{{{rules}}}" for name, rules in pairs)


def _parts(values):
    return "\n".join(f"{{x={x},m={m},a={a},s={s}}}" for x, m, a, s in values)


EXAMPLE = _workflows(_WORKFLOWS) + "\n\n" + _parts(_PARTS)

FULL = {c: (1, 4000) for c in "xmas"}


def test_part_1():
    assert part_1(EXAMPLE) == "19114"


def test_part_2():
    assert part_2(EXAMPLE) == "167409079868000"


def test_parse_workflows():
    workflows = parse_workflows(_workflows([("in", "s<1351:px,qqz"), ("pv", "a>1716:R,A")]))
    assert workflows["in"] == [
        Node(Condition(ConditionType.LESS_THAN, "s", 1351), "px"),
        Node(None, "qqz"),
    ]
    assert workflows["pv"] == [
        Node(Condition(ConditionType.GREATER_THAN, "a", 1716), "R"),
        Node(None, "A"),
    ]


def test_parse_parts():
    parts = parse_parts(_parts([(787, 2655, 1222, 2876), (1, 2, 3, 4)]))
    assert parts == [Part(787, 2655, 1222, 2876), Part(1, 2, 3, 4)]


def test_count_accepted_everything():
    workflows = parse_workflows(_workflows([("in", "A")]))
    assert count_accepted(workflows, "in", FULL) == 4000**4


def test_count_accepted_nothing():
    workflows = parse_workflows(_workflows([("in", "R")]))
    assert count_accepted(workflows, "in", FULL) == 0


def test_count_accepted_single_value():
    workflows = parse_workflows(_workflows([("in", "x<2:A,R")]))
    assert count_accepted(workflows, "in", FULL) == 4000**3


def test_count_accepted_splits_sum_to_whole():
    workflows = parse_workflows(_workflows([("in", "m>2000:A,other"), ("other", "A")]))
    assert count_accepted(workflows, "in", FULL) == 4000**4


def test_unknown_workflow():
    workflows = parse_workflows(_workflows([("in", "x<2:missing,R")]))
    with pytest.raises(ValueError):
        count_accepted(workflows, "in", FULL)


def test_missing_separator():
    with pytest.raises(ValueError):
        part_1(_workflows([("in", "A")]))


def test_unknown_category():
    with pytest.raises(ValueError):
        parse_workflows(_workflows([("in", "q<2:A,R")]))