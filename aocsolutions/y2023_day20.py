"""2023 day 20: pulses through flip-flops and conjunctions."""

from __future__ import annotations

import argparse
import math
import time
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from pathlib import Path

from .inputs import read_input

BROADCASTER_ID = 0
_BROADCASTER = "broadcaster"
_BUTTON = -1
_PRESSES = 1000


class _Kind(Enum):
    BROADCASTER = "broadcaster"
    FLIP_FLOP = "%"
    CONJUNCTION = "&"


@dataclass
class Module:
    """A communication module with its outputs and internal state."""

    kind: _Kind
    outputs: list[int]
    on: bool = False
    memory: dict[int, bool] = field(default_factory=dict)

    def receive_pulse(self, input_idx: int, high: bool) -> list[tuple[int, bool]]:
        """Handle a pulse from ``input_idx``; return the pulses sent in response."""
        if self.kind is _Kind.BROADCASTER:
            return [(output, False) for output in self.outputs]
        if self.kind is _Kind.FLIP_FLOP:
            if high:
                return []
            self.on = not self.on
            return [(output, self.on) for output in self.outputs]
        if input_idx in self.memory:
            self.memory[input_idx] = high
        send_high = not all(self.memory.values())
        return [(output, send_high) for output in self.outputs]


def hash_module_id(name: str) -> int:
    """A numeric id for a module name; the broadcaster is always 0."""
    if name == _BROADCASTER:
        return BROADCASTER_ID
    return sum(122**idx * (ord(ch) - ord("a") + 1) for idx, ch in enumerate(name))


def _split_line(line: str) -> tuple[str, list[str]]:
    head, arrow, outputs = line.partition(" -> ")
    if not arrow:
        raise ValueError(f"malformed module line {line!r}")
    return head, outputs.split(", ")


def _name(head: str) -> str:
    return head if head == _BROADCASTER else head[1:]


def parse_modules(text: str) -> dict[int, Module]:
    """Parse the module configuration into modules keyed by hashed id."""
    lines = [_split_line(line) for line in text.splitlines()]
    modules: dict[int, Module] = {}

    for head, outputs in lines:
        output_ids = [hash_module_id(output) for output in outputs]
        if head == _BROADCASTER:
            kind = _Kind.BROADCASTER
        else:
            try:
                kind = _Kind(head[:1])
            except ValueError:
                raise ValueError(f"unknown module type in {head!r}") from None
            if kind is _Kind.BROADCASTER:
                raise ValueError(f"unknown module type in {head!r}")
        modules[hash_module_id(_name(head))] = Module(kind, output_ids)

    for head, outputs in lines:
        sender = hash_module_id(_name(head))
        for output in outputs:
            module = modules.get(hash_module_id(output))
            if module is not None and module.kind is _Kind.CONJUNCTION:
                module.memory.setdefault(sender, False)

    return modules


def _press_button(modules: dict[int, Module]) -> Iterator[tuple[int, int, bool]]:
    """Yield every (sender, target, high) pulse caused by one button press."""
    queue = deque([(_BUTTON, BROADCASTER_ID, False)])
    while queue:
        sender, target, high = queue.popleft()
        yield sender, target, high
        module = modules.get(target)
        if module is not None:
            queue.extend((target, nxt, pulse) for nxt, pulse in module.receive_pulse(sender, high))


def part_1(text: str) -> str:
    modules = parse_modules(text)
    low = high = 0
    for _ in range(_PRESSES):
        for _, _, pulse in _press_button(modules):
            if pulse:
                high += 1
            else:
                low += 1
    return str(low * high)


def part_2(text: str) -> str:
    """Presses until the conjunction feeding ``rx`` would send it a low pulse.

    Each input of that conjunction fires a high pulse periodically from the
    start, so the answer is the product of their first high-pulse presses.
    """
    modules = parse_modules(text)
    rx = hash_module_id("rx")
    feeders = [
        module_id
        for module_id, module in modules.items()
        if module.kind is _Kind.CONJUNCTION and rx in module.outputs
    ]
    if not feeders:
        raise ValueError("no conjunction module feeds into rx")
    linked = list(modules[min(feeders)].memory)

    first_high: dict[int, int] = {}
    for presses in count(1):
        for sender, _, pulse in _press_button(modules):
            if pulse and sender not in first_high:
                first_high[sender] = presses
        if all(module_id in first_high for module_id in linked):
            return str(math.prod(first_high[module_id] for module_id in linked))
    raise AssertionError("unreachable")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 20.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "20", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()