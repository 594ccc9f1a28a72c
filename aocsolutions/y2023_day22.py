"""2023 day 22: settling falling sand bricks and disintegrating them."""

from __future__ import annotations

import argparse
import heapq
import time
from dataclasses import dataclass, field
from pathlib import Path

from .inputs import read_input


@dataclass
class Point3D:
    x: int
    y: int
    z: int


@dataclass
class Brick:
    """A brick and the indices of the bricks it rests on and holds up."""

    start: Point3D
    end: Point3D
    supports: list[int] = field(default_factory=list)
    supported_by: list[int] = field(default_factory=list)


def parse_point_3d(text: str) -> Point3D:
    """Parse ``x,y,z``."""
    values = [int(part) for part in text.split(",")]
    if len(values) != 3:
        raise ValueError(f"expected three coordinates in {text!r}")
    return Point3D(*values)


def _overlaps(a0: int, a1: int, b0: int, b1: int) -> bool:
    return b0 <= a0 <= b1 or b0 <= a1 <= b1 or a0 <= b0 <= a1 or a0 <= b1 <= a1


def has_collision(brick_a: Brick, brick_b: Brick) -> bool:
    """Whether two bricks share at least one cube."""
    a, b = brick_a, brick_b
    return (
        _overlaps(a.start.z, a.end.z, b.start.z, b.end.z)
        and _overlaps(a.start.x, a.end.x, b.start.x, b.end.x)
        and _overlaps(a.start.y, a.end.y, b.start.y, b.end.y)
    )


def _move_down(brick: Brick) -> None:
    if brick.start.z > 1:
        brick.start.z -= 1
        brick.end.z -= 1


def _move_up(brick: Brick) -> None:
    brick.start.z += 1
    brick.end.z += 1


def parse_bricks(text: str) -> list[Brick]:
    """Parse the snapshot and let every brick fall into place.

    Bricks are returned in settling order with their support links filled in.
    """
    bricks = []
    for line in text.splitlines():
        start, tilde, end = line.partition("~")
        if not tilde:
            raise ValueError(f"malformed brick {line!r}")
        bricks.append(Brick(parse_point_3d(start), parse_point_3d(end)))
    bricks.sort(key=lambda brick: brick.start.z)

    settled: list[Brick] = []
    max_z = 1
    for brick in bricks:
        height = brick.end.z - brick.start.z
        brick.start.z = max_z + 1
        brick.end.z = brick.start.z + height

        while True:
            _move_down(brick)
            blocked = False
            new_index = len(settled)
            for i in reversed(range(len(settled))):
                other = settled[i]
                if other.end.z < brick.start.z:
                    continue
                if has_collision(brick, other):
                    blocked = True
                    other.supports.append(new_index)
                    brick.supported_by.append(i)
            if blocked:
                _move_up(brick)
                break
            if brick.start.z == 1:
                break

        max_z = max(max_z, brick.end.z)
        settled.append(brick)

    return settled


def part_1(text: str) -> str:
    """Count bricks that can be removed without anything else falling."""
    bricks = parse_bricks(text)
    safe = sum(
        all(len(bricks[idx].supported_by) > 1 for idx in brick.supports) for brick in bricks
    )
    return str(safe)


def _fallen_count(bricks: list[Brick], first: int) -> int:
    fallen: set[int] = set()
    queued = {first}
    heap = [(-bricks[first].end.z, first)]
    while heap:
        _, idx = heapq.heappop(heap)
        queued.discard(idx)
        fallen.add(idx)
        for above in bricks[idx].supports:
            if above in queued:
                continue
            if all(support in fallen for support in bricks[above].supported_by):
                queued.add(above)
                heapq.heappush(heap, (-bricks[above].end.z, above))
    return len(fallen) - 1


def part_2(text: str) -> str:
    """Sum, over every brick, how many other bricks fall when it is removed."""
    bricks = parse_bricks(text)
    total = sum(
        _fallen_count(bricks, i) for i in reversed(range(len(bricks))) if bricks[i].supports
    )
    return str(total)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 22.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "22", args.base_dir)

    print()
    for label, solve in (("Part 1", part_1), ("Part 2", part_2)):
        start = time.perf_counter()
        result = solve(text)
        elapsed = time.perf_counter() - start
        print(f"{label}: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()