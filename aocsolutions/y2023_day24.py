"""2023 day 24: crossing paths of hailstones in the x/y plane."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass
from pathlib import Path

from .inputs import read_input


@dataclass(frozen=True)
class Hailstone:
    """Position and velocity of a hailstone, projected onto x and y."""

    x: float
    y: float
    dx: float
    dy: float


def _div(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _pair(text: str) -> tuple[float, float]:
    values = [float(part.strip()) for part in text.split(", ")]
    if len(values) < 2:
        raise ValueError(f"expected at least two values in {text!r}")
    return values[0], values[1]


def parse_hailstones(text: str) -> list[Hailstone]:
    hailstones = []
    for line in text.splitlines():
        position, velocity = line.split(" @ ", 1)
        x, y = _pair(position)
        dx, dy = _pair(velocity)
        hailstones.append(Hailstone(x, y, dx, dy))
    return hailstones


def gcd(a: float, b: float) -> float:
    while b > 0.0:
        a, b = b, math.fmod(a, b)
    return a


def lcm(a: float, b: float) -> float:
    return _div(a * b, gcd(a, b))


def part_1(text: str, intersection_min: float, intersection_max: float) -> str:
    """Count pairs whose future paths cross inside the square test area."""
    hailstones = parse_hailstones(text)
    intersections = 0

    for i, ha in enumerate(hailstones[:-1]):
        lcm_t = lcm(ha.dx, ha.dy)
        kt_x = _div(lcm_t, ha.dx)
        kt_y = _div(lcm_t, ha.dy)
        for hb in hailstones[i + 1:]:
            # scale both equations so one time variable cancels, then solve
            s = _div(
                ha.x * kt_x - ha.y * kt_y - hb.x * kt_x + hb.y * kt_y,
                hb.dx * kt_x - hb.dy * kt_y,
            )
            lcm_s = lcm(hb.dx, hb.dy)
            ks_x = _div(lcm_s, hb.dx)
            ks_y = _div(lcm_s, hb.dy)
            t = _div(
                hb.x * ks_x - ha.x * ks_x + ha.y * ks_y - hb.y * ks_y,
                ha.dx * ks_x - ha.dy * ks_y,
            )

            if t > 0.0 and s > 0.0 and t != math.inf and s != math.inf:
                x = ha.x + t * ha.dx
                y = ha.y + t * ha.dy
                if (
                    intersection_min <= x <= intersection_max
                    and intersection_min <= y <= intersection_max
                ):
                    intersections += 1

    return str(intersections)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 24.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "24", args.base_dir)

    print()
    start = time.perf_counter()
    result = part_1(text, 200000000000000.0, 400000000000000.0)
    elapsed = time.perf_counter() - start
    print(f"Part 1: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()