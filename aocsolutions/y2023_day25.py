"""2023 day 25: splitting the component graph with a three-edge cut."""

from __future__ import annotations

import argparse
import copy
import random
import time
from dataclasses import dataclass, field
from pathlib import Path

from .inputs import read_input


@dataclass
class SuperVertex:
    """A group of contracted vertices and their edges to vertices outside it."""

    vertices: list[str] = field(default_factory=list)
    edges: dict[str, set[str]] = field(default_factory=dict)

    def absorb(self, other: "SuperVertex") -> None:
        """Contract ``other`` into this vertex, dropping edges between the two."""
        for conns in self.edges.values():
            conns.difference_update(other.vertices)
        for conns in other.edges.values():
            conns.difference_update(self.vertices)
        for vertex, conns in other.edges.items():
            self.edges.setdefault(vertex, set()).update(conns)
        self.vertices.extend(other.vertices)
        other.vertices.clear()


def _vertex(graph: dict[str, SuperVertex], name: str) -> SuperVertex:
    if name not in graph:
        graph[name] = SuperVertex([name], {name: set()})
    return graph[name]


def parse_graph(text: str) -> list[SuperVertex]:
    """One super-vertex per component name, with undirected edges."""
    graph: dict[str, SuperVertex] = {}
    for line in text.splitlines():
        left, sep, right = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed line {line!r}")
        left_vertex = _vertex(graph, left)
        for name in right.split(" "):
            left_vertex.edges[left].add(name)
            _vertex(graph, name).edges[name].add(left)
    return list(graph.values())


def part_1(text: str) -> str:
    """Product of the two group sizes after cutting three wires (Karger)."""
    graph = parse_graph(text)
    rng = random.Random()

    while True:
        g = copy.deepcopy(graph)
        while len(g) > 2:
            index = rng.randrange(len(g))
            last = g.pop()
            if index < len(g):
                sv, g[index] = g[index], last
            else:
                sv = last

            v = ""
            while not sv.edges.get(v):
                v = rng.choice(sv.vertices)
            other_v = rng.choice(list(sv.edges[v]))

            target = next(item for item in g if other_v in item.vertices)
            target.absorb(sv)

        if sum(len(conns) for conns in g[0].edges.values()) == 3:
            return str(len(g[0].vertices) * len(g[1].vertices))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2023 day 25.")
    parser.add_argument("--base-dir", type=Path, default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    text = read_input("2023", "25", args.base_dir)

    print()
    start = time.perf_counter()
    result = part_1(text)
    elapsed = time.perf_counter() - start
    print(f"Part 1: {result} ({elapsed * 1000:.3f}ms)")


if __name__ == "__main__":
    main()