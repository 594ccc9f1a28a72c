import pytest

from aocsolutions.y2023_day25 import SuperVertex, parse_graph, part_1

SAMPLE = """
jqt: rhn xhk nvd
rsh: frs pzl lsr
xhk: hfx
cmg: qnr nvd lhk bvb
rhn: xhk bvb hfx
bvb: xhk hfx
pzl: lsr hfx nvd
qnr: nvd
ntq: jqt hfx bvb xhk
nvd: lhk
lsr: lhk
rzs: qnr cmg lsr rsh
frs: qnr lhk lsr
""".strip()


def test_part_1():
    assert part_1(SAMPLE) == "54"


def test_parse_graph_counts():
    graph = parse_graph(SAMPLE)
    assert len(graph) == 15
    assert sum(len(c) for sv in graph for c in sv.edges.values()) == 66


def test_parse_graph_is_undirected():
    graph = {sv.vertices[0]: sv for sv in parse_graph("a: b c")}
    assert graph["a"].edges["a"] == {"b", "c"}
    assert graph["b"].edges["b"] == {"a"}
    assert graph["c"].edges["c"] == {"a"}


def test_absorb_drops_internal_edges():
    graph = {sv.vertices[0]: sv for sv in parse_graph("a: b c")}
    graph["a"].absorb(graph["b"])
    assert graph["a"].vertices == ["a", "b"]
    assert graph["a"].edges == {"a": {"c"}, "b": set()}
    assert graph["b"].vertices == []


def test_parse_graph_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_graph("abc def")


def test_absorb_merges_shared_vertex_edges():
    first = SuperVertex(["a"], {"a": {"x"}})
    second = SuperVertex(["b"], {"b": {"y", "a"}})
    first.absorb(second)
    assert first.edges == {"a": {"x"}, "b": {"y"}}