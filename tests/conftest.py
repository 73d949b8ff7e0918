"""Pytest configuration and fixtures for anygraph tests."""

import pytest

from anygraph import digraph, graph, is_edge


def _check_invariants(g):
    """Assert the bookkeeping invariants every graph must satisfy."""
    for node, info in g.node_map.items():
        assert info.out_degree == sum(len(b) for b in info.out_edges.values())
        assert info.in_degree == sum(len(b) for b in info.in_edges.values())
        for dest, bucket in info.out_edges.items():
            for edge in bucket:
                assert (edge.src, edge.dest) == (node, dest)
                assert edge in g.node_map[dest].in_edges[node]
        for src, bucket in info.in_edges.items():
            for edge in bucket:
                assert (edge.src, edge.dest) == (src, node)
                assert edge in g.node_map[src].out_edges[node]

    for edge, mirror in g.mirrors.items():
        assert g.mirrors[mirror] == edge
        assert edge.canonical != mirror.canonical
        assert (mirror.src, mirror.dest) == (edge.dest, edge.src)

    for key in g.attr_map:
        if is_edge(key):
            assert key in g.node_map[key.src].out_edges[key.dest]
        else:
            assert key in g.node_map


@pytest.fixture
def check_invariants():
    """Return a callable that asserts a graph's internal invariants."""
    return _check_invariants


@pytest.fixture
def weighted_digraph():
    """Directed graph A -1-> B -2-> C, A -4-> C."""
    return digraph(("A", "B", 1), ("B", "C", 2), ("A", "C", 4))


@pytest.fixture
def colored_digraph():
    """Directed graph with colored edges A->B (red), A->C (blue), D->B (red)."""
    return digraph(
        ("A", "B", {"color": "red"}),
        ("A", "C", {"color": "blue"}),
        ("D", "B", {"color": "red", "weight": 3}),
    )


@pytest.fixture
def triangle():
    """Undirected triangle X - Y - Z with weights."""
    return graph(("X", "Y", 1), ("Y", "Z", 2), ("Z", "X", 3))
