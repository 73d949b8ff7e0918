"""Tests for the edge, adjacency and mode types."""

from __future__ import annotations

import pytest

from anygraph import (
    Direction,
    Edge,
    GraphError,
    GraphMode,
    InvalidDescriptionError,
    InvalidTargetError,
    NodeInfo,
    UndirectedEdge,
    is_edge,
    is_undirected_edge,
)
from anygraph.types import new_edge_id, swap_edge


class TestEdgeTypes:
    """Immutable edge identities."""

    def test_directed_edge(self):
        edge = Edge("e1", "A", "B")
        assert edge.src == "A"
        assert edge.dest == "B"
        assert edge.directed is True
        assert edge.canonical is True

    def test_undirected_edge_canonical_flag(self):
        forward = UndirectedEdge("e1", "A", "B")
        mirror = UndirectedEdge("e2", "B", "A", duplicate=True)
        assert forward.directed is False
        assert forward.canonical is True
        assert mirror.canonical is False

    def test_edges_frozen(self):
        edge = Edge("e1", "A", "B")
        with pytest.raises(AttributeError):
            edge.src = "C"  # type: ignore[misc]

    def test_edges_hashable_by_value(self):
        assert Edge("e1", "A", "B") == Edge("e1", "A", "B")
        assert len({Edge("e1", "A", "B"), Edge("e1", "A", "B")}) == 1
        assert Edge("e1", "A", "B") != Edge("e2", "A", "B")

    def test_predicates(self):
        assert is_edge(Edge("e1", "A", "B"))
        assert is_edge(UndirectedEdge("e1", "A", "B"))
        assert not is_edge(("A", "B"))
        assert is_undirected_edge(UndirectedEdge("e1", "A", "B"))
        assert not is_undirected_edge(Edge("e1", "A", "B"))

    def test_swap_edge_keeps_id_and_flag(self):
        swapped = swap_edge(UndirectedEdge("e1", "A", "B", duplicate=True))
        assert swapped == UndirectedEdge("e1", "B", "A", duplicate=True)
        assert swap_edge(swapped) == UndirectedEdge("e1", "A", "B", duplicate=True)

    def test_new_edge_ids_unique(self):
        assert len({new_edge_id() for _ in range(100)}) == 100


class TestNodeInfo:
    """Copy-on-write adjacency records."""

    def test_defaults(self):
        info = NodeInfo()
        assert info.out_edges == {}
        assert info.in_edges == {}
        assert info.out_degree == 0
        assert info.in_degree == 0

    def test_with_out_edge_returns_copy(self):
        info = NodeInfo()
        edge = Edge("e1", "A", "B")
        updated = info.with_out_edge(edge)
        assert updated.out_edges == {"B": (edge,)}
        assert updated.out_degree == 1
        assert info.out_edges == {}
        assert info.out_degree == 0

    def test_bucket_keeps_insertion_order(self):
        e1, e2 = Edge("e1", "A", "B"), Edge("e2", "A", "B")
        info = NodeInfo().with_out_edge(e1).with_out_edge(e2)
        assert info.out_edges["B"] == (e1, e2)

    def test_without_edge_drops_empty_bucket(self):
        edge = Edge("e1", "A", "B")
        info = NodeInfo().with_in_edge(edge).without_in_edge(edge)
        assert info.in_edges == {}
        assert info.in_degree == 0

    def test_shares_untouched_buckets(self):
        e1, e2 = Edge("e1", "A", "B"), Edge("e2", "A", "C")
        info = NodeInfo().with_out_edge(e1)
        updated = info.with_out_edge(e2)
        assert updated.out_edges["B"] is info.out_edges["B"]


class TestModes:
    def test_graph_modes(self):
        assert (GraphMode.GRAPH.allow_parallel, GraphMode.GRAPH.undirected) == (False, True)
        assert (GraphMode.DIGRAPH.allow_parallel, GraphMode.DIGRAPH.undirected) == (False, False)
        assert GraphMode.MULTIGRAPH.value == (True, True)
        assert GraphMode.MULTIDIGRAPH.value == (True, False)

    def test_direction_values(self):
        assert {d.value for d in Direction} == {"outgoing", "incoming", "both"}


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(InvalidDescriptionError, GraphError)
        assert issubclass(InvalidTargetError, GraphError)
        assert issubclass(InvalidDescriptionError, ValueError)
        assert issubclass(InvalidTargetError, ValueError)
