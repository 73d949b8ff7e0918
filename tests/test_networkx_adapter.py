"""Tests for NetworkX export and import."""

from __future__ import annotations

import pytest

nx = pytest.importorskip("networkx")

from anygraph import GraphMode, UndirectedEdge, digraph, graph, multigraph  # noqa: E402
from anygraph.adapters.networkx import from_networkx, to_networkx  # noqa: E402


class TestToNetworkx:
    """Export picks the NetworkX class from the mode flags."""

    @pytest.mark.parametrize(
        "factory, expected",
        [(graph, "Graph"), (digraph, "DiGraph"), (multigraph, "MultiGraph")],
    )
    def test_graph_class(self, factory, expected):
        assert type(to_networkx(factory(("A", "B")))).__name__ == expected

    def test_weights_and_attributes(self, colored_digraph):
        G = to_networkx(colored_digraph)
        assert G["A"]["B"]["color"] == "red"
        assert G["D"]["B"]["weight"] == 3
        assert "weight" not in G["A"]["C"]

    def test_node_attributes(self):
        G = to_networkx(digraph("A").add_attr("A", "label", "root"))
        assert G.nodes["A"]["label"] == "root"

    def test_parallel_edges_keyed_by_id(self):
        g = multigraph(("X", "Y", 1), ("X", "Y", 2))
        G = to_networkx(g)
        assert G.number_of_edges() == 2
        assert set(G["X"]["Y"]) == {e.edge_id for e in g.edges()}

    def test_undirected_edge_in_directed_export(self):
        G = to_networkx(digraph(("A", "B")).add_undirected_edge("B", "C", 5))
        assert G.has_edge("B", "C")
        assert G.has_edge("C", "B")
        assert G["C"]["B"]["weight"] == 5
        assert not G.has_edge("B", "A")


class TestFromNetworkx:
    """Import goes through the construction facade."""

    def test_directed_import(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=2)
        G.add_node("C", label="isolated")
        g = from_networkx(G)
        assert not g.undirected
        assert g.weight("A", "B") == 2
        assert g.attr("C", "label") == "isolated"

    def test_undirected_import(self):
        g = from_networkx(nx.path_graph(3))
        assert g.undirected
        assert g.count_edges() == 2
        assert all(isinstance(e, UndirectedEdge) for e in g.edges())

    def test_multigraph_import(self):
        G = nx.MultiGraph()
        G.add_edge(1, 2, weight=1)
        G.add_edge(1, 2, weight=2)
        g = from_networkx(G)
        assert g.allow_parallel
        assert g.count_edges() == 2

    def test_explicit_mode(self):
        g = from_networkx(nx.path_graph(3), mode=GraphMode.DIGRAPH)
        assert not g.undirected
        assert g.has_edge(0, 1)
        assert not g.has_edge(1, 0)

    def test_round_trip(self, weighted_digraph):
        g = from_networkx(to_networkx(weighted_digraph))
        assert set(g.nodes()) == set(weighted_digraph.nodes())
        assert g.count_edges() == weighted_digraph.count_edges()
        for edge in weighted_digraph.edges():
            assert g.weight(edge.src, edge.dest) == weighted_digraph.weight(edge)
