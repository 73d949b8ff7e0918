"""Graph construction from nodes, edge descriptions, adjacency maps and graphs.

Public API:
    build_graph: Fold initializers into an existing graph.
    graph: Undirected graph without parallel edges.
    digraph: Directed graph without parallel edges.
    multigraph: Undirected graph with parallel edges.
    multidigraph: Directed graph with parallel edges.
    make_graph: Build a graph of a flavor chosen by GraphMode.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .structure import Ubergraph
from .types import GraphMode

logger = logging.getLogger(__name__)


def build_graph(g: Ubergraph, *inits: Any) -> Ubergraph:
    """Add every initializer to *g*, left to right.

    Each initializer is one of:
    - another ``Ubergraph``: its nodes, node attributes and edges are copied
      in. Edges are re-added with ``add_edge``, so they take on *g*'s
      directedness, not the source graph's;
    - a mapping ``{node: {neighbor: weight_or_attrs}}`` or
      ``{node: [neighbor, ...]}``;
    - a tuple or list of 2 or 3 elements, added as an edge;
    - anything else, added as a node.

    Note that a 2- or 3-tuple is always read as an edge, so tuple-valued
    nodes have to be added with ``add_node`` directly.
    """
    for init in inits:
        g = _build(g, init)
    return g


def _build(g: Ubergraph, init: Any) -> Ubergraph:
    if isinstance(init, Ubergraph):
        return _import_graph(g, init)
    if isinstance(init, Mapping):
        return _import_adjacency(g, init)
    if isinstance(init, (tuple, list)) and len(init) in (2, 3):
        return g.add_edges(init)
    return g.add_node(init)


def _import_graph(g: Ubergraph, other: Ubergraph) -> Ubergraph:
    logger.debug(
        "Importing %d nodes and %d edges (undirected=%s)",
        other.count_nodes(),
        other.count_edges(),
        g.undirected,
    )
    for node in other.nodes():
        g = g.add_node(node)
        node_attrs = other.attr_map.get(node)
        if node_attrs:
            g = g.add_attrs(node, node_attrs)
    for edge in other.edges():
        g = g.add_edge(edge.src, edge.dest, other.attr_map.get(edge))
    return g


def _import_adjacency(g: Ubergraph, adjacency: Mapping[Any, Any]) -> Ubergraph:
    g = g.add_nodes(*adjacency)
    for node, neighbors in adjacency.items():
        if isinstance(neighbors, Mapping):
            for neighbor, weight in neighbors.items():
                g = g.add_edge(node, neighbor, weight)
        else:
            for neighbor in neighbors:
                g = g.add_edge(node, neighbor)
    return g


def make_graph(mode: GraphMode, *inits: Any) -> Ubergraph:
    empty = Ubergraph(allow_parallel=mode.allow_parallel, undirected=mode.undirected)
    return build_graph(empty, *inits)


def graph(*inits: Any) -> Ubergraph:
    return make_graph(GraphMode.GRAPH, *inits)


def digraph(*inits: Any) -> Ubergraph:
    return make_graph(GraphMode.DIGRAPH, *inits)


def multigraph(*inits: Any) -> Ubergraph:
    return make_graph(GraphMode.MULTIGRAPH, *inits)


def multidigraph(*inits: Any) -> Ubergraph:
    return make_graph(GraphMode.MULTIDIGRAPH, *inits)


__all__ = [
    "build_graph",
    "make_graph",
    "graph",
    "digraph",
    "multigraph",
    "multidigraph",
]
