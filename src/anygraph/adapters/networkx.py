"""NetworkX interoperability.

Public API:
    to_networkx: Export an Ubergraph to a NetworkX graph.
    from_networkx: Import a NetworkX graph as an Ubergraph.
"""

from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install anygraph[networkx]"
    ) from e

import logging

from ..builders import make_graph
from ..structure import Ubergraph
from ..types import GraphMode

logger = logging.getLogger(__name__)


def to_networkx(g: Ubergraph) -> nx.Graph:
    """Export *g* to the NetworkX class matching its mode flags.

    Undirected edges in a directed export are emitted in both directions.
    Directed edges in an undirected export lose their direction. In
    multigraph exports each edge is keyed by its ``edge_id``; a mirrored
    pair shares one key.

    Returns:
        ``nx.Graph``, ``nx.DiGraph``, ``nx.MultiGraph`` or ``nx.MultiDiGraph``.
    """
    if g.undirected:
        G = nx.MultiGraph() if g.allow_parallel else nx.Graph()
    else:
        G = nx.MultiDiGraph() if g.allow_parallel else nx.DiGraph()

    G.add_nodes_from((node, dict(g.attr_map.get(node, {}))) for node in g.nodes())

    for edge in g.edges():
        pairs = [(edge.src, edge.dest)]
        if not edge.directed and G.is_directed():
            pairs.append((edge.dest, edge.src))
        bag = dict(g.attr_map.get(edge, {}))
        for u, v in pairs:
            if G.is_multigraph():
                G.add_edges_from([(u, v, edge.edge_id, bag)])
            else:
                G.add_edges_from([(u, v, bag)])

    logger.debug(
        "Exported %d nodes and %d edges to %s",
        G.number_of_nodes(),
        G.number_of_edges(),
        type(G).__name__,
    )
    return G


def from_networkx(G: nx.Graph, mode: GraphMode | None = None) -> Ubergraph:
    """Import a NetworkX graph.

    Args:
        G: Any NetworkX graph.
        mode: Flavor of the result. Defaults to the flavor matching
            ``G.is_multigraph()`` and ``G.is_directed()``.
    """
    if mode is None:
        if G.is_multigraph():
            mode = GraphMode.MULTIDIGRAPH if G.is_directed() else GraphMode.MULTIGRAPH
        else:
            mode = GraphMode.DIGRAPH if G.is_directed() else GraphMode.GRAPH

    g = make_graph(mode)
    for node, data in G.nodes(data=True):
        g = g.add_node(node)
        if data:
            g = g.add_attrs(node, data)
    for u, v, data in G.edges(data=True):
        g = g.add_edge(u, v, dict(data) or None)
    return g


__all__ = ["to_networkx", "from_networkx"]
