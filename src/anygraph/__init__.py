"""anygraph: Persistent graphs with mixed directedness, parallel edges and attributes."""

__version__ = "0.1.0"

from .builders import build_graph, digraph, graph, make_graph, multidigraph, multigraph
from .exceptions import GraphError, InvalidDescriptionError, InvalidTargetError
from .protocol import (
    AttrGraph,
    Digraph,
    EditableGraph,
    Graph,
    MixedDirectionGraph,
    QueryableGraph,
    UndirectedGraph,
    WeightedGraph,
)
from .structure import EdgeView, Ubergraph
from .types import (
    Direction,
    Edge,
    GraphMode,
    NodeInfo,
    UndirectedEdge,
    is_edge,
    is_undirected_edge,
)

__all__ = [
    # Graph structure
    "Ubergraph",
    "EdgeView",
    "Edge",
    "UndirectedEdge",
    "NodeInfo",
    "Direction",
    "GraphMode",
    "is_edge",
    "is_undirected_edge",
    # Construction
    "build_graph",
    "make_graph",
    "graph",
    "digraph",
    "multigraph",
    "multidigraph",
    # Capability protocols
    "Graph",
    "Digraph",
    "WeightedGraph",
    "EditableGraph",
    "AttrGraph",
    "UndirectedGraph",
    "QueryableGraph",
    "MixedDirectionGraph",
    # Exceptions
    "GraphError",
    "InvalidDescriptionError",
    "InvalidTargetError",
]
