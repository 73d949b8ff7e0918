"""Graph data structures for anygraph.

Public API:
    Direction: Edge traversal direction enum.
    GraphMode: The four graph flavors, by their two mode flags.
    Edge: Immutable directed edge.
    UndirectedEdge: Immutable forward or mirror instance of an undirected edge.
    NodeInfo: Immutable per-node adjacency record.
    is_edge: True for either edge type.
    is_undirected_edge: True for UndirectedEdge only.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Hashable, Union


class Direction(Enum):
    """Direction for edge and degree queries."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    BOTH = "both"


class GraphMode(Enum):
    """Graph flavors, valued by ``(allow_parallel, undirected)``."""

    GRAPH = (False, True)
    DIGRAPH = (False, False)
    MULTIGRAPH = (True, True)
    MULTIDIGRAPH = (True, False)

    @property
    def allow_parallel(self) -> bool:
        return self.value[0]

    @property
    def undirected(self) -> bool:
        return self.value[1]


def new_edge_id() -> str:
    """Generate an opaque edge identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Edge:
    """A directed edge.

    Attributes:
        edge_id: Opaque identifier, unique within a graph.
        src: Source node.
        dest: Destination node.
    """

    edge_id: str
    src: Hashable
    dest: Hashable

    @property
    def directed(self) -> bool:
        return True

    @property
    def canonical(self) -> bool:
        return True


@dataclass(frozen=True)
class UndirectedEdge:
    """One of the two instances that make up an undirected edge.

    The forward instance is canonical (``duplicate`` is False) and is the one
    returned when enumerating edges; its mirror has the endpoints swapped and
    ``duplicate`` set.

    Attributes:
        edge_id: Opaque identifier, unique within a graph.
        src: Source node as seen from this instance.
        dest: Destination node as seen from this instance.
        duplicate: True for the mirror instance.
    """

    edge_id: str
    src: Hashable
    dest: Hashable
    duplicate: bool = False

    @property
    def directed(self) -> bool:
        return False

    @property
    def canonical(self) -> bool:
        return not self.duplicate


AnyEdge = Union[Edge, UndirectedEdge]


def is_edge(obj: Any) -> bool:
    return isinstance(obj, (Edge, UndirectedEdge))


def is_undirected_edge(obj: Any) -> bool:
    return isinstance(obj, UndirectedEdge)


def swap_edge(edge: AnyEdge) -> AnyEdge:
    """Return the same edge instance with its endpoints exchanged."""
    return replace(edge, src=edge.dest, dest=edge.src)


@dataclass(frozen=True)
class NodeInfo:
    """Adjacency record for one node.

    Edge buckets are tuples in insertion order. Records are never mutated;
    the ``with_*`` helpers return updated copies that share untouched buckets.

    Attributes:
        out_edges: Destination node -> edges leaving this node.
        in_edges: Source node -> edges entering this node.
        out_degree: Total number of edges in ``out_edges``.
        in_degree: Total number of edges in ``in_edges``.
    """

    out_edges: dict[Hashable, tuple[AnyEdge, ...]] = field(default_factory=dict)
    in_edges: dict[Hashable, tuple[AnyEdge, ...]] = field(default_factory=dict)
    out_degree: int = 0
    in_degree: int = 0

    def with_out_edge(self, edge: AnyEdge) -> NodeInfo:
        out_edges = dict(self.out_edges)
        out_edges[edge.dest] = out_edges.get(edge.dest, ()) + (edge,)
        return replace(self, out_edges=out_edges, out_degree=self.out_degree + 1)

    def with_in_edge(self, edge: AnyEdge) -> NodeInfo:
        in_edges = dict(self.in_edges)
        in_edges[edge.src] = in_edges.get(edge.src, ()) + (edge,)
        return replace(self, in_edges=in_edges, in_degree=self.in_degree + 1)

    def without_out_edge(self, edge: AnyEdge) -> NodeInfo:
        out_edges = dict(self.out_edges)
        remaining = tuple(e for e in out_edges.get(edge.dest, ()) if e != edge)
        if remaining:
            out_edges[edge.dest] = remaining
        else:
            out_edges.pop(edge.dest, None)
        return replace(self, out_edges=out_edges, out_degree=self.out_degree - 1)

    def without_in_edge(self, edge: AnyEdge) -> NodeInfo:
        in_edges = dict(self.in_edges)
        remaining = tuple(e for e in in_edges.get(edge.src, ()) if e != edge)
        if remaining:
            in_edges[edge.src] = remaining
        else:
            in_edges.pop(edge.src, None)
        return replace(self, in_edges=in_edges, in_degree=self.in_degree - 1)


__all__ = [
    "Direction",
    "GraphMode",
    "Edge",
    "UndirectedEdge",
    "AnyEdge",
    "NodeInfo",
    "new_edge_id",
    "is_edge",
    "is_undirected_edge",
    "swap_edge",
]
