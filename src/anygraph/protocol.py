"""Capability protocols -- the interfaces graph algorithms are written against.

Public API:
    Graph: Node and edge enumeration, successors, out-degree.
    Digraph: Predecessors, in-degree, in-edges, transpose.
    WeightedGraph: Edge weight lookup.
    EditableGraph: Persistent node and edge editing.
    AttrGraph: Node and edge attribute store.
    UndirectedGraph: Mirror lookup for undirected edges.
    QueryableGraph: Edge lookup by partial attribute match.
    MixedDirectionGraph: Per-edge directedness on insertion.

Every edit method returns a new graph; none of them mutate the receiver.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping, Protocol, runtime_checkable

from .types import AnyEdge, Direction


@runtime_checkable
class Graph(Protocol):
    """Read access to nodes and outgoing adjacency."""

    def nodes(self) -> list[Hashable]:
        """Return every node in the graph."""
        ...

    def edges(self) -> Iterable[AnyEdge]:
        """Every edge once, undirected edges in their canonical direction.

        The result is lazy and can be iterated more than once.
        """
        ...

    def has_node(self, node: Any) -> bool:
        ...

    def has_edge(self, src: Hashable, dest: Hashable) -> bool:
        ...

    def successors(self, node: Hashable) -> list[Hashable]:
        ...

    def out_degree(self, node: Hashable) -> int | None:
        ...

    def out_edges(self, node: Hashable) -> list[AnyEdge]:
        ...

    def degree(self, node: Hashable, direction: Direction = Direction.BOTH) -> int | None:
        ...


@runtime_checkable
class Digraph(Protocol):
    """Read access to incoming adjacency."""

    def predecessors(self, node: Hashable) -> list[Hashable]:
        ...

    def in_degree(self, node: Hashable) -> int | None:
        ...

    def in_edges(self, node: Hashable) -> list[AnyEdge]:
        ...

    def transpose(self) -> Digraph:
        """Return a graph with every directed edge reversed."""
        ...


@runtime_checkable
class WeightedGraph(Protocol):
    """Edge weights; an edge without a weight attribute weighs 1."""

    def weight(self, edge: Any, dest: Any = ...) -> Any:
        """Weight of an edge description, or of the edge from *edge* to *dest*.

        Returns:
            The weight, or None when no such edge exists.
        """
        ...


@runtime_checkable
class EditableGraph(Protocol):
    """Persistent editing. Each call returns the successor graph."""

    def add_nodes(self, *nodes: Hashable) -> EditableGraph:
        ...

    def add_edges(self, *descriptions: Any) -> EditableGraph:
        """Add edges given as ``(src, dest)``, ``(src, dest, weight)``
        or ``(src, dest, attrs)``."""
        ...

    def remove_nodes(self, *nodes: Hashable) -> EditableGraph:
        ...

    def remove_edges(self, *edges: Any) -> EditableGraph:
        ...

    def remove_all(self) -> EditableGraph:
        """Return an empty graph with the same mode flags."""
        ...


@runtime_checkable
class AttrGraph(Protocol):
    """Attribute bags on nodes and edges."""

    def add_attr(self, target: Any, key: Hashable, value: Any) -> AttrGraph:
        ...

    def add_attrs(self, target: Any, attributes: Mapping[Hashable, Any]) -> AttrGraph:
        ...

    def remove_attr(self, target: Any, key: Hashable) -> AttrGraph:
        ...

    def attr(self, target: Any, key: Hashable, default: Any = None) -> Any:
        ...

    def attrs(self, target: Any) -> dict[Hashable, Any]:
        ...


@runtime_checkable
class UndirectedGraph(Protocol):
    def mirror_edge(self, edge: Any) -> AnyEdge | None:
        """Return the other instance of an undirected edge, or None."""
        ...


@runtime_checkable
class QueryableGraph(Protocol):
    def find_edges(
        self, query: Mapping[Hashable, Any] | None = None, **attributes: Any
    ) -> Iterable[AnyEdge]:
        """Edges matching optional ``src``/``dest`` and attribute values.

        The result is lazy and can be iterated more than once.
        """
        ...

    def find_edge(
        self, query: Mapping[Hashable, Any] | None = None, **attributes: Any
    ) -> AnyEdge | None:
        ...


@runtime_checkable
class MixedDirectionGraph(Protocol):
    """Insertion with directedness chosen per call, ignoring the graph default."""

    def add_directed_edges(self, *descriptions: Any) -> MixedDirectionGraph:
        ...

    def add_undirected_edges(self, *descriptions: Any) -> MixedDirectionGraph:
        ...


__all__ = [
    "Graph",
    "Digraph",
    "WeightedGraph",
    "EditableGraph",
    "AttrGraph",
    "UndirectedGraph",
    "QueryableGraph",
    "MixedDirectionGraph",
]
