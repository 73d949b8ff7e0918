"""Persistent graph structure with mixed directedness and parallel edges.

Public API:
    Ubergraph: Immutable graph value implementing every capability protocol.
    EdgeView: Lazy, re-iterable result of edge enumeration and queries.

An ``Ubergraph`` is never mutated. Each edit copies the top-level maps,
replaces only the ``NodeInfo`` records it touches and returns a new graph,
so earlier values stay valid and share everything that did not change.

Undirected edges are stored as two ``UndirectedEdge`` instances, one per
direction, linked through ``mirrors``. Only the forward (canonical)
instance is returned by ``edges()``; both are reachable through adjacency
lookups so that an undirected edge can be seen from either endpoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from numbers import Number
from typing import Any, Callable, Hashable, Iterable, Iterator, Mapping

from .exceptions import InvalidDescriptionError, InvalidTargetError
from .types import (
    AnyEdge,
    Direction,
    Edge,
    NodeInfo,
    UndirectedEdge,
    is_edge,
    new_edge_id,
    swap_edge,
)

logger = logging.getLogger(__name__)

_MISSING = object()
_EMPTY_NODE = NodeInfo()


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _as_attr_map(attributes: Any) -> dict[Hashable, Any] | None:
    """Normalize an edge's third element: None, a weight, or an attribute bag."""
    if attributes is None:
        return None
    if _is_number(attributes):
        return {"weight": attributes}
    if isinstance(attributes, Mapping):
        return dict(attributes)
    raise InvalidDescriptionError(f"Invalid edge attributes: {attributes!r}")


def _split_description(description: Any) -> tuple[Any, Any, Any]:
    if not isinstance(description, (tuple, list)) or len(description) not in (2, 3):
        raise InvalidDescriptionError(f"Invalid edge description: {description!r}")
    src, dest = description[0], description[1]
    attributes = description[2] if len(description) == 3 else None
    return src, dest, attributes


def _submap(query: Mapping[Hashable, Any], bag: Mapping[Hashable, Any]) -> bool:
    return all(bag.get(key, _MISSING) == value for key, value in query.items())


def _link(node_map: dict[Hashable, NodeInfo], edge: AnyEdge) -> None:
    # Sequential so that self-loops see their own first update.
    node_map[edge.src] = node_map[edge.src].with_out_edge(edge)
    node_map[edge.dest] = node_map[edge.dest].with_in_edge(edge)


def _unlink(node_map: dict[Hashable, NodeInfo], edge: AnyEdge) -> None:
    node_map[edge.src] = node_map[edge.src].without_out_edge(edge)
    node_map[edge.dest] = node_map[edge.dest].without_in_edge(edge)


class EdgeView:
    """Lazy, re-iterable sequence of edges.

    Nothing is scanned until iteration starts, and every ``iter()`` starts a
    fresh scan, so a view can be walked any number of times.
    """

    __slots__ = ("_scan",)

    def __init__(self, scan: Callable[[], Iterable[AnyEdge]]) -> None:
        self._scan = scan

    def __iter__(self) -> Iterator[AnyEdge]:
        return iter(self._scan())

    def __repr__(self) -> str:
        return f"EdgeView({list(self)!r})"


@dataclass(frozen=True)
class Ubergraph:
    """Immutable graph supporting directed, undirected and parallel edges.

    Attributes:
        allow_parallel: When False, re-adding an edge between the same
            endpoints merges attributes into the existing edge.
        undirected: Directedness used by ``add_edge`` and ``add_edges``.
        node_map: Node -> adjacency record.
        attr_map: Node or edge -> attribute bag.
        mirrors: Undirected edge instance -> its partner instance.
    """

    allow_parallel: bool = False
    undirected: bool = False
    node_map: dict[Hashable, NodeInfo] = field(default_factory=dict)
    attr_map: dict[Hashable, dict[Hashable, Any]] = field(default_factory=dict)
    mirrors: dict[UndirectedEdge, UndirectedEdge] = field(default_factory=dict)

    # ── graph ─────────────────────────────────────────────────

    def nodes(self) -> list[Hashable]:
        return list(self.node_map)

    def edges(self) -> EdgeView:
        """Every edge once; undirected edges in their canonical direction."""
        return EdgeView(
            lambda: (edge for edge in self._all_edge_instances() if edge.canonical)
        )

    def has_node(self, node: Any) -> bool:
        return self._node_info(node) is not None

    def has_edge(self, src: Hashable, dest: Hashable) -> bool:
        return self._get_edge(src, dest) is not None

    def count_nodes(self) -> int:
        return len(self.node_map)

    def count_edges(self) -> int:
        return sum(1 for _ in self.edges())

    def successors(self, node: Hashable) -> list[Hashable]:
        return list(dict.fromkeys(edge.dest for edge in self.out_edges(node)))

    def predecessors(self, node: Hashable) -> list[Hashable]:
        return list(dict.fromkeys(edge.src for edge in self.in_edges(node)))

    def out_edges(self, node: Hashable) -> list[AnyEdge]:
        info = self._node_info(node) or _EMPTY_NODE
        return [edge for bucket in info.out_edges.values() for edge in bucket]

    def in_edges(self, node: Hashable) -> list[AnyEdge]:
        info = self._node_info(node) or _EMPTY_NODE
        return [edge for bucket in info.in_edges.values() for edge in bucket]

    def out_degree(self, node: Hashable) -> int | None:
        info = self._node_info(node)
        return None if info is None else info.out_degree

    def in_degree(self, node: Hashable) -> int | None:
        info = self._node_info(node)
        return None if info is None else info.in_degree

    def degree(self, node: Hashable, direction: Direction = Direction.BOTH) -> int | None:
        info = self._node_info(node)
        if info is None:
            return None
        if direction is Direction.OUTGOING:
            return info.out_degree
        if direction is Direction.INCOMING:
            return info.in_degree
        return info.out_degree + info.in_degree

    def weight(self, edge: Any, dest: Any = _MISSING) -> Any:
        """Weight of an edge, defaulting to 1 when the edge carries none.

        Accepts an edge description, or two endpoints. Returns None when no
        edge matches.
        """
        if dest is _MISSING:
            resolved = self.edge_description_to_edge(edge)
        else:
            resolved = self._get_edge(edge, dest)
        if resolved is None or not self._contains_edge(resolved):
            return None
        return self.attr_map.get(resolved, {}).get("weight", 1)

    def mirror_edge(self, edge: Any) -> UndirectedEdge | None:
        resolved = self.edge_description_to_edge(edge)
        if resolved is None or not self._contains_edge(resolved):
            return None
        return self.mirrors.get(resolved)

    # ── queries ───────────────────────────────────────────────

    def find_edges(
        self, query: Mapping[Hashable, Any] | None = None, **attributes: Any
    ) -> EdgeView:
        """Edges matching a partial description.

        ``src`` and ``dest`` narrow the candidates; every other key must be
        present with an equal value in the edge's attribute bag. Without
        either endpoint every edge instance is scanned, including both
        instances of each undirected edge. The result is lazy and each
        iteration rescans the graph.
        """
        criteria = dict(query or {})
        criteria.update(attributes)
        src = criteria.pop("src", _MISSING)
        dest = criteria.pop("dest", _MISSING)

        def candidates() -> Iterable[AnyEdge]:
            if src is not _MISSING and dest is not _MISSING:
                return self._bucket(src, dest)
            if src is not _MISSING:
                return self.out_edges(src)
            if dest is not _MISSING:
                return self.in_edges(dest)
            return self._all_edge_instances()

        return EdgeView(
            lambda: (
                edge
                for edge in candidates()
                if _submap(criteria, self.attr_map.get(edge, {}))
            )
        )

    def find_edge(
        self, query: Mapping[Hashable, Any] | None = None, **attributes: Any
    ) -> AnyEdge | None:
        return next(iter(self.find_edges(query, **attributes)), None)

    def edge_description_to_edge(self, description: Any) -> AnyEdge | None:
        """Resolve an edge description to an edge of this graph.

        Edge objects pass through unchanged. ``(src, dest)`` finds the first
        edge between the endpoints, ``(src, dest, weight)`` one with that
        weight, and ``(src, dest, attrs)`` one whose attributes contain
        *attrs*.

        Returns:
            The edge, or None when nothing matches.

        Raises:
            InvalidDescriptionError: If *description* has any other shape.
        """
        if is_edge(description):
            return description
        if isinstance(description, (tuple, list)):
            if len(description) == 2:
                return self._get_edge(description[0], description[1])
            if len(description) == 3:
                src, dest, extra = description
                if _is_number(extra):
                    return self.find_edge(src=src, dest=dest, weight=extra)
                if isinstance(extra, Mapping):
                    return self.find_edge({**extra, "src": src, "dest": dest})
        raise InvalidDescriptionError(f"Invalid edge description: {description!r}")

    def resolve_node_or_edge(self, target: Any) -> Hashable:
        """Resolve an attribute target to a node of, or an edge in, this graph.

        Raises:
            InvalidTargetError: If *target* is neither.
        """
        if self.has_node(target):
            return target
        try:
            edge = self.edge_description_to_edge(target)
        except InvalidDescriptionError as e:
            raise InvalidTargetError(f"Invalid node or edge description: {target!r}") from e
        if edge is None or not self._contains_edge(edge):
            raise InvalidTargetError(f"No node or edge matches: {target!r}")
        return edge

    # ── node editing ──────────────────────────────────────────

    def add_node(self, node: Hashable) -> Ubergraph:
        if node in self.node_map:
            return self
        node_map = dict(self.node_map)
        node_map[node] = NodeInfo()
        return replace(self, node_map=node_map)

    def add_nodes(self, *nodes: Hashable) -> Ubergraph:
        g = self
        for node in nodes:
            g = g.add_node(node)
        return g

    def remove_node(self, node: Hashable) -> Ubergraph:
        if not self.has_node(node):
            return self
        g = self.remove_edges(*self.out_edges(node))
        g = g.remove_edges(*g.in_edges(node))
        node_map = dict(g.node_map)
        del node_map[node]
        attr_map = dict(g.attr_map)
        attr_map.pop(node, None)
        return replace(g, node_map=node_map, attr_map=attr_map)

    def remove_nodes(self, *nodes: Hashable) -> Ubergraph:
        g = self
        for node in nodes:
            g = g.remove_node(node)
        return g

    # ── edge editing ──────────────────────────────────────────

    def add_edge(self, src: Hashable, dest: Hashable, attributes: Any = None) -> Ubergraph:
        """Add an edge with the graph's default directedness.

        Without parallel edges, an existing edge between the endpoints gets
        *attributes* merged into its bag instead, whatever its direction.
        """
        attributes = _as_attr_map(attributes)
        existing = None if self.allow_parallel else self._get_edge(src, dest)
        if existing is not None:
            return self._merge_attrs(existing, attributes)
        if self.undirected:
            return self._insert_undirected(src, dest, attributes)
        return self._insert_directed(src, dest, attributes)

    def add_edges(self, *descriptions: Any) -> Ubergraph:
        g = self
        for description in descriptions:
            g = g.add_edge(*_split_description(description))
        return g

    def add_directed_edge(
        self, src: Hashable, dest: Hashable, attributes: Any = None
    ) -> Ubergraph:
        attributes = _as_attr_map(attributes)
        existing = None if self.allow_parallel else self._get_edge(src, dest)
        if existing is not None:
            return self._merge_attrs(existing, attributes)
        return self._insert_directed(src, dest, attributes)

    def add_directed_edges(self, *descriptions: Any) -> Ubergraph:
        g = self
        for description in descriptions:
            g = g.add_directed_edge(*_split_description(description))
        return g

    def add_undirected_edge(
        self, src: Hashable, dest: Hashable, attributes: Any = None
    ) -> Ubergraph:
        """Add an undirected edge regardless of the graph's default.

        Without parallel edges, any existing edge in either direction is
        removed and replaced by a single undirected edge whose attributes
        combine both old bags and *attributes*, later ones winning.
        """
        attributes = _as_attr_map(attributes)
        if self.allow_parallel:
            return self._insert_undirected(src, dest, attributes)

        forward = self._get_edge(src, dest)
        backward = self._get_edge(dest, src)
        if forward is None and backward is None:
            return self._insert_undirected(src, dest, attributes)

        merged: dict[Hashable, Any] = {}
        merged.update(self.attr_map.get(forward, {}))
        merged.update(self.attr_map.get(backward, {}))
        merged.update(attributes or {})
        logger.debug("Replacing edge(s) %r -- %r with an undirected edge", src, dest)
        g = self.remove_edges(*(e for e in (forward, backward) if e is not None))
        return g._insert_undirected(src, dest, merged or None)

    def add_undirected_edges(self, *descriptions: Any) -> Ubergraph:
        g = self
        for description in descriptions:
            g = g.add_undirected_edge(*_split_description(description))
        return g

    def remove_edge(self, edge: Any) -> Ubergraph:
        """Remove an edge, and its mirror if undirected. Missing edges are a no-op."""
        resolved = self.edge_description_to_edge(edge)
        if resolved is None or not self._contains_edge(resolved):
            logger.debug("Edge %r not in graph, nothing to remove", edge)
            return self

        node_map = dict(self.node_map)
        attr_map = dict(self.attr_map)
        mirrors = self.mirrors
        _unlink(node_map, resolved)
        attr_map.pop(resolved, None)

        mirror = self.mirrors.get(resolved)
        if mirror is not None:
            _unlink(node_map, mirror)
            attr_map.pop(mirror, None)
            mirrors = dict(mirrors)
            del mirrors[resolved]
            del mirrors[mirror]

        return replace(self, node_map=node_map, attr_map=attr_map, mirrors=mirrors)

    def remove_edges(self, *edges: Any) -> Ubergraph:
        g = self
        for edge in edges:
            g = g.remove_edge(edge)
        return g

    def remove_all(self) -> Ubergraph:
        return Ubergraph(allow_parallel=self.allow_parallel, undirected=self.undirected)

    # ── attributes ────────────────────────────────────────────

    def add_attr(self, target: Any, key: Hashable, value: Any) -> Ubergraph:
        return self.add_attrs(target, {key: value})

    def add_attrs(self, target: Any, attributes: Mapping[Hashable, Any]) -> Ubergraph:
        resolved = self.resolve_node_or_edge(target)
        bag = dict(self.attr_map.get(resolved, {}))
        bag.update(attributes)
        return self._store_attrs(resolved, bag)

    def remove_attr(self, target: Any, key: Hashable) -> Ubergraph:
        resolved = self.resolve_node_or_edge(target)
        bag = dict(self.attr_map.get(resolved, {}))
        if key not in bag:
            return self
        del bag[key]
        return self._store_attrs(resolved, bag)

    def attr(self, target: Any, key: Hashable, default: Any = None) -> Any:
        return self.attr_map.get(self.resolve_node_or_edge(target), {}).get(key, default)

    def attrs(self, target: Any) -> dict[Hashable, Any]:
        return dict(self.attr_map.get(self.resolve_node_or_edge(target), {}))

    # ── transpose ─────────────────────────────────────────────

    def transpose(self) -> Ubergraph:
        """Reverse every edge instance.

        Undirected edges come back with forward and mirror roles exchanged,
        which leaves their meaning unchanged. Applying it twice yields an
        equal graph.
        """
        node_map = {
            node: NodeInfo(
                out_edges={k: tuple(map(swap_edge, v)) for k, v in info.in_edges.items()},
                in_edges={k: tuple(map(swap_edge, v)) for k, v in info.out_edges.items()},
                out_degree=info.in_degree,
                in_degree=info.out_degree,
            )
            for node, info in self.node_map.items()
        }
        attr_map = {
            (swap_edge(key) if is_edge(key) else key): bag
            for key, bag in self.attr_map.items()
        }
        mirrors = {swap_edge(e): swap_edge(m) for e, m in self.mirrors.items()}
        return replace(self, node_map=node_map, attr_map=attr_map, mirrors=mirrors)

    # ── internals ─────────────────────────────────────────────

    def _node_info(self, node: Any) -> NodeInfo | None:
        try:
            return self.node_map.get(node)
        except TypeError:
            # Unhashable values (list edge descriptions) are never nodes.
            return None

    def _bucket(self, src: Any, dest: Any) -> tuple[AnyEdge, ...]:
        info = self._node_info(src)
        if info is None or not self.has_node(dest):
            return ()
        return info.out_edges.get(dest, ())

    def _get_edge(self, src: Hashable, dest: Hashable) -> AnyEdge | None:
        bucket = self._bucket(src, dest)
        return bucket[0] if bucket else None

    def _contains_edge(self, edge: AnyEdge) -> bool:
        return edge in self._bucket(edge.src, edge.dest)

    def _all_edge_instances(self) -> Iterator[AnyEdge]:
        for info in self.node_map.values():
            for bucket in info.out_edges.values():
                yield from bucket

    def _store_attrs(self, resolved: Hashable, bag: dict[Hashable, Any]) -> Ubergraph:
        # Both instances of an undirected edge share one bag.
        keys = [resolved]
        if resolved in self.mirrors:
            keys.append(self.mirrors[resolved])
        attr_map = dict(self.attr_map)
        for key in keys:
            if bag:
                attr_map[key] = bag
            else:
                attr_map.pop(key, None)
        return replace(self, attr_map=attr_map)

    def _merge_attrs(self, edge: AnyEdge, attributes: dict[Hashable, Any] | None) -> Ubergraph:
        if not attributes:
            return self
        logger.debug("Edge %r already exists, merging attributes %r", edge, attributes)
        bag = dict(self.attr_map.get(edge, {}))
        bag.update(attributes)
        return self._store_attrs(edge, bag)

    def _insert_directed(
        self, src: Hashable, dest: Hashable, attributes: dict[Hashable, Any] | None
    ) -> Ubergraph:
        g = self.add_node(src).add_node(dest)
        edge = Edge(new_edge_id(), src, dest)
        node_map = dict(g.node_map)
        _link(node_map, edge)
        attr_map = g.attr_map
        if attributes is not None:
            attr_map = dict(attr_map)
            attr_map[edge] = attributes
        return replace(g, node_map=node_map, attr_map=attr_map)

    def _insert_undirected(
        self, src: Hashable, dest: Hashable, attributes: dict[Hashable, Any] | None
    ) -> Ubergraph:
        g = self.add_node(src).add_node(dest)
        forward = UndirectedEdge(new_edge_id(), src, dest, duplicate=False)
        backward = UndirectedEdge(new_edge_id(), dest, src, duplicate=True)
        node_map = dict(g.node_map)
        _link(node_map, forward)
        _link(node_map, backward)
        attr_map = g.attr_map
        if attributes is not None:
            attr_map = dict(attr_map)
            attr_map[forward] = attributes
            attr_map[backward] = attributes
        mirrors = dict(g.mirrors)
        mirrors[forward] = backward
        mirrors[backward] = forward
        return replace(g, node_map=node_map, attr_map=attr_map, mirrors=mirrors)


__all__ = ["Ubergraph", "EdgeView"]
