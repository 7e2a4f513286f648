"""Immutable multi-directed graph over opaque, identity-compared values.

`Graph` indexes a caller-supplied edge list by origin and by target vertex.
Vertices and edges are never inspected beyond the ``origin``/``target``
accessors supplied in `EdgeAccessors`; two equal-looking objects are still
two distinct vertices (or edges). Multi-edges and self-loops are allowed and
each vertex's edges keep their order in the input list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from graphadt.algorithms.path_utils import show
from graphadt.exceptions import DanglingEndpointError
from graphadt.logging import get_logger

Vertex = Any
Edge = Any

logger = get_logger(__name__)


@dataclass(frozen=True)
class EdgeAccessors:
    """Functions giving the engine access to caller-defined edges.

    Attributes:
        origin: Return the origin vertex of an edge.
        target: Return the target vertex of an edge.
        construct: Optional ``(origin, target) -> edge`` factory. Used to build
            synthetic seed edges; when absent the graph builds `SeedEdge`
            records instead.
    """

    origin: Callable[[Edge], Vertex]
    target: Callable[[Edge], Vertex]
    construct: Optional[Callable[[Optional[Vertex], Vertex], Edge]] = None


@dataclass(frozen=True, eq=False)
class SeedEdge:
    """Synthetic edge built by the graph when the caller supplies no factory.

    A seed edge with ``origin=None`` stands for "standing at ``target`` before
    any real edge was taken".
    """

    origin: Optional[Vertex]
    target: Vertex


class Graph:
    """Adjacency index over a fixed list of edges and vertices.

    Build instances with `build_graph`. The only mutation exposed is
    `release`, which drops the adjacency indexes.
    """

    def __init__(
        self,
        accessors: EdgeAccessors,
        edges: Sequence[Edge],
        vertices: Sequence[Vertex],
    ) -> None:
        self._accessors = accessors
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._vertices: Tuple[Vertex, ...] = tuple(vertices)

        # Keyed by id(); the tuples above keep every keyed object alive.
        self._vertex_index: Dict[int, int] = {
            id(vertex): index for index, vertex in enumerate(self._vertices)
        }
        self._edge_index: Dict[int, int] = {}
        self._outgoing: Dict[int, List[Edge]] = {}
        self._incoming: Dict[int, List[Edge]] = {}
        self._released = False

        for index, edge in enumerate(self._edges):
            self._edge_index[id(edge)] = index
            s = accessors.origin(edge)
            t = accessors.target(edge)
            if id(s) not in self._vertex_index:
                raise DanglingEndpointError(index, "origin")
            if id(t) not in self._vertex_index:
                raise DanglingEndpointError(index, "target")
            self._outgoing.setdefault(id(s), []).append(edge)
            self._incoming.setdefault(id(t), []).append(edge)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def accessors(self) -> EdgeAccessors:
        return self._accessors

    @property
    def released(self) -> bool:
        """True once `release` has dropped the adjacency indexes."""
        return self._released

    def outgoing_edges(self, vertex: Vertex) -> List[Edge]:
        """Return the edges whose origin is ``vertex``, in input order.

        Args:
            vertex: Vertex to look up (by identity).

        Returns:
            A new list of edges; empty if the vertex has no outgoing edges,
            is unknown, or the graph was released.
        """
        return list(self._outgoing.get(id(vertex), ()))

    def incoming_edges(self, vertex: Vertex) -> List[Edge]:
        """Return the edges whose target is ``vertex``, in input order."""
        return list(self._incoming.get(id(vertex), ()))

    def origin(self, edge: Edge) -> Optional[Vertex]:
        if isinstance(edge, SeedEdge):
            return edge.origin
        return self._accessors.origin(edge)

    def target(self, edge: Edge) -> Vertex:
        if isinstance(edge, SeedEdge):
            return edge.target
        return self._accessors.target(edge)

    def construct_edge(self, origin: Optional[Vertex], target: Vertex) -> Edge:
        """Build an edge from ``origin`` to ``target``.

        Uses the caller's factory when one was supplied, else a `SeedEdge`.
        The new edge is not added to the graph.
        """
        if self._accessors.construct is not None:
            return self._accessors.construct(origin, target)
        return SeedEdge(origin, target)

    def has_vertex(self, vertex: Vertex) -> bool:
        return id(vertex) in self._vertex_index

    def show_vertex(self, vertex: Vertex) -> str:
        """Label a vertex as ``Vertex #<index> : <text>`` for diagnostics."""
        index = self._vertex_index.get(id(vertex), "?")
        return f"Vertex #{index} : {show(vertex)}"

    def show_edge(self, edge: Edge) -> str:
        """Label an edge as ``Edge #<index> : <text>`` for diagnostics."""
        index = self._edge_index.get(id(edge), "?")
        if isinstance(edge, SeedEdge):
            text = f"seed -> {show(edge.target)}"
        else:
            text = show(edge)
        return f"Edge #{index} : {text}"

    def release(self) -> None:
        """Drop the adjacency indexes.

        Afterwards `outgoing_edges` and `incoming_edges` return empty lists.
        Edge and vertex tuples stay available.
        """
        self._outgoing = {}
        self._incoming = {}
        self._released = True
        logger.debug(
            "Released adjacency indexes of graph with %d edges", len(self._edges)
        )

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)}, "
            f"released={self._released})"
        )


def build_graph(
    accessors: EdgeAccessors,
    edges: Sequence[Edge],
    vertices: Optional[Sequence[Vertex]],
) -> Graph:
    """Build an immutable `Graph` from an edge list and a vertex list.

    Args:
        accessors: Edge origin/target accessors and optional edge factory.
        edges: Edges in the order they should be listed per vertex.
        vertices: Unique vertices (by identity). ``None`` means no vertices.

    Returns:
        The indexed graph.

    Raises:
        DanglingEndpointError: If an edge's origin or target is not in
            ``vertices``.
    """
    graph = Graph(accessors, edges, vertices or ())
    logger.debug(
        "Built graph with %d vertices and %d edges",
        len(graph.vertices),
        len(graph.edges),
    )
    return graph
