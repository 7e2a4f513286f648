"""Conversion utilities between `Graph` and NetworkX multigraphs.

NetworkX compares nodes by value while `Graph` compares vertices by identity.
`from_networkx` reuses the NetworkX node objects as vertices and wraps every
edge in a fresh `NxEdge`, so parallel edges stay distinct. `to_networkx` keys
nodes and edges by their position in the graph, keeping the original objects
as attributes, so unhashable vertices can be exported too.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Sequence

import networkx as nx

from graphadt.graph.edge_graph import Edge, EdgeAccessors, Graph, Vertex, build_graph


@dataclass(frozen=True, eq=False)
class NxEdge:
    """Edge record for graphs converted from NetworkX.

    Attributes:
        origin: Source node.
        target: Target node.
        key: NetworkX edge key (0 for non-multigraphs).
        data: The NetworkX edge attribute dictionary (shared, not copied).
    """

    origin: Hashable
    target: Hashable
    key: Any = 0
    data: Dict[str, Any] = field(default_factory=dict, repr=False)


NX_EDGE_ACCESSORS = EdgeAccessors(
    origin=lambda e: e.origin,
    target=lambda e: e.target,
    construct=lambda s, t: NxEdge(s, t, None),
)


def from_networkx(nx_graph: nx.Graph) -> Graph:
    """Build a `Graph` from any NetworkX graph.

    Undirected graphs contribute one directed edge per NetworkX edge, in the
    orientation NetworkX reports it.

    Args:
        nx_graph: DiGraph, MultiDiGraph, Graph or MultiGraph.

    Returns:
        A graph whose vertices are the NetworkX nodes (in node order) and whose
        edges are `NxEdge` records (in NetworkX edge order).

    Raises:
        TypeError: If ``nx_graph`` is not a NetworkX graph.
    """
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(nx_graph).__name__}"
        )

    # add_edge keeps the endpoint objects it was called with as adjacency
    # keys, which may be equal to, but not the same as, the stored node.
    # Resolve every endpoint to the node object so identities match.
    nodes = {n: n for n in nx_graph.nodes()}
    vertices = list(nodes)

    if nx_graph.is_multigraph():
        edges_iter = nx_graph.edges(keys=True, data=True)
    else:
        edges_iter = ((u, v, 0, d) for u, v, d in nx_graph.edges(data=True))

    edges: List[NxEdge] = [
        NxEdge(nodes[u], nodes[v], key, data) for u, v, key, data in edges_iter
    ]
    return build_graph(NX_EDGE_ACCESSORS, edges, vertices)


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Export a `Graph` to a NetworkX MultiDiGraph.

    Nodes are the vertex indices with the vertex stored under ``"vertex"``.
    Edges are keyed by edge index with the edge stored under ``"edge"``.
    """
    vertex_ids = {id(v): i for i, v in enumerate(graph.vertices)}
    nx_graph = nx.MultiDiGraph()
    for index, vertex in enumerate(graph.vertices):
        nx_graph.add_node(index, vertex=vertex)
    for index, edge in enumerate(graph.edges):
        nx_graph.add_edge(
            vertex_ids[id(graph.origin(edge))],
            vertex_ids[id(graph.target(edge))],
            key=index,
            edge=edge,
        )
    return nx_graph


def path_to_vertices(graph: Graph, path: Sequence[Edge]) -> List[Vertex]:
    """Return the vertices visited by ``path``, starting at its first origin.

    A leading seed edge (origin ``None``) contributes only its target.
    """
    if not path:
        return []
    first_origin = graph.origin(path[0])
    vertices: List[Vertex] = [] if first_origin is None else [first_origin]
    vertices.extend(graph.target(edge) for edge in path)
    return vertices
