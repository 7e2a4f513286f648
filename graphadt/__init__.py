"""graphadt: path enumeration over identity-compared multigraphs.

graphadt indexes a caller-supplied list of opaque edges and vertices and runs
a generic breadth-first or depth-first search over edge paths, bounding how
many times one edge may repeat within a path.

Primary API:
    build_graph() - Index edges and vertices into an immutable Graph
    find_paths() - Enumerate all paths between two vertices
    search_graph_edges() - Generic search with custom strategies

Example:
    from graphadt import EdgeAccessors, FindPathSettings, build_graph, find_paths

    accessors = EdgeAccessors(origin=lambda e: e["from"], target=lambda e: e["to"])
    a, b = object(), object()
    edges = [{"from": a, "to": b}]
    graph = build_graph(accessors, edges, [a, b])
    paths = find_paths(FindPathSettings(max_retraversals=1), graph, a, b)
"""

from __future__ import annotations

from graphadt import logging
from graphadt._version import __version__
from graphadt.algorithms.path_utils import (
    count_occurrences,
    is_edge_in_path,
    is_vertex_equal,
    last_vertex_in_path,
)
from graphadt.algorithms.paths import (
    FindPathSettings,
    find_paths,
    find_paths_between_two_vertices,
    path_finding_strategies,
)
from graphadt.algorithms.search import (
    breadth_first_traverse_graph_edges,
    depth_first_traverse_graph_edges,
    search_graph_edges,
)
from graphadt.algorithms.store import QueueStore, StackStore, Store, store_for
from graphadt.algorithms.types import (
    GoalOutcome,
    GoalStrategy,
    VisitOutcome,
    VisitStrategy,
)
from graphadt.config import SEARCH_CONFIG, SearchConfig
from graphadt.exceptions import DanglingEndpointError, GraphADTError
from graphadt.graph.convert import from_networkx, to_networkx
from graphadt.graph.edge_graph import EdgeAccessors, Graph, SeedEdge, build_graph
from graphadt.types.base import SearchStrategy

__all__ = [
    # Version
    "__version__",
    # Graph
    "EdgeAccessors",
    "Graph",
    "SeedEdge",
    "build_graph",
    # Search
    "search_graph_edges",
    "breadth_first_traverse_graph_edges",
    "depth_first_traverse_graph_edges",
    "VisitStrategy",
    "GoalStrategy",
    "VisitOutcome",
    "GoalOutcome",
    "Store",
    "QueueStore",
    "StackStore",
    "store_for",
    "SearchStrategy",
    # Path finding
    "FindPathSettings",
    "find_paths",
    "find_paths_between_two_vertices",
    "path_finding_strategies",
    # Path utilities
    "count_occurrences",
    "is_edge_in_path",
    "is_vertex_equal",
    "last_vertex_in_path",
    # Errors
    "GraphADTError",
    "DanglingEndpointError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
