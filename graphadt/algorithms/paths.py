"""Enumerate every path between two vertices with bounded edge repetition.

This is a ready-made configuration of `search_graph_edges`:

- the path state is the tuple of real edges taken so far;
- an edge is traversable while it appears fewer than ``max_retraversals``
  times in that tuple;
- the goal is reached on the first real edge landing on the target vertex,
  which closes the path, so targets never appear mid-path;
- every closed path is appended to a result list, without deduplication.

The search is seeded with a synthetic edge whose origin is ``None`` and whose
target is the source vertex. That edge never reaches the goal and never
appears in returned paths, which lets ``source is target`` enumerate the
cycles back to the source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from graphadt.algorithms.path_utils import count_occurrences
from graphadt.algorithms.search import search_graph_edges
from graphadt.algorithms.store import store_for
from graphadt.algorithms.types import (
    GoalOutcome,
    GoalStrategy,
    VisitOutcome,
    VisitStrategy,
)
from graphadt.config import SEARCH_CONFIG
from graphadt.graph.edge_graph import Edge, Graph, Vertex
from graphadt.logging import get_logger
from graphadt.types.base import SearchStrategy

logger = get_logger(__name__)

EdgePath = Tuple[Edge, ...]


@dataclass(frozen=True)
class FindPathSettings:
    """Settings for `find_paths_between_two_vertices`.

    Attributes:
        max_retraversals: Maximum number of times one edge may appear in a
            path. ``None`` uses ``SEARCH_CONFIG.default_max_retraversals``.
            Zero is accepted and makes every edge untraversable.
        strategy: BFS or DFS, as a SearchStrategy or its name. ``None`` uses
            ``SEARCH_CONFIG.default_strategy``.
    """

    max_retraversals: Optional[int] = None
    strategy: Optional[SearchStrategy | str] = None

    def __post_init__(self) -> None:
        if self.max_retraversals is not None and self.max_retraversals < 0:
            raise ValueError(
                f"max_retraversals must be >= 0, got {self.max_retraversals}"
            )
        if self.strategy is not None:
            # Fail on unknown names at construction rather than at search time
            SearchStrategy.coerce(self.strategy)

    def resolved_max_retraversals(self) -> int:
        if self.max_retraversals is None:
            return SEARCH_CONFIG.default_max_retraversals
        return self.max_retraversals

    def resolved_strategy(self) -> SearchStrategy:
        if self.strategy is None:
            return SearchStrategy.coerce(SEARCH_CONFIG.default_strategy)
        return SearchStrategy.coerce(self.strategy)


def path_finding_strategies(
    max_retraversals: int, target: Vertex
) -> Tuple[VisitStrategy, GoalStrategy]:
    """Build the visit and goal strategies used for path finding.

    Args:
        max_retraversals: Maximum number of times one edge may appear in a path.
        target: Vertex closing a path when reached through a real edge.

    Returns:
        ``(visit, goal)``; the goal's results are a list of edge tuples.
    """

    def visit_edge(
        edge: Edge, graph: Graph, path: EdgePath, traversal_view: object
    ) -> VisitOutcome:
        if graph.origin(edge) is None:
            # Seed edge: stand at the source without recording a step
            return VisitOutcome(path, True)
        is_traversable = count_occurrences(path, edge) < max_retraversals
        return VisitOutcome(path + (edge,), is_traversable)

    def evaluate_goal(
        edge: Edge, graph: Graph, path: EdgePath, results: List[EdgePath]
    ) -> GoalOutcome:
        is_goal_reached = (
            graph.origin(edge) is not None and graph.target(edge) is target
        )
        if is_goal_reached:
            results.append(path)
        return GoalOutcome(results, is_goal_reached)

    visit = VisitStrategy(initial_path_state=(), visit_edge=visit_edge)
    goal = GoalStrategy(initial_state=list, evaluate_goal=evaluate_goal)
    return visit, goal


def find_paths_between_two_vertices(
    settings: Optional[FindPathSettings],
    graph: Graph,
    source: Vertex,
    target: Vertex,
) -> List[EdgePath]:
    """Enumerate all paths from ``source`` to ``target``.

    Args:
        settings: Re-traversal bound and strategy; ``None`` for defaults.
        graph: Graph to search.
        source: Start vertex.
        target: Goal vertex (compared by identity).

    Returns:
        Paths as tuples of edges, in enumeration order. Empty when the target
        is unreachable. When ``source is target`` the empty path is not
        reported; each returned path leaves and comes back.
    """
    settings = settings or FindPathSettings()
    max_retraversals = settings.resolved_max_retraversals()
    strategy = settings.resolved_strategy()

    visit, goal = path_finding_strategies(max_retraversals, target)
    seed = graph.construct_edge(None, source)
    paths = search_graph_edges(store_for(strategy), visit, goal, [seed], graph)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Found %d paths from %s to %s (%s, max_retraversals=%d)",
            len(paths),
            graph.show_vertex(source),
            graph.show_vertex(target),
            strategy.name,
            max_retraversals,
        )
    return paths


find_paths = find_paths_between_two_vertices
