"""Generic worklist search over graph edges.

`search_graph_edges` starts from one or more edges and repeatedly takes a
pending ``(edge, path_state)`` item from a store, visits the edge, evaluates
the goal, and either closes the path or pushes one new item per outgoing edge
of the edge's target. The loop is iterative, so long or cyclic paths never
grow the call stack.

Enumeration order depends only on the order edges are listed per vertex and
on the store discipline. The engine does not bound the frontier: termination
is up to the visit strategy (for example a re-traversal bound) or the goal.
"""

from __future__ import annotations

from typing import Any, Iterable

from graphadt.algorithms.path_utils import readonly_view
from graphadt.algorithms.store import QueueStore, StackStore, StoreFactory
from graphadt.algorithms.types import GoalStrategy, VisitStrategy
from graphadt.config import SEARCH_CONFIG
from graphadt.graph.edge_graph import Edge, Graph, Vertex
from graphadt.logging import get_logger

logger = get_logger(__name__)


def search_graph_edges(
    store: StoreFactory,
    visit: VisitStrategy,
    goal: GoalStrategy,
    starting_edges: Iterable[Edge],
    graph: Graph,
) -> Any:
    """Search the graph from ``starting_edges`` until the store is exhausted.

    Args:
        store: Zero-argument factory returning an empty store.
        visit: Path-state threading and traversability.
        goal: Goal evaluation and result accumulation.
        starting_edges: Edges seeding the frontier, each paired with
            ``visit.initial_path_state``.
        graph: Graph providing outgoing edges and edge targets.

    Returns:
        ``goal.show_results`` applied to the final traversal state.
    """
    traversal_state = goal.new_state()
    frontier = store()
    seeds = [(edge, visit.initial_path_state) for edge in starting_edges]
    frontier.add(seeds)

    # Tracked here; stores only promise add, take and is_empty
    pending = len(seeds)
    popped = 0
    closed = 0
    warned = False
    while not frontier.is_empty():
        edge, path_state = frontier.take()
        pending -= 1
        popped += 1

        path_state, is_traversable = visit.visit_edge(
            edge, graph, path_state, readonly_view(traversal_state)
        )
        if not is_traversable:
            continue

        traversal_state, is_goal_reached = goal.evaluate_goal(
            edge, graph, path_state, traversal_state
        )
        if is_goal_reached:
            closed += 1
            continue

        next_items = [
            (next_edge, path_state)
            for next_edge in graph.outgoing_edges(graph.target(edge))
        ]
        frontier.add(next_items)
        pending += len(next_items)

        if not warned and SEARCH_CONFIG.should_warn(pending):
            warned = True
            logger.warning(
                "Search frontier holds %d pending items; check the traversal bound",
                pending,
            )

    logger.debug(
        "Search finished: %d items taken, %d paths closed at goal", popped, closed
    )
    return goal.show_results(traversal_state)


def breadth_first_traverse_graph_edges(
    visit: VisitStrategy, goal: GoalStrategy, start: Vertex, graph: Graph
) -> Any:
    """Breadth-first search seeded with every outgoing edge of ``start``."""
    return search_graph_edges(
        QueueStore, visit, goal, graph.outgoing_edges(start), graph
    )


def depth_first_traverse_graph_edges(
    visit: VisitStrategy, goal: GoalStrategy, start: Vertex, graph: Graph
) -> Any:
    """Depth-first search seeded with every outgoing edge of ``start``."""
    return search_graph_edges(
        StackStore, visit, goal, graph.outgoing_edges(start), graph
    )
