"""Strategy containers and callback outcomes for the search engine.

A search is parameterized by three strategies:

- a store factory (see `graphadt.algorithms.store`) fixing traversal order;
- a `VisitStrategy` that threads a per-path state and decides whether the
  edge just taken may be traversed;
- a `GoalStrategy` that decides whether the path so far reaches the goal and
  folds results into the traversal state.

Visit callbacks receive a read-only view of the traversal state; only the
goal strategy writes to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple

from graphadt.graph.edge_graph import Edge, Graph

PathState = Any
TraversalState = Any


class VisitOutcome(NamedTuple):
    """Result of visiting an edge.

    Attributes:
        path_state: Path state after taking the edge.
        is_traversable: False to abandon the path at this edge.
    """

    path_state: PathState
    is_traversable: bool


class GoalOutcome(NamedTuple):
    """Result of evaluating the goal on an edge.

    Attributes:
        traversal_state: Traversal state after folding in this edge.
        is_goal_reached: True to close the path here instead of expanding it.
    """

    traversal_state: TraversalState
    is_goal_reached: bool


VisitEdge = Callable[[Edge, Graph, PathState, TraversalState], VisitOutcome]
EvaluateGoal = Callable[[Edge, Graph, PathState, TraversalState], GoalOutcome]


def _identity(state: TraversalState) -> Any:
    return state


@dataclass(frozen=True)
class VisitStrategy:
    """How a path state evolves and when an edge may be traversed.

    Attributes:
        initial_path_state: Path state carried by every starting item.
        visit_edge: ``(edge, graph, path_state, traversal_view) -> VisitOutcome``.
    """

    initial_path_state: PathState
    visit_edge: VisitEdge


@dataclass(frozen=True)
class GoalStrategy:
    """When a path is complete and how results accumulate.

    Attributes:
        initial_state: Seed of the traversal state. A callable is invoked once
            per search, so mutable accumulators are never shared across calls.
        evaluate_goal: ``(edge, graph, path_state, traversal_state) -> GoalOutcome``.
        show_results: Turns the final traversal state into the search result.
    """

    initial_state: Any
    evaluate_goal: EvaluateGoal
    show_results: Callable[[TraversalState], Any] = _identity

    def new_state(self) -> TraversalState:
        if callable(self.initial_state):
            return self.initial_state()
        return self.initial_state
