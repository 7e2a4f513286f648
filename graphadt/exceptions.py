"""Exceptions raised by graphadt."""

from __future__ import annotations


class GraphADTError(Exception):
    """Base class for all graphadt errors."""


class DanglingEndpointError(GraphADTError, ValueError):
    """An edge references a vertex absent from the graph's vertex list.

    Attributes:
        edge_index: Position of the offending edge in the edge list.
        endpoint: Either ``"origin"`` or ``"target"``.
    """

    def __init__(self, edge_index: int, endpoint: str) -> None:
        self.edge_index = edge_index
        self.endpoint = endpoint
        super().__init__(
            f"{endpoint} vertex for edge #{edge_index} is referenced in edges "
            f"but not in vertices"
        )
