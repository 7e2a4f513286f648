"""Identity and path helpers shared by the graph and the search engine.

Vertices and edges are opaque caller values compared by identity, so every
helper here uses ``is`` rather than ``==``. Paths are plain tuples of edges.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from collections.abc import Set as AbstractSet
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from graphadt.graph.edge_graph import Edge, Graph, Vertex


def is_vertex_equal(s: Any, t: Any) -> bool:
    """Return True if ``s`` and ``t`` are the same vertex object."""
    return s is t


def count_occurrences(path: Sequence[Edge], edge: Edge) -> int:
    """Count how many times ``edge`` (by identity) appears in ``path``.

    Args:
        path: Sequence of edges.
        edge: Edge to look for.

    Returns:
        Number of positions in ``path`` holding exactly this edge object.
    """
    return sum(1 for e in path if e is edge)


def is_edge_in_path(path: Sequence[Edge], edge: Edge) -> bool:
    """Return True if ``edge`` (by identity) appears in ``path``."""
    return any(e is edge for e in path)


def last_vertex_in_path(graph: Graph, path: Sequence[Edge]) -> Optional[Vertex]:
    """Return the terminal vertex of ``path``, or None for an empty path."""
    if not path:
        return None
    return graph.target(path[-1])


class _SequenceView(Sequence):
    """Read-only window onto a list."""

    __slots__ = ("_data",)

    def __init__(self, data: list) -> None:
        self._data = data

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class _SetView(AbstractSet):
    """Read-only window onto a set."""

    __slots__ = ("_data",)

    def __init__(self, data: set) -> None:
        self._data = data

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


def readonly_view(state: Any) -> Any:
    """Return a read-only view of a traversal state without copying it.

    Dicts are wrapped in ``MappingProxyType``, lists and sets in read-only
    sequence and set views. Other values (tuples, frozensets, scalars, custom
    objects) are returned as is.
    """
    if isinstance(state, dict):
        return MappingProxyType(state)
    if isinstance(state, list):
        return _SequenceView(state)
    if isinstance(state, set):
        return _SetView(state)
    return state


def show(obj: Any) -> str:
    """Stringify a vertex or edge for diagnostics.

    Objects exposing a callable ``print`` attribute format themselves.
    Everything else goes through ``json.dumps``, falling back to ``repr``
    when the value is not JSON-serializable.
    """
    printer = getattr(obj, "print", None)
    if callable(printer):
        return str(printer())
    try:
        return json.dumps(obj)
    except (TypeError, ValueError):
        return repr(obj)
