"""Shared fixtures: small multigraphs with self-loops and parallel edges."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from graphadt.graph.edge_graph import EdgeAccessors, build_graph
from graphadt.logging import reset_logging, setup_root_logger


class Vertex:
    """Named vertex; two instances with one name are still two vertices."""

    def __init__(self, name: str) -> None:
        self.name = name

    def print(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Vertex({self.name!r})"


class Edge:
    """Directed edge with an id used to compare enumerations in tests."""

    def __init__(self, origin, target, id=None) -> None:
        self.origin = origin
        self.target = target
        self.id = id

    def __repr__(self) -> str:
        return f"Edge({self.id})"


ACCESSORS = EdgeAccessors(
    origin=lambda e: e.origin,
    target=lambda e: e.target,
    construct=lambda s, t: Edge(s, t, 0),
)


def ids(paths):
    return [[e.id for e in path] for path in paths]


@pytest.fixture
def accessors():
    return ACCESSORS


@pytest.fixture
def loops():
    # e1: v -> v, e2: v -> w, e3: w -> w, e4: w -> w
    #
    #   ┌─e1─┐       ┌─e3─┐
    #   └─►  v ──e2──► w ◄┘
    #                └─e4─┘
    v, w = Vertex("v"), Vertex("w")
    e1 = Edge(v, v, 1)
    e2 = Edge(v, w, 2)
    e3 = Edge(w, w, 3)
    e4 = Edge(w, w, 4)
    edges = [e1, e2, e3, e4]
    graph = build_graph(ACCESSORS, edges, [v, w])
    return SimpleNamespace(v=v, w=w, e1=e1, e2=e2, e3=e3, e4=e4, graph=graph)


@pytest.fixture
def loops_with_return(loops):
    # Same as ``loops`` plus e5: w -> v
    e5 = Edge(loops.w, loops.v, 5)
    edges = [loops.e1, loops.e2, loops.e3, loops.e4, e5]
    graph = build_graph(ACCESSORS, edges, [loops.v, loops.w])
    return SimpleNamespace(**{**vars(loops), "e5": e5, "graph": graph})


@pytest.fixture
def disconnected(loops):
    # ``loops`` plus an isolated vertex u carrying only a self-loop
    u = Vertex("u")
    e5 = Edge(u, u, 5)
    edges = [loops.e1, loops.e2, loops.e3, e5]
    graph = build_graph(ACCESSORS, edges, [loops.v, loops.w, u])
    return SimpleNamespace(v=loops.v, w=loops.w, u=u, graph=graph)


@pytest.fixture
def clean_logging():
    """Give a test a freshly configured graphadt root logger."""
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def make_vertex():
    return Vertex


@pytest.fixture
def make_edge():
    return Edge


@pytest.fixture
def edge_ids():
    """Map a list of paths to lists of edge ids."""
    return ids
