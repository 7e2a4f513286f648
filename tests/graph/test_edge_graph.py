import pytest

from graphadt.exceptions import DanglingEndpointError, GraphADTError
from graphadt.graph.edge_graph import EdgeAccessors, SeedEdge, build_graph

DICT_ACCESSORS = EdgeAccessors(
    origin=lambda e: e["origin"],
    target=lambda e: e["target"],
)


def test_no_edges_no_vertices(accessors):
    graph = build_graph(accessors, [], [])
    assert graph.edges == ()
    assert graph.vertices == ()
    assert graph.outgoing_edges(object()) == []
    assert graph.incoming_edges(object()) == []


def test_none_vertices_means_empty(accessors):
    graph = build_graph(accessors, [], None)
    assert graph.vertices == ()


def test_outgoing_edges_keep_input_order(loops):
    g = loops.graph
    assert g.outgoing_edges(loops.v) == [loops.e1, loops.e2]
    # Loops are accepted; several edges between two vertices are accepted
    assert g.outgoing_edges(loops.w) == [loops.e3, loops.e4]


def test_incoming_edges_include_multiloops(loops):
    g = loops.graph
    assert g.incoming_edges(loops.v) == [loops.e1]
    assert g.incoming_edges(loops.w) == [loops.e2, loops.e3, loops.e4]


def test_order_follows_edge_list_not_neighbor(make_vertex, make_edge, accessors):
    a, b, c = make_vertex("a"), make_vertex("b"), make_vertex("c")
    ab1 = make_edge(a, b, 1)
    ac = make_edge(a, c, 2)
    ab2 = make_edge(a, b, 3)
    graph = build_graph(accessors, [ab1, ac, ab2], [a, b, c])
    assert graph.outgoing_edges(a) == [ab1, ac, ab2]


def test_endpoint_integrity(loops_with_return):
    g = loops_with_return.graph
    for vertex in g.vertices:
        for edge in g.edges:
            assert (edge in g.outgoing_edges(vertex)) == (g.origin(edge) is vertex)
            assert (edge in g.incoming_edges(vertex)) == (g.target(edge) is vertex)


def test_vertices_compared_by_identity():
    # Two equal dicts are two distinct vertices
    v1 = {"name": "v"}
    v2 = {"name": "v"}
    edge = {"origin": v1, "target": v2}
    graph = build_graph(DICT_ACCESSORS, [edge], [v1, v2])
    assert graph.outgoing_edges(v1) == [edge]
    assert graph.outgoing_edges(v2) == []
    assert graph.incoming_edges(v2) == [edge]
    assert not graph.has_vertex({"name": "v"})


def test_dangling_origin_reports_index(make_vertex, make_edge, accessors):
    v, w = make_vertex("v"), make_vertex("w")
    stray = make_vertex("v")
    edges = [make_edge(v, w), make_edge(stray, w)]
    with pytest.raises(DanglingEndpointError) as exc_info:
        build_graph(accessors, edges, [v, w])
    assert exc_info.value.edge_index == 1
    assert exc_info.value.endpoint == "origin"
    assert "edge #1" in str(exc_info.value)


def test_dangling_target_reports_index(make_vertex, make_edge, accessors):
    v, w = make_vertex("v"), make_vertex("w")
    edges = [make_edge(v, w)]
    with pytest.raises(DanglingEndpointError) as exc_info:
        build_graph(accessors, edges, [v])
    assert exc_info.value.edge_index == 0
    assert exc_info.value.endpoint == "target"


def test_dangling_error_hierarchy():
    err = DanglingEndpointError(3, "origin")
    assert isinstance(err, GraphADTError)
    assert isinstance(err, ValueError)


def test_show_vertex_and_edge(loops):
    g = loops.graph
    assert g.show_vertex(loops.v) == "Vertex #0 : v"
    assert g.show_vertex(loops.w) == "Vertex #1 : w"
    assert g.show_edge(loops.e2).startswith("Edge #1 : ")


def test_show_edge_uses_json_when_possible():
    v1, v2 = "v", "w"
    edge = {"origin": v1, "target": v2}
    graph = build_graph(DICT_ACCESSORS, [edge], [v1, v2])
    assert graph.show_edge(edge) == 'Edge #0 : {"origin": "v", "target": "w"}'
    assert graph.show_vertex(v1) == 'Vertex #0 : "v"'


def test_construct_edge_uses_factory(loops):
    edge = loops.graph.construct_edge(None, loops.v)
    assert not isinstance(edge, SeedEdge)
    assert loops.graph.origin(edge) is None
    assert loops.graph.target(edge) is loops.v


def test_construct_edge_without_factory_builds_seed_edge():
    v = {"name": "v"}
    graph = build_graph(DICT_ACCESSORS, [], [v])
    seed = graph.construct_edge(None, v)
    assert isinstance(seed, SeedEdge)
    assert graph.origin(seed) is None
    assert graph.target(seed) is v
    assert "seed" in graph.show_edge(seed)
    # Seed edges are identity-compared records
    assert seed != graph.construct_edge(None, v)


def test_release_drops_indexes(loops):
    g = loops.graph
    assert not g.released
    g.release()
    assert g.released
    assert g.outgoing_edges(loops.v) == []
    assert g.incoming_edges(loops.w) == []
    # Edge and vertex tuples remain
    assert len(g.edges) == 4
    assert "released=True" in repr(g)


def test_outgoing_edges_returns_a_copy(loops):
    g = loops.graph
    g.outgoing_edges(loops.v).append(loops.e3)
    assert g.outgoing_edges(loops.v) == [loops.e1, loops.e2]


def test_edges_and_vertices_are_read_only(loops):
    g = loops.graph
    assert g.edges == (loops.e1, loops.e2, loops.e3, loops.e4)
    assert g.vertices == (loops.v, loops.w)
    with pytest.raises(AttributeError):
        g.edges.append(loops.e1)
    with pytest.raises(TypeError):
        g.vertices[0] = loops.w


def test_graph_does_not_track_input_lists(make_vertex, make_edge, accessors):
    v, w = make_vertex("v"), make_vertex("w")
    edges = [make_edge(v, w, 1)]
    vertices = [v, w]
    graph = build_graph(accessors, edges, vertices)

    edges.append(make_edge(w, v, 2))
    vertices.clear()

    assert len(graph.edges) == 1
    assert graph.vertices == (v, w)
    assert graph.has_vertex(v)
