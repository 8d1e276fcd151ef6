import pytest

from netlogkit.graph import Edge, Graph, Vertex


@pytest.fixture
def triangle():
    graph = Graph()
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    c = graph.add_vertex("c")
    graph.add_edge(a, b, 1)
    graph.add_edge(a, c, 2)
    graph.add_edge(b, c, 3)
    return graph, a, b, c


def test_vertices_keep_insertion_order(triangle):
    graph, a, b, c = triangle
    assert [graph.vertex(i) for i in range(3)] == [a, b, c]
    assert [v.info for v in graph] == ["a", "b", "c"]
    assert len(graph) == 3


def test_add_existing_vertex_object():
    graph = Graph()
    vertex = Vertex(42)
    assert graph.add_vertex(vertex) is vertex
    assert graph.vertex(0) is vertex


def test_edge_counts_and_lookup(triangle):
    graph, a, b, c = triangle
    assert graph.edge_count(0) == 2
    assert graph.edge_count(1) == 1
    assert graph.edge_count(2) == 0
    assert graph.edge(0, 1).target is c
    assert graph.edge(0, 1).info == 2


def test_add_edge_by_value(triangle):
    graph, a, b, c = triangle
    edge = graph.add_edge(c, "a", 9)
    assert edge.target is a
    assert graph.edge(2, 0) is edge


def test_add_edge_by_value_uses_last_match():
    graph = Graph()
    first = graph.add_vertex("x")
    second = graph.add_vertex("x")
    edge = graph.add_edge(first, "x", 0)
    assert edge.target is second


def test_add_edge_unknown_value_raises(triangle):
    graph, a, _, _ = triangle
    with pytest.raises(KeyError):
        graph.add_edge(a, "missing", 0)


def test_add_edge_foreign_source_raises(triangle):
    graph, a, _, _ = triangle
    with pytest.raises(ValueError):
        graph.add_edge(Vertex("z"), a, 0)


def test_remove_edge(triangle):
    graph, a, b, c = triangle
    assert graph.remove_edge(a, b, 1) is True
    assert graph.edge_count(0) == 1
    assert graph.edge(0, 0).target is c


def test_remove_edge_requires_matching_info(triangle):
    graph, a, b, _ = triangle
    assert graph.remove_edge(a, b, 99) is False
    assert graph.edge_count(0) == 2


def test_vertex_remove_unknown_edge_raises():
    vertex = Vertex(1)
    with pytest.raises(ValueError):
        vertex.remove_edge(Edge(0, vertex))


def test_vertex_len_and_edge():
    source = Vertex(1)
    target = Vertex(2)
    edge = Edge(5, target)
    source.add_edge(edge)
    assert len(source) == 1
    assert source.edge(0) is edge


def test_string_forms():
    graph = Graph()
    one = graph.add_vertex(1)
    two = graph.add_vertex(2)
    graph.add_edge(one, two, 7)
    assert str(graph.edge(0, 0)) == "7 ---> 2"
    assert str(one) == "Vertex: 1\n7 ---> 2\n"
    assert str(graph) == "--- Graph ---\nVertex: 1\n7 ---> 2\nVertex: 2\n"