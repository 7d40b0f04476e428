import pytest

from dfpaths.graph import Graph, InvalidVertexError, validate_vertex
from dfpaths.types import AdjacencyOrder


def test_add_edge_is_symmetric():
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)

    assert g.neighbors(0) == (1,)
    assert g.neighbors(1) == (0, 2)
    assert g.neighbors(2) == (1,)
    assert g.vertex_count() == 3
    assert g.edge_count() == 2
    assert len(g) == 3


def test_adjacency_orders(make_graph, tiny_cg_edges):
    insertion = make_graph(6, tiny_cg_edges, AdjacencyOrder.INSERTION)
    lifo = make_graph(6, tiny_cg_edges, AdjacencyOrder.LIFO)
    ordered = make_graph(6, tiny_cg_edges, AdjacencyOrder.SORTED)

    assert insertion.neighbors(0) == (5, 1, 2)
    assert lifo.neighbors(0) == (2, 1, 5)
    assert ordered.neighbors(0) == (1, 2, 5)
    assert lifo.neighbors(3) == (5, 4, 2)
    assert lifo.order is AdjacencyOrder.LIFO


def test_neighbors_returns_snapshot():
    g = Graph(2)
    g.add_edge(0, 1)
    snapshot = g.neighbors(0)
    g.add_edge(0, 1)

    assert snapshot == (1,)
    assert g.neighbors(0) == (1, 1)
    assert g.degree(0) == 2


def test_self_loop_listed_twice():
    g = Graph(2)
    g.add_edge(1, 1)

    assert g.neighbors(1) == (1, 1)
    assert g.degree(1) == 2
    assert list(g.edges()) == [(1, 1)]


def test_edges_yields_each_edge_once(make_graph, tiny_cg_edges):
    g = make_graph(6, tiny_cg_edges)
    edges = list(g.edges())

    assert len(edges) == g.edge_count() == 8
    assert sorted(edges) == sorted(tuple(sorted(e)) for e in tiny_cg_edges)


@pytest.mark.parametrize("edge", [(0, 3), (-1, 0), (3, 3)])
def test_add_edge_out_of_range(edge):
    g = Graph(3)
    with pytest.raises(InvalidVertexError):
        g.add_edge(*edge)
    assert g.edge_count() == 0


def test_neighbors_out_of_range():
    with pytest.raises(InvalidVertexError, match="vertex 4 is not between 0 and 2"):
        Graph(3).neighbors(4)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_non_integer_vertex_count():
    with pytest.raises(TypeError):
        Graph(2.5)


def test_validate_vertex():
    assert validate_vertex(2, 3) == 2
    with pytest.raises(InvalidVertexError):
        validate_vertex(3, 3)
    with pytest.raises(TypeError):
        validate_vertex(False, 3)


def test_repr():
    g = Graph(4, order=AdjacencyOrder.SORTED)
    g.add_edge(0, 1)
    assert repr(g) == "Graph(vertices=4, edges=1, order=SORTED)"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("insertion", AdjacencyOrder.INSERTION),
        ("LIFO", AdjacencyOrder.LIFO),
        ("Sorted", AdjacencyOrder.SORTED),
    ],
)
def test_adjacency_order_from_string(text, expected):
    assert AdjacencyOrder.from_string(text) is expected


def test_adjacency_order_from_string_invalid():
    with pytest.raises(ValueError, match="Invalid adjacency order"):
        AdjacencyOrder.from_string("random")
