import pytest

from algokit.graphs import EdgeType, Graph

CITIES = [
    "San Francisco",
    "Seattle",
    "New York",
    "Miami",
    "Chicago",
    "Houston",
    "Las Vegas",
    "Boston",
]

EDGES = [
    ("San Francisco", "Las Vegas", EdgeType.BIDIRECTIONAL),
    ("Boston", "New York", EdgeType.UNIDIRECTIONAL),
    ("Miami", "San Francisco", EdgeType.BIDIRECTIONAL),
    ("Houston", "Seattle", EdgeType.UNIDIRECTIONAL),
    ("Chicago", "New York", EdgeType.BIDIRECTIONAL),
    ("Las Vegas", "New York", EdgeType.UNIDIRECTIONAL),
    ("Seattle", "Chicago", EdgeType.UNIDIRECTIONAL),
    ("New York", "Houston", EdgeType.BIDIRECTIONAL),
    ("Seattle", "Miami", EdgeType.BIDIRECTIONAL),
    ("San Francisco", "Boston", EdgeType.BIDIRECTIONAL),
]


@pytest.fixture
def cities():
    graph = Graph()
    for name in CITIES:
        graph.add_vertex(name)
    for src, dest, kind in EDGES:
        graph.add_edge(src, dest, kind)
    return graph


def test_empty_graph_format():
    graph = Graph()
    assert len(graph) == 0
    assert graph.format() == "Number of vertices: 0\n"


def test_vertices_indexed_in_insertion_order():
    graph = Graph()
    for name in CITIES:
        graph.add_vertex(name)
    assert [v.content for v in graph] == CITIES
    assert [v.index for v in graph] == list(range(len(CITIES)))
    assert graph.nb_vertices == len(CITIES)


def test_add_vertex_keeps_coordinates():
    graph = Graph()
    vertex = graph.add_vertex("Seattle", 3, 7)
    assert (vertex.x, vertex.y) == (3, 7)
    assert graph.vertex("Seattle") is vertex


def test_duplicate_vertex_rejected():
    graph = Graph()
    graph.add_vertex("San Francisco")
    with pytest.raises(ValueError):
        graph.add_vertex("San Francisco")
    assert len(graph) == 1


def test_contains_and_lookup():
    graph = Graph()
    graph.add_vertex("Miami")
    assert "Miami" in graph
    assert "Boston" not in graph
    with pytest.raises(KeyError):
        graph.vertex("Boston")


def test_edge_to_missing_vertex_raises():
    graph = Graph()
    graph.add_vertex("Miami")
    with pytest.raises(KeyError):
        graph.add_edge("Miami", "Boston")
    with pytest.raises(KeyError):
        graph.add_edge("Boston", "Miami")
    assert graph.vertex("Miami").nb_edges == 0


def test_unidirectional_edge_is_one_way():
    graph = Graph()
    graph.add_vertex("Boston")
    graph.add_vertex("New York")
    graph.add_edge("Boston", "New York", EdgeType.UNIDIRECTIONAL)
    assert graph.vertex("Boston").neighbours == [graph.vertex("New York")]
    assert graph.vertex("New York").edges == []


def test_bidirectional_edge_both_ways_with_weight():
    graph = Graph()
    graph.add_vertex("Washington")
    graph.add_vertex("New York")
    graph.add_edge("Washington", "New York", EdgeType.BIDIRECTIONAL, 203)
    a = graph.vertex("Washington")
    b = graph.vertex("New York")
    assert a.neighbours == [b]
    assert b.neighbours == [a]
    assert [e.weight for e in a.edges + b.edges] == [203, 203]


def test_edge_counts_match_edges_added(cities):
    total = sum(v.nb_edges for v in cities)
    expected = sum(2 if kind is EdgeType.BIDIRECTIONAL else 1 for *_, kind in EDGES)
    assert total == expected


def test_format_of_city_graph(cities):
    assert cities.format() == (
        "Number of vertices: 8\n"
        "[0] San Francisco ->6->3->7\n"
        "[1] Seattle ->4->3\n"
        "[2] New York ->4->5\n"
        "[3] Miami ->0->1\n"
        "[4] Chicago ->2\n"
        "[5] Houston ->1->2\n"
        "[6] Las Vegas ->0->2\n"
        "[7] Boston ->2->0\n"
    )
    assert str(cities) == cities.format()


def test_vertex_without_edges_has_no_arrow():
    graph = Graph()
    graph.add_vertex("San Francisco")
    assert graph.format().splitlines()[1] == "[0] San Francisco"