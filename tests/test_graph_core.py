import pytest

from strictgraph.graph.graph_store import Graph
from strictgraph.graph.errors import (
    DuplicateNodeError,
    EdgeNotFoundError,
    GraphError,
    InvalidIdentifierError,
    NodeNotFoundError,
)


def test_add_and_remove_nodes(graph):
    graph.add_node(1)
    graph.add_node("A", {"color": "blue"})

    assert graph.number_of_nodes() == 2
    assert graph.has_node(1)
    assert graph.has_node("A")
    assert graph.node("A") == {"color": "blue"}

    graph.remove_node(1)
    assert graph.number_of_nodes() == 1
    assert not graph.has_node(1)


def test_duplicate_node_rejected(graph):
    graph.add_node("x")
    with pytest.raises(DuplicateNodeError, match="already exists"):
        graph.add_node("x")
    assert graph.number_of_nodes() == 1


def test_int_and_str_ids_are_distinct(graph):
    graph.add_node(1, {"kind": "int"})
    graph.add_node("1", {"kind": "str"})

    assert graph.number_of_nodes() == 2
    assert graph.node(1) == {"kind": "int"}
    assert graph.node("1") == {"kind": "str"}


@pytest.mark.parametrize("bad_id", [1.5, None, True, (1, 2), ["a"]])
def test_invalid_ids_rejected(graph, bad_id):
    with pytest.raises(InvalidIdentifierError):
        graph.add_node(bad_id)
    assert graph.number_of_nodes() == 0


def test_has_node_never_raises(graph):
    graph.add_node(1)
    assert not graph.has_node(["unhashable"])
    assert not graph.has_node(True)
    assert not graph.has_node(1.0)


def test_node_attrs_are_copied_on_add(graph):
    attrs = {"color": "red"}
    graph.add_node("n", attrs)
    attrs["color"] = "green"

    assert graph.node("n") == {"color": "red"}


def test_node_returns_live_record(graph):
    graph.add_node("n")
    graph.node("n")["size"] = 3
    assert graph.node("n") == {"size": 3}


def test_keyword_attributes_merge_over_mapping(graph):
    graph.add_node("n", {"a": 1, "b": 1}, b=2)
    assert graph.node("n") == {"a": 1, "b": 2}


def test_missing_node_lookups_raise(graph):
    graph.add_node("X")

    with pytest.raises(NodeNotFoundError, match="does not exist"):
        graph.node("Y")
    with pytest.raises(NodeNotFoundError):
        graph.remove_node("Y")
    with pytest.raises(NodeNotFoundError):
        graph.neighbors("Y")
    with pytest.raises(NodeNotFoundError):
        graph.degree("Y")


def test_errors_share_base_and_builtin_types(graph):
    with pytest.raises(GraphError):
        graph.node("missing")
    with pytest.raises(LookupError):
        graph.edge("missing", "other")
    with pytest.raises(TypeError):
        graph.add_node(2.5)


def test_add_nodes_from_mixed_items(graph):
    graph.add_nodes_from([1, ("A", {"color": "blue"}), ["B", {"size": 2}], ("C",)])

    assert graph.nodes() == [1, "A", "B", "C"]
    assert graph.node("A") == {"color": "blue"}
    assert graph.node("B") == {"size": 2}
    assert graph.node("C") == {}


def test_add_nodes_from_is_not_transactional(graph):
    with pytest.raises(DuplicateNodeError):
        graph.add_nodes_from([1, 2, 1, 3])

    assert graph.nodes() == [1, 2]


def test_remove_node_drops_incident_edges(triangle):
    prior = triangle.neighbors(1)
    triangle.remove_node(1)

    assert not triangle.has_node(1)
    for nbr in prior:
        assert not triangle.has_edge(1, nbr)
        assert 1 not in triangle.neighbors(nbr)
    assert triangle.number_of_edges() == 1
    assert triangle.edges() == [(2, "A", {"weight": 2})]


def test_remove_node_with_self_loop(graph):
    graph.add_nodes_from(["a", "b"])
    graph.add_edge("a", "a")
    graph.add_edge("a", "b")

    graph.remove_node("a")

    assert graph.number_of_edges() == 0
    assert graph.neighbors("b") == []


def test_scenario_mixed_id_kinds():
    g = Graph()
    g.add_node(1)
    g.add_node(2)
    g.add_node("A")
    g.add_edge(1, "A", {"weight": 5})

    assert g.has_edge(1, "A")
    assert g.edge(1, "A") == {"weight": 5}

    g.remove_edge(1, "A")
    assert not g.has_edge(1, "A")

    g.remove_node("A")
    assert not g.has_node("A")
    assert g.number_of_nodes() == 2


def test_edge_not_found_message(graph):
    graph.add_nodes_from([1, 2])
    with pytest.raises(EdgeNotFoundError, match="Edge does not exist"):
        graph.edge(1, 2)
    with pytest.raises(EdgeNotFoundError, match="Cannot remove edge"):
        graph.remove_edge(1, 2)


def test_protocols(triangle):
    assert len(triangle) == 3
    assert "A" in triangle
    assert "1" not in triangle
    assert list(triangle) == [1, 2, "A"]
    assert repr(triangle) == "Graph(nodes=3, edges=3)"


def test_clone_is_independent(triangle):
    triangle.metadata["name"] = "tri"
    copy = triangle.clone()

    copy.node("A")["color"] = "red"
    copy.edge(1, 2)["weight"] = 100
    copy.remove_node(2)

    assert triangle.node("A") == {"color": "blue"}
    assert triangle.edge(1, 2) == {"weight": 1}
    assert triangle.has_node(2)
    assert copy.metadata == {"name": "tri"}
    assert copy.config is triangle.config


@pytest.mark.parametrize("item", [(), ("A", {}, "extra"), []])
def test_add_nodes_from_rejects_malformed_items(graph, item):
    with pytest.raises(InvalidIdentifierError):
        graph.add_nodes_from([1, item])

    assert graph.nodes() == [1]
