from __future__ import annotations

import pytest

from strictgraph.graph.graph_store import Graph


@pytest.fixture()
def graph() -> Graph:
    return Graph()


@pytest.fixture()
def triangle() -> Graph:
    """
    Nodes 1, 2, "A" fully connected, with a weight on every edge.
    """
    g = Graph()
    g.add_nodes_from([1, 2, ("A", {"color": "blue"})])
    g.add_edge(1, 2, {"weight": 1})
    g.add_edge(2, "A", {"weight": 2})
    g.add_edge("A", 1, {"weight": 3})
    return g
