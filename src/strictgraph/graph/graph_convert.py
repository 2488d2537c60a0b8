from __future__ import annotations

import logging
from typing import Optional

import networkx as nx

from strictgraph.config.settings import GraphConfig
from strictgraph.graph.errors import UnsupportedGraphError
from strictgraph.graph.graph_store import Graph


def to_networkx(graph: Graph) -> nx.Graph:
    """
    Export to an undirected ``networkx.Graph``.

    Attribute records are copied, so the result does not alias the
    source graph.
    """
    g = nx.Graph()
    g.graph.update(graph.metadata)

    g.add_nodes_from((n, dict(graph.node(n))) for n in graph.nodes())
    g.add_edges_from((u, v, dict(attrs)) for u, v, attrs in graph.edges())

    logging.getLogger("strictgraph.convert").info(
        "exported to networkx: nodes=%s edges=%s",
        g.number_of_nodes(),
        g.number_of_edges(),
    )
    return g


def from_networkx(
    nx_graph: nx.Graph,
    *,
    config: Optional[GraphConfig] = None,
) -> Graph:
    """
    Import a simple undirected networkx graph.

    Directed graphs and multigraphs have no strict undirected counterpart
    and raise UnsupportedGraphError. Node ids go through the usual
    validation.
    """
    if nx_graph.is_directed():
        raise UnsupportedGraphError("Directed graphs are not supported.")
    if nx_graph.is_multigraph():
        raise UnsupportedGraphError("Multigraphs are not supported.")

    graph = Graph(config=config)
    graph.metadata = dict(nx_graph.graph)

    graph.add_nodes_from(nx_graph.nodes(data=True))
    graph.add_edges_from(nx_graph.edges(data=True))

    logging.getLogger("strictgraph.convert").info(
        "imported from networkx: nodes=%s edges=%s",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
