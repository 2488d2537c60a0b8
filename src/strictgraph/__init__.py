"""
strictgraph
===========

A strict, explicit undirected graph container.

Core rules:
- Node ids are int or str, and ``1`` is not ``"1"``.
- Nodes are only created explicitly; edges never create their endpoints.
- One attribute record per unordered edge, shared by both orientations.

Public API:
- Graph
- GraphConfig
- to_networkx / from_networkx
"""

from strictgraph.config.settings import GraphConfig
from strictgraph.graph.graph_store import Graph
from strictgraph.graph.graph_convert import to_networkx, from_networkx
from strictgraph.graph.errors import (
    GraphError,
    InvalidIdentifierError,
    DuplicateNodeError,
    NodeNotFoundError,
    EdgeNotFoundError,
)

__all__ = [
    "Graph",
    "GraphConfig",
    "to_networkx",
    "from_networkx",
    "GraphError",
    "InvalidIdentifierError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
]

__version__ = "0.1.0"
