"""
Graph subsystem for strictgraph.

Defines the strict undirected graph container, its identifier and
attribute helpers, the error hierarchy, and networkx interop.
"""

from strictgraph.graph.errors import (
    GraphError,
    InvalidIdentifierError,
    DuplicateNodeError,
    NodeNotFoundError,
    EdgeNotFoundError,
    InvalidAttributeError,
    SelfLoopError,
    UnsupportedGraphError,
)
from strictgraph.graph.graph_schema import NodeId, AttrRecord, edge_key
from strictgraph.graph.graph_store import Graph
from strictgraph.graph.graph_convert import to_networkx, from_networkx

__all__ = [
    "Graph",
    "NodeId",
    "AttrRecord",
    "edge_key",
    "to_networkx",
    "from_networkx",
    "GraphError",
    "InvalidIdentifierError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "InvalidAttributeError",
    "SelfLoopError",
    "UnsupportedGraphError",
]
