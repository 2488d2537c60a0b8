"""
Configuration layer for strictgraph.

Configuration in strictgraph is:
- Explicit (passed to each Graph, not global)
- Typed (a frozen dataclass)
- Optional (a Graph built without one uses the defaults)
"""

from strictgraph.config.settings import GraphConfig
from strictgraph.config.loader import load_graph_config

__all__ = [
    "GraphConfig",
    "load_graph_config",
]
