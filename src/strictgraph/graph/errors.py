from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base exception for graph container operations."""


class InvalidIdentifierError(GraphError, TypeError):
    """Raised when a node id is neither integral nor textual."""

    def __init__(self, node_id: Any) -> None:
        self.node_id = node_id
        super().__init__(
            f"Invalid node id: {node_id!r}. Only int or str is allowed."
        )


class DuplicateNodeError(GraphError, ValueError):
    def __init__(self, node_id: Any) -> None:
        self.node_id = node_id
        super().__init__(f'Node "{node_id}" already exists.')


class NodeNotFoundError(GraphError, LookupError):
    """
    Raised when an operation requires a node that is not in the graph.

    ``message`` overrides the default text so edge operations can name
    the missing endpoint.
    """

    def __init__(self, node_id: Any, message: str | None = None) -> None:
        self.node_id = node_id
        super().__init__(message or f'Node "{node_id}" does not exist.')


class EdgeNotFoundError(GraphError, LookupError):
    def __init__(self, u: Any, v: Any, message: str | None = None) -> None:
        self.u = u
        self.v = v
        super().__init__(
            message or f'Edge does not exist between "{u}" and "{v}".'
        )


class InvalidAttributeError(GraphError, TypeError):
    """Raised when an attribute record is not a mapping with string keys."""


class SelfLoopError(GraphError, ValueError):
    def __init__(self, node_id: Any) -> None:
        self.node_id = node_id
        super().__init__(f'Self-loops are disabled: cannot connect "{node_id}" to itself.')


class UnsupportedGraphError(GraphError, ValueError):
    """Raised when importing a directed graph or a multigraph."""
