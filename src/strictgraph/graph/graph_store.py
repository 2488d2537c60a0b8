from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from strictgraph.config.settings import GraphConfig
from strictgraph.graph.errors import (
    DuplicateNodeError,
    EdgeNotFoundError,
    InvalidIdentifierError,
    NodeNotFoundError,
    SelfLoopError,
)
from strictgraph.graph.graph_schema import (
    AttrRecord,
    EdgeKey,
    NodeId,
    edge_key,
    endpoints,
    is_valid_node_id,
    make_attributes,
    validate_node_id,
)


class Graph:
    """
    Strict undirected graph container.

    - Node ids must be int or str; ``1`` and ``"1"`` are different nodes.
    - Nodes are never created implicitly: edges may only join nodes that
      were added with ``add_node`` / ``add_nodes_from``.
    - Edge attributes are stored once per unordered pair, so ``(u, v)``
      and ``(v, u)`` share one record.
    - ``node(id)`` and ``edge(u, v)`` return the live records; mutating
      them edits the graph.

    Not thread-safe. Guard concurrent mutation externally.
    """

    def __init__(self, *, config: Optional[GraphConfig] = None) -> None:
        self.config = config or GraphConfig()

        # node id -> neighbor ids (dict as an insertion-ordered set); the
        # keys are the node set
        self._adj: Dict[NodeId, Dict[NodeId, None]] = {}
        self._node_attrs: Dict[NodeId, AttrRecord] = {}
        self._edge_attrs: Dict[EdgeKey, AttrRecord] = {}

        self.metadata: Dict[str, Any] = {}

    # -------------------- Nodes --------------------

    def add_node(
        self,
        node_id: NodeId,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> None:
        node_id = validate_node_id(node_id)
        if node_id in self._adj:
            raise DuplicateNodeError(node_id)
        record = make_attributes(
            attrs, extra, strict_keys=self.config.strict_attribute_keys
        )

        self._adj[node_id] = {}
        self._node_attrs[node_id] = record
        logging.getLogger("strictgraph.graph").debug("node added id=%r", node_id)

    def add_nodes_from(self, items: Iterable[Any]) -> None:
        """
        Add each item in order. An item is a bare id or an ``(id, attrs)``
        pair. Other tuple lengths raise InvalidIdentifierError.

        Not transactional: if an item fails, the items before it stay
        added and the error propagates.
        """
        for item in items:
            if isinstance(item, (tuple, list)):
                if len(item) not in (1, 2):
                    raise InvalidIdentifierError(item)
                node_id, *rest = item
                self.add_node(node_id, rest[0] if rest else None)
            else:
                self.add_node(item)

    def has_node(self, node_id: Any) -> bool:
        return is_valid_node_id(node_id) and node_id in self._adj

    def node(self, node_id: NodeId) -> AttrRecord:
        self._require_node(node_id)
        return self._node_attrs[node_id]

    def remove_node(self, node_id: NodeId) -> None:
        self._require_node(node_id)

        # snapshot: a self-loop would otherwise mutate the dict being iterated
        neighbors = list(self._adj[node_id])
        for nbr in neighbors:
            self._adj[nbr].pop(node_id, None)
            self._edge_attrs.pop(edge_key(node_id, nbr), None)

        del self._adj[node_id]
        del self._node_attrs[node_id]
        logging.getLogger("strictgraph.graph").debug(
            "node removed id=%r incident_edges=%s", node_id, len(neighbors)
        )

    # -------------------- Edges --------------------

    def add_edge(
        self,
        u: NodeId,
        v: NodeId,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> None:
        """
        Connect two existing nodes.

        Re-adding an existing edge merges ``attrs`` into its record key by
        key instead of replacing it.
        """
        u = validate_node_id(u)
        v = validate_node_id(v)
        if u not in self._adj:
            raise NodeNotFoundError(
                u, f'Cannot add edge: node "{u}" does not exist.'
            )
        if v not in self._adj:
            raise NodeNotFoundError(
                v, f'Cannot add edge: node "{v}" does not exist.'
            )
        if u == v and not self.config.allow_self_loops:
            raise SelfLoopError(u)
        record = make_attributes(
            attrs, extra, strict_keys=self.config.strict_attribute_keys
        )

        self._adj[u][v] = None
        self._adj[v][u] = None

        key = edge_key(u, v)
        existing = self._edge_attrs.get(key)
        if existing is None:
            self._edge_attrs[key] = record
            logging.getLogger("strictgraph.graph").debug(
                "edge added u=%r v=%r", u, v
            )
        else:
            existing.update(record)
            logging.getLogger("strictgraph.graph").debug(
                "edge updated u=%r v=%r keys=%s", u, v, sorted(record)
            )

    def add_edges_from(self, items: Iterable[Tuple[Any, ...]]) -> None:
        """
        Add each ``(u, v)`` or ``(u, v, attrs)`` item in order.

        Like ``add_nodes_from``, earlier items stay added when a later one
        fails.
        """
        for item in items:
            if len(item) not in (2, 3):
                raise InvalidIdentifierError(item)
            u, v, *rest = item
            self.add_edge(u, v, rest[0] if rest else None)

    def has_edge(self, u: Any, v: Any) -> bool:
        if not self.has_node(u) or not is_valid_node_id(v):
            return False
        return v in self._adj[u]

    def edge(self, u: NodeId, v: NodeId) -> AttrRecord:
        if not self.has_edge(u, v):
            raise EdgeNotFoundError(u, v)
        return self._edge_attrs[edge_key(u, v)]

    def remove_edge(self, u: NodeId, v: NodeId) -> None:
        if not self.has_edge(u, v):
            raise EdgeNotFoundError(
                u, v, f'Cannot remove edge: no edge between "{u}" and "{v}".'
            )
        self._adj[u].pop(v, None)
        self._adj[v].pop(u, None)
        del self._edge_attrs[edge_key(u, v)]
        logging.getLogger("strictgraph.graph").debug(
            "edge removed u=%r v=%r", u, v
        )

    # -------------------- Queries --------------------

    def neighbors(self, node_id: NodeId) -> List[NodeId]:
        self._require_node(node_id)
        return list(self._adj[node_id])

    def degree(self, node_id: NodeId) -> int:
        self._require_node(node_id)
        return len(self._adj[node_id])

    def number_of_nodes(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        return len(self._edge_attrs)

    def nodes(self) -> List[NodeId]:
        return list(self._adj)

    def edges(self) -> List[Tuple[NodeId, NodeId, AttrRecord]]:
        """
        One ``(u, v, attrs)`` triple per edge, ``attrs`` being the live
        record. Endpoints come out in canonical order (ints before strs).
        """
        return [
            (*endpoints(key), attrs) for key, attrs in self._edge_attrs.items()
        ]

    # -------------------- Cloning --------------------

    def clone(self) -> "Graph":
        g = Graph(config=self.config)
        g._adj = {n: dict(nbrs) for n, nbrs in self._adj.items()}
        g._node_attrs = {n: dict(a) for n, a in self._node_attrs.items()}
        g._edge_attrs = {k: dict(a) for k, a in self._edge_attrs.items()}
        g.metadata = dict(self.metadata)
        return g

    # -------------------- Protocols --------------------

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node_id: Any) -> bool:
        return self.has_node(node_id)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(list(self._adj))

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )

    # -------------------- Internals --------------------

    def _require_node(self, node_id: Any) -> None:
        if not self.has_node(node_id):
            raise NodeNotFoundError(node_id)
