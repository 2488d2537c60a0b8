from __future__ import annotations

import numbers
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from strictgraph.graph.errors import InvalidAttributeError, InvalidIdentifierError

NodeId = Union[int, str]
AttrRecord = Dict[str, Any]

# Tag ranks order every int before every str, so tagged ids are totally
# ordered without ever comparing an int to a str.
INT_KIND = 0
STR_KIND = 1

NodeKey = Tuple[int, NodeId]
EdgeKey = Tuple[NodeKey, NodeKey]


def is_valid_node_id(node_id: Any) -> bool:
    """
    True for textual ids and integral ids.

    ``bool`` is an ``int`` subclass in Python but is not accepted as an
    integral identifier.
    """
    if isinstance(node_id, bool):
        return False
    return isinstance(node_id, (str, numbers.Integral))


def validate_node_id(node_id: Any) -> NodeId:
    """
    Returns the normalized id (integral values become plain ``int``).
    """
    if not is_valid_node_id(node_id):
        raise InvalidIdentifierError(node_id)
    if isinstance(node_id, str):
        return node_id
    return int(node_id)


def node_key(node_id: NodeId) -> NodeKey:
    if isinstance(node_id, str):
        return (STR_KIND, node_id)
    return (INT_KIND, int(node_id))


def edge_key(u: NodeId, v: NodeId) -> EdgeKey:
    """
    Order-independent key for the undirected edge {u, v}.
    """
    ku = node_key(u)
    kv = node_key(v)
    if kv < ku:
        return (kv, ku)
    return (ku, kv)


def endpoints(key: EdgeKey) -> Tuple[NodeId, NodeId]:
    (_, u), (_, v) = key
    return u, v


def make_attributes(
    attrs: Optional[Mapping[str, Any]],
    extra: Optional[Mapping[str, Any]] = None,
    *,
    strict_keys: bool = True,
) -> AttrRecord:
    """
    Builds a fresh attribute record from ``attrs`` with ``extra`` merged
    over it.

    Raises InvalidAttributeError for non-mapping input, or for non-string
    keys when ``strict_keys`` is set.
    """
    if attrs is None:
        record: AttrRecord = {}
    elif isinstance(attrs, Mapping):
        record = dict(attrs)
    else:
        raise InvalidAttributeError(
            f"Attributes must be a mapping, got {type(attrs).__name__}."
        )

    if extra:
        record.update(extra)

    if strict_keys:
        for key in record:
            if not isinstance(key, str):
                raise InvalidAttributeError(
                    f"Attribute names must be str, got {key!r}."
                )

    return record
