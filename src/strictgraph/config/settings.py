from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------
# Graph container policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls what the graph container accepts on mutation.

    The defaults describe the plain strict undirected graph: self-loops
    are allowed and attribute names must be strings.
    """

    allow_self_loops: bool = True
    strict_attribute_keys: bool = True
