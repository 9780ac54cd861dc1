"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from enbp.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("a", "b", weight=0.9)
    >>> G.add_edge("b", "c", weight=0.7)
    >>> matrix, node_map = from_networkx(G)
    >>> G_out = to_networkx(matrix, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx
import numpy as np


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and matrix indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, nodes: Any) -> List[Hashable]:
        """Translate a sequence of indices (e.g. ``Path.nodes``) into names."""
        return [self.to_name[int(n)] for n in nodes]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: nx.DiGraph,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    nodelist: Optional[List[Hashable]] = None,
) -> Tuple[np.ndarray, NodeMap]:
    """Convert a directed NetworkX graph into a weight matrix.

    Node indices follow ``nodelist`` when given, otherwise the graph's node
    iteration order. Parallel edges of a multigraph are collapsed keeping the
    largest weight.

    Args:
        G: Directed NetworkX graph (DiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        nodelist: Optional explicit node order.

    Returns:
        Tuple of (matrix, node_map).

    Raises:
        TypeError: If G is not a directed NetworkX graph.
        ValueError: If the graph has no nodes or nodelist does not match it.
    """
    if not isinstance(G, nx.DiGraph):
        raise TypeError(f"Expected a directed NetworkX graph, got {type(G).__name__}")
    if G.number_of_nodes() == 0:
        raise ValueError("Cannot convert a graph without nodes")

    names = list(G.nodes) if nodelist is None else list(nodelist)
    if set(names) != set(G.nodes) or len(names) != len(set(names)):
        raise ValueError("nodelist must list every graph node exactly once")

    node_map = NodeMap.from_names(names)
    matrix = np.zeros((len(names), len(names)), dtype=np.float64)
    for u, v, data in G.edges(data=True):
        i, j = node_map.to_index[u], node_map.to_index[v]
        weight = float(data.get(weight_attr, default_weight))
        matrix[i, j] = max(matrix[i, j], weight)
    return matrix, node_map


def to_networkx(
    matrix: Any,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.DiGraph:
    """Convert a weight matrix into a NetworkX DiGraph.

    Args:
        matrix: Square weight matrix.
        node_map: Optional mapping used to name nodes; indices otherwise.
        weight_attr: Edge attribute receiving the weight.

    Returns:
        DiGraph with one node per row and one edge per positive cell.
    """
    arr = np.asarray(matrix, dtype=np.float64)
    name = (lambda i: node_map.to_name[i]) if node_map is not None else (lambda i: i)

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(arr.shape[0]))
    for i, j in zip(*np.nonzero(arr > 0.0)):
        G.add_edge(name(int(i)), name(int(j)), **{weight_attr: float(arr[i, j])})
    return G
