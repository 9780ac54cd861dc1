"""Path of nodes scored by the average weight of its edges.

A ``Path`` is grown during enumeration from its end node backwards (one
``add_edge`` per step), reversed once, and afterwards read through tuple
accessors. ``weights[k]`` is the weight of the edge between ``nodes[k]`` and
``nodes[k + 1]``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from enbp.types import NodeID, Weight


class Path:
    """Ordered sequence of distinct nodes with aligned edge weights.

    Attributes:
        nodes: Node ids in path order (read-only tuple view).
        weights: Edge weights aligned with consecutive node pairs.
        weight: Average of ``weights``; 0.0 for a path without edges.
    """

    __slots__ = ("_nodes", "_weights")

    def __init__(
        self,
        nodes: Optional[Iterable[NodeID]] = None,
        weights: Optional[Iterable[Weight]] = None,
    ) -> None:
        self._nodes: List[NodeID] = []
        self._weights: List[float] = []
        for node in nodes or ():
            self.add_node(node)
        for w in weights or ():
            self._weights.append(float(w))

    @classmethod
    def singleton(cls, node: NodeID) -> Path:
        """Return a path holding only ``node`` and no edges."""
        path = cls()
        path.add_node(node)
        return path

    def add_node(self, node: NodeID) -> None:
        """Append ``node`` unless it is already on the path."""
        if node not in self._nodes:
            self._nodes.append(int(node))

    def add_edge(self, node1: NodeID, node2: NodeID, weight: Weight) -> None:
        """Add both endpoints (if absent) and append the edge weight.

        Nodes and edges must be added in traversal order for ``weights`` to
        stay aligned with ``nodes``.
        """
        self.add_node(node1)
        self.add_node(node2)
        self._weights.append(float(weight))

    def reverse(self) -> None:
        """Reverse nodes and weights in place."""
        self._nodes.reverse()
        self._weights.reverse()

    def copy(self) -> Path:
        """Return an independent snapshot of this path."""
        clone = Path()
        clone._nodes = list(self._nodes)
        clone._weights = list(self._weights)
        return clone

    def relabel(self, mapping: Mapping[NodeID, NodeID]) -> Path:
        """Return a new path with every node id replaced by ``mapping[node]``."""
        clone = Path()
        clone._nodes = [int(mapping[node]) for node in self._nodes]
        clone._weights = list(self._weights)
        return clone

    @property
    def nodes(self) -> Tuple[NodeID, ...]:
        return tuple(self._nodes)

    @property
    def weights(self) -> Tuple[float, ...]:
        return tuple(self._weights)

    @property
    def weight(self) -> float:
        """Arithmetic mean of the edge weights, or 0.0 without edges."""
        if not self._weights:
            return 0.0
        return sum(self._weights) / len(self._weights)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path."""
        return self._nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path."""
        return self._nodes[-1]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._nodes == other._nodes and self._weights == other._weights

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Any) -> bool:
        """Compare two paths by average weight."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.weight < other.weight

    def __repr__(self) -> str:
        return f"Path(nodes={self.nodes}, weights={self.weights}, weight={self.weight:.6g})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of the path."""
        return {
            "nodes": list(self._nodes),
            "weights": list(self._weights),
            "weight": self.weight,
        }
