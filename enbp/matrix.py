"""Weight matrix validation and helpers.

A weight matrix is a square ``numpy`` array where ``matrix[i, j] > 0`` is a
directed edge ``i -> j`` with weight in ``(0, 1]`` and ``0`` means no edge.
All helpers return new arrays; none of them mutates its input.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence, Tuple

import networkx as nx
import numpy as np

from enbp.types import NodeID


def as_weight_matrix(data: Any, check_cycles: bool = True) -> np.ndarray:
    """Validate ``data`` and return it as a float64 weight matrix copy.

    Args:
        data: Square matrix as a numpy array or nested sequence of numbers.
        check_cycles: Reject graphs that contain a directed cycle.

    Returns:
        A new ``(N, N)`` float64 array.

    Raises:
        TypeError: If the elements are not real numbers.
        ValueError: If the matrix is not 2-D, not square, empty, contains
            values outside ``[0, 1]`` or non-finite values, or (with
            ``check_cycles``) describes a cyclic graph.
    """
    try:
        raw = np.asarray(data)
    except ValueError as exc:
        raise ValueError(f"Weight matrix must be rectangular: {exc}") from None

    if raw.dtype == np.bool_ or raw.dtype.kind not in "iuf":
        raise TypeError(
            f"Weight matrix must hold real numbers, got dtype '{raw.dtype}'"
        )
    if raw.ndim != 2:
        raise ValueError(f"Weight matrix must be 2-D, got {raw.ndim} dimension(s)")
    rows, cols = raw.shape
    if rows != cols:
        raise ValueError(f"Weight matrix must be square, got {rows}x{cols}")
    if rows == 0:
        raise ValueError("Weight matrix must not be empty")

    matrix = np.array(raw, dtype=np.float64)
    if not np.all(np.isfinite(matrix)):
        raise ValueError("Weight matrix contains NaN or infinite values")
    if np.any(matrix < 0.0) or np.any(matrix > 1.0):
        raise ValueError("Edge weights must lie in (0, 1]; use 0 for 'no edge'")

    if check_cycles:
        cycle = find_cycle(matrix)
        if cycle:
            path = " -> ".join(str(u) for u, _ in cycle) + f" -> {cycle[-1][1]}"
            raise ValueError(f"Weight matrix describes a cyclic graph: {path}")

    return matrix


def to_digraph(matrix: np.ndarray) -> nx.DiGraph:
    """Return the matrix as a NetworkX DiGraph with ``weight`` edge attributes."""
    return nx.from_numpy_array(matrix, create_using=nx.DiGraph)


def find_cycle(matrix: np.ndarray) -> List[Tuple[NodeID, NodeID]]:
    """Return the edges of one directed cycle, or an empty list if acyclic."""
    graph = to_digraph(matrix)
    try:
        return [(int(u), int(v)) for u, v in nx.find_cycle(graph)]
    except nx.NetworkXNoCycle:
        return []


def row_sums(matrix: np.ndarray) -> np.ndarray:
    """Total outgoing weight per node."""
    return matrix.sum(axis=1)


def col_sums(matrix: np.ndarray) -> np.ndarray:
    """Total incoming weight per node."""
    return matrix.sum(axis=0)


def terminal_mask(matrix: np.ndarray) -> np.ndarray:
    """Boolean mask of sinks that have at least one incoming edge."""
    return (row_sums(matrix) == 0.0) & (col_sums(matrix) != 0.0)


def source_mask(matrix: np.ndarray) -> np.ndarray:
    """Boolean mask of nodes without incoming edges."""
    return col_sums(matrix) == 0.0


def backward_edges(matrix: np.ndarray) -> List[Tuple[NodeID, NodeID]]:
    """Edges ``i -> j`` with ``i > j``, which index-order enumeration ignores."""
    src, dst = np.nonzero(np.tril(matrix, k=-1))
    return [(int(i), int(j)) for i, j in zip(src, dst)]


def remove_nodes(matrix: np.ndarray, nodes: Iterable[NodeID]) -> np.ndarray:
    """Return a copy of ``matrix`` with the rows and columns of ``nodes`` zeroed."""
    reduced = matrix.copy()
    idx = list(nodes)
    if idx:
        reduced[idx, :] = 0.0
        reduced[:, idx] = 0.0
    return reduced


def permute(matrix: np.ndarray, order: Sequence[NodeID]) -> np.ndarray:
    """Return the matrix relabelled so that new node ``k`` is old node ``order[k]``."""
    idx = np.asarray(order, dtype=np.intp)
    return matrix[np.ix_(idx, idx)]


def topological_order(matrix: np.ndarray) -> List[NodeID]:
    """Deterministic topological order of the nodes (smallest index first on ties).

    Raises:
        ValueError: If the graph contains a cycle.
    """
    graph = to_digraph(matrix)
    try:
        return [int(n) for n in nx.lexicographical_topological_sort(graph)]
    except nx.NetworkXUnfeasible:
        raise ValueError("Weight matrix describes a cyclic graph") from None
