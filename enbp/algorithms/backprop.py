"""End-node back propagation (ENBP) path enumeration.

Paths are discovered by starting at every terminal node (a sink with at least
one incoming edge) and walking predecessor edges back until a source node
(no incoming edges) is reached. A node with several predecessors branches the
walk: each predecessor continues from its own copy of the path built so far,
so one path is produced per distinct source-to-terminal walk.

Notes:
    The predecessor search of node ``c`` only inspects nodes ``j <= c``. Node
    indices are therefore expected to follow a topological order, i.e. every
    edge goes from a lower to a higher index. Edges that point backwards are
    invisible to the search; ``enbp.graph.Graph`` can relabel the nodes into a
    topological order first.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from enbp.logging import get_logger
from enbp.matrix import col_sums, terminal_mask
from enbp.path import Path
from enbp.types import NodeID

logger = get_logger(__name__)


def find_terminal_nodes(matrix: np.ndarray) -> List[NodeID]:
    """Return terminal nodes in ascending order.

    Args:
        matrix: Square weight matrix.

    Returns:
        Nodes with zero outgoing and non-zero incoming total weight.
    """
    return [int(n) for n in np.flatnonzero(terminal_mask(matrix))]


def find_predecessors(matrix: np.ndarray, node: NodeID) -> List[NodeID]:
    """Return predecessors ``j <= node`` of ``node``, highest index first."""
    column = matrix[: node + 1, node]
    return [int(j) for j in np.flatnonzero(column > 0.0)[::-1]]


def enumerate_paths(matrix: np.ndarray, level: int = logging.DEBUG) -> List[Path]:
    """Build every back-propagated path of ``matrix``.

    The walk uses an explicit LIFO work stack of ``(path, node)`` frames.
    Children are pushed in reverse so paths complete in the same order as a
    depth-first recursion visiting predecessors highest index first.

    Args:
        matrix: Square weight matrix; it is not modified.
        level: Logging level for progress messages.

    Returns:
        Completed paths, each reversed to read from source to terminal node.

    Raises:
        ValueError: If a walk revisits a node, i.e. the graph has a cycle.
    """
    incoming = col_sums(matrix)
    terminals = find_terminal_nodes(matrix)
    logger.log(level, "Computing paths from graph (%d nodes)", matrix.shape[0])
    logger.log(level, "Terminal nodes: %s", terminals)

    paths: List[Path] = []
    for terminal in terminals:
        stack: List[Tuple[Path, NodeID]] = [(Path(), terminal)]
        while stack:
            path, current = stack.pop()
            if len(path) and incoming[current] == 0.0:
                # Reached a source node: the walk is complete
                paths.append(path)
                continue

            branches: List[Tuple[Path, NodeID]] = []
            for pred in find_predecessors(matrix, current):
                if pred == current or pred in path:
                    raise ValueError(
                        f"Cycle detected while propagating back from node {current} "
                        f"to node {pred}"
                    )
                branch = path.copy()
                branch.add_edge(current, pred, matrix[pred, current])
                branches.append((branch, pred))
            # No predecessor: dead end, the branch yields no path
            stack.extend(reversed(branches))

    for idx, path in enumerate(paths):
        path.reverse()
        logger.log(level, "Path[%d] nodes=%s weight=%.6g", idx, path.nodes, path.weight)
    return paths
