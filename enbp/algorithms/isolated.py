"""Singleton paths for nodes that no selected path covers."""

from __future__ import annotations

from typing import List, Set

from enbp.path import Path


def fill_isolated_nodes(best_paths: List[Path], num_nodes: int) -> List[Path]:
    """Append a singleton path for each uncovered node, in ascending order.

    Args:
        best_paths: Selected paths; extended in place.
        num_nodes: Number of nodes in the graph.

    Returns:
        ``best_paths``, now covering every node in ``range(num_nodes)``.
    """
    covered: Set[int] = set()
    for path in best_paths:
        covered.update(path.nodes)

    for node in range(num_nodes):
        if node not in covered:
            best_paths.append(Path.singleton(node))
    return best_paths
