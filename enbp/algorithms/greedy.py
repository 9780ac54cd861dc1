"""Greedy selection of disjoint best paths.

Each round enumerates the candidate paths of the working matrix, keeps the one
with the highest average weight, and removes its nodes (rows and columns) from
a fresh copy of the matrix before the next round.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from enbp.algorithms.backprop import enumerate_paths
from enbp.logging import get_logger
from enbp.matrix import remove_nodes
from enbp.path import Path

logger = get_logger(__name__)


def best_path(paths: Sequence[Path]) -> Optional[Path]:
    """Return the path with the highest average weight.

    Ties keep the earliest path in ``paths``; the order carries no meaning
    beyond making the choice deterministic.

    Args:
        paths: Candidate paths in enumeration order.

    Returns:
        The best path, or None if ``paths`` is empty.
    """
    best: Optional[Path] = None
    for path in paths:
        if best is None or path.weight > best.weight:
            best = path
    return best


def select_best_paths(
    matrix: np.ndarray,
    paths: Optional[List[Path]] = None,
    level: int = logging.DEBUG,
) -> List[Path]:
    """Extract disjoint best paths round by round.

    Args:
        matrix: Square weight matrix; it is not modified.
        paths: Candidate paths of ``matrix`` if already enumerated.
        level: Logging level for progress messages.

    Returns:
        Selected paths in selection order. Nodes not covered by any of them
        are left for ``enbp.algorithms.isolated.fill_isolated_nodes``.
    """
    if paths is None:
        paths = enumerate_paths(matrix, level=level)

    current_best = best_path(paths)
    if current_best is None:
        return []

    selected: List[Path] = [current_best]
    logger.log(level, "Round 1: best path %s", current_best.nodes)

    current_node_count = matrix.shape[0]
    working = matrix
    round_no = 1
    while current_best.node_count < current_node_count:
        round_no += 1
        logger.log(level, "Removing nodes: %s", list(current_best.nodes))
        working = remove_nodes(working, current_best.nodes)

        candidates = enumerate_paths(working, level=level)
        next_best = best_path(candidates)
        if next_best is None:
            logger.log(level, "Round %d: no paths left", round_no)
            break

        selected.append(next_best)
        logger.log(level, "Round %d: best path %s", round_no, next_best.nodes)
        current_node_count -= current_best.node_count
        current_best = next_best

    return selected
