"""Graph facade: validate a weight matrix and compute its best path cover.

Example:
    >>> import numpy as np
    >>> from enbp import Graph
    >>> weights = np.zeros((3, 3))
    >>> weights[0, 1] = weights[1, 2] = 0.5
    >>> [p.nodes for p in Graph(weights).best_paths]
    [(0, 1, 2)]
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

import numpy as np

from enbp.algorithms.backprop import enumerate_paths
from enbp.algorithms.greedy import select_best_paths
from enbp.algorithms.isolated import fill_isolated_nodes
from enbp.config import DEFAULT_CONFIG, SolverConfig
from enbp.logging import get_logger
from enbp.matrix import as_weight_matrix, backward_edges, permute, topological_order
from enbp.path import Path
from enbp.types import NodeID, NodeOrder

logger = get_logger(__name__)


class Graph:
    """Disjoint cover of a weighted DAG by paths of maximal average weight.

    The constructor runs the whole computation; results are exposed as
    attributes.

    Attributes:
        weights: Validated float64 copy of the input matrix.
        num_nodes: Number of nodes (matrix size).
        paths: Candidate paths of the first round, in enumeration order.
        best_paths: Disjoint paths covering every node exactly once: greedy
            selections first, then singleton paths in ascending node order.
    """

    def __init__(
        self,
        weights: Any,
        verbose: bool = False,
        config: Optional[SolverConfig] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        if verbose and not self.config.verbose:
            self.config = replace(self.config, verbose=True)
        self.weights: np.ndarray = as_weight_matrix(
            weights, check_cycles=self.config.check_cycles
        )
        self.num_nodes: int = self.weights.shape[0]
        self.paths: List[Path] = []
        self.best_paths: List[Path] = []
        self._solve()

    def _solve(self) -> None:
        level = self.config.progress_level
        order: Optional[List[NodeID]] = None
        matrix = self.weights

        if self.config.node_order == NodeOrder.TOPOLOGICAL:
            order = topological_order(matrix)
            matrix = permute(matrix, order)
            logger.log(level, "Relabelled nodes in topological order: %s", order)
        else:
            skipped = backward_edges(matrix)
            if skipped:
                logger.warning(
                    "Ignoring %d edge(s) from a higher to a lower node index: %s; "
                    "use NodeOrder.TOPOLOGICAL to take them into account",
                    len(skipped),
                    skipped,
                )

        paths = enumerate_paths(matrix, level=level)
        best = select_best_paths(matrix, paths=paths, level=level)

        if order is not None:
            mapping = dict(enumerate(order))
            paths = [p.relabel(mapping) for p in paths]
            best = [p.relabel(mapping) for p in best]

        self.paths = paths
        self.best_paths = fill_isolated_nodes(best, self.num_nodes)

        logger.log(level, "Best paths:")
        for idx, path in enumerate(self.best_paths):
            logger.log(
                level, "[%d] - nodes=%s weight=%.6g", idx, path.nodes, path.weight
            )

    def coverage(self) -> Dict[NodeID, int]:
        """Map every node to the index of the best path that contains it."""
        return {
            node: idx for idx, path in enumerate(self.best_paths) for node in path.nodes
        }

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self.num_nodes}, best_paths={len(self.best_paths)})"


def solve(
    weights: Any,
    verbose: bool = False,
    config: Optional[SolverConfig] = None,
) -> List[Path]:
    """Return the best path cover of ``weights``.

    Shortcut for ``Graph(weights, verbose, config).best_paths``.
    """
    return Graph(weights, verbose=verbose, config=config).best_paths
