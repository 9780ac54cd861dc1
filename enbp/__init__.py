"""ENBP: disjoint path cover of weighted DAGs by average edge weight.

Unlike shortest-path algorithms, ENBP (End-Node Back Propagation) scores a
path by the average of its edge weights. Nodes are candidate entities and an
edge weight in (0, 1] is the likelihood that two nodes denote the same entity;
the result partitions the nodes into chains of likely-identical entities.

Primary API:
    Graph - Validate a weight matrix and compute its best paths
    solve() - Shortcut returning ``Graph(...).best_paths``
    Path - Ordered nodes with aligned edge weights
    SolverConfig, NodeOrder - Solver options

Example:
    import numpy as np
    from enbp import solve

    weights = np.zeros((3, 3))
    weights[0, 1] = 0.5
    weights[1, 2] = 0.5
    paths = solve(weights)          # [Path(nodes=(0, 1, 2), ...)]
"""

from __future__ import annotations

from enbp import cli, logging
from enbp._version import __version__
from enbp.algorithms import (
    best_path,
    enumerate_paths,
    fill_isolated_nodes,
    select_best_paths,
)
from enbp.config import DEFAULT_CONFIG, SolverConfig
from enbp.graph import Graph, solve
from enbp.io import load_matrix, save_matrix, to_cypher, write_cypher
from enbp.matrix import as_weight_matrix
from enbp.nx import NodeMap, from_networkx, to_networkx
from enbp.path import Path
from enbp.types import NodeOrder

__all__ = [
    # Version
    "__version__",
    # Core
    "Graph",
    "solve",
    "Path",
    "as_weight_matrix",
    # Algorithms
    "enumerate_paths",
    "select_best_paths",
    "best_path",
    "fill_isolated_nodes",
    # Configuration
    "SolverConfig",
    "DEFAULT_CONFIG",
    "NodeOrder",
    # I/O
    "load_matrix",
    "save_matrix",
    "to_cypher",
    "write_cypher",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
