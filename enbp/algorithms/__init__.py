"""Path enumeration and selection algorithms."""

from enbp.algorithms.backprop import (
    enumerate_paths,
    find_predecessors,
    find_terminal_nodes,
)
from enbp.algorithms.greedy import best_path, select_best_paths
from enbp.algorithms.isolated import fill_isolated_nodes

__all__ = [
    "enumerate_paths",
    "find_predecessors",
    "find_terminal_nodes",
    "best_path",
    "select_best_paths",
    "fill_isolated_nodes",
]
