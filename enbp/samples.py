"""Built-in demonstration matrices.

Each function returns a fresh float64 array so callers may modify it.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Tuple

import numpy as np


def _from_edges(size: int, edges: Iterable[Tuple[int, int, float]]) -> np.ndarray:
    matrix = np.zeros((size, size), dtype=np.float64)
    for src, dst, weight in edges:
        matrix[src, dst] = weight
    return matrix


def case1() -> np.ndarray:
    """Six nodes, one fork after node 1 and two branches into node 5."""
    return _from_edges(
        6,
        [
            (0, 1, 0.8),
            (1, 2, 0.1),
            (1, 4, 0.9),
            (1, 3, 0.3),
            (2, 5, 0.5),
            (4, 5, 0.4),
        ],
    )


def case2() -> np.ndarray:
    """Five nodes, two sources merging into node 2 and two sinks after it."""
    return _from_edges(
        5,
        [
            (0, 2, 0.5),
            (1, 2, 0.5),
            (2, 3, 0.5),
            (2, 4, 0.5),
        ],
    )


def case3() -> np.ndarray:
    """Six nodes, densely connected."""
    return _from_edges(
        6,
        [
            (0, 3, 0.65),
            (0, 4, 0.39),
            (0, 5, 0.48),
            (1, 2, 0.77),
            (1, 3, 0.48),
            (1, 4, 0.66),
            (1, 5, 0.31),
            (2, 3, 0.48),
            (2, 4, 0.74),
            (2, 5, 0.36),
            (3, 4, 0.10),
            (3, 5, 0.89),
        ],
    )


def case4() -> np.ndarray:
    """Seven nodes, two parallel chains sharing the same two sinks."""
    return _from_edges(
        7,
        [
            (0, 2, 0.9),
            (1, 3, 0.8),
            (2, 4, 0.3),
            (2, 5, 0.1),
            (2, 6, 0.1),
            (3, 4, 0.3),
            (3, 5, 0.1),
            (3, 6, 0.1),
            (4, 6, 0.5),
            (4, 5, 0.4),
        ],
    )


SAMPLES: Dict[str, Callable[[], np.ndarray]] = {
    "case1": case1,
    "case2": case2,
    "case3": case3,
    "case4": case4,
}


def get_sample(name: str) -> np.ndarray:
    """Return the sample matrix called ``name``.

    Raises:
        KeyError: If no sample has that name.
    """
    try:
        factory = SAMPLES[name.lower()]
    except KeyError:
        valid = ", ".join(sorted(SAMPLES))
        raise KeyError(f"Unknown sample '{name}'. Valid samples are: {valid}") from None
    return factory()
