"""Shared weight-matrix fixtures."""

from __future__ import annotations

import numpy as np
import pytest


def _matrix(size, edges):
    m = np.zeros((size, size), dtype=np.float64)
    for src, dst, w in edges:
        m[src, dst] = w
    return m


@pytest.fixture
def chain3():
    #  0 --0.5--> 1 --0.5--> 2
    return _matrix(3, [(0, 1, 0.5), (1, 2, 0.5)])


@pytest.fixture
def branching_sink():
    #  0 --0.9--\
    #            > 2
    #  1 --0.4--/
    return _matrix(3, [(0, 2, 0.9), (1, 2, 0.4)])


@pytest.fixture
def diamond():
    #       /--0.6--> 1 --0.6--\
    #  0 --<                    > 3
    #       \--0.9--> 2 --0.7--/
    return _matrix(4, [(0, 1, 0.6), (0, 2, 0.9), (1, 3, 0.6), (2, 3, 0.7)])


@pytest.fixture
def no_edges():
    return np.zeros((5, 5), dtype=np.float64)


@pytest.fixture
def random_dags():
    """Upper-triangular (index-ordered) random DAGs of varying size and density."""
    rng = np.random.default_rng(20240601)
    matrices = []
    for size in range(1, 9):
        for density in (0.15, 0.35, 0.6):
            mask = np.triu(rng.random((size, size)) < density, k=1)
            weights = np.round(rng.uniform(0.05, 1.0, (size, size)), 2)
            matrices.append(np.where(mask, weights, 0.0))
    return matrices
