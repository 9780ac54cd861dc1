from enbp.algorithms.isolated import fill_isolated_nodes
from enbp.path import Path


def test_all_nodes_isolated():
    result = fill_isolated_nodes([], 4)
    assert [p.nodes for p in result] == [(0,), (1,), (2,), (3,)]
    assert all(p.weights == () and p.weight == 0.0 for p in result)


def test_fills_only_uncovered_nodes_in_ascending_order():
    best = [Path([4, 1, 2], [0.5, 0.5])]
    result = fill_isolated_nodes(best, 6)
    assert result is best
    assert [p.nodes for p in result] == [(4, 1, 2), (0,), (3,), (5,)]


def test_full_cover_unchanged():
    best = [Path([0, 1], [0.3]), Path([2], [])]
    assert [p.nodes for p in fill_isolated_nodes(best, 3)] == [(0, 1), (2,)]
