import logging

import pytest

from enbp.config import DEFAULT_CONFIG, SolverConfig
from enbp.types import NodeOrder


def test_defaults():
    assert DEFAULT_CONFIG.node_order == NodeOrder.INDEX
    assert DEFAULT_CONFIG.check_cycles is True
    assert DEFAULT_CONFIG.verbose is False
    assert DEFAULT_CONFIG.progress_level == logging.DEBUG


def test_verbose_progress_level():
    assert SolverConfig(verbose=True).progress_level == logging.INFO


@pytest.mark.parametrize("value, expected", [
    ("index", NodeOrder.INDEX),
    ("Topological", NodeOrder.TOPOLOGICAL),
])
def test_node_order_from_string(value, expected):
    assert NodeOrder.from_string(value) is expected


def test_node_order_from_string_invalid():
    with pytest.raises(ValueError, match="INDEX, TOPOLOGICAL"):
        NodeOrder.from_string("random")
