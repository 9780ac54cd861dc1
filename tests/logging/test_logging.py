"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from enbp.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("enbp.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("enbp.module1")
    logger2 = get_logger("enbp.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("enbp.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    setup_root_logger(handler=logging.StreamHandler(StringIO()))

    root = logging.getLogger("enbp")
    assert len(root.handlers) == 1

    get_logger("enbp.idempotent").info("once")
    assert capture.getvalue().count("once") == 1


def test_custom_format_string():
    capture = StringIO()
    setup_root_logger(format_string="%(levelname)s|%(message)s", handler=logging.StreamHandler(capture))
    get_logger("enbp.fmt").warning("hello")
    assert "WARNING|hello" in capture.getvalue()


def test_reset_logging_clears_handlers():
    setup_root_logger()
    reset_logging()
    assert logging.getLogger("enbp").handlers == []
