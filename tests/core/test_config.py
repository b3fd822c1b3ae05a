"""Tests for configuration and logging setup."""

import logging

import pytest

from undigraph.core.config import LOG_FORMAT, GraphConfig, setup_logging
from undigraph.core.exceptions import ConfigurationError


def test_graph_config_defaults():
    config = GraphConfig()
    assert config.allow_parallel_edges is True
    assert config.default_weight == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"allow_parallel_edges": "no"},
        {"default_weight": 1.5},
        {"default_weight": False},
    ],
)
def test_graph_config_validation(kwargs):
    with pytest.raises(ConfigurationError):
        GraphConfig(**kwargs)


def test_setup_logging_installs_single_handler():
    """Test that repeated setup only adjusts the level."""
    setup_logging("info")
    setup_logging(logging.DEBUG)

    logger = logging.getLogger("undigraph")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_setup_logging_unknown_level():
    with pytest.raises(ConfigurationError, match="Unknown log level"):
        setup_logging("chatty")
