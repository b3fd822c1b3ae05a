"""
Configuration for the graph engine and its logging.

GraphConfig controls how edges are inserted. setup_logging is used by the
command line front end; the library itself never installs handlers.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class GraphConfig:
    """
    Configuration for edge insertion.

    Attributes:
        allow_parallel_edges: Keep a second edge between the same pair of
            labels instead of ignoring it (default: True)
        default_weight: Weight given to edges added without one (default: 0)
    """

    allow_parallel_edges: bool = True
    default_weight: int = 0

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.allow_parallel_edges, bool):
            raise ConfigurationError("allow_parallel_edges must be a boolean")
        if isinstance(self.default_weight, bool) or not isinstance(self.default_weight, int):
            raise ConfigurationError("default_weight must be an integer")


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Configure package logging.

    Attaches a stream handler with timestamp, logger name and level to the
    ``undigraph`` logger. Calling it again only updates the level.

    Args:
        level: Logging level as a number or a name such as ``"DEBUG"``

    Raises:
        ConfigurationError: If the level name is unknown
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ConfigurationError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger("undigraph")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
