"""
Logging setup for HashLab.

The menus print their reports on stdout, so log records go to stderr.
Level and format come from config.yaml; $HASHLAB_LOG_LEVEL overrides
the level (e.g. DEBUG to see how many lines each file yielded).

Usage:
    from hashlab.utils.logger import get_logger
    logger = get_logger(__name__)
    logger.info("Uniformity test finished")
"""

import logging
import os
import sys

from hashlab.utils.config import get_config

LOG_LEVEL_ENV_VAR = "HASHLAB_LOG_LEVEL"


def _resolve_level(log_cfg: dict) -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR) or log_cfg.get("level", "INFO")
    return getattr(logging, str(name).upper(), logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Create and return a configured logger writing to stderr.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured logging.Logger instance.
    """
    log_cfg = get_config().get("logging", {})
    fmt = log_cfg.get("format", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    logger = logging.getLogger(name)

    # One handler per logger, even when modules are re-imported
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(_resolve_level(log_cfg))
    return logger
