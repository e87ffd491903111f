"""Minimal logging utilities for testmark.

Provides a simple get_logger function that wraps the standard library logging.
The library installs no handlers; records only appear once the host
application configures logging.

Example:
    >>> from testmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "testmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'testmark.mymodule'
    """
    if not (name == "testmark" or name.startswith("testmark.")):
        name = f"testmark.{name}"
    return logging.getLogger(name)
