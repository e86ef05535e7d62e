"""Minimal logging utilities for marklex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from marklex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "marklex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'marklex.mymodule'
    """
    if not (name == "marklex" or name.startswith("marklex.")):
        name = f"marklex.{name}"
    return logging.getLogger(name)
