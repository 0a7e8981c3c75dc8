"""Minimal logging utilities for roffhtml.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from roffhtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Parsing page")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "roffhtml." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'roffhtml.mymodule'
    """
    if not (name == "roffhtml" or name.startswith("roffhtml.")):
        name = f"roffhtml.{name}"
    return logging.getLogger(name)
