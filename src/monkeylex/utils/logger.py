"""Minimal logging utilities for monkeylex.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from monkeylex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "monkeylex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("driver").name
        'monkeylex.driver'
    """
    if not (name == "monkeylex" or name.startswith("monkeylex.")):
        name = f"monkeylex.{name}"
    return logging.getLogger(name)
