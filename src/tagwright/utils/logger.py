"""Minimal logging utilities for tagwright.

Provides a simple get_logger function that wraps the standard library logging.
The library only emits records; configuring handlers is left to the host.

Example:
    >>> from tagwright.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Formatted %d tokens", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tagwright." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("panel")
        >>> logger.name
        'tagwright.panel'
    """
    if not (name == "tagwright" or name.startswith("tagwright.")):
        name = f"tagwright.{name}"
    return logging.getLogger(name)
