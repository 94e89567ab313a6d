"""Minimal logging utilities for parlex.

Example:
    >>> from parlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "parlex.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'parlex.mymodule'
    """
    if not (name == "parlex" or name.startswith("parlex.")):
        name = f"parlex.{name}"
    return logging.getLogger(name)
