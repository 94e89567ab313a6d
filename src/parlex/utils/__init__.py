"""Utility modules for parlex.

Provides:
- logger: get_logger for logging
"""

from parlex.utils.logger import get_logger

__all__ = ["get_logger"]
