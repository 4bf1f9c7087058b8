"""Utility modules for tagwright.

Provides:
- logger: get_logger for logging
"""

from tagwright.utils.logger import get_logger

__all__ = ["get_logger"]
