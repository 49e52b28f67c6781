"""Utility modules for ampdoc.

Provides:
- logger: get_logger for logging
"""

from ampdoc.utils.logger import get_logger

__all__ = [
    "get_logger",
]
