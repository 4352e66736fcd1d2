"""Utility modules for rant.

Provides:
- logger: get_logger for logging
"""

from rant.utils.logger import get_logger

__all__ = [
    "get_logger",
]
