"""Utility modules for Entre.

Provides:
- logger: get_logger for logging
"""

from entre.utils.logger import get_logger

__all__ = [
    "get_logger",
]
