"""Utility modules for Casillas.

Provides:
- logger: get_logger for namespaced logging
"""

from casillas.utils.logger import get_logger

__all__ = [
    "get_logger",
]
