"""Utility modules for orgtok.

Provides:
- logger: get_logger for logging
"""

from orgtok.utils.logger import get_logger

__all__ = ["get_logger"]
