"""Utility modules for testmark.

Provides:
- logger: get_logger for logging
"""

from testmark.utils.logger import get_logger

__all__ = ["get_logger"]
