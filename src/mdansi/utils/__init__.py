"""Utility modules for mdansi.

Provides:
- logger: get_logger for logging
"""

from mdansi.utils.logger import get_logger

__all__ = ["get_logger"]
