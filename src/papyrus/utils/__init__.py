"""Utility modules for Papyrus.

Provides:
- logger: get_logger for logging
"""

from papyrus.utils.logger import get_logger

__all__ = ["get_logger"]
