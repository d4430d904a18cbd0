"""Utility modules for statelex.

Provides:
- logger: get_logger for namespaced logging
"""

from statelex.utils.logger import get_logger

__all__ = ["get_logger"]
