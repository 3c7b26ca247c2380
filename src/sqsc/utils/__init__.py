"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured logging configuration and helpers
"""

from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
