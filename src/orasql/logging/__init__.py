"""Logging infrastructure for orasql.

This module provides structured logging with JSON output, context tracking,
and OpenTelemetry trace correlation.
"""

from orasql.logging.filters import ContextFilter
from orasql.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
]
