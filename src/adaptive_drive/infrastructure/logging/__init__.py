"""
Logging infrastructure for the AdaptiveDrive application.

This module provides console and structured file logging with
correlation IDs and runtime log level changes.
"""

from .logger import (
    setup_logging,
    get_logger,
    change_log_level,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
    log_function_call
)

from .formatters import (
    StructuredFormatter,
    ColoredFormatter
)

__all__ = [
    'setup_logging',
    'get_logger',
    'change_log_level',
    'set_correlation_id',
    'get_correlation_id',
    'clear_correlation_id',
    'log_function_call',
    'StructuredFormatter',
    'ColoredFormatter'
]
