"""
Main logging setup and management for the AdaptiveDrive application.
"""

import functools
import logging
import logging.handlers
import sys
import threading
import uuid
from pathlib import Path
from typing import Optional

from ...shared.config import get_config
from ...shared.config.settings import AppConfig, VALID_LOG_LEVELS
from .formatters import ColoredFormatter, StructuredFormatter


ROOT_LOGGER_NAME = 'adaptive_drive'

# Global state
_log_setup_complete = False
_correlation_id_context = threading.local()


class CorrelationIdFilter(logging.Filter):
    """Filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = getattr(_correlation_id_context, 'correlation_id', None)
        return True


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID."""
    return getattr(_correlation_id_context, 'correlation_id', None)


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Set the correlation ID for the current thread."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    _correlation_id_context.correlation_id = correlation_id
    return correlation_id


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current thread."""
    if hasattr(_correlation_id_context, 'correlation_id'):
        delattr(_correlation_id_context, 'correlation_id')


def setup_logging(
    config: Optional[AppConfig] = None,
    log_file: Optional[Path] = None,
    correlation_id: Optional[str] = None,
    force: bool = False
) -> logging.Logger:
    """
    Setup application logging.

    Args:
        config: Application configuration
        log_file: Optional log file path
        correlation_id: Optional correlation ID for request tracking
        force: Reconfigure even if logging was already set up

    Returns:
        Configured logger instance
    """
    global _log_setup_complete

    if _log_setup_complete and not force:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if config is None:
        config = get_config()

    if correlation_id:
        set_correlation_id(correlation_id)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, config.logging.level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for existing in list(logger.filters):
        logger.removeFilter(existing)

    # Handler-level so records from child loggers are tagged too
    correlation_filter = CorrelationIdFilter()

    if config.logging.console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColoredFormatter(use_color=config.logging.colored_output))
        console_handler.addFilter(correlation_filter)
        logger.addHandler(console_handler)

    if config.logging.file_logging:
        if log_file is None:
            log_file = config.logging.log_dir / f"{config.logging.log_file_prefix}.log"
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(StructuredFormatter())
        file_handler.addFilter(correlation_filter)
        logger.addHandler(file_handler)

    logger.propagate = False
    _log_setup_complete = True

    logger.debug("Logging system initialized", extra={
        'log_level': config.logging.level,
        'file_logging': config.logging.file_logging,
        'console_logging': config.logging.console_logging,
        'log_file': str(log_file) if log_file else None
    })

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


def change_log_level(new_level: str) -> bool:
    """
    Change the application log level at runtime.

    Returns:
        True if the level was applied, False for an unknown level name
    """
    level_name = new_level.upper()
    if level_name not in VALID_LOG_LEVELS:
        logging.getLogger(ROOT_LOGGER_NAME).warning(f"Ignoring unknown log level: {new_level}")
        return False

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(getattr(logging, level_name))
    logging.getLogger(ROOT_LOGGER_NAME).info(f"Log level changed to: {level_name}")
    return True


def log_function_call(func):
    """Decorator to log function calls with correlation ID."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        correlation_id = get_correlation_id()

        logger.debug(f"Calling {func.__name__}", extra={'call_correlation_id': correlation_id})
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Function {func.__name__} failed: {e}", extra={'call_correlation_id': correlation_id})
            raise
        logger.debug(f"Function {func.__name__} completed", extra={'call_correlation_id': correlation_id})
        return result

    return wrapper
