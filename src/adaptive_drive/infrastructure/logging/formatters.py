"""
Logging formatters for structured and colored output.
"""

import copy
import json
import logging
from datetime import datetime
from typing import Optional

import colorama
from colorama import Fore, Style

# Translate ANSI sequences on legacy Windows consoles; no-op elsewhere.
colorama.just_fix_windows_console()


# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {
    'message', 'asctime', 'correlation_id'
}


class StructuredFormatter(logging.Formatter):
    """Structured formatter for JSON log output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'thread_name': record.threadName
        }

        correlation_id = getattr(record, 'correlation_id', None)
        if correlation_id:
            log_entry['correlation_id'] = correlation_id

        # Decision fields such as mode, weather and track counts
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                log_entry[key] = value

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.MAGENTA + Style.BRIGHT,
    }

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True):
        if fmt is None:
            fmt = '%(asctime)s [%(correlation_id)s] %(name)s - %(levelname)s - %(message)s'
        super().__init__(fmt, datefmt='%Y-%m-%d %H:%M:%S')
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors and correlation ID."""
        record_copy = copy.copy(record)
        if not getattr(record_copy, 'correlation_id', None):
            record_copy.correlation_id = 'N/A'

        if self.use_color and record_copy.levelname in self.COLORS:
            levelname = record_copy.levelname
            record_copy.levelname = f"{self.COLORS[levelname]}{levelname}{Style.RESET_ALL}"

        return super().format(record_copy)
