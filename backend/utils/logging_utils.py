"""
Structured Logging Utilities

Provides utilities for adding structured, request-scoped context (most
importantly the trace id) to log messages, and the one-time logging setup
used by main.py.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional
from contextvars import ContextVar

from constants import NO_TRACE_ID


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(trace_id)s] %(message)s'


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.debug("Begin - Id: 7", extra={
            "operation": "get_user",
            "trace_id": full_request.trace_id
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.name = name
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    emitted through StructuredLogger within the current context.

    Example:
        set_logging_context(trace_id="4f1c...", path="/api/users")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


class TraceIdFilter(logging.Filter):
    """
    Ensure every record has a trace_id attribute so LOG_FORMAT never fails.

    Records logged through StructuredLogger already carry one; plain
    logging.getLogger loggers get the id of the current request, or '-'.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, 'trace_id', None):
            record.trace_id = _logging_context.get().get('trace_id', NO_TRACE_ID)
        return True


def configure_logging(level: str = 'INFO', log_dir=None) -> None:
    """
    Configure the root logger with console and (optionally) rotating file output.

    Safe to call more than once: handlers installed by a previous call are
    replaced rather than duplicated.

    Args:
        level: Root log level name
        log_dir: Directory for backend.log; None disables file logging
    """
    log_formatter = logging.Formatter(LOG_FORMAT)
    trace_filter = TraceIdFilter()
    handlers: list[logging.Handler] = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    handlers.append(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_dir / "backend.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, '_users_api_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        handler.setFormatter(log_formatter)
        handler.addFilter(trace_filter)
        handler._users_api_handler = True
        root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger(__name__).info(
        f"Logging initialized: level={level}, file={log_dir / 'backend.log' if log_dir else 'disabled'}"
    )
