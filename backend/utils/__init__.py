"""
Utility functions and middleware.
"""

from .error_handlers import register_exception_handlers
from .logging_utils import StructuredLogger, configure_logging
from .request_context import trace_requests

__all__ = ["register_exception_handlers", "StructuredLogger", "configure_logging", "trace_requests"]
