"""
Observability module.

Provides logging configuration, structured logging helpers and
request middleware.
"""

from lessonlab.observability.log_utils import log_exception_with_context, log_with_context
from lessonlab.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_with_context",
    "log_exception_with_context",
]
