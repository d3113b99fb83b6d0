"""Core utilities and shared components for cats3."""

from .config import settings
from .exceptions import (
    Cats3Error,
    ConfigurationError,
    ListingError,
    OutputError,
    RetrievalError,
)
from .observability import LogContext, create_log_context, get_logger, get_tracer
from .units import format_size

__all__ = [
    "settings",
    "Cats3Error",
    "ConfigurationError",
    "ListingError",
    "OutputError",
    "RetrievalError",
    "LogContext",
    "create_log_context",
    "get_logger",
    "get_tracer",
    "format_size",
]
