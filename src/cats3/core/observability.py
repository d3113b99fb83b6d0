"""Observability setup for cats3.

Standard output carries object bytes, so every log line and every exported
span goes to standard error.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import settings

INFO_LOGGER_NAME = "cats3.info"
ERROR_LOGGER_NAME = "cats3.error"


def setup_tracing() -> None:
    """Set up OpenTelemetry tracing."""
    if not settings.otel_enabled:
        return

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)

    processor = BatchSpanProcessor(ConsoleSpanExporter(out=sys.stderr))
    provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)


def setup_logging() -> None:
    """Set up structured logging with structlog."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper()),
    )
    logging.getLogger(INFO_LOGGER_NAME).setLevel(settings.log_level.upper())
    logging.getLogger(ERROR_LOGGER_NAME).setLevel(logging.ERROR)

    if settings.log_format == "console":
        renderer: Any = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    return structlog.get_logger(name)


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer instance (a no-op tracer unless tracing is enabled)."""
    return trace.get_tracer(name)


@dataclass(frozen=True)
class LogContext:
    """The pair of loggers handed to every pipeline component.

    Attributes:
        info: Informational lines (objects and prefixes found). Silenced
            in quiet mode.
        error: Error lines. Never silenced.
    """

    info: Any
    error: Any


def _drop_event(logger: Any, method_name: str, event_dict: Any) -> Any:
    raise structlog.DropEvent


def create_log_context(quiet: bool = False) -> LogContext:
    """Build the info/error logger pair for one invocation.

    Quiet state belongs to the returned context: its info logger drops
    every event before it reaches stdlib logging.

    Args:
        quiet: Suppress informational lines. Error lines are unaffected.

    Returns:
        LogContext with both loggers configured
    """
    if quiet:
        info = structlog.wrap_logger(
            logging.getLogger(INFO_LOGGER_NAME), processors=[_drop_event]
        )
    else:
        info = get_logger(INFO_LOGGER_NAME)

    return LogContext(info=info, error=get_logger(ERROR_LOGGER_NAME))


# Initialize on import
setup_logging()
setup_tracing()
