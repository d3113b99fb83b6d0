"""Stream objects from an S3 bucket to standard output.

Keys are given literally or expanded from prefixes; object bodies are
concatenated to standard output in exactly that order.

Recommended Usage:
    From the command line:

    $ cats3 --bucket my-bucket --prefix logs/2024-01-01/ | zcat

Library Usage:
    >>> from cats3 import CatPipeline, KeyEnumerator, ObjectStreamer
    >>> from cats3 import S3ClientConfig, S3ClientManager, create_log_context
    >>> client = S3ClientManager(S3ClientConfig()).client
    >>> log = create_log_context()
    >>> pipeline = CatPipeline(
    ...     KeyEnumerator(client, "my-bucket", log),
    ...     ObjectStreamer(client, "my-bucket", output, log),
    ... )
    >>> pipeline.run(["logs/"], prefix_mode=True)
"""

__version__ = "0.0.1"

from .core import (
    Cats3Error,
    ConfigurationError,
    ListingError,
    LogContext,
    OutputError,
    RetrievalError,
    create_log_context,
)
from .objectstorage import (
    KeyEnumerator,
    ListingPage,
    ObjectEntry,
    ObjectStreamer,
    S3ClientConfig,
    S3ClientManager,
)
from .pipeline import CatPipeline, PipelineResult
from .schemas import CatOptions, parse_options

__all__ = [
    # Errors
    "Cats3Error",
    "ConfigurationError",
    "ListingError",
    "OutputError",
    "RetrievalError",
    # Logging
    "LogContext",
    "create_log_context",
    # Object storage
    "KeyEnumerator",
    "ListingPage",
    "ObjectEntry",
    "ObjectStreamer",
    "S3ClientConfig",
    "S3ClientManager",
    # Pipeline
    "CatPipeline",
    "PipelineResult",
    # Options
    "CatOptions",
    "parse_options",
]
