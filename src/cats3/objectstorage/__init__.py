"""Object storage operations for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .listing import KeyEnumerator, ListingPage, ObjectEntry
from .streaming import ObjectStreamer

__all__ = [
    "KeyEnumerator",
    "ListingPage",
    "ObjectEntry",
    "ObjectStreamer",
    "S3ClientConfig",
    "S3ClientManager",
]
