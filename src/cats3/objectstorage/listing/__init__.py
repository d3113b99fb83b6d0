"""Object storage listing operations."""

from .key_enumerator import KeyEnumerator, ListingPage, ObjectEntry

__all__ = ["KeyEnumerator", "ListingPage", "ObjectEntry"]
