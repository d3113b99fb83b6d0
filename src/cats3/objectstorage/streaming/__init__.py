"""Object retrieval and streaming."""

from .object_streamer import ObjectStreamer

__all__ = ["ObjectStreamer"]
