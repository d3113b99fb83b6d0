"""Producer/consumer pipeline between key enumeration and object streaming.

The enumerator runs on a background thread and feeds a bounded queue; the
calling thread drains it and streams each object in turn, so listing pages
are fetched while earlier objects are still being written.
"""

import queue
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator

from cats3.core import get_logger
from cats3.objectstorage.listing import KeyEnumerator
from cats3.objectstorage.streaming import ObjectStreamer

logger = get_logger(__name__)

# Seconds between stop checks while the producer waits on a full queue.
_POLL_INTERVAL = 0.1

_END = object()


@dataclass(frozen=True)
class _ProducerFailure:
    error: Exception


@dataclass(frozen=True)
class PipelineResult:
    """Summary of a completed run."""

    keys_consumed: int
    bytes_written: int


class CatPipeline:
    """Owns the handoff queue between a KeyEnumerator and an ObjectStreamer."""

    def __init__(
        self,
        enumerator: KeyEnumerator,
        streamer: ObjectStreamer,
        queue_size: int = 1,
    ):
        self.enumerator = enumerator
        self.streamer = streamer
        self.queue_size = queue_size

    def run(self, args: Iterable[str], prefix_mode: bool) -> PipelineResult:
        """Stream every enumerated object to the output, in key order.

        Raises:
            ListingError: If enumeration fails (after earlier keys are streamed)
            RetrievalError: If an object cannot be fetched
            OutputError: If the output cannot be written
        """
        keys_consumed = 0
        bytes_written = 0

        keys = self.iter_keys(args, prefix_mode)
        try:
            for key in keys:
                keys_consumed += 1
                bytes_written += self.streamer.stream(key)
        finally:
            keys.close()

        logger.debug(
            "Pipeline completed",
            keys_consumed=keys_consumed,
            bytes_written=bytes_written,
        )
        return PipelineResult(keys_consumed=keys_consumed, bytes_written=bytes_written)

    def iter_keys(self, args: Iterable[str], prefix_mode: bool) -> Iterator[str]:
        """Yield keys as the background enumerator produces them.

        An exception raised by the enumerator is re-raised here once every
        key queued before it has been yielded. Closing the iterator early
        tells the producer to stop.
        """
        handoff: queue.Queue = queue.Queue(maxsize=self.queue_size)
        stop = threading.Event()

        def put(item: object) -> bool:
            while not stop.is_set():
                try:
                    handoff.put(item, timeout=_POLL_INTERVAL)
                    return True
                except queue.Full:
                    continue
            return False

        def produce() -> None:
            try:
                for key in self.enumerator.enumerate(args, prefix_mode):
                    if not put(key):
                        return
            except Exception as e:
                # Handed to the consumer, which re-raises it.
                put(_ProducerFailure(e))
                return
            put(_END)

        producer = threading.Thread(
            target=produce, name="cats3-key-enumerator", daemon=True
        )
        producer.start()

        try:
            while True:
                item = handoff.get()
                if item is _END:
                    break
                if isinstance(item, _ProducerFailure):
                    raise item.error
                yield item
            producer.join()
        finally:
            stop.set()
