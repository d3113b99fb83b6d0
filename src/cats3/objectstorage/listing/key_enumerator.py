"""Key enumeration: literal keys or prefix expansion via ListObjectsV2."""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError

from cats3.core import LogContext, format_size, get_tracer
from cats3.core.exceptions import ListingError

tracer = get_tracer(__name__)


@dataclass(frozen=True)
class ObjectEntry:
    """One object matched by a listing call."""

    key: str
    size: int


@dataclass(frozen=True)
class ListingPage:
    """The result of a single ListObjectsV2 call.

    Attributes:
        objects: Matched objects, in the order the backend returned them
        common_prefixes: Group markers under the delimiter (informational only)
        continuation_token: Token for the next page, or None on the last page
    """

    objects: tuple[ObjectEntry, ...]
    common_prefixes: tuple[str, ...]
    continuation_token: Optional[str]


class KeyEnumerator:
    """Turns command-line arguments into the ordered sequence of keys to fetch."""

    def __init__(
        self,
        client: Any,
        bucket: str,
        log: LogContext,
        delimiter: str = "/",
        page_size: Optional[int] = None,
    ):
        """Initialize key enumerator.

        Args:
            client: boto3 S3 client
            bucket: Bucket every listing call is scoped to
            log: Info/error logger pair
            delimiter: Grouping delimiter for listing; empty disables grouping
            page_size: Keys per listing page (backend default if None)
        """
        self.client = client
        self.bucket = bucket
        self.log = log
        self.delimiter = delimiter
        self.page_size = page_size

    def enumerate(self, args: Iterable[str], prefix_mode: bool) -> Iterator[str]:
        """Yield keys lazily, in argument order.

        Literal arguments are yielded as-is without touching the backend.
        In prefix mode every argument is expanded page by page.

        Raises:
            ListingError: If a listing call fails; nothing more is yielded
        """
        for arg in args:
            if prefix_mode:
                yield from self.expand_prefix(arg)
            else:
                self.log.info.info("Object found", key=arg)
                yield arg

    def expand_prefix(self, prefix: str) -> Iterator[str]:
        """Yield every object key under a prefix, in listing order."""
        for page in self.list_pages(prefix):
            for entry in page.objects:
                self.log.info.info(
                    "Object found", key=entry.key, size=format_size(entry.size)
                )
                yield entry.key

            for common_prefix in page.common_prefixes:
                self.log.info.info("Prefix found", prefix=common_prefix)

    def list_pages(self, prefix: str) -> Iterator[ListingPage]:
        """Page through a prefix listing with the list_objects_v2 paginator.

        Args:
            prefix: Key prefix to list

        Yields:
            ListingPage per response, with matched objects, common prefixes
            and the token for the following page

        Raises:
            ListingError: If a listing call fails
        """
        params: dict[str, Any] = {"Bucket": self.bucket, "Prefix": prefix}
        if self.delimiter:
            params["Delimiter"] = self.delimiter
        if self.page_size:
            params["PaginationConfig"] = {"PageSize": self.page_size}

        paginator = self.client.get_paginator("list_objects_v2")
        page_iterator = iter(paginator.paginate(**params))

        while True:
            with tracer.start_as_current_span("list_objects_page") as span:
                span.set_attribute("s3.bucket", self.bucket)
                span.set_attribute("s3.prefix", prefix)
                try:
                    response = next(page_iterator)
                except StopIteration:
                    return
                except (BotoCoreError, ClientError) as e:
                    error_msg = f"Failed to list objects under '{prefix}': {e}"
                    self.log.error.error(error_msg, bucket=self.bucket, prefix=prefix)
                    raise ListingError(error_msg) from e

            yield self._to_page(response)

    @staticmethod
    def _to_page(response: dict[str, Any]) -> ListingPage:
        next_token = None
        if response.get("IsTruncated"):
            next_token = response.get("NextContinuationToken")

        return ListingPage(
            objects=tuple(
                ObjectEntry(key=obj["Key"], size=obj.get("Size", 0))
                for obj in response.get("Contents", [])
            ),
            common_prefixes=tuple(
                info["Prefix"] for info in response.get("CommonPrefixes", [])
            ),
            continuation_token=next_token,
        )
