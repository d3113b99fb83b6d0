"""Object retrieval: copy object bodies to the output stream."""

from typing import Any, BinaryIO

from botocore.exceptions import BotoCoreError, ClientError

from cats3.core import LogContext, get_tracer, settings
from cats3.core.exceptions import OutputError, RetrievalError

tracer = get_tracer(__name__)


class ObjectStreamer:
    """Fetches objects one at a time and appends their bytes to an output stream."""

    def __init__(
        self,
        client: Any,
        bucket: str,
        output: BinaryIO,
        log: LogContext,
        dry_run: bool = False,
        chunk_size: int = settings.chunk_size,
    ):
        """Initialize object streamer.

        Args:
            client: boto3 S3 client
            bucket: Bucket every fetch is scoped to
            output: Binary stream receiving object bytes
            log: Info/error logger pair
            dry_run: Consume keys without fetching anything
            chunk_size: Bytes per read from the response body
        """
        self.client = client
        self.bucket = bucket
        self.output = output
        self.log = log
        self.dry_run = dry_run
        self.chunk_size = chunk_size

    def stream(self, key: str) -> int:
        """Copy one object's full body to the output.

        Args:
            key: Object key within the bucket

        Returns:
            Number of bytes written (0 in dry-run mode)

        Raises:
            RetrievalError: If the object cannot be fetched or read
            OutputError: If writing to the output fails
        """
        if self.dry_run:
            return 0

        with tracer.start_as_current_span("get_object") as span:
            span.set_attribute("s3.bucket", self.bucket)
            span.set_attribute("s3.key", key)

            try:
                response = self.client.get_object(Bucket=self.bucket, Key=key)
            except (BotoCoreError, ClientError) as e:
                error_msg = f"Failed to get object '{key}': {e}"
                self.log.error.error(error_msg, bucket=self.bucket, key=key)
                raise RetrievalError(error_msg) from e

            body = response["Body"]
            written = 0
            try:
                for chunk in body.iter_chunks(chunk_size=self.chunk_size):
                    self._write(key, chunk)
                    written += len(chunk)
            except (BotoCoreError, ClientError, OSError) as e:
                error_msg = f"Failed to read object '{key}': {e}"
                self.log.error.error(error_msg, bucket=self.bucket, key=key)
                raise RetrievalError(error_msg) from e
            finally:
                body.close()

            self._flush(key)
            span.set_attribute("s3.bytes_written", written)

        return written

    def _write(self, key: str, chunk: bytes) -> None:
        try:
            self.output.write(chunk)
        except OSError as e:
            error_msg = f"Failed to write object '{key}' to output: {e}"
            self.log.error.error(error_msg, key=key)
            raise OutputError(error_msg) from e

    def _flush(self, key: str) -> None:
        try:
            self.output.flush()
        except OSError as e:
            error_msg = f"Failed to flush output after object '{key}': {e}"
            self.log.error.error(error_msg, key=key)
            raise OutputError(error_msg) from e
