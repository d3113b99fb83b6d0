"""Tests for the cats3 command-line interface."""

from unittest.mock import patch

import boto3
from moto import mock_aws
from typer.testing import CliRunner

from cats3.cli import app
from cats3.schemas import CatOptions

runner = CliRunner()

S3_ARGS = ["--bucket", "test-bucket", "--region", "us-east-1"]


def invoke(args):
    return runner.invoke(app, args, prog_name="cats3")


class TestVersionAndValidation:
    """Test options that never reach the backend."""

    def test_version(self):
        """Test --version prints the program name and version."""
        result = invoke(["--version"])

        assert result.exit_code == 0
        assert result.stdout == "cats3 0.0.1\n"

    def test_version_ignores_other_arguments(self):
        """Test --version wins over every other option and argument."""
        result = invoke(["--prefix", "a.txt", "-version", "--bucket", "b"])

        assert result.exit_code == 0
        assert result.stdout == "cats3 0.0.1\n"

    @patch("cats3.cli.S3ClientManager")
    def test_missing_bucket(self, mock_manager, caplog):
        """Test a missing bucket is fatal before any backend call."""
        result = invoke(["a.txt"])

        assert result.exit_code == 1
        assert "bucket name required" in caplog.text
        mock_manager.assert_not_called()

    @patch("cats3.cli.S3ClientManager")
    def test_missing_bucket_reported_when_quiet(self, mock_manager, caplog):
        """Test configuration errors are logged even in quiet mode."""
        result = invoke(["--quiet", "a.txt"])

        assert result.exit_code == 1
        assert "bucket name required" in caplog.text
        mock_manager.assert_not_called()

    @patch("cats3.cli.S3ClientManager")
    def test_empty_bucket(self, mock_manager, caplog):
        """Test an empty bucket name is treated as missing."""
        result = invoke(["--bucket", "", "a.txt"])

        assert result.exit_code == 1
        mock_manager.assert_not_called()

    def test_keys_required(self):
        """Test at least one key must be given."""
        result = invoke(["--bucket", "b"])

        assert result.exit_code == 2

    def test_invalid_page_size(self, caplog):
        """Test out-of-range page sizes are rejected."""
        result = invoke(["--bucket", "b", "--page-size", "0", "--prefix", "p/"])

        assert result.exit_code == 1
        assert "Invalid options" in caplog.text

    def test_unknown_profile(self, caplog):
        """Test a client that cannot be built is a configuration error."""
        result = invoke(["--bucket", "b", "--aws-profile", "no-such-profile", "k"])

        assert result.exit_code == 1
        assert "Failed to create S3 client" in caplog.text


@mock_aws
class TestCatObjects:
    """Test streaming objects end to end with mocked S3."""

    def setup_method(self, method):
        """Set up test environment."""
        self.s3_client = boto3.client("s3", region_name="us-east-1")
        self.s3_client.create_bucket(Bucket="test-bucket")

        objects = {
            "a.txt": b"AAA",
            "b.txt": b"BB",
            "logs/1.log": b"one\n",
            "logs/2.log": b"two\n",
            "logs/archive/0.log": b"zero\n",
        }
        for key, body in objects.items():
            self.s3_client.put_object(Bucket="test-bucket", Key=key, Body=body)

    def test_literal_keys_concatenated(self):
        """Test bodies are written in argument order with no separator."""
        result = invoke(S3_ARGS + ["a.txt", "b.txt"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"AAABB"

    def test_literal_keys_reversed(self):
        """Test output order follows argument order, not key order."""
        result = invoke(S3_ARGS + ["b.txt", "a.txt", "b.txt"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"BBAAABB"

    def test_prefix_expansion(self, caplog):
        """Test a prefix is expanded page by page in listing order."""
        result = invoke(S3_ARGS + ["--prefix", "--page-size", "1", "logs/"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"one\ntwo\n"
        assert "Prefix found" in caplog.text
        assert "logs/archive/" in caplog.text

    def test_prefix_without_delimiter(self):
        """Test an empty delimiter expands the whole subtree."""
        result = invoke(S3_ARGS + ["--prefix", "--delimiter", "", "logs/"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"one\ntwo\nzero\n"

    def test_single_dash_options(self):
        """Test the single-dash spellings are accepted."""
        result = invoke(
            ["-bucket", "test-bucket", "--region", "us-east-1", "-prefix", "logs/"]
        )

        assert result.exit_code == 0
        assert result.stdout_bytes == b"one\ntwo\n"

    def test_dry_run(self, caplog):
        """Test dry-run logs keys but writes nothing."""
        with patch(
            "cats3.objectstorage.streaming.object_streamer.ObjectStreamer._write"
        ) as mock_write:
            result = invoke(S3_ARGS + ["--dry-run", "--prefix", "logs/"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b""
        mock_write.assert_not_called()
        assert "logs/1.log" in caplog.text
        assert "logs/2.log" in caplog.text

    def test_quiet_suppresses_info(self, caplog):
        """Test quiet mode emits no informational lines."""
        result = invoke(S3_ARGS + ["--quiet", "--prefix", "logs/"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"one\ntwo\n"
        assert not [r for r in caplog.records if r.name == "cats3.info"]

    def test_quiet_keeps_errors(self, caplog):
        """Test quiet mode still reports failures."""
        result = invoke(S3_ARGS + ["--quiet", "missing.txt"])

        assert result.exit_code == 1
        assert [r for r in caplog.records if r.name == "cats3.error"]

    def test_missing_key_aborts(self, caplog):
        """Test a retrieval failure stops the run after earlier objects."""
        result = invoke(S3_ARGS + ["a.txt", "missing.txt", "b.txt"])

        assert result.exit_code == 1
        assert result.stdout_bytes == b"AAA"
        assert "missing.txt" in caplog.text

    def test_listing_failure_is_fatal(self, caplog):
        """Test a listing error fails the process."""
        result = invoke(
            ["--bucket", "no-such-bucket", "--region", "us-east-1", "--prefix", "x/"]
        )

        assert result.exit_code == 1
        assert "Failed to list objects" in caplog.text

    def test_quiet_taken_from_validated_options(self, caplog):
        """Test logging follows the validated options, not the raw flag."""
        options = CatOptions(bucket="test-bucket", prefix_mode=True, quiet=True)

        with patch("cats3.cli.parse_options", return_value=options):
            result = invoke(S3_ARGS + ["logs/"])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"one\ntwo\n"
        assert not [r for r in caplog.records if r.name == "cats3.info"]
