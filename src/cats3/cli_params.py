"""Shared CLI parameter definitions.

Each function returns a typer.Option for use as ``Annotated`` metadata in
the command signature, so names and help text live in one place.

Every cats3 option accepts both the GNU spelling (``--bucket``) and the
single-dash spelling of the original tool (``-bucket``).

Parameter Categories:
    - Invocation parameters: bucket, prefix mode, dry run, logging
    - AWS parameters: credentials, region and endpoint for the S3 client
"""

from typing import Annotated, Optional

import typer


def bucket_option() -> Annotated[Optional[str], typer.Option]:
    """Bucket name option."""
    return typer.Option("--bucket", "-bucket", help="Bucket name (*required*)")


def prefix_option() -> Annotated[bool, typer.Option]:
    """Prefix mode option."""
    return typer.Option(
        "--prefix",
        "-prefix",
        help="Treat args as a prefix (get all objects matching it)",
    )


def delimiter_option() -> Annotated[str, typer.Option]:
    """Listing delimiter option."""
    return typer.Option(
        "--delimiter", "-delimiter", help="Delimiter used to group prefix listings"
    )


def dry_run_option() -> Annotated[bool, typer.Option]:
    """Dry-run option."""
    return typer.Option(
        "--dry-run", "-dry-run", help="Don't get objects, only enumerate keys"
    )


def quiet_option() -> Annotated[bool, typer.Option]:
    """Quiet option."""
    return typer.Option("--quiet", "-quiet", help="Suppress info messages")


def page_size_option() -> Annotated[Optional[int], typer.Option]:
    """Listing page size option."""
    return typer.Option(
        "--page-size", help="Maximum keys per listing request (1-1000)"
    )


def aws_access_key_option() -> Annotated[Optional[str], typer.Option]:
    """AWS access key ID option."""
    return typer.Option("--access-key-id", help="AWS access key ID")


def aws_secret_key_option() -> Annotated[Optional[str], typer.Option]:
    """AWS secret access key option."""
    return typer.Option("--secret-access-key", help="AWS secret access key")


def aws_session_token_option() -> Annotated[Optional[str], typer.Option]:
    """AWS session token option."""
    return typer.Option("--session-token", help="AWS session token")


def aws_region_option() -> Annotated[Optional[str], typer.Option]:
    """AWS region option."""
    return typer.Option("--region", help="AWS region name")


def aws_endpoint_url_option() -> Annotated[Optional[str], typer.Option]:
    """AWS endpoint URL option."""
    return typer.Option("--endpoint-url", help="Custom S3 endpoint URL")


def aws_profile_option() -> Annotated[Optional[str], typer.Option]:
    """AWS profile option."""
    return typer.Option("--aws-profile", help="AWS CLI profile name")
