"""Command-line interface for cats3.

Streams one or more S3 objects to standard output:

    cats3 --bucket my-bucket a.txt b.txt
    cats3 --bucket my-bucket --prefix logs/2024-01-
    cats3 -bucket my-bucket -prefix -dry-run logs/

Informational and error lines go to standard error; standard output
carries nothing but object bytes.
"""

import sys
from typing import Annotated, List, Optional

import typer

from . import __version__
from .cli_params import (
    aws_access_key_option,
    aws_endpoint_url_option,
    aws_profile_option,
    aws_region_option,
    aws_secret_key_option,
    aws_session_token_option,
    bucket_option,
    delimiter_option,
    dry_run_option,
    page_size_option,
    prefix_option,
    quiet_option,
)
from .core import Cats3Error, ConfigurationError, create_log_context
from .objectstorage import (
    KeyEnumerator,
    ObjectStreamer,
    S3ClientConfig,
    S3ClientManager,
)
from .pipeline import CatPipeline
from .schemas import parse_options

app = typer.Typer(
    name="cats3",
    help="Stream objects from an S3 bucket to standard output.",
    no_args_is_help=True,
    add_completion=False,
)


def version_callback(ctx: typer.Context, value: bool) -> None:
    """Display version information."""
    if value:
        prog_name = ctx.find_root().info_name or "cats3"
        typer.echo(f"{prog_name} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    keys: Annotated[
        List[str],
        typer.Argument(help="Object keys (or prefixes with --prefix)", show_default=False),
    ],
    bucket: Annotated[Optional[str], bucket_option()] = None,
    prefix: Annotated[bool, prefix_option()] = False,
    delimiter: Annotated[str, delimiter_option()] = "/",
    dry_run: Annotated[bool, dry_run_option()] = False,
    quiet: Annotated[bool, quiet_option()] = False,
    page_size: Annotated[Optional[int], page_size_option()] = None,
    # S3 options
    access_key_id: Annotated[Optional[str], aws_access_key_option()] = None,
    secret_access_key: Annotated[Optional[str], aws_secret_key_option()] = None,
    session_token: Annotated[Optional[str], aws_session_token_option()] = None,
    region_name: Annotated[Optional[str], aws_region_option()] = None,
    endpoint_url: Annotated[Optional[str], aws_endpoint_url_option()] = None,
    aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-version",
            callback=version_callback,
            is_eager=True,
            help="Show version.",
        ),
    ] = None,
) -> None:
    """
    Write the contents of each KEY in BUCKET to standard output, in order.

    With --prefix every KEY is expanded to all objects whose key starts
    with it, in listing order.
    """
    try:
        options = parse_options(
            bucket=bucket,
            prefix_mode=prefix,
            delimiter=delimiter,
            dry_run=dry_run,
            quiet=quiet,
            page_size=page_size,
        )
    except ConfigurationError as e:
        # Error lines ignore quiet mode, so any context reports this.
        create_log_context().error.error(str(e))
        raise typer.Exit(1)

    log = create_log_context(quiet=options.quiet)

    try:
        client = S3ClientManager(
            S3ClientConfig(
                access_key_id=access_key_id,
                secret_access_key=secret_access_key,
                session_token=session_token,
                region_name=region_name,
                endpoint_url=endpoint_url,
                aws_profile=aws_profile,
            )
        ).client

        enumerator = KeyEnumerator(
            client,
            options.bucket,
            log,
            delimiter=options.delimiter,
            page_size=options.page_size,
        )
        streamer = ObjectStreamer(
            client,
            options.bucket,
            sys.stdout.buffer,
            log,
            dry_run=options.dry_run,
        )

        CatPipeline(enumerator, streamer).run(keys, prefix_mode=options.prefix_mode)

    except ConfigurationError as e:
        log.error.error(str(e))
        raise typer.Exit(1)
    except Cats3Error:
        # Already logged where it was raised.
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
