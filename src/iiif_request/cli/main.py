"""iiif-request CLI.

Command-line interface for checking and canonicalizing image request paths.
"""

from __future__ import annotations

import json
from typing import Annotated
from uuid import uuid4

import typer

from iiif_request import __version__
from iiif_request.config import settings
from iiif_request.params import ParameterError
from iiif_request.response import ImageResponse
from iiif_request.utils.logging import (
    configure_logging,
    get_logger,
    set_correlation_context,
)

app = typer.Typer(
    name="iiif-request",
    help="Validate and canonicalize IIIF image request parameters",
    add_completion=False,
)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"iiif-request {__version__}")


@app.command()
def canonicalize(  # noqa: PLR0913
    path: Annotated[
        str,
        typer.Argument(help="Request path: region/size/rotation/quality.format"),
    ],
    width: Annotated[
        int, typer.Option("--width", "-W", min=1, help="Image width in pixels")
    ],
    height: Annotated[
        int, typer.Option("--height", "-H", min=1, help="Image height in pixels")
    ],
    image_id: Annotated[
        str, typer.Option("--id", help="Image identifier")
    ] = "image",
    request_id: Annotated[
        str | None,
        typer.Option("--request-id", help="Correlation ID for log events"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict/--lenient",
            help="Fail on the first invalid parameter (default: STRICT_VALIDATION)",
        ),
    ] = settings.STRICT_VALIDATION,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Resolve a request path against an image extent and print its canonical form."""
    _configure_logging(verbose)
    logger = get_logger(__name__)
    set_correlation_context(request_id=request_id or uuid4().hex, identifier=image_id)

    try:
        response = ImageResponse.parse(image_id, path, width, height)
        if strict:
            response.validate()
    except ParameterError as e:
        logger.info("Request rejected", path=path, error=str(e))
        if json_output:
            typer.echo(json.dumps({"error": str(e)}))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    logger.info(
        "Request canonicalized",
        path=path,
        canonical_path=response.canonical_path,
        valid=response.is_valid,
    )

    if json_output:
        typer.echo(json.dumps(response.to_dict(), indent=2))
    else:
        typer.echo(response.canonical_path)
        for param in response.invalid_parameters:
            typer.echo(
                f"Invalid {param.kind}: {param.raw_value!r} ({param.invalid_reason()})",
                err=True,
            )

    raise typer.Exit(0 if response.is_valid else 1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """iiif-request: IIIF image request canonicalization."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


if __name__ == "__main__":  # pragma: no cover
    app()
