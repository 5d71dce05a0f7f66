"""Command-line interface for iiif-request."""

from iiif_request.cli.main import app

__all__ = ["app"]
