"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from iiif_request.utils.logging import clear_correlation_context


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()
