"""Tests for iiif_request.utils.numeric."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iiif_request.utils.numeric import format_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "0"),
        (90.0, "90"),
        (360, "360"),
        (90.1, "90.1"),
        (0.5, "0.5"),
        (0.00001, "0.00001"),
        (1e20, "100000000000000000000"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_format_number_matches_double_precision() -> None:
    value = float("90.1111111111111111111111111111")
    assert format_number(value) == repr(value)


@given(st.floats(min_value=0, max_value=1e6, allow_nan=False))
def test_format_number_round_trips(value: float) -> None:
    rendered = format_number(value)
    assert float(rendered) == value
    assert "e" not in rendered
    assert not rendered.endswith(".0")
