"""Unit tests for parameter exceptions."""

from __future__ import annotations

from iiif_request.params.exceptions import (
    ParameterError,
    RequestPathError,
    ValidationError,
)


class TestParameterError:
    """Tests for base ParameterError class."""

    def test_error_message_only(self) -> None:
        error = ParameterError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_inheritance(self) -> None:
        error = ValidationError("region", "ful")
        assert isinstance(error, ParameterError)
        assert isinstance(error, Exception)

    def test_context_attributes(self) -> None:
        error = ValidationError("rotation", "361", "angle 361 is outside [0, 360]")
        assert error.kind == "rotation"
        assert error.raw_value == "361"
        assert error.reason == "angle 361 is outside [0, 360]"

    def test_message_with_reason(self) -> None:
        error = ValidationError("rotation", "361", "out of range")
        assert str(error) == (
            "Invalid rotation parameter (raw_value='361', reason=out of range)"
        )

    def test_message_without_reason(self) -> None:
        error = ValidationError("region", "")
        assert str(error) == "Invalid region parameter (raw_value='')"


class TestRequestPathError:
    """Tests for RequestPathError class."""

    def test_inheritance(self) -> None:
        assert isinstance(RequestPathError("bad", "a/b"), ParameterError)

    def test_message_includes_path(self) -> None:
        error = RequestPathError("Expected 4 path segments, got 2", "full/full")
        assert error.path == "full/full"
        assert "Expected 4 path segments" in str(error)
        assert "'full/full'" in str(error)
