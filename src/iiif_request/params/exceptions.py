"""Custom exceptions for request parameter handling.

Construction of a parameter never raises; these exceptions are only
produced when a caller asks for a hard failure via ``validate()`` or hands
over a request path that cannot be split into parameters.
"""


class ParameterError(Exception):
    """Base exception for all parameter-related errors."""

    def __init__(self, message: str) -> None:
        """Initialize parameter error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class ValidationError(ParameterError):
    """Raised by ``validate()`` when a parameter is not valid.

    Covers both a raw value that does not match the parameter grammar and
    one that matches but violates a semantic constraint (start point
    outside the image, angle outside [0, 360]).

    Attributes:
        kind: Parameter kind (``"region"``, ``"rotation"``, ...).
        raw_value: The raw string the parameter was constructed from.
        reason: Short description of why the value is invalid.
    """

    def __init__(self, kind: str, raw_value: str, reason: str | None = None) -> None:
        self.kind = kind
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Invalid {kind} parameter")

    def _format_message(self) -> str:
        parts = [f"raw_value={self.raw_value!r}"]
        if self.reason:
            parts.append(f"reason={self.reason}")
        return f"{self.message} ({', '.join(parts)})"


class RequestPathError(ParameterError):
    """Raised when a request path cannot be split into its parameters.

    Attributes:
        path: The offending request path.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (path: {self.path!r})"
