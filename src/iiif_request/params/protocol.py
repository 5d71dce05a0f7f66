"""Parameter capability shared by every request parameter type.

Region, Size, Rotation, Quality and Format all satisfy this protocol, so
an aggregator can hold them uniformly and ask each one whether it is
valid and what its canonical form is.
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from iiif_request.params.exceptions import ValidationError
from iiif_request.utils.logging import get_logger


@runtime_checkable
class Parameter(Protocol):
    """Protocol defining the interface of a request parameter.

    Implementations are immutable: every derived value is a pure function
    of ``raw_value`` and any context given at construction. Concrete
    classes subclass this protocol explicitly to inherit ``validate()``.
    """

    kind: ClassVar[str]
    raw_value: str

    @property
    def is_valid(self) -> bool:
        """Whether the raw value matches the grammar and its constraints."""
        ...

    @property
    def canonical_value(self) -> str:
        """Normalized textual form, defined even for invalid values."""
        ...

    def invalid_reason(self) -> str | None:
        """Describe why the value is invalid, or None when it is valid."""
        ...

    def validate(self) -> None:
        """Raise if the parameter is not valid.

        Raises:
            ValidationError: If ``is_valid`` is False.
        """
        if self.is_valid:
            return
        reason = self.invalid_reason()
        get_logger(__name__).debug(
            "Parameter validation failed",
            kind=self.kind,
            raw_value=self.raw_value,
            reason=reason,
        )
        raise ValidationError(self.kind, self.raw_value, reason)
