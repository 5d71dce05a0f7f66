"""Rotation parameter: angle in degrees with an optional mirror flag.

Grammar: an optional leading ``!`` (mirror) followed by a non-negative
integer or decimal, with no sign and no exponent. Mirroring never negates
the angle; a valid angle lies in [0, 360] inclusive.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import ClassVar

from iiif_request.params.protocol import Parameter
from iiif_request.utils.numeric import format_number

MIRROR_MARKER = "!"
MIN_DEGREES = 0.0
MAX_DEGREES = 360.0

_ROTATION_PATTERN = re.compile(
    r"(?P<mirror>!)?(?P<degrees>\d+(?:\.\d+)?)", re.ASCII
)


@dataclass(frozen=True)
class Rotation(Parameter):
    """A rotation request.

    Example:
        >>> Rotation("!90.0").canonical_value
        '!90'
        >>> Rotation("moomin").rotation is None
        True
    """

    kind: ClassVar[str] = "rotation"

    raw_value: str
    rotation: float | None = field(init=False)

    def __post_init__(self) -> None:
        match = _ROTATION_PATTERN.fullmatch(self.raw_value)
        degrees = float(match.group("degrees")) if match else None
        object.__setattr__(self, "rotation", degrees)

    @property
    def is_mirrored(self) -> bool:
        """Whether the raw value starts with the mirror marker."""
        return self.raw_value.startswith(MIRROR_MARKER)

    @property
    def in_range(self) -> bool:
        """Whether the angle is present and within [0, 360]."""
        return self.rotation is not None and MIN_DEGREES <= self.rotation <= MAX_DEGREES

    @property
    def is_valid(self) -> bool:
        return self.rotation is not None and self.in_range

    def invalid_reason(self) -> str | None:
        if self.rotation is None:
            return "does not match rotation grammar"
        if not math.isfinite(self.rotation):
            return "angle is too large to represent"
        if not self.in_range:
            return f"angle {format_number(self.rotation)} is outside [0, 360]"
        return None

    @property
    def canonical_value(self) -> str:
        """The angle in shortest form, prefixed with ``!`` when mirrored.

        The raw value when no angle was parsed or it overflowed a double.
        """
        if self.rotation is None or not math.isfinite(self.rotation):
            return self.raw_value
        prefix = MIRROR_MARKER if self.is_mirrored else ""
        return f"{prefix}{format_number(self.rotation)}"
