"""Size parameter: the output dimensions of the requested region.

Accepted grammar: ``full``, ``max``, ``w,``, ``,h``, ``pct:n``, ``w,h`` and
``!w,h`` (best fit). Pixel fields are integers; the percentage may be
decimal. The size is resolved against the canonical extent of the region
it scales, and rendered as ``full`` when the output equals that extent,
``w,`` when the aspect ratio is kept, and ``w,h`` otherwise.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from iiif_request.params.protocol import Parameter

FULL = "full"
MAX = "max"

_PCT_PATTERN = re.compile(r"pct:(?P<pct>\d{1,10}(?:\.\d{1,10})?)", re.ASCII)
_DIMENSIONS_PATTERN = re.compile(
    r"(?P<best_fit>!)?(?P<w>\d{1,10})?,(?P<h>\d{1,10})?",
    re.ASCII,
)


class SizeMode(str, Enum):
    """How the size value scales the region."""

    full = "full"
    max = "max"
    percentage = "percentage"
    width = "width"  # "w,"
    height = "height"  # ",h"
    exact = "exact"  # "w,h"
    best_fit = "best_fit"  # "!w,h"


def _round(value: float) -> int:
    """Round half up to the nearest pixel."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Size(Parameter):
    """A size request, resolved against the region extent it scales.

    Args:
        raw_value: The size segment of the request.
        region_width: Canonical width of the requested region.
        region_height: Canonical height of the requested region.

    Example:
        >>> Size("pct:50", 200, 100).canonical_value
        '100,'
        >>> Size("200,50", 200, 100).canonical_value
        '200,50'
    """

    kind: ClassVar[str] = "size"

    raw_value: str
    region_width: int | None = None
    region_height: int | None = None
    mode: SizeMode | None = field(init=False)
    _values: tuple[float | None, float | None] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        mode, values = self._parse(self.raw_value)
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "_values", values)

    @staticmethod
    def _parse(
        raw_value: str,
    ) -> tuple[SizeMode | None, tuple[float | None, float | None]]:
        if raw_value == FULL:
            return SizeMode.full, (None, None)
        if raw_value == MAX:
            return SizeMode.max, (None, None)

        pct_match = _PCT_PATTERN.fullmatch(raw_value)
        if pct_match:
            return SizeMode.percentage, (float(pct_match.group("pct")), None)

        match = _DIMENSIONS_PATTERN.fullmatch(raw_value)
        if match is None:
            return None, (None, None)
        w = int(match.group("w")) if match.group("w") is not None else None
        h = int(match.group("h")) if match.group("h") is not None else None

        if match.group("best_fit"):
            if w is None or h is None:
                return None, (None, None)
            return SizeMode.best_fit, (w, h)
        if w is not None and h is not None:
            return SizeMode.exact, (w, h)
        if w is not None:
            return SizeMode.width, (w, None)
        if h is not None:
            return SizeMode.height, (None, h)
        return None, (None, None)

    @property
    def has_region(self) -> bool:
        """Whether a non-empty region extent is available to scale."""
        return bool(self.region_width) and bool(self.region_height)

    @property
    def output_size(self) -> tuple[int, int] | None:
        """The (width, height) the region is scaled to, if it can be resolved."""
        if self.mode is None or not self.has_region:
            return None
        rw = self.region_width
        rh = self.region_height
        w, h = self._values

        if self.mode in (SizeMode.full, SizeMode.max):
            return (rw, rh)  # type: ignore[return-value]
        if self.mode is SizeMode.percentage:
            return (_round(rw * w / 100), _round(rh * w / 100))  # type: ignore[operator]
        if self.mode is SizeMode.width:
            return (int(w), _round(rh * w / rw))  # type: ignore[arg-type,operator]
        if self.mode is SizeMode.height:
            return (_round(rw * h / rh), int(h))  # type: ignore[arg-type,operator]
        if self.mode is SizeMode.best_fit:
            scale = min(w / rw, h / rh)  # type: ignore[operator]
            return (_round(rw * scale), _round(rh * scale))  # type: ignore[operator]
        return (int(w), int(h))  # type: ignore[arg-type]

    @property
    def is_valid(self) -> bool:
        return self.invalid_reason() is None

    def invalid_reason(self) -> str | None:
        if self.mode is None:
            return "does not match size grammar"
        if any(value == 0 for value in self._values if value is not None):
            return "requested size must be greater than zero"
        return None

    @property
    def canonical_value(self) -> str:
        """``full``, ``w,`` or ``w,h``; the raw value if unresolvable."""
        if self.mode in (SizeMode.full, SizeMode.max):
            return FULL
        output = self.output_size
        if output is None:
            return self.raw_value
        width, height = output
        if output == (self.region_width, self.region_height):
            return FULL
        if height == _round(self.region_height * width / self.region_width):  # type: ignore[operator]
            return f"{width},"
        return f"{width},{height}"
