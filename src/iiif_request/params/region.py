"""Region parameter: which rectangle of the image a request addresses.

Accepted grammar (case-sensitive, no surrounding whitespace):

- ``full``: the whole image.
- ``x,y,w,h``: absolute pixels, each field a non-negative integer or decimal.
- ``pct:x,y,w,h``: percentages of the image extent, same field rules.

The raw value is parsed once at construction into a mode and a set of
numeric fields. Percentages are converted against the image extent, then
the requested rectangle is clamped to the image to produce the canonical
value, which is always ``full`` or absolute integer pixels. Validity is
tracked separately: an out-of-range request still has a canonical value.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from iiif_request.params.geometry import CanonicalRegion, RegionGeometry
from iiif_request.params.protocol import Parameter

FULL = "full"
PCT_PREFIX = "pct:"

_NUMBER = r"\d+(?:\.\d+)?"
_REGION_PATTERN = re.compile(
    rf"(?P<pct>{PCT_PREFIX})?"
    rf"(?P<x>{_NUMBER}),(?P<y>{_NUMBER}),(?P<w>{_NUMBER}),(?P<h>{_NUMBER})",
    re.ASCII,
)


class RegionMode(str, Enum):
    """How the region value addresses the image."""

    full = "full"
    absolute = "absolute"
    percentage = "percentage"


def _classify(raw_value: str) -> RegionMode:
    if raw_value == FULL:
        return RegionMode.full
    if raw_value.startswith(PCT_PREFIX):
        return RegionMode.percentage
    return RegionMode.absolute


def _parse_fields(raw_value: str) -> tuple[float, float, float, float] | None:
    match = _REGION_PATTERN.fullmatch(raw_value)
    if match is None:
        return None
    fields = tuple(float(match.group(name)) for name in ("x", "y", "w", "h"))
    if not all(math.isfinite(value) for value in fields):
        return None
    return fields  # type: ignore[return-value]


@dataclass(frozen=True)
class Region(Parameter):
    """A region request resolved against a known image extent.

    Without an image extent only ``full`` resolves. Any other value is then
    invalid, is not full, and its canonical value is the raw string.

    Args:
        raw_value: The region segment of the request.
        max_width: Image width in pixels. Required unless raw_value is ``full``.
        max_height: Image height in pixels. Required unless raw_value is ``full``.

    Example:
        >>> Region("pct:50,50,100,100", 101, 101).canonical_value
        '50,50,51,51'
        >>> Region("110,110,100,100", 101, 101).is_valid
        False
    """

    kind: ClassVar[str] = "region"

    raw_value: str
    max_width: float | None = None
    max_height: float | None = None
    mode: RegionMode = field(init=False)
    _fields: tuple[float, float, float, float] | None = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", _classify(self.raw_value))
        fields = None if self.mode is RegionMode.full else _parse_fields(self.raw_value)
        object.__setattr__(self, "_fields", fields)

    @property
    def has_bounds(self) -> bool:
        """Whether the image extent needed to resolve the region is known."""
        return self.max_width is not None and self.max_height is not None

    @property
    def matches_grammar(self) -> bool:
        """Whether the raw value has one of the accepted shapes."""
        return self.mode is RegionMode.full or self._fields is not None

    @property
    def geometry(self) -> RegionGeometry | None:
        """The requested rectangle in pixels, before clamping.

        None when the raw value does not match the grammar, or when the
        image extent is unknown and the region is not ``full``.
        """
        if not self.has_bounds or not self.matches_grammar:
            return None
        max_width = float(self.max_width)  # type: ignore[arg-type]
        max_height = float(self.max_height)  # type: ignore[arg-type]

        if self.mode is RegionMode.full:
            return RegionGeometry(x=0, y=0, width=max_width, height=max_height)

        x, y, w, h = self._fields  # type: ignore[misc]
        if self.mode is RegionMode.percentage:
            x = x / 100 * max_width
            y = y / 100 * max_height
            w = w / 100 * max_width
            h = h / 100 * max_height
            if not all(math.isfinite(value) for value in (x, y, w, h)):
                return None
        return RegionGeometry(x=x, y=y, width=w, height=h)

    @property
    def canonical_region(self) -> CanonicalRegion | None:
        """The requested rectangle clamped to the image, in integer pixels."""
        geometry = self.geometry
        if geometry is None:
            return None
        return geometry.clamp(self.max_width, self.max_height)  # type: ignore[arg-type]

    @property
    def is_full(self) -> bool:
        """Whether the region resolves to exactly the whole image."""
        if self.mode is RegionMode.full:
            return True
        canonical = self.canonical_region
        return canonical is not None and canonical.covers(
            self.max_width,  # type: ignore[arg-type]
            self.max_height,  # type: ignore[arg-type]
        )

    @property
    def is_pct(self) -> bool:
        """Whether this is a percentage region that does not resolve to full."""
        return self.mode is RegionMode.percentage and not self.is_full

    @property
    def is_valid(self) -> bool:
        return self.invalid_reason() is None

    def invalid_reason(self) -> str | None:
        if self.mode is RegionMode.full:
            return None
        if not self.matches_grammar:
            return "does not match region grammar"
        geometry = self.geometry
        if geometry is None:
            if not self.has_bounds:
                return "image extent is required to resolve region"
            return "region coordinates are not finite"
        if not geometry.starts_within(self.max_width, self.max_height):  # type: ignore[arg-type]
            return (
                f"start point ({geometry.x}, {geometry.y}) is outside image "
                f"({self.max_width}x{self.max_height})"
            )
        return None

    @property
    def canonical_value(self) -> str:
        """``full`` or ``x,y,w,h`` in integer pixels; the raw value if unresolvable."""
        if self.is_full:
            return FULL
        canonical = self.canonical_region
        if canonical is None:
            return self.raw_value
        return str(canonical)
