"""Geometry primitives for region resolution.

This module provides immutable Pydantic models for the two rectangles a
region request resolves to: the requested geometry in (possibly
fractional) pixel space, and the integer canonical rectangle obtained by
clamping it to the image extent. (0, 0) is the top-left corner.
"""

from __future__ import annotations

import math
from typing import Self

from pydantic import BaseModel, Field


class RegionGeometry(BaseModel, frozen=True):
    """A requested rectangle in absolute pixel coordinates, before clamping.

    Percentage requests are already converted to pixels against the image
    extent, so values may be fractional.

    Attributes:
        x: Requested left edge.
        y: Requested top edge.
        width: Requested horizontal extent.
        height: Requested vertical extent.
    """

    x: float = Field(..., ge=0, description="Requested left edge")
    y: float = Field(..., ge=0, description="Requested top edge")
    width: float = Field(..., ge=0, description="Requested width")
    height: float = Field(..., ge=0, description="Requested height")

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    def starts_within(self, max_width: float, max_height: float) -> bool:
        """Check that the start point lies strictly inside the image."""
        return self.x < max_width and self.y < max_height

    def clamp(self, max_width: float, max_height: float) -> CanonicalRegion:
        """Clamp the requested extent to the space left inside the image.

        The start point is floored but never moved into the image; width
        and height are limited by the space remaining after the unfloored
        start point, rounded up, and never negative.

        Args:
            max_width: Image width in pixels.
            max_height: Image height in pixels.

        Returns:
            The integer canonical rectangle.

        Example:
            >>> RegionGeometry(x=50.5, y=50.5, width=101, height=101).clamp(101, 101)
            CanonicalRegion(x=50, y=50, width=51, height=51)
        """
        remaining_width = max_width - self.x
        remaining_height = max_height - self.y

        return CanonicalRegion(
            x=math.floor(self.x),
            y=math.floor(self.y),
            width=max(0, math.ceil(min(self.width, remaining_width))),
            height=max(0, math.ceil(min(self.height, remaining_height))),
        )


class CanonicalRegion(BaseModel, frozen=True):
    """An integer rectangle as it appears in a canonical region value.

    Width and height may be zero when the start point lies at or beyond
    the image edge.

    Attributes:
        x: Left edge X coordinate (>= 0).
        y: Top edge Y coordinate (>= 0).
        width: Horizontal extent in pixels (>= 0).
        height: Vertical extent in pixels (>= 0).
    """

    x: int = Field(..., ge=0, description="Left edge X coordinate")
    y: int = Field(..., ge=0, description="Top edge Y coordinate")
    width: int = Field(..., ge=0, description="Width in pixels")
    height: int = Field(..., ge=0, description="Height in pixels")

    @property
    def area(self) -> int:
        """Calculate the area in square pixels."""
        return self.width * self.height

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_tuple(cls, bbox: tuple[int, int, int, int]) -> Self:
        """Create CanonicalRegion from (x, y, width, height) tuple."""
        return cls(x=bbox[0], y=bbox[1], width=bbox[2], height=bbox[3])

    def covers(self, max_width: float, max_height: float) -> bool:
        """Check whether this rectangle is exactly the whole image."""
        return self.to_tuple() == (0, 0, max_width, max_height)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.width},{self.height}"
