"""Image response descriptor: an identifier plus its five request parameters.

The response composes Region, Size, Rotation, Quality and Format into a
single normalized description of what an image request resolves to. It
never touches pixel data; it only decides which rectangle, scale, angle
and encoding the request asks for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from iiif_request.config import settings
from iiif_request.params import (
    Format,
    Parameter,
    Quality,
    Region,
    RequestPathError,
    Rotation,
    Size,
)
from iiif_request.utils.logging import get_logger

PATH_SEGMENTS = 4


@dataclass(frozen=True)
class ImageResponse:
    """A request descriptor holding an image identifier and its parameters.

    Attributes:
        id: Image identifier.
        region: Region of the image requested.
        size: Output size of the region.
        rotation: Rotation and mirroring.
        quality: Requested quality.
        format: Requested output format.
    """

    id: str
    region: Region
    size: Size
    rotation: Rotation
    quality: Quality
    format: Format

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        id: str,
        *,
        region: str = "full",
        size: str = "full",
        rotation: str = "0",
        quality: str | None = None,
        format: str | None = None,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> ImageResponse:
        """Build a response from raw parameter strings and the image extent.

        Args:
            id: Image identifier.
            region: Raw region segment.
            size: Raw size segment.
            rotation: Raw rotation segment.
            quality: Raw quality token. Defaults to settings.DEFAULT_QUALITY.
            format: Raw format token. Defaults to settings.DEFAULT_FORMAT.
            max_width: Image width in pixels.
            max_height: Image height in pixels.

        Returns:
            ImageResponse with every parameter constructed. Construction
            never fails; check ``is_valid`` or call ``validate()``.
        """
        region_param = Region(region, max_width, max_height)
        region_width, region_height = _region_extent(region_param)

        response = cls(
            id=id,
            region=region_param,
            size=Size(size, region_width, region_height),
            rotation=Rotation(rotation),
            quality=Quality(quality or settings.DEFAULT_QUALITY),
            format=Format(format or settings.DEFAULT_FORMAT),
        )
        get_logger(__name__).debug(
            "Resolved image request",
            id=id,
            canonical_path=response.canonical_path,
            valid=response.is_valid,
        )
        return response

    @classmethod
    def parse(
        cls,
        id: str,
        path: str,
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> ImageResponse:
        """Build a response from a ``region/size/rotation/quality.format`` path.

        Raises:
            RequestPathError: If the path does not have four segments or the
                last segment is not ``quality.format``.
        """
        segments = path.strip("/").split("/")
        if len(segments) != PATH_SEGMENTS:
            raise RequestPathError(
                f"Expected {PATH_SEGMENTS} path segments, got {len(segments)}",
                path,
            )
        region, size, rotation, name = segments
        quality, dot, format = name.partition(".")
        if not dot:
            raise RequestPathError("Last segment must be quality.format", path)

        return cls.create(
            id,
            region=region,
            size=size,
            rotation=rotation,
            quality=quality,
            format=format,
            max_width=max_width,
            max_height=max_height,
        )

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """The five parameters in path order."""
        return (self.region, self.size, self.rotation, self.quality, self.format)

    @property
    def is_valid(self) -> bool:
        return all(param.is_valid for param in self.parameters)

    @property
    def invalid_parameters(self) -> list[Parameter]:
        return [param for param in self.parameters if not param.is_valid]

    def validate(self) -> None:
        """Raise the first parameter's ValidationError, if any parameter is invalid."""
        for param in self.parameters:
            param.validate()

    @property
    def canonical_path(self) -> str:
        """``{id}/{region}/{size}/{rotation}/{quality}.{format}`` in canonical form."""
        return (
            f"{self.id}/{self.region.canonical_value}/{self.size.canonical_value}/"
            f"{self.rotation.canonical_value}/"
            f"{self.quality.canonical_value}.{self.format.canonical_value}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "valid": self.is_valid,
            "canonical_path": self.canonical_path,
            "parameters": {
                param.kind: {
                    "raw_value": param.raw_value,
                    "canonical_value": param.canonical_value,
                    "valid": param.is_valid,
                    "reason": param.invalid_reason(),
                }
                for param in self.parameters
            },
        }


def _region_extent(region: Region) -> tuple[int | None, int | None]:
    """Width and height of the canonical region, used as the size context."""
    canonical = region.canonical_region
    if canonical is None:
        return None, None
    return canonical.width, canonical.height
