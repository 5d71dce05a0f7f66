"""Request parameters for IIIF-style image URLs.

Each parameter type parses one path segment of an image request, reports
whether it is valid, and renders its canonical form. All types satisfy
the Parameter protocol.

Key Components:
    - Region: sub-rectangle of the image (full, absolute or percentage)
    - Size: output dimensions of the region
    - Rotation: angle in degrees with optional mirroring
    - Quality, Format: closed token enumerations
    - ValidationError: raised by ``validate()`` on invalid parameters

Example:
    from iiif_request.params import Region, Rotation

    region = Region("pct:50,50,100,100", 101, 101)
    region.canonical_value  # "50,50,51,51"
    region.validate()  # no-op, region is valid

    Rotation("!90.0").canonical_value  # "!90"
"""

from iiif_request.params.exceptions import (
    ParameterError,
    RequestPathError,
    ValidationError,
)
from iiif_request.params.geometry import CanonicalRegion, RegionGeometry
from iiif_request.params.protocol import Parameter
from iiif_request.params.region import Region, RegionMode
from iiif_request.params.rotation import Rotation
from iiif_request.params.size import Size, SizeMode
from iiif_request.params.tokens import Format, FormatName, Quality, QualityName

__all__ = [
    "CanonicalRegion",
    "Format",
    "FormatName",
    "Parameter",
    "ParameterError",
    "Quality",
    "QualityName",
    "Region",
    "RegionGeometry",
    "RegionMode",
    "RequestPathError",
    "Rotation",
    "Size",
    "SizeMode",
    "ValidationError",
]
