"""iiif-request: region and rotation canonicalization for IIIF image requests."""

__version__ = "0.1.0"
