"""
Module: builder.images

Purpose:
    Aspect ratio catalog and center-cropping for grid images.

Key Functions:
    - dimensions_for(): Cell size for an aspect label
    - resolve_dimensions(): Same, with the 4:3 fallback
    - crop_to_aspect(): Async center crop of one image

Dependencies:
    - PIL: Image manipulation

Used By:
    - builder.layout.grid: Image grid rendering
    - builder.controller: Aspect label resolution
"""

from .aspect import (
    AspectPreset,
    ASPECT_PRESETS,
    FALLBACK_ASPECT_LABEL,
    UnknownAspectRatio,
    dimensions_for,
    resolve_dimensions,
)
from .cropper import CroppedImage, center_crop_box, crop_to_aspect

__all__ = [
    "AspectPreset",
    "ASPECT_PRESETS",
    "FALLBACK_ASPECT_LABEL",
    "UnknownAspectRatio",
    "dimensions_for",
    "resolve_dimensions",
    "CroppedImage",
    "center_crop_box",
    "crop_to_aspect",
]
