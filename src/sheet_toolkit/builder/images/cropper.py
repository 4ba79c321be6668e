"""
Module: builder.images.cropper

Purpose:
    Center-crop reference images to the grid's aspect ratio. The crop is
    resampled at a fixed oversampling factor so images stay sharp when the
    page is printed, then re-encoded as JPEG.

Key Functions:
    - center_crop_box(): Source region for a center crop (pure math)
    - crop_to_aspect(): Async decode + crop + encode of one image

Key Classes:
    - CroppedImage: Encoded crop with its source box

Dependencies:
    - PIL: Decode, resample, JPEG encode
    - asyncio (std): Decode runs on a worker thread

Used By:
    - builder.layout.grid: One crop per grid cell
"""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from sheet_toolkit.core.errors import ImageDecodeError
from sheet_toolkit.core.models import ImageAsset

logger = logging.getLogger(__name__)

# Constants
DEFAULT_OVERSAMPLE = 10
DEFAULT_JPEG_QUALITY = 95

Box = Tuple[float, float, float, float]


@dataclass(frozen=True)
class CroppedImage:
    """
    Center-cropped image ready for placement (immutable).

    Attributes:
        data: JPEG bytes
        pixel_width: Output buffer width in pixels
        pixel_height: Output buffer height in pixels
        source_box: (left, top, right, bottom) region of the source image used
    """

    data: bytes
    pixel_width: int
    pixel_height: int
    source_box: Box

    @property
    def aspect(self) -> float:
        """Output width divided by output height."""
        return self.pixel_width / self.pixel_height


def center_crop_box(
    source_width: float,
    source_height: float,
    target_width: float,
    target_height: float,
) -> Box:
    """
    Largest centered region of the source matching the target aspect.

    A source wider than the target keeps its full height and loses equal
    strips left and right; otherwise it keeps its full width and loses
    equal strips top and bottom.

    Args:
        source_width: Source width in pixels
        source_height: Source height in pixels
        target_width: Target width (any unit)
        target_height: Target height (same unit)

    Returns:
        (left, top, right, bottom) in source pixels, possibly fractional

    Example:
        >>> center_crop_box(400, 100, 1, 1)
        (150.0, 0.0, 250.0, 100.0)
    """
    if target_width <= 0 or target_height <= 0:
        raise ValueError(f"Target size must be positive: {target_width}x{target_height}")

    target_aspect = target_width / target_height
    source_aspect = source_width / source_height

    if source_aspect > target_aspect:
        crop_width = source_height * target_aspect
        left = (source_width - crop_width) / 2
        return (left, 0.0, left + crop_width, float(source_height))

    crop_height = source_width / target_aspect
    top = (source_height - crop_height) / 2
    return (0.0, top, float(source_width), top + crop_height)


def _crop_sync(
    image: ImageAsset,
    target_width: float,
    target_height: float,
    oversample: int,
    quality: int,
) -> CroppedImage:
    """Blocking decode/crop/encode; see crop_to_aspect()."""
    try:
        with Image.open(io.BytesIO(image.data)) as src:
            src.load()
            rgb = src.convert("RGB")
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Failed to decode image {image.label}: {e}") from e

    # Decoded size is authoritative if the asset's recorded size disagrees
    if rgb.size != (image.width, image.height):
        logger.debug(
            f"Image {image.label} decoded as {rgb.size[0]}x{rgb.size[1]}, "
            f"asset says {image.width}x{image.height}"
        )

    box = center_crop_box(rgb.width, rgb.height, target_width, target_height)
    out_size = (
        max(1, round(target_width * oversample)),
        max(1, round(target_height * oversample)),
    )
    cropped = rgb.resize(out_size, resample=Image.Resampling.LANCZOS, box=box)

    buf = io.BytesIO()
    cropped.save(buf, format="JPEG", quality=quality)

    return CroppedImage(
        data=buf.getvalue(),
        pixel_width=out_size[0],
        pixel_height=out_size[1],
        source_box=box,
    )


async def crop_to_aspect(
    image: ImageAsset,
    target_width: float,
    target_height: float,
    *,
    oversample: int = DEFAULT_OVERSAMPLE,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> CroppedImage:
    """
    Center-crop an image to target_width:target_height.

    The output buffer is target size x oversample pixels, so an 80x45 mm
    cell becomes an 800x450 px JPEG.

    Args:
        image: Source asset (not modified)
        target_width: Cell width in layout units
        target_height: Cell height in layout units
        oversample: Output pixels per layout unit
        quality: JPEG quality

    Returns:
        CroppedImage whose aspect matches the target

    Raises:
        ImageDecodeError: If the image bytes cannot be decoded

    Example:
        >>> cropped = await crop_to_aspect(asset, 80, 45)
        >>> (cropped.pixel_width, cropped.pixel_height)
        (800, 450)
    """
    return await asyncio.to_thread(
        _crop_sync, image, target_width, target_height, oversample, quality
    )
