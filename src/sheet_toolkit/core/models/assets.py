"""
Module: assets

Purpose:
    Provides the ImageAsset dataclass - an encoded reference image with its
    pixel size. Assets are owned by the caller; the builder only reads the
    bytes and produces cropped copies of its own.

Key Functions:
    - ImageAsset.from_bytes(data): Read size from encoded bytes
    - ImageAsset.from_path(path): Load a PNG/JPEG file
    - ImageAsset.from_data_url(url): Decode a base64 "data:" URL

Dependencies:
    - PIL: Header parsing for width/height
    - base64, io (std)

Used By:
    - builder.images.cropper
    - builder.layout.grid
    - cli
"""

from __future__ import annotations

import base64
import binascii
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..errors import ImageDecodeError


@dataclass(frozen=True)
class ImageAsset:
    """
    Encoded source image with known pixel dimensions (immutable).

    Attributes:
        data: Encoded image bytes (PNG, JPEG, ...)
        width: Pixel width of the decoded image
        height: Pixel height of the decoded image
        name: Optional display name (file name), used in log messages

    Invariants:
        - width > 0
        - height > 0

    Example:
        >>> asset = ImageAsset.from_path(Path("ref.png"))
        >>> asset.aspect
        1.5
    """

    data: bytes
    width: int
    height: int
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive: {self.width}x{self.height}")

    @property
    def aspect(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def label(self) -> str:
        """Name for log messages."""
        return self.name or f"<{len(self.data)} bytes>"

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_bytes(cls, data: bytes, name: Optional[str] = None) -> ImageAsset:
        """
        Create an asset from encoded bytes.

        Only the image header is read here; full decoding happens when
        the builder crops the image.

        Args:
            data: Encoded image bytes
            name: Optional display name

        Returns:
            ImageAsset with width/height from the header

        Raises:
            ImageDecodeError: If the header cannot be identified
        """
        try:
            with Image.open(io.BytesIO(data)) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise ImageDecodeError(f"Cannot identify image {name or ''}: {e}") from e
        return cls(data=data, width=width, height=height, name=name)

    @classmethod
    def from_path(cls, path: Path) -> ImageAsset:
        """Load an asset from a file on disk."""
        path = Path(path)
        return cls.from_bytes(path.read_bytes(), name=path.name)

    @classmethod
    def from_data_url(cls, url: str, name: Optional[str] = None) -> ImageAsset:
        """
        Create an asset from a base64 ``data:`` URL.

        Example:
            >>> ImageAsset.from_data_url("data:image/png;base64,iVBOR...")

        Raises:
            ImageDecodeError: If the URL is not base64 data or not an image
        """
        header, sep, payload = url.partition(",")
        if not sep or not header.startswith("data:") or ";base64" not in header:
            raise ImageDecodeError(f"Not a base64 data URL: {url[:40]!r}")
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageDecodeError(f"Invalid base64 payload: {e}") from e
        return cls.from_bytes(data, name=name)
