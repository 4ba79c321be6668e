"""
Module: core.errors

Purpose:
    Exception types shared by the loading and building layers.

Key Classes:
    - SheetError: Base class for all toolkit errors
    - ImageDecodeError: A single image could not be decoded or cropped
    - RecordParseError: A record payload could not be parsed

Used By:
    - core.models.assets
    - core.utils.serialization
    - builder.images.cropper
    - builder.controller
"""

from __future__ import annotations


class SheetError(Exception):
    """Base class for instruction sheet errors."""
    pass


class ImageDecodeError(SheetError):
    """
    Image bytes could not be decoded (corrupt, truncated, unsupported).

    Recovered per image by the grid renderer: the cell is left blank.
    """
    pass


class RecordParseError(SheetError, ValueError):
    """Record payload is not valid JSON or not a JSON object."""
    pass
