"""
Instruction Sheet Core Package

Shared data models, vocabulary and serialization used by the builder and
the command line entry point.
"""

from .errors import SheetError, ImageDecodeError, RecordParseError
from .models import FieldSpec, FieldRecord, ImageAsset, FIELD_ORDER, FIELD_KEYS

__all__ = [
    "SheetError",
    "ImageDecodeError",
    "RecordParseError",
    "FieldSpec",
    "FieldRecord",
    "ImageAsset",
    "FIELD_ORDER",
    "FIELD_KEYS",
]
