"""
Core Models Package

Immutable data models shared by the loading and building layers.

All models in this package are frozen dataclasses, so a record or image
handed to the builder cannot be changed while a document is rendered.
"""

from .fields import (
    FieldSpec,
    FieldRecord,
    FIELD_ORDER,
    FIELD_ORDER_VERSION,
    FIELD_KEYS,
    FREE_TEXT_KEY,
)
from .assets import ImageAsset

__all__ = [
    "FieldSpec",
    "FieldRecord",
    "FIELD_ORDER",
    "FIELD_ORDER_VERSION",
    "FIELD_KEYS",
    "FREE_TEXT_KEY",
    "ImageAsset",
]
