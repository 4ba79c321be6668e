"""
Module: fields

Purpose:
    Provides the FieldRecord dataclass and the shared field-order constant.
    FIELD_ORDER is the one place the 16 instruction fields and their
    printed labels are declared; the record, the vocabulary and the table
    renderer all iterate it rather than keeping their own lists.

Key Classes:
    - FieldSpec: Key + printed label for one field
    - FieldRecord: Immutable mapping of every field key to its value

Key Constants:
    - FIELD_ORDER: Tuple of FieldSpec in presentation order
    - FIELD_ORDER_VERSION: Bumped whenever FIELD_ORDER changes
    - FIELD_KEYS: Keys only, same order

Dependencies:
    - dataclasses (std)
    - types.MappingProxyType (std)

Used By:
    - core.vocabulary
    - core.utils.serialization
    - builder.layout.table
    - builder.controller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """
    One row of the instruction table.

    Attributes:
        key: Record key (snake_case, as returned by the analysis service)
        label: Human-readable label printed in the table
    """

    key: str
    label: str


FIELD_ORDER_VERSION = 1

# Presentation order is fixed: purpose before subject before situation, etc.
FIELD_ORDER: tuple[FieldSpec, ...] = (
    FieldSpec("purpose", "Purpose"),
    FieldSpec("subject", "Subject"),
    FieldSpec("situation", "Situation"),
    FieldSpec("age_range", "Age Range"),
    FieldSpec("gender", "Gender"),
    FieldSpec("nationality", "Nationality"),
    FieldSpec("style", "Style"),
    FieldSpec("shot_distance", "Shot Distance"),
    FieldSpec("camera_angle", "Camera Angle"),
    FieldSpec("lighting_color", "Lighting/Color"),
    FieldSpec("background", "Background"),
    FieldSpec("city", "City"),
    FieldSpec("location_type", "Location Type"),
    FieldSpec("output_format", "Output Format"),
    FieldSpec("aspect_ratio", "Aspect Ratio"),
    FieldSpec("additional_words", "Additional Words"),
)

FIELD_KEYS: tuple[str, ...] = tuple(spec.key for spec in FIELD_ORDER)

# The only free-text field; every other field is picked from a vocabulary.
FREE_TEXT_KEY = "additional_words"


def _coerce(value: Any) -> str:
    """Normalise a raw value to a string ("" for None)."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class FieldRecord:
    """
    Structured description driving the document body (immutable).

    Every key in FIELD_KEYS has exactly one value. Missing keys default
    to the empty string; unknown keys are dropped on construction.

    Attributes:
        values: Read-only mapping of field key to string value

    Example:
        >>> record = FieldRecord.from_mapping({"purpose": "SNS Post"})
        >>> record["purpose"]
        'SNS Post'
        >>> record["city"]
        ''
    """

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Fill defaults and freeze the value mapping."""
        unknown = [key for key in self.values if key not in FIELD_KEYS]
        if unknown:
            logger.debug(f"Ignoring unknown record keys: {sorted(unknown)}")
        complete = {key: _coerce(self.values.get(key, "")) for key in FIELD_KEYS}
        object.__setattr__(self, "values", MappingProxyType(complete))

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None, **overrides: Any) -> FieldRecord:
        """
        Build a record from any mapping, with keyword overrides.

        Args:
            data: Mapping of field key to value (may be partial)
            **overrides: Individual field values taking precedence over data

        Returns:
            FieldRecord with every field populated
        """
        merged: dict[str, Any] = dict(data or {})
        merged.update(overrides)
        return cls(values=merged)

    @classmethod
    def empty(cls) -> FieldRecord:
        """Record with every field set to the empty string."""
        return cls()

    # ─────────────────────────────────────────────────────────────────────────
    # Access
    # ─────────────────────────────────────────────────────────────────────────

    def __getitem__(self, key: str) -> str:
        if key not in FIELD_KEYS:
            raise KeyError(f"Unknown field: {key!r}")
        return self.values[key]

    def get(self, key: str, default: str = "") -> str:
        """Value for key, or default when the key is not a known field."""
        if key not in FIELD_KEYS:
            return default
        return self.values[key]

    def rows(self, fields: tuple[FieldSpec, ...] = FIELD_ORDER) -> Iterator[tuple[str, str, str]]:
        """
        Iterate (label, key, value) triples in presentation order.

        Args:
            fields: Field order to follow (defaults to FIELD_ORDER)
        """
        for spec in fields:
            yield spec.label, spec.key, self.get(spec.key)

    def replace(self, **changes: Any) -> FieldRecord:
        """Return a new record with the given fields changed."""
        return FieldRecord.from_mapping(self.values, **changes)

    def to_dict(self) -> dict[str, str]:
        """Plain dict in FIELD_ORDER, suitable for JSON."""
        return {key: self.values[key] for key in FIELD_KEYS}

    def __len__(self) -> int:
        return len(FIELD_KEYS)
