"""
Module: builder.images.aspect

Purpose:
    Catalog of the supported output aspect ratios and the cell size each
    one gives in the image grid.

Key Functions:
    - dimensions_for(): Strict lookup, raises on unknown labels
    - resolve_dimensions(): Lookup with the 4:3 fallback policy

Key Constants:
    - ASPECT_PRESETS: Label -> AspectPreset
    - FALLBACK_ASPECT_LABEL: "4:3"

Used By:
    - builder.layout.grid: Cell dimensions
    - builder.controller: Aspect label resolution
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from sheet_toolkit.core.errors import SheetError

logger = logging.getLogger(__name__)


class UnknownAspectRatio(SheetError, KeyError):
    """Aspect ratio label is not one of the supported presets."""

    def __init__(self, label: str) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"Unknown aspect ratio: {self.label!r}"


@dataclass(frozen=True, slots=True)
class AspectPreset:
    """
    Named width:height proportion.

    Attributes:
        label: Label as shown to users, e.g. "16:9"
        width: Width part of the proportion
        height: Height part of the proportion
    """

    label: str
    width: int
    height: int

    @property
    def ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def fit(self, max_dimension: float) -> Tuple[float, float]:
        """
        Size with the longer side equal to max_dimension.

        Returns:
            (width, height) tuple
        """
        if self.width >= self.height:
            return max_dimension, max_dimension * self.height / self.width
        return max_dimension * self.width / self.height, max_dimension


ASPECT_PRESETS: Mapping[str, AspectPreset] = MappingProxyType({
    preset.label: preset
    for preset in (
        AspectPreset("1:1", 1, 1),
        AspectPreset("3:4", 3, 4),
        AspectPreset("4:3", 4, 3),
        AspectPreset("9:16", 9, 16),
        AspectPreset("16:9", 16, 9),
        AspectPreset("21:9", 21, 9),
    )
})

FALLBACK_ASPECT_LABEL = "4:3"


def get_preset(label: str) -> AspectPreset:
    """
    Look up a preset by label (surrounding whitespace ignored).

    Raises:
        UnknownAspectRatio: If label is not supported
    """
    key = label.strip() if isinstance(label, str) else label
    try:
        return ASPECT_PRESETS[key]
    except (KeyError, TypeError):
        raise UnknownAspectRatio(label) from None


def dimensions_for(label: str, max_dimension: float) -> Tuple[float, float]:
    """
    Cell size for an aspect label.

    Args:
        label: One of ASPECT_PRESETS
        max_dimension: Length of the longer side

    Returns:
        (width, height) with max(width, height) == max_dimension

    Raises:
        UnknownAspectRatio: If label is not supported

    Example:
        >>> dimensions_for("16:9", 80)
        (80, 45.0)
    """
    return get_preset(label).fit(max_dimension)


def resolve_dimensions(label: str, max_dimension: float) -> Tuple[float, float]:
    """
    Cell size for an aspect label, falling back to 4:3 for unknown labels.

    Never raises for a bad label; the fallback is logged.
    """
    try:
        return dimensions_for(label, max_dimension)
    except UnknownAspectRatio as e:
        logger.warning(f"{e}; using {FALLBACK_ASPECT_LABEL}")
        return dimensions_for(FALLBACK_ASPECT_LABEL, max_dimension)
