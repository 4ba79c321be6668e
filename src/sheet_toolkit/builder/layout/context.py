"""
Module: builder.layout.context

Purpose:
    Bundle the mutable state of one build (cursor, surface, warnings) so
    it is passed explicitly to every renderer instead of living in module
    globals. Two builds never share a RenderContext.

Key Classes:
    - RenderContext: Per-build layout state

Used By:
    - builder.layout.table
    - builder.layout.grid
    - builder.controller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from sheet_toolkit.builder.config import SheetConfig

from .cursor import PageCursor
from .models import DrawOp, DrawingSurface, RenderedDocument

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """
    Mutable layout state for a single build.

    Attributes:
        config: Sheet configuration
        surface: Page accumulator
        cursor: Write position, wired to open a surface page on every break
        warnings: Recovered problems reported in the final document
    """

    config: SheetConfig
    surface: DrawingSurface
    cursor: PageCursor
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def create(cls, config: SheetConfig) -> RenderContext:
        """Fresh context positioned at the top of page 1."""
        surface = DrawingSurface(config.page_width, config.page_height)
        cursor = PageCursor(
            config.page_width,
            config.page_height,
            config.margin,
            on_break=surface.start_page,
        )
        return cls(config=config, surface=surface, cursor=cursor)

    def draw(self, op: DrawOp) -> None:
        """Append a draw operation to the current page."""
        self.surface.draw(op)

    def warn(self, message: str) -> None:
        """Log a recovered problem and keep it for the document."""
        logger.warning(message)
        self.warnings.append(message)

    def finalize(self) -> RenderedDocument:
        """Freeze the pages drawn so far."""
        return self.surface.finalize(self.warnings)
