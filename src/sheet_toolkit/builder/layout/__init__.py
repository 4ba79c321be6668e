"""
Module: builder.layout

Purpose:
    Page layout for instruction sheets: cursor and page breaks, the
    field table and the reference image grid.

Key Functions:
    - render_table(): Field/Value table
    - render_image_grid(): Cropped image grid (async)
    - wrap_text(): Font-metric word wrapping

Key Classes:
    - PageCursor: Page index + write position
    - RenderContext: Per-build layout state
    - RenderedDocument: Final page sequence

Dependencies:
    - reportlab: Font metrics
    - builder.images: Cropping

Used By:
    - builder.controller: Document orchestration
"""

from .cursor import PageCursor
from .models import (
    RectOp,
    LineOp,
    TextOp,
    ImageOp,
    DrawOp,
    RenderedPage,
    RenderedDocument,
    DrawingSurface,
)
from .context import RenderContext
from .text import text_width, line_height, wrap_text
from .table import render_table
from .grid import GridCell, GridResult, cell_position, render_image_grid

__all__ = [
    # Cursor
    "PageCursor",
    # Models
    "RectOp",
    "LineOp",
    "TextOp",
    "ImageOp",
    "DrawOp",
    "RenderedPage",
    "RenderedDocument",
    "DrawingSurface",
    "RenderContext",
    # Text
    "text_width",
    "line_height",
    "wrap_text",
    # Renderers
    "render_table",
    "GridCell",
    "GridResult",
    "cell_position",
    "render_image_grid",
]
