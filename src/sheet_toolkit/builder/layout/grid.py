"""
Module: builder.layout.grid

Purpose:
    Tile cropped reference images into a fixed-column grid, a fixed
    number of images per page.

Key Functions:
    - cell_position(): Grid cell geometry for an image index (pure)
    - render_image_grid(): Crop and place every image

Algorithm:
    For image i (0-based):
    1. If i > 0 and i % images_per_page == 0, force a page break,
       whatever space is left on the page
    2. row = (i % images_per_page) // columns, col = i % columns
    3. x = start_x + col * (w + spacing), y = section_top + row * (h + spacing)
       with start_x centering the whole grid on the page
    4. Crop (awaited, one image at a time) and place; a crop failure
       leaves the cell blank and later cells keep their positions

Dependencies:
    - builder.images: Aspect dimensions, cropping

Used By:
    - builder.controller: Reference Image section
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from sheet_toolkit.core.errors import ImageDecodeError
from sheet_toolkit.core.models import ImageAsset
from sheet_toolkit.builder.images import crop_to_aspect, resolve_dimensions

from .context import RenderContext
from .models import ImageOp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridCell:
    """
    Position of one image in the grid.

    Attributes:
        index: Image index in the caller's list
        row: Row within the grid page
        col: Column within the grid page
        x: Left edge
        y_offset: Offset of the top edge from the grid page's section top
    """
    index: int
    row: int
    col: int
    x: float
    y_offset: float


@dataclass(frozen=True)
class GridResult:
    """
    Outcome of rendering a grid.

    Attributes:
        placed: Indices of images drawn
        skipped: Indices of images that failed to crop (blank cells)
        pages: Page numbers holding grid cells
    """
    placed: Tuple[int, ...]
    skipped: Tuple[int, ...]
    pages: Tuple[int, ...]


def grid_start_x(page_width: float, image_width: float, spacing: float, columns: int) -> float:
    """Left edge of a grid centered on the page."""
    total = image_width * columns + spacing * (columns - 1)
    return (page_width - total) / 2


def cell_position(
    index: int,
    image_width: float,
    image_height: float,
    *,
    page_width: float,
    spacing: float,
    columns: int = 2,
    per_page: int = 4,
) -> GridCell:
    """
    Geometry of grid cell for an image index.

    Depends only on the index, never on which other images were placed.

    Example:
        >>> cell_position(5, 80, 45, page_width=210, spacing=10)
        GridCell(index=5, row=0, col=1, x=110.0, y_offset=0.0)
    """
    slot = index % per_page
    row = slot // columns
    col = index % columns
    x = grid_start_x(page_width, image_width, spacing, columns) + col * (image_width + spacing)
    return GridCell(index=index, row=row, col=col, x=x, y_offset=row * (image_height + spacing))


async def render_image_grid(
    ctx: RenderContext,
    images: Sequence[ImageAsset],
    aspect_label: str,
) -> GridResult:
    """
    Crop and place images in the grid starting at the cursor position.

    Crops are awaited sequentially in index order. The cursor ends
    below the lowest row used on the last grid page.

    Args:
        ctx: Render context
        images: Images in placement order
        aspect_label: Target aspect label (unknown labels fall back to 4:3)

    Returns:
        GridResult listing placed and skipped indices
    """
    config = ctx.config
    cursor = ctx.cursor
    if not images:
        return GridResult(placed=(), skipped=(), pages=())

    width, height = resolve_dimensions(aspect_label, config.image_max_dimension)
    columns = config.grid_columns
    per_page = config.images_per_page

    placed: list[int] = []
    skipped: list[int] = []
    pages: list[int] = []
    section_top = cursor.current_y
    lowest = section_top

    for index, image in enumerate(images):
        if index > 0 and index % per_page == 0:
            cursor.force_break()
            section_top = cursor.current_y
            lowest = section_top

        cell = cell_position(
            index, width, height,
            page_width=config.page_width,
            spacing=config.image_spacing,
            columns=columns,
            per_page=per_page,
        )
        y = section_top + cell.y_offset
        lowest = max(lowest, y + height)
        if cursor.page_number not in pages:
            pages.append(cursor.page_number)

        if y + height > cursor.usable_bottom:
            logger.warning(
                f"Image {index} cell overruns page {cursor.page_number}: "
                f"bottom {y + height:.1f} > {cursor.usable_bottom:.1f}"
            )

        try:
            cropped = await crop_to_aspect(
                image, width, height,
                oversample=config.crop_oversample,
                quality=config.jpeg_quality,
            )
        except ImageDecodeError as e:
            ctx.warn(f"Skipping image {index} ({image.label}): {e}")
            skipped.append(index)
            continue

        ctx.draw(ImageOp(
            data=cropped.data,
            x=cell.x,
            y=y,
            width=width,
            height=height,
            grid_index=index,
            row=cell.row,
            col=cell.col,
        ))
        placed.append(index)

    cursor.advance(lowest - cursor.current_y)
    logger.info(
        f"Image grid: {len(placed)} placed, {len(skipped)} skipped "
        f"across {len(pages)} page(s)"
    )
    return GridResult(placed=tuple(placed), skipped=tuple(skipped), pages=tuple(pages))
