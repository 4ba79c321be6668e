"""
Module: builder.controller

Purpose:
    Orchestrate an instruction sheet build.
    Title → Details table → Reference Image grid → finalize

Key Functions:
    - build_document(): Async entry point, returns a RenderedDocument
    - build_document_sync(): Same for synchronous callers
    - export_instruction_sheet(): Build and write the PDF in one call

Key Classes:
    - ExportResult: Written file + build summary
    - DocumentBuildError: Exception for unrecoverable build failures

Dependencies:
    - builder.layout: Cursor, table, grid
    - builder.images: Aspect presets
    - builder.output: PDF rendering

Used By:
    - sheet_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from sheet_toolkit.core.errors import SheetError
from sheet_toolkit.core.models import FIELD_ORDER, FieldRecord, ImageAsset

from .config import SheetConfig
from .images import FALLBACK_ASPECT_LABEL, UnknownAspectRatio
from .images.aspect import get_preset
from .layout import LineOp, RenderContext, RenderedDocument, TextOp, render_image_grid, render_table
from .output.renderer import DEFAULT_FILENAME, render_to_pdf

logger = logging.getLogger(__name__)

DETAILS_HEADING = "Details"
IMAGES_HEADING = "Reference Image"
HEADING_FONT = "Helvetica-Bold"


class DocumentBuildError(SheetError):
    """Unrecoverable error while laying out a document."""
    pass


@dataclass(frozen=True)
class ExportResult:
    """
    Result of writing an instruction sheet (immutable).

    Attributes:
        pdf_path: Path of the written PDF
        page_count: Number of pages
        image_count: Images placed in the grid
        warnings: Recovered problems (skipped images, overflow, fallback ratio)
    """
    pdf_path: Path
    page_count: int
    image_count: int
    warnings: tuple[str, ...]


def resolve_aspect_label(
    record: FieldRecord,
    aspect_label: Optional[str],
    config: SheetConfig,
) -> str:
    """
    Pick the grid aspect label.

    Order: explicit argument, then the record's aspect_ratio, then the
    configured default. The result may still be unknown; validation is
    done by the caller.
    """
    return (aspect_label or record.get("aspect_ratio") or config.default_aspect_label).strip()


async def build_document(
    record: FieldRecord,
    images: Sequence[ImageAsset],
    aspect_label: Optional[str] = None,
    *,
    config: Optional[SheetConfig] = None,
) -> RenderedDocument:
    """
    Lay out an instruction sheet.

    Sequence (fixed):
    1. Centered title
    2. Separator
    3. "Details" heading
    4. Table of all fields in FIELD_ORDER
    5. If there are images: spacing, page break when too little room is
       left, separator, "Reference Image" heading, image grid
    6. Finalize

    A build with no images has no image section at all.

    Args:
        record: Field values
        images: Reference images in placement order
        aspect_label: Grid aspect ratio (defaults to the record's value)
        config: Layout configuration (defaults to SheetConfig())

    Returns:
        RenderedDocument with pages and recovered warnings

    Raises:
        DocumentBuildError: If layout fails for any reason other than a
            bad image or an unknown aspect label

    Example:
        >>> doc = await build_document(record, images, "16:9")
        >>> doc.page_count
        3
    """
    config = config or SheetConfig()
    start_time = time.perf_counter()
    logger.info(f"Building instruction sheet with {len(images)} image(s)")

    try:
        ctx = RenderContext.create(config)
        _draw_title(ctx)
        _draw_separator(ctx)
        _draw_heading(ctx, DETAILS_HEADING)
        render_table(ctx, record, FIELD_ORDER)

        if images:
            label = resolve_aspect_label(record, aspect_label, config)
            try:
                get_preset(label)
            except UnknownAspectRatio as e:
                ctx.warn(f"{e}; using {FALLBACK_ASPECT_LABEL}")
                label = FALLBACK_ASPECT_LABEL

            ctx.cursor.advance(config.section_gap)
            if ctx.cursor.remaining < config.image_section_min_space:
                ctx.cursor.force_break()
            _draw_separator(ctx)
            _draw_heading(ctx, IMAGES_HEADING)
            await render_image_grid(ctx, images, label)

        document = ctx.finalize()
    except SheetError as e:
        raise DocumentBuildError(f"Failed to build document: {e}") from e
    except (ValueError, TypeError, RuntimeError, OSError) as e:
        logger.error(f"Document build failed: {e}")
        raise DocumentBuildError(f"Failed to build document: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Built {document.page_count} page(s) in {elapsed:.2f}s "
        f"with {len(document.warnings)} warning(s)"
    )
    return document


def build_document_sync(
    record: FieldRecord,
    images: Sequence[ImageAsset],
    aspect_label: Optional[str] = None,
    *,
    config: Optional[SheetConfig] = None,
) -> RenderedDocument:
    """
    Synchronous wrapper around build_document().

    Must not be called from inside a running event loop.
    """
    return asyncio.run(build_document(record, images, aspect_label, config=config))


def export_instruction_sheet(
    record: FieldRecord,
    images: Sequence[ImageAsset],
    output_path: Optional[Path] = None,
    *,
    aspect_label: Optional[str] = None,
    config: Optional[SheetConfig] = None,
) -> ExportResult:
    """
    Build an instruction sheet and write it as a PDF.

    Args:
        record: Field values
        images: Reference images
        output_path: PDF path, or a directory to write instruction.pdf into
            (defaults to ./instruction.pdf)
        aspect_label: Grid aspect ratio
        config: Layout configuration

    Returns:
        ExportResult with the written path and summary

    Raises:
        DocumentBuildError: If layout or writing fails; no partial file is
            left behind
    """
    path = Path(output_path) if output_path is not None else Path(DEFAULT_FILENAME)
    if path.is_dir():
        path = path / DEFAULT_FILENAME

    document = build_document_sync(record, images, aspect_label, config=config)

    try:
        render_to_pdf(document, path)
    except OSError as e:
        raise DocumentBuildError(f"Failed to write {path}: {e}") from e

    image_count = sum(len(page.images) for page in document.pages)
    return ExportResult(
        pdf_path=path,
        page_count=document.page_count,
        image_count=image_count,
        warnings=document.warnings,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Fixed document parts
# ─────────────────────────────────────────────────────────────────────────────

def _draw_title(ctx: RenderContext) -> None:
    config = ctx.config
    ctx.draw(TextOp(
        text=config.title,
        x=config.page_width / 2,
        y=ctx.cursor.current_y,
        font_name=HEADING_FONT,
        font_size=config.title_font_size,
        align="center",
    ))
    ctx.cursor.advance(config.section_gap)


def _draw_separator(ctx: RenderContext) -> None:
    config = ctx.config
    y = ctx.cursor.current_y
    ctx.draw(LineOp(config.margin, y, config.page_width - config.margin, y, color=config.border_color))
    ctx.cursor.advance(config.section_gap)


def _draw_heading(ctx: RenderContext, text: str) -> None:
    config = ctx.config
    ctx.draw(TextOp(
        text=text,
        x=config.margin,
        y=ctx.cursor.current_y,
        font_name=HEADING_FONT,
        font_size=config.heading_font_size,
    ))
    ctx.cursor.advance(config.heading_gap)
