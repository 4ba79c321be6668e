"""
Module: builder.output.renderer

Purpose:
    Render a RenderedDocument to PDF using ReportLab.
    Each RenderedPage becomes one PDF page; draw operations are replayed
    in order, converting top-down millimetres to bottom-up points.

Key Functions:
    - render_to_pdf_bytes(): Document -> PDF bytes
    - render_to_pdf(): Document -> PDF file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: RenderedDocument and draw operations

Used By:
    - builder.controller: export_instruction_sheet()
    - cli
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from sheet_toolkit.builder.layout.models import (
    DrawOp,
    ImageOp,
    LineOp,
    RectOp,
    RenderedDocument,
    RenderedPage,
    TextOp,
)

logger = logging.getLogger(__name__)

# Constants
DEFAULT_FILENAME = "instruction.pdf"
LINE_WIDTH_PT = 0.57  # 0.2 mm hairline


def render_to_pdf_bytes(document: RenderedDocument, *, title: str = "Instruction Sheet") -> bytes:
    """
    Serialize a document to PDF bytes.

    Args:
        document: Finished document
        title: PDF metadata title

    Returns:
        PDF file content
    """
    if document.page_count == 0:
        logger.warning("Empty document, creating empty PDF")

    buf = io.BytesIO()
    first = document.pages[0] if document.pages else None
    pagesize = (first.width * mm, first.height * mm) if first else (210 * mm, 297 * mm)

    c = canvas.Canvas(buf, pagesize=pagesize)
    c.setTitle(title)

    for page in document.pages:
        c.setPageSize((page.width * mm, page.height * mm))
        _render_page(c, page)
        c.showPage()

    c.save()
    return buf.getvalue()


def render_to_pdf(document: RenderedDocument, output_path: Path) -> Path:
    """
    Write a document to a PDF file.

    The PDF is rendered in memory first so a rendering failure never
    leaves a partial file on disk.

    Args:
        document: Finished document
        output_path: Path to write

    Returns:
        The written path

    Raises:
        OSError: If the file cannot be written

    Example:
        >>> render_to_pdf(doc, Path("out/instruction.pdf"))
    """
    output_path = Path(output_path)
    data = render_to_pdf_bytes(document)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        output_path.write_bytes(data)
    except OSError:
        output_path.unlink(missing_ok=True)
        raise

    logger.info(f"Rendered {document.page_count} pages to {output_path}")
    return output_path


def _render_page(c: canvas.Canvas, page: RenderedPage) -> None:
    """Replay every draw operation of one page."""
    for op in page.ops:
        _draw_op(c, op, page.height)


def _draw_op(c: canvas.Canvas, op: DrawOp, page_height: float) -> None:
    """Draw a single operation."""
    c.saveState()
    c.setLineWidth(LINE_WIDTH_PT)

    if isinstance(op, RectOp):
        if op.fill is not None:
            c.setFillColorRGB(*_rgb(op.fill))
        if op.stroke is not None:
            c.setStrokeColorRGB(*_rgb(op.stroke))
        c.rect(
            op.x * mm,
            _flip(op.y + op.height, page_height),
            op.width * mm,
            op.height * mm,
            stroke=int(op.stroke is not None),
            fill=int(op.fill is not None),
        )

    elif isinstance(op, LineOp):
        c.setStrokeColorRGB(*_rgb(op.color))
        c.line(op.x1 * mm, _flip(op.y1, page_height), op.x2 * mm, _flip(op.y2, page_height))

    elif isinstance(op, TextOp):
        c.setFont(op.font_name, op.font_size)
        c.setFillColorRGB(*_rgb(op.color))
        if op.align == "center":
            c.drawCentredString(op.x * mm, _flip(op.y, page_height), op.text)
        else:
            c.drawString(op.x * mm, _flip(op.y, page_height), op.text)

    elif isinstance(op, ImageOp):
        c.drawImage(
            ImageReader(io.BytesIO(op.data)),
            op.x * mm,
            _flip(op.y + op.height, page_height),
            width=op.width * mm,
            height=op.height * mm,
        )

    else:
        c.restoreState()
        raise TypeError(f"Unsupported draw operation: {type(op).__name__}")

    c.restoreState()


def _rgb(color: tuple[int, int, int]) -> tuple[float, float, float]:
    """0-255 RGB to ReportLab's 0-1 floats."""
    return tuple(channel / 255.0 for channel in color)  # type: ignore[return-value]


def _flip(y_mm_top: float, page_height_mm: float) -> float:
    """
    Convert a top-down y in mm to a bottom-up y in points.

    Args:
        y_mm_top: Distance from the page top in mm
        page_height_mm: Page height in mm

    Returns:
        Distance from the page bottom in points
    """
    return (page_height_mm - y_mm_top) * mm
