"""
Module: builder.layout.models

Purpose:
    Data models for rendered pages. Draw operations are immutable
    dataclasses in top-down page coordinates (mm from the top-left
    corner); the PDF renderer flips them to bottom-up points.

Key Classes:
    - RectOp, LineOp, TextOp, ImageOp: Draw operations
    - RenderedPage: Page size + ordered draw operations
    - RenderedDocument: Final output with warnings
    - DrawingSurface: Mutable page accumulator used during one build

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.table, builder.layout.grid: Emit draw operations
    - builder.controller: Creates the surface, finalizes the document
    - builder.output.renderer: Serializes the document
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

RGB = Tuple[int, int, int]


# ─────────────────────────────────────────────────────────────────────────────
# Draw Operations
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RectOp:
    """
    Rectangle with optional fill and stroke.

    Attributes:
        x, y: Top-left corner
        width, height: Size
        fill: Fill color, None for no fill
        stroke: Stroke color, None for no stroke
    """
    x: float
    y: float
    width: float
    height: float
    fill: Optional[RGB] = None
    stroke: Optional[RGB] = None


@dataclass(frozen=True)
class LineOp:
    """Straight line from (x1, y1) to (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB = (0, 0, 0)


@dataclass(frozen=True)
class TextOp:
    """
    Single line of text.

    Attributes:
        text: Text to draw (no newlines)
        x: Anchor x (left edge, or center when align="center")
        y: Baseline y
        font_name: Standard PDF font name, e.g. "Helvetica-Bold"
        font_size: Size in points
        color: Fill color
        align: "left" or "center"
    """
    text: str
    x: float
    y: float
    font_name: str = "Helvetica"
    font_size: float = 10.0
    color: RGB = (0, 0, 0)
    align: str = "left"


@dataclass(frozen=True)
class ImageOp:
    """
    JPEG image placed in a grid cell.

    Attributes:
        data: Encoded image bytes
        x, y: Top-left corner
        width, height: Placed size
        grid_index: Index of the image in the caller's list
        row, col: Cell position within its grid page
    """
    data: bytes = field(repr=False)
    x: float
    y: float
    width: float
    height: float
    grid_index: int = 0
    row: int = 0
    col: int = 0


DrawOp = Union[RectOp, LineOp, TextOp, ImageOp]


# ─────────────────────────────────────────────────────────────────────────────
# Pages & Document
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RenderedPage:
    """
    One finished page.

    Attributes:
        number: 1-based page number
        width: Page width
        height: Page height
        ops: Draw operations in paint order
    """

    number: int
    width: float
    height: float
    ops: tuple[DrawOp, ...]

    def ops_of(self, kind: type) -> list:
        """Draw operations of one type, in paint order."""
        return [op for op in self.ops if isinstance(op, kind)]

    @property
    def images(self) -> list[ImageOp]:
        """Image operations on this page."""
        return self.ops_of(ImageOp)

    @property
    def texts(self) -> list[str]:
        """Text of every text operation on this page."""
        return [op.text for op in self.ops_of(TextOp)]


@dataclass(frozen=True)
class RenderedDocument:
    """
    Final build output (immutable).

    Attributes:
        pages: Pages in order
        warnings: Non-fatal problems recovered during the build

    Example:
        >>> doc.page_count
        3
        >>> doc.image_pages
        (page2, page3)
    """

    pages: tuple[RenderedPage, ...]
    warnings: tuple[str, ...] = ()

    @property
    def page_count(self) -> int:
        """Number of pages."""
        return len(self.pages)

    @property
    def image_pages(self) -> tuple[RenderedPage, ...]:
        """Pages holding at least one image."""
        return tuple(page for page in self.pages if page.images)

    @property
    def texts(self) -> list[str]:
        """All text in document order."""
        return [text for page in self.pages for text in page.texts]


class DrawingSurface:
    """
    Mutable page accumulator for a single build.

    Starts with one open page. PageCursor calls start_page() on every
    page break; renderers call draw() to append to the open page.
    """

    def __init__(self, page_width: float, page_height: float) -> None:
        self.page_width = page_width
        self.page_height = page_height
        self._pages: List[List[DrawOp]] = [[]]
        self._finalized = False

    @property
    def page_number(self) -> int:
        """1-based number of the open page."""
        return len(self._pages)

    def start_page(self) -> None:
        """Open a new empty page."""
        self._check_open()
        self._pages.append([])

    def draw(self, op: DrawOp) -> None:
        """Append an operation to the open page."""
        self._check_open()
        self._pages[-1].append(op)

    def finalize(self, warnings: Optional[List[str]] = None) -> RenderedDocument:
        """
        Freeze the accumulated pages into a RenderedDocument.

        The surface rejects further drawing afterwards.
        """
        self._check_open()
        self._finalized = True
        pages = tuple(
            RenderedPage(
                number=index + 1,
                width=self.page_width,
                height=self.page_height,
                ops=tuple(ops),
            )
            for index, ops in enumerate(self._pages)
        )
        return RenderedDocument(pages=pages, warnings=tuple(warnings or ()))

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("Drawing surface already finalized")
