"""
Module: builder.layout.cursor

Purpose:
    Track the current page and vertical write position while a document
    is laid out, and decide when a block needs a page break.

Key Classes:
    - PageCursor: Page index + y position state machine

Algorithm:
    reserve(h):
    1. If y + h would pass the usable bottom, break the page
       (page +1, y = top margin)
    2. Return y as the draw position and move y past the block

    Within a page y only grows; it resets to the top margin on a break.

Used By:
    - builder.layout.table: One reservation per row
    - builder.layout.grid: Forced breaks every N images
    - builder.controller: Section spacing and orphan control
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PageCursor:
    """
    Mutable per-render page state.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin: Top/bottom margin; a new page starts at y = margin
        page_number: Current page (1-based)
        current_y: Offset of the write position from the page top

    Example:
        >>> cursor = PageCursor(page_width=210, page_height=297, margin=20)
        >>> cursor.reserve(10)
        20
        >>> cursor.current_y
        30
    """

    def __init__(
        self,
        page_width: float,
        page_height: float,
        margin: float,
        *,
        on_break: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Initialize at the top of page 1.

        Args:
            page_width: Page width
            page_height: Page height
            margin: Margin used at top and bottom
            on_break: Called after every page break (opens a new surface page)
        """
        if page_height - margin <= margin:
            raise ValueError("Margins exceed page height")
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.page_number = 1
        self.current_y = margin
        self._on_break = on_break

    @property
    def usable_bottom(self) -> float:
        """Page height minus the bottom margin."""
        return self.page_height - self.margin

    @property
    def remaining(self) -> float:
        """Space left between the write position and the usable bottom."""
        return self.usable_bottom - self.current_y

    def fits(self, block_height: float) -> bool:
        """Whether a block fits on the current page without a break."""
        return self.current_y + block_height <= self.usable_bottom

    def reserve(self, block_height: float) -> float:
        """
        Claim vertical space for a block.

        Breaks the page first when the block would cross the usable
        bottom. A block taller than a whole page is still placed at the
        top of a fresh page.

        Args:
            block_height: Height of the block to place

        Returns:
            y at which to draw the block
        """
        if block_height < 0:
            raise ValueError(f"block_height must be non-negative: {block_height}")
        if not self.fits(block_height):
            self.force_break()
        y = self.current_y
        self.current_y += block_height
        return y

    def advance(self, distance: float) -> None:
        """Move the write position down without any page-break check."""
        self.current_y += distance

    def force_break(self) -> None:
        """Start a new page unconditionally."""
        self.page_number += 1
        self.current_y = self.margin
        logger.debug(f"Page break -> page {self.page_number}")
        if self._on_break is not None:
            self._on_break()
