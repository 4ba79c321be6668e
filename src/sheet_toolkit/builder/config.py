"""
Module: builder.config

Purpose:
    Configuration dataclass for the instruction sheet builder. Immutable
    configuration with validation on construction. Lengths are in
    millimetres on the page, font sizes in points.

Key Classes:
    - SheetConfig: Page geometry, table and grid layout settings

Dependencies:
    - dataclasses (std)

Used By:
    - builder.controller: Document orchestration
    - builder.layout.table: Column widths, row height
    - builder.layout.grid: Image size, spacing, images per page
    - builder.output.renderer: Page size
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# A4 portrait in millimetres
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for building an instruction sheet (immutable).

    Attributes:
        page_width: Page width in mm
        page_height: Page height in mm
        margin: Margin on every side in mm (also the top of each new page)
        title: Title text drawn centered at the top of page 1
        title_font_size: Title size in pt
        heading_font_size: Section heading size in pt
        body_font_size: Table text size in pt
        line_height_factor: Line spacing for wrapped text, as a multiple of font size
        section_gap: Gap below the title and below separators in mm
        heading_gap: Gap below a section heading in mm
        label_col_width: Width of the label column in mm
        value_col_width: Width of the value column in mm
        row_height: Fixed table row height in mm (never grows)
        cell_padding: Inner padding of table cells in mm
        text_baseline_offset: Baseline offset from a row's top edge in mm
        header_fill: Accent fill of the table header row
        header_text_color: Text color of the table header row
        border_color: Stroke color for table borders and separators
        image_max_dimension: Longer side of each grid image in mm
        image_spacing: Gap between grid cells in mm
        grid_columns: Cells per grid row
        images_per_page: Cells per grid page (hard page break rule)
        image_section_min_space: Space above the bottom margin (mm) the image
            section needs before its heading; less than this starts a new page
        crop_oversample: Pixels per mm for cropped image buffers
        jpeg_quality: JPEG quality for cropped images (1-95)
        default_aspect_label: Ratio used when neither caller nor record names one

    Example:
        >>> config = SheetConfig()
        >>> config.usable_bottom
        277.0
    """

    # Page
    page_width: float = A4_WIDTH_MM
    page_height: float = A4_HEIGHT_MM
    margin: float = 20.0

    # Text
    title: str = "SAC Instruction Sheet"
    title_font_size: float = 24.0
    heading_font_size: float = 16.0
    body_font_size: float = 10.0
    line_height_factor: float = 1.15

    # Vertical rhythm
    section_gap: float = 15.0
    heading_gap: float = 10.0

    # Table
    label_col_width: float = 60.0
    value_col_width: float = 120.0
    row_height: float = 10.0
    cell_padding: float = 2.0
    text_baseline_offset: float = 6.0
    header_fill: RGB = (66, 139, 202)
    header_text_color: RGB = (255, 255, 255)
    border_color: RGB = (200, 200, 200)

    # Image grid
    image_max_dimension: float = 80.0
    image_spacing: float = 10.0
    grid_columns: int = 2
    images_per_page: int = 4
    image_section_min_space: float = 80.0
    crop_oversample: int = 10
    jpeg_quality: int = 95
    default_aspect_label: str = "1:1"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.usable_bottom <= self.margin:
            raise ValueError("Margins exceed page height")
        if self.table_width > self.page_width:
            raise ValueError(
                f"Table width {self.table_width} exceeds page width {self.page_width}"
            )
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive: {self.row_height}")
        if self.value_col_width <= 2 * self.cell_padding:
            raise ValueError("value_col_width leaves no room for text")
        if self.grid_columns < 1:
            raise ValueError(f"grid_columns must be >= 1: {self.grid_columns}")
        if self.images_per_page < self.grid_columns or self.images_per_page % self.grid_columns:
            raise ValueError(
                f"images_per_page must be a multiple of grid_columns: {self.images_per_page}"
            )
        if self.crop_oversample < 1:
            raise ValueError(f"crop_oversample must be >= 1: {self.crop_oversample}")
        if not 1 <= self.jpeg_quality <= 95:
            raise ValueError(f"jpeg_quality must be 1-95: {self.jpeg_quality}")

    @property
    def usable_bottom(self) -> float:
        """Lowest y content may reach (page height minus bottom margin)."""
        return self.page_height - self.margin

    @property
    def table_width(self) -> float:
        """Total width of the two table columns."""
        return self.label_col_width + self.value_col_width

    @property
    def value_text_width(self) -> float:
        """Width available to value text inside its padded cell."""
        return self.value_col_width - 2 * self.cell_padding

    @property
    def grid_rows(self) -> int:
        """Grid rows per image page."""
        return self.images_per_page // self.grid_columns
