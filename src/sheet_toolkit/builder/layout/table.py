"""
Module: builder.layout.table

Purpose:
    Draw the two-column Field/Value table, one fixed-height row per
    field in FIELD_ORDER, breaking pages through the PageCursor.

Key Functions:
    - render_table(): Header row + one row per field

Layout:
    | Field (label_col_width) | Value (value_col_width) |
    Header: accent fill, white bold text, drawn once.
    Rows: bordered cells, bold label, wrapped value.

Known limitations:
    - The header is not repeated after a mid-table page break.
    - Rows never grow. Wrapped value lines that do not fit the row box
      are still drawn and run past the row's bottom border; a warning
      is recorded for each such row.

Dependencies:
    - builder.layout.text: Wrapping with font metrics
    - core.models.fields: FIELD_ORDER

Used By:
    - builder.controller: Details section
"""

from __future__ import annotations

import logging
from typing import Sequence

from sheet_toolkit.core.models import FIELD_ORDER, FieldRecord, FieldSpec

from .context import RenderContext
from .models import RectOp, TextOp
from .text import line_height, wrap_text

logger = logging.getLogger(__name__)

HEADER_LABELS = ("Field", "Value")
LABEL_FONT = "Helvetica-Bold"
VALUE_FONT = "Helvetica"


def render_table(
    ctx: RenderContext,
    record: FieldRecord,
    fields: Sequence[FieldSpec] = FIELD_ORDER,
) -> int:
    """
    Draw the field table at the cursor position.

    Args:
        ctx: Render context (cursor is advanced past the table)
        record: Values to print
        fields: Row order (defaults to the shared FIELD_ORDER)

    Returns:
        Number of data rows drawn (always len(fields))
    """
    config = ctx.config
    x_label = config.margin
    x_value = config.margin + config.label_col_width

    _draw_header(ctx, x_label, x_value)

    for spec in fields:
        y = ctx.cursor.reserve(config.row_height)
        _draw_row(ctx, spec, record.get(spec.key), x_label, x_value, y)

    logger.debug(f"Table drawn with {len(fields)} rows, ends on page {ctx.cursor.page_number}")
    return len(fields)


def _draw_header(ctx: RenderContext, x_label: float, x_value: float) -> None:
    """Header row with accent fill and inverted text."""
    config = ctx.config
    y = ctx.cursor.reserve(config.row_height)

    ctx.draw(RectOp(x_label, y, config.label_col_width, config.row_height, fill=config.header_fill))
    ctx.draw(RectOp(x_value, y, config.value_col_width, config.row_height, fill=config.header_fill))

    baseline = y + config.text_baseline_offset
    for x, text in zip((x_label, x_value), HEADER_LABELS):
        ctx.draw(TextOp(
            text=text,
            x=x + config.cell_padding,
            y=baseline,
            font_name=LABEL_FONT,
            font_size=config.body_font_size,
            color=config.header_text_color,
        ))


def _draw_row(
    ctx: RenderContext,
    spec: FieldSpec,
    value: str,
    x_label: float,
    x_value: float,
    y: float,
) -> None:
    """One bordered row: bold label left, wrapped value right."""
    config = ctx.config

    ctx.draw(RectOp(x_label, y, config.label_col_width, config.row_height, stroke=config.border_color))
    ctx.draw(RectOp(x_value, y, config.value_col_width, config.row_height, stroke=config.border_color))

    baseline = y + config.text_baseline_offset
    ctx.draw(TextOp(
        text=spec.label,
        x=x_label + config.cell_padding,
        y=baseline,
        font_name=LABEL_FONT,
        font_size=config.body_font_size,
    ))

    lines = wrap_text(value, config.value_text_width, VALUE_FONT, config.body_font_size)
    step = line_height(config.body_font_size, config.line_height_factor)
    for i, line in enumerate(lines):
        if not line:
            continue
        ctx.draw(TextOp(
            text=line,
            x=x_value + config.cell_padding,
            y=baseline + i * step,
            font_name=VALUE_FONT,
            font_size=config.body_font_size,
        ))

    if lines:
        last_baseline = baseline + (len(lines) - 1) * step
        if last_baseline > y + config.row_height:
            ctx.warn(
                f"Value for {spec.label!r} wraps to {len(lines)} lines and "
                f"overflows its {config.row_height} mm row"
            )
