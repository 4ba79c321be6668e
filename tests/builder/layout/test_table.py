"""
Tests for builder.layout.table

Test Coverage:
- Header row drawn once with accent fill and white text
- One row per field in FIELD_ORDER, label and value positions
- Page breaks mid-table without repeating the header
- Overflow warning for values that wrap past the fixed row height
"""

import pytest

from sheet_toolkit.builder.config import SheetConfig
from sheet_toolkit.builder.layout import RectOp, RenderContext, TextOp, render_table
from sheet_toolkit.core.models import FIELD_ORDER, FieldRecord


@pytest.fixture
def ctx():
    """Context at the top of an A4 page."""
    return RenderContext.create(SheetConfig())


def _texts_by_font(page, font_name):
    return [op for op in page.ops_of(TextOp) if op.font_name == font_name]


class TestRenderTable:
    """Tests for render_table()."""

    def test_returns_row_count_and_advances_cursor(self, ctx, full_record):
        # Act
        rows = render_table(ctx, full_record)

        # Assert: header + 16 rows of 10 mm from y=20
        assert rows == len(FIELD_ORDER) == 16
        assert ctx.cursor.current_y == pytest.approx(20 + 17 * 10)
        assert ctx.cursor.page_number == 1

    def test_header_has_accent_fill_and_white_text(self, ctx, full_record):
        render_table(ctx, full_record)
        page = ctx.finalize().pages[0]

        filled = [op for op in page.ops_of(RectOp) if op.fill is not None]
        assert len(filled) == 2
        assert all(op.fill == (66, 139, 202) for op in filled)
        assert [op.width for op in filled] == [60, 120]

        header_texts = [op for op in page.ops_of(TextOp) if op.color == (255, 255, 255)]
        assert [op.text for op in header_texts] == ["Field", "Value"]

    def test_labels_follow_field_order(self, ctx, full_record):
        render_table(ctx, full_record)
        page = ctx.finalize().pages[0]

        labels = [
            op.text for op in _texts_by_font(page, "Helvetica-Bold")
            if op.color == (0, 0, 0)
        ]

        assert labels == [spec.label for spec in FIELD_ORDER]

    def test_label_and_value_positions(self, ctx, full_record):
        render_table(ctx, full_record)
        page = ctx.finalize().pages[0]

        first_label = next(op for op in page.ops_of(TextOp) if op.text == FIELD_ORDER[0].label)
        first_value = next(op for op in page.ops_of(TextOp) if op.text == f"value {FIELD_ORDER[0].key}")

        # First data row starts below the 10 mm header at y=30
        assert first_label.x == pytest.approx(22)
        assert first_label.y == pytest.approx(36)
        assert first_value.x == pytest.approx(82)
        assert first_value.y == pytest.approx(36)

    def test_every_row_has_two_bordered_cells(self, ctx, full_record):
        render_table(ctx, full_record)
        page = ctx.finalize().pages[0]

        bordered = [op for op in page.ops_of(RectOp) if op.stroke == (200, 200, 200)]
        assert len(bordered) == 2 * 16

    def test_empty_values_draw_labels_only(self, ctx):
        render_table(ctx, FieldRecord.empty())
        page = ctx.finalize().pages[0]

        values = _texts_by_font(page, "Helvetica")
        assert values == []

    def test_short_page_breaks_without_repeating_header(self, full_record):
        # Arrange: usable area 20..130 holds header + 10 rows
        ctx = RenderContext.create(SheetConfig(page_height=150))

        # Act
        render_table(ctx, full_record)
        document = ctx.finalize()

        # Assert
        assert document.page_count == 2
        first, second = document.pages
        assert "Field" in first.texts
        assert "Field" not in second.texts
        assert FIELD_ORDER[9].label in first.texts
        assert FIELD_ORDER[10].label in second.texts

        moved = next(op for op in second.ops_of(TextOp) if op.text == FIELD_ORDER[10].label)
        assert moved.y == pytest.approx(20 + 6)

    def test_wrapping_value_records_overflow_warning(self, ctx):
        record = FieldRecord.from_mapping(
            additional_words="soft light over a quiet harbour at dawn " * 8,
        )

        render_table(ctx, record)

        assert len(ctx.warnings) == 1
        assert "Additional Words" in ctx.warnings[0]
        assert "overflows" in ctx.warnings[0]

    def test_wrapping_value_does_not_grow_row(self, ctx):
        record = FieldRecord.from_mapping(
            additional_words="soft light over a quiet harbour at dawn " * 8,
        )

        render_table(ctx, record)

        assert ctx.cursor.current_y == pytest.approx(20 + 17 * 10)
