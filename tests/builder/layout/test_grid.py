"""
Tests for builder.layout.grid

Test Coverage:
- cell_position(): Column/row math and page-local slots
- render_image_grid(): Page breaks every four images, centered
  placement, blank cells for undecodable images
"""

import asyncio

import pytest

from sheet_toolkit.builder.config import SheetConfig
from sheet_toolkit.builder.layout import RenderContext, cell_position, render_image_grid


@pytest.fixture
def ctx():
    return RenderContext.create(SheetConfig())


def _run(ctx, images, label="1:1"):
    return asyncio.run(render_image_grid(ctx, images, label))


class TestCellPosition:
    """Tests for cell_position()."""

    def test_first_cell_is_centered_grid_origin(self):
        cell = cell_position(0, 80, 80, page_width=210, spacing=10)

        assert (cell.row, cell.col) == (0, 0)
        assert cell.x == pytest.approx(20)
        assert cell.y_offset == 0

    def test_second_column_offset_by_width_plus_spacing(self):
        cell = cell_position(1, 80, 45, page_width=210, spacing=10)

        assert (cell.row, cell.col) == (0, 1)
        assert cell.x == pytest.approx(110)

    def test_second_row_offset_by_height_plus_spacing(self):
        cell = cell_position(3, 80, 45, page_width=210, spacing=10)

        assert (cell.row, cell.col) == (1, 1)
        assert cell.y_offset == pytest.approx(55)

    @pytest.mark.parametrize("index", [4, 8, 12])
    def test_every_fourth_image_restarts_at_top_left(self, index):
        cell = cell_position(index, 80, 60, page_width=210, spacing=10)

        assert (cell.row, cell.col) == (0, 0)
        assert cell.y_offset == 0

    def test_narrow_images_still_centered(self):
        # 9:16 -> 45 x 80, grid width 100
        cell = cell_position(0, 45, 80, page_width=210, spacing=10)

        assert cell.x == pytest.approx(55)


class TestRenderImageGrid:
    """Tests for render_image_grid()."""

    def test_no_images_draws_nothing(self, ctx):
        result = _run(ctx, [])

        assert result.placed == ()
        assert ctx.cursor.page_number == 1
        assert ctx.finalize().pages[0].ops == ()

    def test_four_images_fill_one_page(self, ctx, sample_images):
        # Act
        result = _run(ctx, sample_images)
        document = ctx.finalize()

        # Assert
        assert result.placed == (0, 1, 2, 3)
        assert result.pages == (1,)
        assert document.page_count == 1
        images = document.pages[0].images
        assert [(op.row, op.col) for op in images] == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert [(op.x, op.y) for op in images] == [(20, 20), (110, 20), (20, 110), (110, 110)]
        assert all((op.width, op.height) == (80, 80) for op in images)

    @pytest.mark.parametrize("count, pages", [(1, 1), (4, 1), (5, 2), (8, 2), (9, 3)])
    def test_page_count_is_images_over_four_rounded_up(self, asset_factory, count, pages):
        ctx = RenderContext.create(SheetConfig())
        images = [asset_factory(120, 90) for _ in range(count)]

        result = _run(ctx, images)

        assert len(result.pages) == pages
        assert ctx.finalize().page_count == pages

    def test_fifth_image_starts_new_page_even_with_room_left(self, ctx, asset_factory):
        # 21:9 cells are only 34 mm tall, so four rows would fit on one page
        images = [asset_factory(210, 90) for _ in range(5)]

        _run(ctx, images, "21:9")
        document = ctx.finalize()

        assert document.page_count == 2
        fifth = document.pages[1].images[0]
        assert fifth.grid_index == 4
        assert (fifth.row, fifth.col) == (0, 0)
        assert (fifth.x, fifth.y) == (pytest.approx(20), pytest.approx(20))

    def test_undecodable_image_leaves_blank_cell(self, ctx, asset_factory, corrupt_asset):
        # Arrange
        images = [asset_factory(), corrupt_asset, asset_factory(), asset_factory()]

        # Act
        result = _run(ctx, images)
        page = ctx.finalize().pages[0]

        # Assert: later cells keep their index-based positions
        assert result.placed == (0, 2, 3)
        assert result.skipped == (1,)
        assert [op.grid_index for op in page.images] == [0, 2, 3]
        third = page.images[1]
        assert (third.row, third.col) == (1, 0)
        assert third.y == pytest.approx(110)

    def test_undecodable_image_is_reported(self, ctx, corrupt_asset):
        _run(ctx, [corrupt_asset])

        assert len(ctx.warnings) == 1
        assert "broken.png" in ctx.warnings[0]

    def test_cursor_ends_below_lowest_row(self, ctx, asset_factory):
        _run(ctx, [asset_factory() for _ in range(3)])

        # Rows at 20 and 110, 80 mm tall
        assert ctx.cursor.current_y == pytest.approx(190)

    def test_unknown_label_uses_four_by_three(self, ctx, asset_factory):
        _run(ctx, [asset_factory()], "7:5")
        image = ctx.finalize().pages[0].images[0]

        assert (image.width, image.height) == (pytest.approx(80), pytest.approx(60))
