"""
Tests for builder.layout.models and the per-build RenderContext.
"""

import pytest

from sheet_toolkit.builder.config import SheetConfig
from sheet_toolkit.builder.layout import (
    DrawingSurface,
    ImageOp,
    LineOp,
    RenderContext,
    TextOp,
)


class TestDrawingSurface:
    """Tests for DrawingSurface page accumulation."""

    def test_starts_with_one_empty_page(self):
        surface = DrawingSurface(210, 297)

        document = surface.finalize()

        assert surface.page_number == 1
        assert document.page_count == 1
        assert document.pages[0].ops == ()

    def test_draw_goes_to_open_page(self):
        surface = DrawingSurface(210, 297)
        surface.draw(TextOp("one", 20, 20))
        surface.start_page()
        surface.draw(TextOp("two", 20, 20))

        document = surface.finalize(["careful"])

        assert [page.texts for page in document.pages] == [["one"], ["two"]]
        assert [page.number for page in document.pages] == [1, 2]
        assert document.warnings == ("careful",)

    def test_finalize_closes_surface(self):
        surface = DrawingSurface(210, 297)
        surface.finalize()

        with pytest.raises(RuntimeError, match="finalized"):
            surface.draw(LineOp(0, 0, 1, 1))

    def test_image_pages_only_lists_pages_with_images(self):
        surface = DrawingSurface(210, 297)
        surface.draw(TextOp("title", 105, 20))
        surface.start_page()
        surface.draw(ImageOp(b"jpeg", 20, 20, 80, 80, grid_index=0))

        document = surface.finalize()

        assert [page.number for page in document.image_pages] == [2]
        assert document.texts == ["title"]


class TestRenderContext:
    """Tests for RenderContext wiring."""

    def test_cursor_break_opens_surface_page(self):
        ctx = RenderContext.create(SheetConfig())

        ctx.cursor.force_break()
        ctx.draw(TextOp("page two", 20, 20))
        document = ctx.finalize()

        assert document.page_count == 2
        assert document.pages[1].texts == ["page two"]

    def test_warn_collects_messages(self, caplog):
        ctx = RenderContext.create(SheetConfig())

        ctx.warn("Something recoverable")

        assert ctx.finalize().warnings == ("Something recoverable",)
        assert "Something recoverable" in caplog.text

    def test_contexts_are_independent(self):
        first = RenderContext.create(SheetConfig())
        second = RenderContext.create(SheetConfig())

        first.cursor.force_break()
        first.warn("only first")

        assert second.cursor.page_number == 1
        assert second.warnings == []
