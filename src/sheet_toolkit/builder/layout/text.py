"""
Module: builder.layout.text

Purpose:
    Measure and wrap text with the standard PDF font metrics, so the
    layout agrees with what the PDF renderer will draw.

Key Functions:
    - text_width(): Width of a string in mm
    - wrap_text(): Split text into lines no wider than a given width

Dependencies:
    - reportlab.pdfbase.pdfmetrics: Font metrics
    - reportlab.lib.units: mm conversion

Used By:
    - builder.layout.table: Value column wrapping
"""

from __future__ import annotations

from typing import List

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth


def text_width(text: str, font_name: str, font_size: float) -> float:
    """
    Width of text in millimetres.

    Args:
        text: Single line of text
        font_name: Standard font name ("Helvetica", "Helvetica-Bold", ...)
        font_size: Size in points
    """
    return stringWidth(text, font_name, font_size) / mm


def line_height(font_size: float, factor: float = 1.15) -> float:
    """Baseline-to-baseline distance in mm for a font size in points."""
    return font_size * factor / mm


def _split_word(word: str, max_width: float, font_name: str, font_size: float) -> List[str]:
    """Break a word that is wider than max_width into fitting chunks."""
    chunks: List[str] = []
    current = ""
    for char in word:
        candidate = current + char
        if current and text_width(candidate, font_name, font_size) > max_width:
            chunks.append(current)
            current = char
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def wrap_text(text: str, max_width: float, font_name: str, font_size: float) -> List[str]:
    """
    Word-wrap text to fit max_width.

    Explicit newlines are kept as line breaks. Words wider than the
    whole line are broken between characters. An empty string yields no
    lines.

    Args:
        text: Text to wrap
        max_width: Maximum line width in mm
        font_name: Font used for measuring
        font_size: Font size in points

    Returns:
        List of lines, each no wider than max_width (a single character
        wider than max_width is the only exception)

    Example:
        >>> wrap_text("Natural light photo", 20, "Helvetica", 10)
        ['Natural light', 'photo']
    """
    if max_width <= 0:
        raise ValueError(f"max_width must be positive: {max_width}")

    lines: List[str] = []
    for paragraph in text.splitlines():
        words = paragraph.split()
        if not words:
            lines.append("")
            continue

        current = ""
        for word in words:
            pieces = (
                [word]
                if text_width(word, font_name, font_size) <= max_width
                else _split_word(word, max_width, font_name, font_size)
            )
            for piece in pieces:
                candidate = f"{current} {piece}" if current else piece
                if current and text_width(candidate, font_name, font_size) > max_width:
                    lines.append(current)
                    current = piece
                else:
                    current = candidate
        lines.append(current)

    # Trailing blank lines carry nothing to draw
    while lines and not lines[-1]:
        lines.pop()
    return lines
