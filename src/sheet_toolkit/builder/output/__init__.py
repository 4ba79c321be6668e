"""
Module: builder.output

Purpose:
    PDF output for instruction sheets.
    Converts a RenderedDocument to PDF using ReportLab.

Key Functions:
    - render_to_pdf(): Write a document to a PDF file
    - render_to_pdf_bytes(): Document as PDF bytes

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: RenderedDocument

Used By:
    - builder.controller: export_instruction_sheet()
"""

from .renderer import DEFAULT_FILENAME, render_to_pdf, render_to_pdf_bytes

__all__ = [
    "DEFAULT_FILENAME",
    "render_to_pdf",
    "render_to_pdf_bytes",
]
