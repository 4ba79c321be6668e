"""
Module: builder

Purpose:
    Instruction sheet building pipeline. Lays out a field record and
    reference images as pages (title, Field/Value table, cropped image
    grid) and renders them to PDF.

Key Functions:
    - build_document(): Async layout, returns a RenderedDocument
    - build_document_sync(): Same for synchronous callers
    - export_instruction_sheet(): Build and write instruction.pdf

Key Classes:
    - SheetConfig: Layout configuration
    - RenderedDocument: Page sequence with draw operations

Dependencies:
    - PIL: Image decoding and cropping
    - reportlab: Font metrics and PDF output
    - sheet_toolkit.core.models: FieldRecord, ImageAsset

Used By:
    - sheet_toolkit.cli: Command line entry point
"""

from .config import SheetConfig
from .images import UnknownAspectRatio, dimensions_for, resolve_dimensions
from .layout import RenderedDocument, RenderedPage
from .controller import (
    build_document,
    build_document_sync,
    export_instruction_sheet,
    ExportResult,
    DocumentBuildError,
)

__all__ = [
    # Config
    "SheetConfig",
    # Images
    "UnknownAspectRatio",
    "dimensions_for",
    "resolve_dimensions",
    # Layout
    "RenderedDocument",
    "RenderedPage",
    # Controller
    "build_document",
    "build_document_sync",
    "export_instruction_sheet",
    "ExportResult",
    "DocumentBuildError",
]
