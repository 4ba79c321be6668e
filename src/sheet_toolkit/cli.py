"""
Command line entry point: build an instruction sheet PDF from a record
file and reference images.

Usage:
    sheet-builder record.json ref1.png ref2.jpg -o out/instruction.pdf
    sheet-builder response.txt ref.png --raw --aspect 16:9
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from sheet_toolkit import __version__
from sheet_toolkit.builder import DocumentBuildError, SheetConfig, export_instruction_sheet
from sheet_toolkit.builder.output import DEFAULT_FILENAME
from sheet_toolkit.core.errors import ImageDecodeError, RecordParseError
from sheet_toolkit.core.models import FieldRecord, ImageAsset
from sheet_toolkit.core.utils import load_record, parse_analysis_response
from sheet_toolkit.core.vocabulary import check_record

logger = logging.getLogger(__name__)

# Upload limits applied by the upload screen; the builder itself does not check them
MAX_IMAGES = 4
MAX_IMAGE_BYTES = 10 * 1024 * 1024

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_BAD_INPUT = 2


class InputError(Exception):
    """Command line input rejected before building."""
    pass


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheet-builder",
        description="Generate an instruction sheet PDF from a field record and reference images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sheet-builder record.json a.png b.jpg              # writes ./instruction.pdf
  sheet-builder record.json a.png -o out/            # writes out/instruction.pdf
  sheet-builder response.txt a.png --raw --aspect 16:9
        """,
    )
    parser.add_argument("record", type=Path, help="Record JSON file (or raw analysis text with --raw)")
    parser.add_argument("images", type=Path, nargs="*", help=f"Reference images (max {MAX_IMAGES})")
    parser.add_argument("-o", "--output", type=Path, default=Path(DEFAULT_FILENAME),
                        help="Output PDF path or directory")
    parser.add_argument("--aspect", default=None,
                        help="Grid aspect ratio (defaults to the record's aspect_ratio)")
    parser.add_argument("--title", default=None, help="Override the sheet title")
    parser.add_argument("--raw", action="store_true",
                        help="Treat the record file as raw analysis service output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_record(path: Path, raw: bool) -> FieldRecord:
    if raw:
        return parse_analysis_response(path.read_text(encoding="utf-8"))
    return load_record(path)


def _load_images(paths: Sequence[Path]) -> List[ImageAsset]:
    """Load images, enforcing the upload limits."""
    if len(paths) > MAX_IMAGES:
        raise InputError(f"Maximum {MAX_IMAGES} images allowed, got {len(paths)}")

    assets: List[ImageAsset] = []
    for path in paths:
        size = path.stat().st_size
        if size > MAX_IMAGE_BYTES:
            raise InputError(f"{path.name}: file size must be less than 10MB ({size} bytes)")
        assets.append(ImageAsset.from_path(path))
    return assets


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code (0 ok, 1 build failed, 2 bad input)
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        record = _load_record(args.record, args.raw)
        images = _load_images(args.images)
    except (InputError, RecordParseError, ImageDecodeError, OSError) as e:
        logger.error(f"Error: {e}")
        return EXIT_BAD_INPUT

    for issue in check_record(record):
        logger.warning(f"Vocabulary: {issue}")

    config = SheetConfig(title=args.title) if args.title else SheetConfig()

    try:
        result = export_instruction_sheet(
            record,
            images,
            args.output,
            aspect_label=args.aspect,
            config=config,
        )
    except DocumentBuildError as e:
        logger.error(f"An error occurred while generating the PDF: {e}")
        return EXIT_BUILD_FAILED

    logger.info(
        f"Wrote {result.pdf_path} ({result.page_count} pages, "
        f"{result.image_count} images, {len(result.warnings)} warnings)"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
