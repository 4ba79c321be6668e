"""
End-to-End Tests: Complete Instruction Sheet Generation.

Tests the full workflow:
Analysis response → FieldRecord → Layout → Crop → PDF Output
"""

import io

import pytest
from pypdf import PdfReader

from sheet_toolkit.builder import export_instruction_sheet
from sheet_toolkit.core.models import ImageAsset
from sheet_toolkit.core.utils import parse_analysis_response, save_record, load_record

ANALYSIS_RESPONSE = """```json
{
  "purpose": "SNS Post",
  "subject": "Woman",
  "situation": "Walking",
  "age_range": "20s",
  "gender": "Female",
  "nationality": "Japanese",
  "style": "Photorealistic",
  "shot_distance": "Full Shot",
  "camera_angle": "Eye Level",
  "lighting_color": "Golden Hour",
  "background": "Urban Street",
  "city": "Tokyo",
  "location_type": "Street",
  "output_format": "Photo",
  "aspect_ratio": "16:9"
}
```"""


@pytest.fixture
def output_dir(tmp_path):
    """Create temporary output directory."""
    return tmp_path / "sheet_output"


class TestFullPipelinePDFGeneration:
    """End-to-end tests: Parse → Layout → Crop → Render PDF."""

    def test_e2e_analysis_to_pdf(self, output_dir, sample_images):
        """Analysis text and four images produce a two page PDF."""
        # Arrange
        record = parse_analysis_response(ANALYSIS_RESPONSE)

        # Act
        result = export_instruction_sheet(record, sample_images, output_dir / "instruction.pdf")

        # Assert - File written
        assert result.pdf_path.exists(), "PDF not created"
        assert result.pdf_path.stat().st_size > 0, "PDF is empty"

        # Assert - Structure
        reader = PdfReader(result.pdf_path)
        assert len(reader.pages) == result.page_count == 2
        assert result.image_count == 4
        assert result.warnings == ()

        # Assert - Content
        first_text = reader.pages[0].extract_text()
        assert "SAC Instruction Sheet" in first_text
        assert "Tokyo" in first_text
        assert "Reference Image" in reader.pages[1].extract_text()
        assert len(reader.pages[1].images) == 4

    def test_e2e_record_file_round_trip_to_pdf(self, tmp_path, sample_image_file):
        """Saved record and on-disk image build a PDF."""
        # Arrange
        record_path = tmp_path / "record.json"
        save_record(parse_analysis_response(ANALYSIS_RESPONSE), record_path)
        record = load_record(record_path)
        image = ImageAsset.from_path(sample_image_file)

        # Act
        result = export_instruction_sheet(record, [image], tmp_path)

        # Assert
        assert result.pdf_path == tmp_path / "instruction.pdf"
        assert result.image_count == 1

    def test_e2e_cropped_image_has_target_aspect(self, output_dir, asset_factory):
        """Placed JPEG keeps the 16:9 crop at 10 px per mm."""
        record = parse_analysis_response(ANALYSIS_RESPONSE)
        output_dir.mkdir()

        result = export_instruction_sheet(record, [asset_factory(1000, 1000)], output_dir)

        reader = PdfReader(result.pdf_path)
        image = reader.pages[-1].images[0].image
        assert image.size == (800, 450)

    def test_e2e_text_only_sheet(self, output_dir):
        """No images: single page, no image section."""
        record = parse_analysis_response(ANALYSIS_RESPONSE)
        output_dir.mkdir()

        result = export_instruction_sheet(record, [], output_dir)

        reader = PdfReader(result.pdf_path)
        assert len(reader.pages) == 1
        assert "Reference Image" not in reader.pages[0].extract_text()

    def test_e2e_data_url_images(self, output_dir, png_factory):
        """Images uploaded as data URLs are placed like files."""
        import base64

        url = "data:image/png;base64," + base64.b64encode(png_factory(300, 200, "navy")).decode()
        record = parse_analysis_response(ANALYSIS_RESPONSE)

        result = export_instruction_sheet(record, [ImageAsset.from_data_url(url)], output_dir / "a.pdf")

        assert result.image_count == 1
        assert PdfReader(io.BytesIO(result.pdf_path.read_bytes())).pages[-1].images
