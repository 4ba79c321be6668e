import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import sheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from sheet_toolkit.core.models import FIELD_KEYS, FieldRecord, ImageAsset


def _png_bytes(width: int, height: int, color: str = "white") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=color).save(buf, format="PNG")
    return buf.getvalue()


# Common test fixtures
@pytest.fixture
def png_factory():
    """Factory for solid-color PNG bytes."""
    return _png_bytes


@pytest.fixture
def asset_factory():
    """Factory for valid in-memory image assets."""
    def _create(width: int = 400, height: int = 300, color: str = "white", name: str = "ref.png"):
        return ImageAsset.from_bytes(_png_bytes(width, height, color), name=name)
    return _create


@pytest.fixture
def corrupt_asset():
    """Asset whose bytes are not a decodable image."""
    return ImageAsset(data=b"not an image at all", width=400, height=300, name="broken.png")


@pytest.fixture
def full_record():
    """Record with every field filled."""
    values = {key: f"value {key}" for key in FIELD_KEYS}
    values["aspect_ratio"] = "16:9"
    return FieldRecord.from_mapping(values)


@pytest.fixture
def sample_images(asset_factory):
    """Four valid images with different shapes."""
    return [
        asset_factory(400, 300, "red", "a.png"),
        asset_factory(300, 400, "green", "b.png"),
        asset_factory(500, 500, "blue", "c.png"),
        asset_factory(1600, 900, "yellow", "d.png"),
    ]


@pytest.fixture
def sample_image_file(tmp_path: Path):
    """PNG file on disk."""
    path = tmp_path / "sample.png"
    path.write_bytes(_png_bytes(200, 100))
    return path
