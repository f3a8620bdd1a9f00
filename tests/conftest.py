"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest
from PIL import ExifTags, Image
from PIL.PngImagePlugin import PngInfo


def make_exif() -> Image.Exif:
    """EXIF block with camera, timestamp and copyright details."""
    exif = Image.Exif()
    exif[ExifTags.Base.Make] = "Canon"
    exif[ExifTags.Base.Model] = "EOS 5D Mark IV"
    exif[ExifTags.Base.DateTime] = "2024:05:01 12:30:00"
    exif[ExifTags.Base.Copyright] = "Jane Photographer"
    exif[ExifTags.IFD.GPSInfo] = {
        ExifTags.GPS.GPSLatitudeRef: "N",
        ExifTags.GPS.GPSLongitudeRef: "E",
    }
    return exif


@pytest.fixture
def exif_bytes() -> bytes:
    """Serialized EXIF block for formats that take raw bytes."""
    return make_exif().tobytes()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_image(temp_dir: Path) -> Path:
    """Create a JPEG carrying EXIF metadata."""
    img = Image.new("RGB", (120, 80), color="red")
    path = temp_dir / "photo.jpg"
    img.save(path, quality=95, exif=make_exif().tobytes())
    return path


@pytest.fixture
def sample_png(temp_dir: Path) -> Path:
    """Create a PNG with transparency, a text chunk and EXIF."""
    img = Image.new("RGBA", (64, 48), color=(255, 0, 0, 128))
    info = PngInfo()
    info.add_text("Author", "Jane Photographer")
    info.add_text("Location", "Somewhere private")
    path = temp_dir / "graphic.png"
    img.save(path, pnginfo=info, exif=make_exif().tobytes())
    return path


@pytest.fixture
def sample_tiff(temp_dir: Path) -> Path:
    """Create a TIFF with descriptive tags."""
    img = Image.new("RGB", (50, 40), color="blue")
    path = temp_dir / "scan.tiff"
    img.save(path, tiffinfo={270: "Holiday scan", 315: "Jane Photographer"})
    return path


@pytest.fixture
def corrupted_image(temp_dir: Path) -> Path:
    """Create a file with an image extension but no image inside."""
    path = temp_dir / "broken.jpg"
    path.write_bytes(b"this is not an image at all")
    return path


@pytest.fixture
def truncated_image(temp_dir: Path) -> Path:
    """Create a JPEG whose scan data is cut short."""
    img = Image.effect_noise((256, 256), 64).convert("RGB")
    path = temp_dir / "truncated.jpg"
    img.save(path, quality=95)
    data = path.read_bytes()
    path.write_bytes(data[: int(len(data) * 0.6)])
    return path


@pytest.fixture
def sample_directory(temp_dir: Path) -> Path:
    """Create a directory with supported and unsupported files."""
    for i in range(3):
        img = Image.new("RGB", (40, 40), color=(i * 50, 0, 0))
        img.save(temp_dir / f"image_{i}.jpg", exif=make_exif().tobytes())
    Image.new("RGB", (40, 40)).save(temp_dir / "upper.JPEG")
    Image.new("RGB", (40, 40)).save(temp_dir / "icon.png")
    (temp_dir / "notes.txt").write_text("not an image")
    (temp_dir / "nested").mkdir()
    Image.new("RGB", (40, 40)).save(temp_dir / "nested" / "inner.jpg")
    return temp_dir
