"""Directory scanner for supported image files."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from metaclean.core.errors import DirectoryReadError


class ImageFormat(str, Enum):
    """Supported container formats."""
    
    JPEG = "jpeg"
    PNG = "png"
    HEIC = "heic"
    TIFF = "tiff"
    
    @property
    def pillow_format(self) -> str:
        """Format name used by Pillow's encoders."""
        return PILLOW_FORMATS[self]


PILLOW_FORMATS = {
    ImageFormat.JPEG: "JPEG",
    ImageFormat.PNG: "PNG",
    ImageFormat.HEIC: "HEIF",
    ImageFormat.TIFF: "TIFF",
}

# Extension (lowercase, no dot) to format mapping
EXTENSION_FORMATS = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "heic": ImageFormat.HEIC,
    "tiff": ImageFormat.TIFF,
}

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_FORMATS)


@dataclass(frozen=True)
class ImageFile:
    """An image found by the scanner."""
    
    path: Path
    format: ImageFormat
    
    @property
    def name(self) -> str:
        return self.path.name


def detect_format(path: Path) -> ImageFormat | None:
    """Map a file extension to its format, case-insensitively."""
    return EXTENSION_FORMATS.get(path.suffix.lower().lstrip("."))


def is_supported_image(path: Path) -> bool:
    """Check if a file has a supported image extension."""
    return detect_format(path) is not None


def scan_directory(directory: Path | str) -> list[ImageFile]:
    """Collect supported images directly inside a directory.
    
    Subdirectories are not descended into. The listing is taken once, so
    files created while a batch runs are not picked up.
    
    Args:
        directory: Directory to scan.
        
    Returns:
        List of ImageFile entries sorted by name. Empty if nothing matches.
        
    Raises:
        DirectoryReadError: If the directory is missing, not a directory,
            or cannot be listed.
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except FileNotFoundError:
        raise DirectoryReadError(directory, "No such directory")
    except NotADirectoryError:
        raise DirectoryReadError(directory, "Not a directory")
    except OSError as e:
        raise DirectoryReadError(directory, e.strerror or str(e))
    
    images = []
    for path in entries:
        fmt = detect_format(path)
        if fmt is None or not path.is_file():
            continue
        images.append(ImageFile(path=path, format=fmt))
    
    return sorted(images, key=lambda image: image.name)
