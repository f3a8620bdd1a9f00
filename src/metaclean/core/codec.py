"""Image codec binding: decode to bare pixels, re-encode with no metadata."""

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Protocol

from PIL import Image, UnidentifiedImageError
from pillow_heif import register_heif_opener

from metaclean.core.errors import MetadataError, StripError
from metaclean.core.scanner import ImageFormat


# HEIC decode/encode through Pillow's plugin registry
register_heif_opener()

# Pillow's detected format names to supported container formats.
# MPO is the multi-picture JPEG variant written by many phone cameras.
DETECTED_FORMATS = {
    "JPEG": ImageFormat.JPEG,
    "MPO": ImageFormat.JPEG,
    "PNG": ImageFormat.PNG,
    "HEIF": ImageFormat.HEIC,
    "TIFF": ImageFormat.TIFF,
}

# TIFF compressions Pillow can write back
WRITABLE_TIFF_COMPRESSIONS = {"raw", "tiff_lzw", "tiff_adobe_deflate", "packbits"}


@dataclass
class DecodedImage:
    """First frame of an image, detached from every metadata block."""

    pixels: Image.Image
    format: ImageFormat
    icc_profile: bytes | None = None
    compression: str | None = None

    @property
    def size(self) -> tuple[int, int]:
        return self.pixels.size


class ImageCodec(Protocol):
    """Capability the stripper needs from an image library."""

    def decode(self, path: Path) -> DecodedImage:
        """Read the first frame of ``path``.

        Raises:
            StripError: UNABLE_TO_READ_IMAGE or UNABLE_TO_CREATE_IMAGE.
        """
        ...

    def encode(
        self,
        path: Path,
        image: DecodedImage,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Write ``image`` over ``path`` in its own container format.

        Raises:
            StripError: UNABLE_TO_CREATE_DESTINATION or UNABLE_TO_SAVE_IMAGE.
        """
        ...


def clean_frame(source: Image.Image) -> Image.Image:
    """Rebuild a loaded frame from raw pixel data.

    Only pixel-level information survives: bands, palette and palette
    transparency. EXIF, XMP, IPTC, comments and text chunks stay behind.
    The frame keeps its stored orientation and dimensions.
    """
    clean = Image.frombytes(source.mode, source.size, source.tobytes())

    if source.mode in {"P", "PA"} and source.palette is not None:
        rawmode = source.palette.mode
        clean.putpalette(source.getpalette(rawmode), rawmode)

    if "transparency" in source.info:
        clean.info["transparency"] = source.info["transparency"]

    return clean


class PillowCodec:
    """ImageCodec backed by Pillow (plus pillow-heif for HEIC).

    With ``safe_write`` enabled the new file is encoded next to the original
    and renamed over it, so an interrupted write leaves the original intact.
    Without it the original is truncated and rewritten directly. Symlinks
    are followed to the real file. Hard-linked files are always rewritten
    directly so every link sees the cleaned image.
    """

    def __init__(self, quality: int = 95, safe_write: bool = True) -> None:
        """Initialize the codec.

        Args:
            quality: Re-encoding quality for lossy formats (1-100).
            safe_write: Write through a temporary file and atomic rename.
        """
        self.quality = quality
        self.safe_write = safe_write

    def decode(self, path: Path) -> DecodedImage:
        try:
            source = Image.open(path)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise StripError(MetadataError.UNABLE_TO_READ_IMAGE, str(e))

        with source:
            fmt = DETECTED_FORMATS.get(source.format or "")
            if fmt is None:
                raise StripError(
                    MetadataError.UNABLE_TO_READ_IMAGE,
                    f"Unsupported container format: {source.format}",
                )

            try:
                source.seek(0)
                source.load()
                pixels = clean_frame(source)
            except (OSError, ValueError, SyntaxError, EOFError) as e:
                raise StripError(MetadataError.UNABLE_TO_CREATE_IMAGE, str(e))

            return DecodedImage(
                pixels=pixels,
                format=fmt,
                icc_profile=source.info.get("icc_profile"),
                compression=source.info.get("compression"),
            )

    def encode(
        self,
        path: Path,
        image: DecodedImage,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if metadata:
            raise ValueError("Only an empty metadata set can be written")

        # Write the file a symlink points at, never the link itself
        target = Path(path).resolve()
        if not os.access(target, os.W_OK):
            raise StripError(
                MetadataError.UNABLE_TO_CREATE_DESTINATION,
                f"File is not writable: {target}",
            )

        # Renaming over a hard-linked file would leave the other names untouched
        if self.safe_write and target.stat().st_nlink == 1:
            self._encode_atomic(target, image)
        else:
            self._encode_in_place(target, image)

    def _encode_in_place(self, path: Path, image: DecodedImage) -> None:
        try:
            fp = open(path, "wb")
        except OSError as e:
            raise StripError(MetadataError.UNABLE_TO_CREATE_DESTINATION, str(e))

        with fp:
            self._write(fp, image)

    def _encode_atomic(self, path: Path, image: DecodedImage) -> None:
        original = path.stat()
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
        except OSError as e:
            raise StripError(MetadataError.UNABLE_TO_CREATE_DESTINATION, str(e))

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fp:
                self._write(fp, image)
            try:
                shutil.copymode(path, tmp_path)
                written = tmp_path.stat()
                if (written.st_uid, written.st_gid) != (original.st_uid, original.st_gid):
                    os.chown(tmp_path, original.st_uid, original.st_gid)
                os.replace(tmp_path, path)
            except OSError as e:
                raise StripError(MetadataError.UNABLE_TO_SAVE_IMAGE, str(e))
        finally:
            tmp_path.unlink(missing_ok=True)

    def _write(self, fp: BinaryIO, image: DecodedImage) -> None:
        try:
            image.pixels.save(fp, format=image.format.pillow_format, **self._save_options(image))
            fp.flush()
        except (OSError, ValueError, KeyError) as e:
            raise StripError(MetadataError.UNABLE_TO_SAVE_IMAGE, str(e))

    def _save_options(self, image: DecodedImage) -> dict[str, Any]:
        """Format-specific encoder settings. No metadata is ever passed."""
        options: dict[str, Any] = {}
        if image.icc_profile:
            options["icc_profile"] = image.icc_profile

        if image.format == ImageFormat.JPEG:
            options["quality"] = self.quality
            options["optimize"] = True
        elif image.format == ImageFormat.PNG:
            options["optimize"] = True
        elif image.format == ImageFormat.HEIC:
            options["quality"] = self.quality
        elif image.format == ImageFormat.TIFF:
            if image.compression in WRITABLE_TIFF_COMPRESSIONS:
                options["compression"] = image.compression
            else:
                options["compression"] = "tiff_lzw"

        return options
