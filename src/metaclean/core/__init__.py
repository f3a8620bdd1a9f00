"""Core processing module for metaclean."""

from metaclean.core.batch import BatchProcessor
from metaclean.core.codec import DecodedImage, ImageCodec, PillowCodec
from metaclean.core.errors import DirectoryReadError, MetadataError, StripError
from metaclean.core.scanner import ImageFile, ImageFormat, scan_directory
from metaclean.core.stripper import MetadataStripper, ProcessingOutcome

__all__ = [
    "BatchProcessor",
    "DecodedImage",
    "ImageCodec",
    "PillowCodec",
    "DirectoryReadError",
    "MetadataError",
    "StripError",
    "ImageFile",
    "ImageFormat",
    "scan_directory",
    "MetadataStripper",
    "ProcessingOutcome",
]
