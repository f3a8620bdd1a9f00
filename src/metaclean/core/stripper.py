"""Per-file metadata stripping."""

from dataclasses import dataclass
from pathlib import Path

from metaclean.core.codec import ImageCodec, PillowCodec
from metaclean.core.errors import MetadataError, StripError
from metaclean.core.scanner import ImageFormat


@dataclass
class ProcessingOutcome:
    """Result of cleaning a single file."""
    
    path: Path
    error: MetadataError | None = None
    detail: str = ""
    format: ImageFormat | None = None
    
    @property
    def success(self) -> bool:
        return self.error is None
    
    @property
    def name(self) -> str:
        return self.path.name
    
    @property
    def message(self) -> str:
        """Human-readable description of a failure, empty on success."""
        if self.error is None:
            return ""
        if self.detail:
            return f"{self.error.description} ({self.detail})"
        return self.error.description


class MetadataStripper:
    """Rewrite an image in place with an empty metadata set.
    
    The stripper is codec-agnostic: it drives any ImageCodec through a
    decode then an encode over the same path, and turns every per-file
    failure into a ProcessingOutcome instead of raising.
    """
    
    def __init__(self, codec: ImageCodec | None = None) -> None:
        self.codec = codec or PillowCodec()
    
    def strip(self, path: Path, format: ImageFormat | None = None) -> ProcessingOutcome:
        """Remove all metadata from one image file.
        
        Args:
            path: Image to rewrite.
            format: Format the scanner assigned from the extension, carried
                into the outcome.
            
        Returns:
            ProcessingOutcome, successful only once the new file is written.
        """
        path = Path(path)
        try:
            try:
                image = self.codec.decode(path)
            except (OSError, ValueError) as e:
                raise StripError(MetadataError.UNABLE_TO_READ_IMAGE, str(e))
            
            try:
                self.codec.encode(path, image, metadata={})
            except (OSError, ValueError) as e:
                raise StripError(MetadataError.UNABLE_TO_SAVE_IMAGE, str(e))
        except StripError as e:
            return ProcessingOutcome(path=path, error=e.kind, detail=e.detail, format=format)
        
        return ProcessingOutcome(path=path, format=format)
