"""Error kinds raised while cleaning images."""

from enum import Enum
from pathlib import Path


class MetadataError(str, Enum):
    """Per-file failure kinds, one for each step of a strip."""
    
    UNABLE_TO_READ_IMAGE = "unable_to_read_image"
    UNABLE_TO_CREATE_DESTINATION = "unable_to_create_destination"
    UNABLE_TO_CREATE_IMAGE = "unable_to_create_image"
    UNABLE_TO_SAVE_IMAGE = "unable_to_save_image"
    
    @property
    def description(self) -> str:
        """Human-readable description of the failure."""
        return ERROR_DESCRIPTIONS[self]


ERROR_DESCRIPTIONS = {
    MetadataError.UNABLE_TO_READ_IMAGE: "Unable to read image",
    MetadataError.UNABLE_TO_CREATE_DESTINATION: "Unable to create destination",
    MetadataError.UNABLE_TO_CREATE_IMAGE: "Unable to create new image",
    MetadataError.UNABLE_TO_SAVE_IMAGE: "Unable to save image",
}


class StripError(Exception):
    """A single file could not be cleaned."""
    
    def __init__(self, kind: MetadataError, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.description}: {detail}" if detail else kind.description)


class DirectoryReadError(Exception):
    """The target directory could not be listed. Fatal for the whole batch."""
    
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
