import io
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional

from .nutrition import NutritionAnalysis


class PendingState(str, Enum):
    """Status of the current analysis attempt"""
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class ImageUpload:
    """User-selected file, held in memory so it outlives the upload request"""
    filename: str
    content_type: str
    stream: BinaryIO

    @classmethod
    def from_bytes(cls, filename: str, content_type: str, data: bytes) -> "ImageUpload":
        return cls(filename=filename, content_type=content_type or "", stream=io.BytesIO(data))

    @classmethod
    def from_file_storage(cls, storage) -> "ImageUpload":
        """Copy a werkzeug FileStorage into memory"""
        return cls.from_bytes(storage.filename or "", storage.mimetype or "", storage.read())


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of an upload session handed to the view"""
    pending_state: PendingState = PendingState.IDLE
    filename: Optional[str] = None
    preview_encoding: Optional[str] = None
    result: Optional[NutritionAnalysis] = None
    error_message: Optional[str] = None

    @property
    def has_file(self) -> bool:
        return self.filename is not None

    @property
    def is_loading(self) -> bool:
        return self.pending_state is PendingState.LOADING
