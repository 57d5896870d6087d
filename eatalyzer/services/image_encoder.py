# image_encoder.py
import base64
import logging

from ..errors import ImageReadError, InvalidImageTypeError
from ..models.session import ImageUpload

logger = logging.getLogger(__name__)


class ImageEncoder:
    """Validates user-selected images and encodes them as base64 text"""

    @staticmethod
    def validate(upload: ImageUpload) -> ImageUpload:
        """Return the upload unchanged, or raise InvalidImageTypeError for non-images"""
        if not (upload.content_type or "").startswith("image/"):
            raise InvalidImageTypeError(upload.content_type)
        return upload

    @staticmethod
    def read_bytes(upload: ImageUpload) -> bytes:
        try:
            upload.stream.seek(0)
            return upload.stream.read()
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {upload.filename!r}: {e}")
            raise ImageReadError(f"could not read {upload.filename or 'file'}") from e

    def to_preview(self, upload: ImageUpload) -> str:
        """Encode the file as a data URL suitable for an <img> src"""
        data = self.read_bytes(upload)
        base64_image = base64.b64encode(data).decode("utf-8")
        return f"data:{upload.content_type};base64,{base64_image}"

    def to_transport_encoding(self, upload: ImageUpload) -> str:
        """Raw base64 payload: the preview data URL without its prefix"""
        return self.to_preview(upload).split(",", 1)[1]
