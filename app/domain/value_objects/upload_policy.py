"""Upload gate value object."""

from dataclasses import dataclass, field
from pathlib import PurePath

from app.domain.errors import FileTooLargeError, UnsupportedMediaError

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

_MEDIA_TYPES_BY_EXTENSION = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
}


def media_type_for(filename: str) -> str:
    """
    Guess the content type of a stored file from its extension.

    Args:
        filename: Stored file name

    Returns:
        Media type, application/octet-stream when unknown
    """
    extension = PurePath(filename).suffix.lower()
    return _MEDIA_TYPES_BY_EXTENSION.get(extension, "application/octet-stream")


@dataclass(frozen=True)
class UploadPolicy:
    """Allow-list and size limit applied to every uploaded file."""

    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    allowed_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset({".pdf", ".jpg", ".jpeg", ".png"})
    )
    allowed_media_types: frozenset[str] = field(
        default_factory=lambda: frozenset(
            {"application/pdf", "image/jpeg", "image/jpg", "image/png"}
        )
    )

    def __post_init__(self) -> None:
        """Validate size limit."""
        if self.max_bytes <= 0:
            raise ValueError("Upload size limit must be positive")

    def check_type(self, filename: str, media_type: str) -> None:
        """
        Check extension and declared media type, both case-insensitive.

        Args:
            filename: Original file name sent by the client
            media_type: Declared content type of the part

        Raises:
            UnsupportedMediaError: If either does not match the allow-list
        """
        extension = PurePath(filename or "").suffix.lower()
        if extension not in self.allowed_extensions:
            raise UnsupportedMediaError(
                filename, "only PDF, JPG, and PNG files are allowed"
            )
        declared = (media_type or "").split(";")[0].strip().lower()
        if declared not in self.allowed_media_types:
            raise UnsupportedMediaError(
                filename, f"media type '{media_type}' is not allowed"
            )

    def check_size(self, filename: str, size: int) -> None:
        """
        Check the number of bytes read so far.

        Raises:
            FileTooLargeError: If size exceeds the limit
        """
        if size > self.max_bytes:
            raise FileTooLargeError(filename, self.max_bytes)
