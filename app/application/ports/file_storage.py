"""File storage port."""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from app.application.dtos.intake import StoredFile


class FileStorage(ABC):
    """Port interface for uploaded file persistence.

    Files are first staged, then promoted to permanent storage once the owning
    operation succeeds. Staged files that are never promoted must be discarded.
    """

    @abstractmethod
    async def stage(self, original_name: str, media_type: str, stream: BinaryIO) -> StoredFile:
        """
        Check and write a file to the staging area.

        Args:
            original_name: File name sent by the client
            media_type: Declared content type
            stream: Readable binary stream

        Returns:
            Staged file descriptor (name is final)

        Raises:
            UnsupportedMediaError: If the type is not allowed
            FileTooLargeError: If the file exceeds the size limit
            ServiceUnavailableError: If the file cannot be written
        """
        pass

    @abstractmethod
    async def promote(self, stored: StoredFile) -> None:
        """Move a staged file to permanent storage."""
        pass

    @abstractmethod
    async def discard(self, stored: StoredFile) -> None:
        """Remove a file from staging or permanent storage. Missing files are ignored."""
        pass

    @abstractmethod
    def locate(self, name: str) -> Optional[str]:
        """
        Get the filesystem path of a permanently stored file.

        Args:
            name: Stored file name

        Returns:
            Path string, or None if the file does not exist
        """
        pass

    async def store(self, original_name: str, media_type: str, stream: BinaryIO) -> StoredFile:
        """
        Stage and promote a file in one step.

        Returns:
            Stored file descriptor
        """
        stored = await self.stage(original_name, media_type, stream)
        try:
            await self.promote(stored)
        except Exception:
            await self.discard(stored)
            raise
        return stored
