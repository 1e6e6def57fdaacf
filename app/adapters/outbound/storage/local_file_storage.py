"""Local filesystem storage adapter for uploaded documents."""

import itertools
import os
import re
import time
from pathlib import Path
from typing import BinaryIO, Optional

from starlette.concurrency import run_in_threadpool

from app.application.dtos.intake import StoredFile
from app.application.ports.file_storage import FileStorage
from app.domain.errors import FileTooLargeError, ServiceUnavailableError
from app.domain.value_objects.upload_policy import UploadPolicy
from app.infrastructure.logging.logger import logger

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_filename(original_name: str) -> str:
    """
    Reduce a client supplied file name to a safe single path component.

    Args:
        original_name: File name as sent by the client

    Returns:
        Name without directories or unsafe characters
    """
    base = (original_name or "").replace("\\", "/").split("/")[-1]
    cleaned = _UNSAFE_CHARS.sub("_", base).lstrip(".")
    return cleaned or "upload"


class LocalFileStorage(FileStorage):
    """Stores files under an upload directory, staging them in a hidden subdirectory."""

    STAGING_DIRNAME = ".staging"
    CHUNK_SIZE = 64 * 1024

    def __init__(self, upload_dir: str, policy: Optional[UploadPolicy] = None) -> None:
        """
        Initialize local file storage.

        Args:
            upload_dir: Directory of permanently stored files
            policy: Upload gate, defaults to PDF/JPG/PNG up to 10 MiB
        """
        self._root = Path(upload_dir)
        self._staging = self._root / self.STAGING_DIRNAME
        self._policy = policy or UploadPolicy()
        self._staging.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        """Directory of permanently stored files."""
        return self._root

    def _open_unique(self, original_name: str) -> tuple[str, BinaryIO]:
        """
        Claim a stored name by creating its staging file exclusively.

        Returns:
            Stored name and the open staging file
        """
        stamp = int(time.time() * 1000)
        safe_name = sanitize_filename(original_name)
        for attempt in itertools.count():
            name = f"{stamp}-{safe_name}" if attempt == 0 else f"{stamp}-{attempt}-{safe_name}"
            if (self._root / name).exists():
                continue
            try:
                return name, open(self._staging / name, "xb")
            except FileExistsError:
                continue

    def _write_staged(self, original_name: str, stream: BinaryIO) -> tuple[str, int]:
        """Copy a stream into a new staging file, returning its name and size."""
        try:
            name, out = self._open_unique(original_name)
        except OSError as e:
            logger.error(f"Unable to create staging file for {original_name!r}: {str(e)}")
            raise ServiceUnavailableError("Failed to store file", e) from e

        path = self._staging / name
        size = 0
        try:
            with out:
                while True:
                    chunk = stream.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    self._policy.check_size(original_name, size)
                    out.write(chunk)
        except FileTooLargeError:
            path.unlink(missing_ok=True)
            raise
        except OSError as e:
            path.unlink(missing_ok=True)
            logger.error(f"Unable to write staging file {name}: {str(e)}")
            raise ServiceUnavailableError("Failed to store file", e) from e
        return name, size

    async def stage(self, original_name: str, media_type: str, stream: BinaryIO) -> StoredFile:
        """
        Check and write a file to the staging area.

        Args:
            original_name: File name sent by the client
            media_type: Declared content type
            stream: Readable binary stream

        Returns:
            Staged file descriptor
        """
        self._policy.check_type(original_name, media_type)

        # Disk writes run in a worker thread to keep the event loop free
        name, size = await run_in_threadpool(self._write_staged, original_name, stream)

        return StoredFile(
            name=name,
            size=size,
            original_name=original_name,
            media_type=media_type,
        )

    async def promote(self, stored: StoredFile) -> None:
        """Move a staged file into the upload directory."""
        try:
            os.replace(self._staging / stored.name, self._root / stored.name)
        except OSError as e:
            logger.error(f"Unable to promote {stored.name}: {str(e)}")
            raise ServiceUnavailableError("Failed to store file", e) from e

    async def discard(self, stored: StoredFile) -> None:
        """Remove a file from staging and the upload directory."""
        for path in (self._staging / stored.name, self._root / stored.name):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                # Cleanup runs on failure paths; the original error must win
                logger.warning(f"Unable to remove {path}: {str(e)}")

    def locate(self, name: str) -> Optional[str]:
        """
        Get the path of a permanently stored file.

        Args:
            name: Stored file name

        Returns:
            Path string, or None if missing or not a plain file name
        """
        if not name or name != sanitize_filename(name):
            return None
        path = self._root / name
        return str(path) if path.is_file() else None
