"""Unit tests for the local file storage adapter."""

import io
import threading
from unittest.mock import patch

import pytest

from app.adapters.outbound.storage import LocalFileStorage
from app.adapters.outbound.storage.local_file_storage import sanitize_filename
from app.domain.errors import (
    FileTooLargeError,
    ServiceUnavailableError,
    UnsupportedMediaError,
)
from app.domain.value_objects.upload_policy import UploadPolicy


@pytest.fixture
def storage(tmp_path):
    """Create file storage in a temporary directory."""
    return LocalFileStorage(str(tmp_path / "uploads"))


def staging_names(storage):
    return sorted(path.name for path in (storage.root / ".staging").iterdir())


def stored_names(storage):
    return sorted(path.name for path in storage.root.iterdir() if path.is_file())


@pytest.mark.parametrize(
    "original,expected",
    [
        ("transcript.pdf", "transcript.pdf"),
        ("../../etc/passwd.pdf", "passwd.pdf"),
        ("C:\\Users\\ana\\my scan.png", "my_scan.png"),
        (".hidden.pdf", "hidden.pdf"),
        ("", "upload"),
    ],
)
def test_sanitize_filename(original, expected):
    """Test that client file names are reduced to one safe path component."""
    assert sanitize_filename(original) == expected


def test_creates_directories(tmp_path):
    """Test that the upload and staging directories are created."""
    storage = LocalFileStorage(str(tmp_path / "a" / "b"))

    assert (tmp_path / "a" / "b" / ".staging").is_dir()
    assert storage.root == tmp_path / "a" / "b"


@pytest.mark.asyncio
async def test_stage_writes_to_staging_only(storage):
    """Test that a staged file is not visible in the upload directory."""
    stored = await storage.stage("transcript.pdf", "application/pdf", io.BytesIO(b"%PDF-1.4"))

    assert stored.size == 8
    assert stored.original_name == "transcript.pdf"
    assert stored.name.endswith("-transcript.pdf")
    assert stored.name.split("-")[0].isdigit()
    assert staging_names(storage) == [stored.name]
    assert stored_names(storage) == []
    assert storage.locate(stored.name) is None


@pytest.mark.asyncio
async def test_promote_moves_file(storage):
    """Test that promotion makes the file locatable."""
    stored = await storage.stage("ielts.png", "image/png", io.BytesIO(b"\x89PNG"))

    await storage.promote(stored)

    assert staging_names(storage) == []
    assert stored_names(storage) == [stored.name]
    assert storage.locate(stored.name) == str(storage.root / stored.name)


@pytest.mark.asyncio
async def test_discard_removes_staged_and_promoted_files(storage):
    """Test that discard cleans up wherever the file is."""
    staged = await storage.stage("a.pdf", "application/pdf", io.BytesIO(b"a"))
    promoted = await storage.store("b.pdf", "application/pdf", io.BytesIO(b"b"))

    await storage.discard(staged)
    await storage.discard(promoted)
    await storage.discard(promoted)

    assert staging_names(storage) == []
    assert stored_names(storage) == []


@pytest.mark.asyncio
async def test_same_name_gets_unique_stored_names(storage):
    """Test that two uploads with one name within a millisecond do not collide."""
    with patch(
        "app.adapters.outbound.storage.local_file_storage.time.time",
        return_value=1729339200.0,
    ):
        first = await storage.store("passport.jpg", "image/jpeg", io.BytesIO(b"1"))
        second = await storage.store("passport.jpg", "image/jpeg", io.BytesIO(b"2"))

    assert first.name == "1729339200000-passport.jpg"
    assert second.name == "1729339200000-1-passport.jpg"
    assert (storage.root / first.name).read_bytes() == b"1"
    assert (storage.root / second.name).read_bytes() == b"2"


class ThreadRecordingStream(io.BytesIO):
    """Stream that remembers which threads read from it."""

    def __init__(self, content: bytes) -> None:
        super().__init__(content)
        self.reader_threads = set()

    def read(self, size=-1):
        self.reader_threads.add(threading.get_ident())
        return super().read(size)


@pytest.mark.asyncio
async def test_stage_copies_off_the_event_loop(storage):
    """Test that the stream is read in a worker thread."""
    stream = ThreadRecordingStream(b"%PDF-1.4")

    stored = await storage.stage("a.pdf", "application/pdf", stream)

    assert stored.size == 8
    assert stream.reader_threads
    assert threading.get_ident() not in stream.reader_threads


@pytest.mark.asyncio
async def test_stage_rejects_disallowed_type_without_writing(storage):
    """Test that a rejected type leaves nothing behind."""
    with pytest.raises(UnsupportedMediaError):
        await storage.stage("tool.exe", "application/octet-stream", io.BytesIO(b"MZ"))

    assert staging_names(storage) == []


@pytest.mark.asyncio
async def test_stage_rejects_oversized_file_and_removes_partial_write(tmp_path):
    """Test that exceeding the limit mid-stream deletes the partial file."""
    storage = LocalFileStorage(str(tmp_path), policy=UploadPolicy(max_bytes=10))
    storage.CHUNK_SIZE = 4

    with pytest.raises(FileTooLargeError):
        await storage.stage("big.pdf", "application/pdf", io.BytesIO(b"x" * 11))

    assert staging_names(storage) == []


@pytest.mark.asyncio
async def test_stage_accepts_file_at_limit(tmp_path):
    """Test that a file of exactly the limit is accepted."""
    storage = LocalFileStorage(str(tmp_path), policy=UploadPolicy(max_bytes=10))

    stored = await storage.stage("ok.pdf", "application/pdf", io.BytesIO(b"x" * 10))

    assert stored.size == 10


@pytest.mark.asyncio
async def test_promote_failure_is_service_unavailable(storage):
    """Test that a filesystem error during promotion is surfaced."""
    stored = await storage.stage("a.pdf", "application/pdf", io.BytesIO(b"a"))

    with patch(
        "app.adapters.outbound.storage.local_file_storage.os.replace",
        side_effect=OSError("disk full"),
    ):
        with pytest.raises(ServiceUnavailableError) as exc_info:
            await storage.promote(stored)

    assert "disk full" in exc_info.value.message


@pytest.mark.asyncio
async def test_store_discards_when_promotion_fails(storage):
    """Test that a failed promotion leaves no staged file."""
    with patch(
        "app.adapters.outbound.storage.local_file_storage.os.replace",
        side_effect=OSError("disk full"),
    ):
        with pytest.raises(ServiceUnavailableError):
            await storage.store("a.pdf", "application/pdf", io.BytesIO(b"a"))

    assert staging_names(storage) == []


def test_locate_rejects_path_components(storage):
    """Test that locate only resolves plain stored names."""
    (storage.root / "secret.pdf").write_bytes(b"x")

    assert storage.locate("secret.pdf") is not None
    assert storage.locate("../secret.pdf") is None
    assert storage.locate(".staging") is None
    assert storage.locate("") is None
