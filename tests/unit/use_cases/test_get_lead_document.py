"""Unit tests for the get lead document use case."""

from datetime import datetime, timezone

import pytest

from app.adapters.outbound.lead import InMemoryLeadRepository
from app.adapters.outbound.storage import LocalFileStorage
from app.application.dtos.lead import Lead, LeadDocument
from app.application.use_cases.get_lead_document import GetLeadDocument
from app.domain.errors import NotFoundError, ValidationError


@pytest.fixture
def storage(tmp_path):
    """Create file storage in a temporary directory."""
    return LocalFileStorage(str(tmp_path))


@pytest.fixture
def stored_document(storage):
    """Write one PDF to the upload directory and describe it as a lead document."""
    name = "1700000000000-transcript.pdf"
    (storage.root / name).write_bytes(b"%PDF")
    return LeadDocument(id="doc000001", name=name, size=4, type="transcript")


@pytest.fixture
def lead_repository(stored_document):
    """Create a lead repository with lead 1042 owning the stored document."""
    repository = InMemoryLeadRepository()
    missing = LeadDocument(id="doc000002", name="1700000000000-gone.png", size=1, type="passport")
    repository._storage.append(
        Lead(
            pk="lead-pk",
            id=1042,
            phone="+8801711000000",
            documents=[stored_document, missing],
            created_at=datetime.now(timezone.utc),
        )
    )
    return repository


@pytest.fixture
def use_case(lead_repository, storage):
    """Create the use case."""
    return GetLeadDocument(lead_repository, storage)


@pytest.mark.asyncio
async def test_returns_path_and_media_type(use_case, storage, stored_document):
    """Test resolving a stored document to its file."""
    found = await use_case.execute("1042", "doc000001")

    assert found.document == stored_document
    assert found.path == str(storage.root / stored_document.name)
    assert found.media_type == "application/pdf"


@pytest.mark.asyncio
async def test_non_numeric_student_id(use_case):
    """Test that a non-numeric student id is a validation error."""
    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute("abc", "doc000001")

    assert exc_info.value.message == "Invalid student ID: must be a number"


@pytest.mark.asyncio
async def test_unknown_lead(use_case):
    """Test that an unknown lead is not found."""
    with pytest.raises(NotFoundError) as exc_info:
        await use_case.execute("7", "doc000001")

    assert exc_info.value.message == "Lead not found for studentId: 7"


@pytest.mark.asyncio
async def test_unknown_document(use_case):
    """Test that an unknown document id is not found."""
    with pytest.raises(NotFoundError) as exc_info:
        await use_case.execute("1042", "nope")

    assert exc_info.value.message == "Document not found for documentId: nope"


@pytest.mark.asyncio
async def test_file_missing_on_disk(use_case):
    """Test that a document whose file was removed is not found."""
    with pytest.raises(NotFoundError) as exc_info:
        await use_case.execute("1042", "doc000002")

    assert exc_info.value.message == "File not found on server: 1700000000000-gone.png"
